"""Small text helpers shared by the synthesizer and the provider chain."""

from typing import Iterable, List


def capitalize_first(text: str) -> str:
    """Upper-case the first character and leave the rest untouched."""
    return text[:1].upper() + text[1:]


def unique_ordered(*groups: Iterable[str]) -> List[str]:
    """
    Merge iterables into one list without duplicates.

    First occurrence wins, so earlier groups keep their position.
    """
    seen = set()
    merged = []
    for group in groups:
        for item in group:
            if item not in seen:
                seen.add(item)
                merged.append(item)
    return merged


def build_instruction(idea: str) -> str:
    """Instruction sent to remote providers for a given idea."""
    return f"Improve the following project idea and return a short project brief:\n\n{idea}"
