"""
Base Detector - Abstract base class for keyword detectors.

Every detector works on the lower-cased idea and answers with the
entries whose keywords occur in it as plain substrings.
"""

from abc import ABC, abstractmethod
from typing import Any, Iterable

from ..utils.logger import get_logger

logger = get_logger(__name__)


class BaseDetector(ABC):
    """
    Abstract base class for idea detectors.

    Subclasses decide what to scan (categories, features) and how to
    combine matches (first match or full scan).
    """

    @property
    @abstractmethod
    def component_name(self) -> str:
        """Name of the result this detector produces."""
        pass

    @abstractmethod
    def detect(self, idea: str) -> Any:
        """
        Detect component(s) in an idea.

        Args:
            idea: Raw idea text, any case

        Returns:
            Detected component(s) - type depends on implementation
        """
        pass

    @staticmethod
    def _normalize(idea: str) -> str:
        return idea.lower()

    @staticmethod
    def _matches_any(text: str, keywords: Iterable[str]) -> bool:
        """True if any keyword is a substring of the already lower-cased text."""
        return any(keyword in text for keyword in keywords)
