"""
Providers - Remote generation chain with local classification.
"""

from .chain import ProviderChain, ChainResult, build_default_chain

__all__ = [
    'ProviderChain',
    'ChainResult',
    'build_default_chain',
]
