"""
Feature Extractor - Detect supplementary features mentioned in an idea.
"""

from typing import List, Optional, Sequence, Tuple

from .base import BaseDetector
from ..catalog import FEATURE_KEYWORDS
from ..utils.logger import get_logger

logger = get_logger(__name__)


class FeatureExtractor(BaseDetector):
    """
    Full-scan feature detection.

    Every feature whose keywords occur in the idea is reported, in
    table order. A feature appears at most once.
    """

    def __init__(self, feature_keywords: Optional[Sequence[Tuple[str, Sequence[str]]]] = None):
        self.feature_keywords = tuple(feature_keywords or FEATURE_KEYWORDS)

    @property
    def component_name(self) -> str:
        return "features"

    def detect(self, idea: str) -> List[str]:
        text = self._normalize(idea)

        features = [
            feature
            for feature, keywords in self.feature_keywords
            if self._matches_any(text, keywords)
        ]

        logger.debug(f"Detected {len(features)} features: {features}")
        return features
