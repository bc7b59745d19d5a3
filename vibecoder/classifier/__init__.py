"""
Classifier - Rule-based detection of project type and features.

- ProjectTypeDetector: first matching category in catalog order
- FeatureExtractor: every matching supplementary feature
"""

from typing import List

from .base import BaseDetector
from .project_type_detector import ProjectTypeDetector
from .feature_extractor import FeatureExtractor
from ..catalog import ProjectType
from ..models import DetectionResult

_project_type_detector = ProjectTypeDetector()
_feature_extractor = FeatureExtractor()


def detect_project_type(idea: str) -> ProjectType:
    """Project type of an idea using the built-in catalog."""
    return _project_type_detector.detect(idea)


def extract_features(idea: str) -> List[str]:
    """Supplementary features of an idea using the built-in keyword table."""
    return _feature_extractor.detect(idea)


def classify(idea: str) -> DetectionResult:
    """Project type and features of an idea in one result."""
    return DetectionResult(
        project_type=detect_project_type(idea),
        detected_features=extract_features(idea),
    )


__all__ = [
    'BaseDetector',
    'ProjectTypeDetector',
    'FeatureExtractor',
    'detect_project_type',
    'extract_features',
    'classify',
]
