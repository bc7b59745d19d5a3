"""
Project Type Detector - Map an idea to a single project category.
"""

from typing import Optional

from .base import BaseDetector
from ..catalog import CATEGORY_CATALOG, CategoryCatalog, ProjectType
from ..utils.logger import get_logger

logger = get_logger(__name__)


class ProjectTypeDetector(BaseDetector):
    """
    First-match category detection.

    Categories are checked in catalog order and the first one with a
    keyword in the idea wins, even if a later category matches more
    keywords. Ideas matching nothing are general.
    """

    def __init__(self, catalog: Optional[CategoryCatalog] = None):
        self.catalog = catalog or CATEGORY_CATALOG

    @property
    def component_name(self) -> str:
        return "project_type"

    def detect(self, idea: str) -> ProjectType:
        text = self._normalize(idea)

        for definition in self.catalog:
            if self._matches_any(text, definition.keywords):
                logger.debug(f"Detected project type: {definition.project_type.value}")
                return definition.project_type

        logger.debug("No category keyword matched, using general")
        return ProjectType.GENERAL
