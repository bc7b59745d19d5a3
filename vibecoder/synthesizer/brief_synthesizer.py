"""
Brief Synthesizer - Render the local project brief for an idea.

Combines the classifier's output with the catalog stack and renders
every registered section into one Markdown document.
"""

from typing import Optional, Sequence

from .sections import SECTIONS, BaseSectionBuilder, BriefContext
from ..catalog import CATEGORY_CATALOG, CategoryCatalog
from ..classifier import ProjectTypeDetector, FeatureExtractor
from ..models import Brief
from ..utils.logger import get_logger
from ..utils.text import unique_ordered

logger = get_logger(__name__)

TITLE = "# Website Project Brief"


class BriefSynthesizer:
    """
    Deterministic, side-effect free brief generator.

    The same idea always yields the same brief. Instances hold only
    read-only collaborators and can be shared between requests.
    """

    def __init__(
        self,
        catalog: Optional[CategoryCatalog] = None,
        sections: Optional[Sequence[BaseSectionBuilder]] = None,
    ):
        self.catalog = catalog or CATEGORY_CATALOG
        self.sections = tuple(sections or SECTIONS)
        self._type_detector = ProjectTypeDetector(self.catalog)
        self._feature_extractor = FeatureExtractor()

    def build_context(self, idea: str) -> BriefContext:
        """Classify the idea and resolve its stack and merged feature list."""
        project_type = self._type_detector.detect(idea)
        detected_features = self._feature_extractor.detect(idea)
        stack = self.catalog.stack_for(project_type)

        return BriefContext(
            idea=idea,
            project_type=project_type,
            detected_features=detected_features,
            stack=stack,
            all_features=unique_ordered(stack.features, detected_features),
        )

    def render(self, context: BriefContext) -> str:
        """Render the Markdown document for a context."""
        lines = [TITLE, ""]
        for index, section in enumerate(self.sections):
            lines.extend(section.build(context))
            if index < len(self.sections) - 1:
                lines.append("")
        return "\n".join(lines) + "\n"

    def synthesize(self, idea: str) -> Brief:
        """
        Build the complete local brief for an idea.

        Args:
            idea: Idea text, already validated and trimmed

        Returns:
            Brief without a provider
        """
        context = self.build_context(idea)
        logger.info(
            f"Synthesized brief: type={context.project_type.value}, "
            f"features={len(context.all_features)}"
        )

        return Brief(
            original=idea,
            improved=self.render(context),
            project_type=context.project_type,
            detected_features=context.detected_features,
            suggested_stack=context.stack,
        )


_default_synthesizer = BriefSynthesizer()


def improve_prompt(idea: str) -> Brief:
    """Local brief for an idea using the built-in catalog."""
    return _default_synthesizer.synthesize(idea)
