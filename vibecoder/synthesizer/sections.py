"""
Section Builders - One builder per section of the project brief.

Each builder renders the lines of its section from a BriefContext.
The registry order is the document order.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import List, Tuple

from ..catalog import ProjectType, TechStack
from ..utils.text import capitalize_first


@dataclass
class BriefContext:
    """Everything a section may need to render itself."""
    idea: str
    project_type: ProjectType
    detected_features: List[str]
    stack: TechStack
    all_features: List[str] = field(default_factory=list)


class BaseSectionBuilder(ABC):
    """Abstract base class for section builders."""

    @property
    @abstractmethod
    def heading(self) -> str:
        """Section heading without the markdown marker."""
        pass

    @abstractmethod
    def build_body(self, context: BriefContext) -> List[str]:
        """Lines of the section body."""
        pass

    def build(self, context: BriefContext) -> List[str]:
        """Heading plus body."""
        return [f"## {self.heading}", *self.build_body(context)]


class OverviewSection(BaseSectionBuilder):
    @property
    def heading(self) -> str:
        return "Project Overview"

    def build_body(self, context: BriefContext) -> List[str]:
        return [capitalize_first(context.idea)]


class ProjectTypeSection(BaseSectionBuilder):
    @property
    def heading(self) -> str:
        return "Project Type"

    def build_body(self, context: BriefContext) -> List[str]:
        return [f"{capitalize_first(context.project_type.value)} application"]


class CoreFeaturesSection(BaseSectionBuilder):
    @property
    def heading(self) -> str:
        return "Core Features"

    def build_body(self, context: BriefContext) -> List[str]:
        return [f"- {feature}" for feature in context.all_features]


class TechStackSection(BaseSectionBuilder):
    """Frontend and backend lists, each under its own bold label."""

    @property
    def heading(self) -> str:
        return "Recommended Tech Stack"

    def build_body(self, context: BriefContext) -> List[str]:
        lines = ["", "**Frontend:**"]
        lines.extend(f"- {tech}" for tech in context.stack.frontend)
        lines.extend(["", "**Backend:**"])
        lines.extend(f"- {tech}" for tech in context.stack.backend_items())
        return lines


class UserStoriesSection(BaseSectionBuilder):
    """Two generic stories plus conditional ones for auth and shops."""

    BASE_STORIES = (
        "As a user, I want to easily navigate the website so that I can find what I need quickly",
        "As a user, I want the site to be responsive so that I can use it on any device",
    )
    AUTH_STORY = "As a user, I want to create an account so that I can access personalized features"
    ECOMMERCE_STORY = (
        "As a customer, I want to browse products and add them to cart so that I can purchase multiple items"
    )

    @property
    def heading(self) -> str:
        return "User Stories"

    def build_body(self, context: BriefContext) -> List[str]:
        stories = list(self.BASE_STORIES)
        if "authentication" in context.detected_features:
            stories.append(self.AUTH_STORY)
        if context.project_type is ProjectType.ECOMMERCE:
            stories.append(self.ECOMMERCE_STORY)
        return [f"- {story}" for story in stories]


class DesignConsiderationsSection(BaseSectionBuilder):
    CONSIDERATIONS = (
        "Modern, clean UI with intuitive navigation",
        "Fast loading times and optimized performance",
        "Accessible design following WCAG guidelines",
        "SEO-friendly structure for better discoverability",
        "Mobile-first responsive design",
    )

    @property
    def heading(self) -> str:
        return "Design Considerations"

    def build_body(self, context: BriefContext) -> List[str]:
        return [f"- {item}" for item in self.CONSIDERATIONS]


class DevelopmentPhasesSection(BaseSectionBuilder):
    PHASES: Tuple[Tuple[str, str], ...] = (
        ("Planning & Design", "Wireframes, user flows, design system"),
        ("Frontend Development", "UI components, pages, routing"),
        ("Backend Development", "API, database, authentication"),
        ("Integration", "Connect frontend with backend"),
        ("Testing & Deployment", "QA, performance testing, launch"),
    )

    @property
    def heading(self) -> str:
        return "Development Phases"

    def build_body(self, context: BriefContext) -> List[str]:
        return [
            f"{number}. **{name}** - {detail}"
            for number, (name, detail) in enumerate(self.PHASES, start=1)
        ]


# Section registry, in document order
SECTIONS: Tuple[BaseSectionBuilder, ...] = (
    OverviewSection(),
    ProjectTypeSection(),
    CoreFeaturesSection(),
    TechStackSection(),
    UserStoriesSection(),
    DesignConsiderationsSection(),
    DevelopmentPhasesSection(),
)
