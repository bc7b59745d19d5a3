"""
Category Catalog - Static lookup data for project classification.

Maps each project type to the keywords that detect it and to the
recommended technology stack, plus the table of supplementary feature
keywords. Built once at import time and never mutated.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Iterator, Optional, Tuple, Union, Any, List


class ProjectType(Enum):
    """
    Project categories.

    Declaration order is the detection order: the first category with a
    matching keyword wins.
    """
    ECOMMERCE = "ecommerce"
    SAAS = "saas"
    PORTFOLIO = "portfolio"
    BLOG = "blog"
    SOCIAL = "social"
    BOOKING = "booking"
    EDUCATION = "education"
    GENERAL = "general"  # catch-all, has no catalog entry

    @classmethod
    def from_string(cls, value: str) -> 'ProjectType':
        """Parse a project type, treating anything unknown as general."""
        try:
            return cls(value.lower().strip())
        except ValueError:
            return cls.GENERAL


@dataclass(frozen=True)
class TechStack:
    """Recommended technologies and baseline features for a category."""
    frontend: Tuple[str, ...]
    backend: Union[Tuple[str, ...], str]  # a string for descriptive backends
    features: Tuple[str, ...]

    def backend_items(self) -> Tuple[str, ...]:
        """Backend as a sequence, wrapping a descriptive string."""
        if isinstance(self.backend, str):
            return (self.backend,)
        return self.backend

    def to_dict(self) -> Dict[str, Any]:
        return {
            "frontend": list(self.frontend),
            "backend": self.backend if isinstance(self.backend, str) else list(self.backend),
            "features": list(self.features),
        }


@dataclass(frozen=True)
class CategoryDefinition:
    """Keywords and recommended stack bound to one project type."""
    project_type: ProjectType
    keywords: Tuple[str, ...]
    stack: TechStack


class CategoryCatalog:
    """
    Ordered, read-only collection of category definitions.

    Iteration follows declaration order, which is the tie-break
    used by project type detection.
    """

    def __init__(self, definitions: Tuple[CategoryDefinition, ...], default_type: ProjectType = ProjectType.SAAS):
        self._definitions = tuple(definitions)
        self._by_type: Dict[ProjectType, CategoryDefinition] = {
            d.project_type: d for d in self._definitions
        }
        if default_type not in self._by_type:
            raise ValueError(f"Default project type has no catalog entry: {default_type.value}")
        self._default_type = default_type

    def __iter__(self) -> Iterator[CategoryDefinition]:
        return iter(self._definitions)

    def __len__(self) -> int:
        return len(self._definitions)

    def __contains__(self, project_type: ProjectType) -> bool:
        return project_type in self._by_type

    @property
    def project_types(self) -> List[ProjectType]:
        return [d.project_type for d in self._definitions]

    def get(self, project_type: ProjectType) -> Optional[CategoryDefinition]:
        return self._by_type.get(project_type)

    def stack_for(self, project_type: ProjectType) -> TechStack:
        """
        Stack recommended for a project type.

        Types without an entry (always the case for general) get the
        default entry's stack.
        """
        definition = self._by_type.get(project_type) or self._by_type[self._default_type]
        return definition.stack


CATEGORY_CATALOG = CategoryCatalog((
    CategoryDefinition(
        project_type=ProjectType.ECOMMERCE,
        keywords=('shop', 'store', 'buy', 'sell', 'product', 'cart', 'payment', 'checkout'),
        stack=TechStack(
            frontend=('Next.js', 'React', 'TypeScript', 'Tailwind CSS'),
            backend=('Node.js', 'Express', 'Stripe', 'PostgreSQL'),
            features=('Product catalog', 'Shopping cart', 'Payment integration', 'Order management'),
        ),
    ),
    CategoryDefinition(
        project_type=ProjectType.SAAS,
        keywords=('subscription', 'dashboard', 'analytics', 'user management', 'admin', 'saas'),
        stack=TechStack(
            frontend=('Next.js', 'React', 'TypeScript', 'Shadcn UI'),
            backend=('Node.js', 'Express', 'JWT auth', 'MongoDB'),
            features=('User authentication', 'Dashboard', 'Subscription billing', 'Analytics'),
        ),
    ),
    CategoryDefinition(
        project_type=ProjectType.PORTFOLIO,
        keywords=('portfolio', 'showcase', 'work', 'projects', 'resume', 'cv'),
        stack=TechStack(
            frontend=('Next.js', 'React', 'Framer Motion', 'Tailwind CSS'),
            backend=('Optional - Static or Headless CMS',),
            features=('Project showcase', 'About section', 'Contact form', 'Responsive design'),
        ),
    ),
    CategoryDefinition(
        project_type=ProjectType.BLOG,
        keywords=('blog', 'article', 'post', 'content', 'cms', 'writer'),
        stack=TechStack(
            frontend=('Next.js', 'React', 'MDX', 'Tailwind CSS'),
            backend=('Headless CMS (Contentful/Sanity)', 'or Markdown files'),
            features=('Article listing', 'Rich text editor', 'Categories/Tags', 'SEO optimization'),
        ),
    ),
    CategoryDefinition(
        project_type=ProjectType.SOCIAL,
        keywords=('social', 'chat', 'message', 'friend', 'profile', 'feed', 'comment'),
        stack=TechStack(
            frontend=('Next.js', 'React', 'Socket.io client', 'Tailwind CSS'),
            backend=('Node.js', 'Express', 'Socket.io', 'MongoDB', 'Redis'),
            features=('Real-time messaging', 'User profiles', 'Feed system', 'Notifications'),
        ),
    ),
    CategoryDefinition(
        project_type=ProjectType.BOOKING,
        keywords=('book', 'reservation', 'appointment', 'schedule', 'calendar'),
        stack=TechStack(
            frontend=('Next.js', 'React', 'Calendar library', 'Tailwind CSS'),
            backend=('Node.js', 'Express', 'PostgreSQL', 'Email service'),
            features=('Calendar view', 'Booking system', 'Email notifications', 'Time slot management'),
        ),
    ),
    CategoryDefinition(
        project_type=ProjectType.EDUCATION,
        keywords=('course', 'learn', 'education', 'tutorial', 'lesson', 'student'),
        stack=TechStack(
            frontend=('Next.js', 'React', 'Video player', 'Tailwind CSS'),
            backend=('Node.js', 'Express', 'PostgreSQL', 'AWS S3'),
            features=('Course catalog', 'Video lessons', 'Progress tracking', 'Quizzes'),
        ),
    ),
))


# Supplementary features detected alongside the category.
# Unlike categories every matching entry is reported, in this order.
FEATURE_KEYWORDS: Tuple[Tuple[str, Tuple[str, ...]], ...] = (
    ('authentication', ('login', 'signup', 'auth', 'user', 'account')),
    ('search', ('search', 'filter', 'find')),
    ('payment', ('payment', 'pay', 'checkout', 'stripe', 'billing')),
    ('admin panel', ('admin', 'dashboard', 'manage')),
    ('responsive design', ('mobile', 'responsive', 'device')),
    ('real-time updates', ('real-time', 'live', 'instant', 'notification')),
    ('analytics', ('analytics', 'track', 'metrics', 'statistics')),
    ('social features', ('share', 'like', 'comment', 'follow')),
)
