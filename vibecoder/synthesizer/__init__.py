"""
Synthesizer - Template-driven rendering of project briefs.
"""

from .sections import (
    BaseSectionBuilder,
    BriefContext,
    OverviewSection,
    ProjectTypeSection,
    CoreFeaturesSection,
    TechStackSection,
    UserStoriesSection,
    DesignConsiderationsSection,
    DevelopmentPhasesSection,
    SECTIONS,
)
from .brief_synthesizer import BriefSynthesizer, improve_prompt

__all__ = [
    'BaseSectionBuilder',
    'BriefContext',
    'OverviewSection',
    'ProjectTypeSection',
    'CoreFeaturesSection',
    'TechStackSection',
    'UserStoriesSection',
    'DesignConsiderationsSection',
    'DevelopmentPhasesSection',
    'SECTIONS',
    'BriefSynthesizer',
    'improve_prompt',
]
