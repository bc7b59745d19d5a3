"""
Vibe Coder - Turn short project ideas into structured project briefs.

Main modules:
- catalog: Project categories, keywords and recommended stacks
- classifier: Rule-based project type and feature detection
- synthesizer: Template-driven brief rendering
- llm: Remote provider clients
- providers: Provider chain with fallthrough
- api: Flask HTTP API
- cli: Command-line interface
"""

from .catalog import ProjectType, TechStack, CATEGORY_CATALOG
from .classifier import detect_project_type, extract_features, classify
from .models import Brief, DetectionResult, QuotaExceeded
from .synthesizer import improve_prompt

__version__ = "1.0.0"

__all__ = [
    'ProjectType',
    'TechStack',
    'CATEGORY_CATALOG',
    'detect_project_type',
    'extract_features',
    'classify',
    'Brief',
    'DetectionResult',
    'QuotaExceeded',
    'improve_prompt',
    '__version__',
]
