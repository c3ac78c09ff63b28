"""lessonlint - Structure validation for bilingual Markdown lesson modules.

lessonlint walks a learning module, pairs default-language and
alternate-language READMEs, and checks naming, parallel heading structure,
required sections, lesson navigation and Markdown formatting.
"""

__version__ = "0.1.0"
__author__ = "lessonlint contributors"
__description__ = "Structure validation for bilingual Markdown lesson modules"

from lessonlint.config import LessonLintConfig

__all__ = [
    "__version__",
    "__author__",
    "__description__",
    "LessonLintConfig",
]
