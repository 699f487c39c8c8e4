"""
Vanilla application scaffolding (questions, token substitution, file copy).
"""

from .assets import ScaffoldAssets
from .cleanup import CleanupReport, graceful_cleanup
from .collector import (
    AnswerMap,
    AnswerSource,
    CollectionError,
    InteractiveAnswerSource,
    MappingAnswerSource,
    collect_answers,
)
from .initializer import initialize_app
from .materializer import ScaffoldReport, materialize
from .prompts import PromptField, default_fields
from .substitution import TokenSubstitutor, substitute

__all__ = [
    "ScaffoldAssets",
    "CleanupReport",
    "graceful_cleanup",
    "AnswerMap",
    "AnswerSource",
    "CollectionError",
    "InteractiveAnswerSource",
    "MappingAnswerSource",
    "collect_answers",
    "initialize_app",
    "ScaffoldReport",
    "materialize",
    "PromptField",
    "default_fields",
    "TokenSubstitutor",
    "substitute",
]
