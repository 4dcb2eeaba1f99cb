"""Preprocessor that expands macros within token stream."""

from ._state import ExpansionContext
from .config import ExpanderConfig, build_default_expander_config
from .expander import expand_tokens, substitute_invocation
from .invocation import Invocation, scan_macro_invocation
from .preprocessor import preprocess_tokens

__all__ = (
    "ExpanderConfig",
    "ExpansionContext",
    "Invocation",
    "build_default_expander_config",
    "expand_tokens",
    "preprocess_tokens",
    "scan_macro_invocation",
    "substitute_invocation",
)
