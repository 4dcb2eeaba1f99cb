from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from libmacrox.lexer.lexer import tokenize_text
from libmacrox.preprocessor._state import ExpansionContext
from libmacrox.preprocessor.config import ExpanderConfig
from libmacrox.preprocessor.expander import expand_tokens
from libmacrox.preprocessor.macros import MacrosRegistry
from libmacrox.preprocessor.macros.definitions import tokenize_macro_body
from libmacrox.renderer import render_tokens

if TYPE_CHECKING:
    from collections.abc import Callable


@pytest.fixture
def macros() -> MacrosRegistry:
    """Registry with macros from an well-known example of an preprocessor hazard."""
    registry = MacrosRegistry()
    registry.define("PIE", None, tokenize_macro_body("3.14"))
    registry.define("SQR", ["a"], tokenize_macro_body("((a) * (a))"))
    return registry


@pytest.fixture
def expand(macros: MacrosRegistry) -> Callable[..., str]:
    """Expand text with given additional object-like definitions (name to body)."""

    def _expand(text: str, *, max_expansion_depth: int = 200, **bodies: str) -> str:
        for name, body in bodies.items():
            macros.define(name, None, tokenize_macro_body(body))
        context = ExpansionContext(
            macros=macros,
            config=ExpanderConfig(max_expansion_depth=max_expansion_depth),
        )
        expanded = expand_tokens(tuple(tokenize_text(text)), context)
        assert not context.expanding
        return render_tokens(expanded)

    return _expand
