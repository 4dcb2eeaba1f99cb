from __future__ import annotations

from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from libmacrox.preprocessor.config import ExpanderConfig
from libmacrox.preprocessor.macros.diagnostics import on_redefinition_suppressed

if TYPE_CHECKING:
    from collections.abc import Callable, Generator

    from libmacrox.preprocessor.macros import MacroRedefinition, MacrosRegistry


@dataclass(frozen=False)
class ExpansionContext:
    """State for single expansion session which only required for internal usages.

    Registry is shared between sessions, set of macros being expanded is not.
    """

    macros: MacrosRegistry
    config: ExpanderConfig = field(default_factory=ExpanderConfig)

    on_redefinition: Callable[[MacroRedefinition], None] = on_redefinition_suppressed

    # Names of macros which expansion is in progress (whole chain from top-level invocation)
    # These are never expanded again, so macros cannot recurse into itself
    expanding: set[str] = field(default_factory=set)

    def is_expanding(self, name: str) -> bool:
        return name in self.expanding

    @contextmanager
    def expanding_macro(self, name: str) -> Generator[None]:
        assert name not in self.expanding, f"Macro '{name}' is already being expanded"
        self.expanding.add(name)
        try:
            yield
        finally:
            self.expanding.discard(name)
