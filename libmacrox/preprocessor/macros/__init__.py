"""Macros definitions and registry (macro table)."""

from .diagnostics import MacroRedefinition, on_redefinition_suppressed
from .macro import Macro
from .registry import MacrosRegistry, registry_from_raw_definitions

__all__ = (
    "Macro",
    "MacroRedefinition",
    "MacrosRegistry",
    "on_redefinition_suppressed",
    "registry_from_raw_definitions",
)
