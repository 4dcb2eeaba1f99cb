from __future__ import annotations

import dataclasses
import sys
from dataclasses import dataclass

# Deep enough for any sane chain of macros, but far from Python recursion limit
DEFAULT_MAX_EXPANSION_DEPTH = 200

# Each nested expansion holds two interpreter frames (`expand_tokens` and `_expand_invocation`)
FRAMES_PER_EXPANSION_LEVEL = 2

# Frames left for callers of an expander (CLI, test runner, embedding application)
RESERVED_INTERPRETER_FRAMES = 250


@dataclass
class ExpanderConfig:
    """Configuration for macro expansion."""

    # Maximal nesting of macro expansions (macro expanding into macro ...)
    max_expansion_depth: int = DEFAULT_MAX_EXPANSION_DEPTH

    # Treat `#define` / `#undef` lines within expanded text as definitions
    process_directives: bool = False


def build_default_expander_config() -> ExpanderConfig:
    """Construct expander config with default settings."""
    return ExpanderConfig()


def get_max_reachable_expansion_depth() -> int:
    """Get deepest expansion that may be performed before interpreter recursion limit is hit."""
    return (sys.getrecursionlimit() - RESERVED_INTERPRETER_FRAMES) // FRAMES_PER_EXPANSION_LEVEL


def validate_expander_config(config: ExpanderConfig) -> None:
    """Fail if configuration cannot be used for an expansion.

    Too deep expansion limit is an error, as exceeding it would fail with interpreter `RecursionError`
    instead of proper recursion limit error.
    """
    if config.max_expansion_depth < 1:
        msg = f"Maximal expansion depth must be positive, got {config.max_expansion_depth}"
        raise ValueError(msg)

    reachable_depth = get_max_reachable_expansion_depth()
    if config.max_expansion_depth > reachable_depth:
        msg = (
            f"Maximal expansion depth must not exceed {reachable_depth}, got {config.max_expansion_depth}\n"
            "Deeper expansion is bounded by Python recursion limit (`sys.setrecursionlimit`)."
        )
        raise ValueError(msg)


def merge_into_expander_config(
    config: ExpanderConfig,
    from_object: object,
    *,
    prefix: str = "",
) -> ExpanderConfig:
    """Override config fields with attributes of given object (e.g CLI namespace) that are set."""
    for field in dataclasses.fields(ExpanderConfig):
        from_name = prefix + "_" + field.name if prefix else field.name
        if hasattr(from_object, from_name):
            arg_value = getattr(from_object, from_name)
            if arg_value is not None:
                setattr(config, field.name, arg_value)

    validate_expander_config(config)
    return config
