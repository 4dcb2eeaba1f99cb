from __future__ import annotations

from typing import TYPE_CHECKING

from libmacrox.lexer.helpers import is_identifier
from libmacrox.lexer.tokens import TokenLocation

from .definitions import parse_raw_macro_signature, tokenize_macro_body
from .diagnostics import MacroRedefinition
from .exceptions import (
    PreprocessorMacroDuplicateParameterError,
    PreprocessorMacroInvalidParameterError,
    PreprocessorMacroNonIdentifierNameError,
)
from .macro import Macro

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence

    from libmacrox.lexer.tokens import Token


class MacrosRegistry(dict[str, Macro]):
    """Top-level mapping of macros (macro table).

    Not synchronized: it may be shared between concurrent expansions
    only when no definitions are made while these are in flight.
    """

    def define(
        self,
        name: str,
        parameters: Sequence[str] | None,
        tokens: Sequence[Token],
        *,
        location: TokenLocation | None = None,
    ) -> MacroRedefinition | None:
        """Register (or overwrite) an macro definition.

        :returns diagnostic: Redefinition diagnostic if overwritten definition had different body
        """
        location = location or TokenLocation(0, 0, source="definition")
        macro = Macro(
            location=location,
            name=name,
            parameters=None if parameters is None else tuple(parameters),
            tokens=tuple(tokens),
        )
        _validate_macro_signature(macro)

        original = self.get(name)
        self.__setitem__(name, macro)

        if original is None or original.sameas(macro):
            return None
        return MacroRedefinition(original=original, redefined=macro)

    def lookup(self, name: str) -> Macro | None:
        return self.get(name)

    def undefine(self, name: str) -> None:
        """Remove an macro, undefining non-existing macro is allowed."""
        self.pop(name, None)

    def copy(self) -> MacrosRegistry:
        return MacrosRegistry(super().copy())


def registry_from_raw_definitions(
    location: TokenLocation,
    definitions: Mapping[str, str],
) -> MacrosRegistry:
    """Construct new macros registry from given 'raw' definitions (text, that need lexing).

    Keys are signatures (`PIE` or `SQR(a)`), values are bodies, both are implied to be single-line.
    Location must not be from an `text` source as in that scenario you must use directives within that text.
    """
    if location.source == "text":
        msg = (
            f"`{registry_from_raw_definitions.__name__}` implies raw definitions, but tried to pass parent location with `text` source, which is consider as an fatal error.\n"
            "Consider using `#define` directives within expanded text instead."
        )
        raise ValueError(msg)

    registry = MacrosRegistry()
    for signature, definition in definitions.items():
        name, parameters = parse_raw_macro_signature(signature, location)
        tokens = tokenize_macro_body(definition, source=location.source)
        registry.define(name, parameters, tokens, location=location)
    return registry


def _validate_macro_signature(macro: Macro) -> None:
    if not is_identifier(macro.name):
        raise PreprocessorMacroNonIdentifierNameError(
            location=macro.location,
            name=macro.name,
        )

    seen: set[str] = set()
    for parameter in macro.parameters or ():
        if not is_identifier(parameter):
            raise PreprocessorMacroInvalidParameterError(
                location=macro.location,
                macro_name=macro.name,
                parameter=parameter,
            )
        if parameter in seen:
            raise PreprocessorMacroDuplicateParameterError(
                location=macro.location,
                macro_name=macro.name,
                parameter=parameter,
            )
        seen.add(parameter)
