from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .macro import Macro


@dataclass(frozen=True)
class MacroRedefinition:
    """Advisory diagnostic about macro that was redefined with different body.

    Redefinition is not an error (last definition wins), but mostly is an mistake.
    """

    original: Macro
    redefined: Macro

    @property
    def name(self) -> str:
        return self.redefined.name

    def __str__(self) -> str:
        return f"""Redefinition of an macro '{self.name}' at {self.redefined.location} with different body.
Original definition found at {self.original.location}, it is now overridden.
If it is desired scenario of overriding, please un-define before redefinition."""


def on_redefinition_suppressed(_: MacroRedefinition) -> None:
    return None
