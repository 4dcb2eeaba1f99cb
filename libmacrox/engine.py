from __future__ import annotations

from typing import TYPE_CHECKING

from libmacrox.lexer.io import decode_source_text
from libmacrox.lexer.lexer import tokenize_text
from libmacrox.preprocessor import ExpansionContext, build_default_expander_config, preprocess_tokens
from libmacrox.preprocessor.config import validate_expander_config
from libmacrox.preprocessor.macros import MacrosRegistry, on_redefinition_suppressed
from libmacrox.preprocessor.macros.definitions import tokenize_macro_body
from libmacrox.renderer import render_tokens

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence

    from libmacrox.preprocessor import ExpanderConfig
    from libmacrox.preprocessor.macros import MacroRedefinition


class MacroEngine:
    """Textual macro expansion engine.

    Holds macros registry (defined once, used for many expansions) and configuration,
    every expansion is an separate session with fresh state:

        engine = MacroEngine()
        engine.define_macro("PIE", None, "3.14")
        engine.define_macro("SQR", ["a"], "((a) * (a))")
        engine.expand("PIE * SQR(++radius)")  # 3.14 * ((++radius) * (++radius))
    """

    def __init__(
        self,
        macros: MacrosRegistry | None = None,
        config: ExpanderConfig | None = None,
        *,
        on_redefinition: Callable[[MacroRedefinition], None] = on_redefinition_suppressed,
    ) -> None:
        self.macros = macros if macros is not None else MacrosRegistry()
        self.config = config or build_default_expander_config()
        self.on_redefinition = on_redefinition

    def define_macro(
        self,
        name: str,
        parameters: Sequence[str] | None,
        body: str,
    ) -> MacroRedefinition | None:
        """Define (or redefine) an macro, body is tokenized before storing.

        :returns diagnostic: Redefinition diagnostic if previous definition had different body
        """
        redefinition = self.macros.define(name, parameters, tokenize_macro_body(body))
        if redefinition is not None:
            self.on_redefinition(redefinition)
        return redefinition

    def undefine_macro(self, name: str) -> None:
        self.macros.undefine(name)

    def expand(self, source_text: str | bytes) -> str:
        """Expand all macros within given text and render result back into text.

        :raises PreprocessorError: On unterminated invocation, wrong arguments count, too deep expansion
        :raises LexerEncodingError: On malformed text
        :raises ValueError: On invalid expander configuration (e.g unreachable expansion depth)
        """
        validate_expander_config(self.config)
        tokenizer = tokenize_text(decode_source_text(source_text))

        # Directives within text are local to that text, engine registry must stay read-only
        macros = self.macros.copy() if self.config.process_directives else self.macros
        context = ExpansionContext(
            macros=macros,
            config=self.config,
            on_redefinition=self.on_redefinition,
        )
        return render_tokens(preprocess_tokens(tokenizer, context))
