import pytest

from libmacrox.exceptions import ErrorKind
from libmacrox.lexer.tokens import TokenLocation
from libmacrox.preprocessor.macros import MacroRedefinition, MacrosRegistry, registry_from_raw_definitions
from libmacrox.preprocessor.macros.definitions import parse_raw_macro_signature, tokenize_macro_body
from libmacrox.preprocessor.macros.exceptions import (
    PreprocessorMacroDuplicateParameterError,
    PreprocessorMacroInvalidParameterError,
    PreprocessorMacroNonIdentifierNameError,
    PreprocessorNoMacroNameError,
)


def test_define_object_like_macro() -> None:
    registry = MacrosRegistry()
    assert registry.define("PIE", None, tokenize_macro_body("3.14")) is None

    macro = registry.lookup("PIE")
    assert macro is not None
    assert not macro.is_function_like
    assert [t.text for t in macro.tokens] == ["3.14"]


def test_define_function_like_macro() -> None:
    registry = MacrosRegistry()
    registry.define("SQR", ["a"], tokenize_macro_body("((a) * (a))"))

    macro = registry.lookup("SQR")
    assert macro is not None
    assert macro.is_function_like
    assert macro.parameters == ("a",)
    assert "".join(t.text for t in macro.tokens) == "((a)*(a))"


def test_define_function_like_macro_without_parameters() -> None:
    registry = MacrosRegistry()
    registry.define("F", [], tokenize_macro_body("1"))
    macro = registry.lookup("F")
    assert macro is not None
    assert macro.is_function_like


def test_lookup_undefined_macro() -> None:
    assert MacrosRegistry().lookup("PIE") is None


def test_redefinition_with_same_body_is_silent() -> None:
    registry = MacrosRegistry()
    registry.define("PIE", None, tokenize_macro_body("3.14"))
    assert registry.define("PIE", None, tokenize_macro_body("3.14")) is None


def test_redefinition_with_different_body_is_reported() -> None:
    registry = MacrosRegistry()
    registry.define("PIE", None, tokenize_macro_body("3.14"))
    redefinition = registry.define("PIE", None, tokenize_macro_body("3.14159"))

    assert isinstance(redefinition, MacroRedefinition)
    assert redefinition.name == "PIE"
    assert [t.text for t in redefinition.original.tokens] == ["3.14"]
    # Last definition wins
    macro = registry.lookup("PIE")
    assert macro is not None
    assert [t.text for t in macro.tokens] == ["3.14159"]
    assert "PIE" in str(redefinition)


def test_redefinition_with_different_spacing_is_reported() -> None:
    registry = MacrosRegistry()
    registry.define("NEG", None, tokenize_macro_body("- 1"))
    assert registry.define("NEG", None, tokenize_macro_body("-1")) is not None


def test_redefinition_with_different_parameters_is_reported() -> None:
    registry = MacrosRegistry()
    registry.define("F", ["a"], tokenize_macro_body("a"))
    assert registry.define("F", ["b"], tokenize_macro_body("a")) is not None
    assert registry.define("F", None, tokenize_macro_body("a")) is not None


def test_undefine() -> None:
    registry = MacrosRegistry()
    registry.define("PIE", None, tokenize_macro_body("3.14"))
    registry.undefine("PIE")
    assert registry.lookup("PIE") is None


def test_undefine_undefined_macro() -> None:
    registry = MacrosRegistry()
    registry.undefine("PIE")
    assert not registry


def test_define_duplicate_parameters() -> None:
    with pytest.raises(PreprocessorMacroDuplicateParameterError) as e:
        MacrosRegistry().define("F", ["a", "a"], ())
    assert e.value.kind == ErrorKind.INVALID_DEFINITION
    assert e.value.macro_name == "F"


def test_define_non_identifier_name() -> None:
    with pytest.raises(PreprocessorMacroNonIdentifierNameError):
        MacrosRegistry().define("1abc", None, ())
    with pytest.raises(PreprocessorMacroNonIdentifierNameError):
        MacrosRegistry().define("", None, ())


def test_define_non_identifier_parameter() -> None:
    with pytest.raises(PreprocessorMacroInvalidParameterError):
        MacrosRegistry().define("F", ["a b"], ())


def test_body_excludes_comments_and_line_breaks() -> None:
    assert [t.text for t in tokenize_macro_body("3.14 // pie\n")] == ["3.14"]


def test_registry_copy_is_independent() -> None:
    registry = MacrosRegistry()
    registry.define("PIE", None, tokenize_macro_body("3.14"))
    copy = registry.copy()
    copy.undefine("PIE")
    assert isinstance(copy, MacrosRegistry)
    assert registry.lookup("PIE") is not None


def test_registry_from_raw_definitions() -> None:
    registry = registry_from_raw_definitions(
        location=TokenLocation.cli(),
        definitions={"PIE": "3.14", "SQR(a)": "((a) * (a))", "ADD(a, b)": "a + b"},
    )
    assert set(registry) == {"PIE", "SQR", "ADD"}

    sqr = registry.lookup("SQR")
    add = registry.lookup("ADD")
    assert sqr is not None
    assert add is not None
    assert sqr.parameters == ("a",)
    assert add.parameters == ("a", "b")
    assert sqr.location.source == "cli"


def test_registry_from_raw_definitions_with_text_location() -> None:
    with pytest.raises(ValueError, match="raw definitions"):
        registry_from_raw_definitions(
            location=TokenLocation(0, 0, source="text"),
            definitions={"PIE": "3.14"},
        )


def test_parse_raw_macro_signature() -> None:
    location = TokenLocation.cli()
    assert parse_raw_macro_signature("PIE", location) == ("PIE", None)
    assert parse_raw_macro_signature("F()", location) == ("F", ())
    assert parse_raw_macro_signature("ADD(a, b)", location) == ("ADD", ("a", "b"))


def test_parse_malformed_raw_macro_signature() -> None:
    location = TokenLocation.cli()
    with pytest.raises(PreprocessorNoMacroNameError):
        parse_raw_macro_signature("", location)
    with pytest.raises(PreprocessorMacroNonIdentifierNameError):
        parse_raw_macro_signature("1", location)
    with pytest.raises(PreprocessorMacroInvalidParameterError):
        parse_raw_macro_signature("F(a", location)
    with pytest.raises(PreprocessorMacroInvalidParameterError):
        parse_raw_macro_signature("F(1)", location)
    with pytest.raises(PreprocessorMacroInvalidParameterError):
        parse_raw_macro_signature("F(a,)", location)
    with pytest.raises(PreprocessorMacroNonIdentifierNameError):
        parse_raw_macro_signature("F(a) b", location)
