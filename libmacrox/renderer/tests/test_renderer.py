from libmacrox.lexer.lexer import tokenize_text
from libmacrox.lexer.tokens import Token, TokenLocation, TokenType
from libmacrox.renderer import render_tokens
from libmacrox.renderer.renderer import would_tokens_merge


def test_render_collapses_whitespace() -> None:
    assert render_tokens(tokenize_text("a+b  *\t(c , d)")) == "a+b * (c , d)"


def test_render_keeps_line_breaks_without_indentation() -> None:
    assert render_tokens(tokenize_text("  a \n\n    b;\n")) == "a\n\nb;\n"


def test_render_empty() -> None:
    assert render_tokens(()) == ""


def test_render_opaque_tokens() -> None:
    text = 'print("PIE (", \'(\'); // PIE'
    assert render_tokens(tokenize_text(text)) == text


def test_render_unknown_adjacency() -> None:
    assert render_tokens([_token("a"), _token("b", None)]) == "a b"
    assert render_tokens([_token("a"), _token("+", None)]) == "a+"
    assert render_tokens([_token("1"), _token("2", None)]) == "1 2"
    assert render_tokens([_token("1"), _token(".", None)]) == "1 ."
    assert render_tokens([_token(")"), _token("x", None)]) == ")x"


def test_render_recorded_adjacency_is_respected() -> None:
    assert render_tokens([_token("a"), _token("b", False)]) == "ab"
    assert render_tokens([_token("a"), _token("+", True)]) == "a +"


def test_would_tokens_merge() -> None:
    assert would_tokens_merge(_token("a"), _token("b"))
    assert would_tokens_merge(_token("3"), _token("."))
    assert would_tokens_merge(_token("//"), _token("x"))
    assert not would_tokens_merge(_token("("), _token("a"))
    assert not would_tokens_merge(_token("+"), _token("+"))


def _token(text: str, has_leading_whitespace: bool | None = False) -> Token:
    (token,) = tokenize_text(text)
    return Token(
        type=token.type,
        text=token.text,
        location=TokenLocation(0, 0),
        has_leading_whitespace=has_leading_whitespace,
    )
