from .encoding import LexerEncodingError

__all__ = ("LexerEncodingError",)
