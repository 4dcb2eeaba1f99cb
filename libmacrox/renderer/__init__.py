"""Renderer that serializes tokens back into text."""

from .renderer import render_tokens

__all__ = ("render_tokens",)
