"""Media resolvers."""

from __future__ import annotations

from .http import HttpMediaResolver, convert_image

__all__ = ["HttpMediaResolver", "convert_image"]
