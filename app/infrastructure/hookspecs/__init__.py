"""Plugin hook specifications."""

from infrastructure.hookspecs import translations

__all__ = ["translations"]
