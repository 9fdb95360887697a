"""Shared schemas for mdconf."""

from mdconf.schemas.section import Section

__all__ = ["Section"]
