"""Mahjong tile set construction and a coloured terminal view of the table."""

__version__ = "0.1.0"
__all__ = ["board", "pai", "tablemap"]