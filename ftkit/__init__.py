"""Character, memory, string, number, linked-list, printf-style formatting and line-reading helpers."""

__version__ = "0.1.0"
__all__ = ["chars", "memory", "strings", "text", "numbers", "output", "lists", "printf", "reader"]