"""Practice problems: strings, number puzzles, linked lists, tries and text patterns."""

__version__ = "0.1.0"

__all__ = [
    "accenture",
    "basic_maths",
    "daily",
    "linked_list",
    "patterns",
    "strings",
    "techmahindra",
    "trie",
]