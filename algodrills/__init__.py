"""Classic algorithms on lists, strings, integers, linked lists and a queue-backed stack."""

__version__ = "0.1.0"
__all__ = ["arrays", "linked_list", "numbers", "searching", "stack", "strings"]