"""Exercises on strings."""


def reverse_string(text: str) -> str:
    """Return *text* with its characters in reverse order."""
    return text[::-1]


def is_palindrome(text: str) -> bool:
    """Tell whether *text* reads the same backwards, case included."""
    return text == text[::-1]