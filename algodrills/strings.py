"""Palindrome checks on text that ignore case and punctuation."""


def normalize(text: str) -> str:
    """Keep only ASCII letters and digits of ``text``, lower-cased."""
    return "".join(ch.lower() for ch in text if ch.isascii() and ch.isalnum())


def is_palindrome(text: str) -> bool:
    """Tell whether ``text`` reads the same both ways once normalized."""
    cleaned = normalize(text)
    return cleaned == cleaned[::-1]