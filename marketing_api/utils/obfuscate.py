"""Reversible password obfuscation for the encrypted users dataset.

This is a fixed letter rotation, not encryption: anyone holding the source can
reverse it. Digits, punctuation and non-ASCII characters pass through.
"""
import string

SHIFT = 7

_LOWER = string.ascii_lowercase
_UPPER = string.ascii_uppercase


def _rotate(text: str, shift: int) -> str:
    out = []
    for ch in text:
        if ch in _LOWER:
            out.append(_LOWER[(_LOWER.index(ch) + shift) % 26])
        elif ch in _UPPER:
            out.append(_UPPER[(_UPPER.index(ch) + shift) % 26])
        else:
            out.append(ch)
    return "".join(out)


def encode(text: str) -> str:
    """Obfuscate a plaintext string."""
    if not text:
        return ""
    return _rotate(text, SHIFT)


def decode(obfuscated_text: str) -> str:
    """Recover the plaintext of an obfuscated string."""
    if not obfuscated_text:
        return ""
    return _rotate(obfuscated_text, -SHIFT)
