"""Conversion between characters and keysym codes.

Keysyms follow the XKB convention: printable Latin-1 characters use their
codepoint as keysym, and any other Unicode character is encoded as
``0x01000000 | codepoint``.
"""

from collections.abc import Sequence

from keygeom.domain import NO_SYMBOL, VOID_SYMBOL, KeysymMatrix

UNICODE_KEYSYM_OFFSET = 0x01000000
_MAX_UNICODE = 0x10FFFF


def _is_latin1_printable(codepoint: int) -> bool:
    return 0x20 <= codepoint <= 0x7E or 0xA0 <= codepoint <= 0xFF


def keysym_from_char(char: str) -> int:
    """Return the keysym that types char.

    Raises:
        ValueError: If char is not exactly one character
    """
    if len(char) != 1:
        raise ValueError(f"Expected a single character, got {char!r}")

    codepoint = ord(char)
    if _is_latin1_printable(codepoint):
        return codepoint
    return UNICODE_KEYSYM_OFFSET | codepoint


def keysym_to_char(code: int) -> str | None:
    """Return the character a keysym types, or None for non-character keysyms."""
    if _is_latin1_printable(code):
        return chr(code)
    if code & 0xFF000000 == UNICODE_KEYSYM_OFFSET:
        codepoint = code & 0x00FFFFFF
        if codepoint <= _MAX_UNICODE:
            return chr(codepoint)
    return None


def keysym_name(code: int) -> str:
    """Readable name for a keysym.

    Examples:
        >>> keysym_name(0x61)
        'U0061'
        >>> keysym_name(0x010003B1)
        'U03B1'
        >>> keysym_name(0)
        'NoSymbol'
    """
    if code == NO_SYMBOL:
        return "NoSymbol"
    if code == VOID_SYMBOL:
        return "VoidSymbol"
    char = keysym_to_char(code)
    if char is not None:
        return f"U{ord(char):04X}"
    return f"0x{code:x}"


def matrix_from_text(levels: Sequence[str]) -> KeysymMatrix:
    """Build a single-group matrix with one character per level.

    Empty strings leave the level unbound.

    Example:
        matrix_from_text(["a", "A"])  # group 0: a unshifted, A shifted
    """
    data = [keysym_from_char(level) if level else NO_SYMBOL for level in levels]
    return KeysymMatrix(data, num_groups=1, num_levels=len(data))
