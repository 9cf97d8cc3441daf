"""
Terminal output → display-safe text.

Escape stripping is an ordered sequence of ``str -> str`` transforms;
newline normalisation always runs last.
"""
import re
from typing import Callable, Sequence, Tuple

TextTransform = Callable[[str], str]

# Regex: CSI = ESC [ <parameter bytes 0x30-0x3F>* <intermediate bytes 0x20-0x2F>* <final byte 0x40-0x7E>
_ANSI_CSI_RE = re.compile(r"\x1b\[[0-?]*[ -/]*[@-~]")
_NEWLINE_RE = re.compile(r"\r\n?")


def strip_ansi_sequences(text: str) -> str:
    """Remove ANSI CSI sequences (colours, cursor movement).

    Other ``ESC`` sequences are left untouched.
    """
    return _ANSI_CSI_RE.sub("", text)


def remove_backspace(text: str) -> str:
    """Drop ``\\b`` characters without overwriting the preceding one."""
    return text.replace("\b", "")


def convert_newline(text: str) -> str:
    """Normalise ``\\r\\n`` and lone ``\\r`` to ``\\n``."""
    return _NEWLINE_RE.sub("\n", text)


# Applied in this order: stripping CSI first keeps a backspace next to an
# escape from being read as part of it.
ESCAPE_TRANSFORMS: Tuple[TextTransform, ...] = (
    strip_ansi_sequences,
    remove_backspace,
)


def apply_transforms(text: str, transforms: Sequence[TextTransform]) -> str:
    for transform in transforms:
        text = transform(text)
    return text


def sanitize(text: str, remove_esc_sequences: bool) -> str:
    """Make terminal output safe to show in a comment.

    With ``remove_esc_sequences`` the ``ESCAPE_TRANSFORMS`` run first;
    line endings are normalised either way.
    """
    if remove_esc_sequences:
        text = apply_transforms(text, ESCAPE_TRANSFORMS)
    return convert_newline(text)
