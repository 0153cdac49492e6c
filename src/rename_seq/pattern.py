"""Rename pattern compiler.

A pattern has the form ``[<prefix>{padded_idx}]<suffix>``. Only the first
``{`` is significant: the text before it becomes the literal prefix of the
single dynamic segment and whatever follows the closing brace is kept
verbatim as the suffix. A pattern without ``{`` is a plain literal name.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Tuple

# Placeholder recognized inside a rename pattern; part of the grammar
PADDED_INDEX_TOKEN = "padded_idx"


class DynamicField(Enum):
    """Kinds of placeholders that can appear inside a pattern."""

    PADDED_INDEX = PADDED_INDEX_TOKEN


class PatternErrorKind(Enum):
    UNEXPECTED_AFTER_OPEN_BRACE = "unexpected content after opening `{`"


class PatternError(ValueError):
    """Raised when a rename pattern cannot be compiled.

    Attributes
    ----------
    pattern
        The offending pattern text.
    offset
        UTF-8 byte offset just past the ``{`` where parsing stopped.
    kind
        What went wrong.
    """

    def __init__(self, pattern: str, offset: int, kind: PatternErrorKind) -> None:
        self.pattern = pattern
        self.offset = offset
        self.kind = kind
        super().__init__(
            f"failed to parse rename pattern beyond index {offset}: expected "
            f"replacement group `{{{PADDED_INDEX_TOKEN}}}`, but content after "
            f"opening `{{` does not match"
        )


@dataclass(frozen=True)
class CompiledPattern:
    """Immutable, structured form of a rename pattern.

    Attributes
    ----------
    segments
        Zero or one ``(literal_prefix, field)`` pairs, rendered in order.
    suffix
        Literal text rendered after all segments.
    source
        The pattern text this was compiled from.
    """

    segments: Tuple[Tuple[str, DynamicField], ...]
    suffix: str
    source: str = ""

    def has_dynamic_content(self) -> bool:
        """Return True if at least one placeholder was recognized."""

        return bool(self.segments)


def compile_pattern(pattern: str) -> CompiledPattern:
    """Compile a raw pattern string.

    Parameters
    ----------
    pattern
        User supplied pattern, e.g. ``photo-{padded_idx}.jpg``.

    Returns
    -------
    CompiledPattern
        The structured template.

    Raises
    ------
    PatternError
        If the text after the first ``{`` is not ``padded_idx}``.
    """

    brace = pattern.find("{")
    if brace == -1:
        return CompiledPattern(segments=(), suffix=pattern, source=pattern)

    prefix = pattern[:brace]
    remaining = pattern[brace + 1 :]
    closing = PADDED_INDEX_TOKEN + "}"
    if not remaining.startswith(closing):
        offset = len(pattern[: brace + 1].encode("utf-8"))
        raise PatternError(
            pattern, offset, PatternErrorKind.UNEXPECTED_AFTER_OPEN_BRACE
        )

    return CompiledPattern(
        segments=((prefix, DynamicField.PADDED_INDEX),),
        suffix=remaining[len(closing) :],
        source=pattern,
    )
