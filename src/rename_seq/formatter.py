"""Rendering of compiled patterns into destination names."""

from __future__ import annotations

from dataclasses import dataclass

from .pattern import CompiledPattern, DynamicField


@dataclass(frozen=True)
class RenderContext:
    """Per-item values substituted into a pattern.

    Attributes
    ----------
    index
        Zero-based running index assigned by the sequencer.
    padding_width
        Number of digits the index is zero-padded to. Constant for a run.
    """

    index: int
    padding_width: int

    def __post_init__(self) -> None:
        if self.padding_width < 1:
            raise ValueError(f"padding width must be at least 1, got {self.padding_width}")
        if self.index < 0:
            raise ValueError(f"index must be non-negative, got {self.index}")


def format_index(index: int, width: int) -> str:
    """Zero-pad ``index`` to ``width`` digits. Wider numbers are kept whole."""

    return str(index).zfill(width)


def render(pattern: CompiledPattern, ctx: RenderContext) -> str:
    """Build the destination name for one item.

    Parameters
    ----------
    pattern
        Compiled rename pattern.
    ctx
        Index and padding width for this item.

    Returns
    -------
    str
        Prefix, padded index and suffix concatenated.
    """

    parts = []
    for prefix, dyn_field in pattern.segments:
        parts.append(prefix)
        if dyn_field is DynamicField.PADDED_INDEX:
            parts.append(format_index(ctx.index, ctx.padding_width))
    parts.append(pattern.suffix)
    return "".join(parts)
