"""Drive a sequence of files through a rename pattern.

The sequencer owns the running index and the padding width. What happens
to each ``(index, source, destination)`` task is up to the caller's
reaction, which also decides whether the batch goes on.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Iterable, Optional, Protocol, Union

from .formatter import RenderContext, render
from .order import SizeHint, size_hint
from .pattern import CompiledPattern

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


class _Continue:
    _instance: Optional["_Continue"] = None

    def __new__(cls) -> "_Continue":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "CONTINUE"


CONTINUE = _Continue()


@dataclass(frozen=True)
class Stop:
    """Returned by a reaction to halt the batch with ``error``."""

    error: Any


Outcome = Union[_Continue, Stop]


class Reaction(Protocol):
    """Per-item handler invoked by :func:`run`."""

    def visit(self, index: int, source: Path, destination: str) -> Outcome:
        ...


class SequenceAborted(Exception):
    """Raised by :func:`run` when a reaction returns :class:`Stop`.

    Attributes
    ----------
    error
        The value the reaction stopped with.
    index
        Index of the item whose reaction stopped the run.
    """

    def __init__(self, error: Any, index: int) -> None:
        self.error = error
        self.index = index
        super().__init__(f"stopped at item {index}: {error}")


def padding_width(hint: SizeHint) -> int:
    """Number of digits needed for the largest hinted count.

    The upper bound is used when known, else the lower bound. A count of 0
    still gets one digit.
    """

    n = hint.upper if hint.upper is not None else hint.lower
    if n <= 0:
        return 1
    return len(str(n))


def run(
    files: Iterable[PathLike],
    pattern: CompiledPattern,
    reaction: Reaction,
) -> int:
    """Assign each file an index and destination and hand it to ``reaction``.

    Parameters
    ----------
    files
        Source paths, already in traversal order. Its size hint is read
        before iteration to fix the padding width.
    pattern
        Compiled rename pattern.
    reaction
        Receives ``(index, source, destination)`` for every item, with
        ``destination`` being the rendered name exactly as written.

    Returns
    -------
    int
        Number of items visited.

    Raises
    ------
    SequenceAborted
        If the reaction returned :class:`Stop`. No further item is rendered.
    """

    hint = size_hint(files)
    width = padding_width(hint)
    logger.debug("size hint %s, padding indices to %d digit(s)", tuple(hint), width)

    visited = 0
    for index, source in enumerate(files):
        # Rendered text is passed through unnormalized, e.g. a trailing `/` is kept
        destination = render(pattern, RenderContext(index=index, padding_width=width))
        outcome = reaction.visit(index, Path(source), destination)
        visited += 1
        if isinstance(outcome, Stop):
            if isinstance(outcome.error, BaseException):
                raise SequenceAborted(outcome.error, index) from outcome.error
            raise SequenceAborted(outcome.error, index)
        if outcome is not CONTINUE:
            raise TypeError(
                f"reaction must return CONTINUE or Stop, got {outcome!r}"
            )

    if visited and len(str(visited - 1)) > width:
        # Width is fixed up front; later indices are written in full.
        logger.debug(
            "visited %d items but padded for %d digit(s) from hint %s",
            visited,
            width,
            tuple(hint),
        )
    return visited
