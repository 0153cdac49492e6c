"""File selection helpers.

Turns an explicit list of paths or a glob into the ordered list of files
the sequencer consumes.
"""

from __future__ import annotations

import fnmatch
import os
from enum import Enum
from pathlib import Path
from typing import Iterable, List, Optional, Tuple, Union

from config import CONFIG


class SortBy(Enum):
    """How paths matching a glob are ordered."""

    DISCOVERED = "discovered"
    LEXICOGRAPHICAL = "lexicographical"


class SelectionError(Exception):
    """Raised when files could not be selected.

    Attributes
    ----------
    errors
        Individual filesystem errors met while walking, if any.
    """

    def __init__(self, message: str, errors: Iterable[OSError] = ()) -> None:
        self.errors = list(errors)
        details = "".join(f"\n  - {e}" for e in self.errors)
        super().__init__(message + details)


def files_from_list(paths: Iterable[Union[str, Path]]) -> List[Path]:
    """Select files explicitly, in the order provided."""

    return [Path(p) for p in paths]


def _glob_error(pattern: str, reason: str) -> SelectionError:
    return SelectionError(f"failed to parse glob {pattern!r}: {reason}")


def _class_end(pattern: str, start: int) -> int:
    """Index just past the ``]`` closing the class opened at ``start``."""

    i = start + 1
    if i < len(pattern) and pattern[i] == "!":
        i += 1
    if i < len(pattern) and pattern[i] == "]":
        i += 1
    while i < len(pattern) and pattern[i] != "]":
        if pattern[i] == "/":
            raise _glob_error(pattern, f"character class at index {start} spans `/`")
        i += 1
    if i >= len(pattern):
        raise _glob_error(pattern, f"unclosed `[` at index {start}")
    return i + 1


def _find_group(pattern: str) -> Optional[Tuple[int, int, List[int]]]:
    """Locate the first ``{...}`` group: its start, end and top-level commas."""

    depth = 0
    start = -1
    commas: List[int] = []
    i = 0
    while i < len(pattern):
        c = pattern[i]
        if c == "[":
            i = _class_end(pattern, i)
            continue
        if c == "{":
            if depth == 0:
                start = i
            depth += 1
        elif c == "}":
            if depth == 0:
                raise _glob_error(pattern, f"unmatched `}}` at index {i}")
            depth -= 1
            if depth == 0:
                return start, i, commas
        elif c == "," and depth == 1:
            commas.append(i)
        i += 1
    if depth:
        raise _glob_error(pattern, f"unclosed `{{` at index {start}")
    return None


def _expand_braces(pattern: str) -> List[str]:
    """Expand ``{a,b}`` alternation into plain globs, e.g. ``*.{jpg,png}``."""

    group = _find_group(pattern)
    if group is None:
        return [pattern]
    start, end, commas = group
    bounds = [start] + commas + [end]
    expanded: List[str] = []
    for lo, hi in zip(bounds, bounds[1:]):
        alternative = pattern[:start] + pattern[lo + 1 : hi] + pattern[end + 1 :]
        expanded.extend(_expand_braces(alternative))
    return expanded


def _compile_glob(pattern: str) -> List[Tuple[str, ...]]:
    if not pattern:
        raise _glob_error(pattern, "pattern is empty")
    compiled = []
    for alternative in _expand_braces(pattern):
        globs = tuple(g for g in alternative.split("/") if g not in ("", "."))
        for g in globs:
            if "**" in g and g != "**":
                raise _glob_error(pattern, f"`**` must be a whole path component, got {g!r}")
        compiled.append(globs)
    return compiled


def _match_parts(parts: Tuple[str, ...], globs: Tuple[str, ...]) -> bool:
    if not globs:
        return not parts
    if globs[0] == "**":
        # zero or more directories
        return any(_match_parts(parts[i:], globs[1:]) for i in range(len(parts) + 1))
    return (
        bool(parts)
        and fnmatch.fnmatchcase(parts[0], globs[0])
        and _match_parts(parts[1:], globs[1:])
    )


def files_from_glob(
    pattern: str,
    sort_by: SortBy = SortBy.LEXICOGRAPHICAL,
    root: Union[str, Path, None] = None,
) -> List[Path]:
    """Select regular files under ``root`` whose relative path matches ``pattern``.

    Parameters
    ----------
    pattern
        Glob matched against POSIX-style paths relative to ``root``,
        e.g. ``scans/*.png`` or ``**/*.jpg``. ``*`` stays within one path
        component; ``**`` spans any number of directories; ``{a,b}``
        selects either alternative, e.g. ``*.{jpg,png}``.
    sort_by
        Keep walk order, or sort the matches lexicographically.
    root
        Directory to walk. Defaults to ``CONFIG.selection.root``.

    Returns
    -------
    list of Path
        Matching files, relative to ``root`` when ``root`` is ``"."``.

    Raises
    ------
    SelectionError
        If the glob is empty or malformed (unclosed ``[`` or ``{``, stray
        ``}``, ``**`` inside a component), or if any directory could not be
        walked. All walk errors are reported together.
    """

    globs = _compile_glob(pattern)

    base = Path(root if root is not None else CONFIG.selection.root)
    walk_errors: List[OSError] = []
    files: List[Path] = []

    for dirpath, dirnames, filenames in os.walk(base, onerror=walk_errors.append):
        rel_dir = Path(dirpath).relative_to(base)
        for name in filenames:
            rel = rel_dir / name
            parts = tuple(rel.as_posix().split("/"))
            if not any(_match_parts(parts, g) for g in globs):
                continue
            path = Path(dirpath) / name
            if path.is_file():
                files.append(path)

    if walk_errors:
        raise SelectionError(
            "encountered one or more file system errors", walk_errors
        )

    if sort_by is SortBy.LEXICOGRAPHICAL:
        files.sort()
    return files
