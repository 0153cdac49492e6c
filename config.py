"""Global configuration for the sequential renaming toolkit.

This module centralizes defaults and user-tunable settings for:
- how a run behaves (dry run vs. real run, warning policy, traversal order)
- how files are selected when a glob is used
- how log records are formatted

All values can be overridden via CLI flags or direct imports.
"""

from __future__ import annotations

from dataclasses import dataclass, field


# Accepted values for the traversal order and glob sort policy
ORDERS = ("sequential", "single-sided-scans")
SORT_POLICIES = ("discovered", "lexicographical")


@dataclass
class Behavior:
    """Run-time toggles.

    Attributes
    ----------
    go
        If True, actually rename files. Otherwise only log planned moves.
    allow_warnings
        Proceed even when the pattern looks unintended (e.g. no placeholder).
    order
        Traversal order used to assign indices. One of ``ORDERS``.
    """

    go: bool = False
    allow_warnings: bool = False
    order: str = "sequential"


@dataclass
class Selection:
    """File selection defaults.

    Attributes
    ----------
    root
        Directory a glob is walked from.
    sort_by
        How glob matches are ordered. One of ``SORT_POLICIES``.
    """

    root: str = "."
    sort_by: str = "lexicographical"


@dataclass
class Logging:
    """Log output settings passed to ``logging.basicConfig``."""

    level: str = "INFO"
    verbose_level: str = "DEBUG"
    format: str = "%(asctime)s - %(levelname)s - %(message)s"
    datefmt: str = "%Y-%m-%d %H:%M:%S"


@dataclass
class ProjectConfig:
    """Top-level configuration container.

    Attributes
    ----------
    behavior
        Execution-time toggles.
    selection
        Glob walking and sorting defaults.
    logging
        Log level and format.
    """

    behavior: Behavior = field(default_factory=Behavior)
    selection: Selection = field(default_factory=Selection)
    logging: Logging = field(default_factory=Logging)


# Default singleton-style config instance used by CLI unless overridden
CONFIG = ProjectConfig()
