"""Filesystem reaction for the sequencer.

Logs each planned move and, unless running dry, performs it with
``os.rename``. A failed rename is logged and the batch continues.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Optional

from .sequencer import CONTINUE, Outcome


class RenameReaction:
    """Rename (or pretend to rename) each file handed over by the sequencer.

    Parameters
    ----------
    dry_run
        If True, only log the intended moves.
    logger
        Logger to report to. Defaults to this module's logger.
    """

    def __init__(self, dry_run: bool = True, logger: Optional[logging.Logger] = None) -> None:
        self.dry_run = dry_run
        self.logger = logger or logging.getLogger(__name__)
        self.renamed = 0
        self.failed = 0

    def visit(self, index: int, source: Path, destination: str) -> Outcome:
        level = logging.INFO if self.dry_run else logging.DEBUG
        self.logger.log(level, "[%d] renaming %r to %r", index, str(source), destination)

        if self.dry_run:
            return CONTINUE

        try:
            os.rename(source, destination)
        except OSError as exc:
            self.failed += 1
            self.logger.error(
                "failed to rename file %r to %r: %s", str(source), destination, exc
            )
        else:
            self.renamed += 1
        return CONTINUE
