from __future__ import annotations

import logging
from typing import Sequence

from .command import run_cmd

logger = logging.getLogger(__name__)


def chroot_cmd(target_root: str, argv: Sequence[str] = (), *, desc: str | None = None, dry_run: bool = False) -> None:
    """Run a command (or a shell, when argv is empty) inside target root.

    arch-chroot sets up the /dev, /proc and /sys binds itself. The child is
    attached to the terminal.
    """

    run_cmd(["arch-chroot", target_root, *argv], interactive=True, desc=desc, dry_run=dry_run)
