from __future__ import annotations

import logging

from .command import run_cmd

logger = logging.getLogger(__name__)

PROBE_HOST = "google.com"


def is_online(*, dry_run: bool = False) -> bool:
    """Single ping to a well-known host."""

    r = run_cmd(["ping", "-q", "-c", "1", PROBE_HOST], check=False, dry_run=dry_run)
    return r.returncode == 0
