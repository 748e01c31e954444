from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Sequence

from ..errors import InstallError
from .command import run_cmd

logger = logging.getLogger(__name__)

EXTERNAL_PACKAGES = "external_packages.txt"
INTERNAL_PACKAGES = "internal_packages.txt"


def read_package_list(resource_dir: str, name: str) -> List[str]:
    """Whitespace separated package names; '#' starts a comment."""

    p = Path(resource_dir) / name
    try:
        text = p.read_text(encoding="utf-8")
    except OSError as e:
        raise InstallError(f"failed to read {name}: {e}") from e

    packages: List[str] = []
    for line in text.splitlines():
        packages.extend(line.split("#", 1)[0].split())
    if not packages:
        raise InstallError(f"no packages found in {name}")
    return packages


def pacman_sync(*, dry_run: bool = False) -> None:
    run_cmd(["pacman", "-Syy"], interactive=True, desc="failed to sync package databases", dry_run=dry_run)


def pacman_install(packages: Sequence[str], *, sudo: bool = False, refresh: bool = False, dry_run: bool = False) -> None:
    if not packages:
        return
    argv = ["sudo"] if sudo else []
    argv += ["pacman", "-Sy" if refresh else "-S", "--needed", *packages]
    run_cmd(argv, interactive=True, desc="failed to install packages", dry_run=dry_run)


def pacstrap(target_root: str, packages: Sequence[str], *, dry_run: bool = False) -> None:
    run_cmd(["pacstrap", target_root, *packages], interactive=True, desc="failed to run pacstrap", dry_run=dry_run)
