from __future__ import annotations

from pathlib import Path

from .env import PATHS


def is_efi(efivars: str = PATHS.efivars) -> bool:
    """True when the *currently running* environment booted via EFI."""

    return Path(efivars).exists()
