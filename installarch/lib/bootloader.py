from __future__ import annotations

import logging

from .command import run_cmd

logger = logging.getLogger(__name__)


def install_grub_efi(*, efi_directory: str = "/boot/efi", dry_run: bool = False) -> None:
    """Install GRUB for x86_64 EFI targets; runs inside the new system."""

    # Assumes the ESP is mounted at efi_directory.
    run_cmd(
        ["grub-install", "--target=x86_64-efi", f"--efi-directory={efi_directory}"],
        desc="failed to install grub",
        dry_run=dry_run,
    )
    run_cmd(["grub-mkconfig", "-o", "/boot/grub/grub.cfg"], desc="failed to generate grub config", dry_run=dry_run)
    logger.info("GRUB EFI installed")
