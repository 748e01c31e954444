from __future__ import annotations

import logging

from ..config import InstallConfig
from ..errors import InstallError
from ..lib.command import run_cmd, warn_cmd

logger = logging.getLogger(__name__)


class PrepareRebootStep:
    step_id = "prepare-reboot"
    summary = "Unmount partitions and disable swap before reboot"
    best_effort = True

    def run(self, cfg: InstallConfig) -> None:
        # Both actions are attempted; either failing marks the step as warned.
        unmounted = warn_cmd(["umount", "-R", cfg.mount_root], desc="failed to unmount", dry_run=cfg.dry_run)
        swap_off = warn_cmd(["swapoff", "-a"], desc="failed to disable swap", dry_run=cfg.dry_run)
        if not (unmounted and swap_off):
            raise InstallError(f"unmount {cfg.mount_root} and swapoff -a before rebooting")
        print("System prepared for reboot")


class BootOrderStep:
    step_id = "boot-order"
    summary = "Display EFI boot order"

    def run(self, cfg: InstallConfig) -> None:
        run_cmd(["efibootmgr", "-v"], interactive=True, desc="failed to show boot order", dry_run=cfg.dry_run)
        print("\nTo change the boot order use:")
        print("efibootmgr -o 0002,0001,0003")
