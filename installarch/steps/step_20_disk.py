from __future__ import annotations

import logging
from pathlib import Path

from ..config import InstallConfig
from ..lib.command import run_cmd, warn_cmd
from ..lib.disk import BOOT_PART, ROOT_PART, SWAP_PART, partition_path, partition_script, reset_script
from ..lib.files import make_dirs
from ..lib.memory import auto_swap_size

logger = logging.getLogger(__name__)


def _fdisk(disk: str, script: str, *, desc: str, dry_run: bool) -> None:
    # fdisk reads the script from stdin; its own output goes to the terminal.
    run_cmd(["fdisk", disk], input_text=script, interactive=True, desc=desc, dry_run=dry_run)


class ResetStep:
    step_id = "reset"
    summary = "Reset disk partition table"
    requires = ("disk",)

    def run(self, cfg: InstallConfig) -> None:
        print(f"disk to reformat: {cfg.disk}")

        # Leftovers from an earlier attempt; nothing to do on a fresh boot.
        warn_cmd(["umount", "-R", cfg.mount_root], desc="nothing unmounted", dry_run=cfg.dry_run)
        warn_cmd(["swapoff", "-a"], desc="swap not disabled", dry_run=cfg.dry_run)

        _fdisk(cfg.disk, reset_script(), desc="failed to reset partition table", dry_run=cfg.dry_run)


class PartitionDiskStep:
    step_id = "partition-disk"
    summary = "Partition the disk (defaults: 1GB boot, auto-calculated swap based on RAM, rest for root)"
    requires = ("disk",)

    def run(self, cfg: InstallConfig) -> None:
        swap_size = cfg.swap_size or auto_swap_size()
        logger.info("Partitioning %s: boot=%sG swap=%sG root=rest", cfg.disk, cfg.boot_size, swap_size)
        _fdisk(
            cfg.disk,
            partition_script(cfg.boot_size, swap_size),
            desc="failed to partition disk",
            dry_run=cfg.dry_run,
        )


class FormatStep:
    step_id = "format"
    summary = "Format the partitions (e.g. 'sda' for /dev/sda1, 'nvme0n1p' for /dev/nvme0n1p1)"
    requires = ("partition_id",)

    def run(self, cfg: InstallConfig) -> None:
        part = cfg.partition_id
        run_cmd(["mkfs.fat", "-F32", partition_path(part, BOOT_PART)], desc="failed to format boot partition", dry_run=cfg.dry_run)
        run_cmd(["mkswap", partition_path(part, SWAP_PART)], desc="failed to format swap partition", dry_run=cfg.dry_run)
        run_cmd(["mkfs.ext4", "-F", partition_path(part, ROOT_PART)], desc="failed to format root partition", dry_run=cfg.dry_run)
        print("All partitions formatted successfully")


class MountingStep:
    step_id = "mounting"
    summary = "Mount the partitions (e.g. 'sda' for /dev/sda1, 'nvme0n1p' for /dev/nvme0n1p1)"
    requires = ("partition_id",)

    def run(self, cfg: InstallConfig) -> None:
        part = cfg.partition_id
        mnt = Path(cfg.mount_root)

        run_cmd(["mount", partition_path(part, ROOT_PART), str(mnt)], desc="failed to mount root partition", dry_run=cfg.dry_run)

        make_dirs(str(mnt / "boot/efi"), dry_run=cfg.dry_run)
        run_cmd(
            ["mount", partition_path(part, BOOT_PART), str(mnt / "boot/efi")],
            desc="failed to mount boot partition",
            dry_run=cfg.dry_run,
        )
        make_dirs(str(mnt / "home"), dry_run=cfg.dry_run)

        run_cmd(["swapon", partition_path(part, SWAP_PART)], desc="failed to enable swap", dry_run=cfg.dry_run)
        print("All partitions mounted successfully")
