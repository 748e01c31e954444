from __future__ import annotations

import logging

logger = logging.getLogger(__name__)

DEV_PREFIX = "/dev/"

BOOT_PART = 1
SWAP_PART = 2
ROOT_PART = 3

# fdisk GPT type aliases
FDISK_TYPE_SWAP = "19"
FDISK_TYPE_LINUX = "20"


def partition_prefix(disk: str) -> str:
    """Return the identifier that partition numbers are appended to.

    ``/dev/sda`` -> ``sda``; ``/dev/nvme0n1`` -> ``nvme0n1p`` (NVMe nodes put a
    ``p`` between the device name and the partition number).
    """

    part_id = disk[len(DEV_PREFIX):] if disk.startswith(DEV_PREFIX) else disk
    if "nvme" in part_id:
        part_id += "p"
    return part_id


def partition_path(part_id: str, number: int) -> str:
    return f"{DEV_PREFIX}{part_id}{number}"


def reset_script() -> str:
    # new empty GPT label, write, quit
    return "g\nw\nq\n"


def partition_script(boot_size_gib: int, swap_size_gib: int) -> str:
    """fdisk input for: 1 EFI boot, 2 swap, 3 root taking the rest."""

    lines = [
        "g",
        # 1: EFI system; with a single partition fdisk asks only for the type
        "n", str(BOOT_PART), "", f"+{boot_size_gib}G",
        "t", "1",
        # 2: swap
        "n", str(SWAP_PART), "", f"+{swap_size_gib}G",
        "t", str(SWAP_PART), FDISK_TYPE_SWAP,
        # 3: root
        "n", str(ROOT_PART), "", "",
        "t", str(ROOT_PART), FDISK_TYPE_LINUX,
        "p",
        "w",
        "q",
    ]
    return "\n".join(lines) + "\n"
