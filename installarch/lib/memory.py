from __future__ import annotations

import logging
import math

from .env import PATHS

logger = logging.getLogger(__name__)

DEFAULT_SWAP_GIB = 32


def swap_size_for_memory(mem_gib: float) -> int:
    """Swap size in GiB for a given amount of RAM in GiB, rounded up.

    < 2 GiB: twice the RAM; up to 8 GiB: same as RAM; above: half the RAM.
    """

    if mem_gib < 2:
        swap = mem_gib * 2
    elif mem_gib <= 8:
        swap = mem_gib
    else:
        swap = mem_gib / 2
    return int(math.ceil(swap))


def read_mem_total_kib(path: str = PATHS.meminfo) -> float:
    """Read MemTotal (kB) from a meminfo file."""

    with open(path, encoding="utf-8") as f:
        for line in f:
            if line.startswith("MemTotal:"):
                fields = line.split()
                if len(fields) < 2:
                    raise ValueError("unexpected MemTotal format")
                return float(fields[1])
    raise ValueError(f"MemTotal not found in {path}")


def auto_swap_size(path: str = PATHS.meminfo) -> int:
    try:
        mem_gib = read_mem_total_kib(path) / 1024 / 1024
    except (OSError, ValueError) as e:
        logger.warning("Falling back to default %sGB swap size: %s", DEFAULT_SWAP_GIB, e)
        return DEFAULT_SWAP_GIB

    swap = swap_size_for_memory(mem_gib)
    logger.info("Auto-calculated swap size based on system RAM: %sGB", swap)
    return swap
