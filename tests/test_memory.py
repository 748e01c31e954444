from __future__ import annotations

import logging
from pathlib import Path

import pytest

from installarch.lib.memory import DEFAULT_SWAP_GIB, auto_swap_size, read_mem_total_kib, swap_size_for_memory


@pytest.mark.parametrize(
    "mem_gib,expected",
    [(1, 2), (4, 4), (8, 8), (16, 8), (32, 16), (1.5, 3), (2, 2), (7.6, 8), (15.5, 8)],
)
def test_swap_size_for_memory(mem_gib: float, expected: int) -> None:
    assert swap_size_for_memory(mem_gib) == expected


def _meminfo(tmp_path: Path, kib: int) -> str:
    p = tmp_path / "meminfo"
    p.write_text(f"MemTotal:       {kib} kB\nMemFree:         1024 kB\n")
    return str(p)


def test_read_mem_total_kib(tmp_path: Path) -> None:
    assert read_mem_total_kib(_meminfo(tmp_path, 16384000)) == 16384000.0


def test_auto_swap_size_from_meminfo(tmp_path: Path) -> None:
    # 16 GiB of RAM -> 8 GiB of swap
    assert auto_swap_size(_meminfo(tmp_path, 16 * 1024 * 1024)) == 8


def test_auto_swap_size_rounds_up(tmp_path: Path) -> None:
    # a little under 16 GiB reported by the kernel still rounds to 8
    assert auto_swap_size(_meminfo(tmp_path, 16 * 1024 * 1024 - 300000)) == 8


def test_auto_swap_size_falls_back_when_missing(tmp_path: Path, caplog) -> None:
    with caplog.at_level(logging.WARNING):
        assert auto_swap_size(str(tmp_path / "nope")) == DEFAULT_SWAP_GIB
    assert "Falling back" in caplog.text


def test_auto_swap_size_falls_back_without_memtotal(tmp_path: Path) -> None:
    p = tmp_path / "meminfo"
    p.write_text("MemFree: 1 kB\n")
    assert auto_swap_size(str(p)) == DEFAULT_SWAP_GIB
