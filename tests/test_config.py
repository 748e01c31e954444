from __future__ import annotations

from pathlib import Path

import pytest

from installarch.config import InstallConfig, load_config, missing_requirements
from installarch.errors import PreconditionError


def test_defaults() -> None:
    cfg = load_config()
    assert cfg.hostname == "fairytail"
    assert cfg.city == "Chicago"
    assert cfg.timezone == "America/Chicago"
    assert cfg.boot_size == 1
    assert cfg.swap_size is None
    assert cfg.shell == "/bin/zsh"
    assert cfg.disk is None
    assert cfg.partition_id is None


def test_partition_id_derived_from_disk() -> None:
    assert InstallConfig(disk="/dev/nvme0n1").partition_id == "nvme0n1p"
    assert InstallConfig(disk="/dev/sda").partition_id == "sda"
    assert InstallConfig(disk="/dev/sda", part_id="sdb").partition_id == "sdb"


def test_install_dir_under_mount_root() -> None:
    assert InstallConfig(mount_root="/mnt").install_dir == "/mnt/root"


def test_overrides_are_coerced() -> None:
    cfg = load_config(overrides={"disk": "/dev/sda", "boot_size": "2", "swap_size": "16", "hostname": None})
    assert cfg.disk == "/dev/sda"
    assert cfg.boot_size == 2
    assert cfg.swap_size == 16
    assert cfg.hostname == "fairytail"


def test_empty_hostname_uses_default() -> None:
    assert load_config(overrides={"hostname": ""}).hostname == "fairytail"


@pytest.mark.parametrize("value", ["0", "-1", "big"])
def test_bad_sizes_rejected(value: str) -> None:
    with pytest.raises(PreconditionError):
        load_config(overrides={"boot_size": value})


def test_yaml_file_then_overrides(tmp_path: Path) -> None:
    p = tmp_path / "install.yaml"
    p.write_text("disk: /dev/nvme0n1\nusername: alice\ncity: Denver\nswap_size: 4\n")

    cfg = load_config(str(p), {"city": "Boise", "username": None})

    assert cfg.disk == "/dev/nvme0n1"
    assert cfg.username == "alice"
    assert cfg.city == "Boise"
    assert cfg.swap_size == 4


def test_yaml_unknown_key(tmp_path: Path) -> None:
    p = tmp_path / "install.yaml"
    p.write_text("diks: /dev/sda\n")
    with pytest.raises(PreconditionError, match="unknown config key"):
        load_config(str(p))


def test_yaml_must_be_mapping(tmp_path: Path) -> None:
    p = tmp_path / "install.yaml"
    p.write_text("- /dev/sda\n")
    with pytest.raises(PreconditionError, match="mapping"):
        load_config(str(p))


def test_config_file_missing(tmp_path: Path) -> None:
    with pytest.raises(PreconditionError, match="not found"):
        load_config(str(tmp_path / "missing.yaml"))


def test_missing_requirements() -> None:
    cfg = InstallConfig(disk="/dev/sda")
    assert missing_requirements(cfg, ["disk", "username", "partition_id"]) == ["username"]


@pytest.mark.parametrize("text, expected", [("false", False), ('"false"', False), ('"no"', False), ("yes", True), ('"1"', True)])
def test_yaml_dry_run_words(tmp_path: Path, text: str, expected: bool) -> None:
    p = tmp_path / "install.yaml"
    p.write_text(f"dry_run: {text}\n")
    assert load_config(str(p)).dry_run is expected


def test_yaml_dry_run_rejects_other_values(tmp_path: Path) -> None:
    p = tmp_path / "install.yaml"
    p.write_text('dry_run: "maybe"\n')
    with pytest.raises(PreconditionError, match="dry_run must be true or false"):
        load_config(str(p))
