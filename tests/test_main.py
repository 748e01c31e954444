from __future__ import annotations

from pathlib import Path
from typing import List

import pytest

from installarch import __version__
from installarch import main as cli
from installarch.main import EXTERNAL_STEPS, FOLLOW_UPS, INTERNAL_STEPS, REGISTRY, build_parser


@pytest.fixture(autouse=True)
def _no_logging_setup(monkeypatch) -> None:
    monkeypatch.setattr(cli, "configure_logging", lambda **kw: kw.get("log_path"))


def _run_all_args(tmp_path: Path, *extra: str) -> List[str]:
    return [
        "run-all",
        "--disk",
        "/dev/nvme0n1",
        "--username",
        "bob",
        "--swap-size",
        "4",
        "--mount-root",
        str(tmp_path / "mnt"),
        *extra,
    ]


def test_version_flag(capsys) -> None:
    with pytest.raises(SystemExit) as exc:
        cli.main(["--version"])
    assert exc.value.code == 0
    assert capsys.readouterr().out.strip() == __version__


def test_no_subcommand_prints_help(capsys) -> None:
    assert cli.main([]) == 0
    assert "run-all" in capsys.readouterr().out


def test_every_step_is_a_subcommand() -> None:
    parser = build_parser()
    for name in [*REGISTRY, "run-all", "run-all-internal"]:
        args = parser.parse_args([name])
        assert callable(args.func)


def test_pipelines_reference_registered_steps() -> None:
    for name in (*EXTERNAL_STEPS, *INTERNAL_STEPS, *FOLLOW_UPS):
        assert name in REGISTRY


def test_run_all_requires_disk_and_username(commands, capsys) -> None:
    assert cli.main(["run-all"]) == 1
    err = capsys.readouterr().err
    assert "--disk" in err
    assert "--username" in err
    assert commands.calls == []


def test_single_step_requires_disk(commands, capsys) -> None:
    assert cli.main(["partition-disk"]) == 1
    assert "--disk" in capsys.readouterr().err
    assert commands.calls == []


def test_format_accepts_partition_identifier(commands) -> None:
    assert cli.main(["format", "nvme0n1p"]) == 0
    assert commands.calls[0] == ["mkfs.fat", "-F32", "/dev/nvme0n1p1"]


def test_run_all_success(commands, capsys, tmp_path: Path) -> None:
    assert cli.main(_run_all_args(tmp_path)) == 0

    out = capsys.readouterr().out
    assert "INSTALLATION COMPLETE" in out
    for name in FOLLOW_UPS:
        assert f"installarch {name}" in out

    programs = commands.programs()
    assert programs[0] == "ping"
    assert ["mkfs.fat", "-F32", "/dev/nvme0n1p1"] in commands.calls
    assert programs.index("pacstrap") < programs.index("genfstab") < programs.index("arch-chroot")
    assert programs[-2:] == ["umount", "swapoff"]
    assert (tmp_path / "mnt/root/installarch").is_file()


def test_run_all_stops_on_external_failure(commands, capsys, tmp_path: Path) -> None:
    commands.fail_on("mkswap")

    assert cli.main(_run_all_args(tmp_path)) == 1

    err = capsys.readouterr().err
    assert "external step 'format' failed" in err
    assert "failed to format swap partition" in err
    assert not commands.ran("mount")
    assert not commands.ran("arch-chroot")


def test_run_all_internal_failure_has_resume_instructions(commands, capsys, tmp_path: Path) -> None:
    commands.fail_on("arch-chroot")

    assert cli.main(_run_all_args(tmp_path)) == 1

    err = capsys.readouterr().err
    assert "internal step 'chroot-internal' failed" in err
    assert f"enter-sys --mount-root={tmp_path / 'mnt'}" in err
    assert "./installarch run-all-internal --username=bob" in err
    assert commands.programs()[-1] == "arch-chroot"


def test_prepare_reboot_failure_does_not_fail_run(commands, capsys, tmp_path: Path) -> None:
    commands.fail_on(f"umount -R {tmp_path / 'mnt'}")

    assert cli.main(_run_all_args(tmp_path)) == 0

    out = capsys.readouterr().out
    assert "INSTALLATION COMPLETE" in out
    assert "Completed with warnings" in out
    assert "installarch prepare-reboot" in out


def test_clean_run_reports_no_warnings(commands, capsys, tmp_path: Path) -> None:
    assert cli.main(_run_all_args(tmp_path)) == 0
    assert "Completed with warnings" not in capsys.readouterr().out


def test_run_all_internal(commands, capsys, monkeypatch, tmp_path: Path) -> None:
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    root = tmp_path / "root"

    rc = cli.main(["run-all-internal", "--username", "bob", "--hostname", "box", "--root", str(root), "--shell", "/bin/bash"])

    assert rc == 0
    assert (root / "etc/hostname").read_text() == "box\n"
    assert ["chsh", "-s", "/bin/bash", "bob"] in commands.calls
    assert commands.programs()[-1] == "ssh-keygen"
    out = capsys.readouterr().out
    assert "All internal setup completed successfully" in out
    assert "installarch yay-install" in out


def test_run_all_internal_requires_username(commands, capsys) -> None:
    assert cli.main(["run-all-internal"]) == 1
    assert "--username" in capsys.readouterr().err
    assert commands.calls == []


def test_config_file(commands, tmp_path: Path) -> None:
    cfg = tmp_path / "install.yaml"
    cfg.write_text(f"disk: /dev/sda\nswap_size: 3\nmount_root: {tmp_path / 'mnt'}\n")

    assert cli.main(["partition-disk", "--config", str(cfg)]) == 0
    assert commands.calls == [["fdisk", "/dev/sda"]]
    assert "+3G" in commands.inputs[0]


def test_dry_run_runs_nothing(commands) -> None:
    assert cli.main(["reset", "--disk", "/dev/sda", "--dry-run"]) == 0
    assert commands.calls == []
