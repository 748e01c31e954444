from __future__ import annotations

import os
from pathlib import Path

from installarch.lib.files import enable_locale, replace_symlink, write_file


def test_write_file_under_root(tmp_path: Path) -> None:
    p = write_file(str(tmp_path), "/etc/hostname", "fairytail\n", dry_run=False)
    assert p == tmp_path / "etc/hostname"
    assert p.read_text() == "fairytail\n"


def test_write_file_dry_run(tmp_path: Path) -> None:
    write_file(str(tmp_path), "/etc/hostname", "x\n", dry_run=True)
    assert not (tmp_path / "etc/hostname").exists()


def test_replace_symlink_replaces_existing(tmp_path: Path) -> None:
    link = tmp_path / "etc/localtime"
    link.parent.mkdir()
    link.write_text("old")

    replace_symlink("/usr/share/zoneinfo/America/Denver", link, dry_run=False)

    assert link.is_symlink()
    assert os.readlink(link) == "/usr/share/zoneinfo/America/Denver"


def test_enable_locale_uncomments(tmp_path: Path) -> None:
    gen = tmp_path / "locale.gen"
    gen.write_text("#de_DE.UTF-8 UTF-8\n#en_US.UTF-8 UTF-8\n#en_US ISO-8859-1\n")

    enable_locale(gen, "en_US.UTF-8", dry_run=False)

    assert gen.read_text().splitlines() == ["#de_DE.UTF-8 UTF-8", "en_US.UTF-8 UTF-8", "#en_US ISO-8859-1"]


def test_enable_locale_appends_when_absent(tmp_path: Path) -> None:
    gen = tmp_path / "locale.gen"
    enable_locale(gen, "en_GB.UTF-8", dry_run=False)
    assert gen.read_text() == "en_GB.UTF-8 UTF-8\n"
