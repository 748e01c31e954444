from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class Paths:
    mount_root: str = "/mnt"
    log_default: str = "/var/log/installarch.log"
    meminfo: str = "/proc/meminfo"
    efivars: str = "/sys/firmware/efi/efivars"
    # Inside the new system the tool lives under /root.
    chroot_home: str = "/root"
    launcher_name: str = "installarch"
    source_dir_name: str = "installarch-src"


PATHS = Paths()

PACKAGE_DIR = Path(__file__).resolve().parents[1]
RESOURCE_DIR = PACKAGE_DIR / "rsrc"
