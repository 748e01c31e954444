from __future__ import annotations

import logging
import shlex
from typing import List

from ..config import InstallConfig
from ..lib.chroot import chroot_cmd
from ..lib.env import PATHS

logger = logging.getLogger(__name__)


def internal_argv(cfg: InstallConfig) -> List[str]:
    """Command line that re-runs the internal phase with equivalent configuration."""

    return [
        f"./{PATHS.launcher_name}",
        "run-all-internal",
        f"--username={cfg.username}",
        f"--hostname={cfg.hostname}",
        f"--city={cfg.city}",
        f"--region={cfg.region}",
        f"--locale={cfg.locale}",
        f"--shell={cfg.shell}",
        f"--editor={cfg.editor}",
        f"--dotfiles-repo={cfg.dotfiles_repo}",
    ]


def internal_command_line(cfg: InstallConfig) -> str:
    return f"cd {PATHS.chroot_home} && " + " ".join(shlex.quote(a) for a in internal_argv(cfg))


class EnterSysStep:
    step_id = "enter-sys"
    summary = "Chroot into the new system"

    def run(self, cfg: InstallConfig) -> None:
        chroot_cmd(cfg.mount_root, desc="arch-chroot exited with an error", dry_run=cfg.dry_run)


class ChrootInternalStep:
    step_id = "chroot-internal"
    summary = "Run run-all-internal inside the new system via arch-chroot"
    requires = ("username",)

    def run(self, cfg: InstallConfig) -> None:
        print("Executing commands inside chroot environment...")
        chroot_cmd(
            cfg.mount_root,
            ["bash", "-c", internal_command_line(cfg)],
            desc="internal installation failed",
            dry_run=cfg.dry_run,
        )

    def resume_hint(self, cfg: InstallConfig) -> str:
        enter = [PATHS.launcher_name, "enter-sys"]
        if cfg.mount_root != PATHS.mount_root:
            enter.append(f"--mount-root={cfg.mount_root}")
        return (
            f"You can manually enter the system with '{shlex.join(enter)}' and run:\n"
            f"  {internal_command_line(cfg)}"
        )
