from __future__ import annotations

import logging

from ..config import InstallConfig
from ..lib.command import run_cmd

logger = logging.getLogger(__name__)


class CreateUserStep:
    step_id = "create-user"
    summary = "Create a new user account"
    requires = ("username",)

    def run(self, cfg: InstallConfig) -> None:
        user = cfg.username
        dry_run = cfg.dry_run

        run_cmd(["useradd", "-m", "-g", "users", "-G", "wheel", user], desc="failed to create user", dry_run=dry_run)
        run_cmd(["usermod", "-a", "-G", "wheel", user], desc="failed to add user to wheel", dry_run=dry_run)

        print(f"\nSet password for {user}:")
        run_cmd(["passwd", user], interactive=True, desc="failed to set password", dry_run=dry_run)

        run_cmd(["chsh", "-s", cfg.shell, user], desc="failed to change shell", dry_run=dry_run)
        print(f"User {user} created successfully")


class ConfigUserStep:
    step_id = "config-user"
    summary = "Edit sudoers file to configure wheel group"

    def run(self, cfg: InstallConfig) -> None:
        run_cmd(
            [cfg.editor, "-c", "/wheel", "/etc/sudoers"],
            interactive=True,
            desc="failed to edit sudoers",
            dry_run=cfg.dry_run,
        )


class SshKeyStep:
    step_id = "ssh-key"
    summary = "Generate SSH key"

    def run(self, cfg: InstallConfig) -> None:
        run_cmd(["ssh-keygen"], interactive=True, desc="failed to generate SSH key", dry_run=cfg.dry_run)
        print("Now add the key to your GitHub account")
