from __future__ import annotations

import logging
import os

from ..config import InstallConfig
from ..lib.command import run_cmd, warn_cmd

logger = logging.getLogger(__name__)

DOTFILES_DIR = ".unx"


def _git_dir(cfg: InstallConfig) -> str:
    return os.path.join(cfg.home, DOTFILES_DIR) + "/"


def _dotfiles_git(cfg: InstallConfig, *args: str) -> list[str]:
    return ["git", f"--git-dir={_git_dir(cfg)}", f"--work-tree={cfg.home}", *args]


class SetupGitStep:
    step_id = "setup-git"
    summary = "Clone bare dotfiles repository"

    def run(self, cfg: InstallConfig) -> None:
        run_cmd(
            ["git", "clone", "--bare", cfg.dotfiles_repo, os.path.join(cfg.home, DOTFILES_DIR)],
            cwd=cfg.home,
            interactive=True,
            desc="failed to clone dotfiles",
            dry_run=cfg.dry_run,
        )


class CheckoutGitStep:
    step_id = "checkout-git"
    summary = "Checkout dotfiles from bare repository"

    def run(self, cfg: InstallConfig) -> None:
        run_cmd(_dotfiles_git(cfg, "checkout"), interactive=True, desc="failed to checkout dotfiles", dry_run=cfg.dry_run)


class ConfigureGitStep:
    step_id = "configure-git"
    summary = "Configure git settings for dotfiles"
    best_effort = True

    def run(self, cfg: InstallConfig) -> None:
        commands = [
            ["git", "config", "--global", "core.excludesfile", "~/.gitignore"],
            ["git", "config", "--global", "--includes", "include.path", "./.keybindings_git"],
            _dotfiles_git(cfg, "config", "--local", "status.showUntrackedFiles", "no"),
            # fails when the key is unset, which is expected on a fresh clone
            _dotfiles_git(cfg, "config", "--get", "remote.origin.fetch"),
            _dotfiles_git(cfg, "config", "remote.origin.fetch", "+refs/heads/*:refs/remotes/origin/*"),
        ]
        for argv in commands:
            warn_cmd(argv, desc="git config", dry_run=cfg.dry_run)
