from __future__ import annotations

import logging
import os

from ..config import InstallConfig
from ..lib.command import run_cmd
from ..lib.files import make_dirs
from ..lib.pacman import pacman_install

logger = logging.getLogger(__name__)

GO_PACKAGES = [
    "github.com/go-task/task/v3/cmd/task@latest",
    "github.com/a-h/templ/cmd/templ@latest",
    "github.com/nanvenomous/e@latest",
    "github.com/nanvenomous/where-to@latest",
    "github.com/moson-mo/pacseek@latest",
    "github.com/ChausseBenjamin/termpicker@latest",
]

NPM_PACKAGES = [
    "typescript-language-server",
    "typescript",
    "pyright",
    "vscode-langservers-extracted",
    "@tailwindcss/language-server",
]

AUR_PACKAGES = ["font-symbola", "enpass-bin"]

AMD_PACKAGE_GROUPS = [
    ["ollama-rocm"],
    ["xf86-video-amdgpu"],
    ["rocm-opencl-sdk", "rocm-hip-sdk"],
]

ZSH_CLIPBOARD_REPO = "https://github.com/kutsan/zsh-system-clipboard.git"
YAY_REPO = "https://aur.archlinux.org/yay.git"
BUN_INSTALL = "curl -fsSL https://bun.sh/install | bash"

SOURCE_BUILDS = [
    ("where-to", "https://github.com/nanvenomous/where-to.git", [["make"], ["sudo", "make", "install"], ["sudo", "make", "zsh-completions"]]),
    ("e", "git@github.com:nanvenomous/e.git", [["make"], ["sudo", "make", "install"]]),
]


class GoInstallStep:
    step_id = "go-install"
    summary = "Install Go development tools"

    def run(self, cfg: InstallConfig) -> None:
        for pkg in GO_PACKAGES:
            print(f"Installing {pkg}...")
            run_cmd(["go", "install", pkg], interactive=True, desc=f"failed to install {pkg}", dry_run=cfg.dry_run)
        print("Go packages installed successfully")


class NpmInstallStep:
    step_id = "npm-install"
    summary = "Install npm language servers and tools"

    def run(self, cfg: InstallConfig) -> None:
        run_cmd(
            ["sudo", "npm", "i", "-g", *NPM_PACKAGES],
            interactive=True,
            desc="failed to install npm packages",
            dry_run=cfg.dry_run,
        )
        print("npm packages installed successfully")


class GitInstallStep:
    step_id = "git-install"
    summary = "Install zsh-system-clipboard, yay, and bun"

    def run(self, cfg: InstallConfig) -> None:
        scripts_dir = os.path.join(cfg.home, ".scripts")
        make_dirs(scripts_dir, dry_run=cfg.dry_run)
        run_cmd(
            ["git", "clone", ZSH_CLIPBOARD_REPO],
            cwd=scripts_dir,
            interactive=True,
            desc="failed to clone zsh-system-clipboard",
            dry_run=cfg.dry_run,
        )

        projects_dir = os.path.join(cfg.home, "projects")
        make_dirs(projects_dir, dry_run=cfg.dry_run)
        run_cmd(["git", "clone", YAY_REPO], cwd=projects_dir, interactive=True, desc="failed to clone yay", dry_run=cfg.dry_run)
        run_cmd(
            ["makepkg", "-si"],
            cwd=os.path.join(projects_dir, "yay"),
            interactive=True,
            desc="failed to build yay",
            dry_run=cfg.dry_run,
        )

        run_cmd(["bash", "-c", BUN_INSTALL], interactive=True, desc="failed to install bun", dry_run=cfg.dry_run)
        print("Git-based packages installed successfully")


class YayInstallStep:
    step_id = "yay-install"
    summary = f"Install AUR packages ({', '.join(AUR_PACKAGES)})"

    def run(self, cfg: InstallConfig) -> None:
        run_cmd(["yay", "-S", *AUR_PACKAGES], interactive=True, desc="failed to install AUR packages", dry_run=cfg.dry_run)


class AmdGpuStep:
    step_id = "amd-gpu"
    summary = "Install AMD GPU drivers and ROCm packages"

    def run(self, cfg: InstallConfig) -> None:
        for group in AMD_PACKAGE_GROUPS:
            pacman_install(group, sudo=True, dry_run=cfg.dry_run)
        print("AMD GPU packages installed successfully")


class FromSourceStep:
    step_id = "from-source"
    summary = "Build where-to and e from source"

    def run(self, cfg: InstallConfig) -> None:
        projects_dir = os.path.join(cfg.home, "projects")
        make_dirs(projects_dir, dry_run=cfg.dry_run)

        for name, repo, builds in SOURCE_BUILDS:
            run_cmd(["git", "clone", repo], cwd=projects_dir, interactive=True, desc=f"failed to clone {name}", dry_run=cfg.dry_run)
            for argv in builds:
                run_cmd(
                    argv,
                    cwd=os.path.join(projects_dir, name),
                    interactive=True,
                    desc=f"failed to build {name}",
                    dry_run=cfg.dry_run,
                )

        print("Source packages built successfully")
