from __future__ import annotations

import logging
from pathlib import Path

from ..config import InstallConfig
from ..errors import InstallError
from ..lib.assets import copy_tree, launcher_script
from ..lib.command import run_cmd
from ..lib.env import PACKAGE_DIR, PATHS
from ..lib.files import write_file
from ..lib.pacman import EXTERNAL_PACKAGES, pacman_sync, pacstrap, read_package_list

logger = logging.getLogger(__name__)


class UpdateStep:
    step_id = "update"
    summary = "Update pacman databases and keyring"

    def run(self, cfg: InstallConfig) -> None:
        pacman_sync(dry_run=cfg.dry_run)
        run_cmd(
            ["pacman", "-Sy", "--noconfirm", "archlinux-keyring"],
            interactive=True,
            desc="failed to update keyring",
            dry_run=cfg.dry_run,
        )
        print("System updated successfully")


class InstallStep:
    step_id = "install"
    summary = f"Install packages from rsrc/{EXTERNAL_PACKAGES} into the mount root"

    def run(self, cfg: InstallConfig) -> None:
        packages = read_package_list(cfg.resource_dir, EXTERNAL_PACKAGES)
        logger.info("Installing %d packages into %s", len(packages), cfg.mount_root)
        pacstrap(cfg.mount_root, packages, dry_run=cfg.dry_run)
        print("Packages installed successfully")


class CopyBinaryStep:
    step_id = "copy-binary"
    summary = "Copy installarch and its resources into the new system's /root"

    def run(self, cfg: InstallConfig) -> None:
        install_dir = Path(cfg.install_dir)
        source_dir = install_dir / PATHS.source_dir_name
        package_copy = source_dir / PACKAGE_DIR.name

        try:
            copy_tree(str(PACKAGE_DIR), str(package_copy), dry_run=cfg.dry_run)
            # A custom resource dir replaces the bundled one.
            if Path(cfg.resource_dir).resolve() != (PACKAGE_DIR / "rsrc").resolve():
                copy_tree(cfg.resource_dir, str(package_copy / "rsrc"), dry_run=cfg.dry_run)
        except OSError as e:
            raise InstallError(f"failed to copy installarch: {e}") from e

        in_chroot = f"{PATHS.chroot_home}/{PATHS.source_dir_name}"
        write_file(
            str(install_dir),
            PATHS.launcher_name,
            launcher_script(in_chroot),
            mode=0o755,
            dry_run=cfg.dry_run,
        )
        print(f"Binary and resources copied to {install_dir} successfully")


class TabStep:
    step_id = "tab"
    summary = "Generate fstab file"

    def run(self, cfg: InstallConfig) -> None:
        fstab = Path(cfg.mount_root) / "etc/fstab"
        if not cfg.dry_run:
            fstab.parent.mkdir(parents=True, exist_ok=True)
        run_cmd(
            ["genfstab", "-U", cfg.mount_root],
            append_to=str(fstab),
            desc="failed to generate fstab",
            dry_run=cfg.dry_run,
        )
        print("fstab generated successfully")
