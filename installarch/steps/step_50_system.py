from __future__ import annotations

import logging
import shutil
from pathlib import Path

from ..config import InstallConfig
from ..errors import InstallError
from ..lib.bootloader import install_grub_efi
from ..lib.command import run_cmd, warn_cmd
from ..lib.files import enable_locale, replace_symlink, target_path, write_file
from ..lib.pacman import INTERNAL_PACKAGES, pacman_install, read_package_list

logger = logging.getLogger(__name__)

SERVICES = [
    "bluetooth.service",
    "NetworkManager.service",
    "systemd-timesyncd.service",
    "sshd.service",
]

DEFAULT_BROWSER = "org.qutebrowser.qutebrowser.desktop"
TIMEZONE_DISPATCHER = "09-timezone"


def hosts_file(hostname: str) -> str:
    return (
        "127.0.0.1\tlocalhost\n"
        "::1\t\tlocalhost\n"
        f"127.0.1.1\t{hostname}.localdomain  {hostname}\n"
    )


class InstallInternalStep:
    step_id = "install-internal"
    summary = f"Install packages from rsrc/{INTERNAL_PACKAGES}"

    def run(self, cfg: InstallConfig) -> None:
        packages = read_package_list(cfg.resource_dir, INTERNAL_PACKAGES)
        pacman_install(packages, refresh=True, dry_run=cfg.dry_run)
        print("Internal packages installed successfully")


class SysSetupStep:
    step_id = "sys-setup"
    summary = "System setup: timezone, locale, hostname, services (default: fairytail, America/Chicago)"

    def run(self, cfg: InstallConfig) -> None:
        root = cfg.root
        dry_run = cfg.dry_run

        zoneinfo = f"/usr/share/zoneinfo/{cfg.timezone}"
        try:
            replace_symlink(zoneinfo, target_path(root, "/etc/localtime"), dry_run=dry_run)
            enable_locale(target_path(root, "/etc/locale.gen"), cfg.locale, dry_run=dry_run)
            write_file(root, "/etc/locale.conf", f"LANG={cfg.locale}\n", dry_run=dry_run)
            write_file(root, "/etc/hostname", cfg.hostname + "\n", dry_run=dry_run)
            write_file(root, "/etc/hosts", hosts_file(cfg.hostname), dry_run=dry_run)
        except OSError as e:
            raise InstallError(f"failed to write system configuration: {e}") from e

        run_cmd(["hwclock", "--systohc"], desc="failed to set hardware clock", dry_run=dry_run)
        run_cmd(["locale-gen"], desc="failed to generate locale", dry_run=dry_run)

        # Desktop niceties: none of these may stop the install.
        for service in SERVICES:
            warn_cmd(["systemctl", "enable", service], desc=f"failed to enable {service}", dry_run=dry_run)
        warn_cmd(["systemctl", "--user", "enable", "pulseaudio"], desc="failed to enable pulseaudio", dry_run=dry_run)
        warn_cmd(["amixer", "sset", "Master", "unmute"], desc="failed to unmute audio", dry_run=dry_run)
        warn_cmd(
            ["xdg-settings", "set", "default-web-browser", DEFAULT_BROWSER],
            desc="failed to set default browser",
            dry_run=dry_run,
        )

        print("\nSet root password:")
        run_cmd(["passwd"], interactive=True, desc="failed to set root password", dry_run=dry_run)
        print("System setup completed successfully")


class GrubSetupStep:
    step_id = "grub-setup"
    summary = "Install and configure GRUB bootloader"

    def run(self, cfg: InstallConfig) -> None:
        install_grub_efi(dry_run=cfg.dry_run)
        print("GRUB installed successfully")


class SetClockStep:
    step_id = "set-clock"
    summary = "Configure time synchronization (default: America/Chicago)"

    def run(self, cfg: InstallConfig) -> None:
        for argv in (
            ["timedatectl", "set-ntp", "true"],
            ["timedatectl", "set-timezone", cfg.timezone],
            ["sudo", "systemctl", "start", "systemd-timesyncd.service"],
            ["sudo", "systemctl", "enable", "systemd-timesyncd.service"],
        ):
            run_cmd(argv, desc="failed to configure clock", dry_run=cfg.dry_run)

        src = Path(cfg.resource_dir) / TIMEZONE_DISPATCHER
        dst = target_path(cfg.root, "/etc/NetworkManager/dispatcher.d") / TIMEZONE_DISPATCHER
        if cfg.dry_run:
            logger.info("Would copy %s -> %s", str(src), str(dst))
        else:
            try:
                dst.parent.mkdir(parents=True, exist_ok=True)
                shutil.copy2(src, dst)
            except OSError as e:
                logger.warning("Warning: failed to copy timezone script: %s", e)

        print("Clock configured successfully")
