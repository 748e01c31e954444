from __future__ import annotations

import logging

from ..config import InstallConfig
from ..errors import InstallError
from ..lib.command import run_cmd
from ..lib.firmware import is_efi
from ..lib.memory import auto_swap_size
from ..lib.net import is_online

logger = logging.getLogger(__name__)


class CheckInputsStep:
    step_id = "check-inputs"
    summary = "Check default inputs before run-all"

    def run(self, cfg: InstallConfig) -> None:
        if is_efi():
            print("This is an EFI system.")
        else:
            print("This is not an EFI system. This guide does not apply :(")

        if cfg.swap_size:
            print(f"Swap size set explicitly: {cfg.swap_size}GB")
        else:
            print(f"Swap size: {auto_swap_size()}GB (auto)")

        if is_online(dry_run=cfg.dry_run):
            print("There is internet! Skip set-wifi command.")
        else:
            print("There is no internet. Run set-wifi first.")


class CheckInternetStep:
    step_id = "check-internet"
    summary = "Check if there is internet connectivity"

    def run(self, cfg: InstallConfig) -> None:
        if not is_online(dry_run=cfg.dry_run):
            raise InstallError("there is no internet")
        print("There is internet! Skip set-wifi command.")


class SetWifiStep:
    step_id = "set-wifi"
    summary = "Launch iwctl to configure WiFi"

    def run(self, cfg: InstallConfig) -> None:
        run_cmd(["iwctl"], interactive=True, desc="iwctl exited with an error", dry_run=cfg.dry_run)
