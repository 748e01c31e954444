from __future__ import annotations

import argparse
import logging
import sys
from typing import Callable, Dict, List, Optional, Sequence

from . import __version__
from .config import InstallConfig, config_fields, load_config
from .errors import InstallError
from .lib.env import PATHS
from .logging_utils import DEFAULT_LOG_PATH, configure_logging
from .pipeline import Step, run_pipeline, validate
from .steps import (
    AmdGpuStep,
    BootOrderStep,
    CheckInputsStep,
    CheckInternetStep,
    CheckoutGitStep,
    ChrootInternalStep,
    ConfigUserStep,
    ConfigureGitStep,
    CopyBinaryStep,
    CreateUserStep,
    EnterSysStep,
    FormatStep,
    FromSourceStep,
    GitInstallStep,
    GoInstallStep,
    GrubSetupStep,
    InstallInternalStep,
    InstallStep,
    MountingStep,
    NpmInstallStep,
    PartitionDiskStep,
    PrepareRebootStep,
    ResetStep,
    SetClockStep,
    SetupGitStep,
    SetWifiStep,
    SshKeyStep,
    SysSetupStep,
    TabStep,
    UpdateStep,
    YayInstallStep,
)

logger = logging.getLogger(__name__)

PROG = PATHS.launcher_name


def build_registry() -> Dict[str, Step]:
    steps: List[Step] = [
        CheckInputsStep(),
        CheckInternetStep(),
        SetWifiStep(),
        ResetStep(),
        PartitionDiskStep(),
        FormatStep(),
        MountingStep(),
        UpdateStep(),
        InstallStep(),
        CopyBinaryStep(),
        TabStep(),
        EnterSysStep(),
        ChrootInternalStep(),
        PrepareRebootStep(),
        InstallInternalStep(),
        SysSetupStep(),
        CreateUserStep(),
        ConfigUserStep(),
        GrubSetupStep(),
        SetupGitStep(),
        CheckoutGitStep(),
        ConfigureGitStep(),
        GoInstallStep(),
        NpmInstallStep(),
        GitInstallStep(),
        SetClockStep(),
        SshKeyStep(),
        YayInstallStep(),
        AmdGpuStep(),
        FromSourceStep(),
        BootOrderStep(),
    ]
    return {s.step_id: s for s in steps}


REGISTRY = build_registry()

EXTERNAL_STEPS = (
    "check-internet",
    "reset",
    "partition-disk",
    "format",
    "mounting",
    "update",
    "install",
    "copy-binary",
    "tab",
)

INTERNAL_STEPS = (
    "install-internal",
    "sys-setup",
    "create-user",
    "config-user",
    "grub-setup",
    "setup-git",
    "checkout-git",
    "configure-git",
    "go-install",
    "npm-install",
    "git-install",
    "set-clock",
    "ssh-key",
)

CHROOT_STEP = "chroot-internal"
FINAL_STEP = "prepare-reboot"

FOLLOW_UPS = {
    "yay-install": "AUR packages",
    "amd-gpu": "if you have an AMD GPU",
    "from-source": "build custom packages",
    "boot-order": "check or adjust boot order",
}

# Subcommands that accept a partition identifier instead of --disk.
_PART_ID_STEPS = {"format", "mounting"}


def pipeline(names: Sequence[str]) -> List[Step]:
    return [REGISTRY[n] for n in names]


def _print_warnings(warned: Sequence[str]) -> None:
    if warned:
        print("\nCompleted with warnings (check the log, then rerun by name if needed):")
        for name in warned:
            print(f"  - {PROG} {name}")


def _print_follow_ups() -> None:
    for name, why in FOLLOW_UPS.items():
        print(f"  - {PROG} {name} ({why})")


def run_step(cfg: InstallConfig, step: Step) -> None:
    """Run a single step by name, with the same validation as the pipelines."""

    run_pipeline(cfg, [step])


def run_all_internal(cfg: InstallConfig) -> None:
    """Internal phase: runs inside the new system."""

    result = run_pipeline(cfg, pipeline(INTERNAL_STEPS))

    print("\n✓ All internal setup completed successfully!")
    _print_warnings(result.warned_steps)
    print("\nOptional steps you may want to run:")
    _print_follow_ups()


def run_all(cfg: InstallConfig) -> None:
    """External phase, internal phase inside arch-chroot, then cleanup."""

    external = pipeline(EXTERNAL_STEPS)
    chroot = pipeline([CHROOT_STEP])
    final = pipeline([FINAL_STEP])

    # Everything the three phases need is checked before the disk is touched.
    validate(cfg, [*external, *chroot, *final])

    print("=== STARTING EXTERNAL INSTALLATION (Install Medium) ===")
    warned = list(run_pipeline(cfg, external, label="EXTERNAL").warned_steps)

    print("\n=== STARTING INTERNAL INSTALLATION (Inside New System) ===")
    warned += run_pipeline(cfg, chroot, label="INTERNAL").warned_steps

    print("\n=== FINALIZING INSTALLATION ===")
    warned += run_pipeline(cfg, final, label="FINAL").warned_steps

    rule = "=" * 60
    print("\n" + rule)
    print("✓ INSTALLATION COMPLETE!")
    print(rule)
    print("\nYour Arch Linux system is ready to boot!")
    _print_warnings(warned)
    print("\nNext steps:")
    print("  1. Remove the installation medium")
    print("  2. Reboot with: reboot")
    print("\nOptional post-install steps (run after reboot):")
    _print_follow_ups()


def _config_parent() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(add_help=False)
    d = InstallConfig()

    g = p.add_argument_group("configuration")
    g.add_argument("-d", "--disk", help="Disk to install to (e.g. /dev/sda)")
    g.add_argument("-u", "--username", help="Username to create")
    g.add_argument("-n", "--hostname", help=f"System hostname (default: {d.hostname})")
    g.add_argument("-c", "--city", help=f"City for timezone (default: {d.city})")
    g.add_argument("--region", help=f"Region for timezone (default: {d.region})")
    g.add_argument("--locale", help=f"System locale (default: {d.locale})")
    g.add_argument("--shell", help=f"Login shell for the new user (default: {d.shell})")
    g.add_argument("--editor", help=f"Editor used for sudoers (default: {d.editor})")
    g.add_argument("-b", "--boot-size", help=f"Boot partition size in GB (default: {d.boot_size})")
    g.add_argument("-s", "--swap-size", help="Swap partition size in GB (default: calculated from RAM)")
    g.add_argument("--mount-root", help=f"Mount point of the new system (default: {d.mount_root})")
    g.add_argument("--root", help=f"Filesystem root for internal configuration files (default: {d.root})")
    g.add_argument("--resource-dir", help="Directory with package lists and resource files")
    g.add_argument("--dotfiles-repo", help="Bare dotfiles repository to clone")
    g.add_argument("--dry-run", action="store_true", default=None, help="Log commands without running them")

    g = p.add_argument_group("runtime")
    g.add_argument("--config", default=None, help="YAML file with configuration defaults")
    g.add_argument("--log", default=DEFAULT_LOG_PATH, help="Path to installer log")
    g.add_argument("--debug", action="store_true", help="Log captured command output")
    return p


def _step_command(step: Step) -> Callable[[InstallConfig], None]:
    def _run(cfg: InstallConfig) -> None:
        run_step(cfg, step)

    return _run


def build_parser() -> argparse.ArgumentParser:
    parent = _config_parent()

    p = argparse.ArgumentParser(
        prog=PROG,
        description=(
            "CLI to help install Arch Linux on a computer. Run individual steps, or "
            "'run-all' to execute every step in sequence. If a step fails, fix the "
            "cause and continue by running the remaining steps by name."
        ),
    )
    p.add_argument("-v", "--version", action="version", version=__version__, help="print the version of the cli")

    sub = p.add_subparsers(dest="subcmd", metavar="<command>")

    sp = sub.add_parser(
        "run-all",
        parents=[parent],
        help="Run complete installation from start to finish (stops on first error)",
        description=(
            f"external: {', '.join(EXTERNAL_STEPS)}; "
            f"internal (via arch-chroot): {', '.join(INTERNAL_STEPS)}; final: {FINAL_STEP}. "
            "Requires --disk and --username."
        ),
    )
    sp.set_defaults(func=run_all)

    sp = sub.add_parser(
        "run-all-internal",
        parents=[parent],
        help="Run all internal setup commands in order (stops on first error)",
        description=f"Run inside the new system: {', '.join(INTERNAL_STEPS)}. Requires --username.",
    )
    sp.set_defaults(func=run_all_internal)

    for step_id, step in REGISTRY.items():
        sp = sub.add_parser(step_id, parents=[parent], help=step.summary, description=step.summary)
        if step_id in _PART_ID_STEPS:
            sp.add_argument(
                "part_id",
                nargs="?",
                default=None,
                help="Partition identifier, e.g. 'sda' or 'nvme0n1p' (default: derived from --disk)",
            )
        sp.set_defaults(func=_step_command(step))

    return p


def config_from_args(args: argparse.Namespace) -> InstallConfig:
    overrides = {name: getattr(args, name, None) for name in config_fields()}
    return load_config(args.config, overrides)


def main(argv: Optional[list[str]] = None) -> int:
    p = build_parser()
    args = p.parse_args(argv)

    func = getattr(args, "func", None)
    if func is None:
        p.print_help()
        return 0

    configure_logging(log_path=args.log, level=logging.DEBUG if args.debug else logging.INFO)

    try:
        cfg = config_from_args(args)
        func(cfg)
    except InstallError as e:
        logger.debug("Aborted", exc_info=True)
        print(f"error: {e}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        print("interrupted; effects of completed steps are left in place", file=sys.stderr)
        return 130
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
