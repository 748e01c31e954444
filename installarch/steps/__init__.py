from .step_10_preflight import CheckInputsStep, CheckInternetStep, SetWifiStep
from .step_20_disk import FormatStep, MountingStep, PartitionDiskStep, ResetStep
from .step_30_bootstrap import CopyBinaryStep, InstallStep, TabStep, UpdateStep
from .step_40_chroot import ChrootInternalStep, EnterSysStep
from .step_50_system import GrubSetupStep, InstallInternalStep, SetClockStep, SysSetupStep
from .step_60_users import ConfigUserStep, CreateUserStep, SshKeyStep
from .step_70_dotfiles import CheckoutGitStep, ConfigureGitStep, SetupGitStep
from .step_80_toolchains import (
    AmdGpuStep,
    FromSourceStep,
    GitInstallStep,
    GoInstallStep,
    NpmInstallStep,
    YayInstallStep,
)
from .step_90_finalize import BootOrderStep, PrepareRebootStep

__all__ = [
    "CheckInputsStep",
    "CheckInternetStep",
    "SetWifiStep",
    "ResetStep",
    "PartitionDiskStep",
    "FormatStep",
    "MountingStep",
    "UpdateStep",
    "InstallStep",
    "CopyBinaryStep",
    "TabStep",
    "EnterSysStep",
    "ChrootInternalStep",
    "InstallInternalStep",
    "SysSetupStep",
    "GrubSetupStep",
    "SetClockStep",
    "CreateUserStep",
    "ConfigUserStep",
    "SshKeyStep",
    "SetupGitStep",
    "CheckoutGitStep",
    "ConfigureGitStep",
    "GoInstallStep",
    "NpmInstallStep",
    "GitInstallStep",
    "YayInstallStep",
    "AmdGpuStep",
    "FromSourceStep",
    "PrepareRebootStep",
    "BootOrderStep",
]
