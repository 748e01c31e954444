from __future__ import annotations

import dataclasses
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Iterable, List, Mapping, Optional

from .errors import PreconditionError
from .lib.disk import partition_prefix
from .lib.env import PATHS, RESOURCE_DIR

logger = logging.getLogger(__name__)

DEFAULT_HOSTNAME = "fairytail"
DEFAULT_CITY = "Chicago"
DEFAULT_REGION = "America"
DEFAULT_BOOT_SIZE = 1

_INT_FIELDS = {"boot_size", "swap_size"}
_BOOL_FIELDS = {"dry_run"}
_TRUE_WORDS = {"true", "yes", "on", "1"}
_FALSE_WORDS = {"false", "no", "off", "0"}

# Flag spelling used in error messages.
FLAG_NAMES = {
    "disk": "--disk",
    "username": "--username",
    "partition_id": "--disk (or a partition identifier)",
}


@dataclass(frozen=True)
class InstallConfig:
    """Process-wide configuration, built once and handed to every step."""

    disk: Optional[str] = None
    username: Optional[str] = None
    hostname: str = DEFAULT_HOSTNAME
    city: str = DEFAULT_CITY
    region: str = DEFAULT_REGION
    locale: str = "en_US.UTF-8"
    shell: str = "/bin/zsh"
    editor: str = "nvim"
    boot_size: int = DEFAULT_BOOT_SIZE
    # None means "derive from RAM" at partition time.
    swap_size: Optional[int] = None
    part_id: Optional[str] = None
    mount_root: str = PATHS.mount_root
    root: str = "/"
    resource_dir: str = str(RESOURCE_DIR)
    dotfiles_repo: str = "https://github.com/nanvenomous/unix.git"
    dry_run: bool = False

    @property
    def partition_id(self) -> Optional[str]:
        if self.part_id:
            return self.part_id
        if self.disk:
            return partition_prefix(self.disk)
        return None

    @property
    def timezone(self) -> str:
        return f"{self.region}/{self.city}"

    @property
    def install_dir(self) -> str:
        """Where the tool is copied inside the mounted target."""

        return str(Path(self.mount_root) / PATHS.chroot_home.lstrip("/"))

    @property
    def home(self) -> str:
        return os.environ.get("HOME") or os.path.expanduser("~")


def config_fields() -> List[str]:
    return [f.name for f in dataclasses.fields(InstallConfig)]


def _coerce(key: str, value: Any) -> Any:
    if value is None:
        return None
    if key in _INT_FIELDS:
        try:
            n = int(value)
        except (TypeError, ValueError) as e:
            raise PreconditionError(f"{key} must be a whole number of GB, got {value!r}") from e
        if n <= 0:
            raise PreconditionError(f"{key} must be positive, got {n}")
        return n
    if key in _BOOL_FIELDS:
        if isinstance(value, bool):
            return value
        word = str(value).strip().lower()
        if word in _TRUE_WORDS:
            return True
        if word in _FALSE_WORDS:
            return False
        raise PreconditionError(f"{key} must be true or false, got {value!r}")
    return str(value)


def load_config_file(path: str) -> Dict[str, Any]:
    p = Path(path)
    if not p.exists():
        raise PreconditionError(f"config file not found: {path}")
    if p.suffix.lower() not in {".yaml", ".yml"}:
        raise PreconditionError("config file must be YAML (.yaml/.yml)")

    try:
        import yaml  # type: ignore
    except Exception as e:
        raise PreconditionError("PyYAML is required to read a --config file") from e

    try:
        raw = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
    except (OSError, yaml.YAMLError) as e:
        raise PreconditionError(f"cannot read config file {path}: {e}") from e
    if not isinstance(raw, dict):
        raise PreconditionError(f"config file must contain a mapping, got {type(raw).__name__}")
    return raw


def load_config(path: Optional[str] = None, overrides: Optional[Mapping[str, Any]] = None) -> InstallConfig:
    """Defaults < YAML config file < explicit (non-None) overrides."""

    known = set(config_fields())
    values: Dict[str, Any] = {}

    if path:
        for key, value in load_config_file(path).items():
            if key not in known:
                raise PreconditionError(f"unknown config key {key!r} in {path}")
            values[key] = _coerce(key, value)
        logger.info("Loaded config file %s", path)

    for key, value in (overrides or {}).items():
        if key not in known:
            raise PreconditionError(f"unknown config option {key!r}")
        if value is not None:
            values[key] = _coerce(key, value)

    # Empty strings from the command line mean "use the default".
    for key in ("hostname", "city", "region"):
        if key in values and not values[key]:
            del values[key]

    return InstallConfig(**values)


def missing_requirements(cfg: InstallConfig, names: Iterable[str]) -> List[str]:
    missing: List[str] = []
    for name in names:
        if not getattr(cfg, name) and name not in missing:
            missing.append(name)
    return missing


def describe_missing(missing: Iterable[str]) -> str:
    return ", ".join(FLAG_NAMES.get(m, m) for m in missing)
