from __future__ import annotations

import logging
import os
from pathlib import Path

logger = logging.getLogger(__name__)


def target_path(root: str, rel: str) -> Path:
    return Path(root) / rel.lstrip("/")


def write_file(root: str, rel: str, contents: str, *, mode: int | None = None, dry_run: bool) -> Path:
    p = target_path(root, rel)
    if dry_run:
        logger.info("Would write %s", str(p))
        return p
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text(contents, encoding="utf-8")
    if mode is not None:
        os.chmod(p, mode)
    logger.info("Wrote %s", str(p))
    return p


def make_dirs(path: str, *, dry_run: bool) -> None:
    if dry_run:
        logger.info("Would create %s", path)
        return
    Path(path).mkdir(parents=True, exist_ok=True)


def replace_symlink(src: str, link: Path, *, dry_run: bool) -> None:
    """Point ``link`` at ``src``, replacing whatever is there."""

    if dry_run:
        logger.info("Would link %s -> %s", str(link), src)
        return
    link.parent.mkdir(parents=True, exist_ok=True)
    if link.is_symlink() or link.exists():
        link.unlink()
    link.symlink_to(src)


def enable_locale(locale_gen: Path, locale: str, *, dry_run: bool) -> None:
    """Uncomment (or append) ``<locale> <charset>`` in locale.gen."""

    charset = locale.split(".", 1)[1] if "." in locale else "UTF-8"
    entry = f"{locale} {charset}"
    if dry_run:
        logger.info("Would enable %s in %s", entry, str(locale_gen))
        return

    lines = locale_gen.read_text(encoding="utf-8").splitlines() if locale_gen.exists() else []
    out = []
    found = False
    for line in lines:
        if line.lstrip("#").strip() == entry:
            out.append(entry)
            found = True
        else:
            out.append(line)
    if not found:
        out.append(entry)
    locale_gen.parent.mkdir(parents=True, exist_ok=True)
    locale_gen.write_text("\n".join(out) + "\n", encoding="utf-8")
