from __future__ import annotations

import logging
import os
import shlex
import subprocess
from dataclasses import dataclass
from typing import Mapping, Sequence

from ..errors import CommandError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CmdResult:
    argv: list[str]
    returncode: int
    stdout: str
    stderr: str


def fmt_argv(argv: Sequence[str]) -> str:
    return " ".join(shlex.quote(a) for a in argv)


def run_cmd(
    argv: Sequence[str],
    *,
    check: bool = True,
    env: Mapping[str, str] | None = None,
    cwd: str | None = None,
    input_text: str | None = None,
    interactive: bool = False,
    append_to: str | None = None,
    desc: str | None = None,
    dry_run: bool = False,
) -> CmdResult:
    """Run a command with consistent logging.

    - Always logs the command.
    - Captures stdout/stderr (logged at DEBUG) unless ``interactive``, in which
      case the child inherits the terminal (password prompts, editors, pacstrap).
    - ``append_to`` appends the command's stdout to that file.
    - dry_run logs but does not execute.

    There is no timeout: a hung command hangs the caller.
    """

    argv_list = list(argv)
    prefix = f"{desc}: " if desc else ""
    logger.info("CMD %s", fmt_argv(argv_list))

    if dry_run:
        return CmdResult(argv=argv_list, returncode=0, stdout="", stderr="")

    kwargs = dict(cwd=cwd, env=dict(os.environ, **(env or {})))
    try:
        if append_to is not None:
            with open(append_to, "a", encoding="utf-8") as out:
                p = subprocess.run(argv_list, input=input_text, text=True, stdout=out, stderr=subprocess.PIPE, **kwargs)
        elif interactive:
            p = subprocess.run(argv_list, input=input_text, text=True, **kwargs)
        else:
            p = subprocess.run(
                argv_list,
                input=input_text,
                text=True,
                stdout=subprocess.PIPE,
                stderr=subprocess.PIPE,
                **kwargs,
            )
    except OSError as e:
        raise CommandError(f"{prefix}cannot start {argv_list[0]}: {e}", argv=argv_list) from e

    stdout = p.stdout or ""
    stderr = p.stderr or ""
    if stdout:
        logger.debug("STDOUT %s", stdout.strip())
    if stderr:
        logger.debug("STDERR %s", stderr.strip())

    if check and p.returncode != 0:
        msg = f"{prefix}command failed ({p.returncode}): {fmt_argv(argv_list)}"
        if stderr.strip():
            msg += f"\n{stderr.strip()}"
        raise CommandError(msg, argv=argv_list, returncode=p.returncode, stderr=stderr)

    return CmdResult(argv=argv_list, returncode=p.returncode, stdout=stdout, stderr=stderr)


def warn_cmd(argv: Sequence[str], *, desc: str, dry_run: bool = False, **kwargs) -> bool:
    """Best-effort variant: a failure is logged as a warning, never raised."""

    try:
        run_cmd(argv, desc=desc, dry_run=dry_run, **kwargs)
    except CommandError as e:
        logger.warning("Warning: %s", e)
        return False
    return True
