from __future__ import annotations

from typing import Optional, Sequence


class InstallError(RuntimeError):
    """Base class for failures reported to the operator."""


class PreconditionError(InstallError):
    """Required configuration is missing or invalid; nothing has run yet."""


class CommandError(InstallError):
    def __init__(
        self,
        message: str,
        *,
        argv: Sequence[str] = (),
        returncode: Optional[int] = None,
        stderr: str = "",
    ) -> None:
        super().__init__(message)
        self.argv = list(argv)
        self.returncode = returncode
        self.stderr = stderr


class StepFailed(InstallError):
    def __init__(self, step_id: str, cause: BaseException, *, label: Optional[str] = None, hint: Optional[str] = None) -> None:
        where = f"{label.lower()} step" if label else "step"
        message = f"{where} '{step_id}' failed: {cause}"
        if hint:
            message += "\n" + hint
        super().__init__(message)
        self.step_id = step_id
        self.cause = cause
        self.hint = hint
