from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional, Protocol, Sequence

from .config import InstallConfig, describe_missing, missing_requirements
from .errors import PreconditionError, StepFailed

logger = logging.getLogger(__name__)


class Step(Protocol):
    """A single named operation against the host or the target.

    Optional attributes read by the runner:
    - ``requires``: config names that must be set before anything runs
    - ``best_effort``: a failure is logged as a warning instead of aborting
    - ``resume_hint(cfg)``: text appended to the failure for manual resume
    """

    step_id: str
    summary: str

    def run(self, cfg: InstallConfig) -> None:
        ...


@dataclass(frozen=True)
class PipelineResult:
    ran_steps: List[str]
    warned_steps: List[str]


def required_options(steps: Sequence[Step]) -> List[str]:
    names: List[str] = []
    for step in steps:
        for name in getattr(step, "requires", ()):
            if name not in names:
                names.append(name)
    return names


def validate(cfg: InstallConfig, steps: Sequence[Step]) -> None:
    """Fail before any side effect when a step lacks required configuration."""

    missing = missing_requirements(cfg, required_options(steps))
    if missing:
        raise PreconditionError(f"missing required option(s): {describe_missing(missing)}")


def run_pipeline(
    cfg: InstallConfig,
    steps: Sequence[Step],
    *,
    label: Optional[str] = None,
) -> PipelineResult:
    """Run steps in order, stopping at the first failure.

    There is no retry and no rollback: effects of completed steps stay in place.
    """

    validate(cfg, steps)

    ran: List[str] = []
    warned: List[str] = []
    total = len(steps)
    tag = f"{label} " if label else ""

    for i, step in enumerate(steps, start=1):
        logger.info("[%s%d/%d] Running %s...", tag, i, total, step.step_id)
        try:
            step.run(cfg)
        except Exception as e:
            if getattr(step, "best_effort", False):
                logger.warning("%s failed (continuing): %s", step.step_id, e)
                warned.append(step.step_id)
                continue
            hint_fn = getattr(step, "resume_hint", None)
            hint = hint_fn(cfg) if hint_fn is not None else None
            logger.error("%s failed: %s", step.step_id, e)
            raise StepFailed(step.step_id, e, label=label, hint=hint) from e

        ran.append(step.step_id)
        logger.info("✓ %s completed", step.step_id)

    return PipelineResult(ran_steps=ran, warned_steps=warned)
