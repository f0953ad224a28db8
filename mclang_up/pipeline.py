from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, List, Optional, Protocol, Sequence

from .components import Component
from .config import InstallConfig
from .lib.command import InvocationOutcome, InvocationSpec, OutputMode, Runner, run_cmd
from .lib.deps import check_installed

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class InstallCtx:
    config: InstallConfig
    components: Sequence[Component]
    log: logging.Logger = field(default=logger)
    runner: Runner = run_cmd
    checker: Callable[..., bool] = check_installed

    @property
    def root(self) -> Path:
        return self.config.install_root

    @property
    def components_dir(self) -> Path:
        return self.root / "components"

    @property
    def bin_dir(self) -> Path:
        return self.root / "bin"

    @property
    def stdlib_dir(self) -> Path:
        return self.root / "stdlib"

    def component_dir(self, component: Component) -> Path:
        return self.components_dir / component.path

    def run(self, program: str, args: Sequence[str], *, cwd: Path) -> InvocationOutcome:
        """Run an external tool, streaming its output in verbose mode and capturing it otherwise."""
        spec = InvocationSpec(
            program=program,
            args=tuple(args),
            cwd=str(cwd),
            output=OutputMode.INHERIT if self.config.verbose else OutputMode.CAPTURE,
        )
        return self.runner(spec, log=self.log, dry_run=self.config.dry_run)


class Step(Protocol):
    """A single workflow step; raising aborts the run."""

    step_id: str

    def run(self, ctx: InstallCtx) -> None:
        ...


@dataclass(frozen=True)
class PipelineResult:
    ran_steps: List[str]


def run_pipeline(
    *,
    ctx: InstallCtx,
    steps: Sequence[Step],
    ran: Optional[List[str]] = None,
) -> PipelineResult:
    """Run steps strictly in order; the first exception propagates unchanged.

    `ran` collects completed step ids as they finish, so a caller can still see
    how far a failed run got.
    """

    ran = [] if ran is None else ran

    for step in steps:
        ctx.log.debug("Running step %s", step.step_id)
        step.run(ctx)
        ran.append(step.step_id)

    return PipelineResult(ran_steps=ran)
