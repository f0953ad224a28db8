from __future__ import annotations

import enum
import logging
from dataclasses import dataclass, field
from typing import Callable, List, Optional

from .components import ALL_COMPONENTS, Manifest
from .config import resolve_install_config
from .errors import InstallerError, UserAborted
from .lib.command import Runner, run_cmd
from .lib.deps import check_installed
from .lib.prompt import Prompt
from .pipeline import InstallCtx, Step, run_pipeline
from .steps import (
    CheckDependenciesStep,
    CleanComponentsStep,
    InstallComponentsStep,
    PathHintStep,
    PrepareLayoutStep,
    StageBinariesStep,
    StageStdlibStep,
    UpdateComponentsStep,
)

logger = logging.getLogger(__name__)

CONFIRM_MESSAGE = (
    "Are you sure you want to proceed? "
    "This may delete your files if you put any in the mclang install location"
)


class Mode(str, enum.Enum):
    INSTALL = "install"
    UPDATE = "update"


class Status(str, enum.Enum):
    SUCCESS = "success"
    FAILED = "failed"
    ABORTED = "aborted"


@dataclass(frozen=True)
class WorkflowResult:
    mode: Mode
    status: Status
    ran_steps: List[str] = field(default_factory=list)
    error: Optional[str] = None


_MESSAGES = {
    Mode.INSTALL: ("installation", "MCLang was successfully installed", "Installation failed"),
    Mode.UPDATE: ("update", "MCLang was successfully updated", "Update failed"),
}


def build_install_steps() -> List[Step]:
    return [
        CheckDependenciesStep(),
        PrepareLayoutStep(),
        CleanComponentsStep(),
        InstallComponentsStep(),
        StageBinariesStep(),
        StageStdlibStep(),
        PathHintStep(),
    ]


def build_update_steps() -> List[Step]:
    return [
        CheckDependenciesStep(),
        UpdateComponentsStep(),
        StageBinariesStep(),
        StageStdlibStep(),
    ]


def run_workflow(
    mode: Mode,
    *,
    manifest: Manifest,
    verbose: bool = False,
    component: str = ALL_COMPONENTS,
    dry_run: bool = False,
    prompt: Optional[Prompt] = None,
    runner: Runner = run_cmd,
    checker: Callable[..., bool] = check_installed,
    log: Optional[logging.Logger] = None,
) -> WorkflowResult:
    """Run a full install or update.

    Every InstallerError ends the run at the step that raised it: it is logged
    once here and turned into a failed (or, if the user declined, aborted)
    result. Nothing that already happened is rolled back.
    """

    log = log or logger
    prompt = prompt or Prompt(log=log)
    noun, success_msg, failure_msg = _MESSAGES[mode]
    ran: List[str] = []

    try:
        components = manifest.select(component)
        config = resolve_install_config(
            prompt,
            branches=manifest.branches,
            default_branch=manifest.default_branch,
            verbose=verbose,
            dry_run=dry_run,
            log=log,
        )
        if not prompt.confirm(CONFIRM_MESSAGE, default=False, log=log):
            raise UserAborted("Declined confirmation")

        log.info("Beginning %s of mclang %s to '%s'", noun, config.branch, config.install_root)

        ctx = InstallCtx(config=config, components=components, log=log, runner=runner, checker=checker)
        steps = build_install_steps() if mode is Mode.INSTALL else build_update_steps()
        run_pipeline(ctx=ctx, steps=steps, ran=ran)
    except UserAborted:
        log.info("Aborted, nothing was changed")
        return WorkflowResult(mode=mode, status=Status.ABORTED, ran_steps=ran)
    except InstallerError as e:
        log.error("%s: %s", failure_msg, e)
        return WorkflowResult(mode=mode, status=Status.FAILED, ran_steps=ran, error=str(e))
    except Exception:
        log.exception("%s with an unexpected error", failure_msg)
        raise

    log.info("%s", success_msg)
    return WorkflowResult(mode=mode, status=Status.SUCCESS, ran_steps=ran)


def install(*, manifest: Manifest, **kwargs) -> WorkflowResult:
    return run_workflow(Mode.INSTALL, manifest=manifest, **kwargs)


def update(*, manifest: Manifest, **kwargs) -> WorkflowResult:
    return run_workflow(Mode.UPDATE, manifest=manifest, **kwargs)
