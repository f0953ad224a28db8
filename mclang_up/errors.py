from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .lib.command import InvocationOutcome, InvocationSpec


class InstallerError(RuntimeError):
    """Base for every error that aborts an install or update run."""


class UserAborted(InstallerError):
    pass


class InvalidInput(InstallerError):
    pass


class ProcessSpawnError(InstallerError):
    def __init__(self, program: str, cause: OSError) -> None:
        super().__init__(f"Could not start {program!r}: {cause}")
        self.program = program
        self.cause = cause


class ProcessExitError(InstallerError):
    def __init__(self, spec: "InvocationSpec", outcome: "InvocationOutcome") -> None:
        if outcome.signal is not None:
            reason = f"terminated by signal {outcome.signal}"
        else:
            reason = f"exited with status code {outcome.returncode}"
        super().__init__(f"{spec.display()} {reason}")
        self.spec = spec
        self.outcome = outcome


class FilesystemError(InstallerError):
    def __init__(self, op: str, path: str, cause: OSError) -> None:
        super().__init__(f"Could not {op} {path}: {cause}")
        self.op = op
        self.path = path
        self.cause = cause
