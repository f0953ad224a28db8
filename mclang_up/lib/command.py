from __future__ import annotations

import enum
import logging
import shlex
import subprocess
from dataclasses import dataclass
from typing import Optional, Protocol, Sequence, Tuple

from ..errors import ProcessExitError, ProcessSpawnError

logger = logging.getLogger(__name__)


class OutputMode(enum.Enum):
    INHERIT = "inherit"
    CAPTURE = "capture"


@dataclass(frozen=True)
class InvocationSpec:
    program: str
    args: Tuple[str, ...]
    cwd: str
    output: OutputMode = OutputMode.CAPTURE

    @property
    def argv(self) -> list[str]:
        return [self.program, *self.args]

    def display(self) -> str:
        return _fmt_argv(self.argv)


@dataclass(frozen=True)
class InvocationOutcome:
    # returncode is None exactly when the child was killed by a signal.
    returncode: Optional[int]
    signal: Optional[int] = None
    stdout: Optional[str] = None
    stderr: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.returncode == 0

    @property
    def terminated_by_signal(self) -> bool:
        return self.signal is not None


class Runner(Protocol):
    def __call__(
        self,
        spec: InvocationSpec,
        *,
        log: Optional[logging.Logger] = None,
        dry_run: bool = False,
    ) -> InvocationOutcome:
        ...


def _fmt_argv(argv: Sequence[str]) -> str:
    return " ".join(shlex.quote(a) for a in argv)


def _decode(data: Optional[bytes]) -> Optional[str]:
    if data is None:
        return None
    return data.decode("utf-8", errors="replace")


def code_block(text: str) -> str:
    """Number each line of `text` starting at 1 (``N | line``)."""
    return "\n".join(f"{i} | {line}" for i, line in enumerate(text.splitlines(), start=1))


def format_diagnostic(outcome: InvocationOutcome) -> str:
    parts: list[str] = []
    if outcome.stdout:
        parts.append("STDOUT:\n" + code_block(outcome.stdout))
    if outcome.stderr:
        parts.append("STDERR:\n" + code_block(outcome.stderr))
    return "\n".join(parts)


def run_cmd(
    spec: InvocationSpec,
    *,
    log: Optional[logging.Logger] = None,
    dry_run: bool = False,
) -> InvocationOutcome:
    """Run one external command and map its exit condition to success or an error.

    - INHERIT connects the child to our own stdout/stderr (verbose mode).
    - CAPTURE buffers both streams; they are only logged if the command fails.
    - Exit code 0 returns the outcome. Anything else raises ProcessExitError,
      a signal termination included. Failure to start raises ProcessSpawnError.
    - dry_run logs but does not execute.
    """

    log = log or logger

    if dry_run:
        log.info("Would run '%s' in %s", spec.display(), spec.cwd)
        return InvocationOutcome(returncode=0)

    log.debug("Running '%s'", spec.display())

    pipe = subprocess.PIPE if spec.output is OutputMode.CAPTURE else None
    try:
        p = subprocess.run(spec.argv, cwd=spec.cwd, stdout=pipe, stderr=pipe)
    except OSError as e:
        log.error("Could not start %r: %s", spec.program, e)
        raise ProcessSpawnError(spec.program, e) from e

    stdout = _decode(p.stdout)
    stderr = _decode(p.stderr)

    if p.returncode < 0:
        outcome = InvocationOutcome(returncode=None, signal=-p.returncode, stdout=stdout, stderr=stderr)
    else:
        outcome = InvocationOutcome(returncode=p.returncode, stdout=stdout, stderr=stderr)

    if outcome.ok:
        log.debug("Exited with status code: 0")
        return outcome

    diagnostic = format_diagnostic(outcome)
    if diagnostic:
        log.error("%s", diagnostic)
    if outcome.terminated_by_signal:
        log.error("Process terminated by signal %d", outcome.signal)
    else:
        log.error("Exited with status code: %d", outcome.returncode)
    raise ProcessExitError(spec, outcome)
