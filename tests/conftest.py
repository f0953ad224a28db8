# tests/conftest.py
import io
import logging
from pathlib import Path
from typing import Callable, List, Optional

import pytest

from mclang_up.components import load_manifest
from mclang_up.errors import ProcessExitError
from mclang_up.lib.command import InvocationOutcome, InvocationSpec
from mclang_up.lib.prompt import Prompt


class FakeToolchain:
    """Stands in for git and cargo: records every invocation and fakes its effects.

    ``git clone ... <dest>`` creates the checkout (with a .git dir and a source
    file), ``cargo build --release`` creates ``target/release/<dir name>``.
    ``fail_when`` decides which invocation exits with status 1.
    """

    def __init__(self, fail_when: Optional[Callable[[InvocationSpec], bool]] = None):
        self.calls: List[InvocationSpec] = []
        self.fail_when = fail_when

    def __call__(self, spec, *, log=None, dry_run=False):
        self.calls.append(spec)
        if dry_run:
            return InvocationOutcome(returncode=0)
        if self.fail_when is not None and self.fail_when(spec):
            raise ProcessExitError(spec, InvocationOutcome(returncode=1, stdout="", stderr="boom\n"))

        cwd = Path(spec.cwd)
        if spec.program == "git" and spec.args[0] == "clone":
            checkout = cwd / spec.args[-1]
            (checkout / ".git").mkdir(parents=True)
            (checkout / ".git" / "HEAD").write_text("ref: refs/heads/stable\n")
            (checkout / "lib.mcl").write_text("// source\n")
        elif spec.program == "cargo":
            out = cwd / "target" / "release"
            out.mkdir(parents=True, exist_ok=True)
            (out / cwd.name).write_text("binary")
        return InvocationOutcome(returncode=0, stdout="", stderr="")

    def argvs(self):
        return [spec.argv for spec in self.calls]


def scripted_prompt(*answers: str) -> Prompt:
    return Prompt(stdin=io.StringIO("".join(f"{a}\n" for a in answers)), stdout=io.StringIO())


@pytest.fixture
def manifest():
    return load_manifest()


@pytest.fixture
def toolchain():
    return FakeToolchain()


@pytest.fixture
def checked():
    programs: List[str] = []

    def checker(program, *, log=None):
        programs.append(program)
        return True

    checker.programs = programs
    return checker


@pytest.fixture
def log():
    return logging.getLogger("mclang_up.tests")


@pytest.fixture
def make_prompt():
    return scripted_prompt


@pytest.fixture
def make_toolchain():
    return FakeToolchain
