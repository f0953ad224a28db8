from __future__ import annotations

import logging
import sys
from typing import Optional, TextIO

from ..errors import InvalidInput

logger = logging.getLogger(__name__)

YES = frozenset({"y", "yes", "true", "ye", "t"})
NO = frozenset({"n", "no", "false", "nah", "f"})


class Prompt:
    """Blocking line-oriented prompts on stdin/stdout."""

    def __init__(
        self,
        stdin: Optional[TextIO] = None,
        stdout: Optional[TextIO] = None,
        *,
        log: Optional[logging.Logger] = None,
    ) -> None:
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout
        self.log = log or logger

    def string(self, msg: str) -> str:
        self.stdout.write(f"prompt: {msg} ")
        self.stdout.flush()
        # EOF reads as an empty answer.
        line = self.stdin.readline()
        return line.rstrip("\r\n")

    def default(self, msg: str, default: str) -> str:
        s = self.string(f"{msg}. Leave blank for default [{default}]")
        return s if s else default

    def confirm(
        self,
        msg: str,
        default: Optional[bool] = None,
        *,
        log: Optional[logging.Logger] = None,
    ) -> bool:
        log = log or self.log
        if default is None:
            hint = "[y/n]"
        elif default:
            hint = "[Y/n]"
        else:
            hint = "[y/N]"

        answer = self.string(f"{msg} {hint}").strip().lower()
        if not answer and default is not None:
            return default
        if answer in YES:
            return True
        if answer in NO:
            return False

        log.error("Unknown value %r, please answer 'yes' or 'no'", answer)
        raise InvalidInput(f"Unknown value {answer!r}, expected yes or no")
