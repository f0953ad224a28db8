from __future__ import annotations

import logging
import subprocess
from typing import Optional

logger = logging.getLogger(__name__)


def _log_remediation(program: str, log: logging.Logger) -> None:
    if program == "cargo":
        log.info("To install the rust toolchain follow the instructions on https://rustup.rs/")
        log.info("Or run `curl --proto '=https' --tlsv1.2 -sSf https://sh.rustup.rs | sh`")
    else:
        log.info("Install %r with your distribution's package manager.", program)
        log.info("    Ubuntu/Debian: sudo apt install %s", program)
        log.info("    Arch: sudo pacman -Sy %s", program)


def check_installed(program: str, *, log: Optional[logging.Logger] = None) -> bool:
    """Best-effort check that `program` can be started.

    Advisory only: a missing tool is reported with install guidance, never raised.
    The real enforcement point is the runner failing to spawn it later.
    """

    log = log or logger
    try:
        subprocess.run(
            [program, "--version"],
            stdin=subprocess.DEVNULL,
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
        )
    except OSError:
        log.error("Program %r could not be found.", program)
        _log_remediation(program, log)
        return False

    log.debug("Program %r was found.", program)
    return True
