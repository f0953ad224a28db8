from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Sequence

from .errors import InvalidInput
from .lib.prompt import Prompt

logger = logging.getLogger(__name__)

DEFAULT_INSTALL_DIRNAME = ".mclang"


@dataclass(frozen=True)
class InstallConfig:
    install_root: Path
    branch: str
    verbose: bool = False
    dry_run: bool = False


def default_install_root() -> str:
    return os.path.join(os.path.expanduser("~"), DEFAULT_INSTALL_DIRNAME)


def resolve_install_config(
    prompt: Prompt,
    *,
    branches: Sequence[str],
    default_branch: str,
    verbose: bool = False,
    dry_run: bool = False,
    log: Optional[logging.Logger] = None,
) -> InstallConfig:
    """Ask for the install location and branch; reject branches outside `branches`."""

    log = log or logger

    location = prompt.default("Enter install location", default_install_root())
    branch = prompt.default(f"Enter install branch, {' or '.join(repr(b) for b in branches)}", default_branch)
    if branch not in branches:
        log.error("Unknown value %r, please answer %s", branch, " or ".join(repr(b) for b in branches))
        raise InvalidInput(f"Unknown branch {branch!r}")

    return InstallConfig(
        install_root=Path(location).expanduser(),
        branch=branch,
        verbose=verbose,
        dry_run=dry_run,
    )
