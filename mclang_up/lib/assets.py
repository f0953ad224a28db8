from __future__ import annotations

import logging
import shutil
from pathlib import Path
from typing import Optional

from ..errors import FilesystemError

logger = logging.getLogger(__name__)

SKIP_NAMES = frozenset({".git"})


def ensure_dir(path: Path, *, log: Optional[logging.Logger] = None, dry_run: bool = False) -> None:
    log = log or logger
    if dry_run:
        log.info("Would create %s", path)
        return
    try:
        path.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise FilesystemError("create", str(path), e) from e


def remove_tree(path: Path, *, log: Optional[logging.Logger] = None, dry_run: bool = False) -> None:
    log = log or logger
    if not path.exists():
        return
    if dry_run:
        log.info("Would remove %s", path)
        return
    log.debug("Removing %s", path)
    try:
        shutil.rmtree(path)
    except OSError as e:
        raise FilesystemError("remove", str(path), e) from e


def copy_file(src: Path, dst_dir: Path, *, log: Optional[logging.Logger] = None, dry_run: bool = False) -> None:
    log = log or logger
    if dry_run:
        log.info("Would copy %s -> %s", src, dst_dir)
        return
    try:
        shutil.copy2(src, dst_dir / src.name)
    except OSError as e:
        raise FilesystemError("copy", str(src), e) from e


def copy_tree(src: Path, dst: Path, *, log: Optional[logging.Logger] = None, dry_run: bool = False) -> None:
    """Depth-first copy of regular files from src into dst.

    Destination directories are created as needed; VCS metadata is skipped.
    """

    log = log or logger
    if dry_run:
        log.info("Would copy tree %s -> %s", src, dst)
        return

    if not src.is_dir():
        raise FilesystemError("copy", str(src), FileNotFoundError(str(src)))

    try:
        _copy_tree(src, dst)
    except OSError as e:
        raise FilesystemError("copy", str(src), e) from e


def _copy_tree(src: Path, dst: Path) -> None:
    dst.mkdir(parents=True, exist_ok=True)
    for item in sorted(src.iterdir()):
        if item.name in SKIP_NAMES:
            continue
        if item.is_dir():
            _copy_tree(item, dst / item.name)
        else:
            shutil.copy2(item, dst / item.name)
