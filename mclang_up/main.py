from __future__ import annotations

import argparse
import logging
from typing import Optional

from . import __version__
from .components import ALL_COMPONENTS, load_manifest
from .logging_utils import configure_logging
from .workflow import Mode, Status, run_workflow

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FAILED = 1
EXIT_USAGE = 2


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="mclang-up",
        description="Install or update the MCLang toolchain (compiler, updater, package manager, libmc).",
    )
    action = p.add_mutually_exclusive_group()
    action.add_argument("-i", "--install", action="store_true", help="Fresh install of all (or one) component")
    action.add_argument("-u", "--update", action="store_true", help="Pull and rebuild an existing install")
    p.add_argument("-v", "--verbose", action="store_true", help="Print more info and stream tool output")
    p.add_argument(
        "-c",
        "--component",
        default=ALL_COMPONENTS,
        help=f"Only process this component (default: {ALL_COMPONENTS})",
    )
    p.add_argument("--manifest", default=None, help="Path to a component manifest (yaml)")
    p.add_argument("--log", default=None, help="Also write the log to this file")
    p.add_argument("--dry-run", action="store_true", help="Log actions without running tools or touching files")
    p.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return p


def main(argv: Optional[list[str]] = None) -> int:
    p = build_parser()
    args = p.parse_args(argv)

    log = configure_logging(verbose=bool(args.verbose), log_path=args.log)

    if args.install:
        mode = Mode.INSTALL
    elif args.update:
        mode = Mode.UPDATE
    else:
        log.error("No arguments provided")
        p.print_usage()
        return EXIT_USAGE

    try:
        manifest = load_manifest(args.manifest)
    except (FileNotFoundError, ValueError) as e:
        p.error(f"Could not load manifest: {e}")

    result = run_workflow(
        mode,
        manifest=manifest,
        verbose=bool(args.verbose),
        component=args.component,
        dry_run=bool(args.dry_run),
        log=log,
    )
    return EXIT_FAILED if result.status is Status.FAILED else EXIT_OK


if __name__ == "__main__":
    raise SystemExit(main())
