from __future__ import annotations

import logging

from ..lib.assets import copy_file, ensure_dir
from ..pipeline import InstallCtx

logger = logging.getLogger(__name__)


class StageBinariesStep:
    step_id = "40_stage_binaries"

    def run(self, ctx: InstallCtx) -> None:
        dry_run = ctx.config.dry_run

        ctx.log.info("Creating '%s'", ctx.bin_dir)
        ensure_dir(ctx.bin_dir, log=ctx.log, dry_run=dry_run)

        ctx.log.info("Copying binaries to '%s'", ctx.bin_dir)
        for component in ctx.components:
            if not component.binary:
                continue
            src = ctx.component_dir(component) / component.binary
            copy_file(src, ctx.bin_dir, log=ctx.log, dry_run=dry_run)
