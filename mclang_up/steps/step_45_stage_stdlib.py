from __future__ import annotations

import logging

from ..lib.assets import copy_tree
from ..pipeline import InstallCtx

logger = logging.getLogger(__name__)


class StageStdlibStep:
    step_id = "45_stage_stdlib"

    def run(self, ctx: InstallCtx) -> None:
        for component in ctx.components:
            if not component.stdlib:
                continue
            ctx.log.info("Copying %s standard library to '%s'", component.name, ctx.stdlib_dir)
            src = (ctx.component_dir(component) / component.stdlib).resolve()
            copy_tree(src, ctx.stdlib_dir, log=ctx.log, dry_run=ctx.config.dry_run)
