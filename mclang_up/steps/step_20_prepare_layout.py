from __future__ import annotations

import logging

from ..lib.assets import ensure_dir
from ..pipeline import InstallCtx

logger = logging.getLogger(__name__)


class PrepareLayoutStep:
    step_id = "20_prepare_layout"

    def run(self, ctx: InstallCtx) -> None:
        ctx.log.info("Creating '%s' if it doesn't exist", ctx.root)
        ensure_dir(ctx.root, log=ctx.log, dry_run=ctx.config.dry_run)
        ensure_dir(ctx.components_dir, log=ctx.log, dry_run=ctx.config.dry_run)
