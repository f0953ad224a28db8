from __future__ import annotations

import logging

from ..lib.assets import remove_tree
from ..pipeline import InstallCtx

logger = logging.getLogger(__name__)


class CleanComponentsStep:
    """Wipe previous checkouts of the selected components before cloning again."""

    step_id = "25_clean_components"

    def run(self, ctx: InstallCtx) -> None:
        ctx.log.info("Cleaning out old versions")
        for component in ctx.components:
            remove_tree(ctx.component_dir(component), log=ctx.log, dry_run=ctx.config.dry_run)

        if any(c.stdlib for c in ctx.components):
            remove_tree(ctx.stdlib_dir, log=ctx.log, dry_run=ctx.config.dry_run)
