from __future__ import annotations

import logging

from ..installer import install_component
from ..pipeline import InstallCtx

logger = logging.getLogger(__name__)


class InstallComponentsStep:
    step_id = "30_install_components"

    def run(self, ctx: InstallCtx) -> None:
        ctx.log.info("Cloning component repositories")
        for component in ctx.components:
            install_component(ctx, component)
