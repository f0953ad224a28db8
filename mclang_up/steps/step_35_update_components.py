from __future__ import annotations

import logging

from ..installer import update_component
from ..pipeline import InstallCtx

logger = logging.getLogger(__name__)


class UpdateComponentsStep:
    step_id = "35_update_components"

    def run(self, ctx: InstallCtx) -> None:
        for component in ctx.components:
            update_component(ctx, component)
