from __future__ import annotations

import logging

from ..pipeline import InstallCtx

logger = logging.getLogger(__name__)


class PathHintStep:
    step_id = "90_path_hint"

    def run(self, ctx: InstallCtx) -> None:
        ctx.log.warning(
            "Before you can use MCLang you have to put 'export PATH=\"$PATH:%s\"' "
            "in your .bashrc or .zshrc (fish shell uses fish_add_path)",
            ctx.bin_dir,
        )
