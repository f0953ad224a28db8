from __future__ import annotations

import logging

from ..installer import CARGO, GIT
from ..pipeline import InstallCtx

logger = logging.getLogger(__name__)


class CheckDependenciesStep:
    step_id = "10_check_dependencies"

    def run(self, ctx: InstallCtx) -> None:
        ctx.log.info("Checking dependencies")
        # Advisory: a missing tool surfaces again as a spawn failure later.
        for program in (GIT, CARGO):
            ctx.checker(program, log=ctx.log)
