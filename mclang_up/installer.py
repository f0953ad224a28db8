from __future__ import annotations

from typing import Sequence

from .components import Component
from .pipeline import InstallCtx

GIT = "git"
CARGO = "cargo"
BUILD_ARGS: Sequence[str] = ("build", "--release")


def build_component(ctx: InstallCtx, component: Component) -> None:
    if not component.build:
        return
    ctx.log.info("Building %s", component.name)
    ctx.run(CARGO, BUILD_ARGS, cwd=ctx.component_dir(component))


def install_component(ctx: InstallCtx, component: Component) -> None:
    """Fresh clone of `component` at the configured branch, then a release build."""
    ctx.log.info("Cloning %s", component.name)
    ctx.run(
        GIT,
        ["clone", "-b", ctx.config.branch, component.url, component.path],
        cwd=ctx.components_dir,
    )
    build_component(ctx, component)


def update_component(ctx: InstallCtx, component: Component) -> None:
    """Pull the configured branch into an existing checkout, then rebuild."""
    ctx.log.info("Updating %s", component.name)
    ctx.run(GIT, ["pull", "origin", ctx.config.branch], cwd=ctx.component_dir(component))
    build_component(ctx, component)
