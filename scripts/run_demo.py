#!/usr/bin/env python3
"""Open a window showing a portrait-authored scene adapted to the window size."""

from __future__ import annotations

import argparse

from screen_adapt.api.config import SCALE_MODES, AdaptationConfig
from screen_adapt.rendering.pygfx_stage import PygfxRect, PygfxStage, PygfxWidget
from screen_adapt.runtime.config import config_from_env
from screen_adapt.runtime.controller import AdaptationController
from screen_adapt.runtime.logging import setup_adaptation_logging, shutdown_adaptation_logging
from screen_adapt.window.rendercanvas_viewport import create_rendercanvas_viewport


def main() -> int:
    parser = argparse.ArgumentParser(description="Run the screen adaptation demo.")
    parser.add_argument("--width", type=int, default=1334)
    parser.add_argument("--height", type=int, default=750)
    parser.add_argument("--scale-mode", choices=SCALE_MODES, default=None)
    parser.add_argument("--log-file", default=None, help="Append JSON log lines to this path.")
    args = parser.parse_args()

    setup_adaptation_logging(file_path=args.log_file)

    import pygfx as gfx
    import rendercanvas.auto as rc_auto

    viewport = create_rendercanvas_viewport(width=args.width, height=args.height)
    stage = PygfxStage(renderer=gfx.WgpuRenderer(viewport.canvas), canvas=viewport.canvas)
    controller = AdaptationController(stage=stage, viewport=viewport)
    viewport.bind(controller)

    config = config_from_env(
        AdaptationConfig(
            design_width=750,
            design_height=1334,
            world_bounds_width=750,
            world_bounds_height=1334,
            align_h=True,
            align_v=True,
        )
    )
    if args.scale_mode is not None:
        controller.configure(config, scale_mode=args.scale_mode)
    else:
        controller.configure(config)

    background = PygfxRect(color="#203040")
    stage.add(background.node)
    controller.fit(background)

    badge_mesh = gfx.Mesh(gfx.plane_geometry(96, 96), gfx.MeshBasicMaterial(color="#f0a030"))
    badge_mesh.local.position = (48.0, 48.0, 0.0)
    badge_node = gfx.Group()
    badge_node.add(badge_mesh)
    badge = PygfxWidget(badge_node, width=96, height=96, z=1.0)
    stage.add(badge_node)
    controller.align(badge, {"top": 30, "right": 30})

    controller.set_resize_callback(lambda orientation: print(f"orientation={orientation}"))

    viewport.canvas.request_draw(stage.render)
    try:
        rc_auto.loop.run()
    finally:
        shutdown_adaptation_logging()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
