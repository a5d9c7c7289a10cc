"""Rendering adapters for the adaptation engine."""

from screen_adapt.rendering.pygfx_stage import PygfxRect, PygfxStage, PygfxWidget

__all__ = ["PygfxRect", "PygfxStage", "PygfxWidget"]
