"""Pure composition of one adaptation pass."""

from __future__ import annotations

from dataclasses import dataclass

from screen_adapt.api.config import AdaptationConfig
from screen_adapt.api.errors import ConfigurationError, ViewportUnavailableError
from screen_adapt.api.geometry import (
    CanvasGeometry,
    DesignSize,
    LogicalSize,
    Margins,
    Orientation,
    Rect,
    ScaleRatio,
    ViewSize,
)
from screen_adapt.api.host import StagePort
from screen_adapt.runtime.alignment import (
    SurfaceAlignment,
    apply_surface_alignment,
    compute_surface_alignment,
)
from screen_adapt.runtime.canvas_sizer import resolve_logical_size, size_canvas
from screen_adapt.runtime.orientation import detect_orientation, is_force_rotated
from screen_adapt.runtime.scale_mode import resolve_scale_ratio
from screen_adapt.runtime.screen_pin import ScreenPinTransform, resolve_screen_pin_transform
from screen_adapt.runtime.stage_rotation import (
    StageRotation,
    apply_stage_rotation,
    compute_stage_rotation,
)
from screen_adapt.runtime.widgets import compute_widget_margins


@dataclass(frozen=True, slots=True)
class AdaptationPass:
    """Every value derived from one configuration and one viewport measurement."""

    orientation: Orientation
    force_rotate: bool
    view: ViewSize
    design: DesignSize
    ratio: ScaleRatio
    canvas: CanvasGeometry
    logical_size: LogicalSize
    stage_rotation: StageRotation
    alignment: SurfaceAlignment
    margins: Margins
    screen_pin_transform: ScreenPinTransform


def run_adaptation_pass(
    config: AdaptationConfig,
    viewport_width: float,
    viewport_height: float,
) -> AdaptationPass:
    """Compute a full pass snapshot without touching any host object."""
    state = detect_orientation(viewport_width, viewport_height)
    if state.view.x <= 0 or state.view.y <= 0:
        raise ViewportUnavailableError(
            f"viewport has no area: ({viewport_width!r}, {viewport_height!r})"
        )
    force_rotate = is_force_rotated(state.orientation, config.screen_mode)
    design = resolve_design_size(config, state.view, force_rotate=force_rotate)
    ratio = resolve_scale_ratio(
        force_rotate=force_rotate,
        scale_mode=config.scale_mode,
        content=design,
        container=state.view,
    )
    canvas = size_canvas(
        ratio=ratio,
        design=design,
        view=state.view,
        force_rotate=force_rotate,
        scale_mode=config.scale_mode,
    )
    world_bounds = Rect(
        x=float(config.world_bounds_x),
        y=float(config.world_bounds_y),
        w=float(config.world_bounds_width),
        h=float(config.world_bounds_height),
    )
    return AdaptationPass(
        orientation=state.orientation,
        force_rotate=force_rotate,
        view=state.view,
        design=design,
        ratio=ratio,
        canvas=canvas,
        logical_size=resolve_logical_size(canvas, force_rotate=force_rotate),
        stage_rotation=compute_stage_rotation(
            world_bounds=world_bounds,
            canvas=canvas,
            force_rotate=force_rotate,
        ),
        alignment=compute_surface_alignment(
            canvas=canvas,
            view=state.view,
            align_h=config.align_h,
            align_v=config.align_v,
        ),
        margins=compute_widget_margins(
            canvas=canvas,
            view=state.view,
            ratio=ratio,
            force_rotate=force_rotate,
            align_h=config.align_h,
            align_v=config.align_v,
        ),
        screen_pin_transform=resolve_screen_pin_transform(force_rotate),
    )


def resolve_design_size(
    config: AdaptationConfig,
    view: ViewSize,
    *,
    force_rotate: bool,
) -> DesignSize:
    """Resolve ``'auto'`` extents to twice the viewport and align axes for rotation."""
    width = view.x * 2 if config.design_width == "auto" else float(config.design_width)
    height = view.y * 2 if config.design_height == "auto" else float(config.design_height)
    if width <= 0 or height <= 0:
        raise ConfigurationError(f"design size resolved to ({width!r}, {height!r})")
    if force_rotate:
        return DesignSize(width=width, height=height, x=height, y=width)
    return DesignSize(width=width, height=height, x=width, y=height)


def apply_pass_to_stage(stage: StagePort, adaptation: AdaptationPass) -> None:
    """Write backing size, display scale, rotation and alignment to ``stage``."""
    stage.set_game_size(adaptation.canvas.actual_width, adaptation.canvas.actual_height)
    stage.set_user_scale(adaptation.ratio.x, adaptation.ratio.y)
    apply_stage_rotation(stage, adaptation.stage_rotation)
    apply_surface_alignment(stage, adaptation.alignment)
