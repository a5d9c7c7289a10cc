"""Screen adaptation runtime modules."""

from screen_adapt.runtime.adaptation_pass import (
    AdaptationPass,
    apply_pass_to_stage,
    resolve_design_size,
    run_adaptation_pass,
)
from screen_adapt.runtime.alignment import SurfaceAlignment, centering_offset, compute_surface_alignment
from screen_adapt.runtime.canvas_sizer import resolve_logical_size, size_canvas
from screen_adapt.runtime.config import config_from_env, resolve_config, validate_config
from screen_adapt.runtime.controller import AdaptationController
from screen_adapt.runtime.debug_config import DebugConfig, load_debug_config
from screen_adapt.runtime.fullscreen import fit_shape
from screen_adapt.runtime.logging import (
    configure_adaptation_logging,
    setup_adaptation_logging,
    shutdown_adaptation_logging,
)
from screen_adapt.runtime.orientation import OrientationState, detect_orientation, is_force_rotated
from screen_adapt.runtime.scale_mode import resolve_scale_ratio
from screen_adapt.runtime.screen_pin import (
    ScreenPinTransform,
    resolve_screen_pin_transform,
    rotated_pin_position,
    upright_pin_position,
)
from screen_adapt.runtime.stage_rotation import StageRotation, compute_stage_rotation
from screen_adapt.runtime.widgets import compute_widget_margins, position_widget

__all__ = [
    "AdaptationController",
    "AdaptationPass",
    "DebugConfig",
    "OrientationState",
    "ScreenPinTransform",
    "StageRotation",
    "SurfaceAlignment",
    "apply_pass_to_stage",
    "centering_offset",
    "compute_stage_rotation",
    "compute_surface_alignment",
    "compute_widget_margins",
    "config_from_env",
    "configure_adaptation_logging",
    "detect_orientation",
    "fit_shape",
    "is_force_rotated",
    "load_debug_config",
    "position_widget",
    "resolve_config",
    "resolve_design_size",
    "resolve_logical_size",
    "resolve_scale_ratio",
    "resolve_screen_pin_transform",
    "rotated_pin_position",
    "setup_adaptation_logging",
    "shutdown_adaptation_logging",
    "size_canvas",
    "upright_pin_position",
    "validate_config",
]
