"""Stateful coordinator running the adaptation pipeline."""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from typing import Any, Literal, TypeAlias

from screen_adapt.api.config import AdaptationConfig
from screen_adapt.api.errors import InvalidArgumentError
from screen_adapt.api.geometry import LogicalSize, Orientation
from screen_adapt.api.host import FitShape, Positionable, Registration, StagePort, ViewportProvider
from screen_adapt.api.widgets import WidgetAnchor, coerce_widget_anchor
from screen_adapt.runtime.adaptation_pass import (
    AdaptationPass,
    apply_pass_to_stage,
    run_adaptation_pass,
)
from screen_adapt.runtime.config import resolve_config
from screen_adapt.runtime.debug_config import DebugConfig, load_debug_config
from screen_adapt.runtime.fullscreen import fit_shape
from screen_adapt.runtime.screen_pin import ScreenPinTransform, upright_pin_position
from screen_adapt.runtime.widgets import position_widget

_LOG = logging.getLogger("screen_adapt.runtime")

ControllerState: TypeAlias = Literal["uninitialized", "configured", "adapting", "idle"]
ResizeCallback: TypeAlias = Callable[[Orientation], None]


class AdaptationController:
    """Owns configuration and registries and re-adapts the stage on resize.

    Each pass is computed in full before anything is written to the host, so a
    configuration error leaves the previous pass, registries and stage intact.
    Notifications are expected serially; one arriving while a pass runs (for
    example from a resize callback) is coalesced into a follow-up pass.
    """

    def __init__(
        self,
        *,
        stage: StagePort,
        viewport: ViewportProvider,
        debug_config: DebugConfig | None = None,
    ) -> None:
        self._stage = stage
        self._viewport = viewport
        self._debug = debug_config or load_debug_config()
        self._state: ControllerState = "uninitialized"
        self._config: AdaptationConfig | None = None
        self._pass: AdaptationPass | None = None
        self._next_id = 1
        self._widgets: dict[int, tuple[Positionable, WidgetAnchor]] = {}
        self._fit_targets: dict[int, FitShape] = {}
        self._resize_callbacks: dict[int, ResizeCallback] = {}
        self._last_size: tuple[float, float] | None = None
        self._pending_size: tuple[float, float] | None = None
        self._in_flight = False

    @property
    def state(self) -> ControllerState:
        return self._state

    @property
    def config(self) -> AdaptationConfig | None:
        return self._config

    @property
    def current_pass(self) -> AdaptationPass | None:
        """Snapshot committed by the most recent pass."""
        return self._pass

    @property
    def orientation(self) -> Orientation | None:
        return None if self._pass is None else self._pass.orientation

    @property
    def logical_size(self) -> LogicalSize | None:
        """Surface size application code should use, independent of forced rotation."""
        return None if self._pass is None else self._pass.logical_size

    @property
    def screen_pin_transform(self) -> ScreenPinTransform:
        """Transform shared by every element pinned to the camera view."""
        if self._pass is None:
            return upright_pin_position
        return self._pass.screen_pin_transform

    def configure(
        self,
        config: AdaptationConfig | Mapping[str, object] | None = None,
        /,
        **overrides: object,
    ) -> AdaptationPass:
        """Merge settings over defaults and run one full pass."""
        resolved = resolve_config(config, **overrides)
        width, height = self._viewport.viewport_size()
        adaptation = run_adaptation_pass(resolved, width, height)
        self._config = resolved
        if self._state == "uninitialized":
            self._state = "configured"
        self._commit(adaptation)
        return adaptation

    def notify_resize(self, width: float, height: float) -> bool:
        """Handle a viewport-change notification; return whether a pass ran."""
        size = (float(width), float(height))
        if size[0] <= 0 or size[1] <= 0:
            self._trace_resize(size, accepted=False, reason="empty")
            return False
        config = self._config
        if config is None:
            self._trace_resize(size, accepted=False, reason="unconfigured")
            return False
        if self._in_flight:
            self._pending_size = size
            self._trace_resize(size, accepted=False, reason="coalesced")
            return False

        ran = False
        next_size: tuple[float, float] | None = size
        self._in_flight = True
        try:
            while next_size is not None:
                self._pending_size = None
                if next_size == self._last_size:
                    self._trace_resize(next_size, accepted=False, reason="unchanged")
                else:
                    self._trace_resize(next_size, accepted=True, reason="changed")
                    if self._config is not None:
                        config = self._config
                    self._adapt_for_resize(config, next_size)
                    ran = True
                next_size = self._pending_size
        except Exception:
            if self._pending_size is not None:
                _LOG.warning(
                    "resize_pending_dropped size=(%.1f,%.1f)",
                    self._pending_size[0],
                    self._pending_size[1],
                )
            raise
        finally:
            self._in_flight = False
            self._pending_size = None
        return ran

    def align(
        self,
        target: Positionable,
        anchor: WidgetAnchor | Mapping[str, object],
    ) -> Registration:
        """Keep ``target`` anchored to the surface edges across passes."""
        resolved = coerce_widget_anchor(anchor)
        if not isinstance(target, Positionable):
            raise InvalidArgumentError(f"align target is not positionable: {target!r}")
        registration = self._issue("widget")
        self._widgets[registration.id] = (target, resolved)
        if self._pass is not None:
            position_widget(
                target,
                resolved,
                margins=self._pass.margins,
                logical_size=self._pass.logical_size,
            )
        return registration

    def fit(self, target: FitShape) -> Registration:
        """Keep ``target`` covering the whole backing buffer across passes."""
        if not isinstance(target, FitShape):
            raise InvalidArgumentError(f"fit target cannot draw a rect: {target!r}")
        registration = self._issue("fit")
        self._fit_targets[registration.id] = target
        if self._pass is not None:
            fit_shape(target, self._pass.canvas)
        return registration

    def set_resize_callback(self, callback: ResizeCallback) -> Registration | None:
        """Register ``callback(orientation)`` for every resize-triggered pass."""
        if not callable(callback):
            _LOG.warning("resize_callback_rejected type=%s", type(callback).__name__)
            return None
        registration = self._issue("resize_callback")
        self._resize_callbacks[registration.id] = callback
        return registration

    def unregister(self, registration: Registration) -> bool:
        """Drop a registration; return whether it was still registered."""
        if not isinstance(registration, Registration):
            raise InvalidArgumentError(f"expected Registration, got {registration!r}")
        registries: dict[str, dict[int, Any]] = {
            "widget": self._widgets,
            "fit": self._fit_targets,
            "resize_callback": self._resize_callbacks,
        }
        registry = registries.get(registration.kind)
        if registry is None:
            raise InvalidArgumentError(f"unknown registration kind {registration.kind!r}")
        return registry.pop(registration.id, None) is not None

    def registration_counts(self) -> dict[str, int]:
        return {
            "widget": len(self._widgets),
            "fit": len(self._fit_targets),
            "resize_callback": len(self._resize_callbacks),
        }

    def pin_position(
        self,
        view_x: float,
        view_y: float,
        offset_x: float,
        offset_y: float,
        scale_x: float = 1.0,
        scale_y: float = 1.0,
    ) -> tuple[float, float]:
        """Screen position of an element pinned at ``offset`` from the camera view."""
        return self.screen_pin_transform(view_x, view_y, offset_x, offset_y, scale_x, scale_y)

    def _adapt_for_resize(self, config: AdaptationConfig, size: tuple[float, float]) -> None:
        width, height = self._viewport.viewport_size()
        adaptation = run_adaptation_pass(config, width, height)
        self._commit(adaptation)
        self._last_size = size
        for callback in tuple(self._resize_callbacks.values()):
            callback(adaptation.orientation)
        config.on_orientation_change(adaptation.orientation)

    def _commit(self, adaptation: AdaptationPass) -> None:
        previous_state = self._state
        self._state = "adapting"
        try:
            apply_pass_to_stage(self._stage, adaptation)
            for target, anchor in tuple(self._widgets.values()):
                position_widget(
                    target,
                    anchor,
                    margins=adaptation.margins,
                    logical_size=adaptation.logical_size,
                )
            for shape in tuple(self._fit_targets.values()):
                fit_shape(shape, adaptation.canvas)
            self._pass = adaptation
        finally:
            self._state = "idle" if self._pass is adaptation else previous_state
        self._log_pass(adaptation)

    def _issue(self, kind: str) -> Registration:
        registration = Registration(id=self._next_id, kind=kind)
        self._next_id += 1
        return registration

    def _log_pass(self, adaptation: AdaptationPass) -> None:
        level = logging.INFO if self._debug.pass_trace_enabled else logging.DEBUG
        if not _LOG.isEnabledFor(level):
            return
        _LOG.log(
            level,
            (
                "adaptation_pass orientation=%s force_rotate=%s view=(%.1f,%.1f) "
                "ratio=(%.4f,%.4f) actual=(%.1f,%.1f) style=(%d,%d) widgets=%d fits=%d"
            ),
            adaptation.orientation,
            adaptation.force_rotate,
            adaptation.view.x,
            adaptation.view.y,
            adaptation.ratio.x,
            adaptation.ratio.y,
            adaptation.canvas.actual_width,
            adaptation.canvas.actual_height,
            adaptation.canvas.style_width,
            adaptation.canvas.style_height,
            len(self._widgets),
            len(self._fit_targets),
            extra={
                "adaptation": {
                    "orientation": adaptation.orientation,
                    "force_rotate": adaptation.force_rotate,
                    "view": (adaptation.view.x, adaptation.view.y),
                    "ratio": (adaptation.ratio.x, adaptation.ratio.y),
                    "actual": (adaptation.canvas.actual_width, adaptation.canvas.actual_height),
                    "style": (adaptation.canvas.style_width, adaptation.canvas.style_height),
                    "surface_offset": (adaptation.alignment.left, adaptation.alignment.top),
                }
            },
        )

    def _trace_resize(self, size: tuple[float, float], *, accepted: bool, reason: str) -> None:
        level = logging.INFO if self._debug.resize_trace_enabled else logging.DEBUG
        _LOG.log(
            level,
            "resize_notification size=(%.1f,%.1f) accepted=%s reason=%s",
            size[0],
            size[1],
            accepted,
            reason,
        )
