from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple

from heritage_browser.config.model import TableLayoutConfig
from heritage_browser.core.events import (
    EventTarget,
    FrameScheduler,
    ImmediateFrameScheduler,
    LatestValueMailbox,
)
from heritage_browser.core.observable import StateNotifier

logger = logging.getLogger(__name__)

POINTER_MOVE = "pointermove"
POINTER_UP = "pointerup"
RESIZE = "resize"


@dataclass(frozen=True)
class PointerEvent:
    client_x: float


@dataclass(frozen=True)
class ViewportEvent:
    width: float


@dataclass(frozen=True)
class TableLayoutState:
    width: float
    min_width: float
    max_width: float
    effective_max_width: float
    is_resizing: bool
    visible_columns: Tuple[str, ...]


class TableLayoutEngine(StateNotifier[TableLayoutState]):
    """
    Drag-to-resize width state for one sites table, plus progressive column disclosure.

    Invariant: min_width <= width <= effective_max_width, where
    effective_max_width = max(min_width, min(max_width, floor((viewport - padding) * ratio))).

    Event wiring:
    - mount(): window "resize" listener, attached for the engine's lifetime
    - start_resize(): document "pointermove" / "pointerup", attached per gesture
    - end_resize() / teardown(): detach what this instance attached

    Pointer moves are coalesced through a one-slot mailbox: at most one width
    write per frame, the latest pointer position wins.
    """

    def __init__(
        self,
        config: Optional[TableLayoutConfig] = None,
        *,
        document: Optional[EventTarget] = None,
        window: Optional[EventTarget] = None,
        scheduler: Optional[FrameScheduler] = None,
    ):
        super().__init__()
        self.config = config or TableLayoutConfig()
        self.document = document or EventTarget("document")
        self.window = window or EventTarget("window")
        self.scheduler = scheduler or ImmediateFrameScheduler()

        self._viewport_width: Optional[float] = None
        self._effective_max = self.config.max_width
        self._width = self.clamp(self.config.initial_width)
        self._is_resizing = False

        self._mailbox: LatestValueMailbox[float] = LatestValueMailbox()
        self._frame_requested = False
        self._mounted = False
        self._torn_down = False

        self._last_published = self.get_state()

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------
    @property
    def width(self) -> float:
        return self._width

    @property
    def is_resizing(self) -> bool:
        return self._is_resizing

    @property
    def effective_max_width(self) -> float:
        return self._effective_max

    def get_state(self) -> TableLayoutState:
        return TableLayoutState(
            width=self._width,
            min_width=self.config.min_width,
            max_width=self.config.max_width,
            effective_max_width=self._effective_max,
            is_resizing=self._is_resizing,
            visible_columns=self.visible_columns(),
        )

    # ------------------------------------------------------------------
    # Pure helpers
    # ------------------------------------------------------------------
    def clamp(self, width: float) -> float:
        return max(self.config.min_width, min(self._effective_max, width))

    def effective_max_for_viewport(self, viewport_width: float) -> float:
        available = viewport_width - self.config.viewport_padding
        ceiling = math.floor(available * self.config.viewport_ratio)
        return max(self.config.min_width, min(self.config.max_width, ceiling))

    def visible_columns(self, width: Optional[float] = None) -> Tuple[str, ...]:
        """
        Baseline columns plus every column whose threshold is <= width, in display order.
        The threshold itself is inclusive.
        """
        w = self._width if width is None else width
        shown = set(self.config.baseline_columns)
        for disclosure in self.config.disclosures:
            if disclosure.min_width <= w:
                shown.add(disclosure.column)
        return tuple(c for c in self.config.column_order if c in shown)

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------
    def mount(self, viewport_width: Optional[float] = None) -> None:
        if self._torn_down:
            raise RuntimeError("TableLayoutEngine was torn down and cannot be mounted again")
        if not self._mounted:
            self.window.add_listener(RESIZE, self._handle_viewport_resize)
            self._mounted = True
        if viewport_width is not None:
            self.on_viewport_resize(viewport_width)

    def teardown(self) -> None:
        self.window.remove_listener(RESIZE, self._handle_viewport_resize)
        self._detach_drag_listeners()
        self._mailbox.clear()
        self._is_resizing = False
        self._mounted = False
        self._torn_down = True
        logger.debug("table_layout_teardown", extra={"width": self._width})

    # ------------------------------------------------------------------
    # Drag gesture
    # ------------------------------------------------------------------
    def start_resize(self) -> None:
        if self._torn_down or self._is_resizing:
            return
        self._is_resizing = True
        self.document.add_listener(POINTER_MOVE, self._handle_pointer_move)
        self.document.add_listener(POINTER_UP, self._handle_pointer_up)
        self._publish()

    def on_pointer_move(self, client_x: float) -> None:
        if self._torn_down or not self._is_resizing:
            return
        self._mailbox.post(client_x)
        if not self._frame_requested:
            self._frame_requested = True
            self.scheduler.request_frame(self._on_frame)

    def end_resize(self) -> None:
        if not self._is_resizing:
            return
        # the last pointer position must land even if its frame has not run yet
        self._apply_pending_move()
        self._is_resizing = False
        self._detach_drag_listeners()
        logger.debug("table_resize_end", extra={"width": self._width})
        self._publish()

    def set_width(self, width: float) -> None:
        """Direct (non-drag) resize, e.g. from a slider or keyboard control."""
        if self._torn_down:
            return
        self._width = self.clamp(width)
        self._publish()

    # ------------------------------------------------------------------
    # Viewport
    # ------------------------------------------------------------------
    def on_viewport_resize(self, viewport_width: float) -> None:
        if self._torn_down:
            return
        self._viewport_width = viewport_width
        self._effective_max = self.effective_max_for_viewport(viewport_width)
        self._width = self.clamp(self._width)
        self._publish()

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------
    def _on_frame(self) -> None:
        self._frame_requested = False
        if self._torn_down:
            return
        self._apply_pending_move()

    def _apply_pending_move(self) -> None:
        client_x = self._mailbox.take()
        if client_x is None:
            return
        self._width = self.clamp(client_x - self.config.left_offset)
        self._publish()

    def _detach_drag_listeners(self) -> None:
        self.document.remove_listener(POINTER_MOVE, self._handle_pointer_move)
        self.document.remove_listener(POINTER_UP, self._handle_pointer_up)

    def _handle_pointer_move(self, event: PointerEvent) -> None:
        self.on_pointer_move(event.client_x)

    def _handle_pointer_up(self, event: Any = None) -> None:
        self.end_resize()

    def _handle_viewport_resize(self, event: ViewportEvent) -> None:
        self.on_viewport_resize(event.width)

    # ------------------------------------------------------------------
    # Store (de)serialisation
    # ------------------------------------------------------------------
    def to_dict(self) -> Dict[str, Any]:
        return {"width": self._width, "viewport_width": self._viewport_width}

    @classmethod
    def from_dict(cls, data: Dict[str, Any], config: Optional[TableLayoutConfig] = None) -> TableLayoutEngine:
        engine = cls(config)
        viewport_width = data.get("viewport_width")
        if viewport_width is not None:
            engine.on_viewport_resize(float(viewport_width))
        width = data.get("width")
        if width is not None:
            engine.set_width(float(width))
        engine._last_published = engine.get_state()
        return engine
