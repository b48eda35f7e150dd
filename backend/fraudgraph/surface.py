"""
surface.py – Headless rendering surface, display region and tooltip overlay.

The surface mirrors the small slice of a graph-rendering library the view
uses: it is built from elements, a stylesheet, node positions and a zoom
range; it dispatches pointer events to handlers registered per
(event, selector); and it can be destroyed, after which it holds nothing.
snapshot() gives the JSON-ready state a browser needs to paint it.
"""
from __future__ import annotations

import logging
from collections import defaultdict
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, NamedTuple, Optional, Sequence

from .layout import Positions
from .models import AccountNode, TransferEdge
from .styles import tooltip_style

log = logging.getLogger(__name__)


class PointerEvent(NamedTuple):
    """Pointer position in viewport pixels, plus the node under it."""
    node: AccountNode
    x: float
    y: float


Handler = Callable[[PointerEvent], None]


class SurfaceDestroyedError(RuntimeError):
    pass


@dataclass(eq=False)
class TooltipOverlay:
    """A fixed-position overlay element living on the region's overlay layer."""
    region: "DisplayRegion" = field(repr=False)
    visible: bool = False
    markup: str = ""
    left: Optional[float] = None
    top: Optional[float] = None
    style: Dict[str, Any] = field(default_factory=tooltip_style)

    def show(self, markup: str) -> None:
        self.markup = markup
        self.visible = True

    def move_to(self, left: float, top: float) -> None:
        self.left = left
        self.top = top

    def hide(self) -> None:
        self.visible = False

    @property
    def attached(self) -> bool:
        return self in self.region.overlays

    def as_dict(self) -> Dict[str, Any]:
        return {
            "visible": self.visible,
            "markup": self.markup,
            "left": self.left,
            "top": self.top,
            "style": self.style,
        }

    def remove(self) -> None:
        if self.attached:
            self.region.overlays.remove(self)
        self.visible = False


@dataclass(eq=False)
class DisplayRegion:
    """
    The container the surface renders into. A region that is not attached
    yet (e.g. before its host is laid out) cannot receive a surface.
    """
    width: float = 800.0
    height: float = 520.0
    attached: bool = True
    overlays: List[TooltipOverlay] = field(default_factory=list)

    def create_overlay(self) -> TooltipOverlay:
        overlay = TooltipOverlay(self)
        self.overlays.append(overlay)
        return overlay


class RenderingSurface:
    def __init__(
        self,
        region: DisplayRegion,
        nodes: Sequence[AccountNode],
        edges: Sequence[TransferEdge],
        style: List[Dict[str, Any]],
        positions: Positions,
        min_zoom: float,
        max_zoom: float,
        wheel_sensitivity: float = 1.0,
    ):
        if not region.attached:
            raise ValueError("Display region is not attached")
        self.region = region
        self.nodes: Dict[str, AccountNode] = {n.id: n for n in nodes}
        self.edges: List[TransferEdge] = list(edges)
        self.style = style
        self.positions = positions
        self.min_zoom = min_zoom
        self.max_zoom = max_zoom
        self.wheel_sensitivity = wheel_sensitivity
        self.destroyed = False
        self._handlers: Dict[tuple, List[Handler]] = defaultdict(list)

    def on(self, event: str, selector: str, handler: Handler) -> None:
        self._check_alive()
        self._handlers[(event, selector)].append(handler)

    def handler_count(self) -> int:
        return sum(len(h) for h in self._handlers.values())

    def emit(self, event: str, node_id: str, x: float, y: float) -> None:
        """Deliver a pointer event on a node to every matching handler."""
        self._check_alive()
        node = self.nodes.get(node_id)
        if node is None:
            log.debug("Pointer event %s on unknown node %s ignored", event, node_id)
            return
        for handler in list(self._handlers.get((event, "node"), [])):
            handler(PointerEvent(node, x, y))

    def destroy(self) -> None:
        if self.destroyed:
            return
        self._handlers.clear()
        self.nodes = {}
        self.edges = []
        self.positions = {}
        self.destroyed = True

    def snapshot(self) -> Dict[str, Any]:
        self._check_alive()
        nodes = []
        for node_id, node in self.nodes.items():
            x, y = self.positions.get(node_id, (0.0, 0.0))
            nodes.append({**node.model_dump(), "x": x, "y": y})
        return {
            "nodes": nodes,
            "edges": [e.model_dump(by_alias=True) for e in self.edges],
            "style": self.style,
            "zoom": {
                "min": self.min_zoom,
                "max": self.max_zoom,
                "wheel_sensitivity": self.wheel_sensitivity,
            },
        }

    def _check_alive(self) -> None:
        if self.destroyed:
            raise SurfaceDestroyedError("Rendering surface has been destroyed")
