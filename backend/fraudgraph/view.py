"""
view.py – Graph view controller: owns one rendering surface per display region.

Lifecycle
---------
update(nodes, edges)
    1. tear down the current surface and its tooltip overlay (if any)
    2. region not attached → stop; the next update retries
    3. sample to the node budget
    4. lay out, acquire the tooltip overlay, build the surface, wire handlers

unmount()
    unconditional teardown; safe to call repeatedly

The overlay and surface are registered on an ExitStack as they are acquired,
so a failure half-way through construction still releases whatever was
already created, and teardown releases both in reverse order.

Hover state machine
-------------------
    Idle --mouseover(node)--> Hovering(node)
    Hovering --mousemove--> Hovering (position only)
    Hovering --mouseout--> Idle
"""
from __future__ import annotations

import logging
from contextlib import ExitStack
from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional, Sequence

from .config import (
    GRAPH_NODE_BUDGET, GRAPH_MIN_ZOOM, GRAPH_MAX_ZOOM, GRAPH_WHEEL_SENSITIVITY,
    TOOLTIP_OFFSET_PX,
)
from .layout import LayoutConfig, Positions, compute_layout
from .models import AccountNode, TransferEdge
from .sampler import SampledGraph, sample
from .styles import graph_stylesheet
from .surface import DisplayRegion, PointerEvent, RenderingSurface, TooltipOverlay
from .tooltip import format_tooltip

log = logging.getLogger(__name__)

LayoutFn = Callable[[Sequence[AccountNode], Sequence[TransferEdge], LayoutConfig], Positions]
SurfaceFactory = Callable[..., RenderingSurface]


@dataclass
class HoverState:
    node_id: Optional[str] = None
    x: Optional[float] = None
    y: Optional[float] = None

    @property
    def hovering(self) -> bool:
        return self.node_id is not None

    def enter(self, node_id: str, x: float, y: float) -> None:
        self.node_id, self.x, self.y = node_id, x, y

    def move(self, x: float, y: float) -> bool:
        """Record a new pointer position; ignored while idle."""
        if not self.hovering:
            return False
        self.x, self.y = x, y
        return True

    def clear(self) -> None:
        self.node_id = self.x = self.y = None


class GraphViewController:
    def __init__(
        self,
        region: DisplayRegion,
        budget: int = GRAPH_NODE_BUDGET,
        layout: LayoutFn = compute_layout,
        layout_config: Optional[LayoutConfig] = None,
        surface_factory: SurfaceFactory = RenderingSurface,
    ):
        self.region = region
        self.budget = budget
        self.layout = layout
        self.layout_config = layout_config or LayoutConfig()
        self.surface_factory = surface_factory
        self.surface: Optional[RenderingSurface] = None
        self.tooltip: Optional[TooltipOverlay] = None
        self.sampled: Optional[SampledGraph] = None
        self.hover = HoverState()
        self._resources: Optional[ExitStack] = None

    # ── Lifecycle ─────────────────────────────────────────────────────────────

    def update(
        self,
        nodes: Sequence[AccountNode],
        edges: Sequence[TransferEdge],
    ) -> Optional[RenderingSurface]:
        """Rebuild the surface for a new node/edge set."""
        self.teardown()

        if not self.region.attached:
            log.debug("Display region not attached; deferring graph build")
            return None

        sampled = sample(nodes, edges, self.budget)
        positions = self.layout(sampled.nodes, sampled.edges, self.layout_config)

        with ExitStack() as stack:
            tooltip = self.region.create_overlay()
            stack.callback(tooltip.remove)

            surface = self.surface_factory(
                self.region,
                sampled.nodes,
                sampled.edges,
                graph_stylesheet(),
                positions,
                min_zoom=GRAPH_MIN_ZOOM,
                max_zoom=GRAPH_MAX_ZOOM,
                wheel_sensitivity=GRAPH_WHEEL_SENSITIVITY,
            )
            stack.callback(surface.destroy)

            surface.on("mouseover", "node", self._on_enter)
            surface.on("mousemove", "node", self._on_move)
            surface.on("mouseout", "node", self._on_leave)

            self._resources = stack.pop_all()

        self.surface = surface
        self.tooltip = tooltip
        self.sampled = sampled
        log.info(
            "Graph surface built: %d nodes, %d edges",
            len(sampled.nodes), len(sampled.edges),
        )
        return surface

    def teardown(self) -> None:
        """Release the surface, its handlers and the tooltip overlay."""
        self.hover.clear()
        if self._resources is not None:
            resources, self._resources = self._resources, None
            resources.close()
            log.debug("Graph surface torn down")
        self.surface = None
        self.tooltip = None
        self.sampled = None

    unmount = teardown

    @property
    def mounted(self) -> bool:
        return self.surface is not None

    def snapshot(self) -> Dict[str, Any]:
        """Paintable state of the current surface; an empty graph when none is mounted."""
        if self.surface is None:
            return {
                "nodes": [], "edges": [], "style": graph_stylesheet(), "zoom": {},
                "tooltip": None,
            }
        return {**self.surface.snapshot(), "tooltip": self.tooltip.as_dict()}

    # ── Interaction ───────────────────────────────────────────────────────────

    def _place_tooltip(self, x: float, y: float) -> None:
        self.tooltip.move_to(x + TOOLTIP_OFFSET_PX, y + TOOLTIP_OFFSET_PX)

    def _on_enter(self, event: PointerEvent) -> None:
        self.hover.enter(event.node.id, event.x, event.y)
        self.tooltip.show(format_tooltip(event.node))
        self._place_tooltip(event.x, event.y)
        log.debug("Hovering %s", event.node.id)

    def _on_move(self, event: PointerEvent) -> None:
        if self.hover.move(event.x, event.y):
            self._place_tooltip(event.x, event.y)

    def _on_leave(self, event: PointerEvent) -> None:
        self.hover.clear()
        self.tooltip.hide()
