"""Keyed reconciliation between rendered shapes and the current dataset.

Shapes are keyed by item index. Each call to ``RenderSync.plan`` compares
the keys drawn last time with the current items and produces:

  - create: new keys, drawn immediately without a transition
  - update: existing keys, animated to their new geometry and fill
  - remove: keys no longer present

With the fixed ten-item dataset the first plan is all creates and every
later plan is all updates.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Sequence, Set, Tuple

from .geometry import build_triangle, fill_hsl
from .models import DataItem, ShapeStyle, Triangle
from .scales import ScaleSet

logger = logging.getLogger(__name__)

HSL = Tuple[float, float, float]  # (hue degrees, saturation, lightness)


@dataclass(frozen=True)
class ShapeSpec:
    """Everything the canvas needs to draw one item."""

    index: int
    triangle: Triangle
    fill: HSL
    hover_fill: HSL


@dataclass(frozen=True)
class RenderPlan:
    create: Tuple[ShapeSpec, ...] = ()
    update: Tuple[ShapeSpec, ...] = ()
    remove: Tuple[int, ...] = ()

    @property
    def is_empty(self) -> bool:
        return not (self.create or self.update or self.remove)


def shape_spec(
    index: int, item: DataItem, scales: ScaleSet, style: ShapeStyle = ShapeStyle()
) -> ShapeSpec:
    return ShapeSpec(
        index=index,
        triangle=build_triangle(item, scales),
        fill=fill_hsl(item, scales, style),
        hover_fill=fill_hsl(item, scales, style, hovered=True),
    )


class RenderSync:
    """Tracks which keys are on screen and diffs them against new data."""

    def __init__(self) -> None:
        self._rendered: Set[int] = set()

    @property
    def rendered_keys(self) -> List[int]:
        return sorted(self._rendered)

    def plan(
        self,
        items: Sequence[DataItem],
        scales: ScaleSet,
        style: ShapeStyle = ShapeStyle(),
    ) -> RenderPlan:
        """Diff the current items against what was rendered last time."""
        create: List[ShapeSpec] = []
        update: List[ShapeSpec] = []
        current = set(range(len(items)))

        for index, item in enumerate(items):
            spec = shape_spec(index, item, scales, style)
            if index in self._rendered:
                update.append(spec)
            else:
                create.append(spec)

        remove = tuple(sorted(self._rendered - current))
        self._rendered = current

        plan = RenderPlan(create=tuple(create), update=tuple(update), remove=remove)
        logger.debug(
            "Render plan: %d create, %d update, %d remove",
            len(plan.create),
            len(plan.update),
            len(plan.remove),
        )
        return plan

    def reset(self) -> None:
        """Forget rendered keys (e.g. after the canvas was cleared)."""
        self._rendered.clear()
