"""Linear scales mapping data domains onto canvas ranges.

Five scales are built once per dataset load:

    x       [min(x) - maxBase/2, max(x) + maxBase/2]  ->  [0, width]
    y       [min(y), max(y) + maxHeight]              ->  [0, height]
    base    [0, max(base)]                            ->  [10, 150]
    height  [0, max(height)]                          ->  [10, 150]
    hue     [0, max(hue)]                             ->  [0, 360]

The x/y padding keeps every triangle inside the drawing area. Domains are
not recomputed when swaps change base/height, so the visual ranges stay
stable for the lifetime of a session.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Sequence, Tuple, Union

import numpy as np

from .models import CanvasConfig, DataItem, DatasetError, ScaleRanges

logger = logging.getLogger(__name__)

Number = Union[float, np.ndarray]


@dataclass(frozen=True)
class LinearScale:
    """Linear interpolation from ``domain`` onto ``range``.

    Values outside the domain extrapolate (no clamping). A degenerate domain
    (min == max) maps every value to the midpoint of the range.
    """

    domain: Tuple[float, float]
    range: Tuple[float, float]

    @property
    def is_degenerate(self) -> bool:
        return self.domain[0] == self.domain[1]

    def __call__(self, value: Number) -> Number:
        d0, d1 = self.domain
        r0, r1 = self.range
        if self.is_degenerate:
            mid = r0 + (r1 - r0) / 2.0
            if isinstance(value, np.ndarray):
                return np.full(value.shape, mid, dtype=np.float64)
            return mid
        t = (value - d0) / (d1 - d0)
        return r0 + t * (r1 - r0)

    def invert(self, output: Number) -> Number:
        """Map a range value back into the domain."""
        d0, d1 = self.domain
        r0, r1 = self.range
        if self.is_degenerate or r0 == r1:
            if isinstance(output, np.ndarray):
                return np.full(output.shape, d0, dtype=np.float64)
            return d0
        t = (output - r0) / (r1 - r0)
        return d0 + t * (d1 - d0)


def build_scale(
    domain_min: float, domain_max: float, range_min: float, range_max: float
) -> LinearScale:
    """Create a linear scale from explicit domain and range bounds."""
    return LinearScale(
        domain=(float(domain_min), float(domain_max)),
        range=(float(range_min), float(range_max)),
    )


@dataclass(frozen=True)
class ScaleSet:
    """The five attribute scales used to draw a dataset."""

    x: LinearScale
    y: LinearScale
    base: LinearScale
    height: LinearScale
    hue: LinearScale

    @classmethod
    def from_items(
        cls,
        items: Sequence[DataItem],
        canvas: CanvasConfig = CanvasConfig(),
        ranges: ScaleRanges = ScaleRanges(),
    ) -> ScaleSet:
        """Derive domains from the full dataset.

        Raises:
            DatasetError: If ``items`` is empty.
        """
        if len(items) == 0:
            raise DatasetError("Cannot build scales from an empty dataset")

        xs = np.array([item.x for item in items], dtype=np.float64)
        ys = np.array([item.y for item in items], dtype=np.float64)
        bases = np.array([item.base for item in items], dtype=np.float64)
        heights = np.array([item.height for item in items], dtype=np.float64)
        hues = np.array([item.hue for item in items], dtype=np.float64)

        max_base = float(np.max(bases))
        max_height = float(np.max(heights))
        padding_base = max_base / 2.0
        padding_height = max_height

        size_lo, size_hi = ranges.size
        hue_lo, hue_hi = ranges.hue

        scales = cls(
            x=build_scale(
                float(np.min(xs)) - padding_base,
                float(np.max(xs)) + padding_base,
                0.0,
                canvas.width,
            ),
            y=build_scale(
                float(np.min(ys)), float(np.max(ys)) + padding_height, 0.0, canvas.height
            ),
            base=build_scale(0.0, max_base, size_lo, size_hi),
            height=build_scale(0.0, max_height, size_lo, size_hi),
            hue=build_scale(0.0, float(np.max(hues)), hue_lo, hue_hi),
        )

        for name in ("x", "y", "base", "height", "hue"):
            scale = getattr(scales, name)
            if scale.is_degenerate:
                logger.warning(
                    "Degenerate %s domain %s; values map to the range midpoint",
                    name,
                    scale.domain,
                )
        logger.debug("Built scales: %s", scales)
        return scales
