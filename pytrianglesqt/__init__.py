from .models import (
    DataItem,
    DatasetError,
    Triangle,
    Margins,
    CanvasConfig,
    ScaleRanges,
    ShapeStyle,
    DATASET_SIZE,
)
from .scales import LinearScale, ScaleSet, build_scale
from .geometry import build_triangle, fill_color, interpolate_triangle
from .dataset import load_dataset, parse_records
from .session import (
    SwapSession,
    SessionState,
    SelectionOutcome,
    Effect,
    EffectKind,
    swap_dimensions,
)
from .render_sync import RenderSync, RenderPlan, ShapeSpec

__all__ = [
    "DataItem",
    "DatasetError",
    "Triangle",
    "Margins",
    "CanvasConfig",
    "ScaleRanges",
    "ShapeStyle",
    "DATASET_SIZE",
    # Scales + geometry
    "LinearScale",
    "ScaleSet",
    "build_scale",
    "build_triangle",
    "fill_color",
    "interpolate_triangle",
    # Data loading
    "load_dataset",
    "parse_records",
    # Selection / swap
    "SwapSession",
    "SessionState",
    "SelectionOutcome",
    "Effect",
    "EffectKind",
    "swap_dimensions",
    # Render reconciliation
    "RenderSync",
    "RenderPlan",
    "ShapeSpec",
]
