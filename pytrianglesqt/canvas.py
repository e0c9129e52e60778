"""PyQtGraph canvas that draws and animates data-bound triangles.

The canvas applies ``RenderPlan`` instructions produced by ``RenderSync``:
created shapes appear immediately, updated shapes morph to their new
geometry over ``ShapeStyle.transition_ms`` and removed shapes are dropped.
Each shape reports hover and left-click through pyqtgraph's scene event
protocol (``hoverEvent`` / ``mouseClickEvent``).

Typical usage:

    canvas = TriangleCanvas()
    canvas.shapeClicked.connect(on_click)
    canvas.transitionStarted.connect(swap_cue.play)
    canvas.apply_plan(sync.plan(items, scales))

Google-style docstrings + PEP8.
"""

from __future__ import annotations

import logging
from functools import partial
from typing import Callable, Dict, List, Optional

import pyqtgraph as pg
from PySide6 import QtCore, QtGui, QtWidgets
from PySide6.QtCore import Signal
from PySide6.QtWidgets import QVBoxLayout, QWidget

from .geometry import interpolate_triangle
from .models import CanvasConfig, ShapeStyle, Triangle
from .render_sync import HSL, RenderPlan, ShapeSpec

logger = logging.getLogger(__name__)


def hsl_to_qcolor(hsl: HSL) -> QtGui.QColor:
    """Convert (hue degrees, saturation, lightness) into a QColor."""
    hue, saturation, lightness = hsl
    return QtGui.QColor.fromHslF((hue % 360.0) / 360.0, saturation, lightness)


def triangle_polygon(triangle: Triangle) -> QtGui.QPolygonF:
    return QtGui.QPolygonF([QtCore.QPointF(x, y) for x, y in triangle.points()])


class TriangleItem(QtWidgets.QGraphicsPolygonItem):
    """One triangle shape bound to the item at ``index``."""

    def __init__(
        self,
        spec: ShapeSpec,
        style: ShapeStyle,
        on_click: Optional[Callable[[int], None]] = None,
    ) -> None:
        super().__init__()
        self.index = spec.index
        self._style = style
        self._on_click = on_click
        self._fill = spec.fill
        self._hover_fill = spec.hover_fill
        self._hovered = False
        self._selected = False
        self._triangle = spec.triangle

        self.setAcceptHoverEvents(True)
        self.set_triangle(spec.triangle)
        self._apply_fill()
        self._apply_stroke()

    @property
    def triangle(self) -> Triangle:
        """Geometry currently on screen (mid-transition values included)."""
        return self._triangle

    @property
    def hovered(self) -> bool:
        return self._hovered

    @property
    def selected(self) -> bool:
        return self._selected

    def set_triangle(self, triangle: Triangle) -> None:
        self._triangle = triangle
        self.setPolygon(triangle_polygon(triangle))

    def set_fills(self, fill: HSL, hover_fill: HSL) -> None:
        self._fill = fill
        self._hover_fill = hover_fill
        self._apply_fill()

    def set_selected(self, selected: bool) -> None:
        self._selected = bool(selected)
        self._apply_stroke()

    def fill_qcolor(self) -> QtGui.QColor:
        return hsl_to_qcolor(self._hover_fill if self._hovered else self._fill)

    def _apply_fill(self) -> None:
        self.setBrush(pg.mkBrush(self.fill_qcolor()))

    def _apply_stroke(self) -> None:
        if self._selected:
            pen = pg.mkPen(
                color=self._style.selected_stroke_color,
                width=self._style.selected_stroke_width,
            )
        else:
            pen = pg.mkPen(color=self._style.stroke_color, width=self._style.stroke_width)
        self.setPen(pen)

    # pyqtgraph scene events

    def hoverEvent(self, ev) -> None:
        if ev.isEnter():
            self._hovered = True
            self._apply_fill()
        elif ev.isExit():
            self._hovered = False
            self._apply_fill()

    def mouseClickEvent(self, ev) -> None:
        if ev.button() != QtCore.Qt.LeftButton:
            return
        ev.accept()
        if self._on_click is not None:
            self._on_click(self.index)


class TriangleCanvas(QWidget):
    """Fixed-size drawing surface holding one ``TriangleItem`` per data item.

    Attributes:
        shapeClicked: Emitted with the item index when a shape is left-clicked.
        transitionStarted: Emitted once when an update transition starts.
        transitionFinished: Emitted when an update transition completes.
    """

    shapeClicked = Signal(int)
    transitionStarted = Signal()
    transitionFinished = Signal()

    def __init__(
        self,
        config: CanvasConfig = CanvasConfig(),
        style: ShapeStyle = ShapeStyle(),
        parent: Optional[QWidget] = None,
    ) -> None:
        """Initialize the canvas.

        Args:
            config: Surface size and margins.
            style: Stroke, fill and transition styling.
            parent: Parent widget.
        """
        super().__init__(parent)
        self._config = config
        self._style = style
        self._shapes: Dict[int, TriangleItem] = {}
        self._animation: Optional[QtCore.QParallelAnimationGroup] = None

        self._build_ui()

    def _build_ui(self) -> None:
        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)

        self.view = pg.GraphicsView(background="w")
        self.view_box = pg.ViewBox(
            enableMouse=False,
            enableMenu=False,
            invertY=True,  # canvas y grows downward
            defaultPadding=0.0,
        )
        self.view.setCentralItem(self.view_box)
        self.view_box.setRange(
            xRange=(0.0, self._config.outer_width),
            yRange=(0.0, self._config.outer_height),
            padding=0.0,
        )
        self.view.setFixedSize(
            int(self._config.outer_width), int(self._config.outer_height)
        )
        layout.addWidget(self.view)

    @property
    def config(self) -> CanvasConfig:
        return self._config

    @property
    def style(self) -> ShapeStyle:
        return self._style

    def shape_item(self, index: int) -> Optional[TriangleItem]:
        return self._shapes.get(index)

    def shape_indices(self) -> List[int]:
        return sorted(self._shapes)

    @property
    def animation(self) -> Optional[QtCore.QParallelAnimationGroup]:
        """The running or most recent update transition, if any."""
        return self._animation

    def is_animating(self) -> bool:
        return (
            self._animation is not None
            and self._animation.state() == QtCore.QAbstractAnimation.Running
        )

    def apply_plan(self, plan: RenderPlan) -> None:
        """Create, animate and remove shapes as the plan instructs."""
        for index in plan.remove:
            item = self._shapes.pop(index, None)
            if item is not None:
                self.view_box.removeItem(item)

        for spec in plan.create:
            self._create_shape(spec)

        if plan.update:
            self._start_transition(plan.update)

    def set_selected(self, index: int, selected: bool) -> None:
        """Toggle the highlighted stroke on one shape."""
        item = self._shapes.get(index)
        if item is not None:
            item.set_selected(selected)

    def clear(self) -> None:
        """Remove every shape and stop any running transition."""
        self._stop_transition()
        for item in self._shapes.values():
            self.view_box.removeItem(item)
        self._shapes.clear()

    def _create_shape(self, spec: ShapeSpec) -> TriangleItem:
        item = TriangleItem(spec, self._style, on_click=self.shapeClicked.emit)
        left, top = self._config.offset
        item.setPos(left, top)
        self.view_box.addItem(item)
        self._shapes[spec.index] = item
        return item

    def _start_transition(self, specs) -> None:
        # Restart from whatever is on screen if a previous transition is running.
        self._stop_transition()

        group = QtCore.QParallelAnimationGroup(self)
        for spec in specs:
            item = self._shapes.get(spec.index)
            if item is None:
                continue
            item.set_fills(spec.fill, spec.hover_fill)
            item.set_selected(False)

            anim = QtCore.QVariantAnimation(group)
            anim.setStartValue(0.0)
            anim.setEndValue(1.0)
            anim.setDuration(max(0, int(self._style.transition_ms)))
            anim.setEasingCurve(QtCore.QEasingCurve.InOutCubic)
            anim.valueChanged.connect(
                partial(self._on_frame, item, item.triangle, spec.triangle)
            )
            group.addAnimation(anim)

        group.stateChanged.connect(self._on_transition_state)
        group.finished.connect(self._on_transition_finished)
        self._animation = group
        logger.debug("Starting %d-shape transition", group.animationCount())
        group.start()

    def _stop_transition(self) -> None:
        if self._animation is None:
            return
        group = self._animation
        self._animation = None
        group.stop()
        group.deleteLater()

    def _on_frame(self, item: TriangleItem, start: Triangle, end: Triangle, t) -> None:
        item.set_triangle(interpolate_triangle(start, end, float(t)))

    def _on_transition_state(self, new_state, old_state) -> None:
        if (
            new_state == QtCore.QAbstractAnimation.Running
            and old_state == QtCore.QAbstractAnimation.Stopped
        ):
            self.transitionStarted.emit()

    def _on_transition_finished(self) -> None:
        self.transitionFinished.emit()
