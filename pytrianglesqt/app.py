"""Main window wiring the swap session, canvas and sound cues together."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional, Sequence

from PySide6 import QtWidgets

from .audio import SoundCue
from .canvas import TriangleCanvas
from .dataset import load_dataset
from .models import DatasetError, ShapeStyle
from .render_sync import RenderSync
from .session import EffectKind, SelectionOutcome, SwapSession

logger = logging.getLogger(__name__)

# Cue files looked up beside the data file when no path is given
CLICK_SOUND = "click.wav"
SWAP_SOUND = "swap.wav"


class TriangleSwapWindow(QtWidgets.QMainWindow):
    """Window showing the triangles of one ``SwapSession``.

    Clicks are forwarded to ``SwapSession.select``; the returned effects drive
    stroke highlighting, the selection cue and the animated re-render after a
    swap. The swap cue plays when the canvas transition starts.
    """

    def __init__(
        self,
        session: SwapSession,
        click_cue: Optional[SoundCue] = None,
        swap_cue: Optional[SoundCue] = None,
        style: ShapeStyle = ShapeStyle(),
        parent: Optional[QtWidgets.QWidget] = None,
    ) -> None:
        super().__init__(parent)
        self.setWindowTitle("Triangle Swap")

        self.session = session
        self.sync = RenderSync()
        self._style = style

        self.click_cue = click_cue if click_cue is not None else SoundCue(parent=self)
        self.swap_cue = swap_cue if swap_cue is not None else SoundCue(parent=self)

        self.canvas = TriangleCanvas(session.canvas, style)
        self.setCentralWidget(self.canvas)

        self.canvas.shapeClicked.connect(self._on_shape_clicked)
        self.canvas.transitionStarted.connect(self.swap_cue.play)

        self.render()
        self._update_status()

    def render(self) -> None:
        """Reconcile the canvas with the session's current items."""
        plan = self.sync.plan(self.session.items, self.session.scales, self._style)
        self.canvas.apply_plan(plan)

    def _on_shape_clicked(self, index: int) -> None:
        self.apply_outcome(self.session.select(index))

    def apply_outcome(self, outcome: SelectionOutcome) -> None:
        """Translate session effects into canvas and audio side effects."""
        for effect in outcome.effects:
            if effect.kind is EffectKind.SELECT:
                for index in effect.indices:
                    self.canvas.set_selected(index, True)
                self.click_cue.play()
            elif effect.kind is EffectKind.DESELECT:
                for index in effect.indices:
                    self.canvas.set_selected(index, False)
            elif effect.kind is EffectKind.SWAP:
                self.render()
        self._update_status()

    def _update_status(self) -> None:
        selected = ", ".join(str(i) for i in self.session.selected) or "none"
        self.statusBar().showMessage(
            f"Selected: {selected}    Swaps: {self.session.swap_count}"
        )


def cue_path(explicit: Optional[Path], data: Path, name: str) -> Path:
    """Return ``explicit`` if given, else ``name`` in the data file's directory."""
    if explicit is not None:
        return explicit
    return Path(data).parent / name


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pytrianglesqt",
        description="Draw ten data-bound triangles and swap base/height by clicking pairs.",
    )
    parser.add_argument(
        "data",
        nargs="?",
        default="triangles.json",
        type=Path,
        help="JSON array of 10 records with x, y, base, height, hue (default: %(default)s)",
    )
    parser.add_argument(
        "--click-sound",
        type=Path,
        default=None,
        help=f"WAV played on selection (default: {CLICK_SOUND} next to the data file)",
    )
    parser.add_argument(
        "--swap-sound",
        type=Path,
        default=None,
        help=f"WAV played when a swap animates (default: {SWAP_SOUND} next to the data file)",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity (default: %(default)s)",
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    try:
        items = load_dataset(args.data)
        session = SwapSession(items)
    except DatasetError as e:
        logger.error("%s", e)
        return 2

    qt_args: List[str] = [sys.argv[0]]
    app = QtWidgets.QApplication.instance() or QtWidgets.QApplication(qt_args)
    window = TriangleSwapWindow(
        session,
        click_cue=SoundCue(cue_path(args.click_sound, args.data, CLICK_SOUND)),
        swap_cue=SoundCue(cue_path(args.swap_sound, args.data, SWAP_SOUND)),
    )
    window.show()
    return app.exec()
