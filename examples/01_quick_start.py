#!/usr/bin/env python3
"""Quick start: draw the sample dataset and swap triangles by clicking pairs.

Click one triangle to select it (cyan outline), click a second one to swap
their base and height. Clicking a selected triangle again deselects it.

The bundled click.wav and swap.wav are used unless other WAV files are
passed as arguments:

    python 01_quick_start.py my_click.wav my_swap.wav
"""

import logging
import sys
from pathlib import Path

from PySide6 import QtWidgets

from pytrianglesqt import SwapSession, load_dataset
from pytrianglesqt.app import TriangleSwapWindow
from pytrianglesqt.audio import SoundCue

HERE = Path(__file__).resolve().parent


def main():
    logging.basicConfig(level=logging.INFO)
    app = QtWidgets.QApplication(sys.argv)

    session = SwapSession(load_dataset(HERE / "triangles.json"))
    click_path = sys.argv[1] if len(sys.argv) > 1 else HERE / "click.wav"
    swap_path = sys.argv[2] if len(sys.argv) > 2 else HERE / "swap.wav"

    window = TriangleSwapWindow(
        session,
        click_cue=SoundCue(click_path),
        swap_cue=SoundCue(swap_path),
    )
    window.canvas.transitionFinished.connect(
        lambda: print(f"Swap animated ({session.swap_count} so far)")
    )
    window.show()
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
