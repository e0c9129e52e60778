"""Shared pytest fixtures.

Qt-based tests run on the offscreen platform plugin so no display is needed.
Core modules (scales, geometry, session, render sync, dataset) import no Qt.
"""

import os

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from pytrianglesqt.models import DataItem  # noqa: E402


SAMPLE_RECORDS = [
    {"x": 10, "y": 20, "base": 30, "height": 40, "hue": 50},
    {"x": 60, "y": 15, "base": 25, "height": 35, "hue": 120},
    {"x": 110, "y": 70, "base": 45, "height": 20, "hue": 200},
    {"x": 160, "y": 35, "base": 15, "height": 55, "hue": 260},
    {"x": 210, "y": 90, "base": 50, "height": 30, "hue": 300},
    {"x": 260, "y": 10, "base": 20, "height": 60, "hue": 20},
    {"x": 310, "y": 55, "base": 35, "height": 45, "hue": 90},
    {"x": 360, "y": 80, "base": 40, "height": 25, "hue": 150},
    {"x": 410, "y": 25, "base": 10, "height": 50, "hue": 330},
    {"x": 460, "y": 65, "base": 55, "height": 15, "hue": 360},
]


@pytest.fixture
def sample_records():
    """Ten raw records as they appear in the JSON data file."""
    return [dict(r) for r in SAMPLE_RECORDS]


@pytest.fixture
def sample_items():
    """Ten data items built from the sample records."""
    return [DataItem(**{k: float(v) for k, v in r.items()}) for r in SAMPLE_RECORDS]


@pytest.fixture
def two_items():
    """The minimal two-item dataset used by the swap scenarios."""
    return [
        DataItem(x=0, y=0, base=10, height=20, hue=0),
        DataItem(x=10, y=10, base=50, height=80, hue=300),
    ]


@pytest.fixture(scope="session")
def qapp():
    """A QApplication shared by every Qt test."""
    QtWidgets = pytest.importorskip("PySide6.QtWidgets")
    pytest.importorskip("pyqtgraph")
    app = QtWidgets.QApplication.instance() or QtWidgets.QApplication([])
    yield app
