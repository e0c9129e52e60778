"""Selection and swap state for an interactive triangle session.

A ``SwapSession`` owns the data items, the scales derived from them and the
current selection. Each click is turned into a ``select(index)`` command
that returns the visual effects the rendering layer should apply:

    Idle --select(a)--> OneSelected --select(a)--> Idle          (DESELECT)
    Idle --select(a)--> OneSelected --select(b)--> [swap] -> Idle (SELECT, SWAP)

Reaching two selected items swaps their ``base`` and ``height`` values and
clears the selection within the same command, so the selection never rests
at size two.

Example usage:

    session = SwapSession(load_dataset("triangles.json"))
    outcome = session.select(3)
    if outcome.swapped:
        canvas.apply_plan(sync.plan(session.items, session.scales))
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Sequence, Tuple

from .models import CanvasConfig, DataItem, ScaleRanges, Triangle
from .geometry import build_triangle
from .scales import ScaleSet

logger = logging.getLogger(__name__)

MAX_SELECTED = 2


class SessionState(Enum):
    IDLE = "idle"
    ONE_SELECTED = "one_selected"


class EffectKind(Enum):
    SELECT = "select"  # highlight stroke + selection cue
    DESELECT = "deselect"  # restore default stroke
    SWAP = "swap"  # re-render all shapes with a transition


@dataclass(frozen=True)
class Effect:
    kind: EffectKind
    indices: Tuple[int, ...]


@dataclass(frozen=True)
class SelectionOutcome:
    """Effects produced by one ``select`` command, in the order they occurred."""

    effects: Tuple[Effect, ...] = ()
    selected: Tuple[int, ...] = ()

    @property
    def swapped(self) -> bool:
        return any(e.kind is EffectKind.SWAP for e in self.effects)

    def indices_for(self, kind: EffectKind) -> List[int]:
        out: List[int] = []
        for effect in self.effects:
            if effect.kind is kind:
                out.extend(effect.indices)
        return out


@dataclass
class SessionStats:
    """Interaction counters for a session."""

    selects: int = 0
    deselects: int = 0
    swaps: int = 0
    last_swap: Optional[Tuple[int, int]] = None

    def record(self, outcome: SelectionOutcome) -> None:
        for effect in outcome.effects:
            if effect.kind is EffectKind.SELECT:
                self.selects += 1
            elif effect.kind is EffectKind.DESELECT:
                self.deselects += 1
            elif effect.kind is EffectKind.SWAP:
                self.swaps += 1
                self.last_swap = (effect.indices[0], effect.indices[1])


def swap_dimensions(a: DataItem, b: DataItem) -> None:
    """Exchange ``base`` and ``height`` between two items in place."""
    a.base, b.base = b.base, a.base
    a.height, b.height = b.height, a.height


class SwapSession:
    """Owns items, scales and the in-progress selection.

    Scales are built once from the items passed in and never re-derived,
    even after swaps change base and height.
    """

    def __init__(
        self,
        items: Sequence[DataItem],
        canvas: CanvasConfig = CanvasConfig(),
        ranges: ScaleRanges = ScaleRanges(),
        scales: Optional[ScaleSet] = None,
    ) -> None:
        self._items: List[DataItem] = list(items)
        self._canvas = canvas
        self._scales = scales if scales is not None else ScaleSet.from_items(
            self._items, canvas, ranges
        )
        self._selected: List[int] = []
        self._stats = SessionStats()

    @property
    def items(self) -> List[DataItem]:
        return self._items

    @property
    def scales(self) -> ScaleSet:
        return self._scales

    @property
    def canvas(self) -> CanvasConfig:
        return self._canvas

    @property
    def selected(self) -> Tuple[int, ...]:
        return tuple(self._selected)

    @property
    def state(self) -> SessionState:
        return SessionState.ONE_SELECTED if self._selected else SessionState.IDLE

    @property
    def stats(self) -> SessionStats:
        return self._stats

    @property
    def swap_count(self) -> int:
        return self._stats.swaps

    def triangles(self) -> List[Triangle]:
        """Current geometry for every item, in index order."""
        return [build_triangle(item, self._scales) for item in self._items]

    def select(self, index: int) -> SelectionOutcome:
        """Process one click on the item at ``index``.

        Raises:
            IndexError: If ``index`` does not name an item.
        """
        if not 0 <= index < len(self._items):
            raise IndexError(
                f"Item index {index} out of range for {len(self._items)} items"
            )

        effects: List[Effect] = []

        if index in self._selected:
            self._selected.remove(index)
            effects.append(Effect(EffectKind.DESELECT, (index,)))
        elif len(self._selected) < MAX_SELECTED:
            self._selected.append(index)
            effects.append(Effect(EffectKind.SELECT, (index,)))

        if len(self._selected) == MAX_SELECTED:
            first, second = self._selected
            swap_dimensions(self._items[first], self._items[second])
            self._selected = []
            effects.append(Effect(EffectKind.SWAP, (first, second)))
            logger.info("Swapped base/height between items %d and %d", first, second)

        outcome = SelectionOutcome(effects=tuple(effects), selected=self.selected)
        self._stats.record(outcome)
        logger.debug(
            "select(%d) -> %s, selection=%s",
            index,
            [e.kind.value for e in outcome.effects],
            list(outcome.selected),
        )
        return outcome

    def clear_selection(self) -> SelectionOutcome:
        """Drop any in-progress selection without swapping."""
        effects = tuple(Effect(EffectKind.DESELECT, (i,)) for i in self._selected)
        self._selected = []
        outcome = SelectionOutcome(effects=effects)
        self._stats.record(outcome)
        return outcome
