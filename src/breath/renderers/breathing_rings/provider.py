from __future__ import annotations

from typing import Callable

import reactivex
from reactivex import operators as ops

from breath.renderers.breathing_rings.state import FrameState
from breath.runtime.providers import ObservableProvider
from breath.runtime.streams import FrameStreams
from breath.utilities.env import Configuration

Transition = Callable[[FrameState], FrameState]


def _advance(state: FrameState) -> FrameState:
    return state.advance()


def _resize_to(size: tuple[int, int]) -> Transition:
    width, height = size

    def resize(state: FrameState) -> FrameState:
        return state.resized(width, height)

    return resize


class FrameStateProvider(ObservableProvider[FrameState]):
    """Fold frame ticks and window resizes into ``FrameState`` snapshots.

    The counter starts at zero and each ``game_tick`` advances it by exactly
    one, so the state a renderer sees during frame ``n`` has ``t == n``.
    Resizes only replace the canvas dimensions.

    """

    def __init__(
        self,
        streams: FrameStreams,
        default_size: tuple[int, int] | None = None,
    ) -> None:
        self._streams = streams
        self._default_size = default_size

    def _initial_state(self) -> FrameState:
        size = (
            self._streams.current_window_size
            or self._default_size
            or Configuration.window_size()
        )
        return FrameState(width=size[0], height=size[1])

    def observable(self) -> reactivex.Observable[FrameState]:
        initial_state = self._initial_state()

        ticks = self._streams.game_tick.pipe(ops.map(lambda _frame: _advance))
        resizes = self._streams.window_size.pipe(
            ops.filter(lambda size: size is not None),
            ops.distinct_until_changed(),
            ops.map(_resize_to),
        )

        return reactivex.merge(ticks, resizes).pipe(
            ops.scan(lambda state, transition: transition(state), seed=initial_state),
            ops.start_with(initial_state),
            ops.share(),
        )
