from __future__ import annotations

from reactivex.subject import BehaviorSubject, Subject


class FrameStreams:
    """Reactive signals published by the runtime once per loop iteration."""

    def __init__(self) -> None:
        self.game_tick: Subject[int] = Subject()
        self.window_size: BehaviorSubject[tuple[int, int] | None] = BehaviorSubject(
            None
        )

    @property
    def current_window_size(self) -> tuple[int, int] | None:
        return self.window_size.value

    def publish_tick(self, frame_index: int) -> None:
        self.game_tick.on_next(frame_index)

    def publish_window_size(self, width: int, height: int) -> None:
        self.window_size.on_next((width, height))
