"""Looping frame sequences for animated sprites."""

from __future__ import annotations

from typing import Generic, Iterable, TypeVar

T = TypeVar("T")


class Animation(Generic[T]):
    """A cycle of frames that advances one frame each time it is drawn."""

    def __init__(self, frames: Iterable[T]) -> None:
        self._frames = tuple(frames)
        if not self._frames:
            raise ValueError("an animation needs at least one frame")
        self._index = 0

    @property
    def frames(self) -> tuple[T, ...]:
        return self._frames

    def __len__(self) -> int:
        return len(self._frames)

    def next_frame(self) -> T:
        """Return the current frame and move on, wrapping after the last."""
        frame = self._frames[self._index]
        self._index = (self._index + 1) % len(self._frames)
        return frame

    def reset(self) -> None:
        """Go back to the first frame."""
        self._index = 0