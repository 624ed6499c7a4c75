from __future__ import annotations

import itertools
from typing import Callable

from reactivex.disposable import Disposable

from cubefield.utilities.logging import get_logger

logger = get_logger(__name__)

FrameCallback = Callable[[], None]


class FrameScheduler:
    """Run callbacks once before the next presented frame.

    Callbacks requested while a frame is running are deferred to the frame
    after it, so a callback that re-requests itself runs once per frame.
    """

    def __init__(self) -> None:
        self._handles = itertools.count(1)
        self._pending: dict[int, FrameCallback] = {}

    def request_frame(self, callback: FrameCallback) -> Disposable:
        handle = next(self._handles)
        self._pending[handle] = callback
        return Disposable(lambda: self.cancel_frame(handle))

    def cancel_frame(self, handle: int) -> None:
        self._pending.pop(handle, None)

    def pending_count(self) -> int:
        return len(self._pending)

    def run_frame(self) -> int:
        due, self._pending = self._pending, {}
        for callback in due.values():
            callback()
        return len(due)
