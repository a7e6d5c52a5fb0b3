from __future__ import annotations
import heapq
import itertools
from typing import Any, Callable, List, Optional, Tuple


class TimerHandle:
    """
    Handle returned by Scheduler.call_later / call_every.
    Cancelling is idempotent; a cancelled timer never fires again.
    """

    def __init__(self, due_ms: float, interval_ms: Optional[float],
                 callback: Callable[..., Any], args: Tuple[Any, ...]):
        self.due_ms = due_ms
        self.interval_ms = interval_ms
        self.callback = callback
        self.args = args
        self.cancelled = False
        self.fired = False

    @property
    def periodic(self) -> bool:
        return self.interval_ms is not None

    @property
    def active(self) -> bool:
        """True until the timer is cancelled or, for one-shots, has fired."""
        return not self.cancelled and not self.fired

    def cancel(self) -> None:
        self.cancelled = True

    def __repr__(self) -> str:
        state = "cancelled" if self.cancelled else f"due={self.due_ms:g}"
        return f"<TimerHandle {getattr(self.callback, '__name__', self.callback)} {state}>"


class Scheduler:
    """
    Cooperative virtual-time clock.

    Nothing runs on its own: the host calls advance(dt_ms) (the game loop does it
    once per frame with the pygame clock delta) and every timer that became due
    fires in due-time order, ties in registration order. While a callback runs,
    now_ms is that timer's due time, so timers created from inside callbacks are
    relative to the instant they were created at.
    """

    def __init__(self, start_ms: float = 0):
        self._now_ms = float(start_ms)
        self._seq = itertools.count()
        # (due_ms, seq, handle)
        self._queue: List[Tuple[float, int, TimerHandle]] = []

    @property
    def now_ms(self) -> float:
        return self._now_ms

    @property
    def pending(self) -> int:
        return sum(1 for _, _, h in self._queue if h.active)

    def call_later(self, delay_ms: float, callback: Callable[..., Any], *args: Any) -> TimerHandle:
        handle = TimerHandle(self._now_ms + max(0.0, float(delay_ms)), None, callback, args)
        self._push(handle)
        return handle

    def call_every(self, period_ms: float, callback: Callable[..., Any], *args: Any) -> TimerHandle:
        if period_ms <= 0:
            raise ValueError(f"period_ms must be positive, got {period_ms}")
        handle = TimerHandle(self._now_ms + float(period_ms), float(period_ms), callback, args)
        self._push(handle)
        return handle

    def advance(self, dt_ms: float) -> int:
        """Move the clock forward by dt_ms, firing due timers. Returns the number fired."""
        if dt_ms < 0:
            raise ValueError(f"cannot move the clock backwards (dt_ms={dt_ms})")
        target = self._now_ms + float(dt_ms)
        fired = 0
        while self._queue and self._queue[0][0] <= target:
            due, _, handle = heapq.heappop(self._queue)
            if handle.cancelled:
                continue
            self._now_ms = due
            if handle.periodic:
                # re-arm before running so the callback may cancel its own handle
                handle.due_ms = due + handle.interval_ms
                self._push(handle)
            else:
                handle.fired = True
            handle.callback(*handle.args)
            fired += 1
        self._now_ms = target
        return fired

    def cancel_all(self) -> None:
        for _, _, handle in self._queue:
            handle.cancel()
        self._queue.clear()

    def _push(self, handle: TimerHandle) -> None:
        heapq.heappush(self._queue, (handle.due_ms, next(self._seq), handle))
