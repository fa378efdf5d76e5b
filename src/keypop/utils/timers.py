from __future__ import annotations

import heapq
from dataclasses import dataclass, field
from typing import Callable, List, Tuple


@dataclass(slots=True)
class TimerHandle:
	"""Cancellable reference to a scheduled callback.

	Repeating timers keep the same handle across firings, so cancelling it
	stops every future firing.
	"""

	callback: Callable[[], None] = field(repr=False)
	interval: float | None = None
	due: float = 0.0
	cancelled: bool = False
	fired: int = 0

	@property
	def repeating(self) -> bool:
		return self.interval is not None

	@property
	def active(self) -> bool:
		return not self.cancelled and (self.repeating or self.fired == 0)

	def cancel(self) -> None:
		self.cancelled = True


@dataclass(slots=True)
class TimerScheduler:
	"""Runs callbacks on a virtual timeline advanced by frame deltas.

	``advance(dt)`` fires every due callback in due-time order; callbacks
	due at the same instant fire in the order they were scheduled. A callback
	may schedule or cancel timers; a timer cancelled during an advance never
	fires afterwards, including later in that same advance.
	"""

	now: float = 0.0
	_queue: List[Tuple[float, int, TimerHandle]] = field(init=False, default_factory=list, repr=False)
	_sequence: int = field(init=False, default=0, repr=False)

	def call_later(self, delay: float, callback: Callable[[], None]) -> TimerHandle:
		handle = TimerHandle(callback=callback)
		self._push(handle, self.now + max(0.0, float(delay)))
		return handle

	def call_every(self, interval: float, callback: Callable[[], None]) -> TimerHandle:
		interval = float(interval)
		if interval <= 0.0:
			raise ValueError(f"interval must be positive, got {interval!r}")
		handle = TimerHandle(callback=callback, interval=interval)
		self._push(handle, self.now + interval)
		return handle

	def advance(self, dt: float) -> int:
		"""Move the timeline forward by ``dt`` seconds; returns the number of callbacks fired."""
		target = self.now + max(0.0, float(dt))
		fired = 0
		while self._queue:
			due, _, handle = self._queue[0]
			if due > target:
				break
			heapq.heappop(self._queue)
			if handle.cancelled:
				continue
			self.now = max(self.now, due)
			handle.fired += 1
			if handle.repeating:
				self._push(handle, due + handle.interval)
			handle.callback()
			fired += 1
		self.now = target
		return fired

	def cancel_all(self) -> None:
		for _, _, handle in self._queue:
			handle.cancel()
		self._queue.clear()

	@property
	def pending(self) -> int:
		return sum(1 for _, _, handle in self._queue if not handle.cancelled)

	def _push(self, handle: TimerHandle, due: float) -> None:
		handle.due = due
		self._sequence += 1
		heapq.heappush(self._queue, (due, self._sequence, handle))
