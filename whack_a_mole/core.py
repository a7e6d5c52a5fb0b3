"""
Whack-a-mole session state machine.

Three timers drive the game, all registered on the host Scheduler:
- spawn ticker (spawn_interval_ms): pops a mole into a random empty hole
- despawn timer (one per mole): show_time_ms after a spawn, or hit_despawn_ms after a hit
- countdown ticker (1s): ends the session when time runs out

Session: Idle -> Running -> Ended, and start() from either Idle or Ended
(or Running, as a restart) goes back to Running.
"""
from __future__ import annotations
import logging
import random
from typing import Callable, List, Optional

from engine.timing.scheduler import Scheduler, TimerHandle

from .board import Board
from .config import MoleConfig
from .const import COUNTDOWN_TICK_MS
from .snapshot import SessionPhase, Snapshot

logger = logging.getLogger(__name__)

Listener = Callable[[Snapshot], None]


class MoleEngine:
    def __init__(self, scheduler: Scheduler, config: Optional[MoleConfig] = None,
                 rng: Optional[random.Random] = None):
        self.scheduler = scheduler
        self.config = config or MoleConfig()
        self.rng = rng or random.Random()

        self.board = Board(self.config.board_size)
        self.score = 0
        self.time_remaining = self.config.duration_sec
        self.high_score = 0
        self.phase = SessionPhase.Idle

        # bumped on every start(); despawn callbacks from older sessions are ignored
        self._generation = 0
        # occupant token per cell, so a late despawn cannot remove a newer mole
        self._tokens: List[int] = [0] * self.config.board_size
        self._next_token = 0

        self._spawn_timer: Optional[TimerHandle] = None
        self._countdown_timer: Optional[TimerHandle] = None
        self._despawn_timers: List[TimerHandle] = []

        self._listeners: List[Listener] = []

    # ------------- render contract -------------
    @property
    def is_running(self) -> bool:
        return self.phase == SessionPhase.Running

    @property
    def snapshot(self) -> Snapshot:
        return Snapshot(
            board=self.board.view(),
            score=self.score,
            time_remaining=self.time_remaining,
            is_running=self.is_running,
            high_score=self.high_score,
            phase=self.phase,
            duration_sec=self.config.duration_sec,
            low_time_warning_sec=self.config.low_time_warning_sec,
        )

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Call listener with a fresh Snapshot after every state change. Returns an unsubscribe function."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _emit(self) -> None:
        if not self._listeners:
            return
        snap = self.snapshot
        for listener in list(self._listeners):
            try:
                listener(snap)
            except Exception:
                logger.exception("Snapshot listener %r failed", listener)

    # ------------- control / input contract -------------
    def on_start_requested(self) -> None:
        self.start()

    def on_cell_activated(self, index: int) -> None:
        self.handle_hit(index)

    # ------------- operations -------------
    def start(self) -> None:
        restarting = self.is_running
        self._cancel_timers()
        self._generation += 1

        self.board.reset()
        self.score = 0
        self.time_remaining = self.config.duration_sec
        self.phase = SessionPhase.Running

        self._spawn_timer = self.scheduler.call_every(self.config.spawn_interval_ms, self.tick_spawn)
        self._countdown_timer = self.scheduler.call_every(COUNTDOWN_TICK_MS, self.tick_countdown)

        logger.info("%s session %d (%ds)", "Restarted" if restarting else "Started",
                    self._generation, self.config.duration_sec)
        self._emit()

    def tick_spawn(self) -> None:
        if not self.is_running:
            return
        empty = self.board.empty_cells()
        if not empty:
            return
        index = self.rng.choice(empty)
        self.board.place(index)
        self._next_token += 1
        self._tokens[index] = self._next_token
        self._schedule_despawn(index, self.config.show_time_ms)
        logger.debug("Mole up at %d", index)
        self._emit()

    def despawn(self, cell_index: int) -> None:
        if not self.board.in_bounds(cell_index):
            return
        if self.board.clear(cell_index):
            logger.debug("Mole down at %d", cell_index)
            self._emit()

    def handle_hit(self, cell_index: int) -> None:
        if not self.is_running or not self.board.in_bounds(cell_index):
            return
        if not self.board.strike(cell_index):
            return
        self.score += 1
        # the natural despawn stays armed; whichever fires first clears the cell
        self._schedule_despawn(cell_index, self.config.hit_despawn_ms)
        logger.debug("Hit at %d, score %d", cell_index, self.score)
        self._emit()

    def tick_countdown(self) -> None:
        if not self.is_running:
            return
        self.time_remaining = max(0, self.time_remaining - 1)
        if self.time_remaining == 0:
            self._end_session()
        self._emit()

    def shutdown(self) -> None:
        """
        Drop every timer this engine owns. State is left untouched, so a session
        that was running still reports is_running, frozen where it stopped.
        """
        self._cancel_timers()
        self._generation += 1

    # ------------- helpers -------------
    def _end_session(self) -> None:
        self.phase = SessionPhase.Ended
        for timer in (self._spawn_timer, self._countdown_timer):
            if timer is not None:
                timer.cancel()
        self._spawn_timer = self._countdown_timer = None
        if self.score > self.high_score:
            self.high_score = self.score
        logger.info("Session %d over: score %d, high score %d",
                    self._generation, self.score, self.high_score)

    def _schedule_despawn(self, index: int, delay_ms: int) -> None:
        self._despawn_timers = [t for t in self._despawn_timers if t.active]
        self._despawn_timers.append(self.scheduler.call_later(
            delay_ms, self._scheduled_despawn, index, self._generation, self._tokens[index]))

    def _scheduled_despawn(self, index: int, generation: int, token: int) -> None:
        if generation != self._generation or token != self._tokens[index]:
            return
        self.despawn(index)

    def _cancel_timers(self) -> None:
        for timer in (self._spawn_timer, self._countdown_timer, *self._despawn_timers):
            if timer is not None:
                timer.cancel()
        self._spawn_timer = self._countdown_timer = None
        self._despawn_timers = []
