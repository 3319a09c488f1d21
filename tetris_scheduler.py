"""Tick sources for automatic descent.

At most one timer runs at a time: ``start`` replaces whatever was running.
"""
from typing import Callable, List, Optional

import pygame

TICK_EVENT = pygame.USEREVENT + 1

Callback = Callable[[], None]


class Scheduler:
    def __init__(self):
        self.interval: Optional[int] = None
        self.callback: Optional[Callback] = None

    @property
    def active(self) -> bool:
        return self.interval is not None

    def start(self, interval_ms: int, callback: Callback) -> None:
        self.interval = interval_ms
        self.callback = callback

    def stop(self) -> None:
        self.interval = None


class ManualScheduler(Scheduler):
    """Fires only when told to; used to drive the game deterministically."""
    def __init__(self):
        super().__init__()
        self.history: List[int] = []

    def start(self, interval_ms, callback):
        super().start(interval_ms, callback)
        self.history.append(interval_ms)

    def fire(self, times: int = 1) -> None:
        for _ in range(times):
            if not self.active:
                return
            self.callback()


class PygameScheduler(Scheduler):
    """Posts TICK_EVENT on pygame's event queue, so ticks and key presses are serialized."""
    def start(self, interval_ms, callback):
        super().start(interval_ms, callback)
        pygame.time.set_timer(TICK_EVENT, interval_ms)

    def stop(self):
        super().stop()
        pygame.time.set_timer(TICK_EVENT, 0)

    def handle(self, event: pygame.event.Event) -> bool:
        if event.type != TICK_EVENT:
            return False
        # a tick already queued when the timer stopped is dropped
        if self.active:
            self.callback()
        return True
