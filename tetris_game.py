"""Game driver: the entry points a front end calls"""
import enum
import logging
from typing import Optional

from tetris_scheduler import Scheduler
from tetris_session import GameSession

log = logging.getLogger(__name__)


class Command(enum.Enum):
    MOVE_LEFT = "move_left"
    MOVE_RIGHT = "move_right"
    ROTATE_CW = "rotate_cw"
    SOFT_DROP = "soft_drop"
    HARD_DROP = "hard_drop"


class Presenter:
    """One-way notifications from the game. The default does nothing."""
    def reset(self): pass
    def redraw(self, session: GameSession): pass
    def update_stats(self, score: int, lines: int): pass
    def show_game_over(self, score: int, lines: int): pass


class Game:
    def __init__(self, scheduler: Scheduler, presenter: Optional[Presenter] = None, randomizer=None):
        self.scheduler = scheduler
        self.presenter = presenter if presenter is not None else Presenter()
        self.randomizer = randomizer
        self.session: Optional[GameSession] = None

    def start(self) -> GameSession:
        """Start a new session, or restart over the current one."""
        self.session = GameSession(self.randomizer)
        s = self.session
        log.info("new session, drop interval %d ms", s.drop_interval)
        self.presenter.reset()
        self.presenter.update_stats(s.score, s.lines)
        self.scheduler.start(s.drop_interval, self.on_tick)
        self.presenter.redraw(s)
        return s

    def handle_command(self, cmd) -> None:
        if not isinstance(cmd, Command):
            log.debug("ignoring unknown command %r", cmd)
            return
        if self.session is None or self.session.game_over:
            return
        s = self.session
        actions = {
            Command.MOVE_LEFT: lambda: s.move(-1),
            Command.MOVE_RIGHT: lambda: s.move(1),
            Command.ROTATE_CW: s.rotate,
            Command.SOFT_DROP: s.step,
            Command.HARD_DROP: s.hard_drop,
        }
        self._apply(actions[cmd])

    def on_tick(self) -> None:
        if self.session is None or self.session.game_over:
            return
        self._apply(self.session.step)

    def _apply(self, action) -> None:
        s = self.session
        interval, score, lines = s.drop_interval, s.score, s.lines
        action()
        if (s.score, s.lines) != (score, lines):
            self.presenter.update_stats(s.score, s.lines)
        if s.game_over:
            self.scheduler.stop()
            self.presenter.show_game_over(s.score, s.lines)
        elif s.drop_interval != interval:
            self.scheduler.start(s.drop_interval, self.on_tick)
        self.presenter.redraw(s)
