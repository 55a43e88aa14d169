"""
Presentation state for the single-page game.

GameController owns the one game session and the display theme. User
actions arrive as intents and go through dispatch(), the only place the
session is replaced.
"""

import logging
import threading
from enum import Enum

from .engine import (
    BOARD_CELLS, Draw, GameSession, GameStatus, InProgress, Won,
    apply_move, is_cell_playable, new_session, reset, winning_line,
)
from .models import GameView, Intent, MoveIntent, ResetIntent, ThemeOut, ThemeToggleIntent

logger = logging.getLogger(__name__)


# PUBLIC_INTERFACE
class Theme(str, Enum):
    LIGHT = "light"
    DARK = "dark"

    def other(self) -> "Theme":
        return Theme.DARK if self is Theme.LIGHT else Theme.LIGHT


# PUBLIC_INTERFACE
class ThemeSetting:
    """Holds the display theme. Cosmetic only, never touches game state."""

    def __init__(self, initial: Theme = Theme.LIGHT):
        self._theme = Theme(initial)

    def get(self) -> Theme:
        return self._theme

    def set(self, theme: Theme) -> None:
        self._theme = Theme(theme)

    def toggle(self) -> Theme:
        self._theme = self._theme.other()
        return self._theme


# PUBLIC_INTERFACE
def status_text(status: GameStatus) -> str:
    """Text shown above the board."""
    if isinstance(status, Won):
        return f"Winner: {status.mark.value}"
    if isinstance(status, Draw):
        return "It's a draw!"
    return f"Next player: {status.current_mark.value}"


# PUBLIC_INTERFACE
def theme_toggle_label(theme: Theme) -> str:
    """Accessible label of the theme control."""
    return f"Switch to {Theme(theme).other().value} mode"


def _theme_out(theme: Theme) -> ThemeOut:
    return ThemeOut(theme=theme.value, toggle_label=theme_toggle_label(theme))


def _status_kind(status: GameStatus) -> str:
    if isinstance(status, Won):
        return "won"
    if isinstance(status, Draw):
        return "draw"
    return "in_progress"


# PUBLIC_INTERFACE
def build_view(session: GameSession, theme: Theme) -> GameView:
    """Render a session and theme into the view model sent to the page."""
    status = session.status
    line = winning_line(session.board)
    return GameView(
        board=[cell.value for cell in session.board],
        current_mark=session.current_mark.value,
        status=_status_kind(status),
        winner=status.mark.value if isinstance(status, Won) else None,
        is_over=status.is_terminal,
        winning_line=list(line) if line is not None else None,
        playable=[i for i in range(BOARD_CELLS) if is_cell_playable(session, i)],
        status_text=status_text(status),
        theme=theme.value,
        theme_toggle_label=theme_toggle_label(theme),
    )


# PUBLIC_INTERFACE
class GameController:
    """Owns the session and theme for the lifetime of the application."""

    def __init__(self, default_theme: Theme = Theme.LIGHT):
        self._session = new_session()
        self._theme = ThemeSetting(default_theme)
        # sync routes run in a worker pool; one intent at a time
        self._lock = threading.Lock()

    @property
    def session(self) -> GameSession:
        return self._session

    @property
    def theme(self) -> ThemeSetting:
        return self._theme

    def view(self) -> GameView:
        return build_view(self._session, self._theme.get())

    def theme_view(self) -> ThemeOut:
        return _theme_out(self._theme.get())

    def toggle_theme(self) -> ThemeOut:
        """Flip the theme and return the theme that is now active."""
        with self._lock:
            return _theme_out(self._toggle_theme())

    def dispatch(self, intent: Intent) -> GameView:
        """Apply one user intent and return the resulting view."""
        with self._lock:
            if isinstance(intent, MoveIntent):
                self._move(intent.index)
            elif isinstance(intent, ResetIntent):
                self._session = reset()
                logger.info("Game reset")
            elif isinstance(intent, ThemeToggleIntent):
                self._toggle_theme()
            else:
                raise TypeError(f"Unknown intent: {intent!r}")
            return self.view()

    def _toggle_theme(self) -> Theme:
        theme = self._theme.toggle()
        logger.debug("Theme switched to %s", theme.value)
        return theme

    def _move(self, index: int) -> None:
        before = self._session
        after = apply_move(before, index)
        if after is before:
            logger.debug("Ignored move at cell %d (occupied or game over)", index)
            return
        self._session = after
        logger.info("%s played cell %d", before.current_mark.value, index)
        status = after.status
        if isinstance(status, InProgress):
            return
        logger.info("Game over: %s", status_text(status))
