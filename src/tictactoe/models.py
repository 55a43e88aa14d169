from typing import Annotated, List, Literal, Optional, Union
from pydantic import BaseModel, Field

# --- Intents ---

# PUBLIC_INTERFACE
class MoveIntent(BaseModel):
    """The player to move clicked a cell."""
    type: Literal["move"] = "move"
    index: int = Field(..., ge=0, le=8, strict=True, description="Cell index (0..8, row-major)")

# PUBLIC_INTERFACE
class ResetIntent(BaseModel):
    """Restart control was pressed."""
    type: Literal["reset"] = "reset"

# PUBLIC_INTERFACE
class ThemeToggleIntent(BaseModel):
    """Theme control was pressed."""
    type: Literal["theme_toggle"] = "theme_toggle"

IntentChoice = Union[MoveIntent, ResetIntent, ThemeToggleIntent]
Intent = Annotated[IntentChoice, Field(discriminator="type")]

# --- Views ---

# PUBLIC_INTERFACE
class GameView(BaseModel):
    """Everything the page needs to render the board and status."""
    board: List[Optional[str]] = Field(..., description="9 cells, row-major: 'X', 'O', or None")
    current_mark: str = Field(..., description="'X' or 'O'")
    status: Literal["in_progress", "won", "draw"]
    winner: Optional[str] = Field(None, description="Winner symbol, or None if draw/ongoing")
    is_over: bool = Field(..., description="True once the game is won or drawn")
    winning_line: Optional[List[int]] = Field(None, description="Indices of the completed line")
    playable: List[int] = Field(..., description="Cells that currently accept a move")
    status_text: str
    theme: Literal["light", "dark"]
    theme_toggle_label: str

# PUBLIC_INTERFACE
class ThemeOut(BaseModel):
    """Current display theme."""
    theme: Literal["light", "dark"]
    toggle_label: str
