import logging

import uvicorn
from fastapi import FastAPI, Body, Depends, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import HTMLResponse, JSONResponse

from .config import configure_logging, get_settings
from .engine import InvalidIndex
from .models import GameView, IntentChoice, MoveIntent, ResetIntent, ThemeOut
from .page import INDEX_HTML
from .presentation import GameController

settings = get_settings()
configure_logging(settings.log_level)

tags_metadata = [
    {
        "name": "game",
        "description": "Board state, moves and restart"
    },
    {
        "name": "theme",
        "description": "Light/dark display theme"
    },
]

app = FastAPI(
    title="Tic Tac Toe",
    description="Single-page, two-player Tic Tac Toe played in the browser.",
    version="1.0.0",
    openapi_tags=tags_metadata
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=list(settings.cors_origins),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# One session for the lifetime of the process
_controller = GameController(default_theme=settings.default_theme)

# PUBLIC_INTERFACE
def get_controller() -> GameController:
    """The application's game controller."""
    return _controller


@app.exception_handler(InvalidIndex)
async def invalid_index_handler(request: Request, exc: InvalidIndex):
    return JSONResponse(status_code=422, content={"detail": str(exc)})

#---------- Page ----------

@app.get("/", response_class=HTMLResponse, include_in_schema=False)
def index() -> str:
    """Serve the game page."""
    return INDEX_HTML

#---------- Game APIs ----------

# PUBLIC_INTERFACE
@app.get("/api/game", response_model=GameView, tags=["game"], summary="Current game state")
def get_game(controller: GameController = Depends(get_controller)):
    """Board, status and theme for rendering."""
    return controller.view()

# PUBLIC_INTERFACE
@app.post("/api/game/move", response_model=GameView, tags=["game"], summary="Play a cell")
def make_move(move: MoveIntent, controller: GameController = Depends(get_controller)):
    """
    Place the current mark. A move on an occupied cell or after the game
    ended is ignored and the unchanged state is returned.
    """
    return controller.dispatch(move)

# PUBLIC_INTERFACE
@app.post("/api/game/reset", response_model=GameView, tags=["game"], summary="Restart the game")
def reset_game(controller: GameController = Depends(get_controller)):
    """Start over with an empty board and X to move."""
    return controller.dispatch(ResetIntent())

# PUBLIC_INTERFACE
@app.post("/api/intent", response_model=GameView, tags=["game"], summary="Send any user intent")
def send_intent(intent: IntentChoice = Body(..., discriminator="type"), controller: GameController = Depends(get_controller)):
    """Accepts {"type": "move", "index": n}, {"type": "reset"} or {"type": "theme_toggle"}."""
    return controller.dispatch(intent)

#---------- Theme ----------

# PUBLIC_INTERFACE
@app.get("/api/theme", response_model=ThemeOut, tags=["theme"], summary="Current theme")
def get_theme(controller: GameController = Depends(get_controller)):
    return controller.theme_view()

# PUBLIC_INTERFACE
@app.post("/api/theme/toggle", response_model=ThemeOut, tags=["theme"], summary="Toggle light/dark")
def toggle_theme(controller: GameController = Depends(get_controller)):
    return controller.toggle_theme()

#---------- Health ----------

@app.get("/health", tags=["default"])
def health_check():
    """Health check endpoint."""
    return {"message": "Healthy"}

# PUBLIC_INTERFACE
def run():
    """Serve the app with uvicorn (console script `tictactoe`)."""
    uvicorn.run("tictactoe.main:app", host=settings.host, port=settings.port, log_level=logging.getLevelName(settings.log_level))
