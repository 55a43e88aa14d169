"""Two-player Tic Tac Toe served as a single browser page."""

__version__ = "1.0.0"
