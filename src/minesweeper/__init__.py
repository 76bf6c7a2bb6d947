"""
Minesweeper package.

Provides the board engine (mine placement, reveal cascade, flags, win/lose
state) and a small terminal front end around it.
"""
from .cell import Cell, CellState
from .board import Board, BoardConfig, ConfigError, GameState, initialize
from .commands import Command, CommandError, CommandType, parse_command
from .render import render_board, render_status
from .session import GameSession

__all__ = [
    "Cell",
    "CellState",
    "Board",
    "BoardConfig",
    "ConfigError",
    "GameState",
    "initialize",
    "Command",
    "CommandError",
    "CommandType",
    "parse_command",
    "render_board",
    "render_status",
    "GameSession",
]
