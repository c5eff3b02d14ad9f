"""Reads board files into validated ``Board`` values.

Text files hold 16 labels separated by whitespace or commas, over any
number of lines.  ``#`` starts a comment and ``_`` may stand for the blank.
JSON files hold a flat list, a 4×4 list of rows, or an object with a
``"tiles"`` key holding either.
"""

from __future__ import annotations

import json
from pathlib import Path

from backend.io.exceptions import (
    InvalidBoardError,
    InvalidTokenError,
    MissingTilesError,
)
from backend.models.board import BLANK, CELL_COUNT, Board

BLANK_TOKEN = "_"


def parse_board(text: str) -> Board:
    labels: list[int] = []

    for line in text.splitlines():
        trimmed = line.split("#", 1)[0].strip()
        if not trimmed:
            continue
        for token in trimmed.replace(",", " ").split():
            if token == BLANK_TOKEN:
                labels.append(BLANK)
                continue
            try:
                labels.append(int(token))
            except ValueError:
                raise InvalidTokenError(f"Invalid tile label: {token!r}")

    return _build(labels)


def load_board(file_path: Path) -> Board:
    file_path = Path(file_path)
    try:
        with open(file_path, "r", encoding="utf-8") as f:
            content = f.read()
    except UnicodeDecodeError as e:
        raise InvalidTokenError(f"Board file is not valid UTF-8: {e}")

    if file_path.suffix.lower() != ".json":
        return parse_board(content)

    try:
        data = json.loads(content)
    except json.JSONDecodeError as e:
        raise InvalidTokenError(f"Failed to parse JSON board: {e}")

    if isinstance(data, dict):
        if "tiles" not in data:
            raise MissingTilesError("JSON board has no 'tiles' key")
        data = data["tiles"]

    if not isinstance(data, list):
        raise InvalidTokenError("JSON board must be a list of tiles")

    if data and all(isinstance(row, list) for row in data):
        data = [v for row in data for v in row]

    if not all(isinstance(v, int) and not isinstance(v, bool) for v in data):
        raise InvalidTokenError("JSON board tiles must be integers")

    return _build(data)


def _build(labels: list[int]) -> Board:
    if len(labels) != CELL_COUNT:
        raise MissingTilesError(
            f"Expected {CELL_COUNT} tiles, found {len(labels)}"
        )
    try:
        return Board.from_cells(labels)
    except ValueError as e:
        raise InvalidBoardError(str(e))
