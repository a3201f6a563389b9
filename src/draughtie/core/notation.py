"""PDN FEN and move-text parsing and serialisation."""

from __future__ import annotations

import re

from draughtie.core.board import Board
from draughtie.core.enums import Color, Piece
from draughtie.core.move import Move
from draughtie.core.position import Position
from draughtie.core.types import Square, parse_square

STARTING_FEN = "W:W31-50:B1-20"

_SIDE_CHARS: dict[str, Color] = {"W": Color.WHITE, "B": Color.BLACK}
_COLOR_CHARS: dict[Color, str] = {v: k for k, v in _SIDE_CHARS.items()}
_MOVE_RE = re.compile(r"^\d{1,2}(?:[-x]\d{1,2})+$")


# ── FEN ──────────────────────────────────────────────────────────────────────


def position_from_fen(fen: str) -> Position:
    """Parse a PDN FEN string, e.g. ``W:W31-50:B1-20``, into a :class:`Position`.

    Kings carry a ``K`` prefix (``W:WK46,28:B1``) and ranges such as
    ``31-50`` are accepted for men.
    """
    text = fen.strip().removesuffix(".")
    parts = text.split(":")
    if len(parts) != 3:
        raise ValueError(f"Invalid FEN (need 3 ':'-separated fields): {fen!r}")

    side_part = parts[0].strip().upper()
    side = _SIDE_CHARS.get(side_part)
    if side is None:
        raise ValueError(f"Invalid FEN side-to-move field: {parts[0]!r}")

    board = Board()
    seen_colors: set[Color] = set()
    for field in parts[1:]:
        field = field.strip()
        if not field or field[0].upper() not in _SIDE_CHARS:
            raise ValueError(f"Invalid FEN piece field: {field!r}")
        color = _SIDE_CHARS[field[0].upper()]
        if color in seen_colors:
            raise ValueError(f"Duplicate FEN piece field for {color}: {fen!r}")
        seen_colors.add(color)

        for token in field[1:].split(","):
            token = token.strip()
            if not token:
                continue
            for sq, is_king in _parse_piece_token(token):
                if not board.is_empty(sq):
                    raise ValueError(f"Square {sq} listed twice in FEN: {fen!r}")
                board[sq] = Piece.king(color) if is_king else Piece.man(color)

    return Position(board=board, side_to_move=side)


def _parse_piece_token(token: str) -> list[tuple[Square, bool]]:
    is_king = token[0].upper() == "K"
    if is_king:
        token = token[1:]
    if "-" in token:
        first_text, _, last_text = token.partition("-")
        first = parse_square(first_text)
        last = parse_square(last_text)
        if first > last:
            raise ValueError(f"Invalid FEN square range: {token!r}")
        return [(sq, is_king) for sq in range(first, last + 1)]
    return [(parse_square(token), is_king)]


def position_to_fen(position: Position) -> str:
    """Serialise *position* to PDN FEN without ranges."""
    fields = [_COLOR_CHARS[position.side_to_move]]
    for color in (Color.WHITE, Color.BLACK):
        tokens: list[str] = []
        for sq in position.board.all_pieces(color):
            prefix = "K" if position.board[sq].is_king else ""
            tokens.append(f"{prefix}{sq}")
        fields.append(_COLOR_CHARS[color] + ",".join(tokens))
    return ":".join(fields)


# ── Moves ────────────────────────────────────────────────────────────────────


def parse_move(position: Position, text: str) -> Move:
    """Resolve move text against the legal moves of *position*.

    Accepts quiet moves (``32-28``), short captures (``28x10``) and full
    capture paths (``28x19x10``). Raises ``ValueError`` when the text is
    malformed, matches no legal move, or is ambiguous.
    """
    text = text.strip()
    if not _MOVE_RE.match(text):
        raise ValueError(f"Invalid move text: {text!r}")

    squares = tuple(parse_square(part) for part in re.split(r"[-x]", text))
    is_capture = "x" in text

    candidates: list[Move] = []
    for move in position.legal_moves():
        if move.is_capture != is_capture:
            continue
        if len(squares) == 2:
            if (move.from_sq, move.to_sq) == squares:
                candidates.append(move)
        elif move.path == squares:
            candidates.append(move)

    if not candidates:
        raise ValueError(f"Illegal move: {text}")
    if len(candidates) > 1:
        raise ValueError(f"Ambiguous move: {text}")
    return candidates[0]
