"""Legal move generation for international draughts."""

from __future__ import annotations

from typing import TYPE_CHECKING

from draughtie.core.enums import Color, Piece
from draughtie.core.move import Move
from draughtie.core.types import ROW_COUNT, SQUARE_COUNT, Square, col_of, make_square, row_of

if TYPE_CHECKING:
    from draughtie.core.position import Position


# (row delta, column delta); rows grow towards White's side.
DIRECTIONS: tuple[tuple[int, int], ...] = ((-1, -1), (-1, 1), (1, -1), (1, 1))

# Indexes into DIRECTIONS of the forward steps for each color.
_FORWARD: tuple[tuple[int, ...], tuple[int, ...]] = ((0, 1), (2, 3))


# -- Precomputed lookup tables ---------------------------------------------


def _build_rays() -> tuple[tuple[tuple[Square, ...], ...], ...]:
    rays_per_square: list[tuple[tuple[Square, ...], ...]] = [()]
    for sq in range(1, SQUARE_COUNT + 1):
        row = row_of(sq)
        col = col_of(sq)
        square_rays: list[tuple[Square, ...]] = []
        for dr, dc in DIRECTIONS:
            r = row + dr
            c = col + dc
            ray: list[Square] = []
            while 1 <= r <= ROW_COUNT and 0 <= c < ROW_COUNT:
                ray.append(make_square(r, c))
                r += dr
                c += dc
            square_rays.append(tuple(ray))
        rays_per_square.append(tuple(square_rays))
    return tuple(rays_per_square)


# RAYS[sq][direction] -> squares along that diagonal, nearest first.
RAYS: tuple[tuple[tuple[Square, ...], ...], ...] = _build_rays()


class MoveGenerator:
    """Generates legal moves for the side to move of a :class:`Position`.

    Capturing is compulsory and only the sequences capturing the most
    pieces are legal. Men capture in all four directions, kings fly.
    A jumped piece stays on the board until the move completes, so it
    blocks the path and cannot be jumped twice.
    """

    __slots__ = ("_position",)

    def __init__(self, position: Position) -> None:
        self._position = position

    def generate_legal_moves(self) -> list[Move]:
        captures = self.generate_captures()
        if captures:
            most = max(len(move.captures) for move in captures)
            return [move for move in captures if len(move.captures) == most]
        return self.generate_quiet_moves()

    def has_legal_moves(self) -> bool:
        return bool(self.generate_legal_moves())

    # ── Quiet moves ──────────────────────────────────────────────────────

    def generate_quiet_moves(self) -> list[Move]:
        board = self._position.board
        color = self._position.side_to_move
        moves: list[Move] = []

        for sq in board.all_pieces(color):
            rays = RAYS[sq]
            if board[sq].is_king:
                for ray in rays:
                    for target in ray:
                        if not board.is_empty(target):
                            break
                        moves.append(Move((sq, target)))
            else:
                for direction in _FORWARD[int(color)]:
                    ray = rays[direction]
                    if ray and board.is_empty(ray[0]):
                        moves.append(Move((sq, ray[0])))
        return moves

    # ── Captures ─────────────────────────────────────────────────────────

    def generate_captures(self) -> list[Move]:
        """All complete capture sequences, regardless of their length."""
        board = self._position.board
        color = self._position.side_to_move
        moves: list[Move] = []
        seen: set[tuple[Square, Square, frozenset[Square]]] = set()

        for sq in board.all_pieces(color):
            piece = board[sq]
            # Lift the piece so that its origin counts as empty while jumping.
            board[sq] = Piece.EMPTY
            try:
                found: list[Move] = []
                self._extend_captures(piece, color.opposite, [sq], [], found)
            finally:
                board[sq] = piece

            for move in found:
                key = (move.from_sq, move.to_sq, frozenset(move.captures))
                if key in seen:
                    continue
                seen.add(key)
                moves.append(move)
        return moves

    def _extend_captures(
        self,
        piece: Piece,
        opponent: Color,
        path: list[Square],
        captured: list[Square],
        out: list[Move],
    ) -> None:
        board = self._position.board
        extended = False

        for ray in RAYS[path[-1]]:
            idx = 0
            if piece.is_king:
                while idx < len(ray) and board.is_empty(ray[idx]):
                    idx += 1
            if idx >= len(ray) - 1:
                continue

            victim = ray[idx]
            if victim in captured or board[victim].color != opponent:
                continue

            for landing in ray[idx + 1 :]:
                if not board.is_empty(landing):
                    break
                extended = True
                path.append(landing)
                captured.append(victim)
                self._extend_captures(piece, opponent, path, captured, out)
                path.pop()
                captured.pop()
                if piece.is_man:
                    break

        if not extended and captured:
            out.append(Move(tuple(path), tuple(captured)))
