from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Literal, Sequence

Outcome = Literal["Win", "Lose", "Draw"]


class GameError(Exception):
    pass


class InvalidMoveSet(GameError, ValueError):
    pass


class InvalidSelection(GameError, ValueError):
    pass


@dataclass(frozen=True)
class MoveSet:
    labels: tuple[str, ...]

    def __post_init__(self) -> None:
        if isinstance(self.labels, str):
            raise InvalidMoveSet("moves must be a sequence of labels, not a single string")
        object.__setattr__(self, "labels", tuple(self.labels))
        count = len(self.labels)
        if count < 3:
            raise InvalidMoveSet(f"need at least 3 moves, got {count}")
        if count % 2 == 0:
            raise InvalidMoveSet(f"need an odd number of moves, got {count}")
        if any(not isinstance(label, str) or not label for label in self.labels):
            raise InvalidMoveSet("move labels must be non-empty strings")
        if len(set(self.labels)) != count:
            dupes = sorted({label for label in self.labels if self.labels.count(label) > 1})
            raise InvalidMoveSet("duplicate moves: " + ", ".join(dupes))

    @classmethod
    def of(cls, labels: Iterable[str]) -> "MoveSet":
        if isinstance(labels, str):
            raise InvalidMoveSet("moves must be a sequence of labels, not a single string")
        return cls(labels=tuple(labels))

    def __len__(self) -> int:
        return len(self.labels)

    def __getitem__(self, index: int) -> str:
        return self.labels[index]

    def __iter__(self):
        return iter(self.labels)

    def index_of(self, label: str) -> int:
        return self.labels.index(label)


@dataclass(frozen=True)
class OutcomeRelation:
    # cells[row][col] is the result for the row's move against the column's move.
    moves: MoveSet
    cells: tuple[tuple[Outcome, ...], ...]

    def __len__(self) -> int:
        return len(self.cells)

    def __getitem__(self, row: int) -> tuple[Outcome, ...]:
        return self.cells[row]

    def outcome(self, row: int, col: int) -> Outcome:
        self._check_index(row)
        self._check_index(col)
        return self.cells[row][col]

    def resolve(self, user_index: int, computer_index: int) -> Outcome:
        return resolve(self, user_index, computer_index)

    def _check_index(self, index: int) -> None:
        if not isinstance(index, int) or isinstance(index, bool) or not 0 <= index < len(self.cells):
            raise InvalidSelection(f"move index out of range: {index!r}")


def build_relation(moves: MoveSet | Sequence[str]) -> OutcomeRelation:
    move_set = moves if isinstance(moves, MoveSet) else MoveSet.of(moves)
    n = len(move_set)

    table: list[list[Outcome]] = [["Draw"] * n for _ in range(n)]
    for i in range(n):
        for j in range(i + 1, n):
            if (j - i) % 2 == 1:
                table[i][j] = "Win"
                table[j][i] = "Lose"
            else:
                table[i][j] = "Lose"
                table[j][i] = "Win"

    return OutcomeRelation(moves=move_set, cells=tuple(tuple(row) for row in table))


def resolve(relation: OutcomeRelation, user_index: int, computer_index: int) -> Outcome:
    # The table is indexed by the computer's move; the result is reported for the user.
    computer_view = relation.outcome(computer_index, user_index)
    if user_index == computer_index:
        return "Draw"
    return "Lose" if computer_view == "Win" else "Win"
