from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
APP_DIR = ROOT / "src" / "hmac_rps"
sys.path.insert(0, str(APP_DIR))

from protocol import (  # type: ignore[import-not-found]  # noqa: E402
    InvalidMoveSet,
    InvalidSelection,
    MoveSet,
    build_relation,
    resolve,
)

RPS = ["rock", "paper", "scissors"]
RPSLS = ["rock", "paper", "scissors", "lizard", "spock"]


def _labels(n: int) -> list[str]:
    return [f"m{i}" for i in range(n)]


@pytest.mark.parametrize("n", [3, 5, 7, 9, 11])
def test_relation_is_a_tournament(n: int) -> None:
    relation = build_relation(_labels(n))
    for i in range(n):
        assert relation[i][i] == "Draw"
        for j in range(n):
            if i == j:
                continue
            assert {relation[i][j], relation[j][i]} == {"Win", "Lose"}


@pytest.mark.parametrize("n", [3, 5, 7])
def test_every_move_wins_half_of_the_others(n: int) -> None:
    relation = build_relation(_labels(n))
    for i in range(n):
        assert list(relation[i]).count("Win") == n // 2


def test_three_move_table_follows_index_parity() -> None:
    relation = build_relation(RPS)
    assert relation[0][1] == "Win"
    assert relation[1][0] == "Lose"
    assert relation[0][2] == "Lose"
    assert relation[2][0] == "Win"
    assert relation[1][2] == "Win"
    assert relation[2][1] == "Lose"


def test_five_moves_build_without_error() -> None:
    relation = build_relation(RPSLS)
    assert len(relation) == 5
    assert relation.moves.labels == tuple(RPSLS)


@pytest.mark.parametrize(
    "moves",
    [
        ["rock", "paper"],
        ["rock", "rock", "paper"],
        [],
        ["a", "b", "c", "d"],
        ["a", "", "c"],
    ],
)
def test_invalid_move_sets_are_rejected(moves: list[str]) -> None:
    with pytest.raises(InvalidMoveSet):
        build_relation(moves)


def test_invalid_move_set_is_a_value_error() -> None:
    with pytest.raises(ValueError):
        MoveSet.of(["rock", "rock", "paper"])


def test_move_set_copies_caller_list() -> None:
    labels = ["rock", "paper", "scissors"]
    moves = MoveSet(labels=labels)  # type: ignore[arg-type]
    labels.append("rock")
    assert moves.labels == ("rock", "paper", "scissors")
    with pytest.raises(AttributeError):
        moves.labels.append("rock")  # type: ignore[attr-defined]


def test_bare_string_is_not_split_into_moves() -> None:
    with pytest.raises(InvalidMoveSet):
        build_relation("abc")
    with pytest.raises(InvalidMoveSet):
        MoveSet(labels="abc")  # type: ignore[arg-type]
    with pytest.raises(InvalidMoveSet):
        MoveSet.of("abc")


def test_move_set_is_ordered_and_indexable() -> None:
    moves = MoveSet.of(RPS)
    assert list(moves) == RPS
    assert moves[2] == "scissors"
    assert moves.index_of("paper") == 1


def test_resolve_same_index_is_draw() -> None:
    for n in (3, 5, 7):
        relation = build_relation(_labels(n))
        for x in range(n):
            assert resolve(relation, x, x) == "Draw"
        assert resolve(relation, 0, 0) == "Draw"


def test_resolve_reports_from_user_side() -> None:
    relation = build_relation(RPS)
    # relation[1][0] == "Lose": the computer's row does not read Win, so the user wins.
    assert resolve(relation, 0, 1) == "Win"
    # relation[0][1] == "Win": the computer's row reads Win, so the user loses.
    assert resolve(relation, 1, 0) == "Lose"
    assert resolve(relation, 2, 0) == "Win"
    assert resolve(relation, 0, 2) == "Lose"


@pytest.mark.parametrize("n", [3, 5, 7])
def test_resolve_is_antisymmetric(n: int) -> None:
    relation = build_relation(_labels(n))
    for u in range(n):
        for c in range(n):
            if u == c:
                continue
            assert {relation.resolve(u, c), relation.resolve(c, u)} == {"Win", "Lose"}


def test_resolve_rejects_out_of_range_index() -> None:
    relation = build_relation(RPS)
    with pytest.raises(InvalidSelection):
        resolve(relation, 3, 0)
    with pytest.raises(InvalidSelection):
        resolve(relation, 0, -1)
