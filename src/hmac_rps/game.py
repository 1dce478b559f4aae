from __future__ import annotations

import enum
import logging
from dataclasses import dataclass, field
from typing import Callable, Literal, Sequence

from commit_reveal import Commitment, commit_move, generate_key
from move_table import format_table
from protocol import InvalidSelection, MoveSet, Outcome, OutcomeRelation, build_relation

KeyMode = Literal["round", "session"]
KEY_MODES: tuple[str, ...] = ("round", "session")

EXIT_INPUT = "0"
HELP_INPUT = "?"

logger = logging.getLogger(__name__)


class GameState(enum.Enum):
    AWAITING_MOVE = "awaiting_move"
    RESOLVED = "resolved"
    EXITED = "exited"


@dataclass(frozen=True)
class Selection:
    kind: Literal["move", "exit", "help"]
    index: int | None = None


@dataclass(frozen=True)
class RoundResult:
    user_index: int
    computer_index: int
    user_move: str
    computer_move: str
    outcome: Outcome
    commitment: Commitment


@dataclass
class GameSession:
    moves: MoveSet
    relation: OutcomeRelation
    key_mode: KeyMode = "round"
    state: GameState = GameState.RESOLVED
    _commitment: Commitment | None = field(default=None, repr=False)
    _session_key: str | None = field(default=None, repr=False)

    @classmethod
    def create(cls, labels: Sequence[str], key_mode: KeyMode = "round") -> "GameSession":
        if key_mode not in KEY_MODES:
            raise ValueError(f"unknown key mode: {key_mode!r}")
        moves = MoveSet.of(labels)
        session = cls(moves=moves, relation=build_relation(moves), key_mode=key_mode)
        if key_mode == "session":
            session._session_key = generate_key()
        logger.debug("session created with %d moves, key_mode=%s", len(moves), key_mode)
        return session

    @property
    def digest(self) -> str | None:
        return self._commitment.digest if self._commitment is not None else None

    def start_round(self) -> str:
        """Commit to a new computer move and return only its digest."""
        if self.state is GameState.EXITED:
            raise RuntimeError("session has exited")
        self._commitment = commit_move(self.moves, key=self._session_key)
        self.state = GameState.AWAITING_MOVE
        return self._commitment.digest

    def parse_selection(self, raw: str) -> Selection:
        choice = raw.strip()
        if choice == EXIT_INPUT:
            return Selection(kind="exit")
        if choice == HELP_INPUT:
            return Selection(kind="help")
        valid = {str(number): number - 1 for number in range(1, len(self.moves) + 1)}
        if choice in valid:
            return Selection(kind="move", index=valid[choice])
        raise InvalidSelection(f"invalid selection: {raw!r}")

    def play(self, user_index: int) -> RoundResult:
        if self.state is not GameState.AWAITING_MOVE or self._commitment is None:
            raise RuntimeError("no round in progress; call start_round() first")

        commitment = self._commitment
        outcome = self.relation.resolve(user_index, commitment.move_index)
        self.state = GameState.RESOLVED
        self._commitment = None
        logger.debug("round resolved: user=%d computer=%d outcome=%s", user_index, commitment.move_index, outcome)
        return RoundResult(
            user_index=user_index,
            computer_index=commitment.move_index,
            user_move=self.moves[user_index],
            computer_move=commitment.move,
            outcome=outcome,
            commitment=commitment,
        )

    def exit(self) -> None:
        self.state = GameState.EXITED
        self._commitment = None

    def help_table(self) -> str:
        return format_table(self.relation)


def run_interactive(
    session: GameSession,
    *,
    read: Callable[[str], str] | None = None,
    write: Callable[[str], None] | None = None,
) -> list[RoundResult]:
    """Drive the prompt loop until the user exits; returns the resolved rounds."""
    read = read or input
    write = write or print
    results: list[RoundResult] = []
    while session.state is not GameState.EXITED:
        digest = session.start_round()
        write(f"\n\nHMAC: {digest}")
        write("\nAvailable moves:")
        for number, move in enumerate(session.moves, start=1):
            write(f"{number} - {move}")
        write(f"{EXIT_INPUT} - Exit")
        write(f"{HELP_INPUT} - Help")

        try:
            raw = read("Enter your move: ")
        except (EOFError, KeyboardInterrupt):
            raw = EXIT_INPUT

        try:
            selection = session.parse_selection(raw)
        except InvalidSelection:
            write("Invalid input. Please enter a valid move index.")
            continue

        if selection.kind == "exit":
            write("Goodbye!")
            session.exit()
        elif selection.kind == "help":
            write(session.help_table())
        else:
            assert selection.index is not None
            result = session.play(selection.index)
            move, key = result.commitment.reveal()
            write(f"\nYour move: {result.user_move}")
            write(f"Computer move: {move}")
            write(f"Winner: {result.outcome}")
            write(f"HMAC Key: {key}")
            results.append(result)
    return results
