from __future__ import annotations

import hashlib
import hmac
import logging
import secrets
from dataclasses import dataclass
from typing import Final

from protocol import MoveSet

KEY_BYTES: Final[int] = 32  # 256 bits

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Commitment:
    key: str
    move_index: int
    move: str
    digest: str

    def reveal(self) -> tuple[str, str]:
        # Only call once the round's outcome has been shown.
        return self.move, self.key


def generate_key(num_bytes: int = KEY_BYTES) -> str:
    return secrets.token_hex(num_bytes)


def pick_move(moves: MoveSet) -> int:
    return secrets.randbelow(len(moves))


def compute_commitment(key: str, move: str) -> str:
    # Keyed with the hex text itself, so pasting the revealed key into any HMAC tool reproduces the digest.
    return hmac.new(key.encode("utf-8"), move.encode("utf-8"), hashlib.sha256).hexdigest()


def verify_commitment(*, expected_commitment: str, key: str, move: str) -> bool:
    computed = compute_commitment(key, move)
    return secrets.compare_digest(expected_commitment.strip().lower().encode("utf-8"), computed.encode("utf-8"))


def commit_move(moves: MoveSet, key: str | None = None) -> Commitment:
    if key is None:
        key = generate_key()
    index = pick_move(moves)
    move = moves[index]
    digest = compute_commitment(key, move)
    logger.debug("committed to a move, digest=%s", digest)
    return Commitment(key=key, move_index=index, move=move, digest=digest)
