from __future__ import annotations

import argparse
import logging
import os

from commit_reveal import verify_commitment
from game import KEY_MODES, GameSession, run_interactive
from move_table import format_table
from protocol import InvalidMoveSet, build_relation

USAGE_EXAMPLE = "Example: hmac-rps play rock paper scissors"

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="hmac-rps")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    sub = parser.add_subparsers(dest="cmd", required=True)

    play = sub.add_parser("play", help="Play against the computer")
    play.add_argument("moves", nargs="*", help="Odd number (>=3) of unique moves, e.g. rock paper scissors")
    play.add_argument(
        "--key-mode",
        choices=KEY_MODES,
        default=_default_key_mode(),
        help="round: new HMAC key every round; session: one key for the whole game",
    )

    table = sub.add_parser("table", help="Print who beats whom and exit")
    table.add_argument("moves", nargs="*")

    verify = sub.add_parser("verify", help="Check a revealed key and move against an HMAC")
    verify.add_argument("--key", required=True, help="Revealed HMAC key (hex)")
    verify.add_argument("--move", required=True, help="Revealed computer move")
    verify.add_argument("--hmac", required=True, help="HMAC shown before you moved")

    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.cmd == "verify":
        if verify_commitment(expected_commitment=args.hmac, key=args.key, move=args.move):
            print("✅ HMAC matches: the computer's move was fixed before you played.")
            return 0
        print("❌ HMAC mismatch: the revealed key and move do not produce this HMAC.")
        return 1

    try:
        if args.cmd == "table":
            print(format_table(build_relation(args.moves)))
            return 0
        if args.cmd == "play":
            session = GameSession.create(args.moves, key_mode=args.key_mode)
            run_interactive(session)
            return 0
    except InvalidMoveSet as exc:
        logger.debug("rejected move set %r", args.moves)
        print(f"Error: You must provide an odd number of unique moves (>=3). {exc}")
        print(USAGE_EXAMPLE)
        return 2

    raise SystemExit("unhandled command")


def _default_key_mode() -> str:
    mode = os.environ.get("HMAC_RPS_KEY_MODE", "round").strip().lower()
    return mode if mode in KEY_MODES else "round"


if __name__ == "__main__":
    raise SystemExit(main())
