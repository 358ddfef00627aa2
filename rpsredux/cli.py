"""
rpsredux CLI - Command-line interface for a hotseat round.

Usage:
    rps play <weapon1> <weapon2> [--json]   Play one round
    rps rules                               Show which weapon beats which
"""

import argparse
import logging
import sys

log = logging.getLogger(__name__)


def main(argv=None):
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Rock-Paper-Scissors on a unidirectional state container",
        prog="rps",
    )
    parser.add_argument("--log-level", help="Logging level (overrides RPS_LOG_LEVEL)")
    subparsers = parser.add_subparsers(dest="command", help="Commands")

    # Play command
    play_parser = subparsers.add_parser("play", help="Play one round")
    play_parser.add_argument("weapon1", help="Player 1 weapon (rock, paper, scissors)")
    play_parser.add_argument("weapon2", help="Player 2 weapon (rock, paper, scissors)")
    play_parser.add_argument("--json", action="store_true", help="Print the final state as JSON")

    # Rules command
    subparsers.add_parser("rules", help="Show the beats-relation")

    args = parser.parse_args(argv)

    from .config import configure_logging
    try:
        configure_logging(args.log_level)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    if args.command == "play":
        return cmd_play(args)
    elif args.command == "rules":
        return cmd_rules(args)
    else:
        parser.print_help()
        sys.exit(1)


def cmd_play(args):
    """Play one round through a session."""
    from .engine_core import Weapon
    from .presentation import snapshot, ErrorResponse, ErrorCode
    from .session import SessionManager

    try:
        weapons = [Weapon.parse(args.weapon1), Weapon.parse(args.weapon2)]
    except ValueError as e:
        if args.json:
            print(ErrorResponse(error=str(e), error_code=ErrorCode.INVALID_WEAPON).model_dump_json())
        else:
            print(f"Error: {e}")
        sys.exit(1)

    manager = SessionManager()
    session = manager.create_session(metadata={"source": "cli"})

    if not args.json:
        session.store.subscribe(_print_view)

    for weapon in weapons:
        session.play(weapon)

    if args.json:
        print(snapshot(session.game_state).model_dump_json(indent=2))

    log.debug("Round finished with %s", session.game_state.result)
    manager.end_session(session.session_id)
    return 0


def cmd_rules(args):
    """Print the beats-relation."""
    from .engine_core import BEATS

    for winner, loser in BEATS.items():
        print(f"{winner.label} beats {loser.label}")
    print("Equal weapons draw")
    return 0


def _print_view(state):
    from .presentation import render

    view = render(state)
    print(view.message)
    if view.placeholder1 or view.placeholder2:
        print(f"  Player 1: {view.placeholder1 or '-'}")
        print(f"  Player 2: {view.placeholder2 or '-'}")


if __name__ == "__main__":
    main()
