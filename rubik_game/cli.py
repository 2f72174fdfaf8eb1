"""CLI entrypoint for the Rubik's cube game."""

from __future__ import annotations

import argparse
import json
import logging

from .engine import RubikGame
from .moves import DEFAULT_CATALOG
from .notation import format_moves
from .scramble import DEFAULT_SCRAMBLE_STEPS
from .server import RubikHTTPServer


def _load_game(state: str | None, state_file: str | None) -> RubikGame:
    if state and state_file:
        raise ValueError("Use only one of --state or --state-file")
    if state_file:
        with open(state_file, "r", encoding="utf-8") as f:
            return RubikGame.from_record(json.load(f))
    game = RubikGame()
    if state:
        game.raw_cube = state
    return game


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Rubik's cube move engine")
    sub = parser.add_subparsers(dest="mode", required=True)

    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--state", type=str, default=None, help="54-digit raw cube string")
    common.add_argument("--state-file", type=str, default=None, help="JSON game record")
    common.add_argument(
        "--log-level", type=str.upper, default="WARNING", choices=["DEBUG", "INFO", "WARNING", "ERROR"]
    )

    apply_cmd = sub.add_parser("apply", parents=[common], help="Apply a move sequence and print the state")
    apply_cmd.add_argument("moves", help="Moves separated by spaces, e.g. \"R U R' U'\"")

    scramble_cmd = sub.add_parser("scramble", parents=[common], help="Scramble the cube")
    scramble_cmd.add_argument("--steps", type=int, default=DEFAULT_SCRAMBLE_STEPS)
    scramble_cmd.add_argument("--seed", type=int, default=None)

    sub.add_parser("moves", parents=[common], help="List the available move keys")

    headless = sub.add_parser("headless", parents=[common], help="Run headless HTTP server")
    headless.add_argument("--host", default="127.0.0.1")
    headless.add_argument("--port", type=int, default=8000)
    headless.add_argument("--steps", type=int, default=0, help="Scramble steps before serving")
    headless.add_argument("--seed", type=int, default=None)

    return parser


def main(argv: list[str] | None = None):
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=args.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.mode == "moves":
        print(" ".join(DEFAULT_CATALOG.keys()))
        return

    try:
        game = _load_game(args.state, args.state_file)

        if args.mode == "apply":
            game.do_moves(args.moves)
            print(game.raw_cube)
            return

        if args.mode == "scramble":
            _, moves = game.scramble(args.steps, seed=args.seed)
            print(format_moves(moves))
            print(game.raw_cube)
            return

        if args.mode == "headless" and args.steps > 0:
            game.scramble(args.steps, seed=args.seed)
    except (ValueError, KeyError, TypeError, OSError) as exc:
        parser.error(str(exc))

    if args.mode == "headless":
        server = RubikHTTPServer(game=game, host=args.host, port=args.port)
        print(f"Rubik headless server listening on http://{server.host}:{server.port}")
        try:
            server.serve_forever()
        except KeyboardInterrupt:
            pass
        finally:
            server.shutdown()
        return

    parser.error(f"Unsupported mode: {args.mode}")


if __name__ == "__main__":
    main()
