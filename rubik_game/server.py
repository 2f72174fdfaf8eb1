"""HTTP API server for a Rubik's cube game."""

from __future__ import annotations

import json
import logging
import threading
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer
from typing import Any

from .engine import RubikGame
from .scramble import DEFAULT_SCRAMBLE_STEPS

logger = logging.getLogger(__name__)


class RubikHTTPServer:
    def __init__(self, game: RubikGame, host: str = "127.0.0.1", port: int = 8000):
        self.game = game
        self._lock = threading.RLock()

        handler_cls = self._build_handler()
        self.httpd = ThreadingHTTPServer((host, port), handler_cls)
        self.host, self.port = self.httpd.server_address

    def _build_handler(self):
        parent = self

        class Handler(BaseHTTPRequestHandler):
            server_version = "RubikGame/1.0"

            def log_message(self, fmt: str, *args):
                logger.debug("%s - %s", self.address_string(), fmt % args)

            def _send_json(self, code: int, payload: dict[str, Any]):
                body = json.dumps(payload).encode("utf-8")
                self.send_response(code)
                self.send_header("Content-Type", "application/json")
                self.send_header("Content-Length", str(len(body)))
                self.end_headers()
                self.wfile.write(body)

            def _read_json(self) -> dict[str, Any]:
                length = int(self.headers.get("Content-Length", "0"))
                if length == 0:
                    return {}
                data = self.rfile.read(length)
                try:
                    obj = json.loads(data.decode("utf-8"))
                except (UnicodeDecodeError, json.JSONDecodeError) as exc:
                    raise ValueError(f"Invalid JSON body: {exc}") from exc
                if not isinstance(obj, dict):
                    raise ValueError("JSON body must be an object")
                return obj

            def do_GET(self):
                with parent._lock:
                    if self.path == "/health":
                        self._send_json(200, {"ready": True, "moves": parent.game.catalog.keys()})
                        return

                    if self.path == "/state":
                        self._send_json(200, parent.game.state_payload())
                        return

                    if self.path == "/solved":
                        self._send_json(200, {"solved": parent.game.is_solved()})
                        return

                self._send_json(404, {"error": "Not Found"})

            def do_POST(self):
                try:
                    body = self._read_json()
                    with parent._lock:
                        game = parent.game

                        if self.path == "/moves":
                            text = body.get("moves")
                            if not isinstance(text, str):
                                raise ValueError("Missing required string field: moves")
                            moves = game.do_moves(text)
                            payload = game.state_payload()
                            payload["applied"] = [str(m) for m in moves]
                            self._send_json(200, payload)
                            return

                        if self.path == "/scramble":
                            steps = body.get("steps", DEFAULT_SCRAMBLE_STEPS)
                            seed = body.get("seed")
                            if seed is not None and (not isinstance(seed, int) or isinstance(seed, bool)):
                                raise ValueError("seed must be an integer or null")
                            _, moves = game.scramble(steps=steps, seed=seed)
                            payload = game.state_payload()
                            payload["moves"] = [str(m) for m in moves]
                            self._send_json(200, payload)
                            return

                        if self.path == "/reset":
                            game.reset()
                            self._send_json(200, game.state_payload())
                            return

                        if self.path == "/state":
                            raw = body.get("state")
                            if raw is None:
                                raise ValueError("Missing required field: state")
                            game.raw_cube = raw
                            self._send_json(200, game.state_payload())
                            return

                        if self.path == "/showguide":
                            game.show_help = not game.show_help
                            self._send_json(200, game.state_payload())
                            return

                except ValueError as exc:
                    logger.warning("rejected %s: %s", self.path, exc)
                    self._send_json(400, {"error": str(exc)})
                    return

                self._send_json(404, {"error": "Not Found"})

        return Handler

    def serve_forever(self):
        self.httpd.serve_forever()

    def start_background(self, daemon: bool = True) -> threading.Thread:
        thread = threading.Thread(target=self.serve_forever, daemon=daemon)
        thread.start()
        return thread

    def shutdown(self):
        self.httpd.shutdown()
        self.httpd.server_close()
