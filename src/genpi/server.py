"""HTTP server exposing the PI generator.

Routes:
    GET {BASE_PATH}/   generate one PI; query flags katakana, halfwidth
    GET /healthz       static "OK"

Status codes: 200 on success, 400 for bad flags, 409 when the names cache
slot is busy, 500 when the upstream name list could not be fetched.
"""

from __future__ import annotations

import http.server
import json
import logging
import urllib.parse
from http import HTTPStatus

from .config import Config
from .domain.errors import BadRequest, Conflict, FetchFailure, NotHiragana
from .domain.generator import PiGenerator
from .domain.models import KanaForm

logger = logging.getLogger(__name__)

_TRUE = {"true", "1", "yes", "on"}
_FALSE = {"false", "0", "no", "off"}


def parse_bool(name: str, params: dict[str, list[str]]) -> bool:
    """Read an optional boolean query flag (last occurrence wins).

    Raises:
        BadRequest: If the value is not a recognised boolean.
    """
    values = params.get(name)
    if not values:
        return False
    value = values[-1].strip().lower()
    if value in _TRUE:
        return True
    if value in _FALSE:
        return False
    raise BadRequest(f"{name} must be a boolean, got {values[-1]!r}")


def kana_form_from_query(query: str) -> KanaForm:
    params = urllib.parse.parse_qs(query, keep_blank_values=True)
    return KanaForm.from_flags(
        katakana=parse_bool("katakana", params),
        halfwidth=parse_bool("halfwidth", params),
    )


class GenPiHandler(http.server.BaseHTTPRequestHandler):
    """Request handler; ``generator`` and ``base_path`` are bound per server."""

    generator: PiGenerator
    base_path: str = ""

    def do_GET(self):
        parsed = urllib.parse.urlparse(self.path)
        path = parsed.path

        if path == "/healthz":
            self._send_text(HTTPStatus.OK, "OK")
        elif path in (self.base_path or "/", f"{self.base_path}/"):
            self._generate(parsed.query)
        else:
            self._send_json(HTTPStatus.NOT_FOUND, {"error": "not found"})

    def _generate(self, query: str):
        try:
            kana_form = kana_form_from_query(query)
            pi = self.generator.generate(kana_form)
        except BadRequest as exc:
            self._send_json(HTTPStatus.BAD_REQUEST, {"error": str(exc)})
        except Conflict as exc:
            self._send_json(HTTPStatus.CONFLICT, {"error": str(exc)})
        except FetchFailure as exc:
            logger.error("Name fetch failed: %s", exc)
            self._send_json(HTTPStatus.INTERNAL_SERVER_ERROR, {"error": "name fetch failed"})
        except NotHiragana as exc:
            logger.error("Upstream kana is not hiragana: %s", exc)
            self._send_json(HTTPStatus.INTERNAL_SERVER_ERROR, {"error": "invalid kana"})
        else:
            self._send_json(HTTPStatus.OK, pi.to_dict())

    def _send_json(self, status: HTTPStatus, payload: dict):
        body = json.dumps(payload, ensure_ascii=False).encode("utf-8")
        self._send(status, "application/json; charset=utf-8", body)

    def _send_text(self, status: HTTPStatus, text: str):
        self._send(status, "text/plain; charset=utf-8", text.encode("utf-8"))

    def _send(self, status: HTTPStatus, content_type: str, body: bytes):
        self.send_response(status)
        self.send_header("Content-Type", content_type)
        self.send_header("Content-Length", str(len(body)))
        self.end_headers()
        self.wfile.write(body)

    def log_message(self, format, *args):
        logger.info("%s - %s", self.address_string(), format % args)


def make_server(
    generator: PiGenerator,
    host: str = "0.0.0.0",
    port: int = 3000,
    base_path: str = "",
) -> http.server.ThreadingHTTPServer:
    """Create (bind, but not start) a threaded server for ``generator``."""
    handler = type(
        "BoundGenPiHandler",
        (GenPiHandler,),
        {"generator": generator, "base_path": base_path},
    )
    server = http.server.ThreadingHTTPServer((host, port), handler)
    server.daemon_threads = True
    return server


def run_server(config: Config, generator: PiGenerator, host: str = "0.0.0.0") -> None:
    """Serve until interrupted."""
    server = make_server(generator, host=host, port=config.port, base_path=config.base_path)
    logger.info(
        "Listening on http://%s:%d%s/",
        host, server.server_address[1], config.base_path,
    )
    try:
        server.serve_forever()
    except KeyboardInterrupt:
        logger.info("Shutting down")
    finally:
        server.server_close()
