"""Thin HTTP client over a ``requests.Session`` for scraping HTML pages."""

import logging
import time

import requests

logger = logging.getLogger(__name__)

DEFAULT_HEADERS = {
    "Accept": "text/html,application/xhtml+xml",
    "User-Agent": "genpi/0.1 (+https://namegen.jp)",
}


class HttpClient:
    """GET-only HTTP client with optional retry on 429 and network errors.

    ``max_retries`` counts attempts, so the default of 1 means a single
    request with no retry. Any non-2xx status raises ``RuntimeError``.
    """

    def __init__(
        self,
        max_retries: int = 1,
        timeout: float = 30,
        headers: dict[str, str] | None = None,
    ):
        self.session = requests.Session()
        self.session.headers.update(headers or DEFAULT_HEADERS)
        self.max_retries = max(1, max_retries)
        self.timeout = timeout

    def get_text(self, url: str, params: dict | None = None) -> str:
        """GET ``url`` and return the decoded response body.

        Raises RuntimeError on non-success status or persistent network failure.
        """
        for attempt in range(self.max_retries):
            last_attempt = attempt == self.max_retries - 1
            try:
                resp = self.session.get(url, params=params, timeout=self.timeout)
            except requests.exceptions.RequestException as exc:
                if last_attempt:
                    raise RuntimeError(
                        f"Request failed after {self.max_retries} attempt(s): {exc}"
                    ) from exc
                wait = 2 ** (attempt + 1)
                logger.warning(
                    "Request error: %s. Retry in %ds (%d/%d)",
                    exc, wait, attempt + 1, self.max_retries,
                )
                time.sleep(wait)
                continue

            if 200 <= resp.status_code < 300:
                if not resp.encoding or resp.encoding.lower() == "iso-8859-1":
                    resp.encoding = resp.apparent_encoding or "utf-8"
                return resp.text

            if resp.status_code == 429 and not last_attempt:
                wait = 2 ** (attempt + 1)
                logger.warning("Rate limited (429). Waiting %ds...", wait)
                time.sleep(wait)
                continue

            raise RuntimeError(f"HTTP {resp.status_code}: {resp.reason}")

        raise RuntimeError(f"Max retries ({self.max_retries}) exceeded for {url}")

    def close(self):
        """Close the HTTP session."""
        self.session.close()

    def __enter__(self):
        return self

    def __exit__(self, *args):
        self.close()
