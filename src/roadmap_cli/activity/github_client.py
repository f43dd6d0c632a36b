# src/roadmap_cli/activity/github_client.py

from __future__ import annotations

import json
import logging
from typing import Any
from urllib.parse import quote

import httpx

from .events import Event

logger = logging.getLogger(__name__)


class FeedError(Exception):
    """Base class for activity feed failures."""


class FeedTransportError(FeedError):
    """The request never produced a response (DNS, connect, timeout...)."""


class FeedHTTPError(FeedError):
    def __init__(self, status_code: int, message: str | None = None) -> None:
        self.status_code = status_code
        self.message = message
        text = f"GitHub API returned status {status_code}"
        if message:
            text += f" ({message})"
        super().__init__(text)


class FeedDecodeError(FeedError):
    """The response body is not a JSON array of event objects."""


def friendly_feed_error_message(exc: BaseException) -> str:
    """
    Convert feed exceptions into short user-facing messages.
    """
    if isinstance(exc, FeedHTTPError):
        if exc.status_code == 404:
            return "Error: GitHub user not found (status 404)"
        if exc.status_code in (403, 429):
            return (
                f"Error: GitHub API refused the request (status {exc.status_code}), "
                "try again later"
            )
        return f"Error: {exc}"
    if isinstance(exc, FeedTransportError):
        return f"Error fetching data: {exc}"
    if isinstance(exc, FeedDecodeError):
        return f"Error parsing JSON: {exc}"
    return f"Error: {exc}"


def _error_message(resp: httpx.Response) -> str | None:
    # GitHub error bodies look like {"message": "...", "documentation_url": "..."}
    try:
        body = resp.json()
    except (json.JSONDecodeError, UnicodeDecodeError):
        return None
    if isinstance(body, dict) and isinstance(body.get("message"), str):
        return body["message"]
    return None


class GitHubClient:
    """
    Minimal GitHub REST client: one unauthenticated GET per call.

    No pagination, no rate-limit handling, no retries.
    """

    def __init__(
        self,
        *,
        base_url: str = "https://api.github.com",
        timeout: float = 10.0,
        user_agent: str = "roadmap-cli",
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._client = httpx.Client(
            base_url=base_url.rstrip("/"),
            timeout=timeout,
            headers={
                "Accept": "application/vnd.github+json",
                "User-Agent": user_agent,
            },
            transport=transport,
        )

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> GitHubClient:
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def fetch_user_events(self, username: str) -> list[Event]:
        username = username.strip()
        if not username:
            raise ValueError("username is required")

        path = f"/users/{quote(username, safe='')}/events"
        logger.debug("GET %s%s", self._client.base_url, path)

        try:
            resp = self._client.get(path)
        except httpx.DecodingError as exc:
            # Content-Encoding says one thing, the body is another.
            logger.debug("GitHub response could not be decoded user=%s: %s", username, exc)
            raise FeedDecodeError(str(exc) or exc.__class__.__name__) from exc
        except httpx.RequestError as exc:
            logger.debug("GitHub request failed user=%s: %s", username, exc)
            raise FeedTransportError(str(exc) or exc.__class__.__name__) from exc

        if resp.status_code != httpx.codes.OK:
            logger.debug("GitHub returned status=%s user=%s", resp.status_code, username)
            raise FeedHTTPError(resp.status_code, _error_message(resp))

        try:
            data = resp.json()
        except (json.JSONDecodeError, UnicodeDecodeError) as exc:
            raise FeedDecodeError(str(exc)) from exc

        if not isinstance(data, list):
            raise FeedDecodeError(f"expected a JSON array, got {type(data).__name__}")

        events: list[Event] = []
        for idx, item in enumerate(data):
            if not isinstance(item, dict):
                raise FeedDecodeError(f"event {idx} is not an object")
            try:
                events.append(Event.from_dict(item))
            except TypeError as exc:
                raise FeedDecodeError(f"event {idx}: {exc}") from exc

        logger.info("Fetched %d events for user=%s", len(events), username)
        return events
