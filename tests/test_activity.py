# tests/test_activity.py

from __future__ import annotations

import logging

import httpx
import pytest

from roadmap_cli.activity.events import Event, describe_event
from roadmap_cli.activity.github_client import (
    FeedDecodeError,
    FeedHTTPError,
    FeedTransportError,
    GitHubClient,
    friendly_feed_error_message,
)
from roadmap_cli.cli.activity_cli import main


def _push(repo: str, n: int) -> dict:
    return {
        "type": "PushEvent",
        "repo": {"name": repo},
        "payload": {"commits": [{"message": f"commit {i}"} for i in range(n)]},
    }


def _client(handler) -> GitHubClient:
    return GitHubClient(base_url="https://api.github.test", transport=httpx.MockTransport(handler))


def test_describe_push_event_counts_commits() -> None:
    assert describe_event(Event.from_dict(_push("repo/x", 2))) == "Pushed 2 commits to repo/x"
    assert describe_event(Event.from_dict(_push("repo/x", 1))) == "Pushed 1 commit to repo/x"
    assert describe_event(Event.from_dict(_push("repo/x", 0))) is None


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ({"type": "IssuesEvent", "repo": {"name": "a/b"}, "payload": {"action": "opened"}}, "Opened a new issue in a/b"),
        ({"type": "IssuesEvent", "repo": {"name": "a/b"}, "payload": {"action": "closed"}}, "Closed an issue in a/b"),
        ({"type": "WatchEvent", "repo": {"name": "a/b"}}, "Starred a/b"),
        ({"type": "ForkEvent", "repo": {"name": "a/b"}}, "Forked a/b"),
        ({"type": "CreateEvent", "repo": {"name": "a/b"}, "payload": {"ref_type": "branch"}}, "Created branch in a/b"),
        ({"type": "PullRequestEvent", "repo": {"name": "a/b"}}, "Performed PullRequestEvent on a/b"),
    ],
)
def test_describe_event_templates(raw: dict, expected: str) -> None:
    assert describe_event(Event.from_dict(raw)) == expected


def test_fetch_user_events_requests_expected_url() -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json=[_push("repo/x", 2)])

    with _client(handler) as client:
        events = client.fetch_user_events("octocat")

    assert [e.commit_messages for e in events] == [["commit 0", "commit 1"]]
    assert str(seen[0].url) == "https://api.github.test/users/octocat/events"
    assert "authorization" not in seen[0].headers
    assert seen[0].headers["accept"] == "application/vnd.github+json"


def test_fetch_non_200_raises_http_error() -> None:
    with _client(lambda req: httpx.Response(404, json={"message": "Not Found"})) as client:
        with pytest.raises(FeedHTTPError) as exc_info:
            client.fetch_user_events("ghost")
    assert exc_info.value.status_code == 404
    assert exc_info.value.message == "Not Found"


def test_fetch_transport_error() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    with _client(handler) as client:
        with pytest.raises(FeedTransportError, match="connection refused"):
            client.fetch_user_events("octocat")


@pytest.mark.parametrize("body", [b"<html>", b'{"type": "PushEvent"}', b"[1]"])
def test_fetch_bad_body_raises_decode_error(body: bytes) -> None:
    with _client(lambda req: httpx.Response(200, content=body)) as client:
        with pytest.raises(FeedDecodeError):
            client.fetch_user_events("octocat")


def test_friendly_messages() -> None:
    assert friendly_feed_error_message(FeedHTTPError(500)) == "Error: GitHub API returned status 500"
    assert "not found" in friendly_feed_error_message(FeedHTTPError(404))
    assert friendly_feed_error_message(FeedDecodeError("bad")) == "Error parsing JSON: bad"


def test_cli_prints_activity(capsys, settings) -> None:
    events = [
        _push("repo/x", 2),
        {"type": "WatchEvent", "repo": {"name": "repo/y"}},
        _push("repo/z", 0),
    ]
    client = _client(lambda req: httpx.Response(200, json=events))

    code = main(["octocat"], settings=settings, client=client)

    assert code == 0
    assert capsys.readouterr().out == "Pushed 2 commits to repo/x\nStarred repo/y\n"


def test_cli_empty_feed(capsys, settings) -> None:
    client = _client(lambda req: httpx.Response(200, json=[]))
    assert main(["octocat"], settings=settings, client=client) == 0
    assert capsys.readouterr().out == "No recent activity found for octocat\n"


def test_cli_errors_exit_one(capsys, settings) -> None:
    client = _client(lambda req: httpx.Response(503))
    assert main(["octocat"], settings=settings, client=client) == 1
    assert capsys.readouterr().out == "Error: GitHub API returned status 503\n"

    assert main([], settings=settings, client=client) == 1
    assert "usage: github-activity" in capsys.readouterr().out


def _bad_gzip(request: httpx.Request) -> httpx.Response:
    return httpx.Response(
        200,
        headers={"Content-Encoding": "gzip"},
        stream=httpx.ByteStream(b"not gzip at all"),
    )


def test_fetch_undecodable_body_raises_decode_error() -> None:
    with _client(_bad_gzip) as client:
        with pytest.raises(FeedDecodeError):
            client.fetch_user_events("octocat")


def test_cli_undecodable_body_exits_one(capsys, settings) -> None:
    assert main(["octocat"], settings=settings, client=_client(_bad_gzip)) == 1
    assert capsys.readouterr().out.startswith("Error parsing JSON: ")


def test_feed_failures_log_nothing_at_warning(caplog: pytest.LogCaptureFixture) -> None:
    def refused(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    with caplog.at_level(logging.DEBUG, logger="roadmap_cli"):
        for handler in (refused, _bad_gzip, lambda req: httpx.Response(503)):
            with _client(handler) as client:
                with pytest.raises((FeedTransportError, FeedDecodeError, FeedHTTPError)):
                    client.fetch_user_events("octocat")

    assert [r for r in caplog.records if r.levelno >= logging.WARNING] == []
