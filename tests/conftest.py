from __future__ import annotations

from datetime import datetime, timezone
from typing import Callable

import httpx
import pytest

from reviewbrief.core.config_models import GitHubSettings, JiraSettings
from reviewbrief.core.pr_models import FileChange, PullRequestRecord
from reviewbrief.core.types import TicketRecord

RouteMap = dict[str, Callable[[], httpx.Response]]


def mock_transport(routes: RouteMap) -> tuple[httpx.MockTransport, list[httpx.Request]]:
    """
    Transport that answers by URL path suffix and records every request.
    Route values are factories so each call gets a fresh Response.
    """
    calls: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        calls.append(request)
        for suffix, make_response in routes.items():
            if request.url.path.endswith(suffix):
                return make_response()
        return httpx.Response(404, text="no route")

    return httpx.MockTransport(handler), calls


@pytest.fixture
def jira_settings() -> JiraSettings:
    return JiraSettings(email="dev@example.com", api_token="jira-token", domain="acme.atlassian.net")


@pytest.fixture
def github_settings() -> GitHubSettings:
    return GitHubSettings(token="gh-token", owner="acme")


@pytest.fixture
def gh_pr_payload() -> dict:
    return {
        "number": 42,
        "title": "Add feature",
        "state": "open",
        "body": "Implements the thing.",
        "created_at": "2024-05-01T09:30:00Z",
        "updated_at": "2024-05-02T14:00:00Z",
        "user": {"login": "octocat"},
    }


@pytest.fixture
def gh_files_payload() -> list[dict]:
    return [
        {
            "filename": "a.go",
            "status": "modified",
            "additions": 3,
            "deletions": 1,
            "patch": "@@ -1,2 +1,4 @@\n-old\n+new\n+newer",
        },
    ]


@pytest.fixture
def ticket() -> TicketRecord:
    return TicketRecord(key="PROJ-1", summary="Fix bug", description="Crash on save", status="Open")


@pytest.fixture
def pull_request() -> PullRequestRecord:
    return PullRequestRecord(
        number=42,
        title="Add feature",
        state="open",
        body="Implements the thing.",
        created_at=datetime(2024, 5, 1, 9, 30, tzinfo=timezone.utc),
        updated_at=datetime(2024, 5, 2, 14, 0, tzinfo=timezone.utc),
        author_login="octocat",
        files=(
            FileChange(path="a.go", status="modified", additions=3, deletions=1, patch="@@ ... @@"),
        ),
    )
