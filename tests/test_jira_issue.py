import base64

import httpx
import pytest

from reviewbrief.core.config_models import JiraSettings
from reviewbrief.core.errors import ConfigurationMissing, NotFound, TransportError, UpstreamError
from reviewbrief.jira.issue import fetch_ticket, load_ticket, search_recent_tickets
from tests.conftest import mock_transport

SEARCH = "/rest/api/2/search/jql"


def _issue(key="PROJ-1", summary="Fix bug", description="Crash on save", status="Open"):
    return {"key": key, "fields": {"summary": summary, "description": description, "status": {"name": status}}}


@pytest.mark.asyncio
async def test_fetch_ticket_maps_first_issue(jira_settings):
    transport, calls = mock_transport({SEARCH: lambda: httpx.Response(200, json={"issues": [_issue()]})})

    ticket = await fetch_ticket("PROJ-1", jira_settings, transport)

    assert ticket is not None
    assert ticket.key == "PROJ-1"
    assert ticket.summary == "Fix bug"
    assert ticket.description == "Crash on save"
    assert ticket.status == "Open"
    assert len(calls) == 1


@pytest.mark.asyncio
async def test_search_request_uses_exact_key_query_and_basic_auth(jira_settings):
    transport, calls = mock_transport({SEARCH: lambda: httpx.Response(200, json={"issues": [_issue()]})})

    await fetch_ticket("PROJ-1", jira_settings, transport)

    request = calls[0]
    assert request.method == "GET"
    assert request.url.host == "acme.atlassian.net"
    assert request.url.params["jql"] == 'key = "PROJ-1"'
    assert request.url.params["maxResults"] == "1"
    assert request.url.params["fields"] == "summary,description,status"
    expected = base64.b64encode(b"dev@example.com:jira-token").decode()
    assert request.headers["Authorization"] == f"Basic {expected}"


@pytest.mark.asyncio
@pytest.mark.parametrize("description", ["", None])
async def test_empty_description_gets_placeholder(jira_settings, description):
    payload = {"issues": [_issue(description=description)]}
    transport, _ = mock_transport({SEARCH: lambda: httpx.Response(200, json=payload)})

    ticket = await fetch_ticket("PROJ-1", jira_settings, transport)

    assert ticket.description == "No description provided"


@pytest.mark.asyncio
async def test_zero_issues_is_not_found(jira_settings, capsys):
    transport, _ = mock_transport({SEARCH: lambda: httpx.Response(200, json={"issues": []})})

    ticket = await fetch_ticket("PROJ-404", jira_settings, transport)

    assert ticket is None
    assert "no match for 'PROJ-404'" in capsys.readouterr().out

    with pytest.raises(NotFound):
        await load_ticket("PROJ-404", jira_settings, transport)


@pytest.mark.asyncio
async def test_upstream_error_reports_status_and_body(jira_settings, capsys):
    transport, _ = mock_transport({SEARCH: lambda: httpx.Response(401, text="Unauthorized token")})

    ticket = await fetch_ticket("PROJ-1", jira_settings, transport)

    assert ticket is None
    out = capsys.readouterr().out
    assert "401" in out
    assert "Unauthorized token" in out

    with pytest.raises(UpstreamError) as exc_info:
        await load_ticket("PROJ-1", jira_settings, transport)
    assert exc_info.value.status_codes == {"search": 401}
    assert exc_info.value.body == "Unauthorized token"


@pytest.mark.asyncio
async def test_malformed_json_is_transport_error(jira_settings):
    transport, _ = mock_transport({SEARCH: lambda: httpx.Response(200, text="<html>login</html>")})

    assert await fetch_ticket("PROJ-1", jira_settings, transport) is None
    with pytest.raises(TransportError):
        await load_ticket("PROJ-1", jira_settings, transport)


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "issue",
    [
        None,
        "PROJ-1",
        {"key": "PROJ-1", "fields": "oops"},
        {"key": "PROJ-1", "fields": {"summary": "Fix bug", "status": "Open"}},
    ],
)
async def test_wrong_shaped_issue_is_transport_error(jira_settings, issue, capsys):
    transport, _ = mock_transport({SEARCH: lambda: httpx.Response(200, json={"issues": [issue]})})

    assert await fetch_ticket("PROJ-1", jira_settings, transport) is None
    assert "unexpected response shape" in capsys.readouterr().out
    with pytest.raises(TransportError):
        await load_ticket("PROJ-1", jira_settings, transport)


@pytest.mark.asyncio
async def test_recent_tickets_with_wrong_shaped_entry_is_transport_error(jira_settings):
    payload = {"issues": [_issue("PROJ-3"), {"key": "PROJ-2", "fields": ["summary"]}]}
    transport, _ = mock_transport({SEARCH: lambda: httpx.Response(200, json=payload)})

    with pytest.raises(TransportError):
        await search_recent_tickets("PROJ", jira_settings, transport=transport)


@pytest.mark.asyncio
async def test_network_failure_is_transport_error(jira_settings):
    def refuse(request):
        raise httpx.ConnectError("connection refused", request=request)

    transport = httpx.MockTransport(refuse)

    assert await fetch_ticket("PROJ-1", jira_settings, transport) is None
    with pytest.raises(TransportError):
        await load_ticket("PROJ-1", jira_settings, transport)


@pytest.mark.asyncio
async def test_missing_configuration_makes_no_request(capsys):
    transport, calls = mock_transport({SEARCH: lambda: httpx.Response(200, json={"issues": [_issue()]})})
    settings = JiraSettings(email="dev@example.com")

    ticket = await fetch_ticket("PROJ-1", settings, transport)

    assert ticket is None
    assert len(calls) == 0
    assert "JIRA_API_TOKEN, JIRA_DOMAIN" in capsys.readouterr().out

    with pytest.raises(ConfigurationMissing) as exc_info:
        await load_ticket("PROJ-1", settings, transport)
    assert exc_info.value.missing == ["JIRA_API_TOKEN", "JIRA_DOMAIN"]


@pytest.mark.asyncio
async def test_search_recent_tickets_orders_by_created(jira_settings):
    payload = {"issues": [_issue("PROJ-3", "Newest"), _issue("PROJ-2", "Older")]}
    transport, calls = mock_transport({SEARCH: lambda: httpx.Response(200, json=payload)})

    tickets = await search_recent_tickets("PROJ", jira_settings, limit=5, transport=transport)

    assert [ticket.key for ticket in tickets] == ["PROJ-3", "PROJ-2"]
    assert calls[0].url.params["jql"] == 'project = "PROJ" ORDER BY created DESC'
    assert calls[0].url.params["maxResults"] == "5"
    assert calls[0].url.params["fields"] == "summary,description,status"
