"""Unit tests for the new-issue and updated-issue triggers."""

import json

import httpx
import pytest

from linear_triggers.adapters.cursor_store.fake import FakeCursorStore
from linear_triggers.core.exceptions import ErrorCategory, HaltedError
from linear_triggers.platform.configs.issue import ISSUE_INPUT_FIELDS
from linear_triggers.platform.contexts.trigger import TriggerContext
from linear_triggers.platform.samples.issue import ISSUE_SAMPLE
from linear_triggers.platform.triggers import (
    ALL_TRIGGERS,
    OrderField,
    fetch_issues,
    new_issue,
    updated_issue,
)
from linear_triggers.platform.triggers.issue import to_record


def _issue(n: int, **overrides) -> dict:
    """Build a Linear issue node numbered ``n``."""
    node = {
        "id": f"issue-{n}",
        "identifier": f"ENG-{n}",
        "url": f"https://linear.app/acme/issue/ENG-{n}",
        "title": f"Issue {n}",
        "description": None,
        "priority": 3,
        "estimate": None,
        "dueDate": None,
        "createdAt": f"2024-03-0{n}T00:00:00.000Z",
        "updatedAt": f"2024-06-0{n}T12:00:00.000Z",
        "creator": {"id": "user-1", "name": "Alice", "email": "alice@acme.com"},
        "assignee": {"id": "user-2", "name": "Bob", "email": "bob@acme.com"},
        "state": {"id": "state-todo", "name": "Todo", "type": "unstarted"},
        "labels": {"nodes": []},
        "project": None,
    }
    node.update(overrides)
    return node


def _five_issues() -> list:
    return [_issue(n) for n in range(1, 6)]


def _response(nodes: list) -> dict:
    """Build a GetTeamIssues response body."""
    return {"data": {"team": {"issues": {"nodes": nodes}}}}


class _LinearStub:
    """MockTransport handler that records requests and replays one body."""

    def __init__(self, body, status_code: int = 200):
        self.body = body
        self.status_code = status_code
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return httpx.Response(self.status_code, json=self.body)

    @property
    def payload(self) -> dict:
        return json.loads(self.requests[-1].content)

    @property
    def variables(self) -> dict:
        return self.payload["variables"]


@pytest.fixture
def linear_stub():
    return _LinearStub(_response(_five_issues()))


@pytest.fixture
def make_ctx(linear_stub):
    """Factory for trigger contexts wired to the Linear stub."""
    clients = []

    def _make(input_data=None, page=0, store=None, stub=None):
        client = httpx.AsyncClient(transport=httpx.MockTransport(stub or linear_stub))
        clients.append(client)
        return TriggerContext(
            input_data={"team_id": "team-1"} if input_data is None else input_data,
            api_key="lin_api_test",
            cursor_store=store if store is not None else FakeCursorStore(),
            page=page,
            http_client=client,
        )

    return _make


# ---------------------------------------------------------------------------
# missing team
# ---------------------------------------------------------------------------


@pytest.mark.asyncio
@pytest.mark.parametrize("input_data", [{}, {"team_id": ""}, {"team_id": None, "priority": "2"}])
async def test_missing_team_halts_before_network(make_ctx, linear_stub, input_data):
    """Without a team the poll halts and neither the API nor the cursor is touched."""
    store = FakeCursorStore(initial="issue-9")
    ctx = make_ctx(input_data=input_data, page=3, store=store)

    with pytest.raises(HaltedError) as exc_info:
        await fetch_issues(OrderField.CREATED_AT, ctx)

    assert exc_info.value.message == "Please select the team first."
    assert exc_info.value.category == ErrorCategory.USER_CONFIGURATION
    assert exc_info.value.retryable is False
    assert linear_stub.requests == []
    assert not store.touched


# ---------------------------------------------------------------------------
# unfiltered polls
# ---------------------------------------------------------------------------


@pytest.mark.asyncio
async def test_first_poll_returns_all_issues_with_composite_ids(make_ctx, linear_stub):
    """Five issues, no filters, ordered by createdAt: all five come back."""
    store = FakeCursorStore()
    ctx = make_ctx(store=store)

    records = await fetch_issues(OrderField.CREATED_AT, ctx)

    assert [r["issueId"] for r in records] == [f"issue-{n}" for n in range(1, 6)]
    for n, record in enumerate(records, start=1):
        assert record["id"] == f"issue-{n}-2024-03-0{n}T00:00:00.000Z"
        assert record["id"] == f"{record['issueId']}-{record['createdAt']}"
        assert record["identifier"] == f"ENG-{n}"
    assert store.writes == ["issue-5"]
    assert store.get_calls == 0
    assert linear_stub.variables == {
        "teamId": "team-1",
        "orderBy": "createdAt",
        "after": None,
    }


@pytest.mark.asyncio
async def test_updated_ordering_uses_updated_at_for_ids(make_ctx, linear_stub):
    records = await fetch_issues(OrderField.UPDATED_AT, make_ctx())

    assert records[0]["id"] == "issue-1-2024-06-01T12:00:00.000Z"
    assert linear_stub.variables["orderBy"] == "updatedAt"


@pytest.mark.asyncio
async def test_subsequent_poll_resumes_after_stored_cursor(make_ctx, linear_stub):
    """The cursor stored by the first poll becomes the second poll's ``after``."""
    store = FakeCursorStore()

    await fetch_issues(OrderField.CREATED_AT, make_ctx(store=store, page=0))
    assert linear_stub.variables["after"] is None

    await fetch_issues(OrderField.CREATED_AT, make_ctx(store=store, page=1))

    assert store.get_calls == 1
    assert linear_stub.variables["after"] == "issue-5"


@pytest.mark.asyncio
async def test_first_poll_ignores_stale_cursor(make_ctx, linear_stub):
    store = FakeCursorStore(initial="issue-42")

    await fetch_issues(OrderField.CREATED_AT, make_ctx(store=store, page=0))

    assert store.get_calls == 0
    assert linear_stub.variables["after"] is None


@pytest.mark.asyncio
async def test_empty_page_does_not_move_cursor(make_ctx):
    store = FakeCursorStore(initial="issue-5")
    stub = _LinearStub(_response([]))

    records = await fetch_issues(OrderField.CREATED_AT, make_ctx(store=store, page=2, stub=stub))

    assert records == []
    assert store.writes == []
    assert store.value == "issue-5"


@pytest.mark.asyncio
async def test_repeated_first_polls_are_identical(make_ctx):
    first = await fetch_issues(OrderField.CREATED_AT, make_ctx())
    second = await fetch_issues(OrderField.CREATED_AT, make_ctx())

    assert first == second
    assert [r["id"] for r in first] == [r["id"] for r in second]


@pytest.mark.asyncio
async def test_request_shape(make_ctx, linear_stub):
    """One POST with JSON headers, the raw API key and a five-issue page."""
    await fetch_issues(OrderField.CREATED_AT, make_ctx())

    assert len(linear_stub.requests) == 1
    request = linear_stub.requests[0]
    assert request.method == "POST"
    assert str(request.url) == "https://api.linear.app/graphql"
    assert request.headers["authorization"] == "lin_api_test"
    assert request.headers["content-type"] == "application/json"
    assert request.headers["accept"] == "application/json"
    assert "issues(first: 5, orderBy: $orderBy, after: $after)" in linear_stub.payload["query"]


# ---------------------------------------------------------------------------
# filters
# ---------------------------------------------------------------------------


@pytest.mark.asyncio
async def test_priority_filter_keeps_matches_and_still_advances_cursor(make_ctx):
    nodes = _five_issues()
    nodes[1]["priority"] = 2
    nodes[3]["priority"] = 2
    store = FakeCursorStore()
    ctx = make_ctx(
        input_data={"team_id": "team-1", "priority": "2"},
        store=store,
        stub=_LinearStub(_response(nodes)),
    )

    records = await fetch_issues(OrderField.CREATED_AT, ctx)

    assert [r["issueId"] for r in records] == ["issue-2", "issue-4"]
    assert store.writes == ["issue-5"]


@pytest.mark.asyncio
async def test_cursor_advances_when_every_issue_is_filtered_out(make_ctx):
    store = FakeCursorStore()
    ctx = make_ctx(input_data={"team_id": "team-1", "status_id": "state-done"}, store=store)

    records = await fetch_issues(OrderField.CREATED_AT, ctx)

    assert records == []
    assert store.writes == ["issue-5"]


@pytest.mark.asyncio
async def test_assignee_filter_excludes_unassigned_issues(make_ctx):
    nodes = _five_issues()
    nodes[0]["assignee"] = None
    nodes[2]["assignee"] = {"id": "user-3", "name": "Carol", "email": "carol@acme.com"}
    ctx = make_ctx(
        input_data={"team_id": "team-1", "assignee_id": "user-2"},
        stub=_LinearStub(_response(nodes)),
    )

    records = await fetch_issues(OrderField.CREATED_AT, ctx)

    assert [r["issueId"] for r in records] == ["issue-2", "issue-4", "issue-5"]


@pytest.mark.asyncio
async def test_project_filter_excludes_issues_without_project(make_ctx):
    nodes = _five_issues()
    nodes[1]["project"] = {"id": "proj-1", "name": "Launch"}
    nodes[2]["project"] = {"id": "proj-2", "name": "Other"}
    ctx = make_ctx(
        input_data={"team_id": "team-1", "project_id": "proj-1"},
        stub=_LinearStub(_response(nodes)),
    )

    records = await fetch_issues(OrderField.CREATED_AT, ctx)

    assert [r["issueId"] for r in records] == ["issue-2"]


@pytest.mark.asyncio
async def test_filters_are_conjunctive(make_ctx):
    """A record must pass every configured filter."""
    bug = {"id": "label-bug", "name": "Bug"}
    nodes = _five_issues()
    nodes[0]["labels"] = {"nodes": [bug]}
    nodes[0]["state"] = {"id": "state-done", "name": "Done", "type": "completed"}
    nodes[1]["labels"] = {"nodes": [{"id": "label-ui", "name": "UI"}, bug]}
    nodes[2]["state"] = {"id": "state-done", "name": "Done", "type": "completed"}
    nodes[3]["labels"] = {"nodes": [bug]}
    nodes[3]["state"] = {"id": "state-done", "name": "Done", "type": "completed"}
    nodes[3]["creator"] = {"id": "user-9", "name": "Zed", "email": "zed@acme.com"}
    ctx = make_ctx(
        input_data={
            "team_id": "team-1",
            "status_id": "state-done",
            "label_id": "label-bug",
            "creator_id": "user-1",
        },
        stub=_LinearStub(_response(nodes)),
    )

    records = await fetch_issues(OrderField.CREATED_AT, ctx)

    assert [r["issueId"] for r in records] == ["issue-1"]
    for record in records:
        assert record["state"]["id"] == "state-done"
        assert record["creator"]["id"] == "user-1"
        assert any(label["id"] == "label-bug" for label in record["labels"]["nodes"])


@pytest.mark.asyncio
async def test_empty_filter_values_are_ignored(make_ctx):
    ctx = make_ctx(
        input_data={
            "team_id": "team-1",
            "status_id": "",
            "creator_id": "",
            "assignee_id": None,
            "priority": "",
            "label_id": "",
            "project_id": "",
        }
    )

    records = await fetch_issues(OrderField.CREATED_AT, ctx)

    assert len(records) == 5


# ---------------------------------------------------------------------------
# failures
# ---------------------------------------------------------------------------


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "body, error",
    [
        ({"data": {}}, KeyError),
        ({"data": {"team": None}}, TypeError),
        ({"data": None, "errors": [{"message": "Entity not found"}]}, TypeError),
    ],
)
async def test_unexpected_response_shape_propagates(make_ctx, body, error):
    store = FakeCursorStore()
    ctx = make_ctx(store=store, stub=_LinearStub(body))

    with pytest.raises(error):
        await fetch_issues(OrderField.CREATED_AT, ctx)

    assert store.writes == []


@pytest.mark.asyncio
async def test_http_error_propagates_without_cursor_write(make_ctx):
    store = FakeCursorStore(initial="issue-5")
    stub = _LinearStub({"errors": [{"message": "Authentication required"}]}, status_code=401)
    ctx = make_ctx(store=store, page=1, stub=stub)

    with pytest.raises(httpx.HTTPStatusError):
        await fetch_issues(OrderField.CREATED_AT, ctx)

    assert store.writes == []


# ---------------------------------------------------------------------------
# record mapping
# ---------------------------------------------------------------------------


def test_to_record_copies_fields_and_keeps_original_id():
    node = _issue(1)

    record = to_record(node, OrderField.CREATED_AT)

    assert record["id"] == "issue-1-2024-03-01T00:00:00.000Z"
    assert record["issueId"] == "issue-1"
    assert {k: v for k, v in record.items() if k not in ("id", "issueId")} == {
        k: v for k, v in node.items() if k != "id"
    }
    assert node["id"] == "issue-1"


# ---------------------------------------------------------------------------
# definitions
# ---------------------------------------------------------------------------


def test_trigger_definitions_share_fields_and_sample():
    assert [t.key for t in ALL_TRIGGERS] == ["newIssue", "updatedIssue"]
    for trigger in (new_issue, updated_issue):
        assert trigger.noun == "Issue"
        assert trigger.operation.can_paginate is True
        assert trigger.operation.input_fields == ISSUE_INPUT_FIELDS
        assert trigger.operation.sample == ISSUE_SAMPLE
    assert new_issue.display.label == "New Issue"
    assert updated_issue.display.label == "Updated Issue"


def test_trigger_definitions_bind_ordering_field():
    assert new_issue.operation.perform.args == (OrderField.CREATED_AT,)
    assert updated_issue.operation.perform.args == (OrderField.UPDATED_AT,)


@pytest.mark.asyncio
async def test_definition_perform_runs_fetch(make_ctx, linear_stub):
    records = await updated_issue.perform(make_ctx())

    assert len(records) == 5
    assert linear_stub.variables["orderBy"] == "updatedAt"
    assert records[4]["id"] == "issue-5-2024-06-05T12:00:00.000Z"
