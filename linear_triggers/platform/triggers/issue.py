"""New-issue and updated-issue triggers.

Both triggers poll one page of a team's issues from the Linear GraphQL API,
ordered by creation or update time, filter the page in memory and reshape the
records for the host's deduplication.
"""

from enum import Enum
from functools import partial
from typing import List

from linear_triggers.core.exceptions import HaltedError
from linear_triggers.platform.clients.linear import LinearClient
from linear_triggers.platform.configs.issue import ISSUE_INPUT_FIELDS
from linear_triggers.platform.contexts.trigger import TriggerContext
from linear_triggers.platform.cursor import PollCursor
from linear_triggers.platform.entities.linear import IssueRecord, LinearIssueNode
from linear_triggers.platform.samples.issue import ISSUE_SAMPLE
from linear_triggers.platform.triggers._base import (
    TriggerDefinition,
    TriggerDisplay,
    TriggerOperation,
)
from linear_triggers.platform.triggers.filters import IssueFilters, apply_filters
from linear_triggers.platform.triggers.queries import TEAM_ISSUES_QUERY


class OrderField(str, Enum):
    """Issue timestamp used for ordering and for the emitted record id."""

    CREATED_AT = "createdAt"
    UPDATED_AT = "updatedAt"


def to_record(issue: LinearIssueNode, order_by: OrderField) -> IssueRecord:
    """Copy an issue node into the emitted shape.

    ``id`` becomes ``<issue id>-<ordering field value>`` and the original id is
    kept under ``issueId``.
    """
    return {
        **issue,
        "id": f"{issue['id']}-{issue[order_by.value]}",
        "issueId": issue["id"],
    }


async def fetch_issues(order_by: OrderField, ctx: TriggerContext) -> List[IssueRecord]:
    """Poll one page of a team's issues.

    Args:
        order_by: Field the remote query orders by
        ctx: Trigger context supplying input data, credential and cursor store

    Returns:
        Issues that pass every configured filter, in remote order

    Raises:
        HaltedError: If no team is selected
    """
    team_id = ctx.get_input("team_id")
    if not team_id:
        raise HaltedError("Please select the team first.")

    poll_logger = ctx.logger.with_context(team_id=team_id, order_by=order_by.value)
    cursor = PollCursor(ctx.cursor_store, poll_logger)
    after = await cursor.load(ctx.page)

    client = LinearClient(ctx.api_key, http_client=ctx.http_client, logger=poll_logger)
    response = await client.query(
        TEAM_ISSUES_QUERY,
        {"teamId": team_id, "orderBy": order_by.value, "after": after},
    )
    issues: List[LinearIssueNode] = response["data"]["team"]["issues"]["nodes"]

    await cursor.advance(issues)

    filters = IssueFilters.from_input(ctx.input_data)
    matched = apply_filters(issues, filters)
    poll_logger.debug(f"Fetched {len(issues)} issues, {len(matched)} passed filters")

    return [to_record(issue, order_by) for issue in matched]


new_issue = TriggerDefinition(
    key="newIssue",
    noun="Issue",
    display=TriggerDisplay(
        label="New Issue",
        description="Triggers when a new issue is created.",
    ),
    operation=TriggerOperation(
        input_fields=ISSUE_INPUT_FIELDS,
        sample=ISSUE_SAMPLE,
        can_paginate=True,
        perform=partial(fetch_issues, OrderField.CREATED_AT),
    ),
)

updated_issue = TriggerDefinition(
    key="updatedIssue",
    noun="Issue",
    display=TriggerDisplay(
        label="Updated Issue",
        description="Triggers when an issue is updated.",
    ),
    operation=TriggerOperation(
        input_fields=ISSUE_INPUT_FIELDS,
        sample=ISSUE_SAMPLE,
        can_paginate=True,
        perform=partial(fetch_issues, OrderField.UPDATED_AT),
    ),
)
