"""Linear issue shapes as returned by the GraphQL API.

Reference:
    https://developers.linear.app/docs/graphql/working-with-the-graphql-api

These describe the JSON the triggers read and emit. They are typing aids only;
responses are not validated against them.
"""

from typing import List, Optional, TypedDict, Union


class LinearUserRef(TypedDict):
    """Creator or assignee of an issue."""

    id: str
    name: str
    email: str


class LinearWorkflowStateRef(TypedDict):
    """Workflow state (status) of an issue."""

    id: str
    name: str
    type: str


class LinearLabelRef(TypedDict):
    """Label attached to an issue."""

    id: str
    name: str


class LinearLabelConnection(TypedDict):
    nodes: List[LinearLabelRef]


class LinearProjectRef(TypedDict):
    """Project an issue belongs to."""

    id: str
    name: str


class LinearIssueNode(TypedDict):
    """One node of ``team.issues.nodes``."""

    id: str
    identifier: str
    url: str
    title: str
    description: Optional[str]
    priority: Union[int, float, str]
    estimate: Optional[float]
    dueDate: Optional[str]
    createdAt: str
    updatedAt: str
    creator: LinearUserRef
    assignee: Optional[LinearUserRef]
    state: LinearWorkflowStateRef
    labels: LinearLabelConnection
    project: Optional[LinearProjectRef]


class IssueRecord(LinearIssueNode):
    """Issue as emitted to the host.

    ``id`` is replaced by ``<issueId>-<ordering field value>`` so that the host's
    deduplication sees a new record whenever the ordering field changes.
    """

    issueId: str
