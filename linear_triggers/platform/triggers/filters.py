"""Client-side filters for fetched issues.

Filters run over the already-fetched page only. None of them are pushed down
to the GraphQL query, and a filtered page is never topped up from the next one.
"""

from typing import Any, Callable, List, Mapping, Optional, Sequence

from pydantic import BaseModel, Field, field_validator

IssuePredicate = Callable[[Mapping[str, Any]], bool]


class IssueFilters(BaseModel):
    """Optional filter values taken from the trigger's input data.

    Empty values mean the filter is not configured.
    """

    status_id: Optional[str] = Field(None, description="Workflow state id to match.")
    creator_id: Optional[str] = Field(None, description="Creator user id to match.")
    assignee_id: Optional[str] = Field(None, description="Assignee user id to match.")
    priority: Optional[str] = Field(None, description="Priority value ('0'-'4') to match.")
    label_id: Optional[str] = Field(None, description="Label id the issue must carry.")
    project_id: Optional[str] = Field(None, description="Project id to match.")

    @field_validator("*", mode="before")
    @classmethod
    def normalize_empty(cls, value: Any) -> Optional[str]:
        """Treat empty input as unset and coerce the rest to strings."""
        if value is None or value == "":
            return None
        return str(value)

    @classmethod
    def from_input(cls, input_data: Mapping[str, Any]) -> "IssueFilters":
        """Pick the filter keys out of the trigger input data."""
        return cls.model_validate({name: input_data.get(name) for name in cls.model_fields})

    def predicates(self) -> List[IssuePredicate]:
        """Return the predicates of the configured filters, in application order."""
        predicates: List[IssuePredicate] = []
        if self.status_id:
            predicates.append(lambda issue: issue["state"]["id"] == self.status_id)
        if self.creator_id:
            predicates.append(lambda issue: issue["creator"]["id"] == self.creator_id)
        if self.assignee_id:
            predicates.append(
                lambda issue: bool(issue.get("assignee"))
                and issue["assignee"]["id"] == self.assignee_id
            )
        if self.priority:
            predicates.append(lambda issue: format_priority(issue["priority"]) == self.priority)
        if self.label_id:
            predicates.append(
                lambda issue: any(
                    label["id"] == self.label_id for label in issue["labels"]["nodes"]
                )
            )
        if self.project_id:
            predicates.append(
                lambda issue: bool(issue.get("project"))
                and issue["project"]["id"] == self.project_id
            )
        return predicates


def format_priority(value: Any) -> str:
    """Render a priority the way it is entered in the trigger input ("2", not "2.0")."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def apply_filters(
    issues: Sequence[Mapping[str, Any]], filters: IssueFilters
) -> List[Mapping[str, Any]]:
    """Keep the issues that pass every configured filter, preserving order."""
    result = list(issues)
    for predicate in filters.predicates():
        result = [issue for issue in result if predicate(issue)]
    return result
