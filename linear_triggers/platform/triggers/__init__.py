"""All polling triggers."""

from .issue import OrderField, fetch_issues, new_issue, updated_issue

ALL_TRIGGERS = [
    new_issue,
    updated_issue,
]

__all__ = ["ALL_TRIGGERS", "OrderField", "fetch_issues", "new_issue", "updated_issue"]
