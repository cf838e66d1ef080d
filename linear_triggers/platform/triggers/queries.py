"""GraphQL documents used by the issue triggers."""

ISSUE_PAGE_SIZE = 5

ISSUE_FIELDS = """
    id
    identifier
    url
    title
    description
    priority
    estimate
    dueDate
    createdAt
    updatedAt
    creator {
      id
      name
      email
    }
    assignee {
      id
      name
      email
    }
    state {
      id
      name
      type
    }
    labels {
      nodes {
        id
        name
      }
    }
    project {
      id
      name
    }
"""


def build_team_issues_query(page_size: int = ISSUE_PAGE_SIZE) -> str:
    """Build the query for one page of a team's issues.

    Variables: ``$teamId``, ``$orderBy`` (createdAt or updatedAt) and ``$after``.
    All issue detail comes back in the same round trip.
    """
    return f"""
    query GetTeamIssues(
      $teamId: String!
      $orderBy: PaginationOrderBy!
      $after: String
    ) {{
      team(id: $teamId) {{
        issues(first: {page_size}, orderBy: $orderBy, after: $after) {{
          nodes {{
            {ISSUE_FIELDS}
          }}
        }}
      }}
    }}
    """


TEAM_ISSUES_QUERY = build_team_issues_query()
