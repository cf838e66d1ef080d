"""Sample issue shown by the host when a user tests an issue trigger."""

ISSUE_SAMPLE = {
    "id": "7ba8b3c4-1f9e-4d6a-9d1b-2f3c4e5a6b7c-2024-03-01T09:15:22.000Z",
    "issueId": "7ba8b3c4-1f9e-4d6a-9d1b-2f3c4e5a6b7c",
    "identifier": "ENG-123",
    "url": "https://linear.app/acme/issue/ENG-123/fix-login-redirect",
    "title": "Fix login redirect",
    "description": "Users land on a blank page after signing in from the mobile app.",
    "priority": 2,
    "estimate": 3,
    "dueDate": "2024-03-15",
    "createdAt": "2024-03-01T09:15:22.000Z",
    "updatedAt": "2024-03-02T14:40:05.000Z",
    "creator": {
        "id": "c1d2e3f4-0000-4000-8000-000000000001",
        "name": "Alice Doe",
        "email": "alice@acme.com",
    },
    "assignee": {
        "id": "c1d2e3f4-0000-4000-8000-000000000002",
        "name": "Bob Roe",
        "email": "bob@acme.com",
    },
    "state": {
        "id": "5e6f7a8b-0000-4000-8000-000000000010",
        "name": "In Progress",
        "type": "started",
    },
    "labels": {
        "nodes": [
            {"id": "9a8b7c6d-0000-4000-8000-000000000020", "name": "Bug"},
        ]
    },
    "project": {
        "id": "3c4d5e6f-0000-4000-8000-000000000030",
        "name": "Mobile Auth",
    },
}
