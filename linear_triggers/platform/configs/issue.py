"""Input fields shared by the issue triggers."""

from linear_triggers.platform.configs.fields import FieldChoice, InputField

PRIORITY_CHOICES = [
    FieldChoice(value="0", sample="0", label="No priority"),
    FieldChoice(value="1", sample="1", label="Urgent"),
    FieldChoice(value="2", sample="2", label="High"),
    FieldChoice(value="3", sample="3", label="Medium"),
    FieldChoice(value="4", sample="4", label="Low"),
]

ISSUE_INPUT_FIELDS = [
    InputField(
        key="team_id",
        label="Team",
        required=True,
        help_text="The team for the issue.",
        dynamic="team.id.name",
        alters_dynamic_fields=True,
    ),
    InputField(
        key="status_id",
        label="Status",
        help_text="The issue status.",
        dynamic="status.id.name",
        alters_dynamic_fields=True,
    ),
    InputField(
        key="creator_id",
        label="Creator",
        help_text="The user who created this issue.",
        dynamic="user.id.name",
        alters_dynamic_fields=True,
    ),
    InputField(
        key="assignee_id",
        label="Assignee",
        help_text="The assignee of this issue.",
        dynamic="user.id.name",
        alters_dynamic_fields=True,
    ),
    InputField(
        key="priority",
        label="Priority",
        help_text="The priority of the issue.",
        choices=PRIORITY_CHOICES,
    ),
    InputField(
        key="label_id",
        label="Label",
        help_text="Label which was assigned to the issue.",
        dynamic="label.id.name",
        alters_dynamic_fields=True,
    ),
    InputField(
        key="project_id",
        label="Project",
        help_text="Issue's project.",
        dynamic="project.id.name",
        alters_dynamic_fields=True,
    ),
]
