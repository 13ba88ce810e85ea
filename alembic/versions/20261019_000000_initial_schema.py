"""Initial schema for MyLife Companion

Revision ID: 20261019_000000
Revises: None
Create Date: 2026-10-19 00:00:00.000000

This is the initial migration that creates every table used by the service:
- Accounts (users, user_preferences)
- Tasks (task_categories, tasks)
- Calendar (calendar_categories, calendar_events)
- Health tracking (health_metrics, health_calendar_events)
- Emotional support chat (support_messages)

Timestamps are stored as naive UTC.

Revision format: YYYYMMDD_HHMMSS_description

"""

from typing import Sequence, Union

import sqlalchemy as sa

from alembic import op

# revision identifiers, used by Alembic.
revision: str = "20261019_000000"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.Column("updated_at", sa.DateTime(), nullable=False),
    ]


def upgrade() -> None:
    """Create all tables."""

    # Create users table
    op.create_table(
        "users",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("username", sa.String(50), nullable=False),
        sa.Column("email", sa.String(100), nullable=False),
        sa.Column("full_name", sa.String(100), nullable=True),
        sa.Column("avatar", sa.String(255), nullable=True),
        sa.Column("role", sa.String(20), nullable=False),
        sa.Column("status", sa.String(20), nullable=False),
        sa.Column("password_hash", sa.String(255), nullable=False),
        sa.Column("last_login", sa.DateTime(), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
        sa.Index("ix_users_username", "username", unique=True),
        sa.Index("ix_users_email", "email", unique=True),
    )

    # Create user_preferences table
    op.create_table(
        "user_preferences",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("user_id", sa.Integer(), nullable=False),
        sa.Column("phone", sa.String(30), nullable=True),
        sa.Column("school", sa.String(100), nullable=True),
        sa.Column("grade", sa.String(30), nullable=True),
        sa.Column("bio", sa.Text(), nullable=True),
        sa.Column("email_reminders", sa.Boolean(), nullable=False),
        sa.Column("task_notifications", sa.Boolean(), nullable=False),
        sa.Column("health_reminders", sa.Boolean(), nullable=False),
        sa.Column("emotional_support_messages", sa.Boolean(), nullable=False),
        sa.Column("share_health_data", sa.Boolean(), nullable=False),
        sa.Column("share_emotional_data", sa.Boolean(), nullable=False),
        sa.Column("allow_parent_access", sa.Boolean(), nullable=False),
        sa.Column("allow_school_access", sa.Boolean(), nullable=False),
        sa.Column("dark_mode", sa.Boolean(), nullable=False),
        sa.Column("color_theme", sa.String(20), nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"]),
        sa.Index("ix_user_preferences_user_id", "user_id", unique=True),
    )

    # Create task_categories table
    op.create_table(
        "task_categories",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("user_id", sa.Integer(), nullable=False),
        sa.Column("name", sa.String(50), nullable=False),
        sa.Column("color", sa.String(20), nullable=False),
        sa.Column("icon", sa.String(50), nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"]),
        sa.Index("ix_task_categories_user_id", "user_id"),
    )

    # Create tasks table
    op.create_table(
        "tasks",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("user_id", sa.Integer(), nullable=False),
        sa.Column("title", sa.String(100), nullable=False),
        sa.Column("description", sa.Text(), nullable=False),
        sa.Column("due_date", sa.DateTime(), nullable=True),
        sa.Column("priority", sa.String(10), nullable=False),
        sa.Column("status", sa.String(20), nullable=False),
        sa.Column("category_id", sa.Integer(), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"]),
        sa.ForeignKeyConstraint(["category_id"], ["task_categories.id"]),
        sa.Index("ix_tasks_user_id", "user_id"),
        sa.Index("ix_tasks_due_date", "due_date"),
    )

    # Create calendar_categories table
    op.create_table(
        "calendar_categories",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("user_id", sa.Integer(), nullable=False),
        sa.Column("name", sa.String(50), nullable=False),
        sa.Column("color", sa.String(20), nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"]),
        sa.Index("ix_calendar_categories_user_id", "user_id"),
    )

    # Create calendar_events table
    op.create_table(
        "calendar_events",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("user_id", sa.Integer(), nullable=False),
        sa.Column("title", sa.String(100), nullable=False),
        sa.Column("description", sa.Text(), nullable=False),
        sa.Column("location", sa.String(255), nullable=False),
        sa.Column("start_time", sa.DateTime(), nullable=False),
        sa.Column("end_time", sa.DateTime(), nullable=False),
        sa.Column("all_day", sa.Boolean(), nullable=False),
        sa.Column("reminder", sa.Integer(), nullable=True),
        sa.Column("category_id", sa.Integer(), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"]),
        sa.ForeignKeyConstraint(["category_id"], ["calendar_categories.id"]),
        sa.Index("ix_calendar_events_user_id", "user_id"),
        sa.Index("ix_calendar_events_start_time", "start_time"),
    )

    # Create health_metrics table
    op.create_table(
        "health_metrics",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("user_id", sa.Integer(), nullable=False),
        sa.Column("type", sa.String(20), nullable=False),
        sa.Column("value", sa.Float(), nullable=False),
        sa.Column("unit", sa.String(20), nullable=False),
        sa.Column("date", sa.DateTime(), nullable=False),
        sa.Column("notes", sa.Text(), nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"]),
        sa.Index("ix_health_metrics_user_id", "user_id"),
        sa.Index("ix_health_metrics_type", "type"),
        sa.Index("ix_health_metrics_date", "date"),
        sa.Index("ix_health_metrics_created_at", "created_at"),
    )

    # Create health_calendar_events table
    op.create_table(
        "health_calendar_events",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("user_id", sa.Integer(), nullable=False),
        sa.Column("health_metric_id", sa.Integer(), nullable=True),
        sa.Column("title", sa.String(100), nullable=False),
        sa.Column("description", sa.Text(), nullable=False),
        sa.Column("start_time", sa.DateTime(), nullable=False),
        sa.Column("end_time", sa.DateTime(), nullable=False),
        sa.Column("category", sa.String(20), nullable=False),
        sa.Column("color", sa.String(20), nullable=False),
        sa.Column("all_day", sa.Boolean(), nullable=False),
        sa.Column("metric_value", sa.Float(), nullable=True),
        sa.Column("recurrence_frequency", sa.String(10), nullable=False),
        sa.Column("recurrence_interval", sa.Integer(), nullable=False),
        sa.Column("recurrence_end_date", sa.DateTime(), nullable=True),
        sa.Column("reminder_time", sa.Integer(), nullable=True),
        sa.Column("reminder_type", sa.String(20), nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"]),
        sa.ForeignKeyConstraint(["health_metric_id"], ["health_metrics.id"]),
        sa.Index("ix_health_calendar_events_user_id", "user_id"),
        sa.Index("ix_health_calendar_events_health_metric_id", "health_metric_id"),
        sa.Index("ix_health_calendar_events_start_time", "start_time"),
        sa.Index("ix_health_calendar_events_category", "category"),
    )

    # Create support_messages table
    op.create_table(
        "support_messages",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("user_id", sa.Integer(), nullable=False),
        sa.Column("message", sa.Text(), nullable=False),
        sa.Column("sender_type", sa.String(10), nullable=False),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"]),
        sa.Index("ix_support_messages_user_id", "user_id"),
        sa.Index("ix_support_messages_created_at", "created_at"),
    )


def downgrade() -> None:
    """Drop all tables created in upgrade."""
    op.drop_table("support_messages")
    op.drop_table("health_calendar_events")
    op.drop_table("health_metrics")
    op.drop_table("calendar_events")
    op.drop_table("calendar_categories")
    op.drop_table("tasks")
    op.drop_table("task_categories")
    op.drop_table("user_preferences")
    op.drop_table("users")
