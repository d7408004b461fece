"""initial_schema

Create the schema for SkillSwap:
- Accounts (public profiles with embedded rating aggregate)
- Account credentials (bcrypt password hashes)
- Swap requests (pending → accepted → completed lifecycle)
- Feedback (entries of the rated account's aggregate)
- Notifications (per-account inbox)
- Admins (role, permissions and login lockout state)

Revision ID: 3f1c2a9d7b10
Revises:
Create Date: 2026-10-18 09:12:44.518203

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = "3f1c2a9d7b10"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.Column(
            "updated_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
    ]


def upgrade() -> None:
    """Upgrade schema."""
    # ========================================================================
    # ACCOUNTS table
    # ========================================================================
    op.create_table(
        "accounts",
        sa.Column("id", sa.UUID(), nullable=False),
        sa.Column("name", sa.String(50), nullable=False),
        sa.Column("email", sa.String(255), nullable=False),  # Lowercased
        sa.Column("location", sa.String(100), nullable=True),
        sa.Column("profile_photo", sa.Text(), nullable=True),
        sa.Column(
            "skills_offered",
            postgresql.ARRAY(sa.String(50)),
            nullable=False,
            server_default="{}",
        ),
        sa.Column(
            "skills_wanted",
            postgresql.ARRAY(sa.String(50)),
            nullable=False,
            server_default="{}",
        ),
        sa.Column(
            "availability", sa.String(20), nullable=False, server_default="available"
        ),
        sa.Column("is_public", sa.Boolean(), nullable=False, server_default="true"),
        sa.Column("is_banned", sa.Boolean(), nullable=False, server_default="false"),
        sa.Column("ban_reason", sa.String(500), nullable=True),
        sa.Column("is_verified", sa.Boolean(), nullable=False, server_default="false"),
        sa.Column("rating_sum", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("rating_count", sa.Integer(), nullable=False, server_default="0"),
        sa.Column(
            "last_active",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("email", name="uq_accounts_email"),
        sa.CheckConstraint("rating_sum >= 0", name="rating_sum_non_negative"),
        sa.CheckConstraint("rating_count >= 0", name="rating_count_non_negative"),
    )
    op.create_index(
        "idx_accounts_created_at", "accounts", [sa.text("created_at DESC")]
    )
    op.create_index("idx_accounts_directory", "accounts", ["is_public", "is_banned"])

    # ========================================================================
    # ACCOUNT_CREDENTIALS table
    # ========================================================================
    op.create_table(
        "account_credentials",
        sa.Column("account_id", sa.UUID(), nullable=False),
        sa.Column("password_hash", sa.String(255), nullable=False),
        *_timestamps(),
        sa.ForeignKeyConstraint(["account_id"], ["accounts.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("account_id"),
    )

    # ========================================================================
    # SWAP_REQUESTS table
    # ========================================================================
    op.create_table(
        "swap_requests",
        sa.Column("id", sa.UUID(), nullable=False),
        sa.Column("from_account_id", sa.UUID(), nullable=False),
        sa.Column("to_account_id", sa.UUID(), nullable=False),
        sa.Column("skills_offered", postgresql.ARRAY(sa.String(50)), nullable=False),
        sa.Column("skills_requested", postgresql.ARRAY(sa.String(50)), nullable=False),
        sa.Column("message", sa.String(1000), nullable=False),
        sa.Column("status", sa.String(20), nullable=False, server_default="pending"),
        sa.Column(
            "feedback_from_user", sa.Boolean(), nullable=False, server_default="false"
        ),
        sa.Column(
            "feedback_to_user", sa.Boolean(), nullable=False, server_default="false"
        ),
        sa.Column("accepted_at", sa.TIMESTAMP(timezone=True), nullable=True),
        sa.Column("completed_at", sa.TIMESTAMP(timezone=True), nullable=True),
        *_timestamps(),
        sa.ForeignKeyConstraint(
            ["from_account_id"], ["accounts.id"], ondelete="CASCADE"
        ),
        sa.ForeignKeyConstraint(["to_account_id"], ["accounts.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint("from_account_id <> to_account_id", name="distinct_parties"),
        sa.CheckConstraint(
            "status IN ('pending', 'accepted', 'rejected', 'cancelled', 'completed')",
            name="valid_swap_status",
        ),
    )
    op.create_index("idx_swap_requests_from", "swap_requests", ["from_account_id"])
    op.create_index("idx_swap_requests_to", "swap_requests", ["to_account_id"])
    op.create_index("idx_swap_requests_status", "swap_requests", ["status"])
    op.create_index(
        "idx_swap_requests_created_at", "swap_requests", [sa.text("created_at DESC")]
    )
    # One pending request per directed pair; the reverse direction is allowed
    op.create_index(
        "uq_swap_requests_pending_pair",
        "swap_requests",
        ["from_account_id", "to_account_id"],
        unique=True,
        postgresql_where=sa.text("status = 'pending'"),
    )

    # ========================================================================
    # FEEDBACK table
    # ========================================================================
    op.create_table(
        "feedback",
        sa.Column("id", sa.UUID(), nullable=False),
        sa.Column("account_id", sa.UUID(), nullable=False),  # Rated account
        sa.Column("from_account_id", sa.UUID(), nullable=False),
        sa.Column("from_name", sa.String(50), nullable=False),
        sa.Column("swap_id", sa.UUID(), nullable=True),
        sa.Column("stars", sa.Integer(), nullable=False),
        sa.Column("comment", sa.String(500), nullable=False),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.ForeignKeyConstraint(["account_id"], ["accounts.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(
            ["from_account_id"], ["accounts.id"], ondelete="CASCADE"
        ),
        sa.ForeignKeyConstraint(
            ["swap_id"], ["swap_requests.id"], ondelete="SET NULL"
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint("stars BETWEEN 1 AND 5", name="stars_in_range"),
    )
    op.create_index("idx_feedback_account_id", "feedback", ["account_id"])
    op.create_index("idx_feedback_from_account_id", "feedback", ["from_account_id"])
    op.create_index("idx_feedback_created_at", "feedback", [sa.text("created_at DESC")])

    # ========================================================================
    # NOTIFICATIONS table
    # ========================================================================
    op.create_table(
        "notifications",
        sa.Column("id", sa.UUID(), nullable=False),
        sa.Column("user_id", sa.UUID(), nullable=False),
        sa.Column("type", sa.String(30), nullable=False),
        sa.Column("title", sa.String(100), nullable=False),
        sa.Column("message", sa.String(500), nullable=False),
        sa.Column("read", sa.Boolean(), nullable=False, server_default="false"),
        sa.Column(
            "data",
            postgresql.JSONB(astext_type=sa.Text()),
            nullable=False,
            server_default="{}",
        ),
        sa.Column("related_account_id", sa.UUID(), nullable=True),
        sa.Column("related_swap_id", sa.UUID(), nullable=True),
        sa.Column("email_sent", sa.Boolean(), nullable=False, server_default="false"),
        *_timestamps(),
        sa.ForeignKeyConstraint(["user_id"], ["accounts.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(
            ["related_account_id"], ["accounts.id"], ondelete="SET NULL"
        ),
        sa.ForeignKeyConstraint(
            ["related_swap_id"], ["swap_requests.id"], ondelete="SET NULL"
        ),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        "idx_notifications_user_created",
        "notifications",
        ["user_id", sa.text("created_at DESC")],
    )
    op.create_index("idx_notifications_user_read", "notifications", ["user_id", "read"])

    # ========================================================================
    # ADMINS table
    # ========================================================================
    op.create_table(
        "admins",
        sa.Column("id", sa.UUID(), nullable=False),
        sa.Column("name", sa.String(50), nullable=False),
        sa.Column("email", sa.String(255), nullable=False),
        sa.Column("password_hash", sa.String(255), nullable=False),
        sa.Column("role", sa.String(20), nullable=False, server_default="moderator"),
        sa.Column(
            "permissions",
            postgresql.ARRAY(sa.String(30)),
            nullable=False,
            server_default="{}",
        ),
        sa.Column("is_active", sa.Boolean(), nullable=False, server_default="true"),
        sa.Column("last_login", sa.TIMESTAMP(timezone=True), nullable=True),
        sa.Column("login_attempts", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("lock_until", sa.TIMESTAMP(timezone=True), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("email", name="uq_admins_email"),
    )


def downgrade() -> None:
    """Downgrade schema."""
    # Drop tables (in reverse order of dependencies)
    op.drop_table("admins")
    op.drop_table("notifications")
    op.drop_table("feedback")
    op.drop_table("swap_requests")
    op.drop_table("account_credentials")
    op.drop_table("accounts")
