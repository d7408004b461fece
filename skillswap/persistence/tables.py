"""SQLAlchemy table definitions for SkillSwap.

These definitions are used with SQLAlchemy Core and mirror the schema
created by the Alembic migrations.
"""

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    Column,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    String,
    Table,
    Text,
)
from sqlalchemy.dialects.postgresql import ARRAY, JSONB, TIMESTAMP, UUID

metadata = MetaData()

# ============================================================================
# ACCOUNTS TABLE
# ============================================================================
accounts_table = Table(
    "accounts",
    metadata,
    Column("id", UUID, primary_key=True),
    Column("name", String(50), nullable=False),
    Column("email", String(255), nullable=False, unique=True),  # Lowercased
    Column("location", String(100), nullable=True),
    Column("profile_photo", Text, nullable=True),
    Column("skills_offered", ARRAY(String(50)), nullable=False, server_default="{}"),
    Column("skills_wanted", ARRAY(String(50)), nullable=False, server_default="{}"),
    Column("availability", String(20), nullable=False, server_default="available"),
    Column("is_public", Boolean, nullable=False, server_default="true"),
    Column("is_banned", Boolean, nullable=False, server_default="false"),
    Column("ban_reason", String(500), nullable=True),
    Column("is_verified", Boolean, nullable=False, server_default="false"),
    Column("rating_sum", Integer, nullable=False, server_default="0"),
    Column("rating_count", Integer, nullable=False, server_default="0"),
    Column(
        "last_active", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint("rating_sum >= 0", name="rating_sum_non_negative"),
    CheckConstraint("rating_count >= 0", name="rating_count_non_negative"),
)

Index("idx_accounts_created_at", accounts_table.c.created_at.desc())
Index("idx_accounts_directory", accounts_table.c.is_public, accounts_table.c.is_banned)

# ============================================================================
# ACCOUNT CREDENTIALS TABLE
# ============================================================================
account_credentials_table = Table(
    "account_credentials",
    metadata,
    Column(
        "account_id",
        UUID,
        ForeignKey("accounts.id", ondelete="CASCADE"),
        primary_key=True,
    ),
    Column("password_hash", String(255), nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

# ============================================================================
# FEEDBACK TABLE (entries of the account aggregate)
# ============================================================================
feedback_table = Table(
    "feedback",
    metadata,
    Column("id", UUID, primary_key=True),
    # Rated account (aggregate owner)
    Column(
        "account_id", UUID, ForeignKey("accounts.id", ondelete="CASCADE"), nullable=False
    ),
    Column(
        "from_account_id",
        UUID,
        ForeignKey("accounts.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("from_name", String(50), nullable=False),  # Denormalized from accounts
    Column(
        "swap_id",
        UUID,
        ForeignKey("swap_requests.id", ondelete="SET NULL"),
        nullable=True,
    ),
    Column("stars", Integer, nullable=False),
    Column("comment", String(500), nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint("stars BETWEEN 1 AND 5", name="stars_in_range"),
)

Index("idx_feedback_account_id", feedback_table.c.account_id)
Index("idx_feedback_from_account_id", feedback_table.c.from_account_id)
Index("idx_feedback_created_at", feedback_table.c.created_at.desc())

# ============================================================================
# SWAP REQUESTS TABLE
# ============================================================================
swap_requests_table = Table(
    "swap_requests",
    metadata,
    Column("id", UUID, primary_key=True),
    Column(
        "from_account_id",
        UUID,
        ForeignKey("accounts.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column(
        "to_account_id",
        UUID,
        ForeignKey("accounts.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("skills_offered", ARRAY(String(50)), nullable=False),
    Column("skills_requested", ARRAY(String(50)), nullable=False),
    Column("message", String(1000), nullable=False),
    Column("status", String(20), nullable=False, server_default="pending"),
    Column("feedback_from_user", Boolean, nullable=False, server_default="false"),
    Column("feedback_to_user", Boolean, nullable=False, server_default="false"),
    Column("accepted_at", TIMESTAMP(timezone=True), nullable=True),
    Column("completed_at", TIMESTAMP(timezone=True), nullable=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint("from_account_id <> to_account_id", name="distinct_parties"),
    CheckConstraint(
        "status IN ('pending', 'accepted', 'rejected', 'cancelled', 'completed')",
        name="valid_swap_status",
    ),
)

Index("idx_swap_requests_from", swap_requests_table.c.from_account_id)
Index("idx_swap_requests_to", swap_requests_table.c.to_account_id)
Index("idx_swap_requests_status", swap_requests_table.c.status)
Index("idx_swap_requests_created_at", swap_requests_table.c.created_at.desc())
# At most one pending request per directed pair
PENDING_PAIR_INDEX = "uq_swap_requests_pending_pair"
Index(
    PENDING_PAIR_INDEX,
    swap_requests_table.c.from_account_id,
    swap_requests_table.c.to_account_id,
    unique=True,
    postgresql_where=swap_requests_table.c.status == "pending",
)

# ============================================================================
# NOTIFICATIONS TABLE
# ============================================================================
notifications_table = Table(
    "notifications",
    metadata,
    Column("id", UUID, primary_key=True),
    Column(
        "user_id", UUID, ForeignKey("accounts.id", ondelete="CASCADE"), nullable=False
    ),
    Column("type", String(30), nullable=False),
    Column("title", String(100), nullable=False),
    Column("message", String(500), nullable=False),
    Column("read", Boolean, nullable=False, server_default="false"),
    Column("data", JSONB, nullable=False, server_default="{}"),
    Column(
        "related_account_id",
        UUID,
        ForeignKey("accounts.id", ondelete="SET NULL"),
        nullable=True,
    ),
    Column(
        "related_swap_id",
        UUID,
        ForeignKey("swap_requests.id", ondelete="SET NULL"),
        nullable=True,
    ),
    Column("email_sent", Boolean, nullable=False, server_default="false"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index(
    "idx_notifications_user_created",
    notifications_table.c.user_id,
    notifications_table.c.created_at.desc(),
)
Index(
    "idx_notifications_user_read", notifications_table.c.user_id, notifications_table.c.read
)

# ============================================================================
# ADMINS TABLE
# ============================================================================
admins_table = Table(
    "admins",
    metadata,
    Column("id", UUID, primary_key=True),
    Column("name", String(50), nullable=False),
    Column("email", String(255), nullable=False, unique=True),
    Column("password_hash", String(255), nullable=False),
    Column("role", String(20), nullable=False, server_default="moderator"),
    Column("permissions", ARRAY(String(30)), nullable=False, server_default="{}"),
    Column("is_active", Boolean, nullable=False, server_default="true"),
    Column("last_login", TIMESTAMP(timezone=True), nullable=True),
    Column("login_attempts", Integer, nullable=False, server_default="0"),
    Column("lock_until", TIMESTAMP(timezone=True), nullable=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)
