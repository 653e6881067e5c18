"""SQLAlchemy table definitions for CivicFix.

They match the schema defined in Alembic migrations.
"""

from sqlalchemy import (
    BigInteger,
    Boolean,
    CheckConstraint,
    Column,
    Identity,
    Index,
    Integer,
    MetaData,
    String,
    Table,
    Text,
)
from sqlalchemy.dialects import postgresql
from sqlalchemy.dialects.postgresql import TIMESTAMP, UUID

metadata = MetaData()

# ============================================================================
# USERS TABLE
# ============================================================================
users_table = Table(
    "users",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("email", String(255), nullable=False, unique=True),
    Column("name", String(255), nullable=True),
    Column("photo_url", Text, nullable=True),
    Column("role", String(20), nullable=False, server_default="citizen"),
    Column("issue_count", Integer, nullable=False, server_default="0"),
    Column("is_premium", Boolean, nullable=False, server_default="false"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint("issue_count >= 0", name="issue_count_non_negative"),
)

Index("idx_users_role", users_table.c.role)

# ============================================================================
# ISSUES TABLE
# ============================================================================
issues_table = Table(
    "issues",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("title", String(200), nullable=False),
    Column("description", Text, nullable=False, server_default=""),
    Column("category", String(100), nullable=False),
    Column("location", String(300), nullable=False),
    Column("image_url", Text, nullable=True),
    Column("reporter_email", String(255), nullable=False),
    Column("reporter_name", String(255), nullable=True),
    Column("status", String(20), nullable=False, server_default="Pending"),
    Column("is_boosted", Boolean, nullable=False, server_default="false"),
    Column("upvote_count", Integer, nullable=False, server_default="0"),
    Column(
        "upvoted_by",
        postgresql.ARRAY(String(255)),
        nullable=False,
        server_default="{}",
    ),
    Column("assigned_staff_email", String(255), nullable=True),
    Column("assigned_staff_name", String(255), nullable=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint(
        "upvote_count = cardinality(upvoted_by)", name="upvote_count_matches_voters"
    ),
)

# Listing order: boosted first, then newest
Index(
    "idx_issues_boosted_created_at",
    issues_table.c.is_boosted.desc(),
    issues_table.c.created_at.desc(),
)
Index("idx_issues_status", issues_table.c.status)
Index("idx_issues_reporter_email", issues_table.c.reporter_email)
Index("idx_issues_assigned_staff_email", issues_table.c.assigned_staff_email)

# ============================================================================
# ISSUE TIMELINE TABLE (append-only, no FK so history outlives the issue)
# ============================================================================
issue_timeline_table = Table(
    "issue_timeline",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("seq", BigInteger, Identity(), nullable=False, unique=True),
    Column("issue_id", UUID, nullable=False),
    Column("status", String(20), nullable=False),
    Column("message", Text, nullable=False),
    Column("updated_by", String(255), nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_issue_timeline_issue_id", issue_timeline_table.c.issue_id)

# ============================================================================
# PAYMENTS TABLE
# ============================================================================
payments_table = Table(
    "payments",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("session_id", String(255), nullable=False, unique=True),
    Column("email", String(255), nullable=False),
    Column("kind", String(20), nullable=False),
    Column("amount", Integer, nullable=False),
    Column("currency", String(3), nullable=False, server_default="usd"),
    Column("issue_id", UUID, nullable=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint("amount >= 0", name="amount_non_negative"),
)

Index("idx_payments_email", payments_table.c.email)
