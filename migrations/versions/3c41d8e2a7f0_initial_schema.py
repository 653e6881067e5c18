"""initial_schema

Create the schema for CivicFix:
- Users (identity-provider emails, roles, report counter, premium flag)
- Issues (current-state snapshot, voters stored inline)
- Issue timeline (append-only audit log, outlives deleted issues)
- Payments (confirmed boost / subscription payments, one per session id)

Revision ID: 3c41d8e2a7f0
Revises:
Create Date: 2026-10-19 10:12:44.381205

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = "3c41d8e2a7f0"
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
    op.execute('CREATE EXTENSION IF NOT EXISTS "uuid-ossp"')

    # ========================================================================
    # USERS table
    # ========================================================================
    op.create_table(
        "users",
        sa.Column(
            "id",
            sa.UUID(),
            server_default=sa.text("uuid_generate_v4()"),
            nullable=False,
        ),
        sa.Column("email", sa.String(255), nullable=False),
        sa.Column("name", sa.String(255), nullable=True),
        sa.Column("photo_url", sa.Text(), nullable=True),
        sa.Column("role", sa.String(20), nullable=False, server_default="citizen"),
        sa.Column("issue_count", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("is_premium", sa.Boolean(), nullable=False, server_default="false"),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("email", name="uq_users_email"),
        sa.CheckConstraint("issue_count >= 0", name="issue_count_non_negative"),
        sa.CheckConstraint(
            "role IN ('citizen', 'staff', 'admin')", name="users_role_valid"
        ),
    )
    op.create_index("idx_users_role", "users", ["role"])

    # ========================================================================
    # ISSUES table
    # ========================================================================
    op.create_table(
        "issues",
        sa.Column(
            "id",
            sa.UUID(),
            server_default=sa.text("uuid_generate_v4()"),
            nullable=False,
        ),
        sa.Column("title", sa.String(200), nullable=False),
        sa.Column("description", sa.Text(), nullable=False, server_default=""),
        sa.Column("category", sa.String(100), nullable=False),
        sa.Column("location", sa.String(300), nullable=False),
        sa.Column("image_url", sa.Text(), nullable=True),
        sa.Column("reporter_email", sa.String(255), nullable=False),
        sa.Column("reporter_name", sa.String(255), nullable=True),
        sa.Column("status", sa.String(20), nullable=False, server_default="Pending"),
        sa.Column("is_boosted", sa.Boolean(), nullable=False, server_default="false"),
        sa.Column("upvote_count", sa.Integer(), nullable=False, server_default="0"),
        sa.Column(
            "upvoted_by",
            postgresql.ARRAY(sa.String(255)),
            nullable=False,
            server_default=sa.text("'{}'"),
        ),
        sa.Column("assigned_staff_email", sa.String(255), nullable=True),
        sa.Column("assigned_staff_name", sa.String(255), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint(
            "status IN ('Pending', 'In-progress', 'Working', 'Resolved', "
            "'Closed', 'Rejected')",
            name="issues_status_valid",
        ),
        sa.CheckConstraint(
            "upvote_count = cardinality(upvoted_by)",
            name="upvote_count_matches_voters",
        ),
    )
    op.execute(
        "CREATE INDEX idx_issues_boosted_created_at "
        "ON issues (is_boosted DESC, created_at DESC)"
    )
    op.create_index("idx_issues_status", "issues", ["status"])
    op.create_index("idx_issues_reporter_email", "issues", ["reporter_email"])
    op.create_index(
        "idx_issues_assigned_staff_email", "issues", ["assigned_staff_email"]
    )

    # ========================================================================
    # ISSUE_TIMELINE table (no FK: entries outlive their issue)
    # ========================================================================
    op.create_table(
        "issue_timeline",
        sa.Column(
            "id",
            sa.UUID(),
            server_default=sa.text("uuid_generate_v4()"),
            nullable=False,
        ),
        sa.Column("seq", sa.BigInteger(), sa.Identity(), nullable=False),
        sa.Column("issue_id", sa.UUID(), nullable=False),
        sa.Column("status", sa.String(20), nullable=False),
        sa.Column("message", sa.Text(), nullable=False),
        sa.Column("updated_by", sa.String(255), nullable=False),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("seq", name="uq_issue_timeline_seq"),
    )
    op.create_index("idx_issue_timeline_issue_id", "issue_timeline", ["issue_id"])

    # Entries are append-only
    op.execute("""
        CREATE OR REPLACE FUNCTION reject_timeline_mutation()
        RETURNS TRIGGER AS $$
        BEGIN
            RAISE EXCEPTION 'issue_timeline is append-only';
        END;
        $$ LANGUAGE plpgsql;
    """)
    op.execute("""
        CREATE TRIGGER issue_timeline_append_only
        BEFORE UPDATE OR DELETE ON issue_timeline
        FOR EACH ROW EXECUTE FUNCTION reject_timeline_mutation();
    """)

    # ========================================================================
    # PAYMENTS table
    # ========================================================================
    op.create_table(
        "payments",
        sa.Column(
            "id",
            sa.UUID(),
            server_default=sa.text("uuid_generate_v4()"),
            nullable=False,
        ),
        sa.Column("session_id", sa.String(255), nullable=False),
        sa.Column("email", sa.String(255), nullable=False),
        sa.Column("kind", sa.String(20), nullable=False),
        sa.Column("amount", sa.Integer(), nullable=False),
        sa.Column("currency", sa.String(3), nullable=False, server_default="usd"),
        sa.Column("issue_id", sa.UUID(), nullable=True),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("session_id", name="uq_payments_session_id"),
        sa.CheckConstraint("amount >= 0", name="amount_non_negative"),
        sa.CheckConstraint(
            "kind IN ('boost', 'subscription')", name="payments_kind_valid"
        ),
        sa.CheckConstraint(
            "kind <> 'boost' OR issue_id IS NOT NULL", name="boost_requires_issue"
        ),
    )
    op.create_index("idx_payments_email", "payments", ["email"])


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_table("payments")

    op.execute("DROP TRIGGER IF EXISTS issue_timeline_append_only ON issue_timeline")
    op.execute("DROP FUNCTION IF EXISTS reject_timeline_mutation()")
    op.drop_table("issue_timeline")

    op.execute("DROP INDEX IF EXISTS idx_issues_boosted_created_at")
    op.drop_table("issues")
    op.drop_table("users")
