"""initial_schema

Create the schema for Discuss:
- Files (stored assets referenced by stream URI)
- Users (community accounts with points and badges)
- Trackers (one per commented source)
- Comments (threaded through pid, attached to a tracker)

Revision ID: 3c1f0a7d92e4
Revises:
Create Date: 2026-10-17 10:12:04.218713

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = "3c1f0a7d92e4"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        "files",
        sa.Column("fid", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("uri", sa.Text(), nullable=False),
        sa.Column("filename", sa.String(255), nullable=True),
    )

    op.create_table(
        "users",
        sa.Column("uid", sa.Integer(), primary_key=True, autoincrement=False),
        sa.Column("name", sa.String(60), nullable=True),
        sa.Column(
            "profile_image_id",
            sa.Integer(),
            sa.ForeignKey("files.fid", ondelete="SET NULL"),
            nullable=True,
        ),
        sa.Column("points", sa.Integer(), nullable=True),
        sa.Column(
            "badge_ids",
            postgresql.ARRAY(sa.Integer()),
            nullable=False,
            server_default="{}",
        ),
    )

    op.create_table(
        "trackers",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("kind", sa.String(64), nullable=False),
        sa.Column("title", sa.String(255), nullable=True),
        sa.Column("source_id", sa.Text(), nullable=False),
        sa.Column(
            "is_locked", sa.Boolean(), nullable=False, server_default=sa.false()
        ),
        sa.Column("status", sa.Boolean(), nullable=False, server_default=sa.true()),
    )
    op.create_index(
        "idx_trackers_source", "trackers", ["kind", "source_id", "status"]
    )

    op.create_table(
        "comments",
        sa.Column("cid", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("pid", sa.Integer(), nullable=True),
        sa.Column("uid", sa.Integer(), nullable=False),
        sa.Column(
            "entity_id",
            sa.Integer(),
            sa.ForeignKey("trackers.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column(
            "entity_type", sa.String(32), nullable=False, server_default="node"
        ),
        sa.Column(
            "field_name", sa.String(32), nullable=False, server_default="field_c"
        ),
        sa.Column(
            "comment_type",
            sa.String(32),
            nullable=False,
            server_default="page_comment",
        ),
        sa.Column("subject", sa.String(255), nullable=True),
        sa.Column("body", sa.Text(), nullable=True),
        sa.Column("is_private", sa.Boolean(), nullable=True),
        sa.Column("status", sa.Integer(), nullable=False, server_default="1"),
        sa.Column("created", sa.Integer(), nullable=False),
        sa.Column("changed", sa.Integer(), nullable=False),
    )
    op.create_index("idx_comments_entity", "comments", ["entity_id", "entity_type"])
    op.create_index("idx_comments_pid", "comments", ["pid"])


def downgrade() -> None:
    """Downgrade schema."""
    # Drop tables (in reverse order of dependencies)
    op.drop_index("idx_comments_pid", table_name="comments")
    op.drop_index("idx_comments_entity", table_name="comments")
    op.drop_table("comments")
    op.drop_index("idx_trackers_source", table_name="trackers")
    op.drop_table("trackers")
    op.drop_table("users")
    op.drop_table("files")
