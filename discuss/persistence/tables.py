"""SQLAlchemy table definitions.

They match the schema defined in Alembic migrations.
"""

from sqlalchemy import (
    Boolean,
    Column,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    String,
    Table,
    Text,
)
from sqlalchemy.dialects.postgresql import ARRAY

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# FILES TABLE
# ============================================================================
files_table = Table(
    "files",
    metadata,
    Column("fid", Integer, primary_key=True, autoincrement=True),
    Column("uri", Text, nullable=False),  # Stream URI, e.g. public://avatar.png
    Column("filename", String(255), nullable=True),
)

# ============================================================================
# USERS TABLE
# ============================================================================
users_table = Table(
    "users",
    metadata,
    Column("uid", Integer, primary_key=True, autoincrement=False),
    Column("name", String(60), nullable=True),
    Column(
        "profile_image_id",
        Integer,
        ForeignKey("files.fid", ondelete="SET NULL"),
        nullable=True,
    ),
    Column("points", Integer, nullable=True),
    Column("badge_ids", ARRAY(Integer), nullable=False, server_default="{}"),
)

# ============================================================================
# TRACKERS TABLE
# ============================================================================
trackers_table = Table(
    "trackers",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("kind", String(64), nullable=False),
    Column("title", String(255), nullable=True),
    Column("source_id", Text, nullable=False),  # Decoded URL or dc: identifier
    Column("is_locked", Boolean, nullable=False, server_default="false"),
    Column("status", Boolean, nullable=False, server_default="true"),
)

Index(
    "idx_trackers_source",
    trackers_table.c.kind,
    trackers_table.c.source_id,
    trackers_table.c.status,
)

# ============================================================================
# COMMENTS TABLE
# ============================================================================
comments_table = Table(
    "comments",
    metadata,
    Column("cid", Integer, primary_key=True, autoincrement=True),
    # No foreign key: replies keep their pid after the parent is deleted
    Column("pid", Integer, nullable=True),
    Column("uid", Integer, nullable=False),
    Column(
        "entity_id",
        Integer,
        ForeignKey("trackers.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("entity_type", String(32), nullable=False, server_default="node"),
    Column("field_name", String(32), nullable=False, server_default="field_c"),
    Column("comment_type", String(32), nullable=False, server_default="page_comment"),
    Column("subject", String(255), nullable=True),
    Column("body", Text, nullable=True),
    Column("is_private", Boolean, nullable=True),
    Column("status", Integer, nullable=False, server_default="1"),
    Column("created", Integer, nullable=False),  # Unix timestamp
    Column("changed", Integer, nullable=False),  # Unix timestamp
)

Index("idx_comments_entity", comments_table.c.entity_id, comments_table.c.entity_type)
Index("idx_comments_pid", comments_table.c.pid)
