"""SQLAlchemy table definitions for Fake Stack Overflow.

They match the schema defined in Alembic migrations.
"""

from sqlalchemy import (
    CheckConstraint,
    Column,
    Enum,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    String,
    Table,
    Text,
    UniqueConstraint,
)
from sqlalchemy.dialects.postgresql import TIMESTAMP, UUID

metadata = MetaData()

# ============================================================================
# USERS TABLE
# ============================================================================
users_table = Table(
    "users",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("username", String(255), nullable=False, unique=True),
    Column("email", String(255), nullable=False, unique=True),  # Stored lowercased
    Column("password_hash", String(255), nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

# ============================================================================
# TAGS TABLE
# ============================================================================
tags_table = Table(
    "tags",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("name", String(20), nullable=False, unique=True),
)

# ============================================================================
# QUESTIONS TABLE
# ============================================================================
questions_table = Table(
    "questions",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("title", String(100), nullable=False),
    Column("text", Text, nullable=False),
    Column("asked_by", String(255), nullable=False),  # Username, not a user FK
    Column("asked_at", TIMESTAMP(timezone=True), nullable=False),
    Column("views", Integer, nullable=False, server_default="0"),
    Column("upvote_count", Integer, nullable=False, server_default="0"),
    Column("downvote_count", Integer, nullable=False, server_default="0"),
    CheckConstraint("views >= 0", name="question_views_non_negative"),
    CheckConstraint(
        "upvote_count >= 0 AND downvote_count >= 0",
        name="question_votes_non_negative",
    ),
)

Index("idx_questions_asked_at", questions_table.c.asked_at.desc())

# ============================================================================
# QUESTION_TAGS TABLE (junction table for many-to-many relationship)
# ============================================================================
question_tags_table = Table(
    "question_tags",
    metadata,
    Column(
        "question_id",
        UUID,
        ForeignKey("questions.id", ondelete="CASCADE"),
        primary_key=True,
    ),
    Column(
        "tag_id", UUID, ForeignKey("tags.id", ondelete="RESTRICT"), primary_key=True
    ),
    Column("position", Integer, nullable=False, server_default="0"),
)

Index("idx_question_tags_tag_id", question_tags_table.c.tag_id)

# ============================================================================
# ANSWERS TABLE
# ============================================================================
# question_id carries no foreign key: an answer is written before the
# question is checked and stays even if the question is missing.
answers_table = Table(
    "answers",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("question_id", UUID, nullable=False),
    Column("text", Text, nullable=False),
    Column("answered_by", String(255), nullable=False),
    Column("answered_at", TIMESTAMP(timezone=True), nullable=False),
    Column("upvote_count", Integer, nullable=False, server_default="0"),
    Column("downvote_count", Integer, nullable=False, server_default="0"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint(
        "upvote_count >= 0 AND downvote_count >= 0",
        name="answer_votes_non_negative",
    ),
)

Index("idx_answers_question_id", answers_table.c.question_id)

# ============================================================================
# VOTES TABLE (per-user vote ledger)
# ============================================================================
votes_table = Table(
    "votes",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("user_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
    Column(
        "target",
        Enum("question", "answer", name="vote_target", create_type=False),
        nullable=False,
    ),
    Column("target_id", UUID, nullable=False),
    Column(
        "vote_type",
        Enum("upvote", "downvote", name="vote_type", create_type=False),
        nullable=False,
    ),
    UniqueConstraint("user_id", "target", "target_id", name="unique_vote"),
)

Index("idx_votes_user_id", votes_table.c.user_id)
