"""SQLAlchemy table definitions for the user service.

These table definitions are used with SQLAlchemy Core.
They match the schema defined in Alembic migrations.
"""

from sqlalchemy import (
    BigInteger,
    Column,
    ForeignKey,
    Index,
    MetaData,
    String,
    Table,
    Text,
    UniqueConstraint,
    text,
)
from sqlalchemy.dialects.postgresql import TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# USERS TABLE
# ============================================================================
users_table = Table(
    "users",
    metadata,
    Column("id", UUID, primary_key=True),  # UUIDv7, generated by the service
    Column("email", String(255), nullable=False),
    Column("password", String(255), nullable=False),  # bcrypt hash
    Column("name", String(50), nullable=False),
    Column("profile_image_url", Text, nullable=True),
    Column("description", String(500), nullable=True),
    Column("github_link", Text, nullable=True),
    Column("position", String(30), nullable=True),
    Column("detailed_position", String(30), nullable=True),
    Column("career_level", String(30), nullable=True),
    Column("created_at", TIMESTAMP(timezone=True), nullable=False),
    Column("modified_at", TIMESTAMP(timezone=True), nullable=False),
    Column("deleted_at", TIMESTAMP(timezone=True), nullable=True),
    UniqueConstraint("email", name="uq_users_email"),
)

Index("idx_users_name_email_id", users_table.c.name, users_table.c.email, users_table.c.id)

# ============================================================================
# USER GITHUB TABLE (one linked GitHub account per user, and vice versa)
# ============================================================================
user_github_table = Table(
    "user_github",
    metadata,
    Column("id", UUID, primary_key=True),
    Column("user_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
    Column("github_id", BigInteger, nullable=False),
    Column("github_username", String(255), nullable=False),
    Column("github_access_token", Text, nullable=False),
    Column("avatar_url", Text, nullable=True),
    Column("created_at", TIMESTAMP(timezone=True), nullable=False),
    Column("modified_at", TIMESTAMP(timezone=True), nullable=False),
    UniqueConstraint("user_id", name="uq_user_github_user_id"),
    UniqueConstraint("github_id", name="uq_user_github_github_id"),
)

# ============================================================================
# USER SKILLS TABLE (tech-stack tags; skills themselves live in another service)
# ============================================================================
user_skills_table = Table(
    "user_skills",
    metadata,
    Column("user_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
    Column("skill_id", UUID, nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default=text("NOW()")
    ),
)

Index("idx_user_skills_user_id_skill_id", user_skills_table.c.user_id, user_skills_table.c.skill_id)
