"""initial_schema

Create the user service schema:
- Users (credentials and profile)
- User GitHub (one linked GitHub account per user)
- User skills (skill tags, skill IDs owned by another service)

Revision ID: 3f9c2a71d0b4
Revises:
Create Date: 2026-10-19 10:12:04.318512

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "3f9c2a71d0b4"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    # ========================================================================
    # USERS table
    # ========================================================================
    op.create_table(
        "users",
        sa.Column("id", sa.UUID(), nullable=False),  # UUIDv7 from the service
        sa.Column("email", sa.String(255), nullable=False),
        sa.Column("password", sa.String(255), nullable=False),  # bcrypt hash
        sa.Column("name", sa.String(50), nullable=False),
        sa.Column("profile_image_url", sa.Text(), nullable=True),
        sa.Column("description", sa.String(500), nullable=True),
        sa.Column("github_link", sa.Text(), nullable=True),
        sa.Column("position", sa.String(30), nullable=True),
        sa.Column("detailed_position", sa.String(30), nullable=True),
        sa.Column("career_level", sa.String(30), nullable=True),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.Column(
            "modified_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.Column("deleted_at", sa.TIMESTAMP(timezone=True), nullable=True),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("email", name="uq_users_email"),
    )
    # Search ordering is (name, email, id)
    op.create_index("idx_users_name_email_id", "users", ["name", "email", "id"])

    # ========================================================================
    # USER_GITHUB table
    # ========================================================================
    op.create_table(
        "user_github",
        sa.Column("id", sa.UUID(), nullable=False),
        sa.Column("user_id", sa.UUID(), nullable=False),
        sa.Column("github_id", sa.BigInteger(), nullable=False),
        sa.Column("github_username", sa.String(255), nullable=False),
        sa.Column("github_access_token", sa.Text(), nullable=False),
        sa.Column("avatar_url", sa.Text(), nullable=True),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.Column(
            "modified_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("user_id", name="uq_user_github_user_id"),
        sa.UniqueConstraint("github_id", name="uq_user_github_github_id"),
    )

    # ========================================================================
    # USER_SKILLS table (no uniqueness: duplicate tags are tolerated)
    # ========================================================================
    op.create_table(
        "user_skills",
        sa.Column("user_id", sa.UUID(), nullable=False),
        sa.Column("skill_id", sa.UUID(), nullable=False),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
    )
    op.create_index(
        "idx_user_skills_user_id_skill_id", "user_skills", ["user_id", "skill_id"]
    )


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index("idx_user_skills_user_id_skill_id", table_name="user_skills")
    op.drop_table("user_skills")
    op.drop_table("user_github")
    op.drop_index("idx_users_name_email_id", table_name="users")
    op.drop_table("users")
