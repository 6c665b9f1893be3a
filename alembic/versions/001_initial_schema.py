"""initial schema: candidates, skills, candidate_skills

Revision ID: 001_initial_schema
Revises:
Create Date: 2025-10-18

Creates the directory tables:
  • candidates: email unique ignoring case via a unique index on lower(email)
  • skills: name unique ignoring case via a unique index on lower(name)
  • candidate_skills: composite PK (candidate_id, skill_id), both FKs
    ON DELETE CASCADE so deleting either side removes the links
"""
from alembic import op
import sqlalchemy as sa


# revision identifiers
revision = "001_initial_schema"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "candidates",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("full_name", sa.String(length=80), nullable=False),
        sa.Column("date_of_birth", sa.Date(), nullable=False),
        sa.Column("email", sa.String(length=256), nullable=False),
        sa.Column("phone", sa.String(length=32), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
    )
    op.create_index("ix_candidates_full_name", "candidates", ["full_name"])
    op.create_index(
        "uq_candidates_email_lower",
        "candidates",
        [sa.text("lower(email)")],
        unique=True,
    )

    op.create_table(
        "skills",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("name", sa.String(length=100), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
    )
    op.create_index(
        "uq_skills_name_lower",
        "skills",
        [sa.text("lower(name)")],
        unique=True,
    )

    op.create_table(
        "candidate_skills",
        sa.Column(
            "candidate_id",
            sa.Integer(),
            sa.ForeignKey("candidates.id", ondelete="CASCADE"),
            primary_key=True,
        ),
        sa.Column(
            "skill_id",
            sa.Integer(),
            sa.ForeignKey("skills.id", ondelete="CASCADE"),
            primary_key=True,
        ),
    )
    # Lookups by skill; candidate_id is already the PK's leading column
    op.create_index("ix_candidate_skills_skill_id", "candidate_skills", ["skill_id"])


def downgrade() -> None:
    op.drop_index("ix_candidate_skills_skill_id", table_name="candidate_skills")
    op.drop_table("candidate_skills")
    op.drop_index("uq_skills_name_lower", table_name="skills")
    op.drop_table("skills")
    op.drop_index("ix_candidates_full_name", table_name="candidates")
    op.drop_index("uq_candidates_email_lower", table_name="candidates")
    op.drop_table("candidates")
