"""create_curation_tables

Revision ID: 0001
Revises:
Create Date: 2026-10-19 09:00:00.000000

"""
from collections.abc import Sequence

import sqlalchemy as sa
from alembic import op


# revision identifiers, used by Alembic.
revision: str = "0001"
down_revision: str | Sequence[str] | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None

ID_TYPE = sa.BigInteger().with_variant(sa.Integer(), "sqlite")


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        "users",
        sa.Column("id", ID_TYPE, nullable=False, comment="User ID"),
        sa.Column("fname", sa.String(length=255), nullable=False, comment="First name"),
        sa.Column("sname", sa.String(length=255), nullable=False, comment="Surname"),
        sa.Column(
            "profile_picture",
            sa.String(length=2048),
            nullable=True,
            comment="Profile picture URL",
        ),
        sa.Column("bio", sa.Text(), nullable=True),
        sa.Column(
            "created_at",
            sa.DateTime(),
            nullable=False,
            server_default=sa.text("(CURRENT_TIMESTAMP)"),
        ),
        sa.PrimaryKeyConstraint("id"),
    )

    op.create_table(
        "recommendations",
        sa.Column("id", ID_TYPE, nullable=False, comment="Recommendation ID"),
        sa.Column(
            "user_id",
            ID_TYPE,
            nullable=False,
            comment="Foreign key to users table (owner)",
        ),
        sa.Column("title", sa.String(length=255), nullable=False),
        sa.Column("caption", sa.Text(), nullable=True),
        sa.Column("category", sa.String(length=255), nullable=False),
        sa.Column(
            "created_at",
            sa.DateTime(),
            nullable=False,
            server_default=sa.text("(CURRENT_TIMESTAMP)"),
        ),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_recommendations_user_id", "recommendations", ["user_id"])

    op.create_table(
        "collections",
        sa.Column("id", ID_TYPE, nullable=False, comment="Collection ID"),
        sa.Column(
            "user_id",
            ID_TYPE,
            nullable=False,
            comment="Foreign key to users table (owner)",
        ),
        sa.Column("title", sa.String(length=255), nullable=False),
        sa.Column(
            "created_at",
            sa.DateTime(),
            nullable=False,
            server_default=sa.text("(CURRENT_TIMESTAMP)"),
        ),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_collections_user_id", "collections", ["user_id"])

    op.create_table(
        "collection_recommendations",
        sa.Column(
            "collection_id",
            ID_TYPE,
            nullable=False,
            comment="Foreign key to collections table",
        ),
        sa.Column(
            "recommendation_id",
            ID_TYPE,
            nullable=False,
            comment="Foreign key to recommendations table",
        ),
        sa.Column(
            "created_at",
            sa.DateTime(),
            nullable=False,
            server_default=sa.text("(CURRENT_TIMESTAMP)"),
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(),
            nullable=False,
            server_default=sa.text("(CURRENT_TIMESTAMP)"),
        ),
        sa.ForeignKeyConstraint(["collection_id"], ["collections.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(
            ["recommendation_id"], ["recommendations.id"], ondelete="CASCADE"
        ),
        sa.PrimaryKeyConstraint("collection_id", "recommendation_id"),
    )
    op.create_index(
        "ix_collection_recommendations_recommendation_id",
        "collection_recommendations",
        ["recommendation_id"],
    )


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index(
        "ix_collection_recommendations_recommendation_id",
        table_name="collection_recommendations",
    )
    op.drop_table("collection_recommendations")
    op.drop_index("ix_collections_user_id", table_name="collections")
    op.drop_table("collections")
    op.drop_index("ix_recommendations_user_id", table_name="recommendations")
    op.drop_table("recommendations")
    op.drop_table("users")
