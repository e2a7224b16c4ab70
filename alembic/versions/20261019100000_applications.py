"""Applications and the claims each one relies on.

Revision ID: 20261019100000
Revises: 20261019000000
Create Date: 2026-10-19

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "20261019100000"
down_revision: Union[str, None] = "20261019000000"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

LIVE_ROW = sa.text("dt_deleted IS NULL")


def _audit_columns() -> list[sa.Column]:
    return [
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("is_active", sa.Boolean(), nullable=False, server_default=sa.text("true")),
        sa.Column("dt_created", sa.DateTime(timezone=True), nullable=False),
        sa.Column("dt_updated", sa.DateTime(timezone=True), nullable=True),
        sa.Column("dt_deleted", sa.DateTime(timezone=True), nullable=True),
        sa.Column("created_by", sa.String(length=100), nullable=False),
        sa.Column("updated_by", sa.String(length=100), nullable=True),
        sa.Column("deleted_by", sa.String(length=100), nullable=True),
        sa.Column("version", sa.Integer(), nullable=False),
    ]


def upgrade() -> None:
    op.create_table(
        "application",
        *_audit_columns(),
        sa.Column("name", sa.String(length=100), nullable=False),
        sa.Column("description", sa.String(length=500), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        "ux_application_name_live",
        "application",
        ["name"],
        unique=True,
        postgresql_where=LIVE_ROW,
        sqlite_where=LIVE_ROW,
    )

    op.create_table(
        "application_claim",
        *_audit_columns(),
        sa.Column("id_application", sa.Integer(), nullable=False),
        sa.Column("id_claim", sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(["id_application"], ["application.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["id_claim"], ["claim.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        op.f("ix_application_claim_id_application"), "application_claim", ["id_application"], unique=False
    )
    op.create_index(op.f("ix_application_claim_id_claim"), "application_claim", ["id_claim"], unique=False)
    op.create_index(
        "ux_application_claim_pair_live",
        "application_claim",
        ["id_application", "id_claim"],
        unique=True,
        postgresql_where=LIVE_ROW,
        sqlite_where=LIVE_ROW,
    )


def downgrade() -> None:
    op.drop_table("application_claim")
    op.drop_table("application")
