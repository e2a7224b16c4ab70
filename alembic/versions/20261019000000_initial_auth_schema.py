"""Initial schema: accounts, claims, actions, claim-actions and grants.

Revision ID: 20261019000000
Revises:
Create Date: 2026-10-19

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "20261019000000"
down_revision: Union[str, None] = None
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
        "account",
        *_audit_columns(),
        sa.Column("user_name", sa.String(length=50), nullable=False),
        sa.Column("password", sa.String(length=128), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        "ux_account_user_name_live",
        "account",
        ["user_name"],
        unique=True,
        postgresql_where=LIVE_ROW,
        sqlite_where=LIVE_ROW,
    )

    op.create_table(
        "claim",
        *_audit_columns(),
        sa.Column("type", sa.String(length=20), nullable=False),
        sa.Column("value", sa.String(length=100), nullable=False),
        sa.Column("description", sa.String(length=255), nullable=True),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_claim_value"), "claim", ["value"], unique=False)

    op.create_table(
        "action",
        *_audit_columns(),
        sa.Column("name", sa.String(length=50), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_action_name"), "action", ["name"], unique=False)

    op.create_table(
        "claim_action",
        *_audit_columns(),
        sa.Column("id_claim", sa.Integer(), nullable=False),
        sa.Column("id_action", sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(["id_claim"], ["claim.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["id_action"], ["action.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_claim_action_id_claim"), "claim_action", ["id_claim"], unique=False)
    op.create_index(op.f("ix_claim_action_id_action"), "claim_action", ["id_action"], unique=False)
    op.create_index(
        "ux_claim_action_pair_live",
        "claim_action",
        ["id_claim", "id_action"],
        unique=True,
        postgresql_where=LIVE_ROW,
        sqlite_where=LIVE_ROW,
    )

    op.create_table(
        "account_claim_action",
        *_audit_columns(),
        sa.Column("id_account", sa.Integer(), nullable=False),
        sa.Column("id_claim_action", sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(["id_account"], ["account.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["id_claim_action"], ["claim_action.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        op.f("ix_account_claim_action_id_account"), "account_claim_action", ["id_account"], unique=False
    )
    op.create_index(
        op.f("ix_account_claim_action_id_claim_action"),
        "account_claim_action",
        ["id_claim_action"],
        unique=False,
    )
    op.create_index(
        "ux_account_claim_action_pair_live",
        "account_claim_action",
        ["id_account", "id_claim_action"],
        unique=True,
        postgresql_where=LIVE_ROW,
        sqlite_where=LIVE_ROW,
    )


def downgrade() -> None:
    op.drop_table("account_claim_action")
    op.drop_table("claim_action")
    op.drop_index(op.f("ix_action_name"), table_name="action")
    op.drop_table("action")
    op.drop_index(op.f("ix_claim_value"), table_name="claim")
    op.drop_table("claim")
    op.drop_index("ux_account_user_name_live", table_name="account")
    op.drop_table("account")
