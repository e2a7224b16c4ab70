"""ORM model for accounts (credentials holder and grant target)."""

from sqlalchemy import Column, Index, Integer, String
from sqlalchemy.orm import relationship

from auth_service.models.base import LIVE_ROW_PREDICATE, AuditMixin, Base


class Account(AuditMixin, Base):
    """
    Sign-in identity. password always holds an Argon2id hash, never plaintext.

    user_name is unique among rows that are not soft-deleted, so a removed
    account's name can be registered again.
    """

    __tablename__ = "account"

    user_name = Column(String(50), nullable=False)
    password = Column(String(128), nullable=False)
    version = Column(Integer, nullable=False)

    __soft_delete_cascade__ = ("account_claim_actions",)

    account_claim_actions = relationship(
        "AccountClaimAction",
        back_populates="account",
        passive_deletes=True,
    )

    __mapper_args__ = {"version_id_col": version}
    __table_args__ = (
        Index(
            "ux_account_user_name_live",
            "user_name",
            unique=True,
            postgresql_where=LIVE_ROW_PREDICATE,
            sqlite_where=LIVE_ROW_PREDICATE,
        ),
    )
