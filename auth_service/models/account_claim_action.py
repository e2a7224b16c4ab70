"""ORM model for grants: the edge that gives an account a claim-action permission."""

from sqlalchemy import Column, ForeignKey, Index, Integer
from sqlalchemy.orm import relationship

from auth_service.models.base import LIVE_ROW_PREDICATE, AuditMixin, Base


class AccountClaimAction(AuditMixin, Base):
    """Grant of one ClaimAction to one Account. One live row per pair."""

    __tablename__ = "account_claim_action"

    id_account = Column(
        Integer,
        ForeignKey("account.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    id_claim_action = Column(
        Integer,
        ForeignKey("claim_action.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    version = Column(Integer, nullable=False)

    account = relationship("Account", back_populates="account_claim_actions")
    claim_action = relationship("ClaimAction", back_populates="account_claim_actions")

    __mapper_args__ = {"version_id_col": version}
    __table_args__ = (
        Index(
            "ux_account_claim_action_pair_live",
            "id_account",
            "id_claim_action",
            unique=True,
            postgresql_where=LIVE_ROW_PREDICATE,
            sqlite_where=LIVE_ROW_PREDICATE,
        ),
    )
