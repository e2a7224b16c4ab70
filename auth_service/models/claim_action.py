"""ORM model pairing a claim with an action: the composite permission."""

from sqlalchemy import Column, ForeignKey, Index, Integer
from sqlalchemy.orm import relationship

from auth_service.models.base import LIVE_ROW_PREDICATE, AuditMixin, Base


class ClaimAction(AuditMixin, Base):
    """
    Claim x Action pair, e.g. Permission:"Invoice" with "Delete" means "can delete invoices".

    One live row per (id_claim, id_action); removed by the store when either
    parent row is physically deleted.
    """

    __tablename__ = "claim_action"

    id_claim = Column(
        Integer,
        ForeignKey("claim.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    id_action = Column(
        Integer,
        ForeignKey("action.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    version = Column(Integer, nullable=False)

    __soft_delete_cascade__ = ("account_claim_actions",)

    claim = relationship("Claim", back_populates="claim_actions")
    action = relationship("Action", back_populates="claim_actions")
    account_claim_actions = relationship(
        "AccountClaimAction",
        back_populates="claim_action",
        passive_deletes=True,
    )

    __mapper_args__ = {"version_id_col": version}
    __table_args__ = (
        Index(
            "ux_claim_action_pair_live",
            "id_claim",
            "id_action",
            unique=True,
            postgresql_where=LIVE_ROW_PREDICATE,
            sqlite_where=LIVE_ROW_PREDICATE,
        ),
    )
