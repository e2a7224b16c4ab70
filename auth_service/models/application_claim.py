"""ORM model linking an application to a claim it relies on."""

from sqlalchemy import Column, ForeignKey, Index, Integer
from sqlalchemy.orm import relationship

from auth_service.models.base import LIVE_ROW_PREDICATE, AuditMixin, Base


class ApplicationClaim(AuditMixin, Base):
    """One live row per (id_application, id_claim)."""

    __tablename__ = "application_claim"

    id_application = Column(
        Integer,
        ForeignKey("application.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    id_claim = Column(
        Integer,
        ForeignKey("claim.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    version = Column(Integer, nullable=False)

    application = relationship("Application", back_populates="application_claims")
    claim = relationship("Claim", back_populates="application_claims")

    __mapper_args__ = {"version_id_col": version}
    __table_args__ = (
        Index(
            "ux_application_claim_pair_live",
            "id_application",
            "id_claim",
            unique=True,
            postgresql_where=LIVE_ROW_PREDICATE,
            sqlite_where=LIVE_ROW_PREDICATE,
        ),
    )
