"""ORM model for client applications that consume claims."""

from sqlalchemy import Column, Index, Integer, String
from sqlalchemy.orm import relationship

from auth_service.models.base import LIVE_ROW_PREDICATE, AuditMixin, Base


class Application(AuditMixin, Base):
    """A registered client application; the claims it uses are linked through ApplicationClaim."""

    __tablename__ = "application"

    name = Column(String(100), nullable=False)
    description = Column(String(500), nullable=False)
    version = Column(Integer, nullable=False)

    __soft_delete_cascade__ = ("application_claims",)

    application_claims = relationship(
        "ApplicationClaim",
        back_populates="application",
        passive_deletes=True,
    )

    __mapper_args__ = {"version_id_col": version}
    __table_args__ = (
        Index(
            "ux_application_name_live",
            "name",
            unique=True,
            postgresql_where=LIVE_ROW_PREDICATE,
            sqlite_where=LIVE_ROW_PREDICATE,
        ),
    )
