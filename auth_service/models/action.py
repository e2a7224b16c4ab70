"""ORM model for actions (named operations such as Read or Delete)."""

from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import relationship

from auth_service.models.base import AuditMixin, Base


class Action(AuditMixin, Base):
    __tablename__ = "action"

    name = Column(String(50), nullable=False, index=True)
    version = Column(Integer, nullable=False)

    __soft_delete_cascade__ = ("claim_actions",)

    claim_actions = relationship(
        "ClaimAction",
        back_populates="action",
        passive_deletes=True,
    )

    __mapper_args__ = {"version_id_col": version}
