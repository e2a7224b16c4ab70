"""ORM model for claims (permission, role or custom attribute definitions)."""

import enum

from sqlalchemy import Column, Enum, Integer, String
from sqlalchemy.orm import relationship

from auth_service.models.base import AuditMixin, Base


class ClaimType(str, enum.Enum):
    PERMISSION = "Permission"
    ROLE = "Role"
    CUSTOM = "Custom"


class Claim(AuditMixin, Base):
    """A named claim; paired with actions (ClaimAction) and used by applications (ApplicationClaim)."""

    __tablename__ = "claim"

    type = Column(
        Enum(
            ClaimType,
            name="claim_type",
            native_enum=False,
            length=20,
            values_callable=lambda members: [m.value for m in members],
        ),
        nullable=False,
    )
    value = Column(String(100), nullable=False, index=True)
    description = Column(String(255), nullable=True)
    version = Column(Integer, nullable=False)

    __soft_delete_cascade__ = ("claim_actions", "application_claims")

    claim_actions = relationship(
        "ClaimAction",
        back_populates="claim",
        passive_deletes=True,
    )
    application_claims = relationship(
        "ApplicationClaim",
        back_populates="claim",
        passive_deletes=True,
    )

    __mapper_args__ = {"version_id_col": version}
