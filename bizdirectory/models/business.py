from datetime import datetime, timezone

from sqlalchemy import Column, Integer, String, Text, JSON, DateTime
from sqlalchemy.orm import relationship

from bizdirectory.database import Base


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Business(Base):
    __tablename__ = "businesses"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    name = Column(Text, nullable=False)
    tax_id = Column(String(20), unique=True, nullable=False, index=True)
    address = Column(Text, nullable=True)
    phone = Column(String(20), nullable=True)
    email = Column(Text, nullable=True)
    website = Column(Text, nullable=True)
    industry = Column(Text, nullable=True)
    contact_person = Column(Text, nullable=True)
    account = Column(Text, nullable=True)
    password = Column(Text, nullable=True)  # portal password of the business, not an admin credential
    bank_account = Column(Text, nullable=True)
    bank_name = Column(Text, nullable=True)
    custom_fields = Column(JSON, nullable=True, default=dict)  # {field name: value}
    notes = Column(Text, nullable=True)
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False, index=True)

    # Document hand-off history, removed together with the business
    document_transactions = relationship(
        "DocumentTransaction",
        back_populates="business",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )
