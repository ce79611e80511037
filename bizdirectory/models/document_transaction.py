from sqlalchemy import Column, Integer, String, Text, DateTime, ForeignKey
from sqlalchemy.orm import relationship

from bizdirectory.database import Base
from bizdirectory.models.business import utcnow


class DocumentTransaction(Base):
    __tablename__ = "document_transactions"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    business_id = Column(
        Integer,
        ForeignKey("businesses.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    document_type = Column(Text, nullable=False)
    transaction_type = Column(String(10), nullable=False)  # "giao" (handed over) or "nhận" (received)
    handled_by = Column(Text, nullable=False)
    transaction_date = Column(DateTime(timezone=True), default=utcnow, nullable=False)
    notes = Column(Text, nullable=True)
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)

    business = relationship("Business", back_populates="document_transactions")
