from datetime import datetime, timezone
from typing import Literal, Optional

from pydantic import Field, field_validator

from bizdirectory.schemas.business import CamelModel


class DocumentTransactionCreate(CamelModel):
    """Schema for recording a document hand-off or receipt"""
    document_type: str = Field(..., min_length=1, description="Kind of document")
    transaction_type: Literal["giao", "nhận"] = Field(..., description="giao = handed over, nhận = received")
    handled_by: str = Field(..., min_length=1, description="Staff member who handled the document")
    transaction_date: Optional[datetime] = Field(None, description="When it happened, defaults to now; UTC unless an offset is given")
    notes: Optional[str] = None

    @field_validator("transaction_date", "notes", mode="before")
    @classmethod
    def blank_to_none(cls, value):
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @field_validator("transaction_date")
    @classmethod
    def assume_utc(cls, value: Optional[datetime]) -> Optional[datetime]:
        # stored next to server-generated UTC timestamps
        if value is not None and value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value


class DocumentTransactionResponse(CamelModel):
    """Schema for document transaction response"""
    id: int
    business_id: int
    document_type: str
    transaction_type: str
    handled_by: str
    transaction_date: datetime
    notes: Optional[str] = None
    created_at: datetime
