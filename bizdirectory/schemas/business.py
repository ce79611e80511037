from datetime import datetime
from enum import Enum
from typing import Dict, List, Optional

from pydantic import BaseModel, Field, field_validator
from pydantic.alias_generators import to_camel

OPTIONAL_TEXT_FIELDS = (
    "address", "phone", "email", "website", "industry", "contact_person",
    "account", "password", "bank_account", "bank_name", "notes",
)


class CamelModel(BaseModel):
    """Base schema exchanging camelCase keys on the wire"""

    class Config:
        alias_generator = to_camel
        populate_by_name = True
        from_attributes = True


class BusinessBase(CamelModel):
    name: str = Field(..., min_length=1, description="Business name (required)")
    tax_id: str = Field(..., min_length=1, max_length=20, description="Tax identification number, unique (required)")
    address: Optional[str] = Field(None, description="Business address (optional)")
    phone: Optional[str] = Field(None, max_length=20, description="Phone number (optional)")
    email: Optional[str] = Field(None, description="Email address (optional), stored as entered")
    website: Optional[str] = Field(None, description="Website (optional)")
    industry: Optional[str] = Field(None, description="Industry (optional)")
    contact_person: Optional[str] = Field(None, description="Contact person (optional)")
    account: Optional[str] = Field(None, description="Portal account name (optional)")
    password: Optional[str] = Field(None, description="Portal account password (optional)")
    bank_account: Optional[str] = Field(None, description="Bank account number (optional)")
    bank_name: Optional[str] = Field(None, description="Bank name (optional)")
    custom_fields: Optional[Dict[str, str]] = Field(default_factory=dict, description="Custom fields as {field name: value}")
    notes: Optional[str] = Field(None, description="Free-form notes (optional)")

    @field_validator(*OPTIONAL_TEXT_FIELDS, mode="before")
    @classmethod
    def blank_to_none(cls, value):
        # forms submit untouched inputs as empty strings
        if isinstance(value, str) and not value.strip():
            return None
        return value


class BusinessCreate(BusinessBase):
    class Config:
        json_schema_extra = {
            "example": {
                "name": "Công ty TNHH Hoàng Long",
                "taxId": "0312345678",
                "address": "12 Nguyễn Huệ, Quận 1, TP.HCM",
                "phone": "0281234567",
                "industry": "Thương mại",
                "contactPerson": "Nguyễn Văn A",
                "customFields": {"Kế toán phụ trách": "Chị Lan"}
            }
        }


class BusinessUpdate(CamelModel):
    name: Optional[str] = Field(None, min_length=1)
    tax_id: Optional[str] = Field(None, min_length=1, max_length=20)
    address: Optional[str] = None
    phone: Optional[str] = Field(None, max_length=20)
    email: Optional[str] = None
    website: Optional[str] = None
    industry: Optional[str] = None
    contact_person: Optional[str] = None
    account: Optional[str] = None
    password: Optional[str] = None
    bank_account: Optional[str] = None
    bank_name: Optional[str] = None
    custom_fields: Optional[Dict[str, str]] = None
    notes: Optional[str] = None

    @field_validator(*OPTIONAL_TEXT_FIELDS, mode="before")
    @classmethod
    def blank_to_none(cls, value):
        if isinstance(value, str) and not value.strip():
            return None
        return value


class BusinessResponse(CamelModel):
    id: int
    name: str
    tax_id: str
    address: Optional[str] = None
    phone: Optional[str] = None
    email: Optional[str] = None
    website: Optional[str] = None
    industry: Optional[str] = None
    contact_person: Optional[str] = None
    account: Optional[str] = None
    password: Optional[str] = None
    bank_account: Optional[str] = None
    bank_name: Optional[str] = None
    custom_fields: Dict[str, str] = Field(default_factory=dict)
    notes: Optional[str] = None
    created_at: datetime

    @field_validator("custom_fields", mode="before")
    @classmethod
    def none_to_empty(cls, value):
        return value or {}


class BusinessPage(BaseModel):
    businesses: List[BusinessResponse]
    total: int


class SearchField(str, Enum):
    NAME = "name"
    NAME_PARTIAL = "namePartial"
    TAX_ID = "taxId"
    INDUSTRY = "industry"
    CONTACT_PERSON = "contactPerson"
    PHONE = "phone"
    EMAIL = "email"
    WEBSITE = "website"
    ADDRESS = "address"
    ADDRESS_PARTIAL = "addressPartial"
    ACCOUNT = "account"
    BANK_ACCOUNT = "bankAccount"
    BANK_NAME = "bankName"


class BusinessSearch(BaseModel):
    field: SearchField = Field(..., description="Which column to search and how")
    value: str = Field(..., min_length=1, description="Value to match")


class BusinessDelete(BaseModel):
    password: str = Field(..., description="Shared delete password")
