"""
Single-field business search.

``SEARCH_FIELDS`` maps every search tag the API accepts to the column it
reads and whether the value must equal the column (exact) or only appear
inside it (partial). Partial matching uses ``LIKE`` so case sensitivity
follows the database collation.
"""
import enum
from typing import List, NamedTuple

from sqlalchemy.orm import Session

from bizdirectory.models.business import Business


class MatchMode(enum.Enum):
    EXACT = "exact"
    PARTIAL = "partial"


class SearchRule(NamedTuple):
    column: str
    mode: MatchMode


SEARCH_FIELDS = {
    "name": SearchRule("name", MatchMode.EXACT),
    "namePartial": SearchRule("name", MatchMode.PARTIAL),
    "taxId": SearchRule("tax_id", MatchMode.EXACT),
    "industry": SearchRule("industry", MatchMode.EXACT),
    "contactPerson": SearchRule("contact_person", MatchMode.EXACT),
    "phone": SearchRule("phone", MatchMode.EXACT),
    "email": SearchRule("email", MatchMode.EXACT),
    "website": SearchRule("website", MatchMode.EXACT),
    "address": SearchRule("address", MatchMode.EXACT),
    "addressPartial": SearchRule("address", MatchMode.PARTIAL),
    "account": SearchRule("account", MatchMode.EXACT),
    "bankAccount": SearchRule("bank_account", MatchMode.EXACT),
    "bankName": SearchRule("bank_name", MatchMode.EXACT),
}


def build_search_clause(field: str, value: str):
    """Return the filter for ``field``/``value``, or None for an unknown tag"""
    rule = SEARCH_FIELDS.get(getattr(field, "value", field))
    if rule is None:
        return None
    column = getattr(Business, rule.column)
    if rule.mode is MatchMode.PARTIAL:
        return column.contains(value, autoescape=True)
    return column == value


def search_businesses(db: Session, field: str, value: str) -> List[Business]:
    clause = build_search_clause(field, value)
    if clause is None:
        return []
    return (
        db.query(Business)
        .filter(clause)
        .order_by(Business.created_at.desc(), Business.id.desc())
        .all()
    )
