from typing import List, Optional, Tuple

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from bizdirectory.core.errors import ConstraintViolation, is_unique_violation
from bizdirectory.models.business import Business
from bizdirectory.schemas.business import BusinessCreate, BusinessUpdate

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 10


def _commit_or_raise(db: Session) -> None:
    try:
        db.commit()
    except IntegrityError as e:
        db.rollback()
        if is_unique_violation(e):
            raise ConstraintViolation("taxId", "tax ID already exists") from e
        raise


def create_business(db: Session, data: BusinessCreate) -> Business:
    business = Business(**data.model_dump())
    if business.custom_fields is None:
        business.custom_fields = {}
    db.add(business)
    _commit_or_raise(db)
    db.refresh(business)
    return business


def get_business(db: Session, business_id: int) -> Optional[Business]:
    return db.query(Business).filter(Business.id == business_id).first()


def list_businesses(db: Session, page: int = DEFAULT_PAGE, limit: int = DEFAULT_LIMIT) -> Tuple[List[Business], int]:
    """
    One page of businesses, newest first, plus the total row count.
    The two reads are independent; under concurrent writes they may disagree slightly.
    """
    offset = (page - 1) * limit
    businesses = (
        db.query(Business)
        .order_by(Business.created_at.desc(), Business.id.desc())
        .offset(offset)
        .limit(limit)
        .all()
    )
    total = db.query(Business).count()
    return businesses, total


def update_business(db: Session, business_id: int, data: BusinessUpdate) -> Optional[Business]:
    """Write only the fields present in ``data``"""
    business = get_business(db, business_id)
    if business is None:
        return None
    for field, value in data.model_dump(exclude_unset=True).items():
        setattr(business, field, value)
    _commit_or_raise(db)
    db.refresh(business)
    return business


def delete_business(db: Session, business_id: int) -> bool:
    """Remove the business and its document transactions; False if it did not exist"""
    business = get_business(db, business_id)
    if business is None:
        return False
    db.delete(business)
    db.commit()
    return True


def parse_page_param(raw: Optional[str], default: int) -> int:
    """Positive integer from a query string value, else ``default``"""
    try:
        value = int(raw)
    except (TypeError, ValueError):
        return default
    return value if value > 0 else default
