import logging
from typing import Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from bizdirectory.core.errors import ConstraintViolation, is_unique_violation
from bizdirectory.core.security import hash_password, verify_password
from bizdirectory.models.admin_user import AdminUser

logger = logging.getLogger(__name__)


def get_admin_by_username(db: Session, username: str) -> Optional[AdminUser]:
    return db.query(AdminUser).filter(AdminUser.username == username).first()


def create_admin_user(db: Session, username: str, password: str) -> AdminUser:
    admin = AdminUser(username=username, password_hash=hash_password(password))
    db.add(admin)
    try:
        db.commit()
    except IntegrityError as e:
        db.rollback()
        if is_unique_violation(e):
            raise ConstraintViolation("username", "username already exists") from e
        raise
    db.refresh(admin)
    return admin


def authenticate_admin(db: Session, username: str, password: str) -> Optional[AdminUser]:
    """
    Return the admin when the credentials match, otherwise None.
    An unknown username and a wrong password look the same to the caller.
    """
    admin = get_admin_by_username(db, username)
    if admin is None or not verify_password(password, admin.password_hash):
        return None
    return admin


def change_admin_password(db: Session, username: str, current_password: str, new_password: str) -> bool:
    admin = authenticate_admin(db, username, current_password)
    if admin is None:
        return False
    admin.password_hash = hash_password(new_password)
    db.commit()
    return True


def ensure_default_admin(db: Session, username: str, password: str) -> Optional[AdminUser]:
    """Create the bootstrap admin unless one with that username exists; returns the new admin or None"""
    if not username or not password:
        return None
    if get_admin_by_username(db, username) is not None:
        return None
    admin = create_admin_user(db, username, password)
    logger.info(f"Default admin account created: {username}")
    return admin
