import pytest

from bizdirectory.core.errors import ConstraintViolation
from bizdirectory.crud import admins as admins_crud


def test_password_is_not_stored_in_clear(db):
    admin = admins_crud.create_admin_user(db, "admin", "correctpass")
    assert admin.password_hash != "correctpass"
    assert admin.password_hash.startswith("$argon2")


def test_authenticate(db):
    created = admins_crud.create_admin_user(db, "admin", "correctpass")

    assert admins_crud.authenticate_admin(db, "admin", "wrongpass") is None
    assert admins_crud.authenticate_admin(db, "nobody", "correctpass") is None
    assert admins_crud.authenticate_admin(db, "admin", "correctpass").id == created.id


def test_duplicate_username(db):
    admins_crud.create_admin_user(db, "admin", "one")
    with pytest.raises(ConstraintViolation) as exc_info:
        admins_crud.create_admin_user(db, "admin", "two")
    assert exc_info.value.field == "username"


def test_change_password_requires_current_password(db):
    admins_crud.create_admin_user(db, "admin", "correctpass")

    assert admins_crud.change_admin_password(db, "admin", "wrongpass", "newpass") is False
    assert admins_crud.change_admin_password(db, "admin", "correctpass", "newpass") is True

    assert admins_crud.authenticate_admin(db, "admin", "correctpass") is None
    assert admins_crud.authenticate_admin(db, "admin", "newpass") is not None


def test_change_password_for_unknown_admin(db):
    assert admins_crud.change_admin_password(db, "ghost", "x", "y") is False


def test_ensure_default_admin_is_idempotent(db):
    assert admins_crud.ensure_default_admin(db, "", "secret") is None
    assert admins_crud.ensure_default_admin(db, "admin", "secret") is not None
    assert admins_crud.ensure_default_admin(db, "admin", "other") is None
    assert admins_crud.authenticate_admin(db, "admin", "secret") is not None
