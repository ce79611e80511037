import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from bizdirectory.core.dependencies import get_bearer_token, get_optional_admin, get_session_registry, require_admin
from bizdirectory.core.sessions import AdminIdentity, SessionRegistry
from bizdirectory.crud import admins as admins_crud
from bizdirectory.database import get_db
from bizdirectory.schemas.auth import (
    AdminInfo,
    AuthStatus,
    ChangePasswordRequest,
    LoginRequest,
    LoginResponse,
    SuccessResponse,
)

router = APIRouter(tags=["auth"])
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


@router.post("/login", response_model=LoginResponse)
async def login(
    credentials: LoginRequest,
    db: Session = Depends(get_db),
    registry: SessionRegistry = Depends(get_session_registry)
):
    """Exchange admin credentials for a bearer token"""
    try:
        admin = admins_crud.authenticate_admin(db, credentials.username, credentials.password)
        if not admin:
            logger.warning(f"Failed login attempt for username: {credentials.username}")
            raise HTTPException(
                status_code=status.HTTP_401_UNAUTHORIZED,
                detail="Tài khoản hoặc mật khẩu không đúng"
            )

        token = registry.issue(admin.id, admin.username)
        logger.info(f"Admin {admin.username} logged in")
        return LoginResponse(token=token, admin=AdminInfo(id=admin.id, username=admin.username))
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Unexpected error during login: {str(e)}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Lỗi khi đăng nhập"
        )


@router.post("/logout", response_model=SuccessResponse, response_model_exclude_none=True)
async def logout(
    token: Optional[str] = Depends(get_bearer_token),
    registry: SessionRegistry = Depends(get_session_registry)
):
    """End the session; succeeds even without a valid token"""
    registry.revoke(token)
    return SuccessResponse(success=True)


@router.get("/me", response_model=AuthStatus, response_model_exclude_none=True)
async def me(admin: Optional[AdminIdentity] = Depends(get_optional_admin)):
    if admin is None:
        return AuthStatus(is_authenticated=False)
    return AuthStatus(is_authenticated=True, admin=AdminInfo(id=admin.admin_id, username=admin.username))


@router.post("/change-password", response_model=SuccessResponse)
async def change_password(
    request: ChangePasswordRequest,
    db: Session = Depends(get_db),
    admin: AdminIdentity = Depends(require_admin())
):
    """Change the logged-in admin's password after checking the current one"""
    try:
        changed = admins_crud.change_admin_password(
            db, admin.username, request.current_password, request.new_password
        )
        if not changed:
            logger.warning(f"Password change rejected for admin {admin.username}: wrong current password")
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="Mật khẩu hiện tại không đúng"
            )

        logger.info(f"Password changed for admin {admin.username}")
        return SuccessResponse(success=True, message="Đổi mật khẩu thành công")
    except HTTPException:
        raise
    except Exception as e:
        db.rollback()
        logger.error(f"Unexpected error changing password: {str(e)}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Lỗi khi đổi mật khẩu"
        )
