from typing import Optional

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from bizdirectory.core.sessions import AdminIdentity, SessionRegistry, session_registry

bearer_scheme = HTTPBearer(auto_error=False)


def get_session_registry() -> SessionRegistry:
    return session_registry


def get_bearer_token(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme)
) -> Optional[str]:
    """Token from an ``Authorization: Bearer`` header, or None"""
    if credentials is None:
        return None
    return credentials.credentials


def get_optional_admin(
    token: Optional[str] = Depends(get_bearer_token),
    registry: SessionRegistry = Depends(get_session_registry)
) -> Optional[AdminIdentity]:
    return registry.resolve(token)


def require_admin(detail: str = "Chưa đăng nhập"):
    """
    Dependency factory rejecting requests without a live admin session.
    Usage: Depends(require_admin("Cần quyền admin để xóa"))
    """
    def admin_checker(admin: Optional[AdminIdentity] = Depends(get_optional_admin)) -> AdminIdentity:
        if admin is None:
            raise HTTPException(
                status_code=status.HTTP_401_UNAUTHORIZED,
                detail=detail,
                headers={"WWW-Authenticate": "Bearer"},
            )
        return admin
    return admin_checker
