from typing import Optional

from pydantic import BaseModel, Field

from bizdirectory.schemas.business import CamelModel


class LoginRequest(BaseModel):
    username: str = Field(..., min_length=1, description="Admin username")
    password: str = Field(..., min_length=1, description="Admin password")

    class Config:
        json_schema_extra = {
            "example": {
                "username": "admin",
                "password": "myPassword123"
            }
        }


class ChangePasswordRequest(CamelModel):
    current_password: str = Field(..., min_length=1)
    new_password: str = Field(..., min_length=1)


class AdminInfo(BaseModel):
    id: int
    username: str

    class Config:
        from_attributes = True


class LoginResponse(BaseModel):
    success: bool = True
    token: str
    admin: AdminInfo


class AuthStatus(CamelModel):
    is_authenticated: bool
    admin: Optional[AdminInfo] = None


class MessageResponse(BaseModel):
    message: str


class SuccessResponse(BaseModel):
    success: bool
    message: Optional[str] = None
