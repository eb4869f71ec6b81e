"""
Authentication Routes
Login, logout and current user endpoints for TPO accounts
"""

from fastapi import APIRouter, HTTPException, status, Depends
from pydantic import BaseModel
from placement_portal.auth import create_access_token, get_current_user
from placement_portal.logging_config import get_logger
from placement_portal.services.user_service import user_service

router = APIRouter()
logger = get_logger(__name__)


# Request/Response Models
class LoginRequest(BaseModel):
    username: str
    password: str


class LoginResponse(BaseModel):
    status: str
    message: str
    access_token: str
    token_type: str = "bearer"
    role: str


@router.post("/login", response_model=LoginResponse)
async def login(credentials: LoginRequest):
    """
    Login endpoint for TPO accounts

    Returns a bearer token to send as `Authorization: Bearer <token>`
    """
    user = await user_service.authenticate(credentials.username, credentials.password)
    if not user:
        logger.warning("Failed login for '%s'", credentials.username)
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid username or password"
        )

    access_token = create_access_token({
        "sub": user["username"],
        "role": user["role"],
        "user_id": user["id"],
    })

    return LoginResponse(
        status="success",
        message="Login successful",
        access_token=access_token,
        role=user["role"],
    )


@router.post("/logout")
async def logout():
    """
    Logout endpoint (client should delete token)
    """
    return {
        "status": "success",
        "message": "Logged out successfully"
    }


@router.get("/me")
async def get_current_user_info(current_user: dict = Depends(get_current_user)):
    """
    Get current authenticated user information
    """
    return {
        "username": current_user["username"],
        "role": current_user["role"]
    }
