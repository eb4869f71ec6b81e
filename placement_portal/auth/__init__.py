"""
Authentication Module
Password hashing and JWT token management
"""

from placement_portal.auth.password import hash_password, verify_password
from placement_portal.auth.dependencies import (
    create_access_token,
    decode_access_token,
    get_current_user,
    get_tpo_admin
)

__all__ = [
    "hash_password",
    "verify_password",
    "create_access_token",
    "decode_access_token",
    "get_current_user",
    "get_tpo_admin",
]
