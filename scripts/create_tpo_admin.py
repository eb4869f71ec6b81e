"""
Script to create a TPO admin account
Run this to create the first login for the admin dashboard
"""

import sys
import asyncio
import getpass
from pathlib import Path

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from fastapi import HTTPException
from placement_portal.database import connect_db, disconnect_db
from placement_portal.services.user_service import user_service


async def create_tpo_admin(username: str, password: str):
    """
    Create a TPO admin user

    Args:
        username: Login name
        password: Plain password (hashed before storage)
    """
    await connect_db()

    try:
        if await user_service.get_by_username(username):
            print(f"❌ User '{username}' already exists!")
            return

        await user_service.create_user(username, password)
        print("✅ TPO admin created successfully!")
        print(f"   Username: {username}")

    except HTTPException as e:
        print(f"❌ Error creating TPO admin: {e.detail}")

    finally:
        await disconnect_db()


async def main():
    """Main function"""
    print("\n" + "="*60)
    print("CREATE TPO ADMIN")
    print("="*60 + "\n")

    username = input("Enter username: ").strip()
    password = getpass.getpass("Enter password: ").strip()
    confirm = getpass.getpass("Confirm password: ").strip()

    if password != confirm:
        print("❌ Passwords do not match!")
        return

    if len(password) < 8:
        print("❌ Password must be at least 8 characters!")
        return

    print("\n")
    await create_tpo_admin(username, password)
    print("\n")


if __name__ == "__main__":
    asyncio.run(main())
