#!/usr/bin/env python3
"""
Standalone script to create a login for the PFMS dashboard
Usage: python create_user.py [username]
"""

import asyncio
import getpass
import sys

from pfms.core.database import AsyncSessionLocal, create_db_and_tables, engine
from pfms.crud.user import get_user_by_username, create_user

async def main(username: str = None) -> int:
    username = username or input("Enter username: ").strip()
    password = getpass.getpass("Enter password: ")
    if not username or not password:
        print("❌ Username and password are required")
        return 1

    await create_db_and_tables()
    try:
        async with AsyncSessionLocal() as session:
            if await get_user_by_username(username, session):
                print(f"User {username} already exists!")
                return 1
            user = await create_user(username, password, session)
            print("✅ User created successfully!")
            print(f"👤 Username: {user.username}")
            print(f"🔑 ID: {user.id}")
            return 0
    finally:
        await engine.dispose()

if __name__ == "__main__":
    sys.exit(asyncio.run(main(sys.argv[1] if len(sys.argv) > 1 else None)))
