#!/usr/bin/env python3
"""Create a teacher account that can sign in to the gradebook."""
import argparse
import asyncio
import getpass
import os
import sys

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from gradebook.core.database import AsyncSessionLocal, close_db_connections
from gradebook.services.teacher_service import TeacherService


async def create_teacher(email: str, password: str, first_name: str, last_name: str):
    try:
        async with AsyncSessionLocal() as db:
            service = TeacherService(db)
            if await service.get_by_email(email):
                print(f"Teacher {email} already exists")
                return False
            user = await service.register(email, password, first_name, last_name)
            print(f"✅ Created teacher {user.email} ({user.id})")
        return True
    finally:
        await close_db_connections()


def main():
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("email")
    parser.add_argument("--first-name", required=True)
    parser.add_argument("--last-name", required=True)
    args = parser.parse_args()

    password = getpass.getpass("Password: ")
    if not password:
        print("Password must not be empty")
        sys.exit(1)

    created = asyncio.run(create_teacher(args.email, password, args.first_name, args.last_name))
    sys.exit(0 if created else 1)


if __name__ == "__main__":
    main()
