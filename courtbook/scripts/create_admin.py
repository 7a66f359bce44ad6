from __future__ import annotations

import argparse

from sqlalchemy import select

from courtbook.core.security import create_access_token
from courtbook.db.session import SessionLocal
from courtbook.models.user import User


def main() -> int:
    parser = argparse.ArgumentParser(description="Create or promote an admin and print a bearer token")
    parser.add_argument("--name", required=True)

    args = parser.parse_args()
    name = args.name.strip()

    db = SessionLocal()
    try:
        u = db.execute(select(User).where(User.name == name)).scalar_one_or_none()
        if u is None:
            u = User(name=name, status="approved", is_admin=True)
            db.add(u)
            db.commit()
            print(f"Created admin: {u.name}")
        else:
            u.status = "approved"
            u.is_admin = True
            db.commit()
            print(f"Updated admin: {u.name}")

        print(create_access_token(u.id))
        return 0
    finally:
        db.close()


if __name__ == "__main__":
    raise SystemExit(main())
