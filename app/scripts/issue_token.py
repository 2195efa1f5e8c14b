"""
Issue a bearer token for a seeded user, for scripted API calls. Run from project root:
  python -m app.scripts.issue_token USERNAME PASSWORD
Example:
  curl -H "Authorization: Bearer $(python -m app.scripts.issue_token admin password123)" \
    http://localhost:3001/api/items
"""
import argparse
import sys

from app.core.security import create_access_token
from app.core.storage import get_credential_store
from app.schemas.auth import CurrentUser


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Issue a REM Waste API bearer token.")
    parser.add_argument("username", help="Seeded username (e.g. admin)")
    parser.add_argument("password", help="Password for that user")
    args = parser.parse_args(argv)

    if not args.username or not args.password:
        print("Username and password required.", file=sys.stderr)
        return 1

    user = get_credential_store().authenticate(args.username, args.password)
    if user is None:
        print("Invalid credentials.", file=sys.stderr)
        return 1

    token = create_access_token(CurrentUser(id=user.id, username=user.username, role=user.role))
    print(token)
    return 0


if __name__ == "__main__":
    sys.exit(main())
