#!/usr/bin/env python3
"""
Script to check which accounts hold the ADMIN role, or grant it.

Usage:
    python check_admin.py                 # list administrators
    python check_admin.py grant <email>   # grant ADMIN to an existing user
"""
import sys

from dotenv import load_dotenv

# Load environment variables
load_dotenv()

from vetclinic.auth.models import RoleName
from vetclinic.core.bootstrap import create_tables, grant_role, list_admins, seed_roles
from vetclinic.database import get_engine, get_session_factory


def check_admin_accounts(db) -> bool:
    """Print the admin accounts. Returns False when there are none."""
    print("Checking for admin accounts in the database...")
    print("=" * 50)

    admins = list_admins(db)
    if not admins:
        print("No admin accounts found in the database")
        print("\nTo create the first admin account:")
        print("   1. Add bootstrap credentials to your .env file:")
        print("      BOOTSTRAP_ADMIN_EMAIL=admin@yourclinic.com")
        print("      BOOTSTRAP_ADMIN_PASSWORD=YourSecurePassword123")
        print("   2. Restart the server")
        print("   or run: python check_admin.py grant <email>")
        return False

    print(f"Found {len(admins)} admin account(s):\n")
    for i, admin in enumerate(admins, 1):
        print(f"Admin {i}:")
        print(f"  Email: {admin.email}")
        print(f"  Name: {admin.nombre}")
        print(f"  ID: {admin.id}")
        print(f"  Provider: {admin.proveedor.value}")
        print(f"  Created: {admin.creado_en}")
        print()
    return True


def main(argv) -> int:
    create_tables(get_engine())
    db = get_session_factory()()
    try:
        seed_roles(db)
        if len(argv) == 3 and argv[1] == "grant":
            try:
                granted = grant_role(db, argv[2], RoleName.ADMIN)
            except LookupError as e:
                print(f"Error: {e}")
                return 1
            print(f"ADMIN granted to {argv[2]}" if granted else f"{argv[2]} already holds ADMIN")
            return 0
        if len(argv) != 1:
            print(__doc__)
            return 2
        return 0 if check_admin_accounts(db) else 1
    finally:
        db.close()


if __name__ == "__main__":
    sys.exit(main(sys.argv))
