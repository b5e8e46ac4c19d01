"""Utility script to add a member to the mention directory."""

from __future__ import annotations

import argparse

from teamboard.application.use_cases.members import register_member
from teamboard.domain.exceptions import StoreError
from teamboard.infrastructure.database import SessionLocal, initialize_database


def parse_args() -> argparse.Namespace:
    """Parse command line arguments for member registration."""

    parser = argparse.ArgumentParser(
        description="Register (or rename) a member that can be mentioned and notified.",
    )
    parser.add_argument("member_id", help="Durable member identifier, e.g. LDA0001")
    parser.add_argument("display_name", help="Name shown in the mention dropdown")
    parser.add_argument("--email", default=None, help="Contact email (optional)")
    return parser.parse_args()


def main() -> None:
    """Create or update a member using the provided command line arguments."""

    args = parse_args()
    initialize_database()
    session = SessionLocal()
    try:
        member = register_member(
            session,
            member_id=args.member_id,
            display_name=args.display_name,
            email=args.email,
        )
    except (ValueError, StoreError) as exc:
        raise SystemExit(f"Could not register member: {exc}") from exc
    finally:
        session.close()

    print(f"Member {member.id} registered as '{member.display_name}'.")


if __name__ == "__main__":
    main()
