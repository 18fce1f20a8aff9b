"""
Seed script for the demo reuse organizations (MongoDB or the in-memory store).

Usage:
  - Dry run (default): python scripts/seed_db.py
  - Apply to configured DB: python scripts/seed_db.py --apply
  - Force in-memory store even if MONGODB_URI is set: python scripts/seed_db.py --apply --force-mock

Behavior:
  - Builds the store from settings via `agriwaste.config.store.create_store()`.
  - Inserts the same two organizations as GET /api/seed-orgs.
  - Re-running inserts duplicates; there is no uniqueness constraint.

NOTE: When applying to MongoDB, ensure `MONGODB_URI` is set in `.env`.
"""

import argparse

from agriwaste.config.store import create_store
from agriwaste.core.settings import settings
from agriwaste.models.organization import DEMO_ORGANIZATIONS
from agriwaste.services.organization_service import seed_demo_organizations


def main():
    parser = argparse.ArgumentParser()
    parser.add_argument("--apply", action="store_true", help="Write seed to the DB instead of dry-run")
    parser.add_argument("--force-mock", action="store_true", help="Force the in-memory store even if MONGODB_URI is set")
    args = parser.parse_args()

    for org in DEMO_ORGANIZATIONS:
        print(f"Preparing: organizations/{org.name} ({org.type}, {org.city}) at [{org.lng}, {org.lat}]")

    if not args.apply:
        print("Dry run complete. Re-run with --apply to write to DB.")
        return

    if args.force_mock:
        print("Forcing in-memory store for this run.")
        settings.USE_MOCK_DB = True

    store = create_store(settings)
    store.connect()
    try:
        saved = seed_demo_organizations(store)
        for org in saved:
            print(f"Wrote: organizations/{org.id} {org.name}")
        print("Seeding completed.")
    finally:
        store.close()


if __name__ == "__main__":
    main()
