"""
Seed script for the UrbanAware mock DB or Firestore.

Usage:
  - Dry run (default): python scripts/seed_db.py
  - Apply to configured DB: python scripts/seed_db.py --apply
  - Force mock DB even if FIREBASE configured: python scripts/seed_db.py --apply --force-mock
  - Other seed file: python scripts/seed_db.py --seed data/db_seed.json

Behavior:
  - Loads the seed file: {"<collection>": {"<doc_id>": {...flat district document...}}}
  - Validates each document as a DistrictRecord before writing.
  - Gets DB via `app.config.firebase.get_db()` which will return the mock DB or real Firestore depending on settings.

NOTE: When applying to real Firestore, ensure `FIREBASE_CREDENTIALS_PATH` and `USE_MOCK_DB=false` are set in `.env`.
"""

import argparse
import json
import logging
import os
from typing import Any

from pydantic import ValidationError

from app.config.firebase import get_db, reset_db
from app.core.settings import settings
from app.models.district import DistrictRecord

logger = logging.getLogger("seed_db")


def load_seed(path: str) -> dict:
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)


def write_to_db(db: Any, seed: dict, apply: bool = False) -> int:
    """
    Write every valid seed document; return how many were (or would be) written.
    """
    written = 0
    for collection, docs in seed.items():
        for doc_id, data in docs.items():
            try:
                DistrictRecord.from_document(data)
            except (ValidationError, TypeError, ValueError) as e:
                logger.warning(f"Invalid: {collection}/{doc_id}: {e}")
                continue

            logger.info(f"Preparing: {collection}/{doc_id}")
            written += 1
            if not apply:
                continue
            try:
                # Firestore client and MockFirestore share .collection(name).document(id).set(data)
                db.collection(collection).document(doc_id).set(data)
                logger.info(f"Wrote: {collection}/{doc_id}")
            except Exception as e:
                logger.error(f"Failed to write {collection}/{doc_id}: {e}")
    return written


def main():
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(message)s")

    parser = argparse.ArgumentParser()
    parser.add_argument("--apply", action="store_true", help="Write seed to the DB instead of dry-run")
    parser.add_argument("--force-mock", action="store_true", help="Force use of mock DB even if FIREBASE configured")
    parser.add_argument("--seed", default=os.path.join("data", "db_seed.json"), help="Seed file path")
    args = parser.parse_args()

    if not os.path.exists(args.seed):
        logger.error(f"Seed file not found: {args.seed}")
        return

    seed = load_seed(args.seed)

    if args.force_mock:
        logger.info("Forcing mock DB usage for this run.")
        settings.USE_MOCK_DB = True
        reset_db()

    db = get_db()
    count = write_to_db(db, seed, apply=args.apply)

    if args.apply:
        logger.info(f"Seeding completed: {count} documents.")
    else:
        logger.info(f"Dry run complete ({count} documents). Re-run with --apply to write to DB.")


if __name__ == "__main__":
    main()
