"""
CLI entrypoint for the reference reconciliation job. Run from cron, e.g.:

  python -m hotelbook.reconcile

Or nightly: 0 3 * * * cd /path/to/hotelbook && .venv/bin/python -m hotelbook.reconcile
"""

import logging
import sys

from hotelbook.core.database import SessionLocal
from hotelbook.services.reconcile import reconcile_references

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
    datefmt="%Y-%m-%dT%H:%M:%SZ",
)
logger = logging.getLogger(__name__)


def main() -> int:
    """Prune dangling room type references from hotels."""
    db = SessionLocal()
    try:
        hotels_updated, references_removed = reconcile_references(db)
        logger.info(
            "Reconciliation completed: hotels_updated=%s, references_removed=%s",
            hotels_updated,
            references_removed,
        )
        return 0
    except Exception as e:
        logger.exception("Reconciliation job failed: %s", e)
        return 1
    finally:
        db.close()


if __name__ == "__main__":
    sys.exit(main())
