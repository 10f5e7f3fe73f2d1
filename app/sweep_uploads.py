"""Reconcile the upload directory with post records.

Usage:
    python -m app.sweep_uploads [--dry-run]
"""

import argparse
import logging

from app.config import settings
from app.database import SessionLocal
from app.services.upload_reconciler import UploadReconciler
import app.models  # noqa: F401


def main(argv=None):
    parser = argparse.ArgumentParser(description="Remove orphaned uploads and dangling image references")
    parser.add_argument("--dry-run", action="store_true", help="Report without changing anything")
    parser.add_argument(
        "--grace-seconds",
        type=int,
        default=None,
        help="Ignore files newer than this (default: UPLOAD_SWEEP_GRACE_SECONDS)",
    )
    args = parser.parse_args(argv)

    logging.basicConfig(level=settings.LOG_LEVEL)

    db = SessionLocal()
    try:
        report = UploadReconciler(dry_run=args.dry_run, grace_seconds=args.grace_seconds).run(db)
    finally:
        db.close()

    print(f"Removed files: {len(report.removed_files)}")
    for path in report.removed_files:
        print(f"  {path}")
    print(f"Cleared post references: {len(report.cleared_posts)}")
    for post_id in report.cleared_posts:
        print(f"  post {post_id}")
    return report


if __name__ == "__main__":
    main()
