"""Reconciliation sweep between stored images and post records.

Image files and post rows are not written in one transaction. Writes are
ordered so that a crash leaves at most an unreferenced file behind; this
sweep removes such files and also clears references to files that have
gone missing (e.g. restored database, wiped volume).

Files younger than UPLOAD_SWEEP_GRACE_SECONDS are never treated as orphans:
an upload is written before its post record is committed.
"""

import logging
from typing import List, Optional

from pydantic import BaseModel
from sqlalchemy.orm import Session

from app.config import settings
from app.crud import crud_post
from app.utils.file_handler import delete_image, image_exists, list_stored_images

logger = logging.getLogger(__name__)


class ReconcileReport(BaseModel):
    removed_files: List[str] = []
    cleared_posts: List[int] = []


class UploadReconciler:
    """Bring UPLOAD_DIR and Post.image_path back in agreement."""

    def __init__(self, dry_run: bool = False, grace_seconds: Optional[int] = None):
        self.dry_run = dry_run
        # A fresh file may belong to a post whose record is not committed yet
        self.grace_seconds = (
            settings.UPLOAD_SWEEP_GRACE_SECONDS if grace_seconds is None else grace_seconds
        )

    def remove_orphaned_files(self, db: Session, report: ReconcileReport) -> None:
        referenced = crud_post.get_image_paths(db)
        stored = list_stored_images(min_age_seconds=self.grace_seconds)
        for path in sorted(stored - referenced):
            if self.dry_run or delete_image(path):
                report.removed_files.append(path)
                logger.info(f"[SWEEP] Orphaned upload {'found' if self.dry_run else 'removed'}: {path}")

    def clear_missing_references(self, db: Session, report: ReconcileReport) -> None:
        for post in crud_post.get_with_images(db):
            if image_exists(post.image_path):
                continue
            logger.warning(f"[SWEEP] Post {post.id} references missing file {post.image_path}")
            if not self.dry_run:
                crud_post.clear_image(db, post=post)
            report.cleared_posts.append(post.id)

    def run(self, db: Session) -> ReconcileReport:
        report = ReconcileReport()
        self.remove_orphaned_files(db, report)
        self.clear_missing_references(db, report)
        logger.info(
            f"[SWEEP] Done: {len(report.removed_files)} file(s) removed, "
            f"{len(report.cleared_posts)} post reference(s) cleared"
        )
        return report


__all__ = ["ReconcileReport", "UploadReconciler"]
