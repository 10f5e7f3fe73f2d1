"""Services package for IMUGOSSIP application."""

from .upload_reconciler import ReconcileReport, UploadReconciler

__all__ = [
    "ReconcileReport",
    "UploadReconciler",
]
