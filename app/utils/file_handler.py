"""Image upload handler for post attachments, stored under UPLOAD_DIR and served at /uploads"""
import logging
import time
import uuid
from pathlib import Path
from typing import Optional, Set, Tuple
from fastapi import UploadFile
from app.config import settings
from app.core.exceptions import FormValidationException, StorageException

# Setup logging
logger = logging.getLogger(__name__)

# Public URL prefix under which UPLOAD_DIR is mounted
UPLOAD_URL_PREFIX = "/uploads"

# ============================================
# FILE TYPE DEFINITIONS WITH MIME VALIDATION
# ============================================

# Magic bytes signatures for file type validation
MAGIC_BYTES = {
    # JPEG: FFD8FF
    "jpeg": [b"\xff\xd8\xff"],
    # PNG: 89504E47
    "png": [b"\x89PNG\r\n\x1a\n"],
    # GIF: GIF87a or GIF89a
    "gif": [b"GIF87a", b"GIF89a"],
    # WEBP: RIFF container
    "webp": [b"RIFF"],
}

# Extension to magic type mapping
EXTENSION_TO_TYPE = {
    ".jpg": "jpeg",
    ".jpeg": "jpeg",
    ".png": "png",
    ".gif": "gif",
    ".webp": "webp",
}

# MIME type to extension, for uploads whose filename has no extension
MIME_TO_EXTENSION = {
    "image/jpeg": ".jpg",
    "image/png": ".png",
    "image/gif": ".gif",
    "image/webp": ".webp",
}

ALLOWED_IMAGE_EXTENSIONS: Set[str] = set(EXTENSION_TO_TYPE)

IMAGE_ONLY_MESSAGE = "Sadece resim dosyaları kabul edilir!"


# ============================================
# SECURITY VALIDATION FUNCTIONS
# ============================================

def validate_magic_bytes(file_content: bytes, expected_type: str) -> bool:
    """
    Validate file content by checking magic bytes (file signature).

    Args:
        file_content: First few bytes of the file
        expected_type: Expected file type (jpeg, png, gif, webp)

    Returns:
        True if magic bytes match expected type
    """
    if expected_type not in MAGIC_BYTES:
        return False

    return any(file_content.startswith(signature) for signature in MAGIC_BYTES[expected_type])


def sanitize_filename(filename: str) -> str:
    """
    Sanitize filename to prevent path traversal and other attacks.

    Args:
        filename: Original filename from upload

    Returns:
        Sanitized filename (only alphanumeric, dash, underscore, and dot)
    """
    if not filename:
        return "unnamed"

    # Get only the basename (remove any path components)
    basename = Path(filename).name

    safe_chars = set("abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789-_.")
    sanitized = "".join(c if c in safe_chars else "_" for c in basename)

    # Ensure it doesn't start with a dot (hidden file)
    sanitized = sanitized.lstrip(".")

    return sanitized if sanitized else "unnamed"


def get_file_extension(filename: str) -> str:
    """Safely get file extension in lowercase."""
    if not filename:
        return ""
    return Path(filename).suffix.lower()


def has_upload(upload_file: Optional[UploadFile]) -> bool:
    """Browsers send an empty, nameless part when no file was chosen."""
    return upload_file is not None and bool(upload_file.filename)


# ============================================
# MAIN VALIDATION FUNCTION
# ============================================

def validate_image_upload(
    upload_file: UploadFile,
    max_size_bytes: Optional[int] = None
) -> Tuple[bytes, str]:
    """
    Validate an uploaded post image.

    Args:
        upload_file: FastAPI UploadFile object
        max_size_bytes: Optional custom max size, defaults to settings.MAX_IMAGE_SIZE

    Returns:
        Tuple of (file_content, file_extension)

    Raises:
        FormValidationException: If the file is not an acceptable image
    """
    content_type = (upload_file.content_type or "").lower()
    if not content_type.startswith("image/"):
        raise FormValidationException(detail=IMAGE_ONLY_MESSAGE)

    original_filename = sanitize_filename(upload_file.filename)
    file_ext = get_file_extension(original_filename) or MIME_TO_EXTENSION.get(content_type, "")

    if file_ext not in ALLOWED_IMAGE_EXTENSIONS:
        raise FormValidationException(
            detail=f"{IMAGE_ONLY_MESSAGE} Kabul edilen formatlar: {', '.join(sorted(ALLOWED_IMAGE_EXTENSIONS))}"
        )

    # Read at most one byte past the limit
    max_size = max_size_bytes or settings.MAX_IMAGE_SIZE
    upload_file.file.seek(0)
    file_content = upload_file.file.read(max_size + 1)
    upload_file.file.seek(0)

    if len(file_content) > max_size:
        size_mb = max_size / (1024 * 1024)
        raise FormValidationException(detail=f"Dosya çok büyük. Maksimum: {size_mb:.0f}MB")

    if len(file_content) == 0:
        raise FormValidationException(detail="Boş dosya yüklenemez")

    expected_type = EXTENSION_TO_TYPE[file_ext]
    if not validate_magic_bytes(file_content, expected_type):
        logger.warning(
            f"Magic bytes mismatch - filename: {original_filename}, "
            f"expected_type: {expected_type}"
        )
        raise FormValidationException(detail="Dosya içeriği uzantısıyla uyuşmuyor")

    logger.info(f"Image validated successfully: size={len(file_content)} bytes, type={expected_type}")

    return file_content, file_ext


# ============================================
# FILE STORAGE FUNCTIONS
# ============================================

def get_upload_dir() -> Path:
    """Ensure upload directory exists and return the path."""
    dir_path = Path(settings.UPLOAD_DIR)
    dir_path.mkdir(parents=True, exist_ok=True)
    return dir_path


def save_image_upload(upload_file: UploadFile) -> str:
    """
    Validate and store a post image.

    Args:
        upload_file: FastAPI UploadFile object (form field `image`)

    Returns:
        str: Public URL path (e.g., /uploads/image-<uuid>.png)

    Raises:
        FormValidationException: If validation fails
        StorageException: If the file cannot be written
    """
    file_content, file_ext = validate_image_upload(upload_file)

    unique_filename = f"image-{uuid.uuid4().hex}{file_ext}"
    file_path = get_upload_dir() / unique_filename

    try:
        with open(file_path, "wb") as f:
            f.write(file_content)
    except OSError as e:
        logger.error(f"Failed to save file: {e}")
        raise StorageException(detail="Dosya kaydedilemedi. Lütfen tekrar deneyin.") from e

    logger.info(f"File saved: {file_path}")
    return f"{UPLOAD_URL_PREFIX}/{unique_filename}"


def resolve_upload_path(file_path: str) -> Optional[Path]:
    """
    Map a stored /uploads/... path to a file inside UPLOAD_DIR.

    Returns None for anything that would escape the upload directory.
    """
    if not file_path:
        return None

    clean_path = file_path.lstrip("/")
    prefix = UPLOAD_URL_PREFIX.lstrip("/") + "/"
    if clean_path.startswith(prefix):
        clean_path = clean_path[len(prefix):]

    if not clean_path or ".." in Path(clean_path).parts or "\\" in clean_path:
        logger.warning(f"Path traversal attempt detected: {file_path}")
        return None

    upload_dir_resolved = Path(settings.UPLOAD_DIR).resolve()
    resolved_path = (upload_dir_resolved / clean_path).resolve()

    if upload_dir_resolved not in resolved_path.parents:
        logger.warning(f"Path traversal blocked: {file_path} -> {resolved_path}")
        return None

    return resolved_path


def delete_image(file_path: Optional[str]) -> bool:
    """
    Delete a stored image.

    Args:
        file_path: Stored path (e.g., /uploads/image-<uuid>.png)

    Returns:
        True if file was deleted, False if there was nothing to delete
    """
    resolved_path = resolve_upload_path(file_path) if file_path else None
    if resolved_path is None:
        return False

    try:
        if resolved_path.is_file():
            resolved_path.unlink()
            logger.info(f"File deleted: {resolved_path}")
            return True
    except OSError as e:
        logger.error(f"Error deleting file {file_path}: {e}")
    return False


def image_exists(file_path: str) -> bool:
    resolved_path = resolve_upload_path(file_path)
    return resolved_path is not None and resolved_path.is_file()


def list_stored_images(min_age_seconds: int = 0) -> Set[str]:
    """
    Public paths of the files currently in UPLOAD_DIR (top level).

    Args:
        min_age_seconds: Skip files modified less than this many seconds ago
    """
    upload_dir = Path(settings.UPLOAD_DIR)
    if not upload_dir.is_dir():
        return set()

    cutoff = time.time() - min_age_seconds
    return {
        f"{UPLOAD_URL_PREFIX}/{entry.name}"
        for entry in upload_dir.iterdir()
        if entry.is_file()
        and not entry.name.startswith(".")
        and entry.stat().st_mtime <= cutoff
    }
