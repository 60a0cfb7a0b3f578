from __future__ import annotations

import logging
import time
import uuid
from pathlib import Path

from inventory_service.core.config import DEFAULT_PHOTO_MAX_BYTES
from inventory_service.core.errors import PayloadTooLargeError, ValidationError


logger = logging.getLogger(__name__)

FILENAME_PREFIX = "photo"
DEFAULT_MIME_TYPE = "image/jpeg"

MIME_TYPES: dict[str, str] = {
    ".jpg": "image/jpeg",
    ".jpeg": "image/jpeg",
    ".png": "image/png",
    ".gif": "image/gif",
    ".bmp": "image/bmp",
    ".webp": "image/webp",
    ".svg": "image/svg+xml",
}


def mime_type_for(filename: str) -> str:
    return MIME_TYPES.get(Path(filename).suffix.lower(), DEFAULT_MIME_TYPE)


def normalize_extension(extension: str | None) -> str:
    """Accept "png", ".PNG" or a full filename and return ".png" ("" when there is none)."""
    if not extension:
        return ""
    ext = extension.strip()
    if "." in ext[1:] or "/" in ext or "\\" in ext:
        ext = Path(ext).suffix
    elif ext and not ext.startswith("."):
        ext = f".{ext}"
    ext = ext.lower()
    # Only keep extensions that are plain alphanumerics so the generated name stays a single path segment.
    if len(ext) < 2 or not ext[1:].isalnum():
        return ""
    return ext


class PhotoStore:
    """Flat directory of uploaded photos addressed by generated filenames."""

    def __init__(self, directory: Path, *, max_bytes: int = DEFAULT_PHOTO_MAX_BYTES) -> None:
        self.directory = Path(directory)
        self.max_bytes = max_bytes

    def ensure_directory(self) -> None:
        if not self.directory.exists():
            self.directory.mkdir(parents=True, exist_ok=True)
            logger.info("Created photo directory %s", self.directory)

    def generate_filename(self, extension: str | None) -> str:
        # Millisecond timestamp plus a random component keeps concurrent uploads apart.
        stamp = int(time.time() * 1000)
        return f"{FILENAME_PREFIX}-{stamp}-{uuid.uuid4().hex[:12]}{normalize_extension(extension)}"

    def path_for(self, filename: str) -> Path:
        base_dir = self.directory.resolve()
        abs_path = (self.directory / filename).resolve()
        try:
            abs_path.relative_to(base_dir)
        except ValueError as e:
            raise ValidationError("Invalid photo filename") from e
        if abs_path == base_dir:
            raise ValidationError("Invalid photo filename")
        return abs_path

    def validate_upload(self, content_type: str | None, size: int) -> None:
        if not (content_type or "").lower().startswith("image/"):
            raise ValidationError("Only image files are allowed")
        if size > self.max_bytes:
            raise PayloadTooLargeError(f"Photo exceeds the maximum size of {self.max_bytes} bytes")

    def save(self, content: bytes, extension: str | None) -> str:
        self.ensure_directory()
        name = self.generate_filename(extension)
        self.path_for(name).write_bytes(content)
        logger.info("Saved photo %s (%s bytes)", name, len(content))
        return name

    def exists(self, filename: str | None) -> bool:
        if not filename:
            return False
        try:
            return self.path_for(filename).is_file()
        except ValidationError:
            return False

    def delete(self, filename: str | None) -> bool:
        """
        Remove a photo file.

        Missing files count as deleted. Filesystem errors are logged and reported as False, never raised,
        so a failed cleanup does not fail the request that triggered it.
        """
        if not filename:
            return True
        try:
            self.path_for(filename).unlink(missing_ok=True)
        except ValidationError:
            logger.warning("Refusing to delete photo outside the store: %r", filename)
            return False
        except OSError:
            logger.warning("Failed to delete photo %s", filename, exc_info=True)
            return False
        logger.info("Deleted photo %s", filename)
        return True
