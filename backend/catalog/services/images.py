# images.py
from __future__ import annotations

import hashlib
import logging
from dataclasses import dataclass
from pathlib import Path

from catalog.core.errors import ForbiddenPath, InvalidSuffix, StorageFailure, ValidationError

logger = logging.getLogger(__name__)

IMAGE_SUFFIX = ".jpg"
ALLOWED_SUFFIXES = (".jpg", ".jpeg")
DEFAULT_IMAGE = "default.jpg"


class ImageStore:
    """Content-addressed image storage on the local filesystem.

    Files are named after the SHA-256 of their bytes, so storing the same
    image twice yields the same name and rewrites identical content.
    """

    def __init__(self, image_dir: str | Path):
        self.image_dir = Path(image_dir)

    @staticmethod
    def file_name_for(data: bytes) -> str:
        return hashlib.sha256(data).hexdigest() + IMAGE_SUFFIX

    def store(self, data: bytes) -> str:
        """
        Writes data under image_dir and returns the bare file name
        (not the full path).
        """
        fname = self.file_name_for(data)
        out_path = self.image_dir / fname
        try:
            self.image_dir.mkdir(parents=True, exist_ok=True)
            out_path.write_bytes(data)
        except OSError as exc:
            raise StorageFailure(f"failed to write image {out_path}: {exc}") from exc

        logger.debug("Stored image %s (%d bytes)", fname, len(data))
        return fname


@dataclass(frozen=True)
class ResolvedImage:
    path: Path
    found: bool


class ImagePathResolver:
    def __init__(self, image_dir: str | Path):
        self.image_dir = Path(image_dir)

    @property
    def default_path(self) -> Path:
        return self.image_dir / DEFAULT_IMAGE

    def resolve(self, requested_name: str) -> ResolvedImage:
        """Map an untrusted file name to a path inside the image root.

        Raises ForbiddenPath when the name escapes the root and InvalidSuffix
        when it is not a jpeg. A valid name with no file behind it comes back
        with found=False; the caller decides what to serve instead.
        """
        if not requested_name:
            raise ValidationError("filename is required")

        root = self.image_dir.resolve()
        if "\x00" in requested_name:
            raise ForbiddenPath(f"invalid image path: {requested_name!r}")
        try:
            p = (root / requested_name).resolve()
        except (OSError, ValueError) as exc:
            raise ForbiddenPath(f"invalid image path: {requested_name!r}") from exc
        if root not in p.parents:
            raise ForbiddenPath(f"invalid image path: {requested_name}")

        if p.suffix not in ALLOWED_SUFFIXES:
            raise InvalidSuffix(f"image path does not end with .jpg or .jpeg: {requested_name}")

        try:
            found = p.is_file()
        except OSError as exc:
            # e.g. ENAMETOOLONG; nothing can be stored under such a name
            logger.debug("Cannot stat %s: %s", p, exc)
            found = False
        return ResolvedImage(path=p, found=found)
