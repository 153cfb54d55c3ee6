"""
Image upload service.

Reads and validates the raw image payload of multipart requests before any
provider is invoked.
"""

import logging

from fastapi import UploadFile

from cloudtech.config.settings import Settings
from cloudtech.core.exceptions import MissingInputError, PayloadTooLargeError


logger = logging.getLogger(__name__)


class ImageService:
    """
    Upload validation service.

    Handles:
    - Missing or empty image field
    - Upload size limit
    """

    def __init__(self, settings: Settings):
        self.settings = settings

    async def read_payload(self, image: UploadFile | None) -> bytes:
        """
        Read the uploaded image into memory.

        Args:
            image: The multipart `image` field, or None if it was not sent

        Returns:
            Raw image bytes (opaque; never decoded here)

        Raises:
            MissingInputError: No file, or a zero-byte file
            PayloadTooLargeError: File exceeds max_file_size_mb
        """
        if image is None:
            raise MissingInputError('No image provided')

        content = await image.read()
        if not content:
            raise MissingInputError('No image provided')

        self.validate_size(content)
        logger.debug(f'Received {image.filename or "upload"} ({len(content) / 1024:.1f}KB)')
        return content

    def validate_size(self, content: bytes) -> bool:
        """
        Validate image file size.

        Args:
            content: Image bytes

        Returns:
            True if valid, raises PayloadTooLargeError if too large
        """
        max_size_mb = self.settings.max_file_size_mb
        size_mb = len(content) / (1024 * 1024)

        if size_mb > max_size_mb:
            raise PayloadTooLargeError(size_mb, max_size_mb)

        return True
