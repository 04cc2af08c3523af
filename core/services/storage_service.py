# =============================================================================
# core/services/storage_service.py - Supabase Storage Operations
# =============================================================================
# Handles event image upload, public URL lookup and removal with Supabase
# Storage. Images live in the EVENT_IMAGES_BUCKET bucket under
# event-images/<epoch ms>.<ext>.
# =============================================================================

import logging
import time
from typing import Callable

from supabase import Client

from app.config import settings
from app.exceptions import StorageUploadError
from core.models import ImageUpload
from lib.supabase_client import store_error_message

logger = logging.getLogger(__name__)

# Folder inside the bucket
IMAGE_FOLDER = "event-images"


class StorageService:
    """
    Service for Supabase Storage operations.

    Example:
        storage = StorageService(client)
        path = storage.upload_image(image)
        url = storage.get_public_url(path)
    """

    def __init__(
        self,
        client: Client,
        bucket: str | None = None,
        clock: Callable[[], float] = time.time,
    ):
        self.client = client
        self.bucket = bucket or settings.EVENT_IMAGES_BUCKET
        self._clock = clock

    def image_path(self, image: ImageUpload) -> str:
        """Storage path for a new image: event-images/<epoch ms>.<ext>."""
        return f"{IMAGE_FOLDER}/{int(self._clock() * 1000)}.{image.extension}"

    def upload_image(self, image: ImageUpload) -> str:
        """
        Upload an event image.

        Args:
            image: The file as posted by the console

        Returns:
            Storage path where the image was uploaded

        Raises:
            StorageUploadError: If upload fails
        """
        path = self.image_path(image)

        try:
            self.client.storage.from_(self.bucket).upload(
                path=path,
                file=image.content,
                file_options={"content-type": image.content_type or "application/octet-stream"},
            )
        except Exception as e:
            message = store_error_message(e)
            logger.error(f"Storage upload failed: {message}")
            raise StorageUploadError(message) from e

        logger.info(f"Uploaded image to storage: {path} ({image.size} bytes)")
        return path

    def get_public_url(self, storage_path: str) -> str:
        """
        Get a public URL for a storage file.

        Args:
            storage_path: Path in storage bucket

        Returns:
            Public URL string
        """
        try:
            return self.client.storage.from_(self.bucket).get_public_url(storage_path)
        except Exception as e:
            logger.error(f"Failed to get public URL: {e}")
            raise

    def delete_file(self, storage_path: str) -> bool:
        """
        Delete a file from storage.

        Failures are logged rather than raised: callers use this to clean up
        after a failed write and must still report the original error.

        Args:
            storage_path: Path in storage bucket

        Returns:
            True if the file was removed
        """
        try:
            self.client.storage.from_(self.bucket).remove([storage_path])
        except Exception as e:
            logger.error(
                f"Failed to delete {storage_path} from {self.bucket}, "
                f"file is orphaned: {store_error_message(e)}"
            )
            return False

        logger.info(f"Deleted file from storage: {storage_path}")
        return True

    def bucket_reachable(self) -> bool:
        """Whether the storage API answers (used by the readiness check)."""
        try:
            self.client.storage.list_buckets()
            return True
        except Exception as e:
            logger.warning(f"Storage check failed: {e}")
            return False
