"""Media storage port."""

from abc import ABC, abstractmethod
from pathlib import Path


class MediaStorage(ABC):
    """Stores profile photos outside the database.

    Accounts only keep the returned URL.
    """

    @abstractmethod
    async def upload(self, file_path: Path) -> str:
        """Upload a local file.

        Args:
            file_path: Path of the file to upload

        Returns:
            Durable URL of the stored image

        Raises:
            MediaStorageError: If the upload fails
        """
        pass

    @abstractmethod
    async def delete(self, url_or_id: str) -> None:
        """Delete a stored image by URL or storage ID.

        Raises:
            MediaStorageError: If the deletion fails
        """
        pass
