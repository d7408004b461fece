"""Media storage adapter."""

from .cloudinary import CloudinaryMediaStorage, MockMediaStorage, extract_public_id

__all__ = ["CloudinaryMediaStorage", "MockMediaStorage", "extract_public_id"]
