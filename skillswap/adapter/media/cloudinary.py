"""Profile photo storage on Cloudinary.

Talks to the Cloudinary upload REST API directly with signed requests.
"""

import hashlib
import re
import time
from pathlib import Path
from uuid import uuid4

import httpx
import logfire

from skillswap.adapter.error import MediaStorageError
from skillswap.domain.service.media import MediaStorage

_VERSION_SEGMENT = re.compile(r"^v\d+$")

# Square crop around the face, served in the best format for the client
PROFILE_PHOTO_TRANSFORMATION = "c_fill,g_face,h_400,w_400/q_auto/f_auto"


def sign_params(params: dict[str, str], api_secret: str) -> str:
    """Cloudinary request signature.

    SHA-1 over the parameters sorted by name and joined as ``k=v&k=v``,
    followed directly by the API secret.
    """
    to_sign = "&".join(f"{key}={params[key]}" for key in sorted(params))
    return hashlib.sha1(f"{to_sign}{api_secret}".encode("utf-8")).hexdigest()


def extract_public_id(url_or_id: str) -> str:
    """Public ID of a Cloudinary asset.

    Accepts either a delivery URL such as
    ``https://res.cloudinary.com/demo/image/upload/v17/profile-photos/a.jpg``
    (public ID ``profile-photos/a``) or a bare public ID.

    Raises:
        MediaStorageError: If no public ID can be found
    """
    if "cloudinary.com" not in url_or_id:
        public_id = url_or_id.strip()
    else:
        parts = url_or_id.split("?")[0].split("/")
        if "upload" not in parts:
            raise MediaStorageError(f"Not a Cloudinary upload URL: {url_or_id}")
        tail = parts[parts.index("upload") + 1 :]
        # Skip transformation and version segments
        while tail and ("," in tail[0] or _VERSION_SEGMENT.match(tail[0])):
            tail = tail[1:]
        public_id = "/".join(tail).rsplit(".", 1)[0]

    if not public_id:
        raise MediaStorageError(f"Invalid public ID or URL: {url_or_id}")
    return public_id


class CloudinaryMediaStorage(MediaStorage):
    """Signed uploads and deletions against one Cloudinary cloud."""

    def __init__(
        self,
        cloud_name: str,
        api_key: str,
        api_secret: str,
        folder: str = "profile-photos",
        timeout: float = 30.0,
    ) -> None:
        self.api_key = api_key
        self.api_secret = api_secret
        self.folder = folder
        self.timeout = timeout
        self.base_url = f"https://api.cloudinary.com/v1_1/{cloud_name}/image"

    def _signed(self, params: dict[str, str]) -> dict[str, str]:
        params = {**params, "timestamp": str(int(time.time()))}
        return {
            **params,
            "api_key": self.api_key,
            "signature": sign_params(params, self.api_secret),
        }

    async def upload(self, file_path: Path) -> str:
        params = self._signed(
            {
                "folder": self.folder,
                "transformation": PROFILE_PHOTO_TRANSFORMATION,
            }
        )

        with logfire.span("cloudinary.upload", folder=self.folder):
            try:
                async with httpx.AsyncClient() as client:
                    with file_path.open("rb") as handle:
                        response = await client.post(
                            f"{self.base_url}/upload",
                            data=params,
                            files={"file": (file_path.name, handle)},
                            timeout=self.timeout,
                        )
            except httpx.HTTPError as e:
                logfire.error("Cloudinary upload HTTP error", error=str(e))
                raise MediaStorageError(f"HTTP error uploading image: {e}")

            if response.status_code != 200:
                logfire.error(
                    "Cloudinary upload failed",
                    status_code=response.status_code,
                    error=response.text,
                )
                raise MediaStorageError(
                    "Failed to upload image", response.status_code
                )

            secure_url = response.json()["secure_url"]
            logfire.info("Image uploaded", url=secure_url)
            return secure_url

    async def delete(self, url_or_id: str) -> None:
        public_id = extract_public_id(url_or_id)
        params = self._signed({"public_id": public_id})

        with logfire.span("cloudinary.delete", public_id=public_id):
            try:
                async with httpx.AsyncClient() as client:
                    response = await client.post(
                        f"{self.base_url}/destroy", data=params, timeout=self.timeout
                    )
            except httpx.HTTPError as e:
                logfire.error("Cloudinary delete HTTP error", error=str(e))
                raise MediaStorageError(f"HTTP error deleting image: {e}")

            if response.status_code != 200:
                logfire.error(
                    "Cloudinary delete failed",
                    status_code=response.status_code,
                    error=response.text,
                )
                raise MediaStorageError("Failed to delete image", response.status_code)

            logfire.info("Image deleted", public_id=public_id)


class MockMediaStorage(MediaStorage):
    """In-memory media storage for tests."""

    def __init__(self, cloud_name: str = "mock") -> None:
        self.cloud_name = cloud_name
        self.stored: dict[str, str] = {}
        self.deleted: list[str] = []

    async def upload(self, file_path: Path) -> str:
        public_id = f"profile-photos/{uuid4().hex}"
        url = (
            f"https://res.cloudinary.com/{self.cloud_name}/image/upload/"
            f"v1/{public_id}{file_path.suffix or '.jpg'}"
        )
        self.stored[public_id] = url
        return url

    async def delete(self, url_or_id: str) -> None:
        public_id = extract_public_id(url_or_id)
        self.stored.pop(public_id, None)
        self.deleted.append(public_id)
