"""Upload relay: forward images to Cloudinary, or inline them as data URLs when it is not configured."""

from __future__ import annotations

import asyncio
import base64
import hashlib
import logging
import mimetypes
import os
import tempfile
import time
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

import httpx

from portfolio_api.core.errors import MediaHostError, MediaHostNotConfigured
from portfolio_api.schemas.upload import InlineImage, UploadedImage

if TYPE_CHECKING:
    from portfolio_api.core.config import Settings

logger = logging.getLogger(__name__)

CLOUDINARY_API_BASE = "https://api.cloudinary.com/v1_1"

# Bound to 1200x800 and let the host pick quality and format per client.
UPLOAD_TRANSFORMATION = "c_limit,h_800,w_1200/q_auto/f_auto"


@dataclass
class ImageFile:
    """An uploaded file held in memory."""

    content: bytes
    content_type: str
    filename: str = "upload"


def sign_params(params: dict[str, Any], api_secret: str) -> str:
    """Cloudinary request signature: SHA-1 of the sorted k=v pairs followed by the secret."""
    to_sign = "&".join(f"{k}={params[k]}" for k in sorted(params) if params[k] not in (None, ""))
    return hashlib.sha1(f"{to_sign}{api_secret}".encode("utf-8")).hexdigest()


def to_data_url(image: ImageFile) -> InlineImage:
    """Embed the image itself; nothing is stored durably."""
    encoded = base64.b64encode(image.content).decode("ascii")
    data_url = f"data:{image.content_type};base64,{encoded}"
    subtype = image.content_type.split("/", 1)[1] if "/" in image.content_type else None
    return InlineImage(
        url=data_url,
        image_url=data_url,
        public_id=None,
        width=None,
        height=None,
        format=subtype,
    )


def _suffix_for(image: ImageFile) -> str:
    _, ext = os.path.splitext(image.filename)
    return ext or mimetypes.guess_extension(image.content_type) or ""


def _write_temp(image: ImageFile) -> str:
    with tempfile.NamedTemporaryFile(
        prefix="portfolio-upload-", suffix=_suffix_for(image), delete=False
    ) as fh:
        fh.write(image.content)
        return fh.name


def _remove_temp(path: str) -> None:
    try:
        os.unlink(path)
    except FileNotFoundError:
        pass
    except OSError:
        logger.exception("Error deleting temp file %s", path)


class MediaHost:
    """
    Cloudinary client bound to one process-wide httpx.AsyncClient.

    The client is created at application startup and closed at shutdown.
    """

    def __init__(self, settings: Settings, client: httpx.AsyncClient | None = None) -> None:
        self.cloud_name = settings.CLOUDINARY_CLOUD_NAME
        self.api_key = settings.CLOUDINARY_API_KEY
        self._api_secret = (
            settings.CLOUDINARY_API_SECRET.get_secret_value()
            if settings.CLOUDINARY_API_SECRET is not None
            else None
        )
        self.folder = settings.CLOUDINARY_FOLDER
        self.timeout = settings.CLOUDINARY_REQUEST_TIMEOUT_SEC
        self.configured = settings.media_host_configured
        self._client = client or httpx.AsyncClient()
        if not self.configured:
            logger.warning("Cloudinary credentials not found; single uploads fall back to data URLs")

    @property
    def upload_url(self) -> str:
        return f"{CLOUDINARY_API_BASE}/{self.cloud_name}/image/upload"

    def _signed_form(self) -> dict[str, str]:
        params: dict[str, Any] = {
            "folder": self.folder,
            "timestamp": int(time.time()),
            "transformation": UPLOAD_TRANSFORMATION,
        }
        form = {k: str(v) for k, v in params.items()}
        form["api_key"] = str(self.api_key)
        form["signature"] = sign_params(params, self._api_secret or "")
        return form

    async def _post(self, path: str, image: ImageFile) -> dict[str, Any]:
        with open(path, "rb") as fh:
            try:
                resp = await self._client.post(
                    self.upload_url,
                    data=self._signed_form(),
                    files={"file": (image.filename, fh, image.content_type)},
                    timeout=self.timeout,
                )
            except httpx.RequestError as e:
                raise MediaHostError(f"Failed to upload image to Cloudinary: {e!s}") from e
        if resp.status_code >= 400:
            try:
                detail = resp.json().get("error", {}).get("message") or resp.text[:500]
            except ValueError:
                detail = resp.text[:500] if resp.text else "Unknown error"
            raise MediaHostError(
                f"Failed to upload image to Cloudinary: {resp.status_code} {detail}"
            )
        try:
            return resp.json()
        except ValueError as e:
            raise MediaHostError("Cloudinary returned an unreadable response") from e

    async def _upload_to_host(self, image: ImageFile) -> UploadedImage:
        path = await asyncio.to_thread(_write_temp, image)
        try:
            result = await self._post(path, image)
        finally:
            await asyncio.to_thread(_remove_temp, path)
        url = result.get("secure_url") or result.get("url")
        if not url:
            raise MediaHostError("Cloudinary response missing image URL")
        return UploadedImage(
            url=url,
            public_id=result.get("public_id"),
            width=result.get("width"),
            height=result.get("height"),
            format=result.get("format"),
        )

    async def upload_one(self, image: ImageFile) -> UploadedImage:
        """Host the image; without credentials, return it inline as a data URL flagged fallback=True."""
        if not self.configured:
            logger.warning("Cloudinary not configured, returning base64 data URL")
            return to_data_url(image)
        return await self._upload_to_host(image)

    async def upload_many(self, images: list[ImageFile]) -> list[UploadedImage]:
        """
        Host every image concurrently. Any failure fails the batch.

        There is no inline fallback here: the batch path requires a configured host.
        """
        if not self.configured:
            raise MediaHostNotConfigured()
        return list(await asyncio.gather(*(self._upload_to_host(i) for i in images)))

    async def aclose(self) -> None:
        await self._client.aclose()
