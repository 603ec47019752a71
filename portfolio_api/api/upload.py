"""Image uploads relayed to the media host."""

from typing import Annotated, Any

from fastapi import APIRouter, Depends, File, UploadFile

from portfolio_api.api.deps import CurrentUserDep, get_media_host, get_settings_dep
from portfolio_api.core.config import Settings
from portfolio_api.core.errors import BadRequest, PayloadTooLarge
from portfolio_api.core.responses import success_response
from portfolio_api.services.media import ImageFile, MediaHost

router = APIRouter()


async def _read_image(upload: UploadFile, max_bytes: int) -> ImageFile:
    content_type = (upload.content_type or "").lower()
    if not content_type.startswith("image/"):
        raise BadRequest("Only image files are allowed")
    # Read one byte past the limit so oversized files are detected without buffering them whole.
    content = await upload.read(max_bytes + 1)
    if len(content) > max_bytes:
        raise PayloadTooLarge(max_bytes)
    if not content:
        raise BadRequest("Uploaded file is empty")
    return ImageFile(content=content, content_type=content_type, filename=upload.filename or "upload")


@router.post("")
async def upload_image(
    _user: CurrentUserDep,
    media: Annotated[MediaHost, Depends(get_media_host)],
    settings: Annotated[Settings, Depends(get_settings_dep)],
    image: Annotated[UploadFile | None, File(description="Image file")] = None,
) -> dict[str, Any]:
    """
    Upload one image (multipart field `image`).

    Without Cloudinary credentials the image comes back as a data URL with
    fallback=true; nothing is stored in that case.
    """
    if image is None:
        raise BadRequest("Please upload an image file")
    result = await media.upload_one(await _read_image(image, settings.UPLOAD_MAX_FILE_BYTES))
    if getattr(result, "fallback", False):
        return success_response(
            "Image processed (base64 fallback - Cloudinary not configured)", result
        )
    return success_response("Image uploaded successfully", result)


@router.post("/multiple")
async def upload_images(
    _user: CurrentUserDep,
    media: Annotated[MediaHost, Depends(get_media_host)],
    settings: Annotated[Settings, Depends(get_settings_dep)],
    images: Annotated[list[UploadFile] | None, File(description="Image files")] = None,
) -> dict[str, Any]:
    """Upload up to UPLOAD_MAX_FILES images (multipart field `images`). Requires Cloudinary."""
    if not images:
        raise BadRequest("Please upload at least one image file")
    if len(images) > settings.UPLOAD_MAX_FILES:
        raise BadRequest(f"At most {settings.UPLOAD_MAX_FILES} files are allowed per request")
    files = [await _read_image(f, settings.UPLOAD_MAX_FILE_BYTES) for f in images]
    results = await media.upload_many(files)
    return success_response("Images uploaded successfully", results)
