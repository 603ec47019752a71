"""Response schemas for the image upload endpoints."""

from pydantic import Field

from portfolio_api.schemas.common import CamelModel


class UploadedImage(CamelModel):
    """An image stored on the media host."""

    url: str = Field(..., description="Public HTTPS URL of the hosted image")
    public_id: str | None = Field(default=None, description="Media host identifier")
    width: int | None = None
    height: int | None = None
    format: str | None = None


class InlineImage(UploadedImage):
    """
    Returned when no media host is configured: the image itself, as a data URL.

    Nothing was stored durably; callers must persist the data URL themselves.
    """

    image_url: str
    fallback: bool = True
    message: str = "Using base64 storage. For production, configure Cloudinary for better performance."
