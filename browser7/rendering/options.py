"""Render options and their mapping onto the job creation payload."""

from enum import Enum
from typing import Any, Optional, Union

import structlog
from pydantic import BaseModel, ConfigDict, Field

logger = structlog.get_logger(__name__)


class CaptchaMode(Enum):
    """CAPTCHA handling modes understood by the service."""

    DISABLED = "disabled"
    AUTO = "auto"
    RECAPTCHA_V2 = "recaptcha_v2"
    RECAPTCHA_V3 = "recaptcha_v3"
    TURNSTILE = "turnstile"


class ScreenshotFormat(Enum):
    """Screenshot encodings."""

    JPEG = "jpeg"
    PNG = "png"


class RenderOptions(BaseModel):
    """Optional directives for a render job.

    Only the fields a caller sets are sent; the service applies its own
    defaults to everything else. Range and enum checks are left to the
    service.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="forbid")

    country_code: Optional[str] = Field(
        default=None, alias="countryCode", description="ISO alpha-2 country, e.g. 'US'"
    )
    city: Optional[str] = Field(default=None, description="City slug, e.g. 'new.york'")
    fetch_urls: Optional[list[str]] = Field(
        default=None, alias="fetchUrls", description="Extra URLs fetched after rendering"
    )
    wait_for: Optional[list[dict[str, Any]]] = Field(
        default=None, alias="waitFor", description="Wait actions run in order"
    )
    captcha: Optional[Union[CaptchaMode, str]] = Field(
        default=None, description="CAPTCHA mode, service default 'disabled'"
    )
    block_images: Optional[bool] = Field(
        default=None, alias="blockImages", description="Service default True"
    )
    include_screenshot: Optional[bool] = Field(default=None, alias="includeScreenshot")
    screenshot_format: Optional[Union[ScreenshotFormat, str]] = Field(
        default=None, alias="screenshotFormat"
    )
    screenshot_quality: Optional[int] = Field(
        default=None, alias="screenshotQuality", description="JPEG quality 1-100"
    )
    screenshot_full_page: Optional[bool] = Field(default=None, alias="screenshotFullPage")


def coerce_options(options: RenderOptions | dict[str, Any] | None) -> RenderOptions:
    """Accept a ``RenderOptions`` instance, a mapping, or ``None``."""
    if options is None:
        return RenderOptions()
    if isinstance(options, RenderOptions):
        return options
    return RenderOptions.model_validate(options)


def build_render_payload(
    url: str, options: RenderOptions | dict[str, Any] | None = None
) -> dict[str, Any]:
    """Build the ``POST /renders`` body.

    The result holds ``url`` plus exactly the option keys the caller set,
    under their wire names.
    """
    render_options = coerce_options(options)
    payload: dict[str, Any] = {"url": url}
    payload.update(render_options.model_dump(mode="json", by_alias=True, exclude_unset=True))

    logger.debug("Built render payload", url=url, keys=sorted(payload))
    return payload
