"""Pydantic models for Browser7 API responses."""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field

from ..constants import CONSTANTS


class APIModel(BaseModel):
    """Base for response models: camelCase aliases, unknown keys kept."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="allow")


class RenderJob(APIModel):
    """Handle returned when a render job is created."""

    render_id: str = Field(alias="renderId")


class SelectedCity(APIModel):
    """City the service rendered from."""

    name: Optional[str] = None
    display_name: Optional[str] = Field(default=None, alias="displayName")
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    timezone_id: Optional[str] = Field(default=None, alias="timezoneId")


class BandwidthMetrics(APIModel):
    """Network usage of a render."""

    network_bytes: Optional[int | float] = Field(default=None, alias="networkBytes")
    cached_bytes: Optional[int | float] = Field(default=None, alias="cachedBytes")
    cache_hit_rate: Optional[str | float] = Field(default=None, alias="cacheHitRate")


class CaptchaInfo(APIModel):
    """CAPTCHA detection and handling outcome."""

    detected: Optional[bool] = None
    handled: Optional[bool] = None
    sitekey: Optional[str] = None


class RenderResult(APIModel):
    """State of a render job as reported by one status check.

    ``html`` and ``fetch_responses`` hold decoded values whenever the
    service sent them compressed. If decoding did not apply they keep the
    value the service sent.
    """

    status: str
    html: Optional[str] = None
    fetch_responses: Optional[Any] = Field(default=None, alias="fetchResponses")
    screenshot: Optional[str] = None
    load_strategy: Optional[str] = Field(default=None, alias="loadStrategy")
    selected_city: Optional[SelectedCity] = Field(default=None, alias="selectedCity")
    bandwidth_metrics: Optional[BandwidthMetrics] = Field(default=None, alias="bandwidthMetrics")
    captcha: Optional[CaptchaInfo] = None
    timing_breakdown: Optional[Any] = Field(default=None, alias="timingBreakdown")
    retry_after: Optional[float] = Field(default=None, alias="retryAfter")
    error: Optional[str] = None

    @property
    def is_completed(self) -> bool:
        return self.status == CONSTANTS.STATUS_COMPLETED

    @property
    def is_failed(self) -> bool:
        return self.status == CONSTANTS.STATUS_FAILED

    @property
    def is_terminal(self) -> bool:
        return self.is_completed or self.is_failed


class BalanceBreakdown(APIModel):
    """One balance bucket."""

    cents: int = Field(ge=0)
    formatted: str


class AccountBreakdown(APIModel):
    """Balance split by source."""

    paid: BalanceBreakdown
    free: BalanceBreakdown
    bonus: BalanceBreakdown


class AccountBalance(APIModel):
    """Account balance; one cent pays for one render."""

    total_balance_cents: int = Field(alias="totalBalanceCents")
    total_balance_formatted: str = Field(alias="totalBalanceFormatted")
    breakdown: AccountBreakdown
