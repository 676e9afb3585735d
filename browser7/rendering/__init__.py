"""Render job construction, polling and result decoding.

Key Components:
    - RenderOptions / build_render_payload: job creation payload
    - wait_for_* builders: wait action descriptors
    - decode_render_fields: best-effort decoding of compressed fields
    - RenderLifecycle: create, poll and resolve a render job
    - ProgressEvent: lifecycle notifications
"""

from .decoder import decode_compressed_json, decode_compressed_text, decode_render_fields
from .events import ProgressCallback, ProgressEvent, ProgressEventType
from .lifecycle import RenderLifecycle, RenderTransport
from .models import (
    AccountBalance,
    AccountBreakdown,
    BalanceBreakdown,
    BandwidthMetrics,
    CaptchaInfo,
    RenderJob,
    RenderResult,
    SelectedCity,
)
from .options import CaptchaMode, RenderOptions, ScreenshotFormat, build_render_payload
from .wait_actions import wait_for_click, wait_for_delay, wait_for_selector, wait_for_text

__all__ = [
    # Options
    "CaptchaMode",
    "RenderOptions",
    "ScreenshotFormat",
    "build_render_payload",
    # Wait actions
    "wait_for_click",
    "wait_for_delay",
    "wait_for_selector",
    "wait_for_text",
    # Decoding
    "decode_compressed_json",
    "decode_compressed_text",
    "decode_render_fields",
    # Lifecycle
    "ProgressCallback",
    "ProgressEvent",
    "ProgressEventType",
    "RenderLifecycle",
    "RenderTransport",
    # Models
    "AccountBalance",
    "AccountBreakdown",
    "BalanceBreakdown",
    "BandwidthMetrics",
    "CaptchaInfo",
    "RenderJob",
    "RenderResult",
    "SelectedCity",
]
