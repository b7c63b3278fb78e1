"""Watcher configuration."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from ...constants import DEFAULT_COALESCE_WINDOW_SECS, DEFAULT_MAX_PENDING_BATCHES


class WatcherConfig(BaseModel):
    """How raw filesystem notifications are observed, coalesced and queued."""

    model_config = ConfigDict(extra="forbid")

    coalesce_window_secs: float = Field(
        DEFAULT_COALESCE_WINDOW_SECS,
        gt=0,
        description="Seconds raw notifications are collected after the first one before a batch is emitted",
    )
    max_pending_batches: int = Field(
        DEFAULT_MAX_PENDING_BATCHES,
        ge=1,
        description="Coalesced batches allowed to wait for the client before the watcher blocks",
    )
    observer: Literal["native", "polling"] = Field("native", description="watchdog observer backend")
    polling_interval_secs: float = Field(1.0, gt=0, description="Scan interval of the polling observer")
