from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class WindowSize(Enum):
    """Named window states accepted by Browser.set_size."""
    FULLSCREEN = "fullscreen"
    MAXIMIZED = "maximized"
    MINIMIZED = "minimized"


class Rect(BaseModel):
    """Position and size as reported by the browser (may be fractional)."""
    x: Optional[float] = None
    y: Optional[float] = None
    width: Optional[float] = None
    height: Optional[float] = None


class WindowRect(BaseModel):
    """Partial window rectangle for Browser.set_size; unknown keys are rejected."""
    model_config = ConfigDict(extra="forbid")

    x: Optional[int] = None
    y: Optional[int] = None
    width: Optional[int] = None
    height: Optional[int] = None

    def to_window_rect_kwargs(self) -> dict:
        """Only the fields that were actually given, ready for set_window_rect."""
        return self.model_dump(exclude_none=True)


class WaitSettings(BaseModel):
    default_timeout_ms: int = Field(10_000, ge=0, description="Timeout used by wait_until_* when none is passed; 0 waits without limit.")
    poll_interval_ms: int = Field(500, gt=0, description="Delay between two evaluations of a wait condition.")
