"""Feedback entry.

Feedback is owned by the rated account and only changes through the
account aggregate.
"""

from datetime import datetime, timedelta
from typing import Optional

from pydantic import Field

from skillswap.domain.model.common import DomainModel, utc_now
from skillswap.domain.value import AccountId, FeedbackId, SwapId


class Feedback(DomainModel):
    """Star rating and comment left by one swap party about the other."""

    id: FeedbackId
    from_account_id: AccountId
    from_name: str  # Denormalized rater name for display
    swap_id: Optional[SwapId] = None
    stars: int = Field(ge=1, le=5)
    comment: str = Field(min_length=1, max_length=500)
    created_at: datetime = Field(default_factory=utc_now)

    def is_editable(self, now: datetime, window: timedelta) -> bool:
        """Whether the rater may still change or withdraw this entry."""
        return now - self.created_at <= window
