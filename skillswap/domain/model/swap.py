"""Swap request entity and its lifecycle.

States::

    pending --accept--> accepted --complete--> completed
    pending --reject--> rejected
    pending --cancel--> cancelled

``rejected``, ``cancelled`` and ``completed`` are terminal. Every status
change goes through ``SwapRequest.transition_to`` which consults
``SWAP_TRANSITIONS``.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field, model_validator

from skillswap.domain.error import InvalidStateError
from skillswap.domain.model.common import DomainModel, utc_now
from skillswap.domain.value import (
    AccountId,
    FeedbackDirection,
    FeedbackSubmitted,
    SkillName,
    SwapId,
    SwapStatus,
)

SWAP_TRANSITIONS: dict[SwapStatus, frozenset[SwapStatus]] = {
    SwapStatus.PENDING: frozenset(
        {SwapStatus.ACCEPTED, SwapStatus.REJECTED, SwapStatus.CANCELLED}
    ),
    SwapStatus.ACCEPTED: frozenset({SwapStatus.COMPLETED}),
    SwapStatus.REJECTED: frozenset(),
    SwapStatus.CANCELLED: frozenset(),
    SwapStatus.COMPLETED: frozenset(),
}

# Statuses in which the requester may still withdraw the record entirely
DELETABLE_STATUSES = frozenset({SwapStatus.PENDING, SwapStatus.CANCELLED})

_REQUIRED_STATUS_MESSAGES = {
    SwapStatus.ACCEPTED: "Swap request is not pending",
    SwapStatus.REJECTED: "Swap request is not pending",
    SwapStatus.CANCELLED: "Swap request is not pending",
    SwapStatus.COMPLETED: "Swap must be accepted before completion",
}


def ensure_transition(current: SwapStatus, target: SwapStatus) -> None:
    """Raise InvalidStateError unless ``current -> target`` is a lifecycle edge."""
    if target not in SWAP_TRANSITIONS[current]:
        raise InvalidStateError(
            _REQUIRED_STATUS_MESSAGES.get(
                target, f"Cannot move swap from {current.value} to {target.value}"
            )
        )


class SwapRequest(DomainModel):
    """Proposed exchange of skills between two accounts."""

    id: SwapId
    from_account_id: AccountId
    to_account_id: AccountId
    skills_offered: list[SkillName] = Field(min_length=1)
    skills_requested: list[SkillName] = Field(min_length=1)
    message: str = Field(min_length=1, max_length=1000)
    status: SwapStatus = SwapStatus.PENDING
    feedback_submitted: FeedbackSubmitted = Field(default_factory=FeedbackSubmitted)
    accepted_at: Optional[datetime] = None
    completed_at: Optional[datetime] = None
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)

    @model_validator(mode="after")
    def check_parties(self) -> "SwapRequest":
        if self.from_account_id == self.to_account_id:
            raise ValueError("Cannot send swap request to yourself")
        return self

    @property
    def is_deletable(self) -> bool:
        return self.status in DELETABLE_STATUSES

    def involves(self, account_id: AccountId) -> bool:
        return account_id in (self.from_account_id, self.to_account_id)

    def direction_of(self, account_id: AccountId) -> FeedbackDirection | None:
        """Feedback direction owned by ``account_id``, None for outsiders."""
        if account_id == self.from_account_id:
            return FeedbackDirection.FROM_USER
        if account_id == self.to_account_id:
            return FeedbackDirection.TO_USER
        return None

    def counterpart_of(self, account_id: AccountId) -> AccountId:
        """The other party of the swap."""
        if account_id == self.from_account_id:
            return self.to_account_id
        return self.from_account_id

    def transition_to(self, target: SwapStatus, at: datetime | None = None) -> "SwapRequest":
        """Return a copy in ``target`` status with the matching timestamp stamped.

        Raises:
            InvalidStateError: If the lifecycle has no such edge from the current status
        """
        ensure_transition(self.status, target)
        at = at or utc_now()
        update: dict = {"status": target, "updated_at": at}
        if target is SwapStatus.ACCEPTED:
            update["accepted_at"] = at
        elif target is SwapStatus.COMPLETED:
            update["completed_at"] = at
        return self.model_copy(update=update)

    def with_feedback_from(self, direction: FeedbackDirection) -> "SwapRequest":
        return self.model_copy(
            update={"feedback_submitted": self.feedback_submitted.mark(direction)}
        )
