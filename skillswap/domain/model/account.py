"""Account aggregate root.

An account carries a profile, moderation flags and the feedback it has
received. ``rating_sum`` and ``rating_count`` always describe the embedded
feedback list, so feedback is only ever changed through the methods below.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field, field_validator, model_validator

from skillswap.domain.model.common import DomainModel, utc_now
from skillswap.domain.model.feedback import Feedback
from skillswap.domain.value import (
    AccountId,
    Availability,
    EmailAddress,
    FeedbackId,
    SkillName,
)


class Account(DomainModel):
    """Account aggregate root."""

    id: AccountId
    name: str = Field(min_length=1, max_length=50)
    email: EmailAddress
    location: Optional[str] = Field(default=None, max_length=100)
    profile_photo: Optional[str] = None
    skills_offered: list[SkillName] = Field(default_factory=list)
    skills_wanted: list[SkillName] = Field(default_factory=list)
    availability: Availability = Availability.AVAILABLE
    is_public: bool = True
    is_banned: bool = False
    ban_reason: Optional[str] = Field(default=None, max_length=500)
    is_verified: bool = False
    rating_sum: int = Field(default=0, ge=0)
    rating_count: int = Field(default=0, ge=0)
    feedback: list[Feedback] = Field(default_factory=list)
    last_active: datetime = Field(default_factory=utc_now)
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)

    @field_validator("skills_offered", "skills_wanted")
    @classmethod
    def dedupe_skills(cls, v: list[str]) -> list[str]:
        """Skills behave as a set; keep the first spelling of each."""
        seen: set[str] = set()
        unique = []
        for skill in v:
            if skill.lower() not in seen:
                seen.add(skill.lower())
                unique.append(skill)
        return unique

    @model_validator(mode="after")
    def check_rating_aggregate(self) -> "Account":
        if self.rating_count != len(self.feedback):
            raise ValueError("rating_count must equal the number of feedback entries")
        if self.rating_sum != sum(entry.stars for entry in self.feedback):
            raise ValueError("rating_sum must equal the sum of feedback stars")
        return self

    @property
    def average_rating(self) -> float:
        """Mean stars received, one decimal, 0 with no feedback."""
        if self.rating_count == 0:
            return 0.0
        return round(self.rating_sum / self.rating_count, 1)

    def find_feedback(self, feedback_id: FeedbackId) -> Feedback | None:
        return next((entry for entry in self.feedback if entry.id == feedback_id), None)

    def feedback_from(self, account_id: AccountId) -> list[Feedback]:
        """Entries this account received from ``account_id``."""
        return [entry for entry in self.feedback if entry.from_account_id == account_id]

    def recent_feedback(self, limit: int = 5) -> list[Feedback]:
        return sorted(self.feedback, key=lambda entry: entry.created_at, reverse=True)[
            :limit
        ]

    def add_feedback(self, entry: Feedback) -> "Account":
        """Return a copy with ``entry`` appended and the aggregate updated."""
        return self._with_feedback([*self.feedback, entry])

    def revise_feedback(
        self,
        feedback_id: FeedbackId,
        stars: int | None = None,
        comment: str | None = None,
    ) -> "Account":
        """Return a copy with one entry's stars and/or comment replaced.

        Raises:
            KeyError: If the entry does not belong to this account
        """
        entry = self.find_feedback(feedback_id)
        if entry is None:
            raise KeyError(feedback_id)

        revised = Feedback.model_validate(
            {
                **entry.model_dump(),
                "stars": entry.stars if stars is None else stars,
                "comment": entry.comment if comment is None else comment,
            }
        )
        return self._with_feedback(
            [revised if item.id == feedback_id else item for item in self.feedback]
        )

    def remove_feedback(self, feedback_id: FeedbackId) -> "Account":
        """Return a copy without the given entry.

        Raises:
            KeyError: If the entry does not belong to this account
        """
        if self.find_feedback(feedback_id) is None:
            raise KeyError(feedback_id)
        return self._with_feedback(
            [item for item in self.feedback if item.id != feedback_id]
        )

    def remove_feedback_from(self, account_id: AccountId) -> "Account":
        """Return a copy without any entry written by ``account_id``."""
        return self._with_feedback(
            [item for item in self.feedback if item.from_account_id != account_id]
        )

    def _with_feedback(self, entries: list[Feedback]) -> "Account":
        # Single write path for the feedback list and its aggregate
        return self.model_copy(
            update={
                "feedback": entries,
                "rating_sum": sum(entry.stars for entry in entries),
                "rating_count": len(entries),
                "updated_at": utc_now(),
            }
        )
