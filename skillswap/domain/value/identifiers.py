"""Strongly typed identifiers for SkillSwap domain entities.

Using NewType keeps account, swap and notification ids from being mixed up
while staying plain UUIDs at runtime.
"""

from typing import NewType
from uuid import UUID

AccountId = NewType("AccountId", UUID)
FeedbackId = NewType("FeedbackId", UUID)
SwapId = NewType("SwapId", UUID)
NotificationId = NewType("NotificationId", UUID)
AdminId = NewType("AdminId", UUID)
