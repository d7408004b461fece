"""Account credential entity.

Password hashes live beside the account rather than on it, so profile
reads and writes never carry secrets.
"""

from datetime import datetime

from pydantic import Field

from skillswap.domain.model.common import DomainModel, utc_now
from skillswap.domain.value import AccountId


class AccountCredential(DomainModel):
    """Password credential for one account."""

    account_id: AccountId
    password_hash: str
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)
