"""Builders for domain objects used across tests."""

from uuid import uuid4

from skillswap.domain.model import Account, Feedback, SwapRequest
from skillswap.domain.value import AccountId, EmailAddress, FeedbackId, SwapId


def make_account(name: str = "Ada Lovelace", email: str | None = None, **fields) -> Account:
    """Build an account, with a unique email unless one is given."""
    account_id = fields.pop("id", None) or AccountId(uuid4())
    return Account(
        id=account_id,
        name=name,
        email=EmailAddress(email or f"user-{account_id.hex[:12]}@example.com"),
        **fields,
    )


def make_feedback(stars: int = 5, from_account_id=None, **fields) -> Feedback:
    return Feedback(
        id=FeedbackId(uuid4()),
        from_account_id=from_account_id or AccountId(uuid4()),
        from_name=fields.pop("from_name", "Grace"),
        stars=stars,
        comment=fields.pop("comment", "Great session"),
        **fields,
    )


def make_swap(**fields) -> SwapRequest:
    return SwapRequest(
        id=SwapId(uuid4()),
        from_account_id=fields.pop("from_account_id", AccountId(uuid4())),
        to_account_id=fields.pop("to_account_id", AccountId(uuid4())),
        skills_offered=fields.pop("skills_offered", ["Guitar"]),
        skills_requested=fields.pop("skills_requested", ["Spanish"]),
        message=fields.pop("message", "Guitar for Spanish?"),
        **fields,
    )
