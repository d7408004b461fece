"""Transactional email domain service.

Emails are composed here, held until the request's transaction commits
and then handed to an ``EmailSender`` in a background task. Delivery
failures are logged and never reach the operation that triggered the email.
"""

import asyncio
from abc import ABC, abstractmethod
from functools import partial
from html import escape

import logfire

from skillswap.domain.model import Account, Feedback, SwapRequest
from skillswap.domain.value.common import ValueObject

from .after_commit import AfterCommit
from .base import Service


class EmailMessage(ValueObject):
    """Outbound email."""

    to: str
    subject: str
    text: str
    html: str


class EmailSender(ABC):
    """Delivers composed emails."""

    @abstractmethod
    async def send(self, message: EmailMessage) -> None:
        """Send one email.

        Raises:
            EmailDeliveryError: If the provider rejects or cannot be reached
        """
        pass


def _wrap_html(title: str, body: str) -> str:
    return (
        '<div style="font-family: Arial, sans-serif; max-width: 600px; margin: 0 auto;">'
        f'<h2 style="color: #333;">{escape(title)}</h2>'
        f"{body}"
        "<p>Best regards,<br>The SkillSwap Team</p>"
        "</div>"
    )


class MailDispatcher:
    """Delivers emails in background tasks that outlive the request."""

    def __init__(self, email_sender: EmailSender) -> None:
        self.email_sender = email_sender
        self._pending: set[asyncio.Task] = set()

    def dispatch(self, message: EmailMessage) -> None:
        """Schedule delivery of ``message`` and return immediately."""
        task = asyncio.get_running_loop().create_task(self._deliver(message))
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)

    async def drain(self) -> None:
        """Wait for every scheduled delivery to finish."""
        if self._pending:
            await asyncio.gather(*self._pending, return_exceptions=True)

    async def _deliver(self, message: EmailMessage) -> None:
        with logfire.span("mail_service.deliver", to=message.to, subject=message.subject):
            try:
                await self.email_sender.send(message)
                logfire.info("Email sent", to=message.to, subject=message.subject)
            except Exception as e:
                logfire.error(
                    "Email delivery failed",
                    to=message.to,
                    subject=message.subject,
                    error=str(e),
                    error_type=type(e).__name__,
                )


class MailService(Service):
    """Composes SkillSwap emails and sends them once the request commits.

    Messages queued by an operation whose transaction rolls back are
    never sent.
    """

    def __init__(
        self, dispatcher: MailDispatcher, after_commit: AfterCommit, frontend_url: str
    ) -> None:
        """Initialize mail service.

        Args:
            dispatcher: Background delivery shared across requests
            after_commit: Side effects of the current request's transaction
            frontend_url: Base URL used in email links
        """
        self.dispatcher = dispatcher
        self.after_commit = after_commit
        self.frontend_url = frontend_url

    def dispatch(self, message: EmailMessage) -> None:
        """Queue ``message`` for delivery after the transaction commits."""
        self.after_commit.add(partial(self.dispatcher.dispatch, message))

    async def drain(self) -> None:
        await self.dispatcher.drain()

    def send_welcome(self, account: Account) -> None:
        subject = "Welcome to SkillSwap!"
        text = (
            f"Hi {account.name},\n\n"
            "Welcome to SkillSwap! Complete your profile with your skills, "
            "search for other people to swap skills with and start building "
            f"your network.\n\n{self.frontend_url}\n\n"
            "Best regards,\nThe SkillSwap Team"
        )
        html = _wrap_html(
            "Welcome to SkillSwap!",
            f"<p>Hi {escape(account.name)},</p>"
            "<p>Welcome to SkillSwap! We're excited to have you join our community.</p>"
            "<ul><li>Complete your profile with your skills</li>"
            "<li>Search for other users to swap skills with</li>"
            "<li>Start building your network</li></ul>",
        )
        self.dispatch(
            EmailMessage(to=account.email.root, subject=subject, text=text, html=html)
        )

    def send_swap_request(
        self, recipient: Account, requester_name: str, swap: SwapRequest
    ) -> None:
        offered = ", ".join(swap.skills_offered)
        requested = ", ".join(swap.skills_requested)
        text = (
            f"Hi {recipient.name},\n\n"
            f"{requester_name} wants to swap skills with you!\n\n"
            f"Skills offered: {offered}\n"
            f"Skills requested: {requested}\n"
            f"Message: {swap.message}\n\n"
            "Log in to your account to accept or reject this request.\n\n"
            "Best regards,\nThe SkillSwap Team"
        )
        html = _wrap_html(
            "New Swap Request",
            f"<p>Hi {escape(recipient.name)},</p>"
            f"<p><strong>{escape(requester_name)}</strong> wants to swap skills with you!</p>"
            f"<p><strong>Skills offered:</strong> {escape(offered)}</p>"
            f"<p><strong>Skills requested:</strong> {escape(requested)}</p>"
            f"<p><strong>Message:</strong> {escape(swap.message)}</p>"
            "<p>Log in to your account to accept or reject this request.</p>",
        )
        self.dispatch(
            EmailMessage(
                to=recipient.email.root,
                subject="New Swap Request",
                text=text,
                html=html,
            )
        )

    def send_feedback_received(
        self, recipient: Account, rater_name: str, entry: Feedback
    ) -> None:
        text = (
            f"Hi {recipient.name},\n\n"
            f"{rater_name} left you feedback after your skill swap!\n\n"
            f"Rating: {entry.stars} stars\n"
            f"Comment: {entry.comment}\n\n"
            "Log in to your account to view all your feedback.\n\n"
            "Best regards,\nThe SkillSwap Team"
        )
        html = _wrap_html(
            "New Feedback Received",
            f"<p>Hi {escape(recipient.name)},</p>"
            f"<p><strong>{escape(rater_name)}</strong> left you feedback after your skill swap!</p>"
            f"<p><strong>Rating:</strong> {entry.stars} stars</p>"
            f"<p><strong>Comment:</strong> {escape(entry.comment)}</p>",
        )
        self.dispatch(
            EmailMessage(
                to=recipient.email.root,
                subject="New Feedback Received",
                text=text,
                html=html,
            )
        )
