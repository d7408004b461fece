"""Account authentication domain service."""

import logfire

from skillswap.domain.error import AuthenticationError, NotAuthorizedError
from skillswap.domain.model import Account, AccountCredential
from skillswap.domain.repository import AccountCredentialRepository
from skillswap.domain.value import EmailAddress

from .account_service import AccountService
from .base import Service
from .mail_service import MailService
from .password import PasswordHasher


class AuthService(Service):
    """Registers accounts and checks account passwords."""

    def __init__(
        self,
        account_service: AccountService,
        credential_repository: AccountCredentialRepository,
        password_hasher: PasswordHasher,
        mail_service: MailService,
    ) -> None:
        """Initialize auth service.

        Args:
            account_service: Account service
            credential_repository: Credential repository
            password_hasher: Password hasher
            mail_service: Transactional email (welcome message)
        """
        self.account_service = account_service
        self.credential_repository = credential_repository
        self.password_hasher = password_hasher
        self.mail_service = mail_service

    async def register(self, name: str, email: EmailAddress, password: str) -> Account:
        """Create an account with a password credential.

        Raises:
            ConflictError: If the email is already registered
        """
        with logfire.span("auth_service.register", email=email.root):
            account = await self.account_service.create_account(name, email)
            await self.credential_repository.save(
                AccountCredential(
                    account_id=account.id,
                    password_hash=self.password_hasher.hash(password),
                )
            )
            self.mail_service.send_welcome(account)
            logfire.info("Account registered", account_id=str(account.id))
            return account

    async def authenticate(self, email: EmailAddress, password: str) -> Account:
        """Check an account's password and stamp its last activity.

        Raises:
            AuthenticationError: If the email or password is wrong
            NotAuthorizedError: If the account is banned
        """
        with logfire.span("auth_service.authenticate", email=email.root):
            account = await self.account_service.find_by_email(email)
            credential = (
                await self.credential_repository.find_by_account_id(account.id)
                if account
                else None
            )
            if (
                account is None
                or credential is None
                or not self.password_hasher.verify(password, credential.password_hash)
            ):
                logfire.warn("Account login failed", email=email.root)
                raise AuthenticationError()

            if account.is_banned:
                reason = f": {account.ban_reason}" if account.ban_reason else ""
                raise NotAuthorizedError(
                    "account",
                    str(account.id),
                    str(account.id),
                    message=f"Your account has been banned{reason}",
                )

            logfire.info("Account logged in", account_id=str(account.id))
            return await self.account_service.touch(account)
