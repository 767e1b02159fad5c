"""Credential service: register, login, forgot password, reset password.

Orchestrates the credential and session lifecycle. Each operation returns a
Result; nothing raises past this layer.

Flow (login):
1. Validate presence of email and password
2. Look up the account by normalized email
3. Unknown email: burn one bcrypt verification, fail INVALID_CREDENTIALS
4. Verify password; mismatch fails with the same INVALID_CREDENTIALS
5. Issue session token, return LoginResult

Failure mapping shared by all operations:
- StorageError -> STORAGE_FAILED
- CorruptHashError -> HASH_CORRUPT
- any other exception -> UNEXPECTED_ERROR

Architecture:
- Depends only on domain protocols (injected), never on SQLAlchemy or bcrypt
- Raw passwords and full tokens are never logged
"""

from src.application.commands.auth_commands import (
    LoginAccount,
    RegisterAccount,
    RequestPasswordReset,
    ResetPassword,
)
from src.application.dtos.auth_dtos import LoginResult, PasswordResetRequested
from src.application.services.service_guard import (
    duplicate_email,
    guard_operation,
    invalid_email,
    missing_fields,
)
from src.core.constants import TOKEN_LOG_PREFIX_LENGTH
from src.core.enums import ErrorCode
from src.core.errors import AuthenticationError, DomainError, NotFoundError
from src.core.result import Failure, Result, Success
from src.domain.entities.account import Account
from src.domain.errors import EmailAlreadyStoredError
from src.domain.protocols import (
    AccountRepository,
    EmailServiceProtocol,
    LoggerProtocol,
    PasswordHashingProtocol,
    ResetTokenProtocol,
    SessionTokenProtocol,
)
from src.domain.value_objects.email import Email, normalize_email

INVALID_CREDENTIALS_MESSAGE = "Invalid email or password"


class CredentialService:
    """Registration, login and password reset orchestration.

    Dependencies (injected via constructor):
        - AccountRepository: Credential store
        - PasswordHashingProtocol: bcrypt hasher
        - SessionTokenProtocol: JWT issuer/verifier
        - ResetTokenProtocol: Reset token issuance/consumption
        - EmailServiceProtocol: Out-of-band delivery of reset tokens
        - LoggerProtocol: Structured logging

    Example:
        >>> service = CredentialService(account_repo, password_service, ...)
        >>> result = await service.register(
        ...     RegisterAccount(name="Ann", email="ann@x.com", password="secret1")
        ... )
    """

    def __init__(
        self,
        account_repo: AccountRepository,
        password_service: PasswordHashingProtocol,
        token_service: SessionTokenProtocol,
        reset_token_service: ResetTokenProtocol,
        email_service: EmailServiceProtocol,
        logger: LoggerProtocol,
        *,
        reveal_unknown_reset_email: bool = False,
        expose_reset_token: bool = False,
    ) -> None:
        """Initialize credential service with dependencies.

        Args:
            account_repo: Credential store.
            password_service: Password hasher.
            token_service: Session token issuer/verifier.
            reset_token_service: Reset token manager.
            email_service: Reset token delivery.
            logger: Structured logger.
            reveal_unknown_reset_email: Answer ACCOUNT_NOT_FOUND on
                forgot-password for unknown emails (discloses existence).
            expose_reset_token: Return the raw reset token to the caller
                (development only).
        """
        self._account_repo = account_repo
        self._password_service = password_service
        self._token_service = token_service
        self._reset_token_service = reset_token_service
        self._email_service = email_service
        self._logger = logger
        self._reveal_unknown_reset_email = reveal_unknown_reset_email
        self._expose_reset_token = expose_reset_token

    # ------------------------------------------------------------------
    # Register
    # ------------------------------------------------------------------

    async def register(self, cmd: RegisterAccount) -> Result[Account, DomainError]:
        """Create an account.

        Returns:
            Success(Account) on creation. Failure codes: MISSING_FIELDS,
            INVALID_EMAIL, EMAIL_ALREADY_EXISTS, STORAGE_FAILED,
            UNEXPECTED_ERROR.
        """
        return await guard_operation("register", self._register(cmd), self._logger)

    async def _register(self, cmd: RegisterAccount) -> Result[Account, DomainError]:
        missing = missing_fields(name=cmd.name, email=cmd.email, password=cmd.password)
        if missing is not None:
            return Failure(error=missing)

        try:
            email = Email(cmd.email).value
        except ValueError:
            return Failure(error=invalid_email())

        if await self._account_repo.exists_by_email(email):
            self._logger.info("registration_rejected", reason="email_exists")
            return Failure(error=duplicate_email())

        password_hash = self._password_service.hash_password(cmd.password)

        try:
            account = await self._account_repo.create(
                name=cmd.name.strip(),
                email=email,
                password_hash=password_hash,
            )
        except EmailAlreadyStoredError:
            # Lost a race with a concurrent registration; the unique index caught it
            self._logger.info("registration_rejected", reason="email_exists_constraint")
            return Failure(error=duplicate_email())

        self._logger.info("account_registered", account_id=str(account.id))
        return Success(value=account)

    # ------------------------------------------------------------------
    # Login
    # ------------------------------------------------------------------

    async def login(self, cmd: LoginAccount) -> Result[LoginResult, DomainError]:
        """Authenticate credentials and issue a session token.

        Unknown email and wrong password fail identically (message, code and
        roughly the same latency), so responses do not reveal which emails
        are registered.

        Returns:
            Success(LoginResult). Failure codes: MISSING_FIELDS,
            INVALID_CREDENTIALS, HASH_CORRUPT, STORAGE_FAILED,
            UNEXPECTED_ERROR.
        """
        return await guard_operation("login", self._login(cmd), self._logger)

    async def _login(self, cmd: LoginAccount) -> Result[LoginResult, DomainError]:
        missing = missing_fields(email=cmd.email, password=cmd.password)
        if missing is not None:
            return Failure(error=missing)

        account = await self._account_repo.find_by_email(normalize_email(cmd.email))
        if account is None:
            self._password_service.dummy_verify(cmd.password)
            self._logger.info("login_failed", reason="unknown_email")
            return Failure(error=self._invalid_credentials())

        if not self._password_service.verify_password(cmd.password, account.password_hash):
            self._logger.info(
                "login_failed", reason="wrong_password", account_id=str(account.id)
            )
            return Failure(error=self._invalid_credentials())

        issued = self._token_service.issue_session_token(account.id, account.email)
        self._logger.info("login_succeeded", account_id=str(account.id))
        return Success(
            value=LoginResult(
                account=account,
                token=issued.token,
                expires_at=issued.expires_at,
            )
        )

    # ------------------------------------------------------------------
    # Forgot password
    # ------------------------------------------------------------------

    async def forgot_password(
        self, cmd: RequestPasswordReset
    ) -> Result[PasswordResetRequested, DomainError]:
        """Issue a reset token for a registered email.

        The token always goes to the email notifier. It is included in the
        result only when exposure is enabled. Unknown emails succeed with no
        token unless reveal_unknown_reset_email is set.

        Returns:
            Success(PasswordResetRequested). Failure codes: MISSING_FIELDS,
            ACCOUNT_NOT_FOUND (reveal mode only), STORAGE_FAILED,
            UNEXPECTED_ERROR.
        """
        return await guard_operation(
            "forgot_password", self._forgot_password(cmd), self._logger
        )

    async def _forgot_password(
        self, cmd: RequestPasswordReset
    ) -> Result[PasswordResetRequested, DomainError]:
        missing = missing_fields(email=cmd.email)
        if missing is not None:
            return Failure(error=missing)

        email = normalize_email(cmd.email)
        account = await self._account_repo.find_by_email(email)
        if account is None:
            self._logger.info("password_reset_unknown_email")
            if self._reveal_unknown_reset_email:
                return Failure(
                    error=NotFoundError(
                        code=ErrorCode.ACCOUNT_NOT_FOUND,
                        message="No account found with this email",
                        resource_type="Account",
                        resource_id=email,
                    )
                )
            return Success(value=PasswordResetRequested())

        token = await self._reset_token_service.issue(account.id)
        await self._email_service.send_password_reset_email(account.email, token)
        self._logger.info(
            "password_reset_issued",
            account_id=str(account.id),
            token_prefix=token[:TOKEN_LOG_PREFIX_LENGTH],
        )

        return Success(
            value=PasswordResetRequested(
                reset_token=token if self._expose_reset_token else None
            )
        )

    # ------------------------------------------------------------------
    # Reset password
    # ------------------------------------------------------------------

    async def reset_password(self, cmd: ResetPassword) -> Result[Account, DomainError]:
        """Set a new password using a live reset token.

        The token is retired in the same statement that stores the new hash,
        so it cannot be replayed.

        Returns:
            Success(Account). Failure codes: MISSING_FIELDS,
            RESET_TOKEN_INVALID, STORAGE_FAILED, UNEXPECTED_ERROR.
        """
        return await guard_operation(
            "reset_password", self._reset_password(cmd), self._logger
        )

    async def _reset_password(self, cmd: ResetPassword) -> Result[Account, DomainError]:
        missing = missing_fields(token=cmd.token, new_password=cmd.new_password)
        if missing is not None:
            return Failure(error=missing)

        new_hash = self._password_service.hash_password(cmd.new_password)
        result = await self._reset_token_service.consume(cmd.token, new_hash)

        match result:
            case Failure(error=error):
                self._logger.info("password_reset_rejected", reason=error.code.value)
                return Failure(error=error)
            case Success(value=account):
                await self._email_service.send_password_changed_notification(
                    account.email
                )
                self._logger.info("password_reset_completed", account_id=str(account.id))
                return Success(value=account)

    @staticmethod
    def _invalid_credentials() -> AuthenticationError:
        return AuthenticationError(
            code=ErrorCode.INVALID_CREDENTIALS,
            message=INVALID_CREDENTIALS_MESSAGE,
        )

