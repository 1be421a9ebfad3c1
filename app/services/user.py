"""
Registration and login
"""

from app.core.errors import ConflictError, ErrorResponse, ValidationError
from app.core.logger import logger
from app.core.security import hash_password_async, verify_password_async
from app.repositories.user import USER_EXISTS_MESSAGE, UserRepository
from app.schemas.user import LoginRequest, RegisterRequest, TokenResponse
from app.services.token import TokenService
from app.validators.auth import normalize_email, validate_login, validate_registration

INVALID_CREDENTIALS = "Invalid credentials"


class UserService:
    """Credential operations; both return a freshly issued token"""

    def __init__(self, repository: UserRepository, tokens: TokenService):
        self.repository = repository
        self.tokens = tokens

    async def register(self, data: RegisterRequest) -> TokenResponse:
        errors = validate_registration(data.name, data.email, data.password)
        if errors:
            raise ValidationError(errors)

        email = normalize_email(data.email)
        if await self.repository.find_by_email(email):
            raise ConflictError(USER_EXISTS_MESSAGE)

        password_hash = await hash_password_async(data.password)
        user = await self.repository.create(data.name.strip(), email, password_hash)

        logger.info("User registered", user_id=user.id, metadata={"event": "register"})

        return TokenResponse(msg="Registration successful", token=self.tokens.issue(user.id))

    async def login(self, data: LoginRequest) -> TokenResponse:
        errors = validate_login(data.email, data.password)
        if errors:
            raise ValidationError(errors)

        user = await self.repository.find_by_email(normalize_email(data.email))
        # Same answer for unknown email and wrong password
        if not user or not await verify_password_async(data.password, user.password):
            logger.warning("Login rejected", metadata={"event": "login_failed"})
            raise ErrorResponse(INVALID_CREDENTIALS, status_code=400)

        logger.info("User logged in", user_id=user.id, metadata={"event": "login"})

        return TokenResponse(msg="Login successful", token=self.tokens.issue(user.id))
