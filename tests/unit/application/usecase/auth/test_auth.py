"""Unit tests for the auth use cases."""

import re

import pytest

from updoot.adapter.mail import MockMailClient
from updoot.application.usecase.auth import (
    ChangePasswordRequest,
    ChangePasswordUseCase,
    ForgotPasswordRequest,
    ForgotPasswordUseCase,
    GetCurrentUserRequest,
    GetCurrentUserUseCase,
    LoginRequest,
    LoginUseCase,
    RegisterRequest,
    RegisterUseCase,
)
from updoot.domain.repository import PasswordResetTokenStore
from updoot.domain.service import JWTService
from updoot.domain.value import UserId
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked, no docker needed
unit_env = create_env_fixture()

RESET_LINK = re.compile(r"http://localhost:3000/change-password/([\w-]+)")


async def _register(
    unit_env,
    username="alice",
    email="alice@example.com",
    password="hunter2hunter2",
):
    use_case = await unit_env.get(RegisterUseCase)
    return await use_case.execute(
        RegisterRequest(username=username, email=email, password=password)
    )


class TestRegister:
    """Tests for RegisterUseCase."""

    @pytest.mark.asyncio
    async def test_register_returns_user_and_session_token(self, unit_env):
        """A valid registration should create the user and a token for them."""
        # Act
        response = await _register(unit_env)

        # Assert
        assert response.errors is None
        assert response.user.username == "alice"
        assert response.user.email == "alice@example.com"
        jwt_service = await unit_env.get(JWTService)
        assert jwt_service.get_user_id_from_token(response.token) == response.user.id

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        ("username", "email", "password", "field", "message"),
        [
            ("alice", "not-an-email", "hunter2hunter2", "email", "Invalid email"),
            (
                "al",
                "alice@example.com",
                "hunter2hunter2",
                "username",
                "username must be atleast 4 characters long",
            ),
            (
                "al@ce",
                "alice@example.com",
                "hunter2hunter2",
                "username",
                "username must include only alphanumeric characters",
            ),
            (
                "alice",
                "alice@example.com",
                "short",
                "password",
                "password must be atleast 8 characters long",
            ),
        ],
    )
    async def test_invalid_form_is_reported_per_field(
        self, unit_env, username, email, password, field, message
    ):
        response = await _register(unit_env, username, email, password)

        assert response.user is None
        assert response.token is None
        assert [(e.field, e.message) for e in response.errors] == [(field, message)]

    @pytest.mark.asyncio
    async def test_duplicate_username_is_reported(self, unit_env):
        await _register(unit_env)

        response = await _register(unit_env, email="other@example.com")

        assert response.errors[0].field == "username"
        assert response.errors[0].message == "Username already taken"

    @pytest.mark.asyncio
    async def test_duplicate_email_is_reported(self, unit_env):
        await _register(unit_env)

        response = await _register(unit_env, username="alice2")

        assert response.errors[0].field == "email"


class TestLogin:
    """Tests for LoginUseCase."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize("identifier", ["alice", "alice@example.com"])
    async def test_login_by_username_or_email(self, unit_env, identifier):
        # Arrange
        registered = await _register(unit_env)
        use_case = await unit_env.get(LoginUseCase)

        # Act
        response = await use_case.execute(
            LoginRequest(username_or_email=identifier, password="hunter2hunter2")
        )

        # Assert
        assert response.errors is None
        assert response.user.id == registered.user.id
        assert response.token

    @pytest.mark.asyncio
    async def test_unknown_user(self, unit_env):
        use_case = await unit_env.get(LoginUseCase)

        response = await use_case.execute(
            LoginRequest(username_or_email="nobody", password="hunter2hunter2")
        )

        assert response.errors[0].field == "usernameOrEmail"
        assert response.errors[0].message == "Incorrect username or email"

    @pytest.mark.asyncio
    async def test_wrong_password(self, unit_env):
        await _register(unit_env)
        use_case = await unit_env.get(LoginUseCase)

        response = await use_case.execute(
            LoginRequest(username_or_email="alice", password="wrong-password")
        )

        assert response.errors[0].field == "password"
        assert response.token is None


class TestGetCurrentUser:
    """Tests for GetCurrentUserUseCase."""

    @pytest.mark.asyncio
    async def test_returns_session_user(self, unit_env):
        registered = await _register(unit_env)
        use_case = await unit_env.get(GetCurrentUserUseCase)

        user = await use_case.execute(GetCurrentUserRequest(user_id=registered.user.id))

        assert user.username == "alice"

    @pytest.mark.asyncio
    async def test_no_session_returns_none(self, unit_env):
        use_case = await unit_env.get(GetCurrentUserUseCase)

        assert await use_case.execute(GetCurrentUserRequest()) is None

    @pytest.mark.asyncio
    async def test_deleted_user_returns_none(self, unit_env):
        use_case = await unit_env.get(GetCurrentUserUseCase)

        assert await use_case.execute(GetCurrentUserRequest(user_id=12345)) is None


class TestPasswordReset:
    """Tests for ForgotPasswordUseCase and ChangePasswordUseCase."""

    async def _request_reset_token(self, unit_env) -> str:
        forgot = await unit_env.get(ForgotPasswordUseCase)
        mail = await unit_env.get(MockMailClient)
        assert await forgot.execute(ForgotPasswordRequest(email="alice@example.com"))
        match = RESET_LINK.search(mail.outbox[-1].html)
        assert match is not None
        return match.group(1)

    @pytest.mark.asyncio
    async def test_forgot_password_emails_reset_link(self, unit_env):
        """A known email should receive a link to the change-password page."""
        # Arrange
        await _register(unit_env)
        mail = await unit_env.get(MockMailClient)

        # Act
        token = await self._request_reset_token(unit_env)

        # Assert
        assert len(mail.outbox) == 1
        assert mail.outbox[0].to == "alice@example.com"
        assert mail.outbox[0].subject == "Forgot Password"
        store = await unit_env.get(PasswordResetTokenStore)
        assert await store.get(token) is not None

    @pytest.mark.asyncio
    @pytest.mark.parametrize("email", ["nobody@example.com", "not-an-email"])
    async def test_forgot_password_for_unknown_email_sends_nothing(
        self, unit_env, email
    ):
        forgot = await unit_env.get(ForgotPasswordUseCase)
        mail = await unit_env.get(MockMailClient)

        sent = await forgot.execute(ForgotPasswordRequest(email=email))

        assert sent is False
        assert mail.outbox == []

    @pytest.mark.asyncio
    async def test_change_password_logs_in_and_consumes_token(self, unit_env):
        """The new password should work, the old one not, and the token is spent."""
        # Arrange
        await _register(unit_env)
        token = await self._request_reset_token(unit_env)
        change = await unit_env.get(ChangePasswordUseCase)
        login = await unit_env.get(LoginUseCase)

        # Act
        response = await change.execute(
            ChangePasswordRequest(token=token, new_password="correct-horse")
        )

        # Assert
        assert response.errors is None
        assert response.user.username == "alice"
        assert response.token
        old = await login.execute(
            LoginRequest(username_or_email="alice", password="hunter2hunter2")
        )
        assert old.errors[0].field == "password"
        new = await login.execute(
            LoginRequest(username_or_email="alice", password="correct-horse")
        )
        assert new.errors is None

        again = await change.execute(
            ChangePasswordRequest(token=token, new_password="another-one")
        )
        assert again.errors[0].field == "token"
        assert again.errors[0].message == "Token Expired"

    @pytest.mark.asyncio
    async def test_change_password_with_expired_token(self, unit_env):
        registered = await _register(unit_env)
        store = await unit_env.get(PasswordResetTokenStore)
        await store.save("stale", UserId(registered.user.id), ttl_seconds=0)
        change = await unit_env.get(ChangePasswordUseCase)

        response = await change.execute(
            ChangePasswordRequest(token="stale", new_password="correct-horse")
        )

        assert response.errors[0].field == "token"
        assert response.errors[0].message == "Token Expired"

    @pytest.mark.asyncio
    async def test_change_password_for_missing_user(self, unit_env):
        store = await unit_env.get(PasswordResetTokenStore)
        await store.save("orphan", UserId(999), ttl_seconds=60)
        change = await unit_env.get(ChangePasswordUseCase)

        response = await change.execute(
            ChangePasswordRequest(token="orphan", new_password="correct-horse")
        )

        assert response.errors[0].message == "Token Invalid"

    @pytest.mark.asyncio
    async def test_change_password_rejects_short_password(self, unit_env):
        """A short new password should fail validation and keep the token."""
        await _register(unit_env)
        token = await self._request_reset_token(unit_env)
        change = await unit_env.get(ChangePasswordUseCase)

        response = await change.execute(
            ChangePasswordRequest(token=token, new_password="short")
        )

        assert response.errors[0].field == "newPassword"
        store = await unit_env.get(PasswordResetTokenStore)
        assert await store.get(token) is not None
