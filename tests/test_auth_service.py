"""
Tests for registration, login and sessions.
"""
import pytest

from mythdetector.auth import (
    AuthService,
    InMemorySessionRepository,
    InMemoryUserRepository,
    InvalidCredentialsError,
    RegistrationError,
    hash_password,
    verify_password,
)


@pytest.fixture
def service():
    return AuthService(InMemoryUserRepository(), InMemorySessionRepository())


class TestPasswordHashing:

    def test_hash_is_salted(self):
        assert hash_password("secret1") != hash_password("secret1")

    def test_verify(self):
        stored = hash_password("secret1")

        assert verify_password("secret1", stored)
        assert not verify_password("secret2", stored)
        assert not verify_password("secret1", "garbage")


class TestRegister:

    def test_register_logs_in(self, service):
        session = service.register("Ada@Example.com ", "secret1", "secret1")

        assert session.identity == "ada@example.com"
        assert session.display_name == "ada"
        assert service.resolve(session.token) == session
        assert service.users.get("ada@example.com").password_hash != "secret1"

    @pytest.mark.parametrize("email,password,confirm,message", [
        ("", "secret1", "secret1", "Please fill in all fields."),
        ("ada@example.com", "", "", "Please fill in all fields."),
        ("ada@example.com", "secret1", "secret2", "Passwords do not match."),
        ("ada@example.com", "abc", "abc", "Password must be at least 6 characters long."),
    ])
    def test_rejects_invalid_input(self, service, email, password, confirm, message):
        with pytest.raises(RegistrationError) as exc_info:
            service.register(email, password, confirm)

        assert exc_info.value.message == message
        assert exc_info.value.status_code == 400

    def test_rejects_duplicate_email(self, service):
        service.register("ada@example.com", "secret1", "secret1")

        with pytest.raises(RegistrationError) as exc_info:
            service.register("ADA@example.com", "other12", "other12")

        assert exc_info.value.message == "This email is already registered."


class TestLogin:

    def test_login_with_correct_password(self, service):
        service.register("ada@example.com", "secret1", "secret1")

        session = service.login("ada@example.com", "secret1")

        assert session.identity == "ada@example.com"

    @pytest.mark.parametrize("email,password", [
        ("ada@example.com", "wrong12"),
        ("nobody@example.com", "secret1"),
        ("", ""),
    ])
    def test_bad_credentials(self, service, email, password):
        service.register("ada@example.com", "secret1", "secret1")

        with pytest.raises(InvalidCredentialsError) as exc_info:
            service.login(email, password)

        assert exc_info.value.status_code == 401
        assert exc_info.value.message == "Invalid email or password. Please try again."

    def test_logout_ends_session(self, service):
        session = service.register("ada@example.com", "secret1", "secret1")

        assert service.logout(session.token)
        assert service.resolve(session.token) is None
        assert not service.logout(session.token)

    def test_resolve_unknown_token(self, service):
        assert service.resolve(None) is None
        assert service.resolve("nope") is None
