"""
Authentication exceptions.
"""
from fastapi import status


class AuthError(Exception):
    """Base auth error."""

    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, message: str, code: str = "AUTH_ERROR"):
        self.message = message
        self.code = code
        super().__init__(message)


class RegistrationError(AuthError):
    """Registration input rejected."""

    def __init__(self, message: str):
        super().__init__(message, code="REGISTRATION_ERROR")


class InvalidCredentialsError(AuthError):
    """Unknown email or wrong password."""

    status_code = status.HTTP_401_UNAUTHORIZED

    def __init__(self):
        super().__init__(
            "Invalid email or password. Please try again.",
            code="INVALID_CREDENTIALS",
        )
