"""Domain errors raised by the service layer.

Each error carries the HTTP status it maps to, so routes can let them
propagate to the registered exception handler.
"""


class DomainError(Exception):
    def __init__(self, message: str, status_code: int = 400):
        self.message = message
        self.status_code = status_code
        super().__init__(message)


class ValidationFailure(DomainError):
    def __init__(self, message: str):
        super().__init__(message, 400)


class DuplicateEmailError(ValidationFailure):
    def __init__(self, email: str):
        super().__init__("Email already registered")
        self.email = email


class UserNotFoundError(DomainError):
    """Login against an unknown email. Reported as 400, not 404."""

    def __init__(self):
        super().__init__("User not found", 400)


class InvalidCredentialsError(DomainError):
    def __init__(self):
        super().__init__("Invalid password", 400)


class UnauthenticatedError(DomainError):
    def __init__(self, message: str = "No token provided"):
        super().__init__(message, 401)


class InvalidTokenError(UnauthenticatedError):
    def __init__(self):
        super().__init__("Invalid token")


class ForbiddenError(DomainError):
    def __init__(self, message: str = "Admin privileges required"):
        super().__init__(message, 403)


class NotFoundError(DomainError):
    def __init__(self, message: str):
        super().__init__(message, 404)


class CapacityExceededError(DomainError):
    def __init__(self, event_id: int, seats: int):
        super().__init__("Not enough seats available", 400)
        self.event_id = event_id
        self.seats = seats


class AlreadyPaidError(DomainError):
    def __init__(self, booking_id: int):
        super().__init__("Already paid", 400)
        self.booking_id = booking_id
