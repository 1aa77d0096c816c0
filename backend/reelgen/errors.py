class ReelgenError(Exception):
    """
    Base error for everything the service reports to a caller.

    Each subclass carries the HTTP status it maps to; the API layer
    turns any ReelgenError into {"error": message}.
    """

    status_code: int = 500
    default_message: str = "Unknown error"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


# ---- Input ----

class ValidationIncomplete(ReelgenError):
    status_code = 422
    default_message = "All fields are required"


# ---- Upstream model ----

class UpstreamRateLimited(ReelgenError):
    status_code = 429
    default_message = "Rate limit exceeded"


class UpstreamPaymentRequired(ReelgenError):
    status_code = 402
    default_message = "Payment required"


class UpstreamUnavailable(ReelgenError):
    status_code = 500
    default_message = "AI gateway unavailable"


class MalformedResponse(ReelgenError):
    status_code = 500
    default_message = "Failed to parse AI response as JSON"


# ---- Persistence / auth ----

class PersistenceFailure(ReelgenError):
    status_code = 500
    default_message = "Database operation failed"


class ReelNotFound(ReelgenError):
    status_code = 404
    default_message = "Reel not found"


class AuthRequired(ReelgenError):
    status_code = 401
    default_message = "Authentication required"


class InvalidCredentials(ReelgenError):
    status_code = 400
    default_message = "Invalid login credentials"


class UserAlreadyExists(ReelgenError):
    status_code = 409
    default_message = "User already registered"
