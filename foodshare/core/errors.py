"""
Typed failures for the auth and pickup-lifecycle domains.

Services raise these; the HTTP layer turns every ``FoodShareError`` into a
``{"success": false, "error": <code>, "message": ...}`` body, so none of
them reaches a client as an unhandled fault.
"""


class FoodShareError(Exception):
    code = "error"
    status_code = 400
    default_message = "Request failed"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)

    def to_result(self) -> dict:
        return {"success": False, "error": self.code, "message": self.message}


# ---------- auth ----------
class AuthError(FoodShareError):
    pass

class AccountNotFound(AuthError):
    code = "account_not_found"
    status_code = 404
    default_message = "User not found. Please check your email or register."

class InvalidCredential(AuthError):
    code = "invalid_credential"
    status_code = 401
    default_message = "Incorrect password. Please try again."

class MissingRequiredField(AuthError):
    code = "missing_required_field"
    status_code = 422
    default_message = "Missing required fields."

class AdminRegistrationForbidden(AuthError):
    code = "admin_registration_forbidden"
    status_code = 403
    default_message = "Admin registration is not allowed."

class DuplicateAccount(AuthError):
    code = "duplicate_account"
    status_code = 409
    default_message = "An account with this email already exists."

class DirectoryUnavailable(AuthError):
    code = "directory_unavailable"
    status_code = 503
    default_message = "Identity service is unreachable. Try again later."


# ---------- pickup lifecycle ----------
class LifecycleError(FoodShareError):
    pass

class NotFound(LifecycleError):
    code = "not_found"
    status_code = 404
    default_message = "Pickup not found"

class InvalidTransition(LifecycleError):
    code = "invalid_transition"
    status_code = 409
    default_message = "Transition not allowed from the current status"

class ActivePickupAlreadyExists(LifecycleError):
    code = "active_pickup_already_exists"
    status_code = 409
    default_message = "Finish your active pickup before accepting another one"
