"""Custom exceptions for VK authorization."""


class VKAuthError(Exception):
    """Base exception for VK authorization errors."""

    pass


class ConfigError(VKAuthError):
    """Authorizer configuration is invalid."""

    pass


class LoginFormError(VKAuthError):
    """Authorize page does not contain a usable login form."""

    pass


class NoLoginFormError(LoginFormError):
    """Authorize page has no form element."""

    def __init__(self, message: str = "NoLoginForm: no form found on authorize page"):
        super().__init__(message)


class NoFormActionError(LoginFormError):
    """Login form lacks an action URL."""

    def __init__(self, message: str = "NoFormAction: login form has no action attribute"):
        super().__init__(message)


class InvalidFormInputFieldError(LoginFormError):
    """A hidden input of the login form lacks a name or value."""

    def __init__(self, message: str = "InvalidFormInputField: hidden input without name or value"):
        super().__init__(message)


class InvalidRedirectDataError(VKAuthError):
    """Post-login page does not carry the expected redirect data.

    Raised when the page shape is unexpected: redirect markers, URL fragment
    or one of the token fields is missing.
    """

    def __init__(self, message: str = "InvalidRedirectData: expected data not found on page"):
        super().__init__(message)


class AuthorizationFailedError(VKAuthError):
    """Credentials were rejected and VK rendered its login form again."""

    def __init__(self, message: str = "AuthorizationFailed: invalid authorization data"):
        super().__init__(message)
