"""VK OAuth implicit-flow login without a browser.

Submits credentials through VK's HTML login form and extracts the access
token from the redirect embedded in the response page.
"""

from .authorizer import Authorizer, AuthorizerBuilder
from .config import AuthorizerConfig
from .exceptions import (
    AuthorizationFailedError,
    ConfigError,
    InvalidFormInputFieldError,
    InvalidRedirectDataError,
    LoginFormError,
    NoFormActionError,
    NoLoginFormError,
    VKAuthError,
)
from .models import AccessToken, Credentials, ParsedForm

__all__ = [
    "Authorizer",
    "AuthorizerBuilder",
    "AuthorizerConfig",
    "AccessToken",
    "Credentials",
    "ParsedForm",
    "VKAuthError",
    "ConfigError",
    "LoginFormError",
    "NoLoginFormError",
    "NoFormActionError",
    "InvalidFormInputFieldError",
    "InvalidRedirectDataError",
    "AuthorizationFailedError",
]
