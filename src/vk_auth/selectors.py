"""Centralized markers, CSS selectors and URLs for VK login page parsing."""

# Inline script that carries the token redirect on the post-login page:
#   <script>location.href='https://oauth.vk.com/blank.html#access_token=...';</script>
START_MARKER = "location.href='"
END_MARKER = "';</script>"

SELECTORS = {
    "login_form": "form",
    # Present when VK re-renders its login page after rejected credentials
    "secondary_login_form": 'form[action*="https://login.vk.com"]',
}

# Fixed form fields posted alongside the hidden inputs
FORM_FIELDS = {
    "identifier": "email",
    "secret": "pass",
    "expire": "expire",
}

# "0" asks VK not to force the session to expire
EXPIRE_VALUE = "0"

# Keys of the redirect URL fragment
TOKEN_FIELDS = {
    "access_token": "access_token",
    "expires_in": "expires_in",
    "user_id": "user_id",
}

DEFAULT_AUTHORIZE_URL = "https://oauth.vk.com/oauth/authorize"


def authorize_params(client_id: str) -> dict[str, str]:
    """Query parameters for the implicit-flow authorize request.

    Args:
        client_id: VK application id

    Returns:
        Dict of query parameters.
    """
    return {
        "client_id": client_id,
        "scope": "0",
        "response_type": "token",
    }
