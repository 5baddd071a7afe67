"""VK OAuth implicit-flow authorizer.

Logs in through the server-rendered login form the way a browser would:

1. GET the authorize page to obtain the login form and session cookies
2. POST the hidden form fields together with the credentials
3. Read the token from the redirect script of the resulting page

The login is cookie-stateful across the GET/POST pair, so both requests go
through the same ``httpx.AsyncClient``.
"""

import logging

import httpx
from bs4 import BeautifulSoup

from .config import AuthorizerConfig
from .exceptions import AuthorizationFailedError, ConfigError, InvalidRedirectDataError
from .models import AccessToken, ParsedForm
from .parsers import (
    ExtractionKind,
    TokenExtraction,
    extract_login_form,
    extract_token,
    has_secondary_login_form,
    parse_document,
)
from .selectors import EXPIRE_VALUE, FORM_FIELDS, authorize_params

logger = logging.getLogger(__name__)


def build_form_fields(form: ParsedForm, identifier: str, secret: str) -> dict[str, str]:
    """Merge hidden form fields with the credentials.

    Hidden fields are copied verbatim; the identifier, secret and expire
    fields always override a hidden field of the same name.
    """
    fields = dict(form.hidden_fields)
    fields[FORM_FIELDS["identifier"]] = identifier
    fields[FORM_FIELDS["secret"]] = secret
    fields[FORM_FIELDS["expire"]] = EXPIRE_VALUE
    return fields


def resolve_extraction(extraction: TokenExtraction, login_page: BeautifulSoup) -> AccessToken:
    """Turn a token extraction into a token or a classified error.

    Missing redirect data is ambiguous on its own. When the authorize page
    carried a login.vk.com form, the credentials were rejected; otherwise
    the page did not have the expected shape.

    Args:
        extraction: Result of scanning the post-login page
        login_page: Authorize page fetched before the login POST

    Returns:
        The extracted AccessToken.

    Raises:
        AuthorizationFailedError: If credentials were rejected.
        InvalidRedirectDataError: If the redirect data is missing.
        httpx.InvalidURL, ValueError: If the redirect data is malformed.
    """
    if extraction.kind is ExtractionKind.SUCCESS:
        return extraction.token
    if extraction.kind is ExtractionKind.HARD_ERROR:
        raise extraction.error
    if has_secondary_login_form(login_page):
        raise AuthorizationFailedError()
    raise InvalidRedirectDataError(f"InvalidRedirectData: {extraction.reason}")


class Authorizer:
    """Obtains VK access tokens by submitting the web login form.

    Build with :meth:`builder`. The authorizer owns its HTTP client unless
    one was supplied to the builder; an owned client is closed by
    :meth:`aclose` or when leaving ``async with``.

    One instance may serve many ``get_token`` calls. Concurrent calls share
    the cookie jar, so calls for different accounts should use separate
    instances.
    """

    def __init__(self, client: httpx.AsyncClient, config: AuthorizerConfig, owns_client: bool):
        self._client = client
        self.config = config
        self._owns_client = owns_client

    @staticmethod
    def builder() -> "AuthorizerBuilder":
        return AuthorizerBuilder()

    @property
    def client(self) -> httpx.AsyncClient:
        return self._client

    async def get_token(self, client_id: str, identifier: str, secret: str) -> AccessToken:
        """Log in and return the access token.

        Args:
            client_id: VK application id
            identifier: Email or phone number of the account
            secret: Account password

        Returns:
            AccessToken from the redirect fragment.

        Raises:
            NoLoginFormError, NoFormActionError, InvalidFormInputFieldError:
                If the authorize page has no usable login form.
            AuthorizationFailedError: If the credentials were rejected.
            InvalidRedirectDataError: If the post-login page has an unexpected shape.
            httpx.HTTPError: On transport failures.
        """
        logger.debug("Fetching authorize page %s", self.config.authorize_url)
        response = await self._client.get(self.config.authorize_url, params=authorize_params(client_id))
        login_page = parse_document(response.text)
        form = extract_login_form(login_page)

        action_url = response.url.join(form.action)
        logger.debug("Submitting login form to %s", action_url)
        result = await self._client.post(action_url, data=build_form_fields(form, identifier, secret))

        extraction = extract_token(result.text)
        logger.debug("Post-login page classified as %s", extraction.kind.value)
        return resolve_extraction(extraction, login_page)

    async def aclose(self) -> None:
        """Close the HTTP client if this authorizer created it."""
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> "Authorizer":
        return self

    async def __aexit__(self, *args) -> None:
        await self.aclose()


class AuthorizerBuilder:
    """Builder for :class:`Authorizer`.

    A client passed to :meth:`with_client` is used as is. httpx clients
    always keep cookies, but any cookies it already holds take part in the
    login.
    """

    def __init__(self):
        self._client: httpx.AsyncClient | None = None
        self._config: AuthorizerConfig | None = None

    def with_client(self, client: httpx.AsyncClient) -> "AuthorizerBuilder":
        self._client = client
        return self

    def with_config(self, config: AuthorizerConfig) -> "AuthorizerBuilder":
        self._config = config
        return self

    def build(self) -> Authorizer:
        """Create the Authorizer.

        Raises:
            ConfigError: If the configuration is invalid.
        """
        config = self._config or AuthorizerConfig()
        problems = config.validate()
        if problems:
            raise ConfigError(f"Invalid configuration: {'; '.join(problems)}")

        if self._client is not None:
            return Authorizer(self._client, config, owns_client=False)

        client = httpx.AsyncClient(
            follow_redirects=True,
            timeout=config.timeout,
            headers={"User-Agent": config.user_agent},
        )
        return Authorizer(client, config, owns_client=True)
