"""Configuration handling for VK authorization."""

import os
from dataclasses import dataclass

from .selectors import DEFAULT_AUTHORIZE_URL

DEFAULT_USER_AGENT = "Mozilla/5.0 (Windows NT 10.0; Win64; x64; rv:128.0) Gecko/20100101 Firefox/128.0"


@dataclass
class AuthorizerConfig:
    """Configuration for the default HTTP client of an Authorizer.

    Configuration can be loaded from:
    1. Environment variables (VK_AUTHORIZE_URL, VK_TIMEOUT, VK_USER_AGENT)
    2. Explicit parameters

    Only the authorize URL is used when a pre-configured client is passed to
    the builder; timeout and user agent then come from that client.
    """

    authorize_url: str = DEFAULT_AUTHORIZE_URL
    timeout: float = 30.0
    user_agent: str = DEFAULT_USER_AGENT

    @classmethod
    def from_env(cls) -> "AuthorizerConfig":
        """Load configuration from environment variables.

        Environment variables:
            VK_AUTHORIZE_URL: OAuth authorize endpoint
            VK_TIMEOUT: Request timeout in seconds
            VK_USER_AGENT: User-Agent header for the default client

        Returns:
            AuthorizerConfig instance
        """
        return cls(
            authorize_url=os.environ.get("VK_AUTHORIZE_URL", DEFAULT_AUTHORIZE_URL),
            timeout=float(os.environ.get("VK_TIMEOUT", "30")),
            user_agent=os.environ.get("VK_USER_AGENT", DEFAULT_USER_AGENT),
        )

    def validate(self) -> list[str]:
        """Validate configuration, returning list of problems.

        Returns:
            List of human-readable problems. Empty when valid.
        """
        problems = []
        if not self.authorize_url:
            problems.append("authorize_url (VK_AUTHORIZE_URL) is empty")
        elif not self.authorize_url.startswith(("http://", "https://")):
            problems.append("authorize_url (VK_AUTHORIZE_URL) must be an http(s) URL")
        if self.timeout <= 0:
            problems.append("timeout (VK_TIMEOUT) must be positive")
        return problems
