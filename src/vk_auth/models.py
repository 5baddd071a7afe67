"""Data types passed through the VK login flow."""

import os
from dataclasses import dataclass, field
from datetime import timedelta


@dataclass
class Credentials:
    """Credentials for a VK login."""

    client_id: str
    identifier: str
    secret: str = field(repr=False)

    @classmethod
    def from_env(cls) -> "Credentials":
        """Load credentials from environment variables.

        Environment variables:
            VK_APP_ID: VK application (client) id
            VK_EMAIL: Email or phone number of the account
            VK_PASSWORD: Account password

        Raises:
            ValueError: If any variable is unset or empty.
        """
        values = {name: os.environ.get(name, "") for name in ("VK_APP_ID", "VK_EMAIL", "VK_PASSWORD")}
        missing = [name for name, value in values.items() if not value]
        if missing:
            raise ValueError(f"{', '.join(missing)} must be set in environment")

        return cls(
            client_id=values["VK_APP_ID"],
            identifier=values["VK_EMAIL"],
            secret=values["VK_PASSWORD"],
        )


@dataclass(frozen=True)
class ParsedForm:
    """Login form extracted from the authorize page.

    The action may be relative; it is resolved against the page URL when
    the form is submitted.
    """

    action: str
    hidden_fields: tuple[tuple[str, str], ...] = ()


@dataclass(frozen=True)
class AccessToken:
    """Access token delivered in the redirect URL fragment."""

    access_token: str = field(repr=False)
    expires_in: timedelta
    user_id: str

    def to_dict(self) -> dict[str, str | int]:
        return {
            "access_token": self.access_token,
            "expires_in": int(self.expires_in.total_seconds()),
            "user_id": self.user_id,
        }
