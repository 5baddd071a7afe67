"""Token extraction from the page VK returns after the login POST.

On success VK answers with a small page whose inline script redirects the
browser to ``blank.html`` with the token in the URL fragment::

    <script>location.href='https://oauth.vk.com/blank.html#access_token=...&expires_in=86400&user_id=1';</script>

The extraction never raises for a page of the wrong shape. It returns a
:class:`TokenExtraction` instead, so the caller can decide between "login
rejected" and "page changed" using the authorize page as extra evidence.
Malformed data (an unparseable URL or expiry) is carried as ``HARD_ERROR``.
"""

import logging
import re
from dataclasses import dataclass, field
from datetime import timedelta
from enum import Enum
from urllib.parse import parse_qsl

import httpx

from ..models import AccessToken
from ..selectors import END_MARKER, START_MARKER, TOKEN_FIELDS

logger = logging.getLogger(__name__)

_SECONDS_RE = re.compile(r"\+?[0-9]+")

# Leading and trailing C0 controls and spaces are not part of a URL
_URL_STRIP_CHARS = "".join(chr(c) for c in range(0x21))


class ExtractionKind(Enum):
    SUCCESS = "success"
    AMBIGUOUS = "ambiguous"
    HARD_ERROR = "hard_error"


@dataclass(frozen=True)
class TokenExtraction:
    """Outcome of scanning a post-login page for the token redirect."""

    kind: ExtractionKind
    token: AccessToken | None = None
    reason: str = ""
    error: Exception | None = field(default=None, compare=False)
    # Comparable stand-in for error: exception type name and args
    error_detail: tuple[str, tuple] | None = None

    @classmethod
    def success(cls, token: AccessToken) -> "TokenExtraction":
        return cls(ExtractionKind.SUCCESS, token=token)

    @classmethod
    def ambiguous(cls, reason: str) -> "TokenExtraction":
        return cls(ExtractionKind.AMBIGUOUS, reason=reason)

    @classmethod
    def hard_error(cls, error: Exception) -> "TokenExtraction":
        return cls(ExtractionKind.HARD_ERROR, error=error, error_detail=(type(error).__name__, error.args))


def find_redirect_url(page: str) -> str | None:
    """Return the text between the redirect markers, or None if absent."""
    start = page.find(START_MARKER)
    if start == -1:
        return None
    start += len(START_MARKER)
    end = page.rfind(END_MARKER)
    if end < start:
        return None
    return page[start:end]


def parse_seconds(value: str) -> timedelta:
    """Parse a non-negative integer number of seconds.

    Raises:
        ValueError: If value is not a plain unsigned integer.
    """
    if not _SECONDS_RE.fullmatch(value):
        raise ValueError(f"invalid expires_in value: {value!r}")
    try:
        return timedelta(seconds=int(value))
    except OverflowError as e:
        raise ValueError(f"expires_in out of range: {value!r}") from e


def extract_token(page: str) -> TokenExtraction:
    """Extract the access token from a post-login page.

    Args:
        page: Raw HTML text returned by the login POST

    Returns:
        TokenExtraction: ``SUCCESS`` with the token, ``AMBIGUOUS`` with a
        reason when redirect data is missing, or ``HARD_ERROR`` with the
        underlying ``httpx.InvalidURL`` / ``ValueError``.
    """
    candidate = find_redirect_url(page)
    if candidate is None:
        return TokenExtraction.ambiguous("redirect markers not found")
    candidate = candidate.strip(_URL_STRIP_CHARS)

    try:
        url = httpx.URL(candidate)
    except httpx.InvalidURL as e:
        return TokenExtraction.hard_error(e)
    if not url.is_absolute_url:
        return TokenExtraction.hard_error(httpx.InvalidURL(f"redirect URL is not absolute: {candidate!r}"))

    # Raw fragment: httpx.URL.fragment is already percent-decoded, which
    # would split values containing an encoded "&"
    _, _, fragment = candidate.partition("#")
    if not fragment:
        return TokenExtraction.ambiguous("redirect URL has no fragment")

    # Last occurrence of a repeated key wins
    fields = dict(parse_qsl(fragment, keep_blank_values=True))

    missing = [key for key in TOKEN_FIELDS.values() if key not in fields]
    if missing:
        return TokenExtraction.ambiguous(f"redirect fragment lacks {', '.join(missing)}")

    try:
        expires_in = parse_seconds(fields[TOKEN_FIELDS["expires_in"]])
    except ValueError as e:
        return TokenExtraction.hard_error(e)

    logger.debug("Token redirect found, expires in %s", expires_in)
    return TokenExtraction.success(
        AccessToken(
            access_token=fields[TOKEN_FIELDS["access_token"]],
            expires_in=expires_in,
            user_id=fields[TOKEN_FIELDS["user_id"]],
        )
    )
