"""Login form parsing for the VK authorize page."""

import logging

from bs4 import BeautifulSoup, Tag

from ..exceptions import InvalidFormInputFieldError, NoFormActionError, NoLoginFormError
from ..models import ParsedForm
from ..selectors import SELECTORS

logger = logging.getLogger(__name__)


def parse_document(html: str) -> BeautifulSoup:
    """Parse raw page text into a document tree."""
    return BeautifulSoup(html, "lxml")


def extract_login_form(document: BeautifulSoup | Tag) -> ParsedForm:
    """Extract the login form action and its hidden inputs.

    Only direct children of the first form are scanned. Hidden inputs
    wrapped in other elements are not picked up; VK's login markup keeps
    them at the top level of the form.

    Args:
        document: Parsed authorize page

    Returns:
        ParsedForm with the raw action and hidden (name, value) pairs in
        document order.

    Raises:
        NoLoginFormError: If the page has no form element.
        NoFormActionError: If the form has no action attribute.
        InvalidFormInputFieldError: If a hidden input lacks name or value.
    """
    form = document.select_one(SELECTORS["login_form"])
    if form is None:
        raise NoLoginFormError()

    action = form.get("action")
    if action is None:
        raise NoFormActionError()

    hidden_fields = []
    for child in form.find_all(recursive=False):
        if child.name != "input" or child.get("type") != "hidden":
            continue
        name = child.get("name")
        value = child.get("value")
        if name is None or value is None:
            raise InvalidFormInputFieldError()
        hidden_fields.append((name, value))

    logger.debug("Login form posts to %s with %d hidden fields", action, len(hidden_fields))
    return ParsedForm(action=action, hidden_fields=tuple(hidden_fields))


def has_secondary_login_form(document: BeautifulSoup | Tag) -> bool:
    """True if the page has a form posting to login.vk.com.

    VK renders this form again when the submitted credentials are rejected.
    """
    return document.select_one(SELECTORS["secondary_login_form"]) is not None
