"""
Question definitions for the application initializer.

Each field is keyed by the placeholder token it fills in the templates:

    <APP_NAME>              application name (supplied by the caller, never asked)
    <SLUG_GH>               github project name (app name by default)
    <SLUG_NPM>              future npm slug name (app name by default)
    <APP_SHORT_DESCRIPTION> application short description
    <APP_CATEGORY>          application category (empty by default)
    <USERNAME_GH>           github username of the project host
    <USER_WEBSITE>          author website
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Callable, List, Optional, Pattern

from ..util.naming import is_valid_package_name

APP_NAME_TOKEN = "<APP_NAME>"
MAX_DESCRIPTION_LENGTH = 500

GITHUB_USERNAME_PATTERN = re.compile(r"^[a-z\d](?:[a-z\d]|-(?=[a-z\d])){0,38}$", re.IGNORECASE | re.ASCII)
WEBSITE_PATTERN = re.compile(
    r"^(?:http(s)?://)?[\w.-]+(?:\.[\w.-]+)+[\w\-._~:/?#\[\]@!$&'()*+,;=.]+$",
    re.ASCII,
)

REQUIRED_MESSAGE = "A value is required"


@dataclass(frozen=True)
class PromptField:
    """
    One question asked by the collector.

    Attributes:
        name: Placeholder token filled by the answer.
        description: Text displayed when asking.
        conform: Optional predicate the answer must satisfy.
        pattern: Optional regular expression the answer must match.
        message: Explanation displayed when the answer is rejected.
        required: Whether an empty answer is refused.
        default: Answer used when the user enters nothing.
    """
    name: str
    description: str
    conform: Optional[Callable[[str], bool]] = None
    pattern: Optional[Pattern[str]] = None
    message: Optional[str] = None
    required: bool = False
    default: Optional[str] = None

    def resolve(self, raw: Optional[str]) -> str:
        """Apply the default to an empty answer."""
        value = "" if raw is None else raw
        if value == "" and self.default is not None:
            return self.default
        return value

    def validate(self, value: str) -> Optional[str]:
        """
        Check an answer (after defaults are applied).

        Returns:
            None when the answer is accepted, otherwise the rejection message.
        """
        if value == "":
            if self.required:
                return self.message or REQUIRED_MESSAGE
            return None
        if self.pattern is not None and not self.pattern.fullmatch(value):
            return self.message or f"Must match {self.pattern.pattern}"
        if self.conform is not None and not self.conform(value):
            return self.message or "Invalid value"
        return None


def _short_enough(value: str) -> bool:
    return len(value) <= MAX_DESCRIPTION_LENGTH


def default_fields(app_name: str) -> List[PromptField]:
    """Return the initializer questions, in the order they are asked."""
    return [
        PromptField(
            name="<SLUG_GH>",
            description="Github project name?",
            conform=is_valid_package_name,
            message="Must be mainly lowercase letters, digits or dashes (see NPM name requirements)",
            default=app_name,
        ),
        PromptField(
            name="<SLUG_NPM>",
            description="Future NPM slug name?",
            conform=is_valid_package_name,
            message="Must be mainly lowercase letters, digits or dashes (see NPM name requirements).",
            default=app_name,
        ),
        PromptField(
            name="<APP_SHORT_DESCRIPTION>",
            description="Short description of your application?",
            conform=_short_enough,
            message=f"Required. Must be less than {MAX_DESCRIPTION_LENGTH} characters",
            required=True,
        ),
        PromptField(
            name="<APP_CATEGORY>",
            description="Category of your application (optional)?",
        ),
        PromptField(
            name="<USERNAME_GH>",
            description="Your github username?",
            pattern=GITHUB_USERNAME_PATTERN,
            message="Must be valid github username",
            required=True,
        ),
        PromptField(
            name="<USER_WEBSITE>",
            description="Your website (optional)?",
            pattern=WEBSITE_PATTERN,
            message="Must be valid url",
        ),
    ]
