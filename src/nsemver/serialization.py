# SPDX-License-Identifier: MIT
"""Text and JSON adapters for versions and constraints.

Versions serialize to their string form (without a leading ``v``) and are
read back with the lenient parser. In JSON a version is a quoted string.
"""

from __future__ import annotations

import json
from typing import Any, Union

from .constraint import ConstraintSet
from .semver import InvalidVersionError, Version, parse_version


def to_text(version: Version) -> str:
    """Return the textual form of a version."""
    return str(version)


def from_text(text: Union[str, bytes]) -> Version:
    """Parse a version from text or UTF-8 encoded bytes.

    Raises:
        InvalidVersionError: If the text is not a valid version
    """
    if isinstance(text, bytes):
        try:
            text = text.decode("utf-8")
        except UnicodeDecodeError as e:
            raise InvalidVersionError(repr(text), f"Version is not valid UTF-8: {e}") from e
    return parse_version(text)


def to_json(version: Version) -> str:
    """Return the JSON form of a version (a quoted string)."""
    return json.dumps(str(version))


def from_json(data: Union[str, bytes]) -> Version:
    """Parse a version from its JSON form.

    Raises:
        InvalidVersionError: If the JSON is malformed, not a string, or not a
            valid version
    """
    try:
        value = json.loads(data)
    except json.JSONDecodeError as e:
        raise InvalidVersionError(str(data), f"Invalid JSON version: {e}") from e

    if not isinstance(value, str):
        raise InvalidVersionError(
            str(data), f"JSON version must be a string, got {type(value).__name__}"
        )
    return parse_version(value)


class VersionJSONEncoder(json.JSONEncoder):
    """JSON encoder that writes versions and constraint sets as strings.

    Examples:
        >>> json.dumps({"version": parse_version("v1.2")}, cls=VersionJSONEncoder)
        '{"version": "1.2"}'
    """

    def default(self, o: Any) -> Any:
        if isinstance(o, (Version, ConstraintSet)):
            return str(o)
        return super().default(o)
