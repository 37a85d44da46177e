"""Constrained string types shared by the glossary models.

Python 3.13+.
"""

from typing import Annotated

from pydantic import StringConstraints

from glossengine.constants import IDENTIFIER_PATTERN, KEY_PATTERN, VERSION_PATTERN

__all__ = ["Identifier", "Key", "Version"]

# One path segment: "user", "_private", "0"
type Identifier = Annotated[str, StringConstraints(pattern=rf"^(?:{IDENTIFIER_PATTERN})$")]

# Dotted path of identifiers: "user.notifications"
type Key = Annotated[str, StringConstraints(pattern=rf"^{KEY_PATTERN}$")]

type Version = Annotated[str, StringConstraints(pattern=VERSION_PATTERN)]
