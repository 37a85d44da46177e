"""Issues collected while resolving a translation.

Issues are data, not exceptions: translate() returns them next to a
best-effort display string so callers can log or report them.

Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass, field
from typing import Any

from glossengine.enums import IssueKind

from .codes import Diagnostic

__all__ = [
    "InvalidFormatIssue",
    "Issue",
    "MissingParamIssue",
    "UnknownKeyIssue",
]


@dataclass(frozen=True, slots=True)
class UnknownKeyIssue:
    """The key is absent, or its entry is not a valid translation."""

    key: str
    kind: IssueKind = field(default=IssueKind.UNKNOWN_KEY, init=False)

    def __str__(self) -> str:
        return f"[{self.kind}] {self.key}"


@dataclass(frozen=True, slots=True)
class MissingParamIssue:
    """A template parameter had neither an argument nor a default."""

    key: str
    param: str
    kind: IssueKind = field(default=IssueKind.MISSING_PARAM, init=False)

    def __str__(self) -> str:
        return f"[{self.kind}] {self.key}: {{{self.param}}}"


@dataclass(frozen=True, slots=True)
class InvalidFormatIssue:
    """An argument failed the input check of its declared format.

    Attributes:
        key: Translation key
        param: Parameter token name
        value: The rejected argument, unchanged
        error: Diagnostics explaining the rejection
    """

    key: str
    param: str
    value: Any
    error: tuple[Diagnostic, ...]
    kind: IssueKind = field(default=IssueKind.INVALID_FORMAT, init=False)

    def __str__(self) -> str:
        reasons = "; ".join(d.message for d in self.error)
        return f"[{self.kind}] {self.key}: {{{self.param}}}={self.value!r} ({reasons})"


type Issue = UnknownKeyIssue | MissingParamIssue | InvalidFormatIssue
