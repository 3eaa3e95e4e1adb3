"""
Window matching rules.

This module provides the small predicate language used to select windows:
a field selector, a match method and a pattern, written on the command line
as ``field[:method]=pattern``. Conditions are combined conjunctively in a
ConditionSet.
"""
import logging
import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, Sequence

from .errors import RunOrRaiseError
from .Models import WindowInfo

logger = logging.getLogger(__name__)


class ConfigurationError(RunOrRaiseError):
    """Exception raised when matchers cannot be built from user input."""


class MatchField(Enum):
    """Window attributes that can be used for matching, with their aliases."""
    CLASS = ("class", "c")
    INITIAL_CLASS = ("initial-class", "initialClass")
    TITLE = ("title",)
    INITIAL_TITLE = ("initial-title", "initialTitle")
    TAG = ("tag",)
    XDG_TAG = ("xdgtag", "xdg-tag", "xdgTag")

    @property
    def aliases(self) -> tuple:
        return self.value

    @classmethod
    def resolve(cls, alias: str) -> "MatchField | None":
        """
        Resolve a field alias (case-sensitive, no normalization).

        :param alias: Alias as typed by the user
        :return: Matching MatchField, or None if the alias is unknown
        """
        for match_field in cls:
            if alias in match_field.aliases:
                return match_field
        return None

    def value_of(self, window: WindowInfo) -> str | None:
        """
        Get this field's value from a window.

        :param window: Window to read from
        :return: Field value, or None when the window does not carry it
        """
        if self is MatchField.CLASS:
            return window.class_name
        elif self is MatchField.INITIAL_CLASS:
            return window.initial_class
        elif self is MatchField.TITLE:
            return window.title
        elif self is MatchField.INITIAL_TITLE:
            return window.initial_title
        elif self is MatchField.TAG:
            return window.tag
        elif self is MatchField.XDG_TAG:
            return window.xdg_tag
        raise AssertionError(f"Unhandled match field: {self}")


class MatchMethod(Enum):
    """String comparison methods, with their aliases."""
    EQUALS = ("equals", "eq")
    CONTAINS = ("contains", "substr")
    PREFIX = ("prefix", "starts-with", "startswith")
    SUFFIX = ("suffix", "ends-with", "endswith")
    REGEX = ("regex", "re")

    @property
    def aliases(self) -> tuple:
        return self.value

    @classmethod
    def resolve(cls, alias: str) -> "MatchMethod | None":
        """Resolve a method alias (case-sensitive, no normalization)."""
        for method in cls:
            if alias in method.aliases:
                return method
        return None


@dataclass(frozen=True)
class Matcher:
    """
    A match method bound to its pattern.

    Attributes:
        method: Comparison method
        pattern: Pattern text as given by the user
        compiled: Compiled expression, only set for MatchMethod.REGEX
    """
    method: MatchMethod
    pattern: str
    compiled: re.Pattern | None = field(default=None, compare=False, repr=False)

    @classmethod
    def from_tokens(cls, method_alias: str | None, pattern: str) -> "Matcher":
        """
        Build a matcher from a method alias and a pattern.

        Regular expressions are compiled here so that an invalid pattern
        is reported before any window is queried.

        :param method_alias: Method alias, or None for ``equals``
        :param pattern: Non-empty pattern
        :raises ConfigurationError: If the pattern is empty, the method is
            unknown or the regex does not compile
        """
        if not pattern:
            raise ConfigurationError("Matcher pattern cannot be empty")

        if method_alias is None:
            method = MatchMethod.EQUALS
        else:
            method = MatchMethod.resolve(method_alias)
            if method is None:
                raise ConfigurationError(f"Unsupported match method `{method_alias}`")

        if method is MatchMethod.REGEX:
            try:
                compiled = re.compile(pattern)
            except re.error as exc:
                raise ConfigurationError(f"Invalid regex `{pattern}`: {exc}") from exc
            return cls(method, pattern, compiled)

        return cls(method, pattern)

    def matches(self, value: str) -> bool:
        """Apply the method to a field value."""
        if self.method is MatchMethod.EQUALS:
            return value == self.pattern
        elif self.method is MatchMethod.CONTAINS:
            return self.pattern in value
        elif self.method is MatchMethod.PREFIX:
            return value.startswith(self.pattern)
        elif self.method is MatchMethod.SUFFIX:
            return value.endswith(self.pattern)
        elif self.method is MatchMethod.REGEX:
            return self.compiled.search(value) is not None
        raise AssertionError(f"Unhandled match method: {self.method}")


@dataclass(frozen=True)
class MatchCondition:
    """A single (field, method, pattern) predicate over a window."""
    field: MatchField
    matcher: Matcher

    def matches(self, window: WindowInfo) -> bool:
        """
        Check if this condition holds for the given window.

        An absent optional field never matches, whatever the method.
        """
        value = self.field.value_of(window)
        if value is None:
            return False
        return self.matcher.matches(value)

    def __str__(self) -> str:
        return f"{self.field.aliases[0]}:{self.matcher.method.aliases[0]}={self.matcher.pattern}"


class ConditionSet:
    """
    Conjunction of match conditions.

    A window matches the set only if it satisfies every condition. The set
    always holds at least one condition.
    """

    def __init__(self, conditions: Iterable[MatchCondition]):
        self.conditions = tuple(conditions)
        if not self.conditions:
            raise ConfigurationError("Provide at least one matcher via --class or --match")

    def __len__(self) -> int:
        return len(self.conditions)

    def __iter__(self):
        return iter(self.conditions)

    def __repr__(self) -> str:
        return f"ConditionSet([{', '.join(str(c) for c in self.conditions)}])"

    def matches(self, window: WindowInfo) -> bool:
        return all(condition.matches(window) for condition in self.conditions)

    def filter(self, windows: Iterable[WindowInfo]) -> list[WindowInfo]:
        """Return the matching windows, keeping their original order."""
        return [window for window in windows if self.matches(window)]


def parse_match_condition(raw: str) -> MatchCondition:
    """
    Parse a matcher written as ``field[:method]=pattern``.

    :param raw: Matcher text
    :return: Validated MatchCondition
    :raises ConfigurationError: If the text is malformed or names an unknown
        field or method
    """
    selector, sep, pattern = raw.partition("=")
    if not sep:
        raise ConfigurationError("Expected matcher in the form field[:method]=pattern")

    if not pattern:
        raise ConfigurationError("Matcher pattern cannot be empty")

    field_token, sep, method_token = selector.partition(":")
    method_alias = method_token if sep else None

    match_field = MatchField.resolve(field_token)
    if match_field is None:
        raise ConfigurationError(f"Unsupported match field `{field_token}`")

    return MatchCondition(match_field, Matcher.from_tokens(method_alias, pattern))


def build_conditions(
    class_name: str | None = None,
    matchers: Sequence[str | MatchCondition] = ()
) -> ConditionSet:
    """
    Assemble the condition set for one invocation.

    :param class_name: Class shorthand, turned into an ``equals`` condition
        on the window class and placed first
    :param matchers: Matcher strings or parsed conditions, kept in order
    :raises ConfigurationError: If any matcher is invalid or no condition
        was given at all
    """
    conditions = []

    if class_name is not None:
        conditions.append(
            MatchCondition(MatchField.CLASS, Matcher(MatchMethod.EQUALS, class_name))
        )

    for matcher in matchers:
        if isinstance(matcher, MatchCondition):
            conditions.append(matcher)
        else:
            conditions.append(parse_match_condition(matcher))

    condition_set = ConditionSet(conditions)
    logger.debug(f"Built {condition_set!r}")
    return condition_set
