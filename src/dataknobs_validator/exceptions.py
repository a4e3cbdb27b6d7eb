"""Error taxonomy for rule evaluation.

Rules never raise on failure. They *return* one of the exceptions defined
here, and the evaluator wraps whatever comes back in a single
``ValidationError`` so that callers can recognize a validation failure
without knowing how the rule tree was put together.

The hierarchy:
- ``ValidatorError``: base class, carries a ``kind`` and optional context
- ``RuleError``: a single predicate evaluated false
- ``MultiError``: one or more sub-rules failed inside ``assert_all``
- ``ValidationError``: the sentinel wrapper produced by ``validate``

Example:
    ```python
    from dataknobs_validator import assert_that, validate
    from dataknobs_validator.exceptions import ValidationError, is_invalid

    err = validate(assert_that(False, "must be true"))
    isinstance(err, ValidationError)  # True
    is_invalid(err)                   # True
    str(err)                          # 'validation error: must be true'
    str(err.unwrap())                 # 'must be true'
    ```
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping, Sequence
from enum import Enum
from typing import Any, Dict

VALIDATION_ERROR_PREFIX = "validation error"
MULTI_ERROR_HEADER = "multiple errors:"


class ErrorKind(Enum):
    """Category tag carried by every validator error."""

    RULE = "rule"
    """A single predicate evaluated false."""

    MULTIPLE = "multiple"
    """An aggregate of failures collected by ``assert_all``."""

    INVALID = "invalid"
    """The sentinel validation category added by ``validate``."""


class ValidatorError(Exception):
    """Base exception for the validator package.

    Attributes:
        kind: The ``ErrorKind`` this error belongs to.
        context: Dictionary containing contextual information about the error
        details: Alias for context

    Args:
        message: Human-readable error message
        kind: Error category; required so that no error is mistaken for a
            predicate failure
        context: Optional dictionary with error context
    """

    kind: ErrorKind

    def __init__(
        self,
        message: str,
        kind: ErrorKind,
        context: Dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.kind = kind
        self.context = context or {}
        self.details = self.context

    @property
    def message(self) -> str:
        """The display message of this error."""
        return str(self)


class RuleError(ValidatorError):
    """Returned by a predicate rule whose test was false.

    The message template and its arguments are kept alongside the rendered
    message so callers can inspect what was checked.

    Example:
        ```python
        err = RuleError("%s must be positive", ("amount",))
        str(err)         # 'amount must be positive'
        err.template     # '%s must be positive'
        err.format_args  # ('amount',)
        ```
    """

    def __init__(self, template: str, args: Sequence[Any] = ()):
        self.template = template
        self.format_args = tuple(args)
        super().__init__(
            format_message(template, self.format_args),
            ErrorKind.RULE,
            context={"template": template, "args": self.format_args},
        )


class MultiError(ValidatorError):
    """Aggregate of every failure collected by ``assert_all``.

    The message is a fixed header line followed by one line per member
    error, in the order the failing sub-rules were supplied.

    Example:
        ```python
        err = MultiError([RuleError("a is bad"), RuleError("b is bad")])
        print(err)
        # multiple errors:
        # a is bad
        # b is bad
        err.unwrap()   # [RuleError('a is bad'), RuleError('b is bad')]
        ```
    """

    def __init__(self, errors: Sequence[BaseException]):
        self.errors: tuple[BaseException, ...] = tuple(errors)
        lines = [MULTI_ERROR_HEADER, *(str(e) for e in self.errors)]
        super().__init__(
            "\n".join(lines),
            ErrorKind.MULTIPLE,
            context={"count": len(self.errors)},
        )

    def unwrap(self) -> list[BaseException]:
        """Return the member errors in their original order."""
        return list(self.errors)


class ValidationError(ValidatorError):
    """Sentinel category for any failure surfaced by ``validate``.

    Wraps the raw failure returned by a rule tree (a ``RuleError``, a
    ``MultiError`` or any exception a custom rule returned). The wrapped
    error stays reachable through ``cause``, ``unwrap()`` and the standard
    ``__cause__`` chain.

    Example:
        ```python
        err = ValidationError(RuleError("must be true"))
        str(err)          # 'validation error: must be true'
        err.cause         # RuleError('must be true')
        ```
    """

    def __init__(self, cause: BaseException):
        super().__init__(
            f"{VALIDATION_ERROR_PREFIX}: {cause}",
            ErrorKind.INVALID,
            context={"cause_type": type(cause).__name__},
        )
        self.cause = cause
        self.__cause__ = cause

    def unwrap(self) -> BaseException:
        """Return the original, unwrapped failure."""
        return self.cause


# The shared sentinel, for callers who prefer matching on a value.
INVALID_ERROR = ValidationError


def format_message(template: str, args: Sequence[Any] = ()) -> str:
    """Render a rule message.

    Uses ``%`` interpolation the same way ``logging`` does: the template is
    only interpolated when arguments were supplied, so a literal ``%`` in an
    argument-less message is left alone, and a single non-empty mapping
    argument feeds ``%(name)s`` placeholders.

    A template that does not match its arguments never raises. The template
    is returned with the arguments appended instead, so a rule always
    reports its failure.
    """
    if not args:
        return template

    values: Any = tuple(args)
    if len(values) == 1 and isinstance(values[0], Mapping) and values[0]:
        values = values[0]

    try:
        return template % values
    except (TypeError, ValueError, KeyError):
        return f"{template} {values!r}"


def iter_errors(err: BaseException | None) -> Iterator[BaseException]:
    """Walk an error and everything it wraps, depth-first.

    Yields ``err`` itself, then its ``__cause__`` chain, then the members of
    any ``MultiError`` encountered along the way. Each error is yielded once.
    """
    seen: set[int] = set()
    stack: list[BaseException] = [err] if err is not None else []

    while stack:
        current = stack.pop()
        if id(current) in seen:
            continue
        seen.add(id(current))
        yield current

        children: list[BaseException] = []
        if current.__cause__ is not None:
            children.append(current.__cause__)
        if isinstance(current, MultiError):
            children.extend(current.errors)
        stack.extend(reversed(children))


def has_kind(err: BaseException | None, kind: ErrorKind) -> bool:
    """Check whether ``err`` or anything it wraps is of the given kind."""
    return any(
        isinstance(e, ValidatorError) and e.kind is kind for e in iter_errors(err)
    )


def is_invalid(err: BaseException | None) -> bool:
    """Check whether ``err`` belongs to the validation-failure category."""
    return has_kind(err, ErrorKind.INVALID)


__all__ = [
    "VALIDATION_ERROR_PREFIX",
    "MULTI_ERROR_HEADER",
    "ErrorKind",
    "ValidatorError",
    "RuleError",
    "MultiError",
    "ValidationError",
    "INVALID_ERROR",
    "format_message",
    "iter_errors",
    "has_kind",
    "is_invalid",
]
