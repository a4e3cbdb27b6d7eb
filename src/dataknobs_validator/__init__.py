"""Declarative validation rules for dataknobs packages.

Express conditions as rules, combine them, and evaluate the result into a
single error (or ``None``):

- **Rules**: ``assert_that`` (alias ``rule``) builds a rule from a boolean test
- **Combinators**: ``assert_any`` (first failure), ``assert_all`` (every
  failure), ``assert_if`` (conditional)
- **Evaluation**: ``validate`` returns a ``ValidationError`` or ``None``;
  ``check`` raises instead
- **Inspection**: ``is_invalid``, ``has_kind`` and ``iter_errors`` walk the
  wrapped error chain

Example:
    ```python
    from dataknobs_validator import assert_all, assert_that, is_invalid, validate

    err = validate(
        assert_all(
            assert_that(2 + 2 == 4, "two plus two should equal four"),
            assert_that(3 + 3 == 7, "three plus three should equal %d", 7),
        )
    )
    is_invalid(err)  # True
    print(err)
    # validation error: multiple errors:
    # three plus three should equal 7
    ```
"""

from dataknobs_validator.exceptions import (
    INVALID_ERROR,
    MULTI_ERROR_HEADER,
    VALIDATION_ERROR_PREFIX,
    ErrorKind,
    MultiError,
    RuleError,
    ValidationError,
    ValidatorError,
    format_message,
    has_kind,
    is_invalid,
    iter_errors,
)
from dataknobs_validator.rules import (
    Rule,
    assert_all,
    assert_any,
    assert_if,
    assert_that,
    check,
    rule,
    validate,
)

__version__ = "0.1.0"

__all__ = [
    # Version
    "__version__",
    # Rules
    "Rule",
    "assert_that",
    "rule",
    "assert_if",
    "assert_any",
    "assert_all",
    "validate",
    "check",
    # Exceptions
    "ErrorKind",
    "ValidatorError",
    "RuleError",
    "MultiError",
    "ValidationError",
    "INVALID_ERROR",
    "VALIDATION_ERROR_PREFIX",
    "MULTI_ERROR_HEADER",
    # Inspection
    "format_message",
    "iter_errors",
    "has_kind",
    "is_invalid",
]
