"""Composable validation rules.

A rule is a zero-argument callable that returns ``None`` when its condition
holds and an exception instance describing the problem when it does not.
Rules are built up front, combined with ``assert_any``, ``assert_all`` and
``assert_if``, and nothing runs until the tree is handed to ``validate``.

Example:
    ```python
    from dataknobs_validator import assert_all, assert_if, assert_that, validate

    err = validate(
        assert_all(
            assert_that(amount > 0, "amount must be positive, got %s", amount),
            assert_if(
                currency is not None,
                assert_that(currency in {"USD", "EUR"}, "unsupported currency %r", currency),
            ),
        )
    )
    if err is not None:
        logger.warning("Rejected payment: %s", err)
    ```

Failures are returned, not raised. Use ``check`` where raising is more
convenient:

    ```python
    check(assert_that(user.is_active, "user %s is inactive", user.id))
    ```
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any, Optional

from dataknobs_validator.exceptions import MultiError, RuleError, ValidationError

logger = logging.getLogger(__name__)

Rule = Callable[[], Optional[BaseException]]
"""A deferred check: returns ``None`` on success or the failure on error."""


def assert_that(test: Any, message: str, *args: Any) -> Rule:
    """Create a rule that fails when ``test`` is false.

    ``args`` are captured now and interpolated into ``message`` with ``%``
    only if the rule runs and fails.

    Args:
        test: The condition to check; any truthy value passes.
        message: Failure message, optionally a ``%``-style template.
        *args: Values interpolated into ``message``.

    Returns:
        A rule yielding a ``RuleError`` when ``test`` is falsy.
    """
    passed = bool(test)

    def _rule() -> Optional[BaseException]:
        if passed:
            return None
        return RuleError(message, args)

    return _rule


rule = assert_that


def assert_if(test: Any, inner: Rule) -> Rule:
    """Create a rule that only runs ``inner`` when ``test`` is true.

    When ``test`` is false the returned rule always passes and ``inner`` is
    never invoked.
    """

    def _rule() -> Optional[BaseException]:
        if test:
            return inner()
        return None

    return _rule


def assert_any(*rules: Rule) -> Rule:
    """Create a rule that stops at the first failing sub-rule.

    Sub-rules run in order. The first error is returned as-is and the
    remaining sub-rules are not invoked. An empty list passes.
    """

    def _rule() -> Optional[BaseException]:
        for index, sub_rule in enumerate(rules):
            err = sub_rule()
            if err is not None:
                logger.debug(
                    "Rule %d of %d failed, skipping the rest", index + 1, len(rules)
                )
                return err
        return None

    return _rule


def assert_all(*rules: Rule) -> Rule:
    """Create a rule that runs every sub-rule and reports all failures.

    Every sub-rule is invoked exactly once, in order, even after a failure.

    Returns:
        A rule yielding ``None`` when all sub-rules pass, otherwise a
        ``MultiError`` holding each failure in input order.
    """

    def _rule() -> Optional[BaseException]:
        errors = [err for err in (sub_rule() for sub_rule in rules) if err is not None]
        if not errors:
            return None
        logger.debug("%d of %d rules failed", len(errors), len(rules))
        return MultiError(errors)

    return _rule


def validate(root_rule: Rule) -> ValidationError | None:
    """Evaluate a rule tree.

    Apply this once, at the top of the tree. Nested calls would wrap the
    same failure twice.

    Args:
        root_rule: The root of the rule tree.

    Returns:
        ``None`` if the rule passed, otherwise a ``ValidationError`` wrapping
        the failure the rule returned.
    """
    err = root_rule()
    if err is None:
        return None
    logger.debug("Validation failed: %s", err)
    return ValidationError(err)


def check(root_rule: Rule) -> None:
    """Evaluate a rule tree and raise on failure.

    Raises:
        ValidationError: If the rule tree failed. Its ``__cause__`` is the
            original failure.
    """
    err = validate(root_rule)
    if err is not None:
        raise err


__all__ = [
    "Rule",
    "assert_that",
    "rule",
    "assert_if",
    "assert_any",
    "assert_all",
    "validate",
    "check",
]
