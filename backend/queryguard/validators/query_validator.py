"""Query Validator — checks observed query parameters against declared rules.

Usage:
    validator = QueryValidator()
    errors = validator.validate_query({"age": "abc"}, {"age": "number"})
    if errors:
        # Respond 400 with every finding

Checks per parameter, in order, stopping at the first failure:
    1. Name format against the "default" name pattern
    2. Declared in the rule set
    3. Value accepted by the validator registered for its type tag

Lookups are permissive: no "default" pattern, or no validator for a type
tag, means the check passes.
"""

import re
import time
from collections.abc import Iterable, Mapping
from typing import Optional, Union

import structlog

from queryguard.validators.models import (
    ErrorMessage,
    PatternCompileError,
    QueryValidationError,
)
from queryguard.validators.type_checks import (
    DEFAULT_PARAM_PATTERN,
    DEFAULT_PATTERN_NAME,
    TypeValidator,
    builtin_type_validators,
)

logger = structlog.get_logger()

ObservedParams = Union[Mapping[str, str], Iterable[tuple[str, str]]]


def _compile_pattern(name: str, pattern: str) -> re.Pattern:
    try:
        return re.compile(pattern)
    except re.error as e:
        logger.warning("param_pattern_rejected", name=name, pattern=pattern, error=str(e))
        raise PatternCompileError(name, pattern, str(e)) from e


class QueryValidator:
    """Validates query parameters by name format, declaration and type.

    Tables are mutated only through add_param_pattern / add_type_validator.
    Build the validator before serving requests and share it read-only;
    validate_query never writes to either table.
    """

    def __init__(
        self,
        param_patterns: Optional[dict[str, re.Pattern]] = None,
        type_validators: Optional[dict[str, TypeValidator]] = None,
    ):
        """Initialize with the default tables or with pre-built ones.

        Args:
            param_patterns: Compiled name patterns. If None, registers "default".
            type_validators: Type tag → predicate. If None, registers the built-ins.
        """
        if param_patterns is None:
            param_patterns = {
                DEFAULT_PATTERN_NAME: _compile_pattern(DEFAULT_PATTERN_NAME, DEFAULT_PARAM_PATTERN),
            }
        if type_validators is None:
            type_validators = builtin_type_validators()

        self._param_patterns: dict[str, re.Pattern] = dict(param_patterns)
        self._type_validators: dict[str, TypeValidator] = dict(type_validators)

    # ── Extension points ──

    def add_param_pattern(self, name: str, pattern: str) -> None:
        """Compile and register a parameter-name pattern.

        Raises:
            PatternCompileError: pattern is not a valid regular expression.
                The table is left unchanged.
        """
        self._param_patterns[name] = _compile_pattern(name, pattern)

    def add_type_validator(self, name: str, validator: TypeValidator) -> None:
        """Register a type validator, replacing any existing one of that name."""
        self._type_validators[name] = validator

    # ── Read-only views ──

    @property
    def param_patterns(self) -> dict[str, re.Pattern]:
        return dict(self._param_patterns)

    @property
    def type_validators(self) -> dict[str, TypeValidator]:
        return dict(self._type_validators)

    def has_type_validator(self, name: str) -> bool:
        return name in self._type_validators

    # ── Validation ──

    def validate_query(
        self,
        observed: ObservedParams,
        rules: Mapping[str, str],
    ) -> list[QueryValidationError]:
        """Check every observed parameter and collect the findings.

        Args:
            observed: Parameter name → value, or (name, value) pairs.
                Findings follow the iteration order of this argument.
            rules: Expected parameter name → type tag. Declared parameters
                missing from `observed` are not reported.

        Returns:
            List of QueryValidationError (empty if the query is valid)
        """
        start_time = time.perf_counter()

        pairs = observed.items() if isinstance(observed, Mapping) else observed
        errors: list[QueryValidationError] = []
        checked = 0

        for param, value in pairs:
            checked += 1

            if not self._valid_param_name(param):
                errors.append(QueryValidationError(
                    parameter=param,
                    value=value,
                    message=ErrorMessage.INVALID_NAME_FORMAT.value,
                ))
                continue

            if param not in rules:
                errors.append(QueryValidationError(
                    parameter=param,
                    value=value,
                    message=ErrorMessage.UNEXPECTED_PARAMETER.value,
                ))
                continue

            expected_type = rules[param]
            if not self._valid_param_value(value, expected_type):
                errors.append(QueryValidationError(
                    parameter=param,
                    value=value,
                    message=ErrorMessage.INVALID_TYPE_VALUE.value.format(type_tag=expected_type),
                ))

        logger.debug(
            "query_validation_complete",
            checked=checked,
            total_errors=len(errors),
            duration_ms=round((time.perf_counter() - start_time) * 1000, 3),
        )

        return errors

    def _valid_param_name(self, param: str) -> bool:
        pattern = self._param_patterns.get(DEFAULT_PATTERN_NAME)
        if pattern is None:
            return True
        return pattern.search(param) is not None

    def _valid_param_value(self, value: str, expected_type: str) -> bool:
        validator = self._type_validators.get(expected_type)
        if validator is None:
            return True
        return bool(validator(value))


class QueryValidatorBuilder:
    """Collects patterns and type validators, then builds a QueryValidator.

    Starts from the same defaults as QueryValidator(). Pattern errors are
    raised from with_param_pattern, before anything is built.
    """

    def __init__(self, include_defaults: bool = True):
        self._param_patterns: dict[str, re.Pattern] = {}
        self._type_validators: dict[str, TypeValidator] = {}
        if include_defaults:
            self.with_param_pattern(DEFAULT_PATTERN_NAME, DEFAULT_PARAM_PATTERN)
            self._type_validators.update(builtin_type_validators())

    def with_param_pattern(self, name: str, pattern: str) -> "QueryValidatorBuilder":
        self._param_patterns[name] = _compile_pattern(name, pattern)
        return self

    def with_type_validator(self, name: str, validator: TypeValidator) -> "QueryValidatorBuilder":
        self._type_validators[name] = validator
        return self

    def build(self) -> QueryValidator:
        return QueryValidator(
            param_patterns=self._param_patterns,
            type_validators=self._type_validators,
        )


# Module-level singleton, shared read-only by request handlers
query_validator = QueryValidatorBuilder().build()
