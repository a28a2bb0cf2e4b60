"""
Tolerance registry.

An ordered list of rules, each tagged with six matchers (interpreter,
library, platform, numeric type, dataset, function) and the largest peak
and RMS errors, in epsilons, that are acceptable where the rule applies.

Lookup policy: rules are scanned in registration order and the FIRST rule
whose six matchers all accept wins. Register platform-specific rules
before general ones. If nothing matches, DEFAULT_TOLERANCE applies: the
strictest built-in allowance of 1 epsilon peak and 1 epsilon RMS.

A matcher is either a predicate str -> bool or a pattern string. Pattern
strings are Python regular expressions matched against the whole field
(re.fullmatch), so 'double' does not match 'long double'.
"""

from __future__ import annotations

import json
import re
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any, Callable, Iterable, Union

from pyaccuracy.core.environment import Environment
from pyaccuracy.core.exceptions import ValidationError
from pyaccuracy.core.validation import check_tolerance


Matcher = Union[str, Callable[[str], bool]]

MATCH_ANY = ".*"

MATCHER_FIELDS = ("interpreter", "library", "platform", "type_name", "dataset", "function")


def _check_matcher(matcher: Any, name: str) -> Matcher:
    if callable(matcher):
        return matcher
    if not isinstance(matcher, str):
        raise ValidationError(
            f"{name}: expected a pattern string or predicate, got {type(matcher).__name__}"
        )
    try:
        re.compile(matcher)
    except re.error as e:
        raise ValidationError(f"{name}: invalid pattern {matcher!r}: {e}") from e
    return matcher


def _accepts(matcher: Matcher, value: str) -> bool:
    if callable(matcher):
        return bool(matcher(value))
    return re.fullmatch(matcher, value) is not None


@dataclass(frozen=True)
class ToleranceRule:
    """
    One tolerance table entry.

    Attributes:
        interpreter: Matcher for Environment.interpreter
        library: Matcher for Environment.library
        platform: Matcher for Environment.platform
        type_name: Matcher for the numeric type name
        dataset: Matcher for the dataset name
        function: Matcher for the function name
        max_peak: Largest acceptable peak error, in epsilons
        max_rms: Largest acceptable RMS error, in epsilons
        label: Free-text origin of the rule, shown in reports
    """
    interpreter: Matcher = MATCH_ANY
    library: Matcher = MATCH_ANY
    platform: Matcher = MATCH_ANY
    type_name: Matcher = MATCH_ANY
    dataset: Matcher = MATCH_ANY
    function: Matcher = MATCH_ANY
    max_peak: float = 1.0
    max_rms: float = 1.0
    label: str = ""

    @classmethod
    def create(cls, **kwargs: Any) -> 'ToleranceRule':
        """Validated constructor."""
        for name in MATCHER_FIELDS:
            if name in kwargs:
                kwargs[name] = _check_matcher(kwargs[name], name)
        for name in ("max_peak", "max_rms"):
            if name in kwargs:
                kwargs[name] = check_tolerance(kwargs[name], name)
        return cls(**kwargs)

    def matches(
        self,
        environment: Environment,
        type_name: str,
        dataset_name: str,
        function_name: str,
    ) -> bool:
        return (
            _accepts(self.interpreter, environment.interpreter)
            and _accepts(self.library, environment.library)
            and _accepts(self.platform, environment.platform)
            and _accepts(self.type_name, type_name)
            and _accepts(self.dataset, dataset_name)
            and _accepts(self.function, function_name)
        )

    def to_dict(self) -> dict[str, Any]:
        """
        JSON-serialisable form.

        Raises:
            ValidationError: If a matcher is a predicate, which has no
                JSON form
        """
        out: dict[str, Any] = {}
        for name in MATCHER_FIELDS:
            matcher = getattr(self, name)
            if callable(matcher):
                raise ValidationError(
                    f"{name}: predicate matchers cannot be serialised"
                )
            out[name] = matcher
        out["max_peak"] = self.max_peak
        out["max_rms"] = self.max_rms
        if self.label:
            out["label"] = self.label
        return out

    def __str__(self) -> str:
        label = f" [{self.label}]" if self.label else ""
        return f"max peak {self.max_peak:g} eps, max RMS {self.max_rms:g} eps{label}"


DEFAULT_TOLERANCE = ToleranceRule(max_peak=1.0, max_rms=1.0, label="default")


class ToleranceRegistry:
    """
    Ordered tolerance rules with first-match lookup.

    Rules are read-only once a suite starts; the registry itself is the
    only state shared between dataset runs.
    """

    def __init__(
        self,
        rules: Iterable[ToleranceRule] = (),
        default: ToleranceRule = DEFAULT_TOLERANCE,
    ):
        self._rules: list[ToleranceRule] = []
        for rule in rules:
            self.add(rule)
        self._default = default

    @property
    def rules(self) -> tuple[ToleranceRule, ...]:
        return tuple(self._rules)

    @property
    def default(self) -> ToleranceRule:
        return self._default

    def __len__(self) -> int:
        return len(self._rules)

    def add(self, rule: ToleranceRule) -> ToleranceRule:
        """Append an existing rule."""
        if not isinstance(rule, ToleranceRule):
            raise ValidationError(
                f"rule: expected ToleranceRule, got {type(rule).__name__}"
            )
        self._rules.append(rule)
        return rule

    def register(
        self,
        interpreter: Matcher,
        library: Matcher,
        platform: Matcher,
        type_name: Matcher,
        dataset: Matcher,
        function: Matcher,
        max_peak: float,
        max_rms: float,
        label: str = "",
    ) -> ToleranceRule:
        """
        Append a rule.

        Args:
            interpreter, library, platform, type_name, dataset, function:
                Pattern strings or predicates; use MATCH_ANY for "any"
            max_peak: Allowed peak error, in epsilons
            max_rms: Allowed RMS error, in epsilons
            label: Optional note shown in reports

        Returns:
            The new rule

        Raises:
            ValidationError: If a pattern does not compile or a tolerance is
                negative or non-finite
        """
        rule = ToleranceRule.create(
            interpreter=interpreter,
            library=library,
            platform=platform,
            type_name=type_name,
            dataset=dataset,
            function=function,
            max_peak=max_peak,
            max_rms=max_rms,
            label=label,
        )
        return self.add(rule)

    def lookup(
        self,
        environment: Environment,
        type_name: str,
        dataset_name: str,
        function_name: str,
    ) -> ToleranceRule:
        """
        First rule, in registration order, accepting all six fields.

        Returns DEFAULT_TOLERANCE (or the registry's default) if none does.
        """
        for rule in self._rules:
            if rule.matches(environment, type_name, dataset_name, function_name):
                return rule
        return self._default

    def with_rules_first(self, rules: Iterable[ToleranceRule]) -> 'ToleranceRegistry':
        """New registry with the given rules ahead of this one's."""
        return ToleranceRegistry([*rules, *self._rules], default=self._default)

    # --- JSON ---

    def to_dict(self) -> dict[str, Any]:
        return {
            "rules": [rule.to_dict() for rule in self._rules],
            "default": {
                "max_peak": self._default.max_peak,
                "max_rms": self._default.max_rms,
            },
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> 'ToleranceRegistry':
        """
        Build a registry from its dict form.

        Missing matcher fields default to MATCH_ANY; the default tolerance
        defaults to DEFAULT_TOLERANCE.

        Raises:
            ValidationError: If the structure or any rule is invalid
        """
        if not isinstance(data, dict) or "rules" not in data:
            raise ValidationError("tolerance file: expected an object with a 'rules' list")
        if not isinstance(data["rules"], list):
            raise ValidationError("tolerance file: 'rules' must be a list")
        rules = []
        for i, entry in enumerate(data["rules"]):
            if not isinstance(entry, dict):
                raise ValidationError(f"rules[{i}]: expected an object")
            missing = [k for k in ("max_peak", "max_rms") if k not in entry]
            if missing:
                raise ValidationError(f"rules[{i}]: missing keys {missing}")
            unknown = set(entry) - set(MATCHER_FIELDS) - {"max_peak", "max_rms", "label"}
            if unknown:
                raise ValidationError(f"rules[{i}]: unknown keys {sorted(unknown)}")
            rules.append(ToleranceRule.create(**entry))

        default = DEFAULT_TOLERANCE
        if "default" in data:
            d = data["default"]
            if not isinstance(d, dict):
                raise ValidationError("default: expected an object with max_peak and max_rms")
            default = replace(
                DEFAULT_TOLERANCE,
                max_peak=check_tolerance(d.get("max_peak", 1.0), "default.max_peak"),
                max_rms=check_tolerance(d.get("max_rms", 1.0), "default.max_rms"),
            )
        return cls(rules, default=default)

    @classmethod
    def from_json(cls, path: str | Path) -> 'ToleranceRegistry':
        path = Path(path)
        try:
            with open(path, encoding="utf-8") as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise ValidationError(f"{path.name}: invalid JSON: {e}") from e
        except UnicodeDecodeError as e:
            raise ValidationError(f"{path.name}: not UTF-8 text: {e}") from e
        return cls.from_dict(data)

    def to_json(self, path: str | Path) -> Path:
        path = Path(path)
        with open(path, "w", encoding="utf-8") as f:
            json.dump(self.to_dict(), f, indent=2)
        return path
