"""Pure-function rules engine pattern.

Rules are stateless functions: (payload, context) -> RuleResult.
No store access, no side effects. This makes them:
- Trivially testable (pure input/output)
- Composable (chain multiple rules)
- Explainable (each failure says which rule and why)

Example domain: checking a catalog payload before it reaches the store.
"""

from dataclasses import dataclass, field
from typing import Any, Iterable, Mapping


# ---------------------------------------------------------------------------
# Result types
# ---------------------------------------------------------------------------

@dataclass
class RuleResult:
    """Outcome of a single rule evaluation."""

    passed: bool
    rule_name: str
    message: str
    details: dict[str, Any] = field(default_factory=dict)


@dataclass
class RuleSetResult:
    """Aggregate outcome of multiple rules."""

    all_passed: bool
    results: list[RuleResult]
    failed: list[RuleResult] = field(default_factory=list)

    def __post_init__(self):
        self.failed = [r for r in self.results if not r.passed]
        self.all_passed = len(self.failed) == 0


# ---------------------------------------------------------------------------
# Generic rules
# ---------------------------------------------------------------------------

def check_required_fields(payload: Mapping[str, Any], fields: Iterable[str]) -> RuleResult:
    """Check that every named field is present and truthy.

    Empty strings, zero and None all count as missing. The missing list keeps
    the order of `fields`.
    """
    missing = [name for name in fields if not payload.get(name)]
    passed = not missing

    return RuleResult(
        passed=passed,
        rule_name="required_fields",
        message=(
            "All required fields present"
            if passed
            else f"Missing required fields: {', '.join(missing)}"
        ),
        details={"missing": missing},
    )


# ---------------------------------------------------------------------------
# Rule composition
# ---------------------------------------------------------------------------

def evaluate_rules(*rules: RuleResult) -> RuleSetResult:
    """Compose multiple rule results into a single aggregate.

    Example::

        result = evaluate_rules(
            check_required_fields(payload, ["title", "author"]),
        )
        if not result.all_passed:
            reject(result.failed)
    """
    return RuleSetResult(
        all_passed=all(r.passed for r in rules),
        results=list(rules),
    )
