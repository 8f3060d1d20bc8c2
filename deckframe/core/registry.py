"""Rule registry — stores and orders compliance rules."""

from __future__ import annotations

from deckframe.models.context import ComplianceContext
from deckframe.rules.base import ComplianceRule


class RuleRegistry:
    """
    Keyed collection of compliance rules.

    A check asks for the rules that apply to its context; they come back
    sorted by priority, with every rule placed after the rules it depends on.
    Rules named in ``ComplianceLimits.disabled_rules`` are skipped.
    """

    def __init__(self) -> None:
        self._rules: dict[str, ComplianceRule] = {}

    def register(self, rule: ComplianceRule) -> None:
        self._rules[rule.get_id()] = rule

    def unregister(self, rule_id: str) -> None:
        self._rules.pop(rule_id, None)

    def get_rule(self, rule_id: str) -> ComplianceRule | None:
        return self._rules.get(rule_id)

    def list_rules(self) -> list[ComplianceRule]:
        """All registered rules, in registration order."""
        return list(self._rules.values())

    def get_applicable_rules(self, context: ComplianceContext) -> list[ComplianceRule]:
        disabled = set(context.limits.disabled_rules)
        active = [
            rule for rule_id, rule in self._rules.items()
            if rule_id not in disabled and rule.applies(context)
        ]
        return self._ordered(sorted(active, key=lambda r: r.priority))

    @staticmethod
    def _ordered(rules: list[ComplianceRule]) -> list[ComplianceRule]:
        """
        Depth-first topological order over the given rules.

        Dependencies on rules that are absent (not applicable, disabled or
        never registered) are ignored. A dependency cycle raises ValueError.
        """
        by_id = {r.get_id(): r for r in rules}
        done: set[str] = set()
        in_progress: set[str] = set()
        ordered: list[ComplianceRule] = []

        def place(rule_id: str) -> None:
            if rule_id in done or rule_id not in by_id:
                return
            if rule_id in in_progress:
                raise ValueError(f"Compliance rule dependency cycle at {rule_id!r}")
            in_progress.add(rule_id)
            for dep_id in by_id[rule_id].dependencies:
                place(dep_id)
            in_progress.discard(rule_id)
            done.add(rule_id)
            ordered.append(by_id[rule_id])

        for rule in rules:
            place(rule.get_id())
        return ordered


def create_default_registry() -> RuleRegistry:
    """Registry holding every built-in deck compliance rule."""
    from deckframe.rules.joists import (
        JoistSpacingRule, JoistSpanRule, JoistMarginRule, CantileverRule,
    )
    from deckframe.rules.beams import BeamPlyRule, BeamPostSpacingRule, BeamMarginRule
    from deckframe.rules.site import SurfaceFootingRule

    registry = RuleRegistry()
    for rule in (
        SurfaceFootingRule(),
        JoistSpacingRule(),
        CantileverRule(),
        JoistSpanRule(),
        JoistMarginRule(),
        BeamPlyRule(),
        BeamPostSpacingRule(),
        BeamMarginRule(),
    ):
        registry.register(rule)
    return registry
