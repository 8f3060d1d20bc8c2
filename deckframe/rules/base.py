"""Abstract base class for all compliance rules.

Every rule in the system implements this interface. Rules are:
- Self-contained: each checks one code requirement
- Composable: multiple rules run in sequence via the registry
- Conditional: each rule decides if it applies to the current context
"""

from __future__ import annotations
from abc import ABC, abstractmethod

from deckframe.models.context import ComplianceContext


class ComplianceRule(ABC):
    """
    Base class for all compliance rules.

    Subclasses implement `applies()` and `check()`.
    The checker queries the registry, filters by `applies()`,
    sorts by `priority`, and collects `check()` warnings in order.
    """

    # Lower priority = runs first, so its warnings are listed first. Default 100.
    priority: int = 100

    # IDs of rules whose warnings must be listed before this one's.
    dependencies: list[str] = []

    @abstractmethod
    def get_id(self) -> str:
        """Unique identifier for this rule (e.g., 'joist.spacing')."""
        ...

    @abstractmethod
    def get_name(self) -> str:
        """Human-readable name (e.g., 'Joist Spacing Limit')."""
        ...

    def applies(self, context: ComplianceContext) -> bool:
        """Return True if this rule should run for the given context."""
        return True

    @abstractmethod
    def check(self, context: ComplianceContext) -> list[str]:
        """Return warning messages; an empty list means the rule is satisfied."""
        ...
