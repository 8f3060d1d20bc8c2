"""
Tests for the compliance rules, the checker and the rule registry.
"""

import pytest

from deckframe.core.compliance import ComplianceChecker
from deckframe.core.registry import RuleRegistry, create_default_registry
from deckframe.core.tributary import tributary_width
from deckframe.models import (
    BeamConfig, BeamPosition, BeamSet, ComplianceLimits, DeckPayload, JoistConfig, LedgerConfig,
)
from deckframe.models.context import ComplianceContext
from deckframe.reference import default_reference
from deckframe.rules.base import ComplianceRule


def _joists(**overrides):
    values = dict(
        size="2x12", spacing_in=24, count=7, span_ft=12, cantilever_ft=2,
        allowable_span_ft=12 + 10 / 12, cost=483.0,
    )
    values.update(overrides)
    return JoistConfig(**values)


def _beam(position, **overrides):
    values = dict(
        size="(2)2x10", ply_count=2, dimension="2x10", post_spacing_ft=8.0, post_count=3,
        span_ft=16, tributary_ft=8, table_tributary_ft=8, allowable_span_ft=10.0, cost=249.0,
        position=position,
    )
    values.update(overrides)
    return BeamConfig(**values)


def _context(payload, joists=None, beams=None, limits=None):
    return ComplianceContext(
        payload=DeckPayload.model_validate(payload),
        joists=joists or _joists(),
        beams=beams or BeamSet(outer=_beam(BeamPosition.OUTER), inner=_beam(BeamPosition.INNER)),
        reference=default_reference(),
        limits=limits or ComplianceLimits(),
    )


def _warnings(context):
    return ComplianceChecker().check_context(context).warnings


def test_clean_selection_passes(payload):
    report = ComplianceChecker().check_context(_context(payload))
    assert report.passes
    assert report.warnings == []
    assert report.joist_table == "IRC-2021 R507.6"
    assert report.beam_table == "IRC-2021 R507.5"


def test_decking_spacing_warning(payload):
    payload["decking_type"] = "composite_1in"
    warnings = _warnings(_context(payload))
    assert 'composite_1in requires max 16" joist spacing' in warnings


def test_code_spacing_ceiling(payload):
    limits = ComplianceLimits(max_joist_spacing_in=16)
    warnings = _warnings(_context(payload, limits=limits))
    assert 'Joist spacing 24" exceeds code maximum 16"' in warnings


def test_cantilever_limit(payload):
    ctx = _context(payload, joists=_joists(span_ft=6, cantilever_ft=2))
    warnings = _warnings(ctx)
    assert any(w.startswith("Cantilever 2.00'") for w in warnings)


def test_cantilever_rule_skipped_without_cantilever(payload):
    ctx = _context(payload, joists=_joists(cantilever_ft=0))
    rules = [r.get_id() for r in create_default_registry().get_applicable_rules(ctx)]
    assert "joist.cantilever" not in rules


def test_joist_span_exceeds_table(payload):
    ctx = _context(payload, joists=_joists(span_ft=13))
    warnings = _warnings(ctx)
    assert any("exceeds allowable 12.8'" in w for w in warnings)


def test_joist_margin_tunable(payload):
    assert _warnings(_context(payload)) == []
    warnings = _warnings(_context(payload, limits=ComplianceLimits(span_margin_ratio=0.10)))
    assert warnings == ["Joist 2x12 @ 24\" span 12.0' is within 10% of allowable 12.8'"]


def test_beam_ply_warning(payload):
    thin = _beam(BeamPosition.OUTER, size="(1)2x12", ply_count=1, dimension="2x12",
                 tributary_ft=10, table_tributary_ft=10, allowable_span_ft=7 + 2 / 12,
                 post_spacing_ft=4.0, post_count=5)
    ctx = _context(payload, beams=BeamSet(outer=thin, inner=_beam(BeamPosition.INNER)))
    warnings = _warnings(ctx)
    assert "Outer beam (1)2x12 has 1 ply; 10.0' tributary requires at least 2" in warnings


def test_multi_ply_threshold_tunable(payload):
    thin = _beam(BeamPosition.OUTER, size="(1)2x12", ply_count=1, dimension="2x12",
                 tributary_ft=10, table_tributary_ft=10, allowable_span_ft=7 + 2 / 12,
                 post_spacing_ft=4.0, post_count=5)
    ctx = _context(
        payload,
        beams=BeamSet(outer=thin, inner=_beam(BeamPosition.INNER)),
        limits=ComplianceLimits(multi_ply_tributary_ft=12),
    )
    assert not any("ply" in w for w in _warnings(ctx))


def test_beam_post_spacing_warning(payload):
    long_bay = _beam(BeamPosition.INNER, post_spacing_ft=16.0, post_count=2)
    ctx = _context(payload, beams=BeamSet(outer=_beam(BeamPosition.OUTER), inner=long_bay))
    warnings = _warnings(ctx)
    assert warnings == [
        "Inner beam (2)2x10 post spacing 16.0' exceeds allowable 10.0' for 8.0' tributary"
    ]


def test_beam_without_table_entry(payload):
    missing = _beam(BeamPosition.OUTER, size="(4)2x10", ply_count=4)
    ctx = _context(payload, beams=BeamSet(outer=missing, inner=_beam(BeamPosition.INNER)))
    assert "Outer beam (4)2x10 has no table entry at 8.0' tributary" in _warnings(ctx)


def test_beam_margin_warning(payload):
    tight = _beam(BeamPosition.OUTER, post_spacing_ft=9.8, post_count=3, span_ft=19.6)
    ctx = _context(payload, beams=BeamSet(outer=tight, inner=_beam(BeamPosition.INNER)))
    assert _warnings(ctx) == ["Outer beam (2)2x10 post spacing 9.8' is within 5% of allowable 10.0'"]


def test_ledger_inner_support_is_not_checked_as_beam(payload):
    payload["attachment"] = "ledger"
    ledger = LedgerConfig(span_ft=16, tributary_ft=tributary_width("inner", 12), dimension="2x12")
    ctx = _context(payload, beams=BeamSet(outer=_beam(BeamPosition.OUTER), inner=ledger))
    assert ctx.supported_beams() == [ctx.beams.outer]
    assert _warnings(ctx) == []


@pytest.mark.parametrize("height, warned", [(1.0, False), (2.4, False), (2.5, True), (4, True)])
def test_surface_footing_height(payload, height, warned):
    payload.update(attachment="ledger", footing_type="surface", height_ft=height)
    warnings = _warnings(_context(payload))
    expected = "Surface footings require height < 2.5 ft for ledger attachment"
    assert (expected in warnings) is warned


def test_surface_footing_ignored_for_free_decks(payload):
    payload.update(footing_type="surface", height_ft=6)
    assert _warnings(_context(payload)) == []


def test_warnings_follow_rule_priority(payload):
    payload.update(attachment="ledger", footing_type="surface", height_ft=3,
                   decking_type="wood_5/4")
    warnings = _warnings(_context(payload, joists=_joists(span_ft=13)))
    assert warnings[0].startswith("Surface footings")
    assert warnings[1].startswith("wood_5/4 requires")
    assert "exceeds allowable" in warnings[2]


# --- Registry ---

def test_default_registry_contents():
    ids = [r.get_id() for r in create_default_registry().list_rules()]
    assert ids == [
        "site.surface_footing", "joist.spacing", "joist.cantilever", "joist.span",
        "joist.margin", "beam.ply", "beam.post_spacing", "beam.margin",
    ]


class _FirstRule(ComplianceRule):
    priority = 90
    dependencies = ["test.second"]

    def get_id(self):
        return "test.first"

    def get_name(self):
        return "First"

    def check(self, context):
        return ["first"]


class _SecondRule(ComplianceRule):
    priority = 95

    def get_id(self):
        return "test.second"

    def get_name(self):
        return "Second"

    def check(self, context):
        return ["second"]


def test_dependencies_run_before_dependents(payload):
    registry = RuleRegistry()
    registry.register(_FirstRule())
    registry.register(_SecondRule())
    report = ComplianceChecker(registry).check_context(_context(payload))
    assert report.warnings == ["second", "first"]
    assert not report.passes


def test_registry_unregister_and_lookup():
    registry = create_default_registry()
    assert registry.get_rule("beam.margin") is not None
    registry.unregister("beam.margin")
    assert registry.get_rule("beam.margin") is None
    registry.unregister("beam.margin")
    assert len(registry.list_rules()) == 7


def test_checker_uses_its_limits(payload, reference):
    ctx = _context(payload)
    checker = ComplianceChecker(limits=ComplianceLimits(span_margin_ratio=0.10))
    report = checker.check(ctx.payload, ctx.joists, ctx.beams, reference)
    assert len(report.warnings) == 1
    assert "within 10%" in report.warnings[0]


def test_disabled_rules_are_skipped(payload):
    ctx = _context(payload, limits=ComplianceLimits(span_margin_ratio=0.10, disabled_rules=["joist.margin"]))
    assert _warnings(ctx) == []
    ids = [r.get_id() for r in create_default_registry().get_applicable_rules(ctx)]
    assert "joist.margin" not in ids
    assert "joist.span" in ids


class _LoopRule(ComplianceRule):
    def __init__(self, rule_id, depends_on):
        self.rule_id = rule_id
        self.dependencies = [depends_on]

    def get_id(self):
        return self.rule_id

    def get_name(self):
        return self.rule_id

    def check(self, context):
        return []


def test_dependency_cycle_is_rejected(payload):
    registry = RuleRegistry()
    registry.register(_LoopRule("a", "b"))
    registry.register(_LoopRule("b", "a"))
    with pytest.raises(ValueError, match="cycle"):
        registry.get_applicable_rules(_context(payload))
