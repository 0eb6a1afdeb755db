"""
Kiosk Engine — Closure Policy Test Suite
==========================================
Tests for: is_closed, closure_reasons, is_terminal_deactivated.

Tests verify:
- Fail-closed defaults for missing kiosk / config
- Each independent cause on its own
- Monotonicity: adding a cause never reopens a kiosk
- Determinism at a fixed instant
"""

import itertools
from datetime import datetime, timedelta

import pytest

from core.config.rules import GlobalConfig
from core.primitives import SellableItem, Terminal
from core.time.clock import FixedClock
from core.time.temporal import CivilTime, OrderWindow
from engines.kiosk.policies import (
    ClosureCode,
    ClosureReason,
    closure_reasons,
    is_closed,
    is_terminal_deactivated,
    terminal_must_be_active_policy,
)

WEDNESDAY = datetime(2026, 1, 14, 10, 0, 0)
THURSDAY = datetime(2026, 1, 15, 10, 0, 0)
CLOCK = FixedClock(WEDNESDAY)

ITEM = SellableItem(
    item_id="p1",
    name="Kaffe",
    order_window=OrderWindow(CivilTime(8, 0), CivilTime(14, 0)),
)


def make_terminal(**overrides):
    return Terminal(terminal_id="k1", name="Test Kiosk", **overrides)


def make_config(*disabled):
    return GlobalConfig(disabled_weekdays=frozenset(disabled))


def codes(reasons):
    return [r.code for r in reasons]


# ══════════════════════════════════════════════════════════════
# MISSING INPUT
# ══════════════════════════════════════════════════════════════

class TestMissingInput:
    def test_no_terminal_is_closed(self):
        assert is_closed(None, make_config(), [ITEM], clock=CLOCK)

    def test_no_config_is_closed(self):
        assert is_closed(make_terminal(), None, [ITEM], clock=CLOCK)

    def test_both_missing_reports_both(self):
        reasons = closure_reasons(None, None, [ITEM], clock=CLOCK)
        assert codes(reasons) == [ClosureCode.TERMINAL_MISSING, ClosureCode.CONFIG_MISSING]


# ══════════════════════════════════════════════════════════════
# INDIVIDUAL CAUSES
# ══════════════════════════════════════════════════════════════

class TestIndividualCauses:
    def test_open_when_nothing_blocks(self):
        assert not is_closed(make_terminal(), make_config(), [ITEM], clock=CLOCK)
        assert closure_reasons(make_terminal(), make_config(), [ITEM], clock=CLOCK) == ()

    def test_manual_deactivation(self):
        terminal = make_terminal(manually_deactivated=True)
        reasons = closure_reasons(terminal, make_config(), [ITEM], clock=CLOCK)
        assert codes(reasons) == [ClosureCode.MANUALLY_DEACTIVATED]

    def test_manual_deactivation_with_elapsed_until(self):
        terminal = make_terminal(
            manually_deactivated=True,
            deactivated_until=WEDNESDAY - timedelta(days=1),
        )
        assert is_closed(terminal, make_config(), [ITEM], clock=CLOCK)

    def test_deactivated_until_future(self):
        terminal = make_terminal(deactivated_until=WEDNESDAY + timedelta(hours=1))
        reasons = closure_reasons(terminal, make_config(), [ITEM], clock=CLOCK)
        assert codes(reasons) == [ClosureCode.DEACTIVATED_UNTIL]
        assert "14-01-2026 11:00" in reasons[0].message

    def test_deactivated_until_past(self):
        terminal = make_terminal(deactivated_until=WEDNESDAY - timedelta(hours=1))
        assert not is_closed(terminal, make_config(), [ITEM], clock=CLOCK)

    def test_deactivated_until_exactly_now(self):
        terminal = make_terminal(deactivated_until=WEDNESDAY)
        assert not is_closed(terminal, make_config(), [ITEM], clock=CLOCK)

    def test_no_available_items(self):
        reasons = closure_reasons(make_terminal(), make_config(), [], clock=CLOCK)
        assert codes(reasons) == [ClosureCode.NO_AVAILABLE_ITEMS]

    def test_disabled_weekday(self):
        reasons = closure_reasons(make_terminal(), make_config(3), [ITEM], clock=CLOCK)
        assert codes(reasons) == [ClosureCode.WEEKDAY_DISABLED]
        assert "onsdagen" in reasons[0].message

    def test_disabled_weekday_only_affects_that_day(self):
        config = make_config(3)
        assert is_closed(make_terminal(), config, [ITEM], clock=FixedClock(WEDNESDAY))
        assert not is_closed(make_terminal(), config, [ITEM], clock=FixedClock(THURSDAY))

    def test_all_causes_reported_together(self):
        terminal = make_terminal(manually_deactivated=True)
        reasons = closure_reasons(terminal, make_config(3), [], clock=CLOCK)
        assert codes(reasons) == [
            ClosureCode.MANUALLY_DEACTIVATED,
            ClosureCode.NO_AVAILABLE_ITEMS,
            ClosureCode.WEEKDAY_DISABLED,
        ]


# ══════════════════════════════════════════════════════════════
# PROPERTIES
# ══════════════════════════════════════════════════════════════

def _scenario(manual, until_future, weekday_disabled, no_items):
    terminal = make_terminal(
        manually_deactivated=manual,
        deactivated_until=WEDNESDAY + timedelta(hours=1) if until_future else None,
    )
    config = make_config(3) if weekday_disabled else make_config()
    available = [] if no_items else [ITEM]
    return is_closed(terminal, config, available, clock=CLOCK)


class TestMonotonicity:
    @pytest.mark.parametrize(
        "flags", list(itertools.product([False, True], repeat=4)),
    )
    def test_adding_a_cause_never_reopens(self, flags):
        closed = _scenario(*flags)
        for i, flag in enumerate(flags):
            if flag:
                continue
            flipped = list(flags)
            flipped[i] = True
            assert _scenario(*flipped) >= closed
            assert _scenario(*flipped) is True

    def test_closed_iff_any_cause(self):
        for flags in itertools.product([False, True], repeat=4):
            assert _scenario(*flags) == any(flags)


class TestDeterminism:
    def test_same_inputs_same_result(self):
        terminal = make_terminal(deactivated_until=WEDNESDAY + timedelta(minutes=5))
        first = closure_reasons(terminal, make_config(), [ITEM], clock=CLOCK)
        second = closure_reasons(terminal, make_config(), [ITEM], clock=CLOCK)
        assert first == second


# ══════════════════════════════════════════════════════════════
# DERIVED DEACTIVATION & REASON MODEL
# ══════════════════════════════════════════════════════════════

class TestIsTerminalDeactivated:
    def test_missing_terminal(self):
        assert is_terminal_deactivated(None, clock=CLOCK)

    def test_active_terminal(self):
        assert not is_terminal_deactivated(make_terminal(), clock=CLOCK)

    def test_until_future(self):
        terminal = make_terminal(deactivated_until=WEDNESDAY + timedelta(seconds=1))
        assert is_terminal_deactivated(terminal, clock=CLOCK)


class TestClosureReason:
    def test_to_dict(self):
        reason = ClosureReason(code="X", message="Lukket.", policy_name="p")
        assert reason.to_dict() == {"code": "X", "message": "Lukket.", "policy_name": "p"}

    def test_rejects_empty_code(self):
        with pytest.raises(ValueError, match="code"):
            ClosureReason(code="", message="Lukket.", policy_name="p")

    def test_frozen(self):
        reason = ClosureReason(code="X", message="Lukket.", policy_name="p")
        with pytest.raises(AttributeError):
            reason.code = "Y"


class TestActivePolicyAgreesWithTerminal:
    @pytest.mark.parametrize("manual", [False, True])
    @pytest.mark.parametrize("offset", [None, -60, 0, 60])
    def test_reason_iff_terminal_deactivated(self, manual, offset):
        until = None if offset is None else WEDNESDAY + timedelta(minutes=offset)
        terminal = make_terminal(manually_deactivated=manual, deactivated_until=until)

        reason = terminal_must_be_active_policy(terminal, WEDNESDAY)

        assert (reason is not None) == terminal.is_deactivated_at(WEDNESDAY)
        if reason is not None:
            expected = (
                ClosureCode.MANUALLY_DEACTIVATED if manual
                else ClosureCode.DEACTIVATED_UNTIL
            )
            assert reason.code == expected
