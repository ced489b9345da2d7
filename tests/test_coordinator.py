# tests/test_coordinator.py
from __future__ import annotations

import logging

import pytest

from stylecore.catalog import OptionCatalog
from stylecore.coordinator import SelectionCoordinator
from stylecore.errors import OptionValueMismatch, ReentrantApplyNotAllowed, UnknownOptionKey


def test_current_defined_after_construction(font_coord) -> None:
    assert font_coord.current() == ("Helvetica", "Helvetica")
    assert font_coord.value == "Helvetica"
    assert font_coord.key == "Helvetica"


def test_last_apply_wins_and_always_notifies(font_coord, recorder_cls) -> None:
    """
    after the Nth apply, current() == Nth args; repeated identical values
    still notify (no change detection).
    """
    rec = recorder_cls()
    font_coord.subscribe(rec)

    seq = [("Courier", "Courier"), ("Courier", "Courier"), ("Arial", "Arial"), ("Helvetica", "Helvetica")]
    for i, (v, k) in enumerate(seq, start=1):
        font_coord.apply_selection(v, k)
        assert font_coord.current() == (v, k)
        assert len(rec.calls) == i

    assert rec.calls == seq


def test_subscribers_run_in_subscription_order(font_coord, recorder_cls) -> None:
    order: list[str] = []
    a = recorder_cls("a", order)
    b = recorder_cls("b", order)
    c = recorder_cls("c", order)
    for fn in (a, b, c):
        font_coord.subscribe(fn)

    font_coord.apply_selection("Futura", "Futura")
    assert order == ["a", "b", "c"]
    assert a.calls == b.calls == c.calls == [("Futura", "Futura")]


def test_unsubscribe_inside_callback_affects_only_later_passes(font_coord) -> None:
    calls: list[str] = []
    holder = {}

    def once(value, key) -> None:
        calls.append(f"once:{key}")
        font_coord.unsubscribe(holder["h"])

    def always(value, key) -> None:
        calls.append(f"always:{key}")

    holder["h"] = font_coord.subscribe(once)
    font_coord.subscribe(always)

    font_coord.apply_selection("Avenir", "Avenir")
    assert calls == ["once:Avenir", "always:Avenir"]

    font_coord.apply_selection("Georgia", "Georgia")
    assert calls == ["once:Avenir", "always:Avenir", "always:Georgia"]
    assert font_coord.subscriber_count() == 1


def test_unsubscribing_later_subscriber_mid_pass_keeps_current_pass(font_coord, recorder_cls) -> None:
    late = recorder_cls("late")
    holder = {}

    def first(value, key) -> None:
        font_coord.unsubscribe(holder["late"])

    font_coord.subscribe(first)
    holder["late"] = font_coord.subscribe(late)

    font_coord.apply_selection("Verdana", "Verdana")
    assert late.calls == [("Verdana", "Verdana")]

    font_coord.apply_selection("Arial", "Arial")
    assert late.calls == [("Verdana", "Verdana")]


def test_subscribe_inside_callback_starts_next_pass(font_coord, recorder_cls) -> None:
    added = recorder_cls()

    def adder(value, key) -> None:
        if not added.calls and font_coord.subscriber_count() == 1:
            font_coord.subscribe(added)

    font_coord.subscribe(adder)
    font_coord.apply_selection("Courier", "Courier")
    assert added.calls == []

    font_coord.apply_selection("Arial", "Arial")
    assert added.calls == [("Arial", "Arial")]


def test_unsubscribe_twice_is_harmless(font_coord, recorder_cls) -> None:
    h = font_coord.subscribe(recorder_cls())
    assert font_coord.unsubscribe(h) is True
    assert font_coord.unsubscribe(h) is False


def test_subscribe_none_rejected(font_coord) -> None:
    with pytest.raises(ValueError):
        font_coord.subscribe(None)  # type: ignore[arg-type]


def test_reentrant_apply_rejected(font_coord, recorder_cls) -> None:
    after = recorder_cls()

    def bad(value, key) -> None:
        font_coord.apply_selection("Arial", "Arial")

    font_coord.subscribe(bad)
    font_coord.subscribe(after)

    with pytest.raises(ReentrantApplyNotAllowed):
        font_coord.apply_selection("Courier", "Courier")

    # outer value stays applied; later subscribers in that pass did not run
    assert font_coord.current() == ("Courier", "Courier")
    assert after.calls == []
    assert font_coord.is_notifying is False


def test_coordinator_usable_after_reentrant_error(font_coord, recorder_cls) -> None:
    armed = {"on": True}

    def maybe_bad(value, key) -> None:
        if armed["on"]:
            font_coord.apply_selection("x", "x")

    rec = recorder_cls()
    font_coord.subscribe(maybe_bad)
    font_coord.subscribe(rec)

    with pytest.raises(ReentrantApplyNotAllowed):
        font_coord.apply_selection("Courier", "Courier")

    armed["on"] = False
    font_coord.apply_selection("Futura", "Futura")
    assert rec.calls == [("Futura", "Futura")]


def test_failing_subscriber_is_logged_and_pass_continues(font_coord, recorder_cls, caplog) -> None:
    def boom(value, key) -> None:
        raise RuntimeError("boom")

    rec = recorder_cls()
    font_coord.subscribe(boom)
    font_coord.subscribe(rec)

    with caplog.at_level(logging.ERROR, logger="stylecore.coordinator"):
        font_coord.apply_selection("Gill Sans", "Gill Sans")

    assert rec.calls == [("Gill Sans", "Gill Sans")]
    assert any("subscriber failed" in r.getMessage() for r in caplog.records)


def test_independent_coordinators_do_not_interfere(recorder_cls) -> None:
    a = SelectionCoordinator("Helvetica", "Helvetica", attribute="font")
    b = SelectionCoordinator("24", "24", attribute="size")
    ra, rb = recorder_cls(), recorder_cls()
    a.subscribe(ra)
    b.subscribe(rb)

    def cross(value, key) -> None:
        # applying on a *different* coordinator is not re-entrant
        b.apply_selection("36", "36")

    a.subscribe(cross)
    a.apply_selection("Courier", "Courier")

    assert b.current() == ("36", "36")
    assert ra.calls == [("Courier", "Courier")]
    assert rb.calls == [("36", "36")]


def test_bound_catalog_rejects_unknown_key(two_fonts, recorder_cls) -> None:
    coord = SelectionCoordinator("Helvetica", "Helvetica", catalog=two_fonts)
    rec = recorder_cls()
    coord.subscribe(rec)

    with pytest.raises(UnknownOptionKey):
        coord.apply_selection("Wingdings", "Wingdings")

    assert coord.current() == ("Helvetica", "Helvetica")
    assert rec.calls == []
    assert coord.attribute == "font"


def test_bound_catalog_rejects_mismatched_value(two_fonts, recorder_cls) -> None:
    coord = SelectionCoordinator("Helvetica", "Helvetica", catalog=two_fonts)
    rec = recorder_cls()
    coord.subscribe(rec)

    with pytest.raises(OptionValueMismatch):
        coord.apply_selection("Wingdings", "Courier")

    assert coord.current() == ("Helvetica", "Helvetica")
    assert rec.calls == []

    coord.apply_selection("Courier", "Courier")
    assert coord.current() == ("Courier", "Courier")


def test_default_need_not_be_in_bound_catalog() -> None:
    cat = OptionCatalog([("a", 1)], name="n")
    coord = SelectionCoordinator(0, "zero", catalog=cat)
    assert coord.current() == (0, "zero")
