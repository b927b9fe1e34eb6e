import pytest

from richtextbuf.attrs import Color
from richtextbuf.cursor import Affinity, Cursor, LayoutCursor, Metrics


def test_affinity_predicates():
    assert Affinity.BEFORE.before() is True
    assert Affinity.BEFORE.after() is False
    assert Affinity.AFTER.after() is True
    assert Affinity.AFTER.before() is False


@pytest.mark.parametrize("flag", [True, False])
def test_affinity_constructors_round_trip(flag):
    assert Affinity.from_before(flag).before() is flag
    assert Affinity.from_after(flag).after() is flag


def test_affinity_ordering():
    before = Affinity.from_before(True)
    after = Affinity.from_after(True)
    assert before < after
    assert sorted([after, before]) == [Affinity.BEFORE, Affinity.AFTER]


def test_cursor_defaults():
    cursor = Cursor(3, 7)
    assert cursor.line == 3
    assert cursor.index == 7
    assert cursor.affinity is Affinity.BEFORE
    assert cursor.color is None
    assert Cursor() == Cursor(0, 0)


def test_cursor_with_affinity_and_color():
    after = Cursor.with_affinity(1, 2, Affinity.AFTER)
    assert after.affinity is Affinity.AFTER
    red = Color.rgb(0xFF, 0, 0)
    colored = Cursor.with_color(1, 2, red)
    assert colored.color == red
    assert colored.affinity is Affinity.BEFORE
    assert colored != Cursor(1, 2)


def test_cursor_ordering_by_fields():
    assert Cursor(0, 9) < Cursor(1, 0)
    assert Cursor(1, 2) < Cursor(1, 3)
    assert Cursor.with_affinity(1, 2, Affinity.BEFORE) < Cursor.with_affinity(
        1, 2, Affinity.AFTER
    )
    assert Cursor(1, 2) < Cursor.with_color(1, 2, Color.rgb(0, 0, 0))
    assert Cursor(2, 0) >= Cursor(1, 5)
    assert sorted([Cursor(2, 1), Cursor(0, 4), Cursor(2, 0)]) == [
        Cursor(0, 4),
        Cursor(2, 0),
        Cursor(2, 1),
    ]


def test_layout_cursor_fields():
    lc = LayoutCursor(4, 1, 6)
    assert (lc.line, lc.layout, lc.glyph) == (4, 1, 6)


def test_metrics_scale():
    metrics = Metrics(14.0, 20.0)
    assert metrics.scale(1.0) == metrics
    doubled = metrics.scale(2.0)
    assert doubled.scale(0.5) == metrics
    assert doubled.line_height / doubled.font_size == metrics.line_height / metrics.font_size


def test_metrics_display():
    assert str(Metrics(14.0, 20.0)) == "14px / 20px"
    assert str(Metrics(10.5, 14.0)) == "10.5px / 14px"