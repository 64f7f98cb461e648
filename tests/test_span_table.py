import pytest

from widget_shadows.host.text import Spanned, StyleSpan, URLSpan
from widget_shadows.shadows.text import EditableText, InvalidRangeError, SpanTable


def make_table(length: int = 10) -> tuple[SpanTable, int]:
    return SpanTable(), length


def test_point_queries_follow_coverage_rules() -> None:
    table, length = make_table(4)
    a, b = StyleSpan(1), StyleSpan(2)

    table.set_span(a, 0, 2, Spanned.SPAN_EXCLUSIVE_EXCLUSIVE, length=length)
    table.set_span(b, 3, 3, Spanned.SPAN_EXCLUSIVE_EXCLUSIVE, length=length)

    assert [table.span_at(pos) for pos in range(4)] == [a, a, None, b]


def test_inclusive_end_covers_end_offset() -> None:
    table, length = make_table(4)
    span = StyleSpan(1)

    table.set_span(span, 0, 2, Spanned.SPAN_INCLUSIVE_INCLUSIVE, length=length)

    assert table.span_at(2) is span
    assert table.span_at(3) is None


def test_resetting_span_moves_it_to_the_top() -> None:
    table, length = make_table(6)
    a, b = StyleSpan(1), StyleSpan(2)
    table.set_span(a, 0, 4, 0, length=length)
    table.set_span(b, 0, 4, 0, length=length)

    table.set_span(a, 1, 3, 0, length=length)

    assert len(table) == 2
    assert table.span_at(2) is a
    assert table.span_at(0) is b
    assert table.record_for(a).start == 1


def test_invalid_span_range_raises() -> None:
    table, length = make_table(3)

    with pytest.raises(InvalidRangeError):
        table.set_span(StyleSpan(1), 2, 5, 0, length=length)
    assert len(table) == 0


def test_remove_span() -> None:
    table, length = make_table()
    span = URLSpan("https://example.com")
    table.set_span(span, 0, 5, 0, length=length)

    assert table.remove_span(span) is True
    assert table.remove_span(span) is False
    assert table.span_at(1) is None


def test_next_transition_stops_at_boundaries() -> None:
    table, length = make_table()
    table.set_span(StyleSpan(1), 2, 5, 0, length=length)
    table.set_span(URLSpan("x"), 4, 8, 0, length=length)

    assert table.next_transition(0, 10) == 2
    assert table.next_transition(2, 10) == 4
    assert table.next_transition(4, 10, URLSpan) == 8
    assert table.next_transition(8, 10) == 10


def test_spans_shift_with_edits_before_them() -> None:
    editable = EditableText("hello world")
    span = StyleSpan(1)
    editable.set_span(span, 6, 11, Spanned.SPAN_EXCLUSIVE_EXCLUSIVE)

    editable.insert(0, ">> ")

    assert (editable.get_span_start(span), editable.get_span_end(span)) == (9, 14)
    assert editable.sub_sequence(9, 14) == "world"


def test_insertion_at_endpoints_follows_point_and_mark() -> None:
    editable = EditableText("abcd")
    exclusive = StyleSpan(1)
    inclusive = StyleSpan(2)
    editable.set_span(exclusive, 1, 3, Spanned.SPAN_EXCLUSIVE_EXCLUSIVE)
    editable.set_span(inclusive, 1, 3, Spanned.SPAN_INCLUSIVE_INCLUSIVE)

    editable.insert(3, "XY")
    editable.insert(1, "_")

    # exclusive start is POINT and moves past the insertion; its end is MARK
    assert (editable.get_span_start(exclusive), editable.get_span_end(exclusive)) == (2, 4)
    # inclusive start is MARK and stays; its end is POINT and grew with "XY"
    assert (editable.get_span_start(inclusive), editable.get_span_end(inclusive)) == (1, 6)


def test_deleting_a_spanned_range_collapses_the_span() -> None:
    editable = EditableText("abcdef")
    span = StyleSpan(1)
    editable.set_span(span, 2, 4, 0)

    editable.delete(1, 5)

    assert editable.text == "af"
    assert (editable.get_span_start(span), editable.get_span_end(span)) == (1, 1)


def test_unknown_span_reports_defaults() -> None:
    editable = EditableText("abc")
    stranger = StyleSpan(9)

    assert editable.get_span_start(stranger) == -1
    assert editable.get_span_end(stranger) == -1
    assert editable.get_span_flags(stranger) == 0


def test_replacing_over_a_mark_span_collapses_to_its_start() -> None:
    editable = EditableText("abcd")
    span = StyleSpan(1)
    editable.set_span(span, 0, 2, 0)

    editable.set_text("wxyz")

    assert (editable.get_span_start(span), editable.get_span_end(span)) == (0, 0)


def test_replacing_over_a_point_end_keeps_it_after_the_new_text() -> None:
    editable = EditableText("abcd")
    span = StyleSpan(1)
    editable.set_span(span, 0, 2, Spanned.SPAN_INCLUSIVE_INCLUSIVE)

    editable.set_text("wxyz")

    assert (editable.get_span_start(span), editable.get_span_end(span)) == (0, 4)


def test_replace_inside_exclusive_span_moves_point_start_past_new_text() -> None:
    editable = EditableText("abcdef")
    span = StyleSpan(1)
    editable.set_span(span, 2, 5, Spanned.SPAN_EXCLUSIVE_EXCLUSIVE)

    editable.replace(1, 3, "XYZ")

    assert editable.text == "aXYZdef"
    # start 2 sat inside the replaced range; POINT puts it after "XYZ"
    assert (editable.get_span_start(span), editable.get_span_end(span)) == (4, 6)
