from algebrapad.model.geometry import Rect, halve
from algebrapad.model.primitives import CursorMark, DividerLine, Layout, TextRun


def test_halve_truncates_toward_zero():
    assert halve(3) == 1
    assert halve(-3) == -1
    assert halve(-4) == -2
    assert halve(0) == 0


def test_combine_is_union():
    a = Rect(0, 0, 10, 10)
    b = Rect(5, -5, 10, 10)

    combined = a.combine(b)

    assert combined == Rect(0, -5, 15, 15)
    assert combined.contains(a)
    assert combined.contains(b)
    # inputs untouched
    assert a == Rect(0, 0, 10, 10)


def test_combine_with_contained_rect_is_identity():
    outer = Rect(-2, -2, 20, 20)
    assert outer.combine(Rect(0, 0, 1, 1)) == outer


def test_shift_moves_origin_only():
    rect = Rect(1, 2, 3, 4)
    rect.shift(10, -20)
    assert rect == Rect(11, -18, 3, 4)
    assert rect.end() == (14, -14)


class TestLayout:
    def test_cursor_only_layout_does_not_grow_bounds(self):
        layout = Layout.single(Rect(0, 0, 10, 20), TextRun(0, 0, "a"))
        caret = Layout.single(Rect(50, 50, 0, 0), CursorMark(50, 50))

        layout.combine(caret)

        assert layout.rect == Rect(0, 0, 10, 20)
        assert layout.primitives == [TextRun(0, 0, "a"), CursorMark(50, 50)]

    def test_combine_grows_bounds_for_content(self):
        layout = Layout.empty(Rect.empty(0, 0))
        layout.combine(Layout.single(Rect(0, -10, 10, 20), TextRun(0, -10, "1")))
        layout.combine(Layout.single(Rect(0, 10, 20, 20), TextRun(0, 10, "22")))

        assert layout.rect == Rect(0, -10, 20, 40)
        assert not layout.is_cursor()

    def test_shift_moves_every_primitive(self):
        layout = Layout(
            rect=Rect(0, 0, 10, 20),
            primitives=[TextRun(0, 0, "a"), DividerLine(0, 5, 10), CursorMark(10, 0)],
        )

        layout.shift(3, 4)

        assert layout.rect == Rect(3, 4, 10, 20)
        assert layout.primitives == [TextRun(3, 4, "a"), DividerLine(3, 9, 10), CursorMark(13, 4)]

    def test_emit_in_order(self):
        layout = Layout(rect=Rect.empty(), primitives=[TextRun(0, 0, "a"), CursorMark(10, 0)])
        emitted = []
        layout.emit(emitted.append)
        assert emitted == layout.primitives
