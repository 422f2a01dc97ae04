from kappa.viewport import Viewport


def test_new_viewport():
    vp = Viewport(20)
    assert vp.scroll_offset == 0
    assert vp.height == 20
    assert len(vp.visible_range()) == 20


def test_scroll_down_puts_cursor_on_last_row():
    vp = Viewport(5)
    vp.adjust_for_cursor(40)
    rng = vp.visible_range()
    assert 40 in rng
    assert rng[-1] == 40


def test_scroll_up_puts_cursor_on_first_row():
    vp = Viewport(5)
    vp.adjust_for_cursor(40)
    vp.adjust_for_cursor(12)
    assert vp.scroll_offset == 12


def test_cursor_inside_range_does_not_scroll():
    vp = Viewport(10)
    vp.adjust_for_cursor(9)
    assert vp.scroll_offset == 0


def test_cursor_always_visible():
    vp = Viewport(7)
    for line in [0, 3, 15, 16, 2, 50, 44, 43, 0]:
        vp.adjust_for_cursor(line)
        assert line in vp.visible_range()
        assert len(vp.visible_range()) == vp.height