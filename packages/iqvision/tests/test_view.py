"""Tests for the drill screen's presentation model."""
import pytest
from iqvision import view
from iqvision.types import DrillState, Mode

RED = (255, 59, 48)


def _state(mode=Mode.IDLE, number=0, color=None, name="", interval=1.0) -> DrillState:
    return DrillState(
        mode=mode,
        current_number=number,
        current_color=color,
        current_color_name=name,
        interval_seconds=interval,
    )


class TestNumberText:
    def test_hidden_when_idle(self):
        assert view.number_text(_state()) is None

    def test_shown_in_number_drill(self):
        assert view.number_text(_state(Mode.NUMBER_DRILL, number=42)) == "42"

    def test_hidden_in_color_drill(self):
        assert view.number_text(_state(Mode.COLOR_DRILL, number=0)) is None


class TestColorText:
    def test_ink_while_color_drill(self):
        state = _state(Mode.COLOR_DRILL, color=RED, name="Blue")
        assert view.color_text(state) == ("Blue", RED)

    def test_white_when_idle_with_kept_color(self):
        """After leaving the drill the kept ink is not shown."""
        state = _state(Mode.IDLE, color=RED, name="")
        assert view.color_text(state) == ("", view.WHITE)

    def test_white_before_first_draw(self):
        state = _state(Mode.COLOR_DRILL, color=None, name="")
        assert view.color_text(state) == ("", view.WHITE)


def test_button_labels():
    idle = _state()
    assert view.number_button_label(idle) == "Start Number Drill"
    assert view.color_button_label(idle) == "Start Color Drill"
    assert view.number_button_label(_state(Mode.NUMBER_DRILL)) == "Stop Number Drill"
    assert view.color_button_label(_state(Mode.COLOR_DRILL)) == "Stop Color Drill"


def test_interval_label():
    assert view.interval_label(1.0) == "1s"
    assert view.interval_label(1.5) == "1.5s"
    assert view.interval_label(2.0) == "2s"


@pytest.mark.parametrize("seconds,pos", [(1.0, 0.0), (1.5, 0.5), (2.0, 1.0)])
def test_slider_position(seconds, pos):
    assert view.slider_position(seconds) == pytest.approx(pos)


@pytest.mark.parametrize(
    "pos,seconds",
    [(-0.5, 1.0), (0.0, 1.0), (0.2, 1.0), (0.4, 1.5), (0.6, 1.5), (0.9, 2.0), (3.0, 2.0)],
)
def test_interval_at(pos, seconds):
    assert view.interval_at(pos) == seconds
