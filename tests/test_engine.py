"""Tests for pinfield.core.engine.PinFieldEngine."""

import pytest

from pinfield.core.configuration import ConfigurationError, PinConfiguration
from pinfield.core.engine import PinFieldEngine, StringTextBuffer
from pinfield.core.event_bus import PinEvents
from pinfield.core.scheduling import ManualScheduler
from pinfield.core.types import ColorRole, Direction, FocusState


class Recorder:
    def __init__(self):
        self.codes = []

    def on_complete(self, code):
        self.codes.append(code)


class FakeClipboard:
    def __init__(self, text=None):
        self.text = text

    def read_clipboard_string(self):
        return self.text


@pytest.fixture
def scheduler():
    return ManualScheduler()


@pytest.fixture
def recorder():
    return Recorder()


def make_engine(config, scheduler=None, observer=None, direction=Direction.LTR, clipboard=None, text=""):
    buffer = StringTextBuffer(text)
    engine = PinFieldEngine(
        buffer,
        config,
        clipboard=clipboard,
        direction_provider=lambda: direction,
        scheduler=scheduler,
        observer=observer,
        kerning=10.0,
    )
    return engine, buffer


def visual(engine):
    return "".join(s.content for s in engine.descriptors)


class TestPass:

    def test_pass_sanitizes_and_writes_back(self, digits4, recorder):
        engine, buffer = make_engine(digits4, observer=recorder, text="12a34")
        engine.on_input_changed()
        assert buffer.text == "1234"
        assert engine.sanitized == "1234"
        assert recorder.codes == ["1234"]

    def test_write_back_happens_every_pass(self, digits4):
        engine, buffer = make_engine(digits4, text="1")
        engine.on_input_changed()
        engine.on_input_changed()
        assert buffer.writes == 2

    def test_rtl_completion_reversed(self, digits4, recorder):
        engine, _ = make_engine(digits4, observer=recorder, direction=Direction.RTL, text="12a34")
        engine.on_input_changed()
        assert recorder.codes == ["4321"]
        assert engine.code == "4321"

    def test_descriptors_published(self, digits4):
        engine, buffer = make_engine(digits4, text="7")
        models = []
        engine.events.subscribe(PinEvents.RENDER_UPDATED, models.append)
        engine.on_input_changed()
        assert len(models) == 1
        assert models[0].text == "7•••"
        assert models[0].sanitized == "7"

    def test_completed_event_published(self, digits4, recorder):
        engine, _ = make_engine(digits4, observer=recorder, text="9999")
        codes = []
        engine.events.subscribe(PinEvents.COMPLETED, codes.append)
        engine.on_input_changed()
        assert codes == ["9999"]

    def test_completion_is_level_triggered(self, digits4, recorder):
        engine, _ = make_engine(digits4, observer=recorder, text="1234")
        engine.on_input_changed()
        engine.reload()
        assert recorder.codes == ["1234", "1234"]

    def test_no_observer_is_not_fatal(self, digits4, log_messages):
        engine, _ = make_engine(digits4, text="1234")
        engine.on_input_changed()
        assert engine.is_complete
        assert any(m.startswith("WARNING|No completion observer") for m in log_messages)

    def test_completed_event_needs_observer(self, digits4):
        engine, _ = make_engine(digits4, text="1234")
        codes = []
        engine.events.subscribe(PinEvents.COMPLETED, codes.append)
        engine.on_input_changed()
        assert codes == []

    def test_completed_event_skipped_when_observer_raises(self, digits4, log_messages):
        class Exploding:
            def on_complete(self, code):
                raise RuntimeError("boom")

        observer = Exploding()
        engine, _ = make_engine(digits4, observer=observer, text="1234")
        codes = []
        engine.events.subscribe(PinEvents.COMPLETED, codes.append)
        engine.on_input_changed()
        assert codes == []
        assert any("Completion observer raised" in m for m in log_messages)

    def test_render_subscriber_error_stays_inside_bus(self, digits4, log_messages):
        engine, _ = make_engine(digits4, text="1")

        def broken(model):
            raise ValueError("render failed")

        engine.events.subscribe(PinEvents.RENDER_UPDATED, broken)
        engine.on_input_changed()
        assert engine.sanitized == "1"

    def test_nested_change_ignored(self, digits4):
        engine, buffer = make_engine(digits4, text="1")
        nested = []

        def reenter(model):
            nested.append(engine.on_input_changed())

        engine.events.subscribe(PinEvents.RENDER_UPDATED, reenter)
        engine.on_input_changed()
        assert len(nested) == 1
        assert buffer.writes == 1

    def test_clear(self, digits4):
        engine, buffer = make_engine(digits4, text="12")
        engine.on_input_changed()
        engine.clear()
        assert buffer.text == ""
        assert visual(engine) == "••••"


class TestDeferredFocus:

    def test_focus_waits_for_tick(self, digits6, scheduler):
        engine, _ = make_engine(digits6, scheduler=scheduler, text="123")
        engine.on_input_changed()
        assert engine.focus is None
        assert engine.has_pending_focus

        scheduler.advance(10)
        assert engine.focus == FocusState(cursor_offset=3, focused_slot_index=3)
        assert engine.descriptors[3].color_role is ColorRole.TOKEN_FOCUSED
        assert not engine.has_pending_focus

    def test_rtl_focus(self, digits6, scheduler):
        engine, _ = make_engine(digits6, scheduler=scheduler, direction=Direction.RTL, text="123")
        engine.on_input_changed()
        scheduler.advance(10)
        assert engine.focus.focused_slot_index == 2
        assert engine.descriptors[2].color_role is ColorRole.TOKEN_FOCUSED
        assert visual(engine) == "---321"

    def test_newer_change_supersedes_pending_focus(self, digits6, scheduler):
        engine, buffer = make_engine(digits6, scheduler=scheduler, text="1")
        focus_models = []
        engine.events.subscribe(PinEvents.FOCUS_UPDATED, focus_models.append)

        engine.on_input_changed()
        scheduler.advance(5)
        buffer.text = "12345"
        engine.on_input_changed()
        scheduler.advance(100)

        assert len(focus_models) == 1
        assert focus_models[0].focus.focused_slot_index == 5
        assert len(scheduler.pending) == 0

    def test_stale_callback_discarded_after_cancel(self, digits4, scheduler, log_messages):
        engine, _ = make_engine(digits4, scheduler=scheduler, text="1")
        engine.on_input_changed()
        stale = scheduler.pending[0].callback
        engine.on_input_changed()

        stale()
        assert engine.focus is None
        assert any("Stale focus pass" in m for m in log_messages)

    def test_cancel_pending(self, digits4, scheduler):
        engine, _ = make_engine(digits4, scheduler=scheduler, text="1")
        engine.on_input_changed()
        engine.cancel_pending()
        scheduler.advance(100)
        assert engine.focus is None

    def test_without_scheduler_focus_is_inline(self, digits4):
        engine, _ = make_engine(digits4, text="12")
        engine.on_input_changed()
        assert engine.focus == FocusState(2, 2)

    def test_full_code_focus(self, digits4, scheduler, recorder):
        engine, _ = make_engine(digits4, scheduler=scheduler, observer=recorder, text="1234")
        engine.on_input_changed()
        scheduler.advance(10)
        assert engine.focus.focused_slot_index == 3
        assert not any(s.color_role is ColorRole.TOKEN_FOCUSED for s in engine.descriptors)


class TestPaste:

    def test_rtl_paste_reversed_before_sanitizing(self, digits4, recorder):
        clipboard = FakeClipboard("12")
        engine, buffer = make_engine(
            digits4, observer=recorder, direction=Direction.RTL, clipboard=clipboard, text="12",
        )
        engine.on_input_changed()
        assert buffer.text == "21"

    def test_rtl_typed_text_not_matching_clipboard(self, digits4):
        clipboard = FakeClipboard("99")
        engine, buffer = make_engine(digits4, direction=Direction.RTL, clipboard=clipboard, text="12")
        engine.on_input_changed()
        assert buffer.text == "12"

    def test_ltr_paste_untouched(self, digits4):
        clipboard = FakeClipboard("12")
        engine, buffer = make_engine(digits4, clipboard=clipboard, text="12")
        engine.on_input_changed()
        assert buffer.text == "12"


class TestConfigurationSurface:

    def test_set_slot_count_recomputes(self, digits4):
        engine, _ = make_engine(digits4, text="123456")
        engine.on_input_changed()
        engine.set_slot_count(6)
        # truncated characters were already dropped from the buffer
        assert visual(engine) == "1234••"

    def test_invalid_setter_raises_and_keeps_state(self, digits4):
        engine, _ = make_engine(digits4, text="12")
        engine.on_input_changed()
        with pytest.raises(ConfigurationError):
            engine.set_token("1")
        assert engine.config.token == "•"
        assert visual(engine) == "12••"

    def test_set_token_rerenders(self, digits4):
        engine, _ = make_engine(digits4, text="1")
        engine.on_input_changed()
        engine.set_token("_")
        assert visual(engine) == "1___"

    def test_set_valid_characters_filters_buffer(self, digits4):
        engine, buffer = make_engine(digits4, text="12")
        engine.on_input_changed()
        engine.set_valid_characters("abc2")
        assert buffer.text == "2"

    def test_config_property_is_a_copy(self, digits4):
        engine, _ = make_engine(digits4)
        engine.config.set_slot_count(9)
        assert engine.config.slot_count == 4

    def test_engine_does_not_alias_callers_configuration(self, digits4):
        engine, _ = make_engine(digits4)
        digits4.set_slot_count(2)
        assert engine.config.slot_count == 4

    def test_set_configuration(self, digits4):
        engine, _ = make_engine(digits4, text="1")
        engine.set_configuration(PinConfiguration(slot_count=2, token="*"))
        assert visual(engine) == "1*"

    def test_set_kerning(self, digits4):
        engine, _ = make_engine(digits4)
        engine.set_kerning(3.0)
        assert [s.kern_override for s in engine.descriptors] == [3.0, 3.0, 3.0, 0.0]

    def test_observer_swapped_later(self, digits4, recorder):
        engine, _ = make_engine(digits4, text="1234")
        engine.set_observer(recorder)
        engine.on_input_changed()
        assert recorder.codes == ["1234"]
        assert engine.observer is recorder

    def test_direction_read_on_each_pass(self, digits4):
        state = {"direction": Direction.LTR}
        engine = PinFieldEngine(StringTextBuffer("1"), digits4, direction_provider=lambda: state["direction"])
        engine.on_input_changed()
        assert "".join(s.content for s in engine.descriptors) == "1•••"
        state["direction"] = Direction.RTL
        engine.reload()
        assert engine.direction is Direction.RTL
        assert "".join(s.content for s in engine.descriptors) == "•••1"
