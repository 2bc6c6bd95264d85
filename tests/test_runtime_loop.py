from __future__ import annotations

from contextlib import contextmanager
import unittest

from envreader.ansi import ANSI_ESCAPE_RE
from envreader.errors import TerminalIOError
from envreader.input import KeyCode, KeyEvent, KeyEventKind, Modifiers, OtherEvent, ResizeEvent
from envreader.layout import Rect
from envreader.render import NOTHING_SELECTED, Frame
from envreader.runtime import run_main_loop
from envreader.runtime.loop import draw_current_frame
from envreader.snapshot import capture_environment
from envreader.state import AppState
from envreader.ui_theme import DEFAULT_THEME


class _FakeTerminal:
    """Scripted terminal surface recording frames and raw-mode transitions."""

    def __init__(self, events, state: AppState | None = None, area: Rect = Rect(0, 0, 40, 10)) -> None:
        self._events = list(events)
        self._state = state
        self.current_area = area
        self.frames: list[Frame] = []
        self.selected_at_draw: list[int | None] = []
        self.entered = 0
        self.exited = 0

    @contextmanager
    def raw_mode(self):
        self.entered += 1
        try:
            yield self
        finally:
            self.exited += 1

    def area(self) -> Rect:
        return self.current_area

    def draw(self, frame: Frame) -> None:
        self.frames.append(frame)
        if self._state is not None:
            self.selected_at_draw.append(self._state.selection.selected)

    def read_event(self):
        if not self._events:
            raise TerminalIOError("script exhausted")
        event = self._events.pop(0)
        if isinstance(event, BaseException):
            raise event
        if isinstance(event, ResizeEvent):
            self.current_area = Rect(0, 0, event.columns, event.rows)
        return event


def _plain(frame: Frame) -> list[str]:
    return [ANSI_ESCAPE_RE.sub("", row) for row in frame.rows]


class RunMainLoopTests(unittest.TestCase):
    def test_two_downs_then_q_walks_the_list_and_stops(self) -> None:
        state = AppState(capture_environment([("PATH", "/usr/bin"), ("HOME", "/root")]))
        terminal = _FakeTerminal(
            [KeyEvent(KeyCode.DOWN), KeyEvent(KeyCode.DOWN), KeyEvent("q")],
            state=state,
        )

        run_main_loop(state, terminal, DEFAULT_THEME)

        self.assertFalse(state.running)
        self.assertEqual(terminal.selected_at_draw, [None, 0, 1])
        self.assertEqual(state.selection.selected, 1)
        self.assertEqual((terminal.entered, terminal.exited), (1, 1))
        self.assertEqual(_plain(terminal.frames[2])[7].strip(), "/root")

    def test_empty_snapshot_renders_and_escape_stops(self) -> None:
        state = AppState(capture_environment([]))
        terminal = _FakeTerminal([KeyEvent(KeyCode.ESC)])

        run_main_loop(state, terminal, DEFAULT_THEME)

        self.assertFalse(state.running)
        self.assertEqual(len(terminal.frames), 1)
        self.assertEqual(_plain(terminal.frames[0])[7].strip(), NOTHING_SELECTED)

    def test_ctrl_c_quits_but_plain_c_does_not(self) -> None:
        state = AppState(capture_environment([("A", "1")]))
        terminal = _FakeTerminal([KeyEvent("c"), KeyEvent("c", Modifiers.CONTROL)])

        run_main_loop(state, terminal, DEFAULT_THEME)

        self.assertFalse(state.running)
        self.assertEqual(len(terminal.frames), 2)

    def test_non_key_and_release_events_only_trigger_redraw(self) -> None:
        state = AppState(capture_environment([("A", "1"), ("B", "2")]))
        terminal = _FakeTerminal(
            [
                ResizeEvent(60, 12),
                OtherEvent(b"\x1b[<0;1;1M"),
                KeyEvent(KeyCode.DOWN, kind=KeyEventKind.RELEASE),
                KeyEvent("q"),
            ],
            state=state,
        )

        run_main_loop(state, terminal, DEFAULT_THEME)

        self.assertEqual(terminal.selected_at_draw, [None, None, None, None])
        self.assertEqual(terminal.frames[0].width, 40)
        self.assertEqual(terminal.frames[1].width, 60)
        self.assertEqual(terminal.frames[1].height, 12)

    def test_terminal_error_propagates_after_restoration(self) -> None:
        state = AppState(capture_environment([("A", "1")]))
        terminal = _FakeTerminal([KeyEvent("j"), TerminalIOError("read failed")])

        with self.assertRaises(TerminalIOError):
            run_main_loop(state, terminal, DEFAULT_THEME)

        self.assertEqual((terminal.entered, terminal.exited), (1, 1))
        self.assertTrue(state.running)


class DrawCurrentFrameTests(unittest.TestCase):
    def test_scroll_offset_follows_selection_to_the_end_and_back(self) -> None:
        state = AppState(capture_environment([(f"KEY{i}", str(i)) for i in range(30)]))
        terminal = _FakeTerminal([])

        state.selection.last()
        frame = draw_current_frame(state, terminal, DEFAULT_THEME)
        self.assertEqual(state.list_start, 27)
        self.assertEqual(_plain(frame)[5].rstrip(), ">KEY29")

        state.selection.first()
        frame = draw_current_frame(state, terminal, DEFAULT_THEME)
        self.assertEqual(state.list_start, 0)
        self.assertEqual(_plain(frame)[3].rstrip(), ">KEY0")

    def test_clearing_selection_keeps_scroll_offset(self) -> None:
        state = AppState(capture_environment([(f"KEY{i}", str(i)) for i in range(30)]))
        terminal = _FakeTerminal([])
        state.selection.last()
        draw_current_frame(state, terminal, DEFAULT_THEME)

        state.selection.clear()
        frame = draw_current_frame(state, terminal, DEFAULT_THEME)

        self.assertEqual(state.list_start, 27)
        self.assertEqual(_plain(frame)[3].strip(), "KEY27")


if __name__ == "__main__":
    unittest.main()
