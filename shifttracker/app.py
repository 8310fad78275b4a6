# shifttracker/app.py
"""
Single-screen Kivy front end: elapsed timer, start/end buttons, task selector
popup, log table and csv export. All state lives in ShiftSession; widgets only
redraw from it.
"""

from kivy.app import App
from kivy.core.window import Window
from kivy.graphics import Color, Rectangle, RoundedRectangle
from kivy.uix.behaviors import ButtonBehavior
from kivy.uix.boxlayout import BoxLayout
from kivy.uix.gridlayout import GridLayout
from kivy.uix.label import Label
from kivy.uix.popup import Popup
from kivy.uix.scrollview import ScrollView

from shifttracker.config import (
    COLOR_BACKGROUND,
    COLOR_END_SHIFT,
    COLOR_END_TIMER,
    COLOR_EXPORT,
    COLOR_START,
    COLOR_SUBTEXT,
    COLOR_TABLE,
    COLOR_TEXT,
    CSV_FIELDS,
    TABLE_HEADERS,
)
from shifttracker.errors import ExportFailure, log_error
from shifttracker.export import write_export
from shifttracker.screen import DISMISS, OPEN, dismiss_handler, screen_state, selector_change, task_choices
from shifttracker.session import ShiftSession

Window.clearcolor = COLOR_BACKGROUND


# ---------------- RoundedButton ----------------
class RoundedButton(ButtonBehavior, Label):
    def __init__(self, text="", bg_color=COLOR_START, radius=6, **kwargs):
        super().__init__(**kwargs)
        self.text = text
        self.halign = "center"
        self.valign = "middle"
        self.color = (1, 1, 1, 1)
        self.padding = (10, 6)
        self.radius = radius

        with self.canvas.before:
            self._col = Color(*bg_color)
            self._rect = RoundedRectangle(pos=self.pos, size=self.size, radius=[self.radius])

        self.bind(pos=self._update_rect, size=self._update_rect)

    def _update_rect(self, *a):
        self._rect.pos = self.pos
        self._rect.size = self.size


# ---------------- TaskSelector ----------------
class TaskSelector(Popup):
    """Modal with one button per task category. Knows only whether it is showing."""

    def __init__(self, choices, **kwargs):
        kwargs.setdefault("title", "Select Task")
        kwargs.setdefault("size_hint", (0.8, 0.75))
        super().__init__(**kwargs)
        self.is_open = False

        content = BoxLayout(orientation="vertical", spacing=8, padding=12)
        for label, on_press in choices:
            btn = RoundedButton(text=label, bg_color=COLOR_START, font_size=22)
            btn.bind(on_press=on_press)
            content.add_widget(btn)
        self.content = content

    def on_open(self):
        self.is_open = True

    def on_dismiss(self):
        self.is_open = False


# ---------------- App ----------------
class ShiftTrackerApp(App):
    def __init__(self, session: ShiftSession = None, **kwargs):
        super().__init__(**kwargs)
        self.session = session or ShiftSession()
        self._rows_drawn = 0

    def build(self):
        self.title = "Shift Tracker"
        root = BoxLayout(orientation="vertical", padding=[10, 20, 10, 20], spacing=10)

        self.timer_label = Label(
            text=self.session.elapsed_display, font_size=50, bold=True,
            size_hint_y=None, height=110, color=COLOR_TEXT,
        )

        self.start_btn = RoundedButton(text="Start Timer", bg_color=COLOR_START, font_size=24)
        self.end_timer_btn = RoundedButton(text="End Timer", bg_color=COLOR_END_TIMER, font_size=24)
        self.end_shift_btn = RoundedButton(text="End Shift", bg_color=COLOR_END_SHIFT, font_size=24)
        self.start_btn.bind(on_press=lambda *_: self.session.request_start())
        self.end_timer_btn.bind(on_press=lambda *_: self.session.end_segment_and_continue())
        self.end_shift_btn.bind(on_press=lambda *_: self.session.end_shift())
        self.buttons = {
            "start": self.start_btn,
            "end_timer": self.end_timer_btn,
            "end_shift": self.end_shift_btn,
        }
        self.button_row = BoxLayout(size_hint_y=None, height=56, spacing=40, padding=[40, 0, 40, 0])

        # log table
        table = BoxLayout(orientation="vertical")
        with table.canvas.before:
            Color(*COLOR_TABLE)
            self._table_bg = RoundedRectangle(pos=table.pos, size=table.size, radius=[8])

        def _update_table_bg(*args):
            self._table_bg.pos = table.pos
            self._table_bg.size = table.size

        table.bind(pos=_update_table_bg, size=_update_table_bg)

        header = GridLayout(cols=len(TABLE_HEADERS), size_hint_y=None, height=36, padding=[10, 0, 10, 0])
        for title in TABLE_HEADERS:
            header.add_widget(Label(text=title, bold=True, font_size=14, color=COLOR_TEXT))
        with header.canvas.after:
            Color(0, 0, 0, 1)
            self._header_line = Rectangle(pos=header.pos, size=(header.width, 1.5))
        header.bind(pos=self._update_header_line, size=self._update_header_line)

        self.rows_layout = GridLayout(cols=len(CSV_FIELDS), size_hint_y=None, row_default_height=34,
                                      row_force_default=True, padding=[10, 4, 10, 4])
        self.rows_layout.bind(minimum_height=self.rows_layout.setter("height"))
        scroll = ScrollView()
        scroll.add_widget(self.rows_layout)
        table.add_widget(header)
        table.add_widget(scroll)

        self.total_label = Label(text="", size_hint_y=None, height=28, color=COLOR_SUBTEXT)

        export_btn = RoundedButton(text="Export to CSV", bg_color=COLOR_EXPORT, font_size=20,
                                   size_hint=(None, None), size=(220, 50), pos_hint={"center_x": 0.5})
        export_btn.bind(on_press=self.export_csv)

        root.add_widget(self.timer_label)
        root.add_widget(self.button_row)
        root.add_widget(table)
        root.add_widget(self.total_label)
        root.add_widget(export_btn)

        self.task_selector = TaskSelector(task_choices(self.session))
        self.task_selector.bind(on_dismiss=dismiss_handler(self.session))

        self.session.add_listener(self.refresh)
        self.refresh(self.session)
        return root

    def _update_header_line(self, header, *args):
        self._header_line.pos = header.pos
        self._header_line.size = (header.width, 1.5)

    # ---------------- Redraw ----------------
    def refresh(self, session):
        try:
            state = screen_state(session)
            self.timer_label.text = state.timer_text

            wanted = [self.buttons[name] for name in state.buttons]
            if list(reversed(self.button_row.children)) != wanted:
                self.button_row.clear_widgets()
                for btn in wanted:
                    self.button_row.add_widget(btn)

            records = session.shifts
            for record in records[self._rows_drawn:]:
                row = record.as_row()
                for field in CSV_FIELDS:
                    self.rows_layout.add_widget(Label(text=row[field], font_size=14, color=COLOR_TEXT))
            self._rows_drawn = len(records)

            self.total_label.text = state.total_text

            change = selector_change(state, self.task_selector.is_open)
            if change == OPEN:
                self.task_selector.open()
            elif change == DISMISS:
                self.task_selector.dismiss()
        except Exception as e:
            log_error(e)

    # ---------------- CSV export ----------------
    def export_csv(self, instance=None):
        try:
            write_export(self.session.shifts, self.user_data_dir, share=self.share_file)
        except ExportFailure as e:
            log_error(e)
            Popup(title="Error", content=Label(text="Export failed. See error.log"), size_hint=(0.7, 0.3)).open()

    def share_file(self, path):
        Popup(title="Export complete", content=Label(text=f"Exported to\n{path}", halign="center"),
              size_hint=(0.8, 0.32)).open()

    def on_stop(self):
        self.session.ticker.stop()


def main():
    ShiftTrackerApp().run()


if __name__ == "__main__":
    main()
