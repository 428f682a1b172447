"""Inspect Deck - an interactive TUI for CLEN."""

from __future__ import annotations

import time
from dataclasses import dataclass, replace
from datetime import datetime
from pathlib import Path

from textual import work
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Container, Horizontal, Vertical
from textual.message import Message
from textual.widgets import (
    Button,
    Checkbox,
    DataTable,
    DirectoryTree,
    Footer,
    Header,
    Input,
    Label,
    Log,
    Rule,
    Static,
)

from clen.analyzer import Analyzer
from clen.config import REPORT_ORDER, ClassificationConfig
from clen.models import ResultRecord
from clen.report import COUNT_LABELS, preview

# Checkbox label per config option
OPTION_LABELS = {
    "letters": "Letters",
    "cases": "Cases (needs letters)",
    "numbers": "Numbers",
    "sentences": "Sentences",
    "special_signs": "Special signs",
    "words": "Words",
    "bytes": "Bytes",
    "quotes": "Quotes",
    "file_content": "File content",
}

COUNT_COLUMNS = list(COUNT_LABELS)


@dataclass
class InspectStats:
    """Running totals across inspected items."""

    items: int = 0
    files: int = 0
    total_length: int = 0
    last_elapsed: float = 0.0
    status: str = "idle"

    def add(self, record: ResultRecord, elapsed: float) -> InspectStats:
        return replace(
            self,
            items=self.items + 1,
            files=self.files + int(record.from_file_content),
            total_length=self.total_length + record.length,
            last_elapsed=elapsed,
            status="complete",
        )


def record_row(record: ResultRecord) -> tuple[str, ...]:
    """Build a results table row for a record."""
    source = "[blue]file[/]" if record.from_file_content else "[dim]text[/]"
    counts = [
        str(record.counts[key]) if key in record.counts else "[dim]--[/]"
        for key in COUNT_COLUMNS
    ]
    return (preview(record.item, 24), source, str(record.length), *counts)


class TotalsPanel(Static):
    """Running totals display."""

    def compose(self) -> ComposeResult:
        yield Static(id="totals-content")

    def on_mount(self) -> None:
        self.update_display(InspectStats())

    def update_display(self, stats: InspectStats) -> None:
        content = self.query_one("#totals-content", Static)
        status_color = {
            "idle": "dim",
            "running": "green",
            "complete": "cyan",
            "error": "red",
        }.get(stats.status, "white")

        content.update(f"""[b]STATUS[/b]  [{status_color}]{stats.status.upper()}[/]

[b]ITEMS[/b]
  Inspected   [cyan]{stats.items:,}[/]
  From files  [blue]{stats.files:,}[/]

[b]LENGTH[/b]
  Total       [magenta]{stats.total_length:,}[/]

[b]TIME[/b]
  Last        [yellow]{stats.last_elapsed:.8f}s[/]""")


class ResultTable(DataTable):
    """One row per inspected item."""

    def on_mount(self) -> None:
        self.add_columns(
            "Item",
            "Source",
            "Length",
            *(COUNT_LABELS[key][0] for key in COUNT_COLUMNS),
        )
        self.cursor_type = "row"

    def add_record(self, record: ResultRecord) -> None:
        self.add_row(*record_row(record))
        self.scroll_end()


class InspectDeck(App):
    """The CLEN Inspect Deck."""

    # Messages for thread-safe communication
    class Inspected(Message):
        def __init__(self, record: ResultRecord, elapsed: float) -> None:
            self.record = record
            self.elapsed = elapsed
            super().__init__()

    class LogMessage(Message):
        def __init__(self, message: str) -> None:
            self.message = message
            super().__init__()

    CSS = """
    Screen {
        background: $surface;
    }

    #main-container {
        layout: horizontal;
        height: 100%;
    }

    #left-panel {
        width: 36;
        background: $surface-darken-1;
        border-right: solid $primary-darken-2;
        padding: 1;
    }

    #center-panel {
        width: 1fr;
        padding: 1;
    }

    #right-panel {
        width: 30;
        background: $surface-darken-1;
        border-left: solid $primary-darken-2;
        padding: 1;
    }

    TotalsPanel {
        height: auto;
        padding: 1;
        background: $surface-darken-2;
        border: round $primary;
        margin-bottom: 1;
    }

    #action-buttons {
        layout: horizontal;
        height: 3;
        margin-bottom: 1;
    }

    #action-buttons Button {
        margin-right: 1;
    }

    ResultTable {
        height: 1fr;
        border: round $primary-darken-1;
    }

    #log-panel {
        height: 10;
        border: round $primary-darken-2;
        background: $surface-darken-2;
    }

    .section-title {
        text-style: bold;
        margin-bottom: 1;
    }

    DirectoryTree {
        height: 100%;
        border: round $primary-darken-1;
        background: $surface-darken-2;
    }
    """

    BINDINGS = [
        Binding("ctrl+r", "inspect", "Inspect", show=True),
        Binding("ctrl+l", "clear", "Clear", show=True),
        Binding("ctrl+q", "quit", "Quit", show=True),
    ]

    TITLE = "CLEN Inspect Deck"
    SUB_TITLE = "Text Inspection Console"

    def __init__(self) -> None:
        super().__init__()
        self.totals = InspectStats()

    def compose(self) -> ComposeResult:
        yield Header(show_clock=True)
        with Container(id="main-container"):
            with Vertical(id="left-panel"):
                yield Label("OPTIONS", classes="section-title")
                for name, label in OPTION_LABELS.items():
                    yield Checkbox(label, value=name in REPORT_ORDER, id=f"opt-{name}")
                yield Rule()
                yield Label("Text or path")
                yield Input(placeholder="Enter text or a file path...", id="item-input")
                with Horizontal(id="action-buttons"):
                    yield Button("INSPECT", id="inspect-btn", variant="success")
                    yield Button("Clear", id="clear-btn", variant="warning")
                yield TotalsPanel()

            with Vertical(id="center-panel"):
                yield Label("RESULTS", classes="section-title")
                yield ResultTable(id="results")
                yield Rule()
                yield Label("SYSTEM LOG", classes="section-title")
                yield Log(id="log-panel", highlight=True, auto_scroll=True)

            with Vertical(id="right-panel"):
                yield Label("FILE BROWSER", classes="section-title")
                yield DirectoryTree(Path.cwd(), id="dir-tree")

        yield Footer()

    def on_mount(self) -> None:
        self._log("Inspect Deck initialized")
        self._log("Enter text or a path and press INSPECT")

    def _log(self, message: str) -> None:
        """Add a message to the system log."""
        timestamp = datetime.now().strftime("%H:%M:%S")
        self.query_one("#log-panel", Log).write_line(f"[{timestamp}] {message}")

    def current_config(self) -> ClassificationConfig:
        """Build a config from the option checkboxes."""
        return ClassificationConfig(
            **{
                name: self.query_one(f"#opt-{name}", Checkbox).value
                for name in OPTION_LABELS
            }
        )

    def on_inspect_deck_inspected(self, event: Inspected) -> None:
        """Handle a finished analysis from the worker thread."""
        self.totals = self.totals.add(event.record, event.elapsed)
        self.query_one(TotalsPanel).update_display(self.totals)
        self.query_one("#results", ResultTable).add_record(event.record)

    def on_inspect_deck_log_message(self, event: LogMessage) -> None:
        self._log(event.message)

    def on_directory_tree_file_selected(
        self, event: DirectoryTree.FileSelected
    ) -> None:
        """Fill the input with the selected file path."""
        self.query_one("#item-input", Input).value = str(event.path)

    def on_input_submitted(self, event: Input.Submitted) -> None:
        self.action_inspect()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "inspect-btn":
            self.action_inspect()
        elif event.button.id == "clear-btn":
            self.action_clear()

    def action_clear(self) -> None:
        """Clear results and reset totals."""
        self.totals = InspectStats()
        self.query_one(TotalsPanel).update_display(self.totals)
        self.query_one("#results", ResultTable).clear()
        self.query_one("#log-panel", Log).clear()
        self._log("Cleared - ready for new input")

    def action_inspect(self) -> None:
        """Analyze the current input with the selected options."""
        item = self.query_one("#item-input", Input).value
        if not item:
            self._log("[red]ERROR: Nothing to inspect[/]")
            return
        config = self.current_config()
        if config.cases_ignored:
            self._log("Cases needs Letters; case counts skipped")
        self.run_inspect(item, config)

    @work(exclusive=True, thread=True)
    def run_inspect(self, item: str, config: ClassificationConfig) -> None:
        """Run the analysis in a background thread."""
        start = time.perf_counter()
        record = Analyzer(config).analyze(item)
        elapsed = time.perf_counter() - start

        source = "file content" if record.from_file_content else "literal text"
        self.post_message(self.LogMessage(f"Inspected {preview(item)!r} as {source}"))
        self.post_message(self.Inspected(record, elapsed))


def main() -> None:
    """Run the Inspect Deck TUI."""
    app = InspectDeck()
    app.run()


if __name__ == "__main__":
    main()
