from typing import Optional

from rich import box
from rich.console import Console
from rich.layout import Layout
from rich.live import Live
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from cDash.config import Config
from cDash.formatter import RichFormatter
from cDash.keys import key_hints
from cDash.state import AppState


class cDashRichScreen:
    def __init__(self, config: Config, console: Optional[Console] = None):
        self.config = config
        self.console = console or Console()
        self.formatter = RichFormatter()

        self.live = Live(console=self.console, screen=True, auto_refresh=False)

    def init_screen(self):
        self.live.start(False)

    def render(self, state: AppState):
        self.live.update(self.prepare_layout(state), refresh=True)

    def prepare_layout(self, state: AppState) -> Layout:
        layout = Layout()
        layout.split(
            Layout(name="main"),
            Layout(name="status", size=1),
            Layout(name="footer", size=1),
        )
        layout['main'].split_row(
            Layout(name="commands", ratio=1, minimum_size=12),
            Layout(name="containers", ratio=4),
        )

        layout['commands'].update(self.prepare_command_menu(state))
        layout['containers'].update(self.prepare_container_table(state))
        layout['status'].update(self.prepare_status(state))
        layout['footer'].update(self.prepare_footer())
        return layout

    def prepare_command_menu(self, state: AppState) -> Panel:
        lines = []
        for i, command in enumerate(state.commands):
            if i == state.command_index:
                lines.append(Text(f"> {command.label}", style=self.config.selected_command_style))
            else:
                lines.append(Text(f"  {command.label}"))
        return Panel(Text("\n").join(lines), title="Commands", box=box.SQUARE)

    def prepare_container_table(self, state: AppState) -> Panel:
        table = Table(box=box.SIMPLE, header_style=self.config.tui_header_color, expand=True)
        for column, ratio in zip(self.formatter.get_header_row(), self.formatter.get_column_ratios()):
            table.add_column(column, ratio=ratio, no_wrap=True)

        for i, record in enumerate(state.containers):
            row = self.formatter.get_container_row(record)
            if i == state.row_index:
                table.add_row(*row, style=self.config.selected_row_style)
            else:
                table.add_row(*row)

        scope = "all" if state.show_all else "running"
        title = f"Docker Containers ({len(state.containers)}, {scope})"
        return Panel(table, title=title, box=box.SQUARE)

    def prepare_status(self, state: AppState) -> Text:
        return Text(state.status_message, style=self.config.status_style, justify="left", overflow="ellipsis",
                    no_wrap=True)

    def prepare_footer(self):
        grid = Table.grid(padding=(0, 1))

        rendering_list = []
        for key, label in key_hints.items():
            grid.add_column()
            text = Text()
            text.append(key)
            text.append(label, style="black on cyan")
            rendering_list.append(text)

        grid.add_row(*rendering_list)
        return grid

    def stop(self):
        self.live.stop()
