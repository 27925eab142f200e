# catalog.py

from io import StringIO

from rich.console import Console
from rich.table import Table
from rich.text import Text

from .style import PRESETS, TerminalStyle

SAMPLE_TEXT = "Sample"


def preset_table() -> Table:
    """Build a rich Table listing every preset with a live sample."""
    table = Table(title="Terminal style presets", highlight=False)
    table.add_column("Preset", no_wrap=True)
    table.add_column("Codes", no_wrap=True)
    table.add_column("Description")
    table.add_column("Sample", no_wrap=True)

    for name, preset in PRESETS.items():
        style = TerminalStyle.from_preset(preset)
        codes = ';'.join(str(code) for code in style.codes) or '0'
        table.add_row(
            name,
            codes,
            preset.description,
            Text.from_ansi(style.wrap(SAMPLE_TEXT)),
        )
    return table


def render_catalog(width: int = 80) -> str:
    """Render the preset table to a string with ANSI colour."""
    console = Console(
        force_terminal=True,
        color_system="256",
        file=StringIO(),
        width=width,
        highlight=False
    )
    console.print(preset_table())
    return console.file.getvalue()
