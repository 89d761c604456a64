"""
Pontifex Console Interface
===========================

Rich-powered console abstraction providing a single presentation layer
for the Pontifex tools.

The class wraps :class:`rich.console.Console` and adds convenience methods
for banners, section headers, coloured status messages and tables,
all sharing one theme.

References:
    - Rich library: https://github.com/Textualize/rich
"""

from __future__ import annotations

import datetime as _dt
from typing import Any, Sequence

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text
from rich.theme import Theme

# ---------------------------------------------------------------------------
# Theme -- consistent palette across all Pontifex output
# ---------------------------------------------------------------------------
_PONTIFEX_THEME = Theme(
    {
        "pontifex.section": "bold bright_magenta",
        "pontifex.success": "bold green",
        "pontifex.error": "bold red",
        "pontifex.info": "bold bright_blue",
        "pontifex.dim": "dim white",
        "pontifex.joker": "bold bright_red",
        "pontifex.tagline": "bold bright_green",
    }
)

# ---------------------------------------------------------------------------
# ASCII banner art
# ---------------------------------------------------------------------------
_BANNER_ART = r"""
[bright_cyan]
  ╔═╗╔═╗╔╗╔╔╦╗╦╔═╗╔═╗═╗ ╦
  ╠═╝║ ║║║║ ║ ║╠╣ ║╣ ╔╩╦╝
  ╩  ╚═╝╝╚╝ ╩ ╩╚  ╚═╝╩ ╚═
[/bright_cyan]"""

_TAGLINE = "Solitaire Card-Deck Keystream Cipher"


class PontifexConsole:
    """Unified console interface for the Pontifex modules.

    Usage::

        con = PontifexConsole()
        con.banner()
        con.section("Ciphertext")
        con.success("Encryption complete")
    """

    def __init__(
        self,
        *,
        quiet: bool = False,
        stderr: bool = False,
    ) -> None:
        """Initialise the console.

        Args:
            quiet:  Suppress all output (useful in library / test mode).
            stderr: Write to stderr instead of stdout.
        """
        self._console = Console(
            theme=_PONTIFEX_THEME,
            quiet=quiet,
            stderr=stderr,
            highlight=False,
        )

    @property
    def rich(self) -> Console:
        """Direct access to the underlying Rich Console instance."""
        return self._console

    # ------------------------------------------------------------------ #
    #  Banner
    # ------------------------------------------------------------------ #

    def banner(self, version: str = "1.0.0") -> None:
        """Display the Pontifex ASCII-art banner.

        Args:
            version: Version string shown beneath the logo.
        """
        now = _dt.datetime.now().strftime("%Y-%m-%d %H:%M:%S")
        subtitle = (
            f"[pontifex.tagline]{_TAGLINE}[/pontifex.tagline]\n"
            f"[pontifex.dim]Version: {version}  |  {now}[/pontifex.dim]"
        )
        panel = Panel(
            Align.center(Text.from_markup(_BANNER_ART + "\n" + subtitle)),
            border_style="bright_cyan",
            padding=(1, 2),
        )
        self._console.print(panel)

    def section(self, title: str) -> None:
        """Print a prominent section header."""
        self._console.rule(
            f"  {title}  ",
            style="pontifex.section",
            characters="─",
        )
        self._console.print()

    # ------------------------------------------------------------------ #
    #  Message helpers (severity-coloured)
    # ------------------------------------------------------------------ #

    def success(self, message: str) -> None:
        self._console.print(
            f"[pontifex.success][✔] SUCCESS:[/pontifex.success] {message}"
        )

    def error(self, message: str) -> None:
        self._console.print(
            f"[pontifex.error][✘] ERROR:[/pontifex.error] {message}"
        )

    def info(self, message: str) -> None:
        self._console.print(
            f"[pontifex.info][ℹ] INFO:[/pontifex.info] {message}"
        )

    # ------------------------------------------------------------------ #
    #  Table display
    # ------------------------------------------------------------------ #

    def table(
        self,
        title: str,
        columns: Sequence[str],
        rows: Sequence[Sequence[Any]],
        *,
        caption: str | None = None,
        styles: Sequence[str] | None = None,
    ) -> None:
        """Render a styled Rich table.

        Args:
            title:    Table title.
            columns:  Column header labels.
            rows:     Iterable of row tuples; each element is stringified.
            caption:  Optional footer caption.
            styles:   Optional per-column Rich style strings.
        """
        tbl = Table(
            title=title,
            caption=caption,
            border_style="bright_cyan",
            header_style="bold bright_magenta",
            show_lines=True,
            padding=(0, 1),
        )
        for idx, col_name in enumerate(columns):
            style = styles[idx] if styles and idx < len(styles) else ""
            tbl.add_column(col_name, style=style)

        for row in rows:
            tbl.add_row(*(str(cell) for cell in row))

        self._console.print(tbl)
