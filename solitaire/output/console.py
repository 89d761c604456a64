"""
Solitaire Console Output
=========================

Rich-based console formatters for Solitaire results: a panel for the
cipher text, a table of keystream values, and the deck order laid out
in rows with the two jokers highlighted.

Uses the Pontifex shared console infrastructure for consistent styling.

References:
    - Rich Library Documentation. https://rich.readthedocs.io/
"""

from __future__ import annotations

from typing import Optional

from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from shared.console import PontifexConsole
from shared.models import RunResult
from solitaire.core.cards import card_label, is_joker
from solitaire.core.models import (
    CipherMode,
    CipherResult,
    DeckSnapshot,
    KeystreamResult,
)


_MODE_COLOURS: dict[str, str] = {
    CipherMode.ENCRYPT.value: "bold bright_magenta",
    CipherMode.DECRYPT.value: "bold bright_green",
}

_DECK_ROW_LENGTH = 13


class SolitaireConsoleOutput:
    """Console output formatters for Solitaire results.

    Usage::

        console = PontifexConsole()
        output = SolitaireConsoleOutput(console)
        output.display_cipher(cipher_result)
        output.display_keystream(keystream_result)
        output.display_deck(deck_snapshot)
    """

    def __init__(self, console: Optional[PontifexConsole] = None) -> None:
        self.console = console or PontifexConsole()
        self._rich = self.console.rich

    # ------------------------------------------------------------------ #
    #  Dispatch
    # ------------------------------------------------------------------ #

    def display(self, result: RunResult) -> None:
        """Render *result* according to its operation."""
        if result.operation in (CipherMode.ENCRYPT.value, CipherMode.DECRYPT.value):
            self.display_cipher(CipherResult(**result.metadata))
        elif result.operation == "keystream":
            self.display_keystream(KeystreamResult(**result.metadata))
        elif result.operation == "deck":
            self.display_deck(DeckSnapshot(**result.metadata))
        self.console.info(result.summary)

    # ------------------------------------------------------------------ #
    #  Cipher Display
    # ------------------------------------------------------------------ #

    def display_cipher(self, result: CipherResult) -> None:
        """Show the grouped output text with the lengths involved."""
        title = "Ciphertext" if result.mode is CipherMode.ENCRYPT else "Plaintext"
        self.console.section(title)

        colour = _MODE_COLOURS.get(result.mode.value, "white")
        body = Text(result.text, style=colour)
        self._rich.print(Panel(body, border_style="bright_cyan", expand=False))

        details = Table(show_header=False, box=None, padding=(0, 2))
        details.add_column(style="bold")
        details.add_column()
        details.add_row("Passphrase letters", str(result.passphrase_length))
        details.add_row("Input letters", str(result.input_length))
        if result.padded_length != result.input_length:
            details.add_row(
                "Padding added",
                str(result.padded_length - result.input_length),
            )
        details.add_row("Blocks", str(len(result.text.split())))
        self._rich.print(details)

    # ------------------------------------------------------------------ #
    #  Keystream Display
    # ------------------------------------------------------------------ #

    def display_keystream(self, result: KeystreamResult) -> None:
        self.console.section("Keystream")
        rows = [
            (idx, value, card_label(value), letter)
            for idx, (value, letter) in enumerate(
                zip(result.values, result.letters), start=1
            )
        ]
        self.console.table(
            "Keystream Values",
            ["#", "Value", "Card", "Letter"],
            rows,
            styles=["dim", "bold", "cyan", "bright_magenta"],
        )

    # ------------------------------------------------------------------ #
    #  Deck Display
    # ------------------------------------------------------------------ #

    def display_deck(self, snapshot: DeckSnapshot) -> None:
        """Lay the deck out in rows of thirteen, top card first."""
        self.console.section("Deck Order")

        tbl = Table(
            show_header=False,
            border_style="bright_cyan",
            show_lines=False,
            padding=(0, 1),
        )
        tbl.add_column("Pos", style="dim", justify="right")
        for _ in range(_DECK_ROW_LENGTH):
            tbl.add_column(justify="center")

        cards = snapshot.cards
        for start in range(0, len(cards), _DECK_ROW_LENGTH):
            row = cards[start:start + _DECK_ROW_LENGTH]
            cells = [
                Text(card_label(card), style="pontifex.joker" if is_joker(card) else "")
                for card in row
            ]
            cells += [Text("")] * (_DECK_ROW_LENGTH - len(cells))
            tbl.add_row(str(start), *cells)

        self._rich.print(tbl)
        joker_a, joker_b = snapshot.jokers
        self.console.info(f"Joker A at position {joker_a}, joker B at position {joker_b}")
