"""
Pontifex Solitaire -- Card-Deck Keystream Cipher
=================================================

Bruce Schneier's Solitaire cipher (called Pontifex in Neal Stephenson's
Cryptonomicon): a keystream generator driven by a 54-card deck, keyed
from a passphrase and combined with A-Z text modulo 26.

Modules:
    - solitaire.core.cards: Card values and joker handling
    - solitaire.core.deck: Deck state machine (move, triple cut, count cut)
    - solitaire.core.keying: Passphrase key scheduler
    - solitaire.core.keystream: Encryption and decryption
    - solitaire.core.engine: Facade used by the CLI
    - solitaire.parsers: Input normalization
    - solitaire.output: Console and report output
    - solitaire.cli: Click-based command-line interface

The cipher is a pedagogical design and makes no claim of modern security.

References:
    - Schneier, B. (1999). The Solitaire Encryption Algorithm.
      https://www.schneier.com/academic/solitaire/
"""

__version__ = "1.0.0"
__tool_name__ = "solitaire"
