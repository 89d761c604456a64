"""
Pontifex Configuration Management
==================================

Centralized configuration for the Pontifex toolkit using Python
dataclasses and TOML-based persistence.

Configuration is kept apart from code: every tunable of the Solitaire
tool (block size, padding letter, input normalization, logging) lives
here and can be overridden from a ``config.toml`` file.

References:
    - Wiggins, A. (2011). The Twelve-Factor App. https://12factor.net/
    - TOML v1.0.0 Specification. https://toml.io/en/v1.0.0
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, field, asdict
from pathlib import Path
from typing import Any, Optional

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib  # type: ignore[no-redef]


# ---------------------------------------------------------------------------
# Default configuration file path relative to the Pontifex root
# ---------------------------------------------------------------------------
_DEFAULT_CONFIG_PATH: Path = Path(__file__).resolve().parent.parent / "config.toml"


# ========================== Tool-Specific Configs ==========================


@dataclass(frozen=False, slots=True)
class SolitaireConfig:
    """Configuration for Solitaire -- the card-deck keystream cipher.

    Controls output grouping, plaintext padding, the caller-side input
    normalization and the joker-skip guard of the output procedure.
Out-of-range values raise :class:`ValueError` on construction.

    Reference:
        Schneier, B. (1999). The Solitaire Encryption Algorithm.
        https://www.schneier.com/academic/solitaire/
    """

    # Output formatting
    group_size: int = 5
    pad_char: str = "X"

    # Input normalization (applied before the core sees the text)
    strip_spaces: bool = True
    uppercase: bool = True
    strict: bool = True

    # Consecutive joker candidates tolerated by Deck.output()
    max_joker_skips: int = 10_000
    output_format: str = "console"

    def __post_init__(self) -> None:
        if self.group_size < 1:
            raise ValueError(f"group_size must be at least 1, got {self.group_size}")
        if len(self.pad_char) != 1 or not "A" <= self.pad_char <= "Z":
            raise ValueError(f"pad_char must be one letter A-Z, got {self.pad_char!r}")
        if self.max_joker_skips < 0:
            raise ValueError(
                f"max_joker_skips must not be negative, got {self.max_joker_skips}"
            )


# =========================== Global Settings ===============================


@dataclass(frozen=False, slots=True)
class GlobalConfig:
    """Global settings shared across the Pontifex modules.

    Controls logging verbosity and log destinations.
    """

    log_level: str = "WARNING"
    log_file: Optional[str] = None
    log_json: bool = False


# =========================== Master Config =================================


@dataclass(frozen=False, slots=True)
class PontifexConfig:
    """Master configuration aggregating tool-specific and global settings.

    Usage:
        >>> config = PontifexConfig.load()                  # from default path
        >>> config = PontifexConfig.load("custom.toml")     # from custom path
        >>> print(config.solitaire.group_size)
        5
    """

    global_settings: GlobalConfig = field(default_factory=GlobalConfig)
    solitaire: SolitaireConfig = field(default_factory=SolitaireConfig)

    # ------------------------------------------------------------------ #
    #  TOML Loading
    # ------------------------------------------------------------------ #

    @classmethod
    def load(cls, path: str | Path | None = None) -> PontifexConfig:
        """Load configuration from a TOML file.

        If *path* is ``None`` the loader looks for ``config.toml`` in the
        project root.  Missing keys fall back to dataclass defaults.

        Args:
            path: Filesystem path to a TOML configuration file.
                  Defaults to ``<project_root>/config.toml``.

        Returns:
            A fully-populated :class:`PontifexConfig` instance.

        Raises:
            FileNotFoundError: If the specified path does not exist
                *and* was explicitly provided by the caller.
            ValueError: A section holds an out-of-range value.
        """
        config_path = Path(path) if path is not None else _DEFAULT_CONFIG_PATH

        if not config_path.exists():
            if path is not None:
                raise FileNotFoundError(
                    f"Configuration file not found: {config_path}"
                )
            return cls()

        with open(config_path, "rb") as fh:
            raw: dict[str, Any] = tomllib.load(fh)

        return cls(
            global_settings=cls._build_section(GlobalConfig, raw.get("global", {})),
            solitaire=cls._build_section(SolitaireConfig, raw.get("solitaire", {})),
        )

    # ------------------------------------------------------------------ #
    #  Serialisation helpers
    # ------------------------------------------------------------------ #

    def to_dict(self) -> dict[str, Any]:
        """Serialise the entire configuration tree to a plain dictionary."""
        return asdict(self)

    # ------------------------------------------------------------------ #
    #  Internal helpers
    # ------------------------------------------------------------------ #

    @staticmethod
    def _build_section(cls: type, data: dict[str, Any]) -> Any:
        """Instantiate a dataclass *cls* using only the keys it declares.

        Unknown keys in the TOML source are silently ignored.
        """
        valid_keys = {f.name for f in cls.__dataclass_fields__.values()}  # type: ignore[attr-defined]
        filtered = {k: v for k, v in data.items() if k in valid_keys}
        return cls(**filtered)

