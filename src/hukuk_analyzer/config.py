"""Runtime settings read from the environment (and an optional ``.env`` file)."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from dotenv import load_dotenv

from .catalog import GENERIC_DOCUMENT_TYPE

DEFAULT_MAX_DOCUMENT_CHARS = 200_000
DEFAULT_LOG_LEVEL = "WARNING"


@dataclass(frozen=True)
class Settings:
    """Analyzer settings.

    Attributes:
        max_document_chars: Input longer than this is truncated before
            matching, which bounds regex work per document.
        default_document_type: Used when ``analyze()`` gets no document type.
        log_level: Level name handed to ``setup_logging``.
    """

    max_document_chars: int = DEFAULT_MAX_DOCUMENT_CHARS
    default_document_type: str = GENERIC_DOCUMENT_TYPE
    log_level: str = DEFAULT_LOG_LEVEL

    def __post_init__(self) -> None:
        if self.max_document_chars < 1:
            raise ValueError(f"max_document_chars must be >= 1, got {self.max_document_chars}")

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None, dotenv: bool = True) -> Settings:
        """Build settings from ``HUKUK_*`` variables.

        Args:
            environ: Mapping to read instead of ``os.environ``.
            dotenv: Load a ``.env`` file into the process environment first.

        Raises:
            ValueError: If ``HUKUK_MAX_DOCUMENT_CHARS`` is not a positive integer.
        """
        if dotenv:
            load_dotenv()
        env = os.environ if environ is None else environ

        raw_max = env.get("HUKUK_MAX_DOCUMENT_CHARS", "").strip()
        if raw_max:
            try:
                max_chars = int(raw_max)
            except ValueError:
                raise ValueError(f"HUKUK_MAX_DOCUMENT_CHARS must be an integer, got {raw_max!r}") from None
            if max_chars < 1:
                raise ValueError(f"HUKUK_MAX_DOCUMENT_CHARS must be >= 1, got {max_chars}")
        else:
            max_chars = DEFAULT_MAX_DOCUMENT_CHARS

        return cls(
            max_document_chars=max_chars,
            default_document_type=env.get("HUKUK_DEFAULT_DOCUMENT_TYPE", "").strip() or GENERIC_DOCUMENT_TYPE,
            log_level=(env.get("HUKUK_LOG_LEVEL", "").strip() or DEFAULT_LOG_LEVEL).upper(),
        )
