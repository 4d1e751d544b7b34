"""Configuration helpers for the form engine."""
from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Tuple

from dotenv import load_dotenv

from .inference import DEFAULT_TEXTAREA_THRESHOLD
from .typeinfo import DEFAULT_LANGUAGES

DEFAULT_ENDPOINT = "https://dbpedia.org/sparql"
DEFAULT_RESOURCE = "http://dbpedia.org/resource/Paris"

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off", ""}


def _env_flag(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ValueError(f"{name} must be a boolean flag, got {raw!r}")


def parse_languages(raw: str) -> Tuple[str, ...]:
    """Split a comma-separated language preference list (``"fr,en"``)."""

    return tuple(part.strip().lower() for part in raw.split(",") if part.strip())


@dataclass
class EngineConfig:
    """Runtime configuration for :class:`FormEngine` and :class:`FormSession`."""

    endpoint: str = DEFAULT_ENDPOINT
    resource_iri: str = DEFAULT_RESOURCE
    textarea_threshold: int = DEFAULT_TEXTAREA_THRESHOLD
    languages: Tuple[str, ...] = field(default_factory=lambda: tuple(DEFAULT_LANGUAGES))
    exclude_rdf_type: bool = False
    post_fallback: bool = True
    timeout: float = 30.0

    def __post_init__(self) -> None:
        if self.textarea_threshold < 0:
            raise ValueError("textarea_threshold must be non-negative")
        if self.timeout <= 0:
            raise ValueError("timeout must be positive")
        self.languages = tuple(lang.lower() for lang in self.languages)

    @classmethod
    def from_env(cls, env_file: Optional[Path] = None) -> "EngineConfig":
        """Build a configuration from ``RDF_FORM_*`` variables.

        Values already in the environment win over those in ``env_file`` (or
        the nearest ``.env`` when no file is given).
        """

        if env_file is not None:
            load_dotenv(env_file)
        else:
            load_dotenv()
        kwargs = {}
        if os.getenv("RDF_FORM_ENDPOINT"):
            kwargs["endpoint"] = os.environ["RDF_FORM_ENDPOINT"]
        if os.getenv("RDF_FORM_RESOURCE"):
            kwargs["resource_iri"] = os.environ["RDF_FORM_RESOURCE"]
        if os.getenv("RDF_FORM_TEXTAREA_THRESHOLD"):
            kwargs["textarea_threshold"] = int(os.environ["RDF_FORM_TEXTAREA_THRESHOLD"])
        if os.getenv("RDF_FORM_LANGUAGES"):
            kwargs["languages"] = parse_languages(os.environ["RDF_FORM_LANGUAGES"])
        if os.getenv("RDF_FORM_TIMEOUT"):
            kwargs["timeout"] = float(os.environ["RDF_FORM_TIMEOUT"])
        kwargs["exclude_rdf_type"] = _env_flag("RDF_FORM_EXCLUDE_RDF_TYPE", False)
        kwargs["post_fallback"] = _env_flag("RDF_FORM_POST_FALLBACK", True)
        return cls(**kwargs)
