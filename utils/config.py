"""
Environment configuration loader.

Reads optional environment variables (or a local ``.env`` file) and
exposes them via a simple ``Config`` dataclass. Every variable has a
default, so the app runs with no configuration at all.

Supported variables:

* ``CNPJ_VENDOR_ID`` – vendorId stamped on every generated record.
* ``CNPJ_DEFAULT_VENDOR_NAME`` – vendor name used when the field is blank (``'AMBEV'``).
* ``CNPJ_DEFAULT_COUNTRY`` – country code used when the field is blank (``'BR'``).
* ``CNPJ_BANNER_SECONDS`` – how long a banner stays on screen (``5``).
* ``CNPJ_ACTIONS`` – comma separated list of actions offered by the form.
* ``LOG_LEVEL`` – logging level name (``'INFO'``).
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Tuple
from dotenv import load_dotenv
load_dotenv()

DEFAULT_VENDOR_ID = "7312b2db-b028-4bd9-9d8a-a8cfa006029e"
DEFAULT_ACTIONS = ("ADD", "REMOVE")


@dataclass
class Config:
    """Holds environment configuration for the application."""

    VENDOR_ID: str = DEFAULT_VENDOR_ID
    DEFAULT_VENDOR_NAME: str = "AMBEV"
    DEFAULT_COUNTRY: str = "BR"
    BANNER_SECONDS: float = 5.0
    ACTIONS: Tuple[str, ...] = field(default_factory=lambda: DEFAULT_ACTIONS)
    LOG_LEVEL: str = "INFO"


def _load_env() -> Config:
    """Load configuration from environment variables.

    Raises:
        ValueError: If ``CNPJ_BANNER_SECONDS`` is not a number.

    Returns:
        Config: A populated configuration dataclass.
    """

    raw_seconds = os.environ.get("CNPJ_BANNER_SECONDS", "5")
    try:
        banner_seconds = float(raw_seconds)
    except ValueError:
        raise ValueError(f"CNPJ_BANNER_SECONDS must be a number, got {raw_seconds!r}") from None

    raw_actions = os.environ.get("CNPJ_ACTIONS")
    if raw_actions:
        actions = tuple(a.strip() for a in raw_actions.split(",") if a.strip())
    else:
        actions = DEFAULT_ACTIONS

    return Config(
        VENDOR_ID=os.environ.get("CNPJ_VENDOR_ID") or DEFAULT_VENDOR_ID,
        DEFAULT_VENDOR_NAME=os.environ.get("CNPJ_DEFAULT_VENDOR_NAME") or "AMBEV",
        DEFAULT_COUNTRY=os.environ.get("CNPJ_DEFAULT_COUNTRY") or "BR",
        BANNER_SECONDS=banner_seconds,
        ACTIONS=actions or DEFAULT_ACTIONS,
        LOG_LEVEL=os.environ.get("LOG_LEVEL", "INFO").upper(),
    )


# Create a single configuration instance when this module is imported.
config: Config = _load_env()
