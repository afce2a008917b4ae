"""
Runtime settings read from the environment or a ``.env`` file.
"""

import logging
import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel, Field


logger = logging.getLogger("dialect-translator")

TABLES_DIR_ENV = "DIALECT_TRANSLATOR_TABLES_DIR"
HIGHLIGHT_CLASS_ENV = "DIALECT_TRANSLATOR_HIGHLIGHT_CLASS"


class Settings(BaseModel):
    """Translator settings.

    Attributes:
        tables_dir: Directory holding the four YAML tables (None = packaged tables)
        highlight_class: CSS class of the span wrapped around replacements
    """
    tables_dir: Optional[Path] = None
    highlight_class: str = Field(default="highlight", min_length=1)


def load_settings() -> Settings:
    """Build Settings from the environment, loading ``.env`` first if present."""
    if not load_dotenv():
        logger.debug("No .env file found, using process environment only")

    tables_dir = os.getenv(TABLES_DIR_ENV, "").strip()
    highlight_class = os.getenv(HIGHLIGHT_CLASS_ENV, "").strip() or "highlight"

    settings = Settings(
        tables_dir=Path(tables_dir).resolve() if tables_dir else None,
        highlight_class=highlight_class,
    )
    logger.debug(f"Settings: tables_dir={settings.tables_dir}, highlight_class={settings.highlight_class}")
    return settings
