"""
Configuration for Menu Adventures.

Values come from environment variables, optionally loaded from a `.env`
file at the project root or the working directory.
"""

import os
from pathlib import Path

from dotenv import load_dotenv

PROJECT_ROOT = Path(__file__).parent.parent

# Load environment variables from project root
load_dotenv(PROJECT_ROOT / ".env")
load_dotenv()  # Also check current directory


def get_worlds_dir() -> Path:
    """Directory holding one sub-directory per world."""
    return Path(os.getenv("MENU_ADVENTURES_WORLDS_DIR", PROJECT_ROOT / "worlds"))


def get_text_width() -> int:
    """Width wrapped paragraphs are filled to."""
    return int(os.getenv("MENU_ADVENTURES_TEXT_WIDTH", "80"))


def get_log_dir() -> Path:
    """Directory the CLI writes its log files to."""
    return Path(os.getenv("MENU_ADVENTURES_LOG_DIR", PROJECT_ROOT / "logs"))
