from pathlib import Path
import os

from dotenv import load_dotenv

# Load environment variables from the working directory and the project root (if present).
PROJECT_ROOT = Path(__file__).resolve().parents[1]
load_dotenv(Path.cwd() / ".env")
load_dotenv(PROJECT_ROOT / ".env")

FALLBACK_PAGE_SIZE = 20
LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


def read_page_size() -> int:
    raw = os.getenv("TASKMANAGER_DEFAULT_PAGE_SIZE", str(FALLBACK_PAGE_SIZE))
    try:
        value = int(raw)
    except ValueError:
        return FALLBACK_PAGE_SIZE
    return value if value > 0 else FALLBACK_PAGE_SIZE


def read_log_level():
    """Level name for the package logger, or None to leave it alone."""
    value = os.getenv("TASKMANAGER_LOG_LEVEL", "").strip().upper()
    return value if value in LOG_LEVELS else None


DEFAULT_PAGE_SIZE = read_page_size()
LOG_LEVEL = read_log_level()
