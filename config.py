import os
from pathlib import Path
from dotenv import load_dotenv

# Load environment variables
env_path = Path(__file__).parent / ".env"
if env_path.exists():
    load_dotenv(dotenv_path=env_path)

# Logging
LOG_LEVEL = os.getenv("INSIGHTS_LOG_LEVEL", "INFO").upper()

def parse_workers(raw: str) -> int:
    """Worker count from the environment, 0 when it is not an integer."""
    try:
        return int(raw)
    except (TypeError, ValueError):
        return 0


# Summary Configuration
SUMMARY_WORKERS_RAW = os.getenv("INSIGHTS_SUMMARY_WORKERS", "4")
SUMMARY_WORKERS = parse_workers(SUMMARY_WORKERS_RAW)

# Exported interviews (JSON) used by the CLI
EXPORTS_DIR = Path(os.getenv("INSIGHTS_EXPORTS_DIR", "exports"))

_LOG_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG", "NOTSET"}


def validate_config():
    """Validate configuration values."""
    if SUMMARY_WORKERS < 1:
        raise RuntimeError(
            f"INSIGHTS_SUMMARY_WORKERS must be a positive integer (got {SUMMARY_WORKERS_RAW!r})."
        )
    if LOG_LEVEL not in _LOG_LEVELS:
        raise RuntimeError(f"Unknown INSIGHTS_LOG_LEVEL: {LOG_LEVEL}")
