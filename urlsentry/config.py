import os
from dotenv import load_dotenv
import yaml
from pathlib import Path

CONFIG_FILE = Path(__file__).parent / "config.yaml"

def load_config():
    if CONFIG_FILE.exists():
        with open(CONFIG_FILE, "r", encoding="utf-8") as f:
            return yaml.safe_load(f) or {}
    return {}

CONFIG = load_config()

def get_setting(section: str, key: str, default=None):
    """Return a setting from YAML or fallback to default."""
    return CONFIG.get(section, {}).get(key, default)


# ENV variable
load_dotenv()

# History
HISTORY_CAPACITY = int(os.getenv("HISTORY_CAPACITY", "10"))
HISTORY_KEY = os.getenv("HISTORY_KEY", "analysisHistory")
CACHE_DIR = os.getenv("CACHE_DIR", ".cache")

# Content fetch
REQUEST_TIMEOUT = float(os.getenv("REQUEST_TIMEOUT", "10"))
MAX_CONTENT_BYTES = int(os.getenv("MAX_CONTENT_BYTES", str(5 * 1024 * 1024)))

# General Settings
LOG_LEVEL = os.getenv("LOG_LEVEL", "WARNING")
