"""Configuration module for LifeOS"""

import os
from pathlib import Path

# Base directories
BASE_DIR = Path(os.environ.get("LIFEOS_HOME", Path.home() / ".lifeos"))
DATA_DIR = BASE_DIR / "data"
STORE_FILE = DATA_DIR / "assistant_store.json"

# Conversation settings
MAX_CONVERSATION_HISTORY = 10  # turns, oldest evicted first
DEFAULT_MODE = "hybrid"  # hybrid | templates | conversational

# Memory settings
MAX_FACT_LENGTH = 50  # characters kept per remembered fact

# Language detection
FARSI_DENSITY_THRESHOLD = 0.3  # share of Farsi characters in the conversational path

# Intent classification
INTENT_CONFIDENCE = 0.9

# Reminders & notes
MAX_LISTED_ITEMS = 5
DEFAULT_REMINDER_DELAY_SECONDS = 3600  # 1 hour when no time was given

# CLI settings
CLI_PROMPT = "You"
CLI_ASSISTANT = "LifeOS"
CLI_WIDTH = 80
