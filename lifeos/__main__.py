"""Main entry point for LifeOS when run as a module"""

import logging
import sys

# Force UTF-8 output on Windows (Farsi text and box characters)
if sys.stdout.encoding and sys.stdout.encoding.lower() not in ('utf-8', 'utf8'):
    try:
        sys.stdout.reconfigure(encoding='utf-8', errors='replace')
        sys.stderr.reconfigure(encoding='utf-8', errors='replace')
    except (AttributeError, OSError):
        pass

# ── Root logger ──────────────────────────────────────────────────────────────
logging.basicConfig(level=logging.WARNING, format='%(levelname)s: %(message)s')

# ── Per-turn chatter stays quiet unless --verbose ────────────────────────────
for _noisy in ('lifeos.agent', 'lifeos.intents', 'lifeos.responses', 'lifeos.storage'):
    logging.getLogger(_noisy).setLevel(logging.ERROR)

from lifeos.cli import main

if __name__ == '__main__':
    main()
