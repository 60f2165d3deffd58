"""Central configuration for the article auto-fit tool."""

import os
from pathlib import Path
from dotenv import load_dotenv

load_dotenv()

# ── Paths ──────────────────────────────────────────────────────────────────
ROOT_DIR = Path(__file__).resolve().parent.parent
DATA_DIR = ROOT_DIR / "data"
OUTPUT_DIR = ROOT_DIR / "output" / "fitted"
CREDENTIALS_PATH = Path(
    os.getenv("NEWSFIT_CREDENTIALS_PATH", str(Path.home() / ".newsfit" / "credentials.json"))
)

# ── API Keys ───────────────────────────────────────────────────────────────
ANTHROPIC_API_KEY = os.getenv("ANTHROPIC_API_KEY", "")
API_KEY_STORAGE_KEY = "claude_api_key"

# ── Claude settings ────────────────────────────────────────────────────────
CLAUDE_MODEL = "claude-sonnet-4-20250514"
CLAUDE_MAX_TOKENS = 4096
CLAUDE_TIMEOUT = float(os.getenv("CLAUDE_TIMEOUT", "60"))  # seconds per rewrite call

# ── Auto-fit settings ──────────────────────────────────────────────────────
MAX_ITERATIONS = 5
FIT_TOLERANCE = 5.0  # same unit as the measured overflow (px)

# ── Template slot names ────────────────────────────────────────────────────
# Text layers in the article frame are matched by their layer name.
SLOT_NAMES = {
    "headline": "Headline",
    "title": "#Title",
    "subtitle": "#Subtitle",
    "source": "Source",
    "url": "URL",
}
COLUMN_SLOT_NAME = "Title"  # body columns reuse the template's "Title" layer name

# ── Host text metrics ──────────────────────────────────────────────────────
CHAR_WIDTH_RATIO = 0.5  # average glyph width as a fraction of font size
DEFAULT_FONT_SIZE = 12.0
LINE_HEIGHT_FACTOR = 1.2
