# sticker_config.py
import os
import sys
from pathlib import Path

from dotenv import load_dotenv

from sticker_errors import ConfigError

BASE_DIR = Path(__file__).resolve().parent

# Sticker canvas (must match the printed sticker roll)
STICKER_WIDTH = 400
STICKER_HEIGHT = 150

# Barcode box
BARCODE_WIDTH = 400
BARCODE_HEIGHT = 100
PADDING_TOP = 10

# Text layout
SIDE_MARGIN = 10
CAPTION_Y = STICKER_HEIGHT - 32
LABEL_Y = STICKER_HEIGHT - 15

# Fonts
FONT_NAME = "DejaVuSans-Bold.ttf"
CAPTION_FONT_SIZE = 14
MAX_LABEL_FONT_SIZE = 20

# Caption = code minus a fixed prefix and suffix
CAPTION_PREFIX = 8
CAPTION_SUFFIX = 1
MIN_CODE_LENGTH = 13

# Defaults for a run
INPUT_PATH = "data.xlsx"
OUT_DIR = "out"


class Settings:
    def __init__(self, input_path, out_dir, font_path, workers):
        self.input_path = Path(input_path)
        self.out_dir = Path(out_dir)
        self.font_path = Path(font_path)
        self.workers = workers

    def __repr__(self):
        return (
            f"Settings(input_path={self.input_path!s}, out_dir={self.out_dir!s}, "
            f"font_path={self.font_path!s}, workers={self.workers})"
        )


def parse_workers(raw) -> int | None:
    if raw is None or str(raw).strip() == "":
        return None
    try:
        workers = int(str(raw).strip())
    except ValueError:
        raise ConfigError(f"Worker count must be an integer, got {raw!r}") from None
    if workers < 1:
        raise ConfigError(f"Worker count must be at least 1, got {workers}")
    return workers


def load_settings() -> Settings:
    """Read run settings from the environment, with .env support."""
    load_dotenv()
    return Settings(
        input_path=os.getenv("STICKER_INPUT", INPUT_PATH),
        out_dir=os.getenv("STICKER_OUT_DIR", OUT_DIR),
        font_path=os.getenv("STICKER_FONT", str(FONT_PATH)),
        workers=parse_workers(os.getenv("STICKER_WORKERS")),
    )


def find_font(name=FONT_NAME, search_dirs=None) -> Path:
    """
    Locate a bundled font. Source checkouts keep it in fonts/ next to
    this module; installs put it in <prefix>/fonts.
    """
    if search_dirs is None:
        search_dirs = [BASE_DIR / "fonts", Path(sys.prefix) / "fonts"]
    candidates = [Path(d) / name for d in search_dirs]
    for candidate in candidates:
        if candidate.is_file():
            return candidate
    return candidates[0]


FONT_PATH = find_font()
