# font_manager.py
import io
import threading
from pathlib import Path

from PIL import ImageFont

from sticker_config import FONT_PATH, MAX_LABEL_FONT_SIZE
from sticker_errors import FontLoadError


class FontAsset:
    """
    A TrueType font read once and shared by every sticker task.

    Only the raw bytes are shared. FreeType faces are not safe to use
    from several threads at once, so each thread builds and caches its
    own face per size.
    """

    def __init__(self, data: bytes, name: str = "font"):
        self.data = data
        self.name = name
        self._local = threading.local()

    @classmethod
    def load(cls, path=FONT_PATH):
        path = Path(path)
        try:
            data = path.read_bytes()
        except OSError as e:
            raise FontLoadError(f"Failed to read font {path}: {e}") from e

        asset = cls(data, name=path.name)
        try:
            asset.font(MAX_LABEL_FONT_SIZE)
        except OSError as e:
            raise FontLoadError(f"Failed to load font {path}: {e}") from e
        return asset

    def font(self, size: int):
        cache = getattr(self._local, "fonts", None)
        if cache is None:
            cache = self._local.fonts = {}

        font = cache.get(size)
        if font is None:
            font = ImageFont.truetype(io.BytesIO(self.data), size)
            cache[size] = font
        return font

    def text_width(self, text: str, size: int) -> float:
        return self.font(size).getlength(text)


def fit_font_size(text, max_width, font_asset, max_size=MAX_LABEL_FONT_SIZE) -> int:
    """Largest size from max_size down to 1 whose width fits; 1 if none does."""
    for size in range(max_size, 0, -1):
        if font_asset.text_width(text, size) <= max_width:
            return size
    return 1
