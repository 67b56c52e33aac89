# barcode_manager.py
import barcode
from barcode.errors import BarcodeError
from PIL import Image

from sticker_config import BARCODE_WIDTH, BARCODE_HEIGHT
from sticker_errors import EncodingError, ScalingError


def encode_modules(code: str) -> str:
    """
    Return the Code128 module string for `code`, one char per module
    ("1" = bar, "0" = space), including start, checksum and stop.
    Long payloads are not rejected here; they fail when scaled.
    """
    if not code:
        raise EncodingError(code, "content must not be empty")

    for ch in code:
        if ord(ch) > 127:
            raise EncodingError(code, f"character {ch!r} is not in the Code128 set")

    CODE128 = barcode.get_barcode_class("code128")
    try:
        return CODE128(code).build()[0]
    except (BarcodeError, KeyError, ValueError) as e:
        raise EncodingError(code, str(e)) from e


def scale_modules(modules: str, width: int = BARCODE_WIDTH, height: int = BARCODE_HEIGHT):
    """
    Scale a module string to a `width` x `height` 1-bit image.
    Every module gets the same whole number of pixels and the symbol
    is centered, so bars are never blurred or uneven.
    """
    if width <= 0 or height <= 0:
        raise ScalingError(f"Invalid barcode size {width}x{height}")

    module_count = len(modules)
    module_width = width // module_count if module_count else 0
    if module_width < 1:
        raise ScalingError(
            f"Can not scale barcode to an image smaller than {module_count}x1 (target {width}x{height})"
        )

    strip = Image.new("1", (module_count, 1), 255)
    strip.putdata([0 if m == "1" else 255 for m in modules])
    bars = strip.resize((module_count * module_width, height), Image.NEAREST)

    img = Image.new("1", (width, height), 255)
    img.paste(bars, ((width - bars.width) // 2, 0))
    return img


def encode_barcode(code: str, width: int = BARCODE_WIDTH, height: int = BARCODE_HEIGHT):
    return scale_modules(encode_modules(code), width, height)
