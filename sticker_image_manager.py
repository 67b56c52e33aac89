# sticker_image_manager.py
import logging
from pathlib import Path

from PIL import Image, ImageDraw

from barcode_manager import encode_barcode
from font_manager import fit_font_size
from sticker_config import (
    STICKER_WIDTH,
    STICKER_HEIGHT,
    PADDING_TOP,
    SIDE_MARGIN,
    CAPTION_Y,
    LABEL_Y,
    CAPTION_FONT_SIZE,
    CAPTION_PREFIX,
    CAPTION_SUFFIX,
    MIN_CODE_LENGTH,
)
from sticker_errors import InvalidCodeError

logger = logging.getLogger(__name__)


def trim_code(code: str) -> str:
    if len(code) < MIN_CODE_LENGTH:
        raise InvalidCodeError(code)
    return code[CAPTION_PREFIX:len(code) - CAPTION_SUFFIX]


def render_sticker(code, label, font_asset):
    barcode_img = encode_barcode(code)
    caption = trim_code(code)

    img = Image.new("RGB", (STICKER_WIDTH, STICKER_HEIGHT), "white")
    draw = ImageDraw.Draw(img)

    # BARCODE
    img.paste(barcode_img.convert("RGB"), (0, PADDING_TOP))

    # CAPTION (trimmed code)
    center_x = STICKER_WIDTH / 2
    draw.text(
        (center_x, CAPTION_Y),
        caption,
        fill="black",
        font=font_asset.font(CAPTION_FONT_SIZE),
        anchor="mm",
    )

    # PRODUCT NAME
    max_width = STICKER_WIDTH - 2 * SIDE_MARGIN
    label_size = fit_font_size(label, max_width, font_asset)
    draw.text(
        (center_x, LABEL_Y),
        label,
        fill="black",
        font=font_asset.font(label_size),
        anchor="mm",
    )

    return caption, img


def compose_sticker(code, label, font_asset, out_dir) -> Path:
    caption, img = render_sticker(code, label, font_asset)

    out_path = Path(out_dir) / f"{caption}.png"
    img.save(out_path, format="PNG")

    logger.info("Generated: %s", out_path)
    return out_path
