# sticker_errors.py


class StickerError(Exception):
    pass


class ConfigError(StickerError):
    pass


class InputNotFoundError(StickerError):
    def __init__(self, path):
        self.path = path
        super().__init__(f"Input file not found: {path} (create a spreadsheet called data.xlsx)")


class FontLoadError(StickerError):
    pass


class EncodingError(StickerError):
    def __init__(self, code, reason):
        self.code = code
        super().__init__(f"Cannot encode {code!r} as Code128: {reason}")


class ScalingError(StickerError):
    pass


class InvalidCodeError(StickerError):
    def __init__(self, code):
        self.code = code
        super().__init__(f"Barcode is too short: {code!r}")
