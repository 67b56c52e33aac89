# conftest.py
import pandas as pd
import pytest

from font_manager import FontAsset
from sticker_config import FONT_PATH


@pytest.fixture(scope="session")
def font_asset():
    return FontAsset.load(FONT_PATH)


@pytest.fixture
def write_xlsx(tmp_path):
    def _write(rows, name="data.xlsx"):
        path = tmp_path / name
        pd.DataFrame(rows).to_excel(path, header=False, index=False)
        return path

    return _write


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for key in ("STICKER_INPUT", "STICKER_OUT_DIR", "STICKER_FONT", "STICKER_WORKERS"):
        monkeypatch.delenv(key, raising=False)
