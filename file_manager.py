import logging
from pathlib import Path

import pandas as pd

from sticker_errors import InputNotFoundError

logger = logging.getLogger(__name__)

# ---------- CORE FUNCTIONS ----------

def read_rows(path):
    path = Path(path)
    if not path.is_file():
        raise InputNotFoundError(path)

    if path.suffix.lower() == ".csv":
        df = pd.read_csv(path, header=None, dtype=str, keep_default_na=False)
    else:
        # first sheet only
        df = pd.read_excel(path, sheet_name=0, header=None, dtype=str)

    for values in df.itertuples(index=False, name=None):
        cells = ["" if pd.isna(v) else str(v) for v in values]
        while cells and cells[-1] == "":
            cells.pop()
        yield cells


def load_entries(path):
    """
    Load {barcode: product name} from the first sheet of a spreadsheet.

    There is no header row. Rows with fewer than two cells are skipped,
    and a repeated barcode keeps the last product name seen.
    """
    entries = {}
    for row_number, cells in enumerate(read_rows(path), start=1):
        if len(cells) < 2:
            logger.debug("Skipping row %d: fewer than two cells", row_number)
            continue
        entries[cells[0]] = cells[1]
    return entries


def ensure_out_dir(out_dir):
    out_path = Path(out_dir)
    if not out_path.exists():
        logger.info("Out folder does not exist, creating it...")
        out_path.mkdir(parents=True, exist_ok=True)
    return out_path
