# =========================================================
# EXPORT CITY DATASET TO CSV
# ---------------------------------------------------------
# Generates: one city (or "All Cities") synthetic dataset
# Saves:     <selection>_merged.csv
# ---------------------------------------------------------
# Columns are fixed (EXPORT_COLUMNS), header row first.
# =========================================================

import os
import re
import sys
import pandas as pd

from config.settings import settings
from config.logging import logger
from config.constants import EXPORT_COLUMNS
from data_pipeline.synthetic_generator import generate_city_dataset


def export_filename(selection: str, suffix: str) -> str:
    stem = re.sub(r"\s", "_", selection)
    return f"{stem}_{suffix}"


def dataset_to_csv(data) -> str:
    """CSV text for a dataset: header + one comma separated row per record."""
    df = data if isinstance(data, pd.DataFrame) else pd.DataFrame(list(data))
    if df.empty:
        return ",".join(EXPORT_COLUMNS)

    out = df.rename(columns={"air_density": "density"})[EXPORT_COLUMNS]
    return out.to_csv(index=False, lineterminator="\n").rstrip("\n")


def export_city_dataset(selection: str, folder: str = None):
    logger.info(f"========== EXPORT DATASET STARTED | {selection} ==========")

    df = generate_city_dataset(selection)

    if df.empty:
        logger.warning(f"Nothing to export for {selection}")
        return None

    folder = folder or settings.EXPORT_DIR
    os.makedirs(folder, exist_ok=True)

    filepath = os.path.join(folder, export_filename(selection, "merged.csv"))

    with open(filepath, "w", encoding="utf-8") as f:
        f.write(dataset_to_csv(df))

    logger.info(f"CSV saved at: {filepath} | rows={len(df)}")
    logger.info("========== EXPORT COMPLETE ==========")

    return filepath


if __name__ == "__main__":
    target = sys.argv[1] if len(sys.argv) > 1 else settings.DEFAULT_CITY
    path = export_city_dataset(target)

    print("\n✅ DATASET EXPORTED")
    print(f"Location: {path}")
