import pandas as pd

from config.logging import logger
from data_pipeline.synthetic_generator import generate_city_dataset


class DatasetService:
    """
    Process-memory cache of generated datasets, one per selection
    (city name or "All Cities"). Generation is deterministic, so a
    cached frame is always identical to a fresh one.
    """

    _cache = {}

    # =================================================
    # DATASET FOR A CITY / ALL CITIES
    # =================================================
    @classmethod
    def get_dataset(cls, selection: str) -> pd.DataFrame:
        if selection not in cls._cache:
            logger.info(f"Generating dataset for selection: {selection}")
            cls._cache[selection] = generate_city_dataset(selection)
        return cls._cache[selection]

    # =================================================
    # LATEST RECORD (FOR DASHBOARD KPIs)
    # =================================================
    @classmethod
    def get_latest_record(cls, selection: str):
        df = cls.get_dataset(selection)
        if df.empty:
            return None
        return df.iloc[-1].to_dict()

    # =================================================
    # RECENT WINDOW (FOR TREND CHARTS)
    # =================================================
    @classmethod
    def get_recent_records(cls, selection: str, days: int = 365) -> pd.DataFrame:
        """Last N days of one city (or every city for "All Cities"), oldest first."""
        df = cls.get_dataset(selection)
        return df.groupby("city", sort=False, group_keys=False).tail(days)

    @classmethod
    def clear(cls):
        cls._cache.clear()
