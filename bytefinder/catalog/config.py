from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

# Load .env from project root
load_dotenv(Path(__file__).resolve().parent.parent.parent / ".env")

_PACKAGED_DATA_DIR = Path(__file__).resolve().parent.parent / "data"


@dataclass(frozen=True)
class CatalogConfig:
    """
    Location of the cuisine and restaurant CSV files.
    """

    data_dir: Path = Path(os.getenv("BYTEFINDER_DATA_DIR", str(_PACKAGED_DATA_DIR)))
    restaurants_filename: str = "restaurants.csv"
    cuisines_filename: str = "cuisines.csv"

    @property
    def restaurants_path(self) -> Path:
        return self.data_dir / self.restaurants_filename

    @property
    def cuisines_path(self) -> Path:
        return self.data_dir / self.cuisines_filename


DEFAULT_CATALOG_CONFIG = CatalogConfig()
