"""CSV/Excel file weather repository implementation."""

import logging
import zipfile
from pathlib import Path
from typing import Any, List, Optional

import pandas as pd
from openpyxl.utils.exceptions import InvalidFileException

from ...domain.entities.reading import RawRow
from ...domain.exceptions import NoUsableDataError
from ...domain.repositories.weather_repository import WeatherRepository

logger = logging.getLogger(__name__)


def _cell(value: Any) -> Optional[Any]:
    return None if pd.isna(value) else value


class CsvWeatherRepository(WeatherRepository):
    """Repository for daily temperatures stored in a CSV or Excel file."""

    def __init__(
        self,
        data_file: str,
        time_column: str = "time",
        temperature_column: str = "Ktemp",
    ):
        """
        Initialize repository.

        Args:
            data_file: Path to CSV/Excel file with one row per day
            time_column: Name of the timestamp column
            temperature_column: Name of the Kelvin temperature column
        """
        self.data_file = Path(data_file)
        self.time_column = time_column
        self.temperature_column = temperature_column

        if not self.data_file.exists():
            raise FileNotFoundError(f"Weather data file not found: {data_file}")

    def _read_table(self) -> pd.DataFrame:
        try:
            if self.data_file.suffix == ".xlsx":
                return pd.read_excel(self.data_file, engine="openpyxl")
            return pd.read_csv(self.data_file, skip_blank_lines=True)
        except pd.errors.EmptyDataError as e:
            raise NoUsableDataError(f"Weather data file is empty: {self.data_file}") from e
        except (
            pd.errors.ParserError,
            UnicodeDecodeError,
            ValueError,
            zipfile.BadZipFile,
            InvalidFileException,
        ) as e:
            logger.error(f"Error reading weather data file: {e}")
            raise NoUsableDataError(
                f"Weather data file is not a readable table: {self.data_file}"
            ) from e

    def get_raw_rows(self) -> List[RawRow]:
        """Load raw rows from the file."""
        logger.info(f"Loading weather data from {self.data_file}")
        df = self._read_table()

        missing = [
            column
            for column in (self.time_column, self.temperature_column)
            if column not in df.columns
        ]
        if missing:
            raise NoUsableDataError(
                f"Weather data file {self.data_file} lacks required columns: {', '.join(missing)}"
            )
        if df.empty:
            raise NoUsableDataError(f"Weather data file has no rows: {self.data_file}")

        result = []
        for time_value, temperature in zip(df[self.time_column], df[self.temperature_column]):
            time_value = _cell(time_value)
            result.append(
                RawRow(
                    time=str(time_value) if time_value is not None else None,
                    temperature_k=_cell(temperature),
                )
            )

        logger.info(f"Loaded {len(result)} raw weather rows")
        return result
