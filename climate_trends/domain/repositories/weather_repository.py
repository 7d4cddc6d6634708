"""Weather repository interface."""

from abc import ABC, abstractmethod
from typing import List

from ..entities.reading import RawRow


class WeatherRepository(ABC):
    """Abstract repository for raw daily temperature rows."""

    @abstractmethod
    def get_raw_rows(self) -> List[RawRow]:
        """
        Retrieve every raw row of the data source.

        Returns:
            List of RawRow entities, unvalidated

        Raises:
            NoUsableDataError: If the source cannot be read as a table or is empty
        """
        pass
