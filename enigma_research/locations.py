"""Countries, cities and regions read from semicolon-separated data files."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from pathlib import Path

_ITEM_SEPARATOR = ";"


@dataclass(frozen=True)
class Country:
    """A country, identified by its code."""

    code: str
    name: str


@dataclass(frozen=True)
class City:
    """A city with its location and time zone indication, all kept as text."""

    country: str
    name: str
    geo_lat: str
    geo_long: str
    region: str
    elevation: str
    indication_tz: str


def _read_fields(path: Path) -> Iterator[list[str]]:
    with path.open(encoding="utf-8") as handle:
        for line in handle:
            yield line.rstrip("\n").split(_ITEM_SEPARATOR)


class LocationHandler:
    """Look up countries, cities and regions in the data files of a directory.

    The directory holds countries.csv, cities.csv and regions.csv.
    """

    def __init__(self, data_dir: str | Path = "data") -> None:
        data_dir = Path(data_dir)
        self.countries_file = data_dir / "countries.csv"
        self.cities_file = data_dir / "cities.csv"
        self.regions_file = data_dir / "regions.csv"

    def countries(self) -> list[Country]:
        """Return all countries; raises OSError when the file cannot be read."""
        # The third field holds the continent, which is not used.
        return [
            Country(code=fields[0].strip(), name=fields[1].strip())
            for fields in _read_fields(self.countries_file)
            if len(fields) == 3
        ]

    def cities(self, country_code: str) -> list[City]:
        """Return all cities of a country; raises OSError when the file cannot be read."""
        found: list[City] = []
        for fields in _read_fields(self.cities_file):
            if len(fields) != 7 or fields[0] != country_code:
                continue
            region_code = f"{fields[0]}.{fields[4]}".strip()
            try:
                region = self.region_name(region_code)
            except OSError:
                region = ""
            found.append(
                City(
                    country=country_code,
                    name=fields[1].strip(),
                    geo_lat=fields[2].strip(),
                    geo_long=fields[3].strip(),
                    region=region,
                    elevation=fields[5].strip(),
                    indication_tz=fields[6].strip(),
                )
            )
        return found

    def region_name(self, region_code: str) -> str:
        """Return the name of a region, or an empty string when it is unknown."""
        for fields in _read_fields(self.regions_file):
            if len(fields) == 2 and fields[0] == region_code:
                return fields[1].strip()
        return ""