"""Country name to ISO-3 code reconciliation and border lists."""

from types import MappingProxyType
from typing import Iterable, List, Mapping, Optional

# Names the COVID feeds spell differently from the country metadata feed.
OVERRIDES = {
  "US": "USA",
  "United States": "USA",
  "UK": "GBR",
  "United Kingdom": "GBR",
  "Russia": "RUS",
  "Korea, South": "KOR",
  "South Korea": "KOR",
  "North Korea": "PRK",
  "Iran": "IRN",
  "Syria": "SYR",
  "Vietnam": "VNM",
  "Laos": "LAO",
  "Brunei": "BRN",
  "Burma": "MMR",
  "Taiwan*": "TWN",
  "Taiwan": "TWN",
  "Czechia": "CZE",
  "Moldova": "MDA",
  "Bolivia": "BOL",
  "Venezuela": "VEN",
  "Tanzania": "TZA",
  "Cabo Verde": "CPV",
  "Cote d'Ivoire": "CIV",
  "Eswatini": "SWZ",
  "North Macedonia": "MKD",
  "Holy See": "VAT",
  "West Bank and Gaza": "PSE",
  "Congo": "COG",
  "Democratic Republic of the Congo": "COD",
}


def strip_qualifier(name: str) -> str:
  """'Bolivia (Plurinational State of)' -> 'Bolivia'."""
  return name.split(" (")[0]


def build_code_map(countries: Iterable[dict], overrides: Mapping[str, str] = OVERRIDES) -> Mapping[str, str]:
  code_map = {}
  for country in countries:
    code_map[strip_qualifier(country['name'])] = country['alpha3Code']
  code_map.update(overrides)
  return MappingProxyType(code_map)


def build_neighbour_map(countries: Iterable[dict]) -> Mapping[str, tuple]:
  neighbours = {
    country['alpha3Code']: tuple(country.get('borders') or ())
    for country in countries
  }
  return MappingProxyType(neighbours)


def resolve_code(code_map: Mapping[str, str], name: str) -> Optional[str]:
  return code_map.get(strip_qualifier(name))


def name_for_code(code_map: Mapping[str, str], code: str) -> Optional[str]:
  return next((name for name, value in code_map.items() if value == code), None)


def country_options(code_map: Mapping[str, str]) -> List[str]:
  return sorted(code_map)
