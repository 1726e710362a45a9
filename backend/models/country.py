from typing import Literal

from pydantic import BaseModel, ConfigDict

ALL_REGIONS = "all"


class Country(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")

    name: str
    population: int | float | str
    region: str
    capital: str = ""
    flag: str


class FilterCriterion(BaseModel):
    """Either a region token or a name prefix; the two modes never combine."""

    model_config = ConfigDict(frozen=True)

    mode: Literal["region", "search"]
    value: str = ""

    @classmethod
    def all(cls) -> "FilterCriterion":
        return cls(mode="region", value=ALL_REGIONS)

    @classmethod
    def region(cls, value: str) -> "FilterCriterion":
        return cls(mode="region", value=value)

    @classmethod
    def search(cls, value: str) -> "FilterCriterion":
        return cls(mode="search", value=value)


class CountryList(BaseModel):
    countries: list[Country]
    total: int
    criterion: FilterCriterion
    notice: str = ""
