"""
Registry of area types, metrics and filter fields known to the API.

Every enumeration member carries its wire-format name as its value, so the
mapping between Python objects and API field names is a bijection enforced by
``enum.unique``. Metrics additionally map to the payload type used when
decoding response rows.
"""

import datetime
from enum import Enum, unique
from typing import Dict

from .exceptions import CovidDecodeError


@unique
class AreaType(Enum):
    """Geographic level a query is restricted to."""

    OVERVIEW = 'overview'
    NATION = 'nation'
    REGION = 'region'
    NHS_REGION = 'nhsRegion'
    UTLA = 'utla'
    LTLA = 'ltla'


@unique
class PayloadType(Enum):
    """Python type a metric's value is decoded into."""

    INTEGER = 'integer'
    STRING = 'string'
    DATE = 'date'
    AREA_TYPE = 'areaType'


@unique
class FilterField(Enum):
    """Fields a query can be filtered on."""

    AREA_TYPE = 'areaType'
    AREA_NAME = 'areaName'
    AREA_CODE = 'areaCode'
    DATE = 'date'


@unique
class Metric(Enum):
    """
    Statistics which may be requested from the API.

    A member identifies *which* value is requested; decoded values are returned
    as :class:`ukcovidpy.decoder.MetricValue` instances.
    """

    AREA_TYPE = 'areaType'
    AREA_NAME = 'areaName'
    AREA_CODE = 'areaCode'
    DATE = 'date'
    HASH = 'hash'
    NEW_CASES_BY_PUBLISH_DATE = 'newCasesByPublishDate'
    CUM_CASES_BY_PUBLISH_DATE = 'cumCasesByPublishDate'
    CUM_CASES_BY_SPECIMEN_DATE_RANGE = 'cumCasesBySpecimenDateRange'
    NEW_CASES_BY_SPECIMEN_DATE = 'newCasesBySpecimenDate'
    MALE_CASES = 'maleCases'
    FEMALE_CASES = 'femaleCases'
    NEW_PILLAR_ONE_TESTS_BY_PUBLISH_DATE = 'newPillarOneTestsByPublishDate'
    CUM_PILLAR_ONE_TESTS_BY_PUBLISH_DATE = 'cumPillarOneTestsByPublishDate'
    NEW_PILLAR_TWO_TESTS_BY_PUBLISH_DATE = 'newPillarTwoTestsByPublishDate'
    CUM_PILLAR_TWO_TESTS_BY_PUBLISH_DATE = 'cumPillarTwoTestsByPublishDate'
    NEW_PILLAR_THREE_TESTS_BY_PUBLISH_DATE = 'newPillarThreeTestsByPublishDate'
    CUM_PILLAR_THREE_TESTS_BY_PUBLISH_DATE = 'cumPillarThreeTestsByPublishDate'
    NEW_PILLAR_FOUR_TESTS_BY_PUBLISH_DATE = 'newPillarFourTestsByPublishDate'
    CUM_PILLAR_FOUR_TESTS_BY_PUBLISH_DATE = 'cumPillarFourTestsByPublishDate'
    NEW_ADMISSIONS = 'newAdmissions'
    CUM_ADMISSIONS = 'cumAdmissions'
    CUM_ADMISSIONS_BY_AGE = 'cumAdmissionsByAge'
    CUM_TESTS_BY_PUBLISH_DATE = 'cumTestsByPublishDate'
    NEW_TESTS_BY_PUBLISH_DATE = 'newTestsByPublishDate'
    COVID_OCCUPIED_MV_BEDS = 'covidOccupiedMVBeds'
    HOSPITAL_CASES = 'hospitalCases'
    PLANNED_CAPACITY_BY_PUBLISH_DATE = 'plannedCapacityByPublishDate'
    NEW_DEATHS_28_DAYS_BY_PUBLISH_DATE = 'newDeaths28DaysByPublishDate'
    CUM_DEATHS_28_DAYS_BY_PUBLISH_DATE = 'cumDeaths28DaysByPublishDate'

    @property
    def wire_name(self) -> str:
        return self.value

    @property
    def payload_type(self) -> 'PayloadType':
        return METRIC_PAYLOAD_TYPES[self]


METRIC_PAYLOAD_TYPES: Dict[Metric, PayloadType] = {
    Metric.AREA_TYPE: PayloadType.AREA_TYPE,
    Metric.AREA_NAME: PayloadType.STRING,
    Metric.AREA_CODE: PayloadType.STRING,
    Metric.DATE: PayloadType.DATE,
    Metric.HASH: PayloadType.STRING,
    Metric.NEW_CASES_BY_PUBLISH_DATE: PayloadType.INTEGER,
    Metric.CUM_CASES_BY_PUBLISH_DATE: PayloadType.INTEGER,
    Metric.CUM_CASES_BY_SPECIMEN_DATE_RANGE: PayloadType.INTEGER,
    Metric.NEW_CASES_BY_SPECIMEN_DATE: PayloadType.INTEGER,
    Metric.MALE_CASES: PayloadType.INTEGER,
    Metric.FEMALE_CASES: PayloadType.INTEGER,
    Metric.NEW_PILLAR_ONE_TESTS_BY_PUBLISH_DATE: PayloadType.INTEGER,
    Metric.CUM_PILLAR_ONE_TESTS_BY_PUBLISH_DATE: PayloadType.INTEGER,
    Metric.NEW_PILLAR_TWO_TESTS_BY_PUBLISH_DATE: PayloadType.INTEGER,
    Metric.CUM_PILLAR_TWO_TESTS_BY_PUBLISH_DATE: PayloadType.INTEGER,
    Metric.NEW_PILLAR_THREE_TESTS_BY_PUBLISH_DATE: PayloadType.INTEGER,
    Metric.CUM_PILLAR_THREE_TESTS_BY_PUBLISH_DATE: PayloadType.INTEGER,
    Metric.NEW_PILLAR_FOUR_TESTS_BY_PUBLISH_DATE: PayloadType.INTEGER,
    Metric.CUM_PILLAR_FOUR_TESTS_BY_PUBLISH_DATE: PayloadType.INTEGER,
    Metric.NEW_ADMISSIONS: PayloadType.INTEGER,
    Metric.CUM_ADMISSIONS: PayloadType.INTEGER,
    Metric.CUM_ADMISSIONS_BY_AGE: PayloadType.INTEGER,
    Metric.CUM_TESTS_BY_PUBLISH_DATE: PayloadType.INTEGER,
    Metric.NEW_TESTS_BY_PUBLISH_DATE: PayloadType.INTEGER,
    Metric.COVID_OCCUPIED_MV_BEDS: PayloadType.INTEGER,
    Metric.HOSPITAL_CASES: PayloadType.INTEGER,
    Metric.PLANNED_CAPACITY_BY_PUBLISH_DATE: PayloadType.INTEGER,
    Metric.NEW_DEATHS_28_DAYS_BY_PUBLISH_DATE: PayloadType.INTEGER,
    Metric.CUM_DEATHS_28_DAYS_BY_PUBLISH_DATE: PayloadType.INTEGER,
}

# Python type expected for a filter value, keyed by the field it sets.
FILTER_VALUE_TYPES: Dict[FilterField, type] = {
    FilterField.AREA_TYPE: AreaType,
    FilterField.AREA_NAME: str,
    FilterField.AREA_CODE: str,
    FilterField.DATE: datetime.date,
}


def _check_registry() -> None:
    """Fail at import time if any enumeration member lacks a table entry."""
    missing = [m.name for m in Metric if m not in METRIC_PAYLOAD_TYPES]
    if missing:
        raise RuntimeError(f"Metrics without a payload type: {', '.join(missing)}")

    missing = [f.name for f in FilterField if f not in FILTER_VALUE_TYPES]
    if missing:
        raise RuntimeError(f"Filter fields without a value type: {', '.join(missing)}")


def metric_wire_name(metric: Metric) -> str:
    """
    Return the API field name for a metric.

    Example:
        >>> metric_wire_name(Metric.NEW_CASES_BY_PUBLISH_DATE)
        'newCasesByPublishDate'
    """
    return Metric(metric).value


def metric_from_wire_name(name: str) -> Metric:
    """
    Look up the metric for an API field name.

    Raises:
        CovidDecodeError: If the name is not a known metric
    """
    try:
        return Metric(name)
    except ValueError:
        raise CovidDecodeError(f"Unknown metric name provided by API: {name!r}") from None


def filter_wire_name(field: FilterField) -> str:
    """Return the API field name for a filter field."""
    return FilterField(field).value


def area_type_wire_name(area_type: AreaType) -> str:
    return AreaType(area_type).value


def area_type_from_wire_name(name: str) -> AreaType:
    """
    Decode an area type string returned by the API.

    An unrecognised value means the API speaks a different, probably
    incompatible, version.

    Raises:
        CovidDecodeError: If the name is not a known area type
    """
    try:
        return AreaType(name)
    except ValueError:
        raise CovidDecodeError(
            f"Unknown area type ({name!r}) provided by API. "
            f"The API is likely a different, incompatible version."
        ) from None


_check_registry()
