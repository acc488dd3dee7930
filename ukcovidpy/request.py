"""
Query construction for the coronavirus data API
"""

from datetime import date
from typing import List, Optional, Tuple, Union
import logging

from .exceptions import CovidValidationError
from .registry import (
    AreaType,
    FilterField,
    Metric,
    FILTER_VALUE_TYPES,
    area_type_wire_name,
    filter_wire_name,
    metric_wire_name,
)
from .utils import format_date, format_structure, is_normalized_area_name, join_filters

logger = logging.getLogger(__name__)

API_URL = "https://api.coronavirus.data.gov.uk/v1/data"

FilterValue = Union[AreaType, str, date]


class Filter:
    """
    A single query constraint, such as ``areaName=england``.

    Filters are immutable. Build them with the classmethod for the field
    being set:

    Example:
        >>> Filter.area_name('england').encode()
        'areaName=england'
        >>> Filter.area_type(AreaType.NATION).encode()
        'areaType=nation'
    """

    __slots__ = ('_field', '_value')

    def __init__(self, field: FilterField, value: FilterValue):
        try:
            field = FilterField(field)
        except ValueError:
            raise CovidValidationError(f"Unknown filter field: {field!r}") from None

        expected = FILTER_VALUE_TYPES[field]
        if not isinstance(value, expected):
            raise CovidValidationError(
                f"Filter '{filter_wire_name(field)}' expects {expected.__name__}, "
                f"got {type(value).__name__}"
            )
        if field is FilterField.AREA_NAME and not is_normalized_area_name(value):
            # Sent as given; the API only matches lowercase names.
            logger.warning(f"Area name {value!r} is not lowercase and may not match any area")

        self._field = field
        self._value = value

    @classmethod
    def area_type(cls, area_type: AreaType) -> 'Filter':
        return cls(FilterField.AREA_TYPE, area_type)

    @classmethod
    def area_name(cls, name: str) -> 'Filter':
        """Filter on an area name. ``name`` must already be lowercase."""
        return cls(FilterField.AREA_NAME, name)

    @classmethod
    def area_code(cls, code: str) -> 'Filter':
        return cls(FilterField.AREA_CODE, code)

    @classmethod
    def date(cls, day: date) -> 'Filter':
        return cls(FilterField.DATE, day)

    @property
    def field(self) -> FilterField:
        return self._field

    @property
    def value(self) -> FilterValue:
        return self._value

    def encode(self) -> str:
        """Return the filter as a ``field=value`` pair."""
        if self._field is FilterField.AREA_TYPE:
            value = area_type_wire_name(self._value)
        elif self._field is FilterField.DATE:
            value = format_date(self._value)
        else:
            value = self._value
        return f"{filter_wire_name(self._field)}={value}"

    def __eq__(self, other):
        if not isinstance(other, Filter):
            return NotImplemented
        return (self._field, self._value) == (other._field, other._value)

    def __hash__(self):
        return hash((self._field, self._value))

    def __repr__(self):
        return f"Filter({self._field.name}, {self._value!r})"


class Request:
    """
    A request to the API.

    A request always starts with an area type and one metric. More filters
    and metrics may be appended, but never removed. Executing a request does
    not change it, so the same request can be run any number of times.

    Each execution returns a fresh dataset: a list of days (most recent first),
    each day being a list of decoded values in the order the metrics were
    added.

    Example:
        >>> request = Request(AreaType.NATION, Metric.CUM_CASES_BY_PUBLISH_DATE)
        >>> request.add_filter(Filter.area_name('england'))
        >>> request.add_metric(Metric.DATE)
        >>> for day in request.get():
        ...     print(day[1].value, day[0].value)
    """

    def __init__(self, area_type: AreaType, metric: Metric):
        """
        Initialize a request.

        Args:
            area_type: Geographic level to query
            metric: First metric to request
        """
        if not isinstance(area_type, AreaType):
            raise CovidValidationError(f"Expected an AreaType, got {type(area_type).__name__}")

        self._filters: List[Filter] = [Filter.area_type(area_type)]
        self._metrics: List[Metric] = []
        self.add_metric(metric)

    @property
    def filters(self) -> Tuple[Filter, ...]:
        return tuple(self._filters)

    @property
    def metrics(self) -> Tuple[Metric, ...]:
        return tuple(self._metrics)

    def add_filter(self, filter: Filter) -> None:
        if not isinstance(filter, Filter):
            raise CovidValidationError(f"Expected a Filter, got {type(filter).__name__}")
        self._filters.append(filter)

    def add_metric(self, metric: Metric) -> None:
        if not isinstance(metric, Metric):
            raise CovidValidationError(f"Expected a Metric, got {type(metric).__name__}")
        self._metrics.append(metric)

    def filters_string(self) -> str:
        return join_filters(f.encode() for f in self._filters)

    def structure_string(self) -> str:
        return format_structure(metric_wire_name(m) for m in self._metrics)

    def build_url(
        self,
        latest_by: Optional[Metric] = None,
        page: int = 1,
        base_url: str = API_URL
    ) -> str:
        """
        Build the query URL for one page of results.

        Args:
            latest_by: Only return the latest value of this metric per area
            page: Page number, starting at 1
            base_url: API endpoint

        Returns:
            Complete URL string

        Example:
            >>> Request(AreaType.NATION, Metric.DATE).build_url(page=2)
            'https://api.coronavirus.data.gov.uk/v1/data?filters=areaType=nation&structure=[%22date%22]&format=json&page=2'
        """
        if isinstance(page, bool) or not isinstance(page, int) or page < 1:
            raise CovidValidationError(f"Page must be a positive integer, got {page!r}")

        url = (
            f"{base_url}?filters={self.filters_string()}"
            f"&structure={self.structure_string()}"
            f"&format=json&page={page}"
        )

        if latest_by is not None:
            if not isinstance(latest_by, Metric):
                raise CovidValidationError(
                    f"latest_by expects a Metric, got {type(latest_by).__name__}"
                )
            url += f"&latestBy={metric_wire_name(latest_by)}"

        return url

    def get(self, client=None) -> list:
        """
        Execute the request and return every page of results.

        Args:
            client: CovidClient to use (default: a new client)

        Returns:
            Dataset (list of Datum)
        """
        return self._execute(client, None)

    def get_latest_by_metric(self, metric: Metric, client=None) -> list:
        """
        Execute the request, keeping only the latest value of ``metric`` per area.

        Args:
            metric: Metric whose most recent value is wanted
            client: CovidClient to use (default: a new client)

        Returns:
            Dataset (list of Datum)
        """
        return self._execute(client, metric)

    def _execute(self, client, latest_by: Optional[Metric]) -> list:
        if client is None:
            from .client import CovidClient
            client = CovidClient()
        return client.execute(self, latest_by=latest_by)

    def __repr__(self):
        return f"Request(filters={self.filters_string()!r}, metrics={[m.name for m in self._metrics]})"
