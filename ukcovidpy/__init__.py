"""
ukcovidpy - A Python wrapper for the UK coronavirus data API

This package provides a convenient interface to the 'Coronavirus (COVID-19) in
the UK' statistics published at https://coronavirus.data.gov.uk. It is not
affiliated with the NHS, Public Health England or the UK Government.

Main Classes:
    Request: Filters and metrics for one query
    CovidClient: Sends requests, walks pages and decodes the results
    DataFetcher: Converts decoded results to pandas DataFrames

Example:
    >>> from ukcovidpy import AreaType, Filter, Metric, Request
    >>> request = Request(AreaType.NATION, Metric.CUM_CASES_BY_PUBLISH_DATE)
    >>> request.add_filter(Filter.area_name('england'))
    >>> for day in request.get():
    ...     print(day[0].value)
"""

from .registry import AreaType, FilterField, Metric, PayloadType
from .request import Filter, Request
from .decoder import MetricValue
from .client import CovidClient
from .data_fetcher import DataFetcher
from .exceptions import (
    CovidAPIError,
    CovidValidationError,
    CovidNetworkError,
    CovidNoDataError,
    CovidRateLimitError,
    CovidProtocolError,
    CovidDecodeError,
    RECOVERABLE_ERRORS
)

__version__ = '0.1.0'
__author__ = 'ukcovidpy'
__all__ = [
    'AreaType',
    'FilterField',
    'Metric',
    'PayloadType',
    'Filter',
    'Request',
    'MetricValue',
    'CovidClient',
    'DataFetcher',
    'CovidAPIError',
    'CovidValidationError',
    'CovidNetworkError',
    'CovidNoDataError',
    'CovidRateLimitError',
    'CovidProtocolError',
    'CovidDecodeError',
    'RECOVERABLE_ERRORS'
]
