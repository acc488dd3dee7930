"""
Shared test fixtures
"""

import pytest
from unittest.mock import Mock
from ukcovidpy.client import CovidClient
from ukcovidpy.registry import AreaType, Metric
from ukcovidpy.request import Filter, Request


@pytest.fixture
def mock_client():
    """Mocked client for testing"""
    return Mock(spec=CovidClient)


@pytest.fixture
def client():
    """Client that does not pause between pages"""
    return CovidClient(page_delay=0)


@pytest.fixture
def england_request():
    """Daily cases for England, newest first"""
    request = Request(AreaType.NATION, Metric.DATE)
    request.add_filter(Filter.area_name('england'))
    request.add_metric(Metric.AREA_TYPE)
    request.add_metric(Metric.NEW_CASES_BY_PUBLISH_DATE)
    return request


@pytest.fixture
def sample_response():
    """Sample API response aligned with england_request"""
    return {
        'length': 2,
        'maxPageLimit': 2500,
        'data': [
            ['2020-11-03', 'nation', 18950],
            ['2020-11-02', 'nation', 16250]
        ],
        'pagination': {
            'current': '/v1/data?page=1',
            'next': None,
            'previous': None,
            'first': '/v1/data?page=1',
            'last': '/v1/data?page=1'
        }
    }
