"""
Main client for interacting with the coronavirus data API
"""

import requests
import time
from typing import Dict, Optional
import logging

from .decoder import Dataset, decode_page, has_next_page
from .exceptions import (
    CovidNetworkError,
    CovidNoDataError,
    CovidProtocolError,
    CovidRateLimitError
)
from .registry import Metric
from .request import API_URL, Request
from .data_fetcher import DataFetcher

logger = logging.getLogger(__name__)


class CovidClient:
    """
    Main client for the UK 'Coronavirus (COVID-19) in the UK' data API.

    This client:
    - Sends the GET requests built by a Request
    - Maps API status codes to typed exceptions
    - Walks every page of a result set
    - Decodes each row into typed metric values
    - Converts results to pandas DataFrames

    Attributes:
        base_url (str): API endpoint
        timeout (int): Request timeout in seconds
        page_delay (float): Pause between page requests in seconds
        session (requests.Session): HTTP session for making requests
        headers (dict): Headers sent with every request

    Example:
        >>> client = CovidClient()
        >>> request = Request(AreaType.NATION, Metric.NEW_CASES_BY_PUBLISH_DATE)
        >>> data = client.execute(request)
    """

    BASE_URL = API_URL
    DEFAULT_TIMEOUT = 30
    PAGE_DELAY = 0.1  # seconds
    HEADERS = {
        'User-Agent': 'ukcovidpy/0.1.0',
        'Accepts': (
            'application/json; application/xml; text/csv; '
            'application/vnd.PHE-COVID19.v1+json; application/vnd.PHE-COVID19.v1+xml'
        ),
        'Content-Type': 'application/json'
    }

    def __init__(
        self,
        base_url: str = None,
        timeout: int = None,
        page_delay: float = None,
        session: requests.Session = None
    ):
        """
        Initialize the API client.

        Args:
            base_url: API endpoint (default: the public v1 data endpoint)
            timeout: Request timeout in seconds (default: 30)
            page_delay: Pause between page requests in seconds (default: 0.1)
            session: Existing requests.Session to reuse (its headers are left unchanged)
        """
        self.base_url = base_url or self.BASE_URL
        self.timeout = timeout or self.DEFAULT_TIMEOUT
        self.page_delay = self.PAGE_DELAY if page_delay is None else page_delay

        self.session = session or requests.Session()
        self.headers = dict(self.HEADERS)

        self.data_fetcher = DataFetcher(self)

    def _make_request(self, url: str) -> Dict:
        """
        Make a GET request to the API.

        Args:
            url: Complete URL built by a Request

        Returns:
            JSON response body

        Raises:
            CovidNetworkError: If the request could not be sent
            CovidNoDataError: If there is no data for the query (204)
            CovidRateLimitError: If rate limit exceeded (429)
            CovidProtocolError: For any other status or a malformed body
        """
        logger.debug(f"GET {url}")

        try:
            response = self.session.get(url, headers=self.headers, timeout=self.timeout)
        except requests.exceptions.RequestException as e:
            raise CovidNetworkError(f"Request failed: {e}") from e

        if response.status_code == 204:
            raise CovidNoDataError(f"No data available for query: {url}")
        elif response.status_code == 429:
            raise CovidRateLimitError(
                "API rate limit exceeded. Please wait before making more requests."
            )
        elif response.status_code != 200:
            raise CovidProtocolError(
                f"API request failed with status {response.status_code}: {response.text}"
            )

        try:
            return response.json()
        except ValueError as e:
            raise CovidProtocolError(f"Error parsing JSON response: {e}") from e

    def execute(self, request: Request, latest_by: Optional[Metric] = None) -> Dataset:
        """
        Fetch and decode every page of results for a request.

        Pages are requested by number, one after another, until the API
        reports no next page. Nothing is returned if any page fails.

        Args:
            request: Request to execute (not modified)
            latest_by: Only return the latest value of this metric per area

        Returns:
            Dataset: one Datum per row, in the order the API returns them

        Raises:
            CovidNetworkError, CovidNoDataError, CovidRateLimitError:
                Recoverable failures
            CovidProtocolError: If the API response breaks the expected contract

        Example:
            >>> request = Request(AreaType.NATION, Metric.DATE)
            >>> request.add_metric(Metric.NEW_CASES_BY_PUBLISH_DATE)
            >>> for day in client.execute(request):
            ...     print(day[0].value, day[1].value)
        """
        metrics = request.metrics
        data: Dataset = []
        page = 1

        while True:
            url = request.build_url(latest_by=latest_by, page=page, base_url=self.base_url)

            logger.info(f"Fetching page {page}...")
            payload = self._make_request(url)
            data.extend(decode_page(payload, metrics))

            if not has_next_page(payload):
                break

            page += 1

            # Small delay to be respectful to the API
            if self.page_delay:
                time.sleep(self.page_delay)

        logger.info(f"Fetched {len(data)} total records across {page} pages")

        return data

    def get_data_as_dataframe(self, request: Request, latest_by: Optional[Metric] = None):
        """
        Execute a request and return the results as a pandas DataFrame.

        Args:
            request: Request to execute
            latest_by: Only return the latest value of this metric per area

        Returns:
            pandas.DataFrame with one column per requested metric

        Example:
            >>> df = client.get_data_as_dataframe(request)
            >>> print(df.head())
        """
        return self.data_fetcher.get_data_as_dataframe(request, latest_by=latest_by)
