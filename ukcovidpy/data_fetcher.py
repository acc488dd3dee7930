"""
Conversion of decoded datasets to pandas DataFrames
"""

import pandas as pd
from typing import Optional, Sequence
import logging

from .decoder import Dataset
from .registry import AreaType, Metric, PayloadType

logger = logging.getLogger(__name__)


class DataFetcher:
    """
    Helper class for fetching data and converting it to pandas DataFrames.

    Columns are named after the metrics' API field names and appear in the
    order the metrics were requested.
    """

    def __init__(self, client):
        """
        Initialize the DataFetcher.

        Args:
            client: CovidClient instance
        """
        self.client = client

    def get_data_as_dataframe(self, request, latest_by: Optional[Metric] = None) -> pd.DataFrame:
        """
        Execute a request and return the results as a pandas DataFrame.

        Args:
            request: Request to execute
            latest_by: Only return the latest value of this metric per area

        Returns:
            pandas.DataFrame with the results
        """
        data = self.client.execute(request, latest_by=latest_by)

        df = self.to_dataframe(data, request.metrics)
        df.attrs['latest_by'] = latest_by.wire_name if latest_by is not None else None

        return df

    @staticmethod
    def to_dataframe(data: Dataset, metrics: Sequence[Metric]) -> pd.DataFrame:
        """
        Convert a Dataset to a DataFrame.

        Date metrics become datetime64 columns and area types their API
        strings; other values are kept as decoded.

        Args:
            data: Decoded rows
            metrics: Metrics the rows were decoded for, in request order

        Returns:
            pandas.DataFrame
        """
        columns = [m.wire_name for m in metrics]

        if not data:
            logger.warning("No data returned from API")
            df = pd.DataFrame(columns=columns)
        else:
            records = [
                [v.value.value if isinstance(v.value, AreaType) else v.value for v in datum]
                for datum in data
            ]
            df = pd.DataFrame(records, columns=columns)

        for position, metric in enumerate(metrics):
            if metric.payload_type is PayloadType.DATE:
                df.isetitem(position, pd.to_datetime(df.iloc[:, position]))

        df.attrs['metrics'] = columns
        df.attrs['records'] = len(df)

        return df
