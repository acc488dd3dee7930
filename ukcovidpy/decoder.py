"""
Decoding of API response rows into typed metric values
"""

from datetime import date
from typing import Any, List, NamedTuple, Sequence, Union

from .exceptions import CovidDecodeError, CovidProtocolError
from .registry import AreaType, Metric, PayloadType, area_type_from_wire_name
from .utils import parse_date


class MetricValue(NamedTuple):
    """A decoded value together with the metric it belongs to."""

    metric: Metric
    value: Union[int, str, date, AreaType]


# The values for the requested metrics for one day and area.
Datum = List[MetricValue]
# All days returned by a request, in the order the API delivers them.
Dataset = List[Datum]


def _decode_integer(raw: Any) -> int:
    # bool is an int subclass but never a valid count
    if isinstance(raw, bool):
        raise TypeError('boolean')
    if isinstance(raw, int):
        return raw
    if isinstance(raw, float) and raw.is_integer():
        return int(raw)
    raise TypeError(type(raw).__name__)


def _decode_string(raw: Any) -> str:
    if not isinstance(raw, str):
        raise TypeError(type(raw).__name__)
    return raw


def _decode_date(raw: Any) -> date:
    if not isinstance(raw, str):
        raise TypeError(type(raw).__name__)
    return parse_date(raw)


def _decode_area_type(raw: Any) -> AreaType:
    if not isinstance(raw, str):
        raise TypeError(type(raw).__name__)
    return area_type_from_wire_name(raw)


_DECODERS = {
    PayloadType.INTEGER: _decode_integer,
    PayloadType.STRING: _decode_string,
    PayloadType.DATE: _decode_date,
    PayloadType.AREA_TYPE: _decode_area_type,
}


def decode_value(metric: Metric, raw: Any) -> MetricValue:
    """
    Coerce a raw JSON value to the payload type of ``metric``.

    Args:
        metric: Metric the value was requested for
        raw: Value as parsed from JSON

    Returns:
        MetricValue

    Raises:
        CovidDecodeError: If the value is missing or of the wrong type
    """
    payload_type = metric.payload_type
    try:
        return MetricValue(metric, _DECODERS[payload_type](raw))
    except CovidDecodeError:
        raise
    except (TypeError, ValueError) as e:
        raise CovidDecodeError(
            f"Cannot decode {raw!r} as {payload_type.value} for '{metric.wire_name}': {e}"
        ) from e


def decode_row(row: Any, metrics: Sequence[Metric]) -> Datum:
    """
    Decode one response row into a Datum.

    Rows are read positionally: element ``i`` belongs to ``metrics[i]``.
    Object rows are read in the order of their values.

    Args:
        row: JSON array or object
        metrics: Requested metrics, in request order

    Returns:
        Datum with one MetricValue per requested metric

    Raises:
        CovidDecodeError: If the row does not match the requested structure
    """
    if isinstance(row, dict):
        values = list(row.values())
    elif isinstance(row, list):
        values = row
    else:
        raise CovidDecodeError(f"Expected a row array or object, got {type(row).__name__}")

    if len(values) != len(metrics):
        raise CovidDecodeError(
            f"Row has {len(values)} values but {len(metrics)} metrics were requested: {row!r}"
        )

    return [decode_value(metric, raw) for metric, raw in zip(metrics, values)]


def decode_page(payload: Any, metrics: Sequence[Metric]) -> Dataset:
    """
    Decode the ``data`` rows of one response page.

    Raises:
        CovidProtocolError: If the payload is not a JSON object with a ``data`` list
        CovidDecodeError: If any row cannot be decoded
    """
    if not isinstance(payload, dict):
        raise CovidProtocolError(f"Expected a JSON object, got {type(payload).__name__}")

    rows = payload.get('data')
    if not isinstance(rows, list):
        raise CovidProtocolError("Response has no 'data' array")

    return [decode_row(row, metrics) for row in rows]


def has_next_page(payload: dict) -> bool:
    """Return True if ``pagination.next`` is set in a response page."""
    pagination = payload.get('pagination')
    if not isinstance(pagination, dict):
        return False
    return pagination.get('next') is not None
