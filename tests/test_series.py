from __future__ import annotations

import pytest

from tsreduce_core.errors import InvalidArgumentError
from tsreduce_core.series import Series

from tests.helpers import build_series


def test_series_coerces_timestamps_and_copies_mappings() -> None:
    tags = {"host": "h1"}
    datapoints = {"1000": "1.5", 2000: "2"}

    series = Series("system", "cpu", tags=tags, datapoints=datapoints)

    assert series.datapoints == {1000: "1.5", 2000: "2"}
    tags["host"] = "h2"
    assert series.tags == {"host": "h1"}
    assert series.identity == ("system", "cpu")


@pytest.mark.parametrize(
    "scope, metric",
    [("", "cpu"), ("system", ""), ("  ", "cpu"), (None, "cpu"), ("system", 5)],
)
def test_series_requires_identity(scope: object, metric: object) -> None:
    with pytest.raises(InvalidArgumentError):
        Series(scope, metric)  # type: ignore[arg-type]


def test_series_rejects_non_integer_timestamp() -> None:
    with pytest.raises(InvalidArgumentError):
        Series("system", "cpu", datapoints={"noon": "1"})


def test_numeric_values_are_stored_as_strings() -> None:
    series = Series.from_mapping(
        {"scope": "s", "metric": "m", "datapoints": {"1": 10, "2": 2.5, "3": "7"}}
    )

    assert series.datapoints == {1: "10", 2: "2.5", 3: "7"}
    assert all(isinstance(value, str) for value in series.datapoints.values())


@pytest.mark.parametrize("value", [None, True, ["1"], {"v": 1}])
def test_non_textual_values_are_rejected(value: object) -> None:
    with pytest.raises(InvalidArgumentError):
        Series.from_mapping({"scope": "s", "metric": "m", "datapoints": {"1": value}})


@pytest.mark.parametrize("timestamp", [1.2, 1.0, True, "1.5", "", None])
def test_non_integral_timestamps_are_rejected(timestamp: object) -> None:
    with pytest.raises(InvalidArgumentError):
        Series("s", "m", datapoints={timestamp: "a"})


def test_timestamps_colliding_after_coercion_are_rejected() -> None:
    with pytest.raises(InvalidArgumentError, match="duplicate"):
        Series("s", "m", datapoints={1: "a", "1": "b"})


def test_signed_integral_strings_are_accepted() -> None:
    series = Series("s", "m", datapoints={"-5": "a", "+6": "b", 7: "c"})

    assert series.datapoints == {-5: "a", 6: "b", 7: "c"}


def test_with_datapoints_returns_independent_copy() -> None:
    source = build_series({1: 1}, display_name="CPU", units="%", tags={"host": "h1"})

    copy = source.with_datapoints({1: "9"})
    copy.tags["host"] = "other"

    assert copy.datapoints == {1: "9"}
    assert copy.display_name == "CPU"
    assert copy.units == "%"
    assert source.datapoints == {1: "1"}
    assert source.tags == {"host": "h1"}


def test_json_representation_roundtrip() -> None:
    payload = {
        "scope": "system",
        "metric": "cpu",
        "display_name": "CPU",
        "units": "%",
        "tags": {"host": "h1"},
        "datapoints": {"2000": "2", "1000": "1"},
    }

    series = Series.from_mapping(payload)

    assert series.as_dict() == {
        **payload,
        "datapoints": {"1000": "1", "2000": "2"},
    }
    assert list(series.as_dict()["datapoints"]) == ["1000", "2000"]


def test_from_mapping_requires_identity_fields() -> None:
    with pytest.raises(InvalidArgumentError, match="metric"):
        Series.from_mapping({"scope": "system"})
