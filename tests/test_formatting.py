from datetime import date

import pytest

from nen_report import formatting as fmt


@pytest.mark.parametrize(
    "scores,expected",
    [
        ((4, 2, 5), True),
        ((1, 2, 1), False),
        ((3, 3, 3), False),
        ((1, 1, 4), True),
        ((6, 1, 1), True),
    ],
)
def test_maintenance_needed_when_any_score_above_three(scores, expected):
    assert fmt.maintenance_needed(scores) is expected


def test_format_score_keeps_out_of_range_values():
    assert fmt.format_score(4) == "4/6"
    assert fmt.format_score(9) == "9/6"
    assert fmt.format_score(0) == "0/6"


def test_format_date_is_unpadded_month_day_year():
    assert fmt.format_date(date(2024, 1, 5)) == "1/5/2024"
    assert fmt.format_date(date(2024, 11, 25)) == "11/25/2024"
    assert fmt.format_date(date(2024, 1, 5), "{day}-{month}-{year}") == "5-1-2024"


@pytest.mark.parametrize("value", [None, "", "   \n"])
def test_format_description_placeholder(value):
    assert fmt.format_description(value) == "No description provided"


def test_format_description_passthrough():
    assert fmt.format_description("Cracked window sill") == "Cracked window sill"


def test_format_address_joins_street_and_unit():
    assert fmt.format_address("Main St", "4B") == "Main St 4B"
    assert fmt.format_address("Main St", "") == "Main St"


def test_has_location_requires_both_coordinates():
    assert fmt.has_location(52.1, 5.1)
    assert fmt.has_location(0.0, 0.0)
    assert not fmt.has_location(52.1, None)
    assert not fmt.has_location(None, 5.1)
    assert not fmt.has_location(None, None)


def test_format_coordinate():
    assert fmt.format_coordinate(52.1) == "52.1"
    assert fmt.format_coordinate(5.0) == "5"
    assert fmt.format_coordinate(-4.123456789) == "-4.123456789"
    assert fmt.format_coordinate(None) == "N/A"


def test_split_data_uri_takes_payload_after_first_comma():
    assert fmt.split_data_uri("data:image/png;base64,abc,def") == "abc,def"
    assert fmt.split_data_uri("no-comma-here") is None
    assert fmt.split_data_uri("") is None
    assert fmt.split_data_uri(None) is None
