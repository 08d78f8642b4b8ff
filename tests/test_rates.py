from smarthome.io.schema import RateBand
from smarthome.tariff import expand_band_hours, normalize_rates, sort_rates_by_value


def band(value, start, end):
    return RateBand.model_validate({"value": value, "from": start, "to": end})


def test_single_band_expands_to_hours():
    rates = normalize_rates([band(1.5, 0, 7)])
    assert len(rates) == 1
    assert rates[0].value == 1.5
    assert rates[0].hours == (0, 1, 2, 3, 4, 5, 6)


def test_band_wraps_past_midnight():
    assert expand_band_hours(band(3, 17, 11)) == list(range(17, 24)) + list(range(0, 11))
    assert expand_band_hours(band(1, 23, 7)) == [23, 0, 1, 2, 3, 4, 5, 6]


def test_equal_from_and_to_spans_whole_day():
    assert expand_band_hours(band(1, 5, 5)) == list(range(5, 24)) + list(range(0, 5))


def test_bands_with_same_value_are_merged_in_first_seen_order():
    rates = normalize_rates([
        band(6.46, 7, 10),
        band(5.38, 10, 17),
        band(6.46, 17, 21),
    ])
    assert [r.value for r in rates] == [6.46, 5.38]
    assert rates[0].hours == (7, 8, 9, 17, 18, 19, 20)


def test_overlapping_same_value_keeps_duplicates():
    rates = normalize_rates([band(2, 0, 3), band(2, 2, 4)])
    assert rates[0].hours == (0, 1, 2, 2, 3)


def test_input_bands_are_not_mutated():
    bands = [band(1.5, 11, 17)]
    normalize_rates(bands)
    assert bands[0].from_hour == 11
    assert bands[0].to_hour == 17


def test_sort_rates_cheapest_first():
    rates = sort_rates_by_value(normalize_rates([band(3, 17, 11), band(1.5, 11, 17)]))
    assert [r.value for r in rates] == [1.5, 3]
