from listings.models import FilterOptions
from listings.pipeline import is_furnished, process, to_line, under_price
from listings.utils import MISSING


def test_process_basic_lines():
    records = [{"price": 100, "area": 50}, {"Price": "1,000", "Size": "80 sqft"}]
    assert process(records, FilterOptions()) == ["100 50", "1000 80"]


def test_missing_fields_yield_partial_or_empty_lines():
    records = [{"price": 123}, {"area": 45}, {}, "not a record", {"price": "n/a", "area": None}]
    assert process(records, FilterOptions()) == ["123", "45", "", "", ""]


def test_order_preserved_no_dedupe():
    records = [{"price": 3}, {"price": 1}, {"price": 3}]
    assert process(records, FilterOptions()) == ["3", "1", "3"]


def test_area_aliases():
    for key in ("area", "Area", "size", "sqft", "square", "area_m2", "area_total", "AREA_TOTAL"):
        assert process([{key: 7}], FilterOptions()) == ["7"]


def test_furnished_filter_keeps_substring_matches():
    records = [
        {"price": 1, "furnishingstatus": "Semi-Furnished"},
        {"price": 2, "furnishing_status": "furnished"},
        {"price": 3, "FurnishingStatus": "Unfurnished"},
        {"price": 4, "furnished": "no"},
        {"price": 5},
        {"price": 6, "furnishingstatus": None},
    ]
    assert process(records, FilterOptions(furnished=True)) == ["1", "2", "3"]


def test_furnished_flag_off_keeps_everything():
    records = [{"price": 1, "furnishingstatus": "no"}, {"price": 2}]
    assert process(records, FilterOptions()) == ["1", "2"]


def test_is_furnished():
    assert is_furnished("FURNISHED")
    assert is_furnished("unfurnished")
    assert not is_furnished(True)
    assert not is_furnished(None)
    assert not is_furnished(MISSING)
    assert is_furnished(["furnished"])


def test_price_filter_is_strict():
    records = [{"price": 250000}, {"price": 300000}, {"price": 350000}]
    assert process(records, FilterOptions(price=300000)) == ["250000"]


def test_price_filter_drops_unparsable_prices():
    records = [{"price": "call us"}, {}, {"price": "$99"}]
    assert process(records, FilterOptions(price=100)) == ["99"]


def test_price_filter_disabled_when_price_invalid():
    records = [{"price": 10**9}, {"area": 1}]
    assert process(records, FilterOptions(price="abc")) == ["1000000000", "1"]


def test_under_price():
    assert under_price("1,000", 1500)
    assert not under_price(1500, 1500)
    assert not under_price(None, 1500)


def test_both_filters():
    records = [
        {"price": "1,000", "area": "50 sqft", "furnishingstatus": "furnished"},
        {"price": 2000, "area": 80},
    ]
    assert process(records, FilterOptions(furnished=True, price=1500)) == ["1000 50"]


def test_to_line_trims():
    assert to_line(123, None) == "123"
    assert to_line(None, 45) == "45"
    assert to_line(None, None) == ""
    assert to_line(1.5, "2.0") == "1.5 2"


def test_source_records_not_mutated():
    records = [{"price": "1,000", "area": "50"}]
    process(records, FilterOptions(price=5000))
    assert records == [{"price": "1,000", "area": "50"}]


def test_small_and_huge_numbers_print_like_decimals():
    assert process([{"price": "0.00005", "area": 0.00001}], FilterOptions()) == ["0.00005 0.00001"]
    assert process([{"price": 1e21}], FilterOptions()) == ["1e+21"]
