from __future__ import annotations

import pytest

from directory_browser.core.exceptions import InvalidArgument
from directory_browser.core.filter_state import FilterState
from directory_browser.core.sort_key import SortKey
from directory_browser.core.view_state import PageState, ViewState, parse_int


def test_view_state_to_from_dict_roundtrip():
    st = ViewState(
        filter=FilterState(query="acme", location="London", industry="Finance"),
        sort=SortKey.NAME_DESC,
        page=PageState(page_size=12, page_number=3),
    )

    raw = st.to_dict()
    rebuilt = ViewState.from_dict(raw)

    assert raw["sort"] == "name-desc"
    assert rebuilt == st


def test_from_dict_fills_missing_keys_from_defaults():
    defaults = ViewState(page=PageState(page_size=6))
    st = ViewState.from_dict({"query": "x"}, defaults=defaults)

    assert st.filter == FilterState(query="x")
    assert st.sort is SortKey.NAME_ASC
    assert st.page == PageState(page_size=6, page_number=1)


def test_filter_state_treats_empty_facets_as_unset():
    assert FilterState(location="", industry="").cache_key() == FilterState().cache_key()
    assert FilterState.from_dict({"location": "", "industry": None}) == FilterState()
    assert FilterState(query="   ").is_unconstrained()
    assert not FilterState(query="a").is_unconstrained()


def test_sort_key_parse():
    assert SortKey.parse("name-asc") is SortKey.NAME_ASC
    assert SortKey.parse(SortKey.NAME_DESC) is SortKey.NAME_DESC
    assert SortKey.NAME_DESC.descending
    assert SortKey.NAME_ASC.label == "Name (A–Z)"

    with pytest.raises(InvalidArgument):
        SortKey.parse("name")


def test_parse_int_accepts_ints_and_digit_strings():
    assert parse_int(6, "page_size") == 6
    assert parse_int("12", "page_size") == 12
    assert parse_int("-3", "page_number") == -3


@pytest.mark.parametrize("value", [6.9, 9.0, True, None, "6.9", "", "²", [6]])
def test_parse_int_never_truncates(value):
    with pytest.raises(InvalidArgument):
        parse_int(value, "page_size")


def test_from_dict_rejects_float_page_size():
    with pytest.raises(InvalidArgument):
        ViewState.from_dict({"page_size": 6.9})
