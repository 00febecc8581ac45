from __future__ import annotations

import pytest

from directory_browser.core.collation import default_collation_key, make_collation_key
from directory_browser.core.exceptions import ConfigError


def _sorted(names):
    return sorted(names, key=default_collation_key)


def test_lower_case_sorts_before_upper_case_on_ties():
    assert _sorted(["Acme", "acme"]) == ["acme", "Acme"]


def test_accents_break_ties_after_base_letters():
    assert _sorted(["résumé", "resume", "Resume"]) == ["resume", "Resume", "résumé"]


def test_punctuation_and_digits_sort_before_letters():
    assert _sorted(["Zeta", "3M", "(Alpha)", "alpha"]) == ["(Alpha)", "3M", "alpha", "Zeta"]


def test_default_key_used_without_locale():
    assert make_collation_key(None) is default_collation_key
    assert make_collation_key("") is default_collation_key


def test_unknown_locale_is_config_error():
    with pytest.raises(ConfigError):
        make_collation_key("xx_NOT_A_LOCALE.UTF-8")
