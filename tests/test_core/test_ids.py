import re

import pytest

from inventory_api.core import ids


def test_to_base36():
    assert ids.to_base36(0) == "0"
    assert ids.to_base36(35) == "z"
    assert ids.to_base36(36) == "10"
    assert ids.to_base36(1_000_000) == "lfls"


def test_to_base36_negative():
    with pytest.raises(ValueError):
        ids.to_base36(-1)


def test_generate_id_prefix_and_alphabet():
    value = ids.generate_id("prod_")
    assert value.startswith("prod_")
    assert re.fullmatch(r"prod_[0-9a-z]+", value)


def test_generate_id_uses_clock_and_random(monkeypatch):
    monkeypatch.setattr(ids, "_now_ms", lambda: 36)
    monkeypatch.setattr(ids.random, "randint", lambda a, b: 35)
    assert ids.generate_id("ord_") == "ord_10z"


def test_generate_filename_keeps_extension(monkeypatch):
    monkeypatch.setattr(ids, "_now_ms", lambda: 1700000000000)
    monkeypatch.setattr(ids.random, "randint", lambda a, b: 42)
    assert ids.generate_filename("photo.final.PNG") == "1700000000000-42.PNG"


def test_generate_filename_without_extension():
    name = ids.generate_filename("README")
    assert re.fullmatch(r"\d+-\d+", name)
    assert re.fullmatch(r"\d+-\d+", ids.generate_filename(None))
