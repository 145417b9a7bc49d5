import logging
import random
from collections import Counter

import pytest

from conftest import FixedRandomSource
from valentine_api.app.services.quote_service import (
    DEFAULT_QUOTE_BANK,
    FALLBACK_QUOTE,
    LOVE_QUOTES,
    QuoteBank,
    Selector,
    SystemRandomSource,
)


def test_default_bank_holds_ten_quotes_in_order():
    assert len(DEFAULT_QUOTE_BANK) == 10
    assert DEFAULT_QUOTE_BANK.quotes == LOVE_QUOTES
    assert DEFAULT_QUOTE_BANK[4] == "You had me at hello."
    assert "You had me at hello." in DEFAULT_QUOTE_BANK


def test_bank_rejects_empty_input():
    with pytest.raises(ValueError):
        QuoteBank([])


def test_bank_rejects_blank_quotes():
    with pytest.raises(ValueError):
        QuoteBank(["fine", "   "])


def test_bank_is_not_mutable():
    with pytest.raises(TypeError):
        DEFAULT_QUOTE_BANK[0] = "changed"
    with pytest.raises(AttributeError):
        DEFAULT_QUOTE_BANK.append("more")


def test_bank_copies_its_input():
    source = ["a", "b"]
    bank = QuoteBank(source)
    source.append("c")
    assert len(bank) == 2


def test_pick_uses_index_from_random_source():
    source = FixedRandomSource(7)
    selector = Selector(DEFAULT_QUOTE_BANK, source)
    assert selector.pick() == LOVE_QUOTES[7]
    assert source.calls == [10]


def test_pick_from_single_quote_bank():
    selector = Selector(QuoteBank(["only one"]))
    assert {selector.pick() for _ in range(20)} == {"only one"}


def test_pick_from_empty_pool_returns_fallback(caplog):
    selector = Selector([], FixedRandomSource(0))
    with caplog.at_level(logging.WARNING):
        assert selector.pick() == FALLBACK_QUOTE
    assert "empty" in caplog.text


def test_pick_with_out_of_range_index_returns_fallback():
    assert Selector(DEFAULT_QUOTE_BANK, FixedRandomSource(10)).pick() == FALLBACK_QUOTE
    assert Selector(DEFAULT_QUOTE_BANK, FixedRandomSource(-1)).pick() == FALLBACK_QUOTE


def test_system_random_source_stays_in_range():
    source = SystemRandomSource(random.Random(7))
    assert all(0 <= source.pick_uniform(3) < 3 for _ in range(200))


def test_pick_is_uniform():
    selector = Selector(DEFAULT_QUOTE_BANK, SystemRandomSource(random.Random(1234)))
    counts = Counter(selector.pick() for _ in range(10_000))
    assert set(counts) == set(LOVE_QUOTES)
    for quote in LOVE_QUOTES:
        assert 800 <= counts[quote] <= 1200, (quote, counts[quote])
