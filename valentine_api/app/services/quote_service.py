"""
Quote bank and random selection.

``QuoteBank`` is an immutable, ordered collection of love quotes that
is built once at import time (``DEFAULT_QUOTE_BANK``) and shared by
every request.  ``Selector`` draws one quote uniformly at random from a
bank.  Randomness is injected through a ``RandomSource`` so that tests
can make the choice deterministic.
"""

from __future__ import annotations

import logging
import random
from typing import Iterable, Iterator, Optional, Protocol, Sequence, Tuple

logger = logging.getLogger(__name__)

FALLBACK_QUOTE = "I love you!"

LOVE_QUOTES: Tuple[str, ...] = (
    "You are the reason I believe in love.",
    "Every love story is beautiful, but ours is my favorite.",
    "In all the world, there is no heart for me like yours.",
    "I love you more than yesterday, less than tomorrow.",
    "You had me at hello.",
    "To love and be loved is to feel the sun from both sides.",
    "My heart is, and always will be, yours.",
    "I wish I could turn back the clock. I'd find you sooner and love you longer.",
    "You are my today and all of my tomorrows.",
    "I fell in love the way you fall asleep: slowly, and then all at once.",
)


class RandomSource(Protocol):
    """Anything that can pick an index in ``[0, n)`` uniformly."""

    def pick_uniform(self, n: int) -> int:
        ...


class SystemRandomSource:
    """``RandomSource`` backed by :class:`random.Random`."""

    def __init__(self, rng: Optional[random.Random] = None) -> None:
        self._rng = rng or random.Random()

    def pick_uniform(self, n: int) -> int:
        return self._rng.randrange(n)


class QuoteBank:
    """Read‑only ordered sequence of non‑empty quotes.

    The bank refuses to be built empty or with blank entries, so a
    constructed bank always has at least one quote to offer.
    """

    __slots__ = ("_quotes",)

    def __init__(self, quotes: Iterable[str]) -> None:
        items = tuple(quotes)
        if not items:
            raise ValueError("QuoteBank requires at least one quote")
        for item in items:
            if not isinstance(item, str) or not item.strip():
                raise ValueError(f"Invalid quote: {item!r}")
        self._quotes = items

    @property
    def quotes(self) -> Tuple[str, ...]:
        return self._quotes

    def __len__(self) -> int:
        return len(self._quotes)

    def __getitem__(self, index: int) -> str:
        return self._quotes[index]

    def __iter__(self) -> Iterator[str]:
        return iter(self._quotes)

    def __contains__(self, item: object) -> bool:
        return item in self._quotes

    def __repr__(self) -> str:
        return f"QuoteBank({len(self._quotes)} quotes)"


DEFAULT_QUOTE_BANK = QuoteBank(LOVE_QUOTES)


class Selector:
    """Uniform random choice over a quote bank."""

    def __init__(self, bank: Sequence[str] = DEFAULT_QUOTE_BANK, random_source: Optional[RandomSource] = None) -> None:
        self.bank = bank
        self.random_source = random_source or SystemRandomSource()

    def pick(self) -> str:
        """Return one quote, each with probability ``1 / len(bank)``.

        Never raises: an empty bank, or an index outside the bank coming
        from a misbehaving random source, yields ``FALLBACK_QUOTE``.
        """
        size = len(self.bank)
        if size == 0:
            logger.warning("Quote bank is empty, using fallback quote")
            return FALLBACK_QUOTE
        index = self.random_source.pick_uniform(size)
        if not 0 <= index < size:
            logger.warning("Random source returned index %s for a bank of %s quotes", index, size)
            return FALLBACK_QUOTE
        logger.debug("Selected quote #%s", index)
        return self.bank[index]
