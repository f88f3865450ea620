from __future__ import annotations

import logging
import math
import re

from .models import ExtractedEntity, RawFieldBuffer

logger = logging.getLogger(__name__)

SENTINEL = "**Here are some great restaurant options:**"

ADDRESS_LABEL = "Address:"
RATING_LABEL = "Rating:"
PRICE_LABEL = "Price:"
PRICE_SYMBOL = "$"

_LINE_BREAK_RE = re.compile(r"\r\n|\r|\n")
_DECIMAL_RE = re.compile(r"[+-]?([0-9]+\.?[0-9]*|\.[0-9]+)([eE][+-]?[0-9]+)?")


def _after_label(line: str, label: str) -> str:
    # Drops the emoji and label ("📍 Address: ") along with anything before them.
    return line.split(label, 1)[1].strip()


def _is_boundary(line: str) -> bool:
    return "**" in line and "[" in line and "]" in line


class ResponseExtractor:
    """
    Line-oriented scanner turning one bot reply into restaurant records.

    A line holding ``**`` plus a ``[name]`` starts a new record; the
    ``Address:``, ``Rating:`` and ``Price:`` lines that follow fill it in.
    A record is finalized when the next boundary line appears or the text
    ends. Records without a name or a parseable rating are dropped.

    One instance handles one reply; use :func:`extract_restaurants` instead
    of driving it directly.
    """

    def __init__(self) -> None:
        self._buffer = RawFieldBuffer()
        self._entities: list[ExtractedEntity] = []

    def run(self, text: str) -> list[ExtractedEntity] | None:
        if SENTINEL not in text:
            return None

        for line in _LINE_BREAK_RE.split(text):
            self._feed(line)
        self._flush()

        return self._entities or None

    def _feed(self, line: str) -> None:
        if _is_boundary(line):
            self._start_record(line)
        elif ADDRESS_LABEL in line:
            address = _after_label(line, ADDRESS_LABEL)
            if address:
                self._buffer.address = address
        elif RATING_LABEL in line:
            self._read_rating(line)
        elif PRICE_LABEL in line:
            self._buffer.price_level = _after_label(line, PRICE_LABEL).count(PRICE_SYMBOL)

    def _start_record(self, line: str) -> None:
        self._flush()

        name_start = line.find("[")
        name_end = line.find("]")
        if name_start >= name_end:
            return

        name = line[name_start + 1:name_end]
        if name:
            self._buffer.name = name

        link_start = line.find("(", name_end)
        link_end = line.find(")", link_start + 1) if link_start != -1 else -1
        if link_end != -1:
            self._buffer.link = line[link_start + 1:link_end]

    def _read_rating(self, line: str) -> None:
        raw = _after_label(line, RATING_LABEL)
        # Plain ASCII decimals only; float() would also take "4_5" or non-ASCII digits
        if not _DECIMAL_RE.fullmatch(raw):
            logger.debug("Skipping unparseable rating %r", raw)
            return
        rating = float(raw)
        if not math.isfinite(rating):
            logger.debug("Skipping non-finite rating %r", raw)
            return
        self._buffer.rating = rating

    def _flush(self) -> None:
        if self._buffer.is_empty():
            return
        entity = self._buffer.finalize()
        if entity is None:
            logger.debug("Dropping incomplete restaurant record: %s", self._buffer)
        else:
            self._entities.append(entity)
        self._buffer = RawFieldBuffer()


def extract_restaurants(text: str) -> list[ExtractedEntity] | None:
    """
    Extract restaurant records from a bot reply.

    Returns ``None`` when the reply has no restaurant list or when none of
    its records is valid. Never raises for malformed text.
    """
    return ResponseExtractor().run(text)
