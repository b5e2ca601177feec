from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from os import PathLike

from vote_tally.grammar import parse_line
from vote_tally.models import DedupeStats, DeduplicatedSet, VoteRecord

logger = logging.getLogger(__name__)


class IdentityDeduplicator:
    """Keeps the first record seen for every id and every ip.

    A record is dropped when either key was already claimed by an earlier
    retained record. Lines that do not parse are skipped and only counted.
    """

    def dedupe(self, lines: Iterable[str]) -> DeduplicatedSet:
        seen_ids: set[str] = set()
        seen_ips: set[str] = set()
        records: list[VoteRecord] = []
        total = malformed = duplicates = 0

        for line in lines:
            total += 1
            record = parse_line(line)
            if record is None:
                malformed += 1
                continue
            if record.record_id in seen_ids or record.ip in seen_ips:
                duplicates += 1
                continue
            seen_ids.add(record.record_id)
            seen_ips.add(record.ip)
            records.append(record)

        stats = DedupeStats(total_lines=total, malformed=malformed, duplicates=duplicates)
        logger.info(
            "dedupe: lines=%d discarded=%d (malformed=%d duplicates=%d) retained=%d",
            stats.total_lines,
            stats.discarded,
            stats.malformed,
            stats.duplicates,
            stats.retained,
        )
        return DeduplicatedSet(records=tuple(records), stats=stats)


def dedupe(lines: Iterable[str]) -> DeduplicatedSet:
    return IdentityDeduplicator().dedupe(lines)


def load_and_dedupe(path: str | PathLike[str]) -> DeduplicatedSet:
    """Stream ``path`` line by line through the deduplicator.

    Lines that are not valid UTF-8 are counted as malformed. Raises ``OSError``
    (e.g. ``FileNotFoundError``) if the file cannot be read.
    """
    with open(path, "rb") as handle:
        return IdentityDeduplicator().dedupe(_decoded_lines(handle))


def _decoded_lines(raw_lines: Iterable[bytes]) -> Iterator[str]:
    for number, raw in enumerate(raw_lines, start=1):
        try:
            yield raw.decode("utf-8")
        except UnicodeDecodeError:
            logger.debug("line %d is not valid UTF-8, treating as malformed", number)
            # An empty line never matches the grammar.
            yield ""
