from __future__ import annotations

import re

from vote_tally.models import VoteRecord

# ASCII digits only. IP is matched permissively as digits and dots; octets are not validated.
LINE_PATTERN = re.compile(
    r"id: (?P<id>\d+), time: (?P<time>.+?), ip: (?P<ip>[\d.]+), candidate: (?P<candidate>.+)",
    re.ASCII,
)


def parse_line(line: str) -> VoteRecord | None:
    """Parse one raw input line, returning ``None`` when it does not fit the grammar."""
    match = LINE_PATTERN.search(line.rstrip("\r\n"))
    if match is None:
        return None
    return VoteRecord(
        record_id=match["id"],
        timestamp=match["time"],
        ip=match["ip"],
        candidate_name=match["candidate"],
    )
