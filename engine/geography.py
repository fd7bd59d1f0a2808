"""
Geography aggregator — rolls allocation lines up to their program's geography.
"""

from __future__ import annotations

import logging
from dataclasses import asdict, dataclass
from typing import Dict, Iterable, List

from core.schema import Program

from .allocation import AllocationLine

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GeographyAllocation:
    geography: str
    amount: float

    def to_dict(self) -> dict:
        return asdict(self)


def aggregate_by_geography(
    programs: Iterable[Program],
    allocation_lines: Iterable[AllocationLine],
) -> List[GeographyAllocation]:
    """
    Sum line amounts per geography, in order of first appearance.

    Lines whose program_id is not in `programs` are dropped.
    """
    geography_by_program = {p.id: p.geography for p in programs}
    totals: Dict[str, float] = {}

    for line in allocation_lines:
        geography = geography_by_program.get(line.program_id)
        if geography is None:
            logger.debug(
                f"Dropping allocation {line.donor_id}->{line.program_id}: unknown program"
            )
            continue
        totals[geography] = totals.get(geography, 0.0) + line.amount

    return [GeographyAllocation(geography=g, amount=a) for g, a in totals.items()]
