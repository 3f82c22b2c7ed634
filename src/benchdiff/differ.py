"""Matching of old and new benchmark records and relative change computation."""

from __future__ import annotations

import logging
import math
from enum import Enum
from typing import List, Optional, Sequence

from .errors import ZeroBaselineError
from .models import Diff, Record

logger = logging.getLogger(__name__)


class ZeroBaselinePolicy(str, Enum):
    """What to do when an old score of zero makes the change undefined."""
    PROPAGATE = "propagate"
    ERROR = "error"


def _relative_change(old_score: float, new_score: float) -> float:
    if old_score != 0:
        return (new_score - old_score) / old_score
    delta = new_score - old_score
    if delta == 0 or math.isnan(delta):
        return math.nan
    return math.copysign(math.inf, delta)


def calculate_delta(
    new: Record,
    old: Record,
    zero_baseline: ZeroBaselinePolicy = ZeroBaselinePolicy.PROPAGATE,
) -> Diff:
    """Build the Diff for a matched pair; name, mode and units come from ``new``."""
    if old.score == 0:
        if zero_baseline == ZeroBaselinePolicy.ERROR:
            raise ZeroBaselineError(old.name, old.units)
        logger.warning("Old score for %s (%s) is zero, relative change is not finite", old.name, old.units)

    return Diff(
        name=new.name,
        mode=new.mode,
        old_score=old.score,
        new_score=new.score,
        units=new.units,
        diff=_relative_change(old.score, new.score),
    )


def find_match(record: Record, candidates: Sequence[Record]) -> Optional[Record]:
    """First candidate with the same name and units, if any."""
    return next((c for c in candidates if c.key == record.key), None)


def compare_results(
    old_results: Sequence[Record],
    new_results: Sequence[Record],
    zero_baseline: ZeroBaselinePolicy = ZeroBaselinePolicy.PROPAGATE,
) -> List[Diff]:
    """Pair every old record with its first match in ``new_results``.

    Output follows the order of ``old_results``. Old records without a
    match, and new records nobody matched, are dropped. The same new
    record may be matched by several old records sharing its key.
    """
    diffs = []
    for old in old_results:
        new = find_match(old, new_results)
        if new is None:
            logger.debug("No new result for %s (%s)", old.name, old.units)
            continue
        diffs.append(calculate_delta(new, old, zero_baseline))
    return diffs
