"""
Motion shaping.

`motion_data` rows hold one outcome tally per (motion, party). They are
grouped by motion type; commonwealth rows also feed the prosecution tally.
Defense figures are the overall tally minus the prosecution tally.
"""

from __future__ import annotations

import logging
from typing import Any

from core.stats import number

from .schemas import ComparativeRatios, MotionData, MotionOutcome

logger = logging.getLogger(__name__)

PROSECUTION_PARTY = "commonwealth"

# Unresolved outcomes of these motions count as denials.
UNKNOWN_IS_DENIED = frozenset({"dismiss", "suppress"})

MOTION_TYPES: dict[str, str] = {
    "dismiss": "Dismiss",
    "suppress": "Suppress",
    "discovery": "Discovery",
    "bail": "Revoke Bail (58b)",
    "dangerousness": "Dangerousness (58a)",
    "continue": "Continue",
    "funds": "Funds",
    "sequester": "Sequester",
    "speedy": "Speedy Trial",
    "bill of particulars": "Bill of Particulars",
    "amend charge": "Amend Charge",
    "protect": "Protective",
    "uncharged conduct": "Uncharged Conduct",
    "nolle prosequi": "Nolle Prosequi",
    "withdraw": "Withdraw",
    "obtain": "Obtain",
    "travel": "Travel",
    "third party records": "Third Party Records",
    "virtual": "Virtual",
    "record-seal": "Record Seal",
    "record-medical": "Record Medical",
    "record-criminal": "Record Criminal",
    "other": "Other",
}


def motion_label(motion_type: str) -> str:
    return MOTION_TYPES.get(motion_type, motion_type)


def _empty(motion_type: str) -> MotionData:
    return MotionData(type=motion_type, label=motion_label(motion_type))


def transform_motions_data(rows: list[dict[str, Any]]) -> list[MotionData]:
    if not rows:
        logger.warning("No motion rows available for motion transformation")
        return []

    by_type: dict[str, MotionData] = {}
    for row in rows:
        motion_type = str(row.get("motion_id") or "")
        motion = by_type.setdefault(motion_type, _empty(motion_type))

        accepted = int(number(row, "accepted"))
        denied = int(number(row, "denied"))
        no_action = int(number(row, "no_action"))
        advisement = int(number(row, "advisement"))
        unknown = int(number(row, "unknown"))

        motion.status.granted += accepted
        motion.status.denied += denied + no_action + advisement
        if motion_type in UNKNOWN_IS_DENIED:
            motion.status.denied += unknown
        motion.count += accepted + denied + no_action + advisement + unknown

        if row.get("party") == PROSECUTION_PARTY:
            motion.party_filed.granted += accepted
            motion.party_filed.denied += denied
            motion.party_filed.other += no_action + advisement + unknown
    return list(by_type.values())


def ensure_all_motion_types(data: list[MotionData]) -> list[MotionData]:
    """
    Every configured motion type in configured order (zero tallies when
    missing), then any other types alphabetically.
    """
    existing = {motion.type: motion for motion in data}
    complete = [existing.pop(motion_type, None) or _empty(motion_type) for motion_type in MOTION_TYPES]
    complete.extend(sorted(existing.values(), key=lambda motion: motion.type))
    return complete


def _granted_share(granted: int, denied: int) -> tuple[int, float]:
    total = granted + denied
    return total, (granted / total if total > 0 else 0.0)


def _share_ratio(current: tuple[int, int], average: tuple[int, int]) -> float:
    current_total, current_share = _granted_share(*current)
    _, average_share = _granted_share(*average)
    # No decided motions here, or none granted in the baseline: same as average.
    if current_total == 0 or average_share == 0:
        return 1.0
    return current_share / average_share


def _sides(motion: MotionData) -> dict[str, tuple[int, int]]:
    status = motion.status
    prosecution = motion.party_filed
    return {
        "overall": (status.granted, status.denied),
        "prosecution": (prosecution.granted, prosecution.denied),
        "defense": (status.granted - prosecution.granted, status.denied - prosecution.denied),
    }


def compare_motions_data(data: list[MotionData], average_data: list[MotionData]) -> list[MotionData]:
    """
    Attach granted-share ratios against the average. Tallies are kept; `count`
    becomes the number of decided (granted or denied) motions.
    """
    by_type = {item.type: item for item in average_data}

    compared = []
    for motion in data:
        average = by_type.get(motion.type)
        if average is None:
            compared.append(motion.model_copy(update={"comparative_ratios": ComparativeRatios()}))
            continue

        current_sides = _sides(motion)
        average_sides = _sides(average)
        ratios = ComparativeRatios(
            **{side: _share_ratio(current_sides[side], average_sides[side]) for side in current_sides}
        )
        compared.append(
            motion.model_copy(
                update={
                    "count": motion.status.granted + motion.status.denied,
                    "comparative_ratios": ratios,
                }
            )
        )
    return compared
