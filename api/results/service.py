"""
Results page model.

Flow:
1) Decode the selection token into (court, judge, charge) ids
2) Resolve display names and build the title
3) Load specification and motion rows for the ids (and the average baseline)
4) Shape dispositions, sentences, bail and motions; build the bail chart payloads
"""

from __future__ import annotations

from dataclasses import dataclass, field

from bail import service as bail_service
from bail.schemas import BailDecisionData
from dispositions import service as dispositions_service
from dispositions.schemas import DispositionData
from motions import service as motions_service
from motions.schemas import MotionData
from sentences import service as sentences_service
from sentences.schemas import SentenceData
from specification import repository as specification_repository
from specification.service import motion_source_id

from . import charts, names, selections, titles
from .charts import DisplayMode
from .formatters import ViewMode


@dataclass
class Sections:
    dispositions: list[DispositionData] = field(default_factory=list)
    sentences: list[SentenceData] = field(default_factory=list)
    bail: list[BailDecisionData] = field(default_factory=list)
    motions: list[MotionData] = field(default_factory=list)


def average_key(court_id: int, judge_id: int, charge_id: int) -> tuple[int, int, int]:
    """
    Baseline used by the comparative view: the charge across all courts and
    judges when a charge is narrowed further, otherwise the global row set.
    """
    if charge_id == 0 or (judge_id == 0 and court_id == 0):
        return 0, 0, 0
    return 0, 0, charge_id


def _selection_name(chosen: list[selections.Selection | None], kind: str) -> str | None:
    for selection in chosen:
        if selection is not None and selection.is_valid and selection.type == kind:
            return selection.name
    return None


def _total_case_dispositions(rows: list[dict]) -> int:
    any_row = next((row for row in rows if row.get("trial_category") == "any"), None)
    if any_row is None:
        return 0
    return int(any_row.get("total_case_dispositions") or 0)


async def _rows_for(court_id: int, judge_id: int, charge_id: int) -> tuple[list[dict], list[dict]]:
    rows = await specification_repository.list_specifications(
        court_id=court_id,
        judge_id=judge_id,
        charge_id=charge_id,
    )
    if not rows:
        return [], []
    motion_rows = await specification_repository.list_motion_data([motion_source_id(rows)])
    return rows, motion_rows


def _sections(rows: list[dict], motion_rows: list[dict]) -> Sections:
    return Sections(
        dispositions=dispositions_service.transform_dispositions_data(rows),
        sentences=sentences_service.transform_sentences_data(rows),
        bail=bail_service.transform_bail_data(rows),
        motions=motions_service.transform_motions_data(motion_rows),
    )


def _compare(current: Sections, average: Sections) -> Sections:
    return Sections(
        dispositions=dispositions_service.compare_dispositions_data(current.dispositions, average.dispositions),
        sentences=sentences_service.compare_sentences_data(current.sentences, average.sentences),
        bail=bail_service.compare_bail_data(current.bail, average.bail),
        motions=motions_service.compare_motions_data(current.motions, average.motions),
    )


async def build_results_page(
    token: str | None,
    *,
    view_mode: ViewMode = ViewMode.OBJECTIVE,
    display_mode: DisplayMode = DisplayMode.FREQUENCY,
) -> dict:
    chosen = selections.decode_selections(token)
    court_id, judge_id, charge_id = selections.selections_to_ids(chosen)

    resolved = await names.resolve_names(court_id, judge_id, charge_id)
    title = titles.format_specification_title(
        court_id,
        judge_id,
        charge_id,
        resolved["charge"] or _selection_name(chosen, "charge"),
        court_name=resolved["court"] or _selection_name(chosen, "court"),
        judge_name=resolved["judge"] or _selection_name(chosen, "judge"),
    )

    rows, motion_rows = await _rows_for(court_id, judge_id, charge_id)
    sections = _sections(rows, motion_rows)

    if view_mode == ViewMode.COMPARATIVE:
        average_rows, average_motion_rows = await _rows_for(*average_key(court_id, judge_id, charge_id))
        sections = _compare(sections, _sections(average_rows, average_motion_rows))

    return {
        "selections": [s.to_json() if s is not None else None for s in chosen],
        "params": {"courtId": court_id, "judgeId": judge_id, "chargeId": charge_id},
        "title": title,
        "view_mode": view_mode.value,
        "display_mode": display_mode.value,
        "total_cases": _total_case_dispositions(rows),
        "dispositions": [item.model_dump() for item in sections.dispositions],
        "sentences": [item.model_dump() for item in sections.sentences],
        "motions": [item.model_dump() for item in motions_service.ensure_all_motion_types(sections.motions)],
        "bail": charts.build_bail_chart(sections.bail, view_mode, display_mode).model_dump(),
        "cost": charts.build_cost_chart(sections.bail, view_mode).model_dump(),
    }


def encode_request(chosen: list[selections.Selection | None]) -> dict:
    token = selections.encode_selections(chosen)
    return {"token": token, "url": f"/results?selections={token}"}
