"""
Selection token codec for `/results?selections=<token>`.

Token format: the selections as a compact JSON array (one object or null per
slot), UTF-8 encoded, then URL-safe Base64 with the `=` padding stripped.

The token is user-controlled, so decoding never raises: anything malformed
decodes to the default state of two empty slots.
"""

from __future__ import annotations

import base64
import binascii
import json
from typing import Literal, Sequence

from pydantic import BaseModel, ConfigDict, ValidationError

MAX_SELECTIONS = 2

SelectionType = Literal["court", "judge", "charge"]


class Selection(BaseModel):
    # strict: "5", 5.0 and True are not accepted as ids.
    model_config = ConfigDict(frozen=True, strict=True)

    type: SelectionType | None = None
    value: int | None = None
    name: str | None = None

    @property
    def is_valid(self) -> bool:
        return self.type is not None and self.value is not None

    def to_json(self) -> dict:
        data: dict = {"type": self.type, "value": self.value}
        if self.name is not None:
            data["name"] = self.name
        return data


def default_selections() -> list[Selection | None]:
    return [None] * MAX_SELECTIONS


def encode_selections(selections: Sequence[Selection | None]) -> str:
    if len(selections) > MAX_SELECTIONS:
        raise ValueError(f"At most {MAX_SELECTIONS} selections can be encoded.")

    payload = [selection.to_json() if selection is not None else None for selection in selections]
    raw = json.dumps(payload, separators=(",", ":"), ensure_ascii=False).encode("utf-8")
    return base64.urlsafe_b64encode(raw).decode("ascii").rstrip("=")


def decode_selections(token: str | None) -> list[Selection | None]:
    if not isinstance(token, str):
        return default_selections()

    padded = token.strip() + "=" * (-len(token.strip()) % 4)
    try:
        raw = base64.urlsafe_b64decode(padded)
        entries = json.loads(raw.decode("utf-8"))
    except (binascii.Error, ValueError, RecursionError):
        # RecursionError: deeply nested arrays.
        return default_selections()

    if not isinstance(entries, list):
        return default_selections()

    decoded: list[Selection | None] = []
    for entry in entries[:MAX_SELECTIONS]:
        if entry is None:
            decoded.append(None)
            continue
        if not isinstance(entry, dict):
            return default_selections()
        try:
            decoded.append(Selection.model_validate(entry))
        except ValidationError:
            return default_selections()
    return decoded


def selections_to_ids(selections: Sequence[Selection | None]) -> tuple[int, int, int]:
    """
    (court_id, judge_id, charge_id) for the valid selections; 0 means
    unspecified. The first selection of a type wins.
    """
    ids = {"court": 0, "judge": 0, "charge": 0}
    for selection in selections:
        if selection is None or not selection.is_valid:
            continue
        if ids[selection.type] == 0:
            ids[selection.type] = selection.value
    return ids["court"], ids["judge"], ids["charge"]
