"""
Prefill truck form fields from a decoded VIN.

Only empty fields are written: anything the user already typed wins over
the decoder's guess.
"""

import logging
from dataclasses import dataclass, field

from app.schemas.vin import TruckDraft
from app.services.vin_decoder import DecodedVin

logger = logging.getLogger(__name__)

# TruckDraft field <- DecodedVin attribute
_AUTOFILL_FIELDS = (
    ("manufacturer", "manufacturer"),
    ("model", "model"),
    ("model_year", "model_year"),
    ("engine_model", "engine_type"),
)


@dataclass
class AutofillResult:
    truck: TruckDraft
    filled_fields: list[str] = field(default_factory=list)


def _is_empty(value) -> bool:
    if value is None:
        return True
    return isinstance(value, str) and not value.strip()


def apply_decoded_vin(draft: TruckDraft, decoded: DecodedVin) -> AutofillResult:
    """Return a copy of draft with empty fields filled from decoded. draft is left untouched."""
    if not decoded.is_valid:
        return AutofillResult(truck=draft.model_copy())

    updates = {}
    for draft_field, decoded_attr in _AUTOFILL_FIELDS:
        value = getattr(decoded, decoded_attr)
        if value is not None and _is_empty(getattr(draft, draft_field)):
            updates[draft_field] = value

    if updates:
        logger.debug(f"Autofilled {sorted(updates)} for VIN {draft.vin}")

    return AutofillResult(truck=draft.model_copy(update=updates), filled_fields=list(updates))
