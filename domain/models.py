from dataclasses import dataclass, field
from typing import Dict, Optional

from domain.constants import FIELD_NAMES, PHASE_EDITING


def _empty_values() -> Dict[str, str]:
    return {name: "" for name in FIELD_NAMES}


def _untouched() -> Dict[str, bool]:
    return {name: False for name in FIELD_NAMES}


@dataclass(frozen=True)
class PasswordStrength:
    level: int  # 0..4
    label: str
    color: str

    def segment_lit(self, segment: int) -> bool:
        """Segments are numbered 1..4; segment i is lit when i <= level."""
        return segment <= self.level


@dataclass
class SummaryRow:
    label: str
    value: str


@dataclass
class FormSession:
    """State of one registration form, owned by a single browser session.

    Derived values (validity, password strength) are not stored here; they
    are recomputed from `values` on every read in services.form_state.
    """
    values: Dict[str, str] = field(default_factory=_empty_values)
    touched: Dict[str, bool] = field(default_factory=_untouched)
    errors: Dict[str, Optional[str]] = field(default_factory=dict)
    phase: str = PHASE_EDITING  # editing | confirmed
