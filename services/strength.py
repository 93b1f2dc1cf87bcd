from domain.constants import PASSPHRASE_MIN_LENGTH, MSG_PASSPHRASE_SHORTFALL, STRENGTH_TIERS
from domain.models import PasswordStrength


def password_strength(passphrase: str) -> PasswordStrength:
    """Coarse 0-4 tier from passphrase length alone.
    0 chars → 0, 1~49 → 1, 50~99 → 2, 100~149 → 3, 150+ → 4.
    """
    length = len(passphrase)
    *bounded, (_, top_level, top_label, top_color) = STRENGTH_TIERS
    for bound, level, label, color in bounded:
        if length < bound:
            return PasswordStrength(level=level, label=label, color=color)
    return PasswordStrength(level=top_level, label=top_label, color=top_color)


def passphrase_shortfall(passphrase: str) -> int:
    return max(PASSPHRASE_MIN_LENGTH - len(passphrase), 0)


def shortfall_message(passphrase: str) -> str:
    return MSG_PASSPHRASE_SHORTFALL.format(missing=passphrase_shortfall(passphrase))
