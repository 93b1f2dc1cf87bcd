import pytest

from services.strength import password_strength, passphrase_shortfall, shortfall_message


@pytest.mark.parametrize("length,level", [
    (0, 0), (1, 1), (49, 1), (50, 2), (99, 2), (100, 3), (149, 3), (150, 4), (400, 4),
])
def test_tier_boundaries(length, level):
    assert password_strength("k" * length).level == level


def test_tier_labels():
    assert password_strength("").label == "Belum diisi"
    assert password_strength("k").label == "Sangat Lemah"
    assert password_strength("k" * 50).label == "Lemah"
    assert password_strength("k" * 100).label == "Cukup Kuat"
    assert password_strength("k" * 150).label == "Kuat"


def test_meter_lights_segments_up_to_level():
    strength = password_strength("k" * 120)
    assert [strength.segment_lit(i) for i in range(1, 5)] == [True, True, True, False]
    empty = password_strength("")
    assert not any(empty.segment_lit(i) for i in range(1, 5))


def test_shortfall():
    assert passphrase_shortfall("") == 100
    assert passphrase_shortfall("k" * 99) == 1
    assert passphrase_shortfall("k" * 130) == 0
    assert shortfall_message("k" * 60) == "Kurang 40 karakter lagi"
