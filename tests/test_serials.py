import pytest

from openmenu.serials import sanitize_art, sanitize_meta


@pytest.mark.parametrize("func", [sanitize_art, sanitize_meta])
def test_unknown_serial_passes_through(func):
    assert func("NOPE123") == "NOPE123"


def test_both_remap_applies_to_art_and_meta():
    assert sanitize_art("T13001D05") == "T13001D"
    assert sanitize_meta("T13001D05") == "T13001D"


def test_meta_only_remap_leaves_art_alone():
    assert sanitize_meta("T10001D") == "T10004N"
    assert sanitize_art("T10001D") == "T10001D"


def test_japanese_meta_remap():
    assert sanitize_meta("HDR0054") == "MK51053"
    assert sanitize_art("HDR0054") == "HDR0054"


def test_remap_is_single_step():
    # T45001D09 maps to T45001D05, which has its own meta remap; only one step is applied.
    assert sanitize_meta("T45001D09") == "T45001D05"
    assert sanitize_meta("T45001D05") == "T40401N"