"""Unit tests for radius bucket selection."""

import pytest

from localdeals.client.radius import RADIUS_ALL_KM, RadiusBucket, RadiusSelection
from localdeals.errors import InvalidArgument


def test_initial_bucket_is_five_km():
    """Test default selection."""
    selection = RadiusSelection()

    assert selection.bucket is RadiusBucket.FIVE
    assert selection.radius_km == 5.0
    assert selection.label == "5 km"


def test_options_in_picker_order():
    """Test the fixed bucket set."""
    assert [bucket.value for bucket in RadiusSelection.options()] == [2, 5, 10, 15, 20, 50]
    assert RadiusSelection.options()[-1].label == "All"
    assert RADIUS_ALL_KM == 50.0


def test_select_by_member_or_value():
    """Test buckets can be chosen by enum member or km value."""
    selection = RadiusSelection()

    assert selection.select(RadiusBucket.TEN) is RadiusBucket.TEN
    assert selection.select(20) is RadiusBucket.TWENTY
    assert selection.select(2.0) is RadiusBucket.TWO


def test_select_unknown_radius_rejected():
    """Test values outside the bucket set fail and keep the current state."""
    selection = RadiusSelection()

    with pytest.raises(InvalidArgument):
        selection.select(7)

    assert selection.bucket is RadiusBucket.FIVE


def test_listeners_notified_on_change_only():
    """Test subscribers hear each real transition once."""
    selection = RadiusSelection()
    seen = []
    selection.subscribe(seen.append)

    selection.select(RadiusBucket.FIVE)
    selection.select(RadiusBucket.ALL)
    selection.select(RadiusBucket.ALL)

    assert seen == [RadiusBucket.ALL]
