"""Unit tests for table-level helpers."""

import pytest

from quill.persistence.tables import MAX_ID, is_storable_id


class TestIsStorableId:
    """Tests for is_storable_id()."""

    @pytest.mark.parametrize("value", [1, 42, MAX_ID])
    def test_in_range(self, value):
        assert is_storable_id(value)

    @pytest.mark.parametrize("value", [0, -1, MAX_ID + 1, 3_000_000_000])
    def test_out_of_range(self, value):
        assert not is_storable_id(value)
