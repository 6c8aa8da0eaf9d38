import pytest

from lo_sqs_connector.infrastructure.logging import (
    Timer,
    dispatch_cycle,
    get_cycle_id,
    mask_secret,
)


class TestLoggingHelpers:
    def test_timer_measures_duration(self):
        with Timer() as t:
            sum(range(1000))

        assert t.duration_ms >= 0

    def test_dispatch_cycle_sets_and_restores_cycle_id(self):
        assert get_cycle_id() == ""

        with dispatch_cycle() as first:
            assert first
            assert get_cycle_id() == first

        assert get_cycle_id() == ""

    def test_dispatch_cycle_restores_cycle_id_on_error(self):
        with pytest.raises(RuntimeError):
            with dispatch_cycle():
                raise RuntimeError("boom")

        assert get_cycle_id() == ""

    def test_each_cycle_gets_its_own_id(self):
        with dispatch_cycle() as first:
            pass
        with dispatch_cycle() as second:
            pass

        assert first != second

    def test_mask_secret_keeps_prefix_only(self):
        assert mask_secret("abcdef0123456789") == "abcd..."
        assert mask_secret("abc") == "abc"
        assert mask_secret("") == ""
