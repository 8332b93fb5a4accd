"""Unit tests for jettison_health.health.fetcher."""
from __future__ import annotations

import pytest

from jettison_health.health.fetcher import Deadline, HealthFetcher
from jettison_health.schema.errors import StoreError
from jettison_health.schema.health import HEALTH_FIELDS, Target

ALL_FIELDS = {f.value for f in HEALTH_FIELDS}


class FakeClock:
    def __init__(self, start: float = 100.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now


# ---------------------------------------------------------------------------
# Deadline
# ---------------------------------------------------------------------------

class TestDeadline:
    def test_remaining_counts_down(self) -> None:
        clock = FakeClock()
        deadline = Deadline(5.0, clock=clock)
        clock.now += 2.0
        assert deadline.remaining() == pytest.approx(3.0)

    def test_remaining_never_negative(self) -> None:
        clock = FakeClock()
        deadline = Deadline(1.0, clock=clock)
        clock.now += 10.0
        assert deadline.remaining() == 0.0

    def test_check_returns_time_left(self) -> None:
        clock = FakeClock()
        deadline = Deadline(5.0, clock=clock)
        clock.now += 1.5
        assert deadline.check("now") == pytest.approx(3.5)

    def test_check_raises_store_error_after_expiry(self) -> None:
        clock = FakeClock()
        deadline = Deadline(5.0, clock=clock)
        clock.now += 5.0
        assert deadline.expired
        with pytest.raises(StoreError, match="deadline of 5s exceeded"):
            deadline.check("before fetching x:y")


# ---------------------------------------------------------------------------
# HealthFetcher
# ---------------------------------------------------------------------------

class TestHealthFetcher:
    def test_complete_pool(self, populated_store) -> None:
        records = HealthFetcher(populated_store).fetch([Target("testapp", "api")])
        record = records["testapp:api"]
        assert record.exists is True
        assert record.missing_keys == []
        assert record.health == 856
        assert record.running == 1
        assert record.exit == 0
        assert record.init == 1500

    def test_eight_reads_per_target(self, populated_store) -> None:
        HealthFetcher(populated_store).fetch(
            [Target("testapp", "api"), Target("testapp", "worker")]
        )
        assert [len(call) for call in populated_store.calls] == [8, 8]
        assert "testapp:__healthpool__worker_beats" in populated_store.calls[1]

    def test_absent_pool_lists_every_field(self, make_store) -> None:
        record = HealthFetcher(make_store()).fetch([Target("x", "y")])["x:y"]
        assert record.exists is False
        assert set(record.missing_keys) == ALL_FIELDS
        assert all(record.get(f) is None for f in HEALTH_FIELDS)

    def test_partial_pool_lists_exactly_missing(self, make_store) -> None:
        store = make_store(
            {
                "svc:__healthpool__cat_health": "10",
                "svc:__healthpool__cat_beats": "3",
                "svc:__healthpool__cat_exit": "0",
            }
        )
        record = HealthFetcher(store).fetch([Target("svc", "cat")])["svc:cat"]
        assert record.exists is False
        assert set(record.missing_keys) == ALL_FIELDS - {"health", "beats", "exit"}
        assert record.health == 10
        assert record.exit == 0

    def test_zero_is_present_not_absent(self, make_store) -> None:
        store = make_store({f"s:__healthpool__c_{f.value}": "0" for f in HEALTH_FIELDS})
        record = HealthFetcher(store).fetch([Target("s", "c")])["s:c"]
        assert record.exists is True
        assert record.beats == 0

    def test_accepts_bytes_and_int_values(self, make_store) -> None:
        data: dict[str, object] = {f"s:__healthpool__c_{f.value}": 1 for f in HEALTH_FIELDS}
        data["s:__healthpool__c_health"] = b"-7"
        record = HealthFetcher(make_store(data)).fetch([Target("s", "c")])["s:c"]
        assert record.health == -7
        assert record.cap == 1

    def test_non_integer_value_is_store_error(self, make_store) -> None:
        store = make_store({"s:__healthpool__c_health": "healthy"})
        with pytest.raises(StoreError, match="non-integer value"):
            HealthFetcher(store).fetch([Target("s", "c")])

    def test_records_follow_target_order(self, populated_store) -> None:
        targets = [Target("testapp", "worker"), Target("nope", "x"), Target("testapp", "api")]
        records = HealthFetcher(populated_store).fetch(targets)
        assert list(records) == ["testapp:worker", "nope:x", "testapp:api"]

    def test_transport_failure_propagates(self, make_store) -> None:
        store = make_store(fail_with=StoreError("connection reset"))
        with pytest.raises(StoreError, match="connection reset"):
            HealthFetcher(store).fetch([Target("a", "b")])

    def test_short_reply_is_store_error(self) -> None:
        class ShortStore:
            def get_many(self, keys, timeout=None):
                return [None]

        with pytest.raises(StoreError, match="returned 1 value"):
            HealthFetcher(ShortStore()).fetch([Target("a", "b")])

    def test_shared_deadline_stops_fetch_without_partial_result(self, make_store) -> None:
        clock = FakeClock()
        deadline = Deadline(1.0, clock=clock)
        store = make_store()
        original = store.get_many

        def slow_get_many(keys, timeout=None):
            clock.now += 0.6
            return original(keys, timeout=timeout)

        store.get_many = slow_get_many
        fetcher = HealthFetcher(store, deadline=deadline)
        with pytest.raises(StoreError, match="deadline"):
            fetcher.fetch([Target("a", "1"), Target("b", "2"), Target("c", "3")])
        # The third target was never attempted.
        assert len(store.calls) == 2

    def test_empty_target_list_returns_empty(self, make_store) -> None:
        assert HealthFetcher(make_store()).fetch([]) == {}

    def test_each_read_is_bounded_by_time_left(self, make_store) -> None:
        clock = FakeClock()
        deadline = Deadline(1.0, clock=clock)
        store = make_store()
        original = store.get_many

        def slow_get_many(keys, timeout=None):
            clock.now += 0.3
            return original(keys, timeout=timeout)

        store.get_many = slow_get_many
        HealthFetcher(store, deadline=deadline).fetch(
            [Target("a", "1"), Target("b", "2"), Target("c", "3")]
        )
        assert store.timeouts == pytest.approx([1.0, 0.7, 0.4])


class TestValueParsing:
    @pytest.mark.parametrize("raw", ["1_000", " 12 ", "12\n", "٣", "1.5", "", "+", "0x10"])
    def test_rejects_non_ascii_integer_text(self, make_store, raw: str) -> None:
        store = make_store({"s:__healthpool__c_health": raw})
        with pytest.raises(StoreError, match="non-integer value"):
            HealthFetcher(store).fetch([Target("s", "c")])

    @pytest.mark.parametrize(("raw", "expected"), [("+5", 5), ("-12", -12), ("007", 7)])
    def test_accepts_signed_decimal(self, make_store, raw: str, expected: int) -> None:
        data = {f"s:__healthpool__c_{f.value}": "1" for f in HEALTH_FIELDS}
        data["s:__healthpool__c_health"] = raw
        record = HealthFetcher(make_store(data)).fetch([Target("s", "c")])["s:c"]
        assert record.health == expected

    def test_bool_is_rejected(self, make_store) -> None:
        store = make_store({"s:__healthpool__c_health": True})
        with pytest.raises(StoreError, match="non-integer value"):
            HealthFetcher(store).fetch([Target("s", "c")])
