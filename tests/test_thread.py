"""Tests for the thread-local engine and reseeding."""

import threading

import numpy as np
import pytest

from entropic import RandError, StdRng, StepRng, random, thread_rng
from entropic.errors import ErrorKind
from entropic.rngs import ReseedingRng
from entropic.rngs import thread as thread_mod


class CountingSource:
    """Bit source for reseeding that records how often it was used."""

    def __init__(self, fail_with=None):
        self.fail_with = fail_with
        self.calls = 0
        self._step = StepRng(1, 1)

    def try_fill_bytes(self, dest):
        self.calls += 1
        if self.fail_with is not None:
            raise RandError(self.fail_with, "reseed source down")
        self._step.fill_bytes(dest)


class TestThreadRng:
    def test_same_engine_within_thread(self):
        assert thread_rng().engine is thread_rng().engine

    def test_engine_per_thread(self):
        engines = []

        def worker():
            engines.append(thread_rng().engine)

        threads = [threading.Thread(target=worker) for _ in range(3)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()
        engines.append(thread_rng().engine)
        assert len({id(e) for e in engines}) == 4

    def test_sampling(self):
        r = thread_rng()
        assert 0 <= r.gen_range(0, 10) < 10
        buf = np.zeros(8, dtype=np.uint64)
        r.fill(buf)
        assert np.count_nonzero(buf) > 0

    def test_random(self):
        assert 0.0 <= random() < 1.0
        assert isinstance(random(np.uint8), np.uint8)
        assert isinstance(random(bool), bool)
        v = random((np.uint32, (np.int64, float)))
        assert isinstance(v, tuple)

    def test_threshold_from_environment(self, monkeypatch):
        monkeypatch.setenv(thread_mod.RESEED_THRESHOLD_ENV, "4096")
        assert thread_mod.reseed_threshold() == 4096
        monkeypatch.delenv(thread_mod.RESEED_THRESHOLD_ENV)
        assert thread_mod.reseed_threshold() == thread_mod.THREAD_RNG_RESEED_THRESHOLD

    @pytest.mark.parametrize("raw", ["lots", "-1"])
    def test_bad_threshold(self, monkeypatch, raw):
        monkeypatch.setenv(thread_mod.RESEED_THRESHOLD_ENV, raw)
        with pytest.raises(ValueError):
            thread_mod.reseed_threshold()

    def test_new_thread_uses_configured_threshold(self, monkeypatch):
        monkeypatch.setenv(thread_mod.RESEED_THRESHOLD_ENV, "1024")
        seen = []
        t = threading.Thread(target=lambda: seen.append(thread_rng().engine.threshold))
        t.start()
        t.join()
        assert seen == [1024]


class TestReseedingRng:
    def test_reseeds_after_threshold(self):
        src = CountingSource()
        rng = ReseedingRng(StdRng.seed_from_u64(1), 16, src)
        for _ in range(2):
            rng.next_u64()
        assert src.calls == 0
        rng.next_u64()
        assert src.calls == 1
        assert rng.bytes_until_reseed == 8

    def test_reseed_changes_stream(self):
        plain = StdRng.seed_from_u64(1)
        rng = ReseedingRng(StdRng.seed_from_u64(1), 8, CountingSource())
        assert rng.next_u64() == plain.next_u64()
        assert rng.next_u64() != plain.next_u64()

    def test_zero_threshold_never_reseeds(self):
        src = CountingSource()
        rng = ReseedingRng(StdRng.seed_from_u64(1), 0, src)
        buf = bytearray(4096)
        rng.fill_bytes(buf)
        rng.next_u32()
        assert src.calls == 0

    def test_failed_reseed_is_logged_not_raised(self, caplog):
        src = CountingSource(fail_with=ErrorKind.UNAVAILABLE)
        rng = ReseedingRng(StdRng.seed_from_u64(1), 1024, src)
        rng.fill_bytes(bytearray(1024))
        rng.next_u32()
        assert src.calls == 1
        assert "reseeding" in caplog.text
        assert rng.bytes_until_reseed == 1024 // 256 - 4

    def test_not_ready_retries_on_next_output(self):
        src = CountingSource(fail_with=ErrorKind.NOT_READY)
        rng = ReseedingRng(StdRng.seed_from_u64(1), 1024, src)
        rng.fill_bytes(bytearray(1024))
        rng.next_u32()
        assert src.calls == 1
        assert rng.bytes_until_reseed == -4
        rng.next_u32()
        assert src.calls == 2

    def test_explicit_reseed_raises(self):
        rng = ReseedingRng(StdRng.seed_from_u64(1), 64, CountingSource(ErrorKind.TRANSIENT))
        with pytest.raises(RandError):
            rng.reseed()

    def test_negative_threshold(self):
        with pytest.raises(ValueError):
            ReseedingRng(StdRng.seed_from_u64(1), -1, CountingSource())
