"""Tests for lexichoice.runtime.rwlock and concurrent Translator use."""

from __future__ import annotations

import threading
import time
from concurrent.futures import ThreadPoolExecutor

import pytest

from lexichoice import ArrayDictionary, Translator
from lexichoice.runtime.rwlock import RWLock


def _run_in_thread(target: object) -> list[BaseException]:
    """Run target in a new thread and return any exception it raised."""
    errors: list[BaseException] = []

    def wrapper() -> None:
        try:
            target()  # type: ignore[operator]
        except BaseException as e:  # noqa: BLE001 - handed back to the test
            errors.append(e)

    thread = threading.Thread(target=wrapper)
    thread.start()
    thread.join(timeout=5.0)
    return errors


class TestRWLockRules:
    """Reentrancy and upgrade rules."""

    def test_read_is_reentrant(self) -> None:
        lock = RWLock()
        with lock.read(), lock.read():
            assert lock.reader_count == 1
        assert lock.reader_count == 0

    def test_upgrade_is_rejected(self) -> None:
        lock = RWLock()
        with lock.read(), pytest.raises(RuntimeError, match="upgrade"):
            with lock.write():
                pass

    def test_write_reentry_is_rejected(self) -> None:
        lock = RWLock()
        with lock.write(), pytest.raises(RuntimeError, match="already holding write lock"):
            with lock.write():
                pass

    def test_read_under_write_is_rejected(self) -> None:
        lock = RWLock()
        with lock.write(), pytest.raises(RuntimeError, match="while holding write lock"):
            with lock.read():
                pass

    def test_writer_active(self) -> None:
        lock = RWLock()
        assert not lock.writer_active
        with lock.write():
            assert lock.writer_active
        assert not lock.writer_active

    def test_negative_timeout(self) -> None:
        lock = RWLock()
        with pytest.raises(ValueError, match="non-negative"):
            with lock.read(timeout=-1):
                pass

    def test_lock_released_after_exception(self) -> None:
        lock = RWLock()
        with pytest.raises(KeyError), lock.write():
            raise KeyError("boom")
        assert not lock.writer_active


class TestRWLockContention:
    """Blocking between threads."""

    def test_readers_share(self) -> None:
        lock = RWLock()
        counts: list[int] = []

        def read() -> None:
            with lock.read(timeout=0.5):
                counts.append(lock.reader_count)

        with lock.read():
            assert _run_in_thread(read) == []
        assert counts == [2]
        assert lock.reader_count == 0

    def test_writer_times_out_behind_reader(self) -> None:
        lock = RWLock()

        def try_write() -> None:
            with lock.write(timeout=0.05):
                pass

        with lock.read():
            errors = _run_in_thread(try_write)
        assert len(errors) == 1
        assert isinstance(errors[0], TimeoutError)

    def test_reader_times_out_behind_writer(self) -> None:
        lock = RWLock()

        def try_read() -> None:
            with lock.read(timeout=0.05):
                pass

        with lock.write():
            errors = _run_in_thread(try_read)
        assert len(errors) == 1
        assert isinstance(errors[0], TimeoutError)

    def test_zero_timeout_does_not_block(self) -> None:
        lock = RWLock()

        def try_write() -> None:
            with lock.write(timeout=0.0):
                pass

        with lock.read():
            started = time.monotonic()
            errors = _run_in_thread(try_write)
            assert time.monotonic() - started < 1.0
        assert isinstance(errors[0], TimeoutError)

    def test_waiting_writer_blocks_new_readers(self) -> None:
        lock = RWLock()
        writer_done = threading.Event()

        def writer() -> None:
            with lock.write():
                writer_done.set()

        def try_read() -> None:
            with lock.read(timeout=0.05):
                pass

        with lock.read():
            thread = threading.Thread(target=writer)
            thread.start()
            # Give the writer time to register as waiting
            time.sleep(0.05)
            errors = _run_in_thread(try_read)
            assert len(errors) == 1
            assert isinstance(errors[0], TimeoutError)
        thread.join(timeout=5.0)
        assert writer_done.is_set()


class TestTranslatorConcurrency:
    """Lookups racing with reconfiguration."""

    def test_concurrent_lookups_during_language_switches(self) -> None:
        messages = ArrayDictionary("en_US", {"files": "%count% plik|%count% pliki|%count% plików"})
        translator = Translator("en", messages, thread_safe=True)
        allowed = {"5 pliki", "5 plików"}

        def lookup(_: int) -> str:
            return translator.translate_plural("files", 5)

        def switch() -> None:
            for i in range(200):
                translator.language = "pl" if i % 2 else "en"

        switcher = threading.Thread(target=switch)
        switcher.start()
        with ThreadPoolExecutor(max_workers=8) as pool:
            results = list(pool.map(lookup, range(400)))
        switcher.join(timeout=10.0)

        assert set(results) <= allowed

    def test_concurrent_add_dictionary(self) -> None:
        translator = Translator("en", thread_safe=True, silent=True)

        def add(i: int) -> None:
            translator.add_dictionary(ArrayDictionary("en_US", {f"k{i}": f"v{i}"}))

        with ThreadPoolExecutor(max_workers=8) as pool:
            list(pool.map(add, range(50)))

        assert len(translator.dictionaries) == 50
        assert all(translator.translate(f"k{i}") == f"v{i}" for i in range(50))
