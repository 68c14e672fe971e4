"""Tests for CountdownMachine transitions and ticker ownership."""
from __future__ import annotations

import threading

from countdown import Counting, CountdownState, End, SetTimer, Ticker
from countdown_fsm import CountdownConfig, CountdownMachine


class Recorder:
    """Collects published states and lets a test wait for a given one."""

    def __init__(self) -> None:
        self.states: list[CountdownState] = []
        self._cond = threading.Condition()

    def __call__(self, state: CountdownState) -> None:
        with self._cond:
            self.states.append(state)
            self._cond.notify_all()

    def wait_until(self, predicate, timeout: float = 2.0) -> bool:
        with self._cond:
            return self._cond.wait_for(lambda: predicate(self.states), timeout)

    def wait_for(self, state: CountdownState, timeout: float = 2.0) -> bool:
        return self.wait_until(lambda states: state in states, timeout)


def _machine(interval: float = 0.0) -> CountdownMachine:
    return CountdownMachine(CountdownConfig(interval=interval))


class TestInitialState:

    def test_starts_in_set_timer_zero(self) -> None:
        machine = _machine()
        assert machine.state == SetTimer(0)
        assert not machine.running

    def test_default_config(self) -> None:
        machine = CountdownMachine()
        assert machine.config == CountdownConfig()

    def test_subscribe_replays_current_state(self) -> None:
        machine = _machine()
        machine.on_timer_changed("9")
        rec = Recorder()
        machine.subscribe(rec)
        assert rec.states == [SetTimer(9)]


class TestTimerChanged:

    def test_digits_set_timer(self) -> None:
        machine = _machine()
        machine.on_timer_changed("42")
        assert machine.state == SetTimer(42)

    def test_non_digits_ignored(self) -> None:
        machine = _machine()
        machine.on_timer_changed("7")
        rec = Recorder()
        machine.subscribe(rec)

        machine.on_timer_changed("4a")
        machine.on_timer_changed("")
        machine.on_timer_changed("-3")

        assert machine.state == SetTimer(7)
        assert rec.states == [SetTimer(7)]

    def test_oversized_digits_ignored(self) -> None:
        machine = _machine()
        machine.on_timer_changed("7")

        machine.on_timer_changed("9" * 5000)

        assert machine.state == SetTimer(7)

    def test_each_edit_published(self) -> None:
        machine = _machine()
        rec = Recorder()
        machine.subscribe(rec)

        machine.on_timer_changed("1")
        machine.on_timer_changed("12")
        machine.on_timer_changed("1")

        assert rec.states == [SetTimer(0), SetTimer(1), SetTimer(12), SetTimer(1)]

    def test_edit_cancels_active_run(self) -> None:
        machine = _machine(interval=30.0)
        rec = Recorder()
        machine.subscribe(rec)
        machine.on_timer_changed("5")
        machine.on_count_down_start()
        assert rec.wait_for(Counting(5, 5))

        machine.on_timer_changed("8")

        assert machine.wait(2.0)
        assert not machine.running
        assert machine.state == SetTimer(8)
        assert rec.states[-1] == SetTimer(8)


class TestCountDownStart:

    def test_full_run_trace(self) -> None:
        machine = _machine()
        machine.on_timer_changed("3")
        rec = Recorder()
        machine.subscribe(rec)

        assert machine.on_count_down_start()
        assert machine.wait(2.0)

        assert rec.states == [
            SetTimer(3),
            Counting(3, 3),
            Counting(3, 2),
            Counting(3, 1),
            Counting(3, 0),
            End(),
        ]
        assert not machine.running

    def test_run_of_n_yields_n_plus_one_counting_states(self) -> None:
        for n in (1, 2, 7):
            machine = _machine()
            machine.on_timer_changed(str(n))
            rec = Recorder()
            machine.subscribe(rec)
            machine.on_count_down_start()
            assert machine.wait(2.0)

            counting = [s for s in rec.states if isinstance(s, Counting)]
            assert [s.count for s in counting] == list(range(n, -1, -1))
            assert all(s.total_count == n for s in counting)
            assert rec.states[-1] == End()
            assert rec.states.count(End()) == 1

    def test_zero_is_noop(self) -> None:
        created = []

        def factory() -> Ticker:
            ticker = Ticker(0.0)
            created.append(ticker)
            return ticker

        machine = CountdownMachine(ticker_factory=factory)
        rec = Recorder()
        machine.subscribe(rec)

        assert machine.on_count_down_start() is False

        assert created == []
        assert not machine.running
        assert rec.states == [SetTimer(0)]

    def test_start_from_end_is_noop(self) -> None:
        machine = _machine()
        machine.on_timer_changed("1")
        machine.on_count_down_start()
        assert machine.wait(2.0)
        assert machine.state == End()

        assert machine.on_count_down_start() is False
        assert machine.state == End()

    def test_uses_ticker_factory(self) -> None:
        created = []

        def factory() -> Ticker:
            ticker = Ticker(0.0)
            created.append(ticker)
            return ticker

        machine = CountdownMachine(ticker_factory=factory)
        machine.on_timer_changed("2")
        machine.on_count_down_start()
        assert machine.wait(2.0)

        assert len(created) == 1
        assert created[0].cancelled
        assert machine.state == End()

    def test_failing_subscriber_does_not_break_run(self) -> None:
        machine = _machine()
        machine.on_timer_changed("2")

        def broken(state: CountdownState) -> None:
            if isinstance(state, Counting):
                raise RuntimeError("boom")

        rec = Recorder()
        machine.subscribe(broken)
        machine.subscribe(rec)
        machine.on_count_down_start()
        assert machine.wait(2.0)

        assert rec.states[-1] == End()
        assert len([s for s in rec.states if isinstance(s, Counting)]) == 3

    def test_restart_while_running_does_not_interleave(self) -> None:
        """A second start cancels the first ticker; its ticks never show up again."""
        machine = _machine(interval=0.05)
        machine.on_timer_changed("20")
        rec = Recorder()
        machine.subscribe(rec)
        machine.on_count_down_start()
        assert rec.wait_for(Counting(20, 19))

        machine.on_timer_changed("2")
        machine.on_count_down_start()
        assert machine.wait(2.0)

        second_run = rec.states[rec.states.index(SetTimer(2)):]
        assert second_run == [SetTimer(2), Counting(2, 2), Counting(2, 1), Counting(2, 0), End()]

    def test_restart_from_counting_uses_remaining_count(self) -> None:
        machine = _machine(interval=30.0)
        machine.on_timer_changed("5")
        rec = Recorder()
        machine.subscribe(rec)
        machine.on_count_down_start()
        assert rec.wait_for(Counting(5, 5))

        assert machine.on_count_down_start()
        assert machine.running
        assert rec.wait_until(lambda states: states.count(Counting(5, 5)) == 2)

        counting = [s for s in rec.states if isinstance(s, Counting)]
        assert counting == [Counting(5, 5), Counting(5, 5)]
        machine.shutdown()
        assert machine.wait(2.0)


class TestStartAgain:

    def test_end_to_set_timer_zero(self) -> None:
        machine = _machine()
        machine.on_timer_changed("1")
        machine.on_count_down_start()
        assert machine.wait(2.0)

        machine.on_start_again()

        assert machine.state == SetTimer(0)

    def test_cancels_unfinished_run(self) -> None:
        machine = _machine(interval=30.0)
        machine.on_timer_changed("10")
        rec = Recorder()
        machine.subscribe(rec)
        machine.on_count_down_start()
        assert rec.wait_for(Counting(10, 10))

        machine.on_start_again()
        assert machine.wait(2.0)

        assert not machine.running
        assert machine.state == SetTimer(0)
        assert rec.states[-1] == SetTimer(0)
        assert End() not in rec.states

    def test_from_set_timer(self) -> None:
        machine = _machine()
        machine.on_timer_changed("15")
        machine.on_start_again()
        assert machine.state == SetTimer(0)

    def test_runs_again_after_reset(self) -> None:
        machine = _machine()
        for n in ("2", "1"):
            machine.on_timer_changed(n)
            machine.on_count_down_start()
            assert machine.wait(2.0)
            assert machine.state == End()
            machine.on_start_again()
        assert machine.state == SetTimer(0)


class TestShutdownAndWait:

    def test_wait_without_run(self) -> None:
        assert _machine().wait(0.1) is True

    def test_wait_times_out_on_long_run(self) -> None:
        machine = _machine(interval=30.0)
        machine.on_timer_changed("3")
        machine.on_count_down_start()
        assert machine.wait(0.05) is False
        machine.shutdown()
        assert machine.wait(2.0) is True

    def test_shutdown_keeps_state(self) -> None:
        machine = _machine(interval=30.0)
        rec = Recorder()
        machine.subscribe(rec)
        machine.on_timer_changed("4")
        machine.on_count_down_start()
        assert rec.wait_for(Counting(4, 4))

        machine.shutdown()
        assert machine.wait(2.0)

        assert machine.state == Counting(4, 4)
        assert not machine.running

    def test_unsubscribe_stops_delivery(self) -> None:
        machine = _machine()
        rec = Recorder()
        machine.subscribe(rec)
        machine.unsubscribe(rec)
        machine.on_timer_changed("3")
        assert rec.states == [SetTimer(0)]
