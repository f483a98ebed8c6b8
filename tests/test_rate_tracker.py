from netrate_live.stats import RateTracker


def run_ticks(tracker, count, length=100, start=0.0, step=2.0):
    for i in range(count):
        tracker.tick(length, start + i * step)


def test_first_tick_initialises_and_accumulates():
    rt = RateTracker()
    rt.tick(100, 1000.0)
    st = rt.state
    assert st.last_tick == 1000.0
    assert st.tick_count == 0
    assert (st.short_bytes, st.medium_bytes, st.long_bytes) == (100, 100, 100)


def test_samples_inside_a_period_go_to_every_window():
    rt = RateTracker()
    for ts in (0.0, 0.5, 1.0, 1.9):
        rt.tick(50, ts)
    st = rt.state
    assert (st.short_bytes, st.medium_bytes, st.long_bytes) == (200, 200, 200)
    assert rt.rates() == (100.0, 20.0, 5.0)


def test_boundary_resets_short_after_adding_sample():
    rt = RateTracker()
    rt.tick(100, 0.0)
    rt.tick(300, 2.0)
    st = rt.state
    assert st.short_bytes == 0
    assert st.medium_bytes == 400
    assert st.long_bytes == 400
    assert st.tick_count == 1
    assert st.last_tick == 2.0


def test_medium_resets_on_every_tick_once_count_reaches_five():
    rt = RateTracker()
    rt.tick(100, 0.0)
    for k in range(1, 5):
        rt.tick(100, 2.0 * k)
        assert rt.state.medium_bytes == 100 * (k + 1)
    for k in range(5, 20):
        rt.tick(100, 2.0 * k)
        assert rt.state.tick_count == k
        assert rt.state.medium_bytes == 0


def test_long_resets_and_counter_wraps_at_twenty():
    rt = RateTracker()
    run_ticks(rt, 20)          # t = 0 .. 38, tick_count 19
    assert rt.state.tick_count == 19
    assert rt.state.long_bytes == 2000
    rt.tick(100, 40.0)
    assert rt.state.tick_count == 0
    assert rt.state.long_bytes == 0
    assert rt.state.medium_bytes == 0
    rt.tick(100, 42.0)
    assert rt.state.tick_count == 1
    assert rt.state.medium_bytes == 100
    assert rt.state.long_bytes == 100


def test_large_gap_counts_as_one_tick():
    rt = RateTracker()
    rt.tick(10, 0.0)
    rt.tick(10, 100.0)
    assert rt.state.tick_count == 1
    assert rt.state.last_tick == 100.0


def test_rates_use_nominal_window_lengths():
    rt = RateTracker()
    rt.tick(4000, 0.0)
    assert rt.rates() == (2000.0, 400.0, 100.0)
