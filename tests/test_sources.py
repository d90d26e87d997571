"""
Playback Source Unit Tests
"""

import asyncio

import pytest

from app.tracking.session import WatchSession
from app.tracking.sources import MediaElementSource, SimulatedClockSource
from app.tracking.throttle import SyncThrottle


class TestMediaElementSource:

    @pytest.mark.asyncio
    async def test_forwards_media_events(self, sink):
        session = WatchSession(video_id=2, sink=sink)
        source = MediaElementSource(session)

        source.on_loaded_metadata(120)
        source.on_time_update(12, now=0)
        report = source.on_ended(now=1)
        await session.drain()

        assert session.duration == 120
        assert report.watched_duration == 120
        assert report.completed is True
        assert len(sink.reports) == 2

    @pytest.mark.asyncio
    async def test_stop_closes_session(self, sink):
        session = WatchSession(video_id=2, sink=sink, duration=60)
        source = MediaElementSource(session)

        source.stop()

        assert source.on_time_update(5, now=0) is None
        assert source.on_mark_complete(now=1) is None


class TestSimulatedClockSource:

    @pytest.fixture
    def fast_sleep(self, fake_clock):
        async def _sleep(seconds: float) -> None:
            fake_clock.advance(seconds)
            await asyncio.sleep(0)
        return _sleep

    @pytest.mark.asyncio
    async def test_plays_to_the_end(self, sink, fake_clock, fast_sleep):
        session = WatchSession(
            video_id=9,
            sink=sink,
            duration=40,
            throttle=SyncThrottle(interval=15, clock=fake_clock),
        )
        source = SimulatedClockSource(session, sleep=fast_sleep)

        source.play()
        await source.wait()
        await session.drain()

        assert source.position == 40
        assert source.is_playing is False
        assert session.completed is True
        # First tick, two throttle windows, then the forced end sync
        assert len(sink.reports) == 4
        watched = [r.watched_duration for r in sink.reports]
        assert watched == sorted(watched)
        assert sink.reports[-1].watched_duration == 40

    @pytest.mark.asyncio
    async def test_resumes_from_start_position(self, sink, fake_clock, fast_sleep):
        session = WatchSession(
            video_id=9,
            sink=sink,
            duration=40,
            watched_duration=20,
            throttle=SyncThrottle(interval=15, clock=fake_clock),
        )
        source = SimulatedClockSource(session, start_at=20, sleep=fast_sleep)

        source.play()
        await source.wait()
        await session.drain()

        assert [r.watched_duration for r in sink.reports] == [30, 40, 40]

    @pytest.mark.asyncio
    async def test_stop_cancels_clock(self, sink):
        never_wakes = asyncio.Event()

        async def _sleep(seconds: float) -> None:
            await never_wakes.wait()

        session = WatchSession(video_id=9, sink=sink, duration=40)
        source = SimulatedClockSource(session, sleep=_sleep)

        source.play()
        await asyncio.sleep(0)
        source.stop()
        await source.wait()

        assert session.closed is True
        assert sink.reports == []

    @pytest.mark.asyncio
    async def test_cancelling_waiter_leaves_clock_running(self, sink):
        never_wakes = asyncio.Event()

        async def _sleep(seconds: float) -> None:
            await never_wakes.wait()

        session = WatchSession(video_id=9, sink=sink, duration=40)
        source = SimulatedClockSource(session, sleep=_sleep)

        source.play()
        waiter = asyncio.get_running_loop().create_task(source.wait())
        await asyncio.sleep(0)
        waiter.cancel()

        with pytest.raises(asyncio.CancelledError):
            await waiter
        assert source._task.done() is False

        source.stop()
        await source.wait()
        assert source._task.cancelled() is True

    def test_seek_is_clamped(self, sink):
        session = WatchSession(video_id=9, sink=sink, duration=40)
        source = SimulatedClockSource(session)

        source.seek(55)
        assert source.position == 40
        source.seek(-3)
        assert source.position == 0
