"""Tests for UNIX timestamp guesses."""

from datetime import datetime, timedelta, timezone

from ambiguess.guessing.models import GuessSource
from ambiguess.guessing.relative import GOODNESS_DISTANT, GOODNESS_MINUTE
from ambiguess.guessing.timestamps import EPOCH, RESOLUTIONS, guess_timestamp, timestamp_instant


class TestTimestampInstant:
    """Tests for reading an integer at each resolution."""

    def test_resolutions_differ_by_factors_of_1000(self):
        n = 1_000_000_000
        seconds, millis, micros, nanos = (timestamp_instant(n, to_delta) for _, to_delta in RESOLUTIONS)

        assert (seconds - EPOCH) / (millis - EPOCH) == 1000
        assert (millis - EPOCH) / (micros - EPOCH) == 1000
        assert (micros - EPOCH) / (nanos - EPOCH) == 1000

    def test_seconds(self):
        _, to_delta = RESOLUTIONS[0]
        assert timestamp_instant(1443346122, to_delta) == datetime(2015, 9, 27, 9, 28, 42, tzinfo=timezone.utc)

    def test_nanoseconds_truncate_to_microseconds(self):
        _, to_delta = RESOLUTIONS[3]
        assert timestamp_instant(1999, to_delta) == EPOCH + timedelta(microseconds=1)

    def test_out_of_range(self):
        _, to_delta = RESOLUTIONS[0]
        assert timestamp_instant(10 ** 12, to_delta) is None


class TestGuessTimestamp:
    """Tests for the timestamp guesser."""

    def test_seconds_guess_near_now(self, config, now):
        guesses = guess_timestamp(1443346122, config, now)

        assert [g.source for g in guesses] == [
            GuessSource.TIMESTAMP_SECONDS,
            GuessSource.TIMESTAMP_MILLISECONDS,
            GuessSource.TIMESTAMP_MICROSECONDS,
            GuessSource.TIMESTAMP_NANOSECONDS,
        ]
        seconds = guesses[0]
        assert seconds.rendering == "Timestamp 1443346122 is 2015-09-27 09:28:42 +0000 UTC"
        assert seconds.comment == "within the minute, 53 seconds ago"
        assert seconds.goodness == GOODNESS_MINUTE
        assert all(g.goodness <= GOODNESS_DISTANT for g in guesses[1:])

    def test_zone_table_is_attached_near_now(self, config, now):
        seconds = guess_timestamp(1443346122, config, now)[0]

        assert seconds.additional[0] == "In other time zones:"
        assert "2015-09-27 02:28:42 -0700 PDT (America/Los_Angeles)" in seconds.additional
        assert "2015-09-27 19:28:42 +1000 AEST (Australia/Sydney)" in seconds.additional
        assert seconds.additional[-1] == "UNIX timestamp: 1443346122"
        assert len(seconds.additional) == len(config.zones) + 2
        assert seconds.highlights == ()

    def test_distant_readings_have_no_attachments(self, config, now):
        millis = guess_timestamp(1443346122, config, now)[1]
        assert millis.rendering.startswith("Timestamp 1443346122 is 1970-01-17 ")
        assert millis.additional == ()

    def test_rendered_in_local_zone(self, make_config, now):
        config = make_config(local="America/Los_Angeles")
        seconds = guess_timestamp(1443346122, config, now)[0]
        assert seconds.rendering == "Timestamp 1443346122 is 2015-09-27 02:28:42 -0700 PDT"

    def test_non_positive(self, config, now):
        assert guess_timestamp(0, config, now) == []
        assert guess_timestamp(-5, config, now) == []

    def test_out_of_range_resolution_is_skipped(self, config, now):
        guesses = guess_timestamp(10 ** 12, config, now)
        assert [g.source for g in guesses] == [
            GuessSource.TIMESTAMP_MILLISECONDS,
            GuessSource.TIMESTAMP_MICROSECONDS,
            GuessSource.TIMESTAMP_NANOSECONDS,
        ]
