"""TimeSpan construction, decomposition, arithmetic and rendering tests."""

import pytest

from mstime import TimeSpan, TimeSpanComponents

SAMPLE_MILLISECONDS = [
    0,
    1,
    999,
    1_000,
    59_999,
    60_000,
    3_599_999,
    3_600_000,
    86_399_999,
    86_400_000,
    93_784_005,
    1_643_632_496_789,
    2**62,
    2**63 - 1,
]


class TestConstruction:
    def test_default_is_zero(self):
        assert TimeSpan().total_milliseconds == 0

    def test_of_components(self):
        assert TimeSpan.of(1, 2, 3, 4, 5).total_milliseconds == 93_784_005

    def test_of_keywords(self):
        assert TimeSpan.of(minutes=2, milliseconds=1) == TimeSpan(120_001)

    def test_from_components(self):
        components = TimeSpanComponents(days=1, hours=2, minutes=3, seconds=4, milliseconds=5)
        assert TimeSpan.from_components(components) == TimeSpan.of(1, 2, 3, 4, 5)

    def test_from_days(self):
        assert TimeSpan.from_days(2).total_milliseconds == 172_800_000

    def test_from_hours(self):
        assert TimeSpan.from_hours(3).total_milliseconds == 10_800_000

    def test_from_minutes(self):
        assert TimeSpan.from_minutes(4).total_milliseconds == 240_000

    def test_from_seconds(self):
        assert TimeSpan.from_seconds(5).total_milliseconds == 5_000

    def test_from_milliseconds(self):
        assert TimeSpan.from_milliseconds(6).total_milliseconds == 6

    def test_negative_factory(self):
        assert TimeSpan.from_days(-1).total_milliseconds == -86_400_000

    def test_out_of_range_components_fold(self):
        span = TimeSpan.of(hours=30)
        assert span.days == 1
        assert span.hours == 6

    def test_mixed_sign_components(self):
        span = TimeSpan.of(days=1, hours=-1)
        assert span.days == 0
        assert span.hours == 23

    def test_immutable(self):
        span = TimeSpan(5)
        with pytest.raises(AttributeError):
            span.total_milliseconds = 6


class TestComponents:
    def test_positive(self):
        assert TimeSpan.to_components(93_784_005) == TimeSpanComponents(1, 2, 3, 4, 5)

    def test_negative(self):
        assert TimeSpan.to_components(-93_784_005) == TimeSpanComponents(-1, -2, -3, -4, -5)

    def test_negative_minutes_do_not_borrow(self):
        assert TimeSpan.to_components(-90_000) == TimeSpanComponents(0, 0, -1, -30, 0)

    def test_zero(self):
        assert TimeSpan.to_components(0) == TimeSpanComponents()

    def test_components_property(self, sample_timespan):
        assert sample_timespan.components == TimeSpanComponents(1, 2, 3, 4, 5)

    def test_accessors(self, sample_timespan):
        assert sample_timespan.days == 1
        assert sample_timespan.hours == 2
        assert sample_timespan.minutes == 3
        assert sample_timespan.seconds == 4
        assert sample_timespan.milliseconds == 5

    def test_overflow_folding(self):
        span = TimeSpan.from_hours(25)
        assert span.days == 1
        assert span.hours == 1

    def test_components_within_natural_range(self):
        components = TimeSpan.to_components(86_399_999)
        assert components == TimeSpanComponents(0, 23, 59, 59, 999)

    @pytest.mark.parametrize("ms", SAMPLE_MILLISECONDS)
    def test_recompose(self, ms):
        assert TimeSpan.to_components(ms).total_milliseconds == ms
        assert TimeSpan.to_components(-ms).total_milliseconds == -ms

    @pytest.mark.parametrize("ms", [m for m in SAMPLE_MILLISECONDS if m != 0])
    def test_sign_symmetry(self, ms):
        positive = TimeSpan.to_components(ms)
        negative = TimeSpan.to_components(-ms)
        assert negative == TimeSpanComponents(
            -positive.days,
            -positive.hours,
            -positive.minutes,
            -positive.seconds,
            -positive.milliseconds,
        )


class TestTotals:
    def test_mixed_units(self):
        total = TimeSpan.from_days(1) + TimeSpan.from_hours(12) + TimeSpan.from_minutes(30)
        assert total.total_hours == 36
        assert total.total_minutes == 36 * 60 + 30

    def test_total_days_truncates(self):
        assert TimeSpan.of(days=1, hours=23).total_days == 1

    def test_total_seconds(self, sample_timespan):
        assert sample_timespan.total_seconds == 93_784

    def test_totals_truncate_toward_zero(self):
        assert TimeSpan.from_minutes(-90).total_hours == -1
        assert TimeSpan.from_milliseconds(-1_500).total_seconds == -1
        assert TimeSpan.from_hours(-47).total_days == -1

    def test_total_milliseconds(self, sample_timespan):
        assert sample_timespan.total_milliseconds == 93_784_005


class TestArithmetic:
    def test_add(self):
        assert TimeSpan.from_hours(1) + TimeSpan.from_minutes(30) == TimeSpan.from_minutes(90)

    def test_subtract(self):
        assert TimeSpan.from_hours(1) - TimeSpan.from_minutes(90) == TimeSpan.from_minutes(-30)

    def test_multiply(self):
        assert TimeSpan.from_minutes(20) * 3 == TimeSpan.from_hours(1)

    def test_multiply_reversed(self):
        assert 3 * TimeSpan.from_minutes(20) == TimeSpan.from_hours(1)

    def test_multiply_negative(self):
        assert TimeSpan.from_hours(2) * -1 == TimeSpan.from_hours(-2)

    def test_divide(self):
        assert TimeSpan.from_hours(1) / 4 == TimeSpan.from_minutes(15)

    def test_divide_truncates_toward_zero(self):
        assert TimeSpan(7) / 2 == TimeSpan(3)
        assert TimeSpan(-7) / 2 == TimeSpan(-3)
        assert TimeSpan(7) / -2 == TimeSpan(-3)

    def test_divide_by_zero(self):
        with pytest.raises(ZeroDivisionError):
            TimeSpan(7) / 0

    def test_multiply_by_float_unsupported(self):
        with pytest.raises(TypeError):
            TimeSpan(5) * 1.5

    def test_add_int_unsupported(self):
        with pytest.raises(TypeError):
            TimeSpan(5) + 5

    def test_negation(self):
        assert -TimeSpan.of(1, 2, 3, 4, 5) == TimeSpan.of(-1, -2, -3, -4, -5)

    def test_abs(self):
        assert abs(TimeSpan(-5)) == TimeSpan(5)
        assert +TimeSpan(-5) == TimeSpan(-5)

    def test_result_redecomposes(self):
        span = TimeSpan.from_minutes(59) + TimeSpan.from_minutes(2)
        assert span.hours == 1
        assert span.minutes == 1

    @pytest.mark.parametrize("a", [0, 1, -1, 93_784_005, -86_400_000])
    @pytest.mark.parametrize("b", [1, -1, 999, 3_600_000, -93_784_005])
    def test_add_then_subtract_is_identity(self, a, b):
        assert TimeSpan(a) + TimeSpan(b) - TimeSpan(b) == TimeSpan(a)


class TestComparison:
    def test_equality(self):
        assert TimeSpan.from_hours(24) == TimeSpan.from_days(1)
        assert TimeSpan.from_hours(1) != TimeSpan.from_hours(2)

    def test_ordering(self):
        assert TimeSpan.from_minutes(1) < TimeSpan.from_minutes(2)
        assert TimeSpan.from_minutes(2) > TimeSpan.from_minutes(1)
        assert TimeSpan.from_minutes(1) <= TimeSpan.from_minutes(1)
        assert TimeSpan.from_minutes(1) >= TimeSpan.from_minutes(1)
        assert TimeSpan(-1) < TimeSpan(0)

    @pytest.mark.parametrize("a", [-5, 0, 5])
    @pytest.mark.parametrize("b", [-5, 0, 5])
    def test_trichotomy(self, a, b):
        x, y = TimeSpan(a), TimeSpan(b)
        assert [x < y, x == y, x > y].count(True) == 1
        assert (x <= y) == (x < y or x == y)
        assert (x >= y) == (x > y or x == y)

    def test_hashable(self):
        assert len({TimeSpan.from_hours(24), TimeSpan.from_days(1)}) == 1

    def test_sorting(self):
        spans = [TimeSpan(3), TimeSpan(-1), TimeSpan(2)]
        assert sorted(spans) == [TimeSpan(-1), TimeSpan(2), TimeSpan(3)]


class TestToString:
    @pytest.mark.parametrize(
        "span, expected",
        [
            (TimeSpan.of(1, 2, 3, 4, 5), "1d 02:03:04.005"),
            (TimeSpan.of(0, 2, 3, 4, 5), "02:03:04.005"),
            (TimeSpan.of(1, 2, 3, 4, 0), "1d 02:03:04"),
            (TimeSpan.of(0, 2, 3, 4, 0), "02:03:04"),
            (TimeSpan(), "00:00:00"),
            (TimeSpan.from_milliseconds(500), "00:00:00.500"),
            (TimeSpan.from_days(400), "400d 00:00:00"),
            (TimeSpan.of(-1, -2, -3, -4, -5), "-1d -2:-3:-4.-05"),
        ],
    )
    def test_render(self, span, expected):
        assert span.to_string() == expected

    def test_str(self, sample_timespan):
        assert str(sample_timespan) == "1d 02:03:04.005"
