"""Unit tests for the adoption ramp and timeline projector."""

import math

import pandas as pd
import pytest

pytestmark = [pytest.mark.fast, pytest.mark.roi]

from orgintel_roi.config.schemas import RoiModelConfig
from orgintel_roi.engine import (
    build_investment_curve,
    build_months,
    build_timeline,
    compute_value_streams,
    find_break_even_month,
    phase_for_month,
    ramp_factor,
    stream_ramp_factor,
    timeline_to_frame,
)
from orgintel_roi.models import Scenario, TransformationInvestment, ValueStream, ValueStreams


@pytest.fixture
def streams(baseline, spend_profile, ops_profile, pain_profile, assumptions):
    return compute_value_streams(baseline, spend_profile, ops_profile, pain_profile, assumptions)


class TestRampFactor:
    """Tests for the piecewise adoption ramp."""

    @pytest.mark.parametrize(
        "month,expected",
        [(0, 0.0), (-3, 0.0), (7, 0.3), (12, 0.7), (18, 0.9), (36, 1.0), (48, 1.0)],
    )
    def test_breakpoints(self, month, expected):
        assert ramp_factor(month) == pytest.approx(expected)

    def test_interpolates_within_phase(self):
        assert ramp_factor(3.5) == pytest.approx(0.15)
        assert ramp_factor(9.5) == pytest.approx(0.5)
        assert ramp_factor(27) == pytest.approx(0.95)

    def test_non_decreasing(self):
        months = [m / 4 for m in range(0, 40 * 4)]
        values = [ramp_factor(m) for m in months]
        assert all(later >= earlier for earlier, later in zip(values, values[1:]))

    def test_continuous_at_phase_boundaries(self):
        for boundary in (7, 12, 18, 36):
            assert ramp_factor(boundary - 1e-9) == pytest.approx(ramp_factor(boundary + 1e-9), abs=1e-6)

    def test_bounded(self):
        assert all(0.0 <= ramp_factor(m) <= 1.0 for m in range(-5, 50))

    def test_nan_month_propagates(self):
        assert math.isnan(ramp_factor(float("nan")))
        assert math.isnan(ramp_factor(float("nan"), horizon=24))
        assert math.isnan(stream_ramp_factor(float("nan"), ValueStream.CYCLE_TIME, 28))

    def test_breakpoints_scale_with_horizon(self):
        assert ramp_factor(6, horizon=18) == pytest.approx(ramp_factor(12))
        assert ramp_factor(18, horizon=18) == 1.0


class TestStreamRampFactor:
    """Tests for per-stream logistic adoption."""

    def test_zero_before_stream_starts(self):
        # 12 weeks / 4.33 + 2 change-management + 4 lag months ~= 8.8 months
        assert stream_ramp_factor(8, ValueStream.TOOLING_OPTIMIZATION, 28) == 0.0

    def test_capped_at_18_month_ceiling(self):
        assert stream_ramp_factor(18, ValueStream.TOOLING_OPTIMIZATION, 28) <= 0.75
        assert stream_ramp_factor(18, ValueStream.TIME_SAVINGS, 28) <= 0.50

    def test_non_decreasing_within_bounds(self):
        values = [stream_ramp_factor(m, ValueStream.CONTENT_VELOCITY, 28) for m in range(0, 37)]
        assert all(later >= earlier for earlier, later in zip(values, values[1:]))
        assert all(0.0 <= v <= 0.95 for v in values)

    def test_longer_build_delays_start(self):
        short = stream_ramp_factor(10, ValueStream.ROAS_IMPROVEMENT, 14)
        long = stream_ramp_factor(10, ValueStream.ROAS_IMPROVEMENT, 56)
        assert short > long


class TestInvestmentCurve:
    """Tests for the cumulative investment curve."""

    def test_build_months(self):
        assert build_months(28) == 7
        assert build_months(0) == 1
        assert build_months(4) == 1

    def test_flat_burn_capped_at_total(self, investment):
        curve = build_investment_curve(investment)

        assert len(curve) == 37
        assert curve[0] == 0.0
        assert curve[1] == pytest.approx(20_000_000 / 7)
        assert curve[7] == pytest.approx(20_000_000)
        assert max(curve) <= 20_000_000
        assert curve[36] == curve[7]

    def test_opex_accrues_after_build(self, investment):
        settings = RoiModelConfig(ongoing_opex_pct=20)

        curve = build_investment_curve(investment, settings)

        monthly_opex = 20_000_000 * 0.20 / 12
        assert curve[7] == pytest.approx(20_000_000)
        assert curve[8] == pytest.approx(20_000_000 + monthly_opex)
        assert curve[36] == pytest.approx(20_000_000 + 29 * monthly_opex)


class TestPhaseForMonth:
    """Tests for phase labels."""

    def test_build_subphases(self):
        labels = [phase_for_month(m, 28) for m in range(0, 8)]

        assert labels == [
            "Discovery",
            "Discovery",
            "Ontology",
            "KG Population",
            "KG Population",
            "Digital Twin",
            "Validation",
            "Validation",
        ]

    def test_build_subphases_one_month_each(self):
        # 20 weeks is 5 build months, one per sub-phase
        assert [phase_for_month(m, 20) for m in range(1, 6)] == [
            "Discovery",
            "Ontology",
            "KG Population",
            "Digital Twin",
            "Validation",
        ]

    def test_short_build_ends_in_validation(self):
        assert phase_for_month(1, 2) == "Validation"

    def test_post_build_phases(self):
        assert phase_for_month(8, 28) == "Supervised Launch"
        assert phase_for_month(12, 28) == "Supervised Launch"
        assert phase_for_month(13, 28) == "Graduated Autonomy"
        assert phase_for_month(17, 28) == "Graduated Autonomy"
        assert phase_for_month(18, 28) == "Operational Maturity"


class TestBuildTimeline:
    """Tests for the month-by-month projection."""

    def test_months_zero_to_horizon(self, streams, investment):
        timeline = build_timeline(streams, investment)

        assert [p.month for p in timeline] == list(range(37))
        assert timeline[0].value_expected == 0.0

    def test_cumulative_series_non_decreasing(self, streams, investment):
        timeline = build_timeline(streams, investment)

        for scenario in Scenario:
            series = [p.value_for(scenario) for p in timeline]
            assert all(later >= earlier for earlier, later in zip(series, series[1:]))
        investments = [p.investment_cumulative for p in timeline]
        assert all(later >= earlier for earlier, later in zip(investments, investments[1:]))

    def test_scenarios_scale_expected_series(self, streams, investment):
        timeline = build_timeline(streams, investment)

        final = timeline[-1]
        assert final.value_conservative == pytest.approx(final.value_expected * 0.6)
        assert final.value_aggressive == pytest.approx(final.value_expected * 1.4)

    def test_maturity_multipliers_lift_later_years(self, streams, investment):
        timeline = build_timeline(streams, investment)
        monthly = streams.total / 12

        month_24 = timeline[24].value_expected - timeline[23].value_expected
        assert month_24 == pytest.approx(monthly * ramp_factor(24) * 1.05)
        month_30 = timeline[30].value_expected - timeline[29].value_expected
        assert month_30 == pytest.approx(monthly * ramp_factor(30) * 1.10)

    def test_three_year_value_for_reference_organization(self, streams, investment):
        timeline = build_timeline(streams, investment)

        # Ramp-weighted months: 3.9 (year 1) + 10.4167 * 1.05 + 11.6333 * 1.10
        assert timeline[-1].value_expected == pytest.approx(streams.total / 12 * 27.634167, rel=1e-5)

    def test_per_stream_ramp_model(self, streams, investment):
        settings = RoiModelConfig(ramp_model="per_stream")

        timeline = build_timeline(streams, investment, settings)

        uniform = build_timeline(streams, investment)
        assert 0 < timeline[-1].value_expected < uniform[-1].value_expected
        assert timeline[6].value_expected == 0.0

    def test_zero_value_timeline(self, investment):
        timeline = build_timeline(ValueStreams(), investment)

        assert all(p.value_expected == 0.0 for p in timeline)


class TestBreakEven:
    """Tests for breakeven month detection."""

    def test_reference_breakeven_within_horizon(self, streams, investment):
        timeline = build_timeline(streams, investment)

        month = find_break_even_month(timeline)

        assert 7 < month < 36
        assert timeline[month].value_expected >= timeline[month].investment_cumulative
        assert timeline[month - 1].value_expected < timeline[month - 1].investment_cumulative

    def test_saturates_at_horizon(self, streams):
        investment = TransformationInvestment(total_investment_amount=1e12, implementation_weeks=28)

        timeline = build_timeline(streams, investment)

        assert find_break_even_month(timeline) == 36

    def test_aggressive_breaks_even_no_later_than_conservative(self, streams, investment):
        timeline = build_timeline(streams, investment)

        aggressive = find_break_even_month(timeline, Scenario.AGGRESSIVE)
        conservative = find_break_even_month(timeline, Scenario.CONSERVATIVE)
        assert aggressive <= find_break_even_month(timeline) <= conservative


class TestTimelineToFrame:
    """Tests for the DataFrame view."""

    def test_frame_columns_and_index(self, streams, investment):
        frame = timeline_to_frame(build_timeline(streams, investment))

        assert isinstance(frame, pd.DataFrame)
        assert frame.index.name == "month"
        assert len(frame) == 37
        assert {"investment_cumulative", "value_expected", "phase", "net_expected"} <= set(frame.columns)
        assert frame.loc[36, "net_expected"] == pytest.approx(
            frame.loc[36, "value_expected"] - frame.loc[36, "investment_cumulative"]
        )
