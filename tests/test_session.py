# -*- coding: utf-8 -*-
"""
Unit tests for DecisionSession.

Covers:
  - default session built from configuration
  - add_alternative / add_criterion / set_rating / set_weight
  - posture and display mode selection
  - rating frames and term chart data
"""

import numpy as np
import pandas as pd
import pytest

from config import Config, DecisionPosture, DisplayMode, RatingPolicy
from mcdm.exceptions import DegenerateInputError, ValidationError
from mcdm.fuzzy import LinguisticTermRegistry, TriangularFuzzyNumber
from session import DecisionSession
from weighting import CriteriaWeights


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture()
def small_session():
    """Two criteria, Low/High terms, no alternatives yet."""
    registry = LinguisticTermRegistry({"Low": (0, 1, 2), "High": (4, 5, 6)})
    return DecisionSession(registry=registry, criteria=["Price", "Camera"])


@pytest.fixture()
def default_session():
    return DecisionSession.from_config(Config())


# ---------------------------------------------------------------------------
# TestFromConfig
# ---------------------------------------------------------------------------

class TestFromConfig:
    def test_default_shape(self, default_session):
        assert len(default_session.alternatives) == 5
        assert len(default_session.criteria) == 8
        assert len(default_session.registry) == 5
        assert default_session.alternatives[0] == "iPhone 17"

    def test_equal_weights(self, default_session):
        w = default_session.normalized_weights()
        assert np.allclose(list(w.values()), 1 / 8)

    def test_first_term_ratings(self, default_session):
        df = default_session.ratings_frame()
        assert (df.values == "Very low").all()

    def test_all_tied_keeps_insertion_order(self, default_session):
        result = default_session.ranking()
        assert result.order == default_session.alternatives

    def test_posture_from_config(self):
        config = Config()
        config.ranking.posture = DecisionPosture.OPTIMISTIC
        config.ranking.display_mode = DisplayMode.INTERVAL
        session = DecisionSession.from_config(config)
        assert session.posture is DecisionPosture.OPTIMISTIC
        assert session.display_mode is DisplayMode.INTERVAL

    def test_random_policy_is_seeded(self):
        config = Config()
        config.rating.policy = RatingPolicy.RANDOM
        config.random.seed = 7
        first = DecisionSession.from_config(config).ratings_frame()
        second = DecisionSession.from_config(config).ratings_frame()
        pd.testing.assert_frame_equal(first, second)
        terms = set(config.defaults.linguistic_terms)
        assert set(first.values.ravel()) <= terms


# ---------------------------------------------------------------------------
# TestAlternatives
# ---------------------------------------------------------------------------

class TestAlternatives:
    def test_default_row_uses_first_term(self, small_session):
        small_session.add_alternative("Phone A")
        assert small_session.ratings_row("Phone A") == ["Low", "Low"]

    def test_explicit_row(self, small_session):
        small_session.add_alternative("Phone A", ["High", "Low"])
        assert small_session.rating("Phone A", "Price") == "High"
        assert small_session.rating(0, 1) == "Low"

    @pytest.mark.parametrize("name", ["", "  ", None])
    def test_blank_name(self, small_session, name):
        with pytest.raises(ValidationError):
            small_session.add_alternative(name)
        assert small_session.alternatives == []

    def test_duplicate_name(self, small_session):
        small_session.add_alternative("Phone A")
        with pytest.raises(ValidationError):
            small_session.add_alternative("Phone A", ["High", "High"])
        assert small_session.ratings_row("Phone A") == ["Low", "Low"]

    def test_explicit_row_wrong_length(self, small_session):
        with pytest.raises(ValidationError):
            small_session.add_alternative("Phone A", ["High"])
        assert small_session.alternatives == []

    def test_explicit_row_unknown_term(self, small_session):
        with pytest.raises(ValidationError):
            small_session.add_alternative("Phone A", ["High", "Medium"])
        assert small_session.alternatives == []

    def test_no_terms_to_rate_with(self):
        session = DecisionSession(criteria=["Price"])
        with pytest.raises(ValidationError):
            session.add_alternative("Phone A")

    def test_no_criteria_gives_empty_row(self):
        session = DecisionSession(registry=LinguisticTermRegistry({"Low": (0, 1, 2)}))
        session.add_alternative("Phone A")
        assert session.ratings_row("Phone A") == []

    def test_exposed_state_is_a_copy(self, small_session):
        small_session.add_alternative("A")
        small_session.weights.add_criterion("Battery")
        small_session.registry.insert("Medium", (2, 3, 4))
        assert small_session.criteria == ["Price", "Camera"]
        assert "Medium" not in small_session.registry
        assert small_session.ranking().order == ["A"]

    def test_caller_objects_not_shared(self):
        registry = LinguisticTermRegistry({"Low": (0, 1, 2)})
        weights = CriteriaWeights(["Price"])
        session = DecisionSession(registry=registry, weights=weights)
        session.add_alternative("A")
        weights.add_criterion("Camera")
        registry.insert("High", (4, 5, 6))
        assert session.criteria == ["Price"]
        assert session.registry.list_names() == ["Low"]
        assert session.ranking().order == ["A"]

    def test_insertion_order(self, small_session):
        for name in ["Zeta", "Alpha", "Mid"]:
            small_session.add_alternative(name)
        assert small_session.alternatives == ["Zeta", "Alpha", "Mid"]


# ---------------------------------------------------------------------------
# TestCriteria
# ---------------------------------------------------------------------------

class TestCriteria:
    def test_add_criterion_extends_every_row(self, small_session):
        small_session.add_alternative("A", ["High", "High"])
        small_session.add_alternative("B", ["High", "Low"])
        small_session.add_criterion("Battery")
        assert small_session.criteria == ["Price", "Camera", "Battery"]
        assert small_session.ratings_row("A") == ["High", "High", "Low"]
        assert small_session.ratings_row("B") == ["High", "Low", "Low"]

    def test_add_criterion_weight(self, small_session):
        small_session.add_criterion("Battery", 1.0)
        w = small_session.normalized_weights()
        assert abs(sum(w.values()) - 1.0) < 1e-9
        assert abs(w["Battery"] - 0.5) < 1e-12

    def test_duplicate_criterion_leaves_rows_alone(self, small_session):
        small_session.add_alternative("A")
        with pytest.raises(ValidationError):
            small_session.add_criterion("Price")
        assert small_session.ratings_row("A") == ["Low", "Low"]

    def test_rejected_criterion_keeps_random_sequence(self):
        """A failed add_criterion must not consume random draws."""
        def make():
            session = DecisionSession(registry=LinguisticTermRegistry.from_scale(),
                                      criteria=["Price", "Camera"],
                                      rating_policy=RatingPolicy.RANDOM, seed=5)
            for name in ["A", "B", "C"]:
                session.add_alternative(name)
            return session

        clean, rejected = make(), make()
        for name, weight in [("Price", 0.0), ("  ", 0.0), ("Battery", -1.0)]:
            with pytest.raises(ValidationError):
                rejected.add_criterion(name, weight)
        assert rejected.criteria == ["Price", "Camera"]

        for session in (clean, rejected):
            for name in ["D", "E", "F", "G"]:
                session.add_alternative(name)
        pd.testing.assert_frame_equal(clean.ratings_frame(), rejected.ratings_frame())

    def test_set_weight_returns_normalized(self, small_session):
        w = small_session.set_weight("Price", 3.0)
        assert abs(w["Price"] - 6 / 7) < 1e-12
        assert abs(w["Camera"] - 1 / 7) < 1e-12

    def test_set_weight_invalid(self, small_session):
        before = small_session.normalized_weights()
        with pytest.raises(ValidationError):
            small_session.set_weight("Price", -1)
        assert small_session.normalized_weights() == before


# ---------------------------------------------------------------------------
# TestRatings
# ---------------------------------------------------------------------------

class TestRatings:
    def test_set_rating(self, small_session):
        small_session.add_alternative("A")
        small_session.set_rating("A", "Camera", "High")
        assert small_session.ratings_row("A") == ["Low", "High"]

    def test_set_rating_unknown_term(self, small_session):
        small_session.add_alternative("A")
        with pytest.raises(ValidationError):
            small_session.set_rating("A", "Camera", "Medium")
        assert small_session.rating("A", "Camera") == "Low"

    def test_set_rating_unknown_alternative(self, small_session):
        with pytest.raises(ValidationError):
            small_session.set_rating("Ghost", "Camera", "High")
        with pytest.raises(ValidationError):
            small_session.set_rating(3, "Camera", "High")

    def test_added_term_can_be_selected(self, small_session):
        small_session.add_alternative("A")
        small_session.add_term("Medium", 2, 3, 4)
        small_session.set_rating("A", "Price", "Medium")
        assert small_session.rating("A", "Price") == "Medium"


# ---------------------------------------------------------------------------
# TestResults
# ---------------------------------------------------------------------------

class TestResults:
    def test_two_criteria_scenario(self, small_session):
        small_session.add_alternative("A", ["Low", "High"])
        agg = small_session.aggregated()["A"]
        assert agg.as_tuple() == (2.0, 3.0, 4.0)

    def test_ranking_follows_posture(self, small_session):
        small_session.add_term("Wide", 0, 3, 9)
        small_session.add_term("Exact", 3, 3, 3)
        small_session.add_alternative("Risky", ["Wide", "Wide"])
        small_session.add_alternative("Safe", ["Exact", "Exact"])
        small_session.set_posture("pessimistic")
        assert small_session.ranking().order == ["Safe", "Risky"]
        small_session.set_posture(DecisionPosture.OPTIMISTIC)
        assert small_session.ranking().order == ["Risky", "Safe"]
        assert small_session.ranking("pessimistic").order == ["Safe", "Risky"]

    def test_invalid_posture(self, small_session):
        with pytest.raises(ValidationError):
            small_session.set_posture("bold")
        assert small_session.posture is DecisionPosture.NEUTRAL

    def test_display_mode(self, small_session):
        t = TriangularFuzzyNumber(0, 1, 2)
        small_session.set_display_mode("trapezoid")
        assert small_session.display(t) == (0.0, 1.0, 1.0, 2.0)
        small_session.set_display_mode(DisplayMode.INTERVAL)
        assert small_session.display(t) == (0.0, 2.0)

    def test_display_mode_keeps_ranking(self, small_session):
        small_session.add_alternative("A", ["Low", "High"])
        small_session.add_alternative("B", ["High", "High"])
        before = small_session.ranking().order
        small_session.set_display_mode("interval")
        assert small_session.ranking().order == before

    def test_rating_display_frame(self, small_session):
        small_session.add_alternative("A", ["Low", "High"])
        small_session.set_display_mode("interval")
        df = small_session.rating_display_frame(precision=1)
        assert df.loc["A", "Price"] == "[0.0, 2.0]"
        assert df.loc["A", "Camera"] == "[4.0, 6.0]"

    def test_ratings_frame_labels(self, small_session):
        small_session.add_alternative("A")
        df = small_session.ratings_frame()
        assert df.index.name == "Alternative"
        assert list(df.columns) == ["Price", "Camera"]

    def test_term_chart_data(self, small_session):
        data = small_session.term_chart_data()
        assert list(data) == ["Low", "High"]
        assert data["High"] == [(4.0, 0.0), (5.0, 1.0), (6.0, 0.0)]

    def test_normalize_terms_changes_scale_not_order(self, small_session):
        small_session.add_alternative("A", ["Low", "Low"])
        small_session.add_alternative("B", ["High", "High"])
        small_session.normalize_terms()
        assert small_session.registry.get("High").c == 1.0
        assert small_session.ranking().order == ["B", "A"]

    def test_normalize_degenerate_terms(self):
        session = DecisionSession(registry=LinguisticTermRegistry({"X": (5, 5, 5)}))
        with pytest.raises(DegenerateInputError):
            session.normalize_terms()
        assert session.registry.get("X").as_tuple() == (5.0, 5.0, 5.0)
