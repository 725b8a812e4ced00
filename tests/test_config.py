"""Tests for AssessmentSettings validation."""

from __future__ import annotations

import dataclasses

import pytest

from legal_risk_engine.config import DEFAULT_SETTINGS, AssessmentSettings


class TestAssessmentSettings:
    """Tests for AssessmentSettings defaults and validation."""

    def test_defaults(self):
        assert DEFAULT_SETTINGS.similarity_threshold == 0.8
        assert DEFAULT_SETTINGS.max_recommendations == 8
        assert DEFAULT_SETTINGS.max_risk_recommendations == 3
        assert DEFAULT_SETTINGS.complex_clause_length == 1000

    def test_frozen(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            DEFAULT_SETTINGS.max_recommendations = 2

    @pytest.mark.parametrize("threshold", [-0.1, 1.5])
    def test_rejects_out_of_range_threshold(self, threshold):
        with pytest.raises(ValueError, match="similarity_threshold"):
            AssessmentSettings(similarity_threshold=threshold)

    def test_rejects_negative_sizes(self):
        with pytest.raises(ValueError, match="context_window"):
            AssessmentSettings(context_window=-1)

    def test_accepts_boundaries(self):
        settings = AssessmentSettings(similarity_threshold=1.0, max_recommendations=0)
        assert settings.max_recommendations == 0
