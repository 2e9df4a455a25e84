"""Tests for the exception hierarchy."""

from __future__ import annotations

import pytest


class TestMOEADError:
    """Test base MOEADError class."""

    def test_basic_error(self):
        from moead.exceptions import MOEADError

        err = MOEADError("Something went wrong")
        assert "Something went wrong" in str(err)
        assert err.message == "Something went wrong"
        assert err.suggestion is None

    def test_error_with_suggestion(self):
        from moead.exceptions import MOEADError

        err = MOEADError("Something went wrong", suggestion="Try this instead")
        assert "Suggestion: Try this instead" in str(err)

    def test_error_with_details(self):
        from moead.exceptions import MOEADError

        err = MOEADError("Error", details={"key": "value"})
        assert err.details == {"key": "value"}


class TestConfigurationErrors:
    def test_neighbourhood_size_error(self):
        from moead.exceptions import ConfigurationError, NeighbourhoodSizeError

        err = NeighbourhoodSizeError(15, 10)
        assert isinstance(err, ConfigurationError)
        assert "15" in str(err) and "10" in str(err)
        assert err.details == {"neighbourhood_size": 15, "population_size": 10}

    def test_objective_count_error(self):
        from moead.exceptions import ObjectiveCountError

        err = ObjectiveCountError()
        assert "At least one objective" in str(err)
        assert err.suggestion is not None

    def test_bounds_error(self):
        from moead.exceptions import BoundsError

        err = BoundsError("bad bounds", n_var=3)
        assert err.details["n_var"] == 3
        assert "Suggestion:" in str(err)


class TestRuntimeErrors:
    def test_numeric_anomaly_error(self):
        from moead.exceptions import EvaluationError, NumericAnomalyError, OptimizationError

        err = NumericAnomalyError(2, float("inf"), solution=[0.1])
        assert isinstance(err, EvaluationError)
        assert isinstance(err, OptimizationError)
        assert err.objective_index == 2
        assert err.details["objective_index"] == 2
        assert err.details["solution"] == [0.1]
        assert "inf" in str(err)

    def test_run_state_error(self):
        from moead.exceptions import MOEADError, RunStateError

        err = RunStateError("change seed", "running")
        assert isinstance(err, MOEADError)
        assert "running" in str(err)

    def test_catch_all_with_base(self):
        from moead.exceptions import MOEADError, NeighbourhoodSizeError

        with pytest.raises(MOEADError):
            raise NeighbourhoodSizeError(3, 2)
