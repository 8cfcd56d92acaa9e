"""Tests for discipline equivalence classes."""

import pytest

from training_planner.adherence.equivalence import (
    equivalence_class,
    is_run_tag,
    is_same_type,
    is_strength_tag,
    normalize_tag,
    session_class,
)
from training_planner.models.enums import SessionType, Weekday
from training_planner.models.session import Session


def _session(session_type: SessionType, subtype: str) -> Session:
    return Session(
        day=Weekday.TUESDAY,
        session_type=session_type,
        subtype=subtype,
        title=subtype,
        description="",
    )


class TestEquivalenceClass:
    @pytest.mark.parametrize("tag", ["easy", "Easy Run", "recovery-run", "recovery"])
    def test_easy_family(self, tag: str) -> None:
        assert equivalence_class(tag) == "easy_run"

    @pytest.mark.parametrize("tag", ["hyrox", "CrossFit", "metcon", "weights", "gym"])
    def test_hybrid_strength_family(self, tag: str) -> None:
        assert equivalence_class(tag) == "hybrid_strength"

    def test_unknown_tag_is_its_own_class(self) -> None:
        assert equivalence_class("Cycling") == "cycling"

    def test_normalize(self) -> None:
        assert normalize_tag("  Long-Run ") == "long_run"


class TestIsSameType:
    def test_threshold_matches_tempo(self) -> None:
        assert is_same_type("tempo", _session(SessionType.RUN, "threshold"))

    def test_interval_subtypes(self) -> None:
        assert is_same_type("intervals", _session(SessionType.RUN, "vo2max"))
        assert is_same_type("interval", _session(SessionType.RUN, "intervals_aerobic"))

    def test_long_run_is_not_easy(self) -> None:
        assert not is_same_type("easy_run", _session(SessionType.RUN, "long_run"))

    def test_generic_run(self) -> None:
        assert is_same_type("running", _session(SessionType.RUN, "long_run"))
        assert not is_same_type("run", _session(SessionType.HYROX, "metcon"))

    def test_rest_session_class(self) -> None:
        session = _session(SessionType.REST, "active_recovery")
        assert session_class(session) == "rest"
        assert is_same_type("walk", session)

    def test_strength_tag(self) -> None:
        assert is_strength_tag("Strength")
        assert not is_strength_tag("easy_run")

    @pytest.mark.parametrize("tag", ["run", "Running", "long_run", "threshold", "vo2max"])
    def test_run_tags(self, tag: str) -> None:
        assert is_run_tag(tag)

    @pytest.mark.parametrize("tag", ["walk", "hiking", "cycling", "metcon", "yoga"])
    def test_non_run_tags(self, tag: str) -> None:
        assert not is_run_tag(tag)
