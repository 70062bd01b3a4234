"""Smoke tests for the textsim Python API surface."""

from __future__ import annotations

import pytest

import textsim
from textsim.config import INIT_INPUT_SIZE, TOP_K, SimilarityConfig
from textsim.distance import OSA, Workspace
from textsim.record import Record
from textsim.result import DistanceResult, normalized_score


# ---------------------------------------------------------------------------
# Meta
# ---------------------------------------------------------------------------
def test_version() -> None:
    assert isinstance(textsim.__version__, str)
    assert textsim.__version__ != ""


def test_constants() -> None:
    assert TOP_K == 3
    assert INIT_INPUT_SIZE == 64


# ---------------------------------------------------------------------------
# distance — OSA
# ---------------------------------------------------------------------------
class TestOSA:
    def test_distance_identical(self) -> None:
        assert OSA.distance("hello", "hello") == 0

    def test_distance_empty(self) -> None:
        assert OSA.distance("", "") == 0
        assert OSA.distance("", "abc") == 3
        assert OSA.distance("abc", "") == 3

    def test_adjacent_transposition(self) -> None:
        assert OSA.distance("ab", "ba") == 1

    def test_kitten_sitting(self) -> None:
        assert OSA.distance("kitten", "sitting") == 3

    def test_single_edits(self) -> None:
        assert OSA.distance("hello", "helllo") == 1
        assert OSA.distance("hello", "hllo") == 1
        assert OSA.distance("hello", "jello") == 1

    def test_restricted_transposition(self) -> None:
        # A swapped pair cannot be edited again: "ca" -> "abc" needs 3, not 2.
        assert OSA.distance("ca", "ac") == 1
        assert OSA.distance("ac", "abc") == 1
        assert OSA.distance("ca", "abc") == 3

    def test_bytes(self) -> None:
        assert OSA.distance(b"ab", b"ba") == 1

    def test_processor(self) -> None:
        assert OSA.distance("HELLO", "hello", processor=str.lower) == 0

    def test_score_cutoff(self) -> None:
        assert OSA.distance("kitten", "sitting", score_cutoff=3) == 3
        assert OSA.distance("kitten", "sitting", score_cutoff=1) == 2

    def test_normalized_distance(self) -> None:
        assert OSA.normalized_distance("ab", "ba") == 0.25
        assert OSA.normalized_distance("hello", "hello") == 0.0

    def test_normalized_distance_empty(self) -> None:
        assert OSA.normalized_distance("", "") == 0.0
        assert OSA.normalized_distance("", "ab") == 1.0

    def test_normalized_score_cutoff(self) -> None:
        assert OSA.normalized_distance("ab", "ba", score_cutoff=0.1) == 1.0
        assert OSA.normalized_distance("ab", "ba", score_cutoff=0.5) == 0.25


# ---------------------------------------------------------------------------
# distance — Workspace
# ---------------------------------------------------------------------------
class TestWorkspace:
    def test_grows_on_demand(self) -> None:
        ws = Workspace(4)
        assert OSA.distance("a" * 100, "b" * 100, workspace=ws) == 100
        rows, cols = ws.shape
        assert rows >= 102 and cols >= 102

    def test_reuse_gives_same_results(self) -> None:
        ws = Workspace(2)
        words = ["kitten", "sitting", "ab", "ba", "", "x", "abcdefgh"]
        for a in words:
            for b in words:
                assert OSA.distance(a, b, workspace=ws) == OSA.distance(a, b)

    def test_nested_acquire_raises(self) -> None:
        ws = Workspace()
        with ws.acquire(3, 3):
            with pytest.raises(RuntimeError):
                with ws.acquire(3, 3):
                    pass

    def test_released_after_error(self) -> None:
        ws = Workspace()
        with pytest.raises(KeyError):
            with ws.acquire(3, 3):
                raise KeyError("boom")
        with ws.acquire(3, 3) as tab:
            assert len(tab) >= 3

    def test_invalid_size(self) -> None:
        with pytest.raises(ValueError):
            Workspace(0)


# ---------------------------------------------------------------------------
# result
# ---------------------------------------------------------------------------
class TestDistanceResult:
    def test_between(self) -> None:
        r = DistanceResult.between(Record("care", 1), Record("cart", 2), 1)
        assert r.distance == 1
        assert r.score == 0.125

    def test_format(self) -> None:
        r = DistanceResult.between(Record("care", 1), Record("car", 3), 1)
        assert r.format() == "0.1429\t1\t1\t3\tcare\tcar"

    def test_format_integral_score(self) -> None:
        r = DistanceResult.between(Record("a", 1), Record("b", 2), 1)
        assert r.format() == "0.5\t1\t1\t2\ta\tb"

    def test_empty_strings_score_zero(self) -> None:
        assert normalized_score(0, 0, 0) == 0.0
        r = DistanceResult.between(Record("", 1), Record("", 2), 0)
        assert r.format() == "0\t0\t1\t2\t\t"

    def test_frozen(self) -> None:
        r = DistanceResult.between(Record("a", 1), Record("b", 2), 1)
        with pytest.raises(AttributeError):
            r.distance = 0  # type: ignore[misc]


# ---------------------------------------------------------------------------
# config
# ---------------------------------------------------------------------------
class TestConfig:
    def test_defaults(self) -> None:
        cfg = SimilarityConfig().validate()
        assert cfg.top_k == 3
        assert cfg.initial_size == 64
        assert cfg.encoding == "utf-8"

    @pytest.mark.parametrize("kwargs", [{"top_k": 0}, {"initial_size": 0}])
    def test_invalid(self, kwargs: dict[str, int]) -> None:
        with pytest.raises(ValueError):
            SimilarityConfig(**kwargs).validate()
