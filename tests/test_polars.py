"""Tests for the Polars export of pair results."""

import polars as pl
import pytest

import wordsim as ws
from wordsim.pipeline import PairRecord
from wordsim.polars_ext import PAIRS_SCHEMA

from tests.fixtures.real_data import PERSON_NAMES


class TestPairsToFrame:
    def test_columns_and_order(self):
        records = [PairRecord(0.9, 1, "a", 3, "b"), PairRecord(0.8, 1, "a", 2, "c")]
        df = ws.pairs_to_frame(records)
        assert df.columns == ["similarity", "idx_a", "token_a", "idx_b", "token_b"]
        assert df.rows() == [(0.9, 1, "a", 3, "b"), (0.8, 1, "a", 2, "c")]

    def test_empty_keeps_schema(self):
        df = ws.pairs_to_frame([])
        assert df.height == 0
        assert dict(df.schema) == PAIRS_SCHEMA

    def test_accepts_generator(self):
        df = ws.pairs_to_frame(PairRecord(1.0, i, "x", i + 1, "x") for i in range(1, 4))
        assert df["idx_a"].to_list() == [1, 2, 3]


class TestSimilarPairs:
    """Tests for similar_pairs on Series and lists."""

    def test_series(self):
        s = pl.Series("name", ["Jon Smith", "John Smith", "Jane Doe"])
        df = ws.similar_pairs(s, min_similarity=0.8)
        assert df.select(["idx_a", "token_a", "idx_b", "token_b"]).rows() == [
            (1, "jonsmith", 2, "johnsmith")
        ]

    def test_list_matches_pipeline(self):
        df = ws.similar_pairs(PERSON_NAMES, 0.6, workers=2)
        records = ws.find_similar_pairs(ws.normalize_lines(PERSON_NAMES), 0.6, workers=1)
        assert df.rows() == [tuple(r) for r in records]

    def test_sorted_descending(self):
        df = ws.similar_pairs(PERSON_NAMES, 0.5)
        scores = df["similarity"].to_list()
        assert scores == sorted(scores, reverse=True)

    def test_null_is_empty_line(self):
        s = pl.Series("name", ["a", None, "b"])
        with pytest.raises(ws.EmptyLineError):
            ws.similar_pairs(s)

    def test_too_few_values(self):
        with pytest.raises(ws.InvalidCountError):
            ws.similar_pairs(pl.Series("name", ["solo"]))

    def test_no_matches(self):
        df = ws.similar_pairs(["cat", "dog"])
        assert df.height == 0
        assert df.columns == list(PAIRS_SCHEMA)
