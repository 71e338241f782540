"""Tests for the questionnaire scoring engine."""

import itertools

import pytest

from app.core.errors import InvalidAnswerError, MissingAnswerError, OutOfRangeError
from app.core.scoring import (
    GENERAL_RECOMMENDATIONS,
    MARKET_COPY,
    PRODUCT_COPY,
    QUESTION_IDS,
    TEAM_COPY,
    compute_scores,
    overall_from_subscores,
    parse_answer,
    round_half_up,
)


def answers(**overrides):
    base = {question_id: 3 for question_id in QUESTION_IDS}
    base.update(overrides)
    return base


BEST = answers(
    market_potential=5,
    competition_intensity=1,
    product_differentiation=5,
    scalability_potential=5,
    team_experience=5,
)

WORST = answers(
    market_potential=1,
    competition_intensity=5,
    product_differentiation=1,
    scalability_potential=1,
    team_experience=1,
)


class TestScenarios:
    def test_all_best_answers(self):
        card = compute_scores(BEST)

        assert card.market_score == 90
        assert card.product_score == 100
        assert card.financial_score == 100
        assert card.overall_score == 97
        assert card.strengths == [MARKET_COPY[0], PRODUCT_COPY[0], TEAM_COPY[0]]
        assert card.weaknesses == []
        assert card.recommendations == list(GENERAL_RECOMMENDATIONS)

    def test_all_middle_answers(self):
        card = compute_scores(answers())

        assert card.market_score == 50
        assert card.product_score == 60
        assert card.financial_score == 60
        assert card.overall_score == 57
        assert card.strengths == []
        assert card.weaknesses == [MARKET_COPY[1], PRODUCT_COPY[1], TEAM_COPY[1]]
        assert card.recommendations == [
            MARKET_COPY[2],
            PRODUCT_COPY[2],
            TEAM_COPY[2],
            *GENERAL_RECOMMENDATIONS,
        ]

    def test_all_worst_answers(self):
        card = compute_scores(WORST)

        assert card.market_score == 10
        assert card.product_score == 20
        assert card.financial_score == 20
        assert card.overall_score == 17
        assert len(card.weaknesses) == 3
        assert len(card.recommendations) == 5

    def test_missing_team_experience(self):
        incomplete = dict(BEST)
        del incomplete["team_experience"]

        with pytest.raises(MissingAnswerError) as exc_info:
            compute_scores(incomplete)

        assert exc_info.value.question_id == "team_experience"
        assert exc_info.value.status_code == 400


class TestThresholds:
    def test_market_score_of_exactly_70_is_a_strength(self):
        card = compute_scores(answers(market_potential=4, competition_intensity=2))

        assert card.market_score == 70
        assert MARKET_COPY[0] in card.strengths
        assert MARKET_COPY[2] not in card.recommendations

    def test_mixed_strengths_and_weaknesses(self):
        card = compute_scores(
            answers(product_differentiation=5, scalability_potential=4, team_experience=2)
        )

        assert card.product_score == 90
        assert card.financial_score == 40
        assert card.strengths == [PRODUCT_COPY[0]]
        assert card.weaknesses == [MARKET_COPY[1], TEAM_COPY[1]]
        assert card.recommendations[:2] == [MARKET_COPY[2], TEAM_COPY[2]]


class TestProperties:
    def test_every_answer_combination_covers_exact_reachable_sets(self):
        market, product, financial = set(), set(), set()
        for combo in itertools.product(range(1, 6), repeat=len(QUESTION_IDS)):
            card = compute_scores(dict(zip(QUESTION_IDS, combo)))
            market.add(card.market_score)
            product.add(card.product_score)
            financial.add(card.financial_score)

            assert 0 <= card.overall_score <= 100
            assert len(card.strengths) + len(card.weaknesses) == 3

        assert market == set(range(10, 91, 10))
        assert product == set(range(20, 101, 10))
        assert financial == {20, 40, 60, 80, 100}

    def test_identical_answers_score_identically(self):
        assert compute_scores(answers(market_potential=4)) == compute_scores(
            answers(market_potential=4)
        )

    def test_string_answers_match_integer_answers(self):
        as_strings = {k: str(v) for k, v in BEST.items()}
        assert compute_scores(as_strings) == compute_scores(BEST)

    def test_extra_answers_are_ignored(self):
        assert compute_scores({**BEST, "unrelated": 1}) == compute_scores(BEST)


class TestAnswerParsing:
    @pytest.mark.parametrize("raw", [None, "", "   "])
    def test_blank_answer_is_missing(self, raw):
        with pytest.raises(MissingAnswerError):
            parse_answer("market_potential", raw)

    @pytest.mark.parametrize("raw", ["high", "3.5", True])
    def test_non_integer_answer_is_invalid(self, raw):
        with pytest.raises(InvalidAnswerError):
            parse_answer("market_potential", raw)

    @pytest.mark.parametrize("raw", [0, 6, "-1", "10"])
    def test_answer_outside_scale_is_rejected(self, raw):
        with pytest.raises(OutOfRangeError):
            parse_answer("market_potential", raw)

    def test_padded_numeric_string_is_accepted(self):
        assert parse_answer("market_potential", " 4 ") == 4


class TestRounding:
    def test_half_rounds_up(self):
        assert round_half_up(0.5) == 1
        assert round_half_up(2.5) == 3
        assert round_half_up(96.666) == 97
        assert round_half_up(56.4) == 56

    def test_overall_from_subscores(self):
        assert overall_from_subscores(90, 100, 100) == 97
        assert overall_from_subscores(70, 70, 71) == 70
        assert overall_from_subscores(0, 0, 0) == 0
