# tests/test_scoring.py
from datetime import datetime, timezone

import pytest

from conftest import QUESTIONS
from mock_interview.application.interview_session import Evaluation, InterviewSession, ResponseRecord
from mock_interview.application.scoring import aggregate, slot_score


def scored(question_id, score, followup_index=None):
    return ResponseRecord(
        question_id=question_id,
        answer="answer",
        evaluation=Evaluation(score, "j", "i", "e"),
        is_followup=followup_index is not None,
        followup_index=followup_index,
    )


def session_with(*responses):
    session = InterviewSession(id="s", name="A", topic="T", questions=QUESTIONS,
                               start_time=datetime(2024, 1, 1, tzinfo=timezone.utc))
    for response in responses:
        session.record(response)
    return session


def test_zero_main_score_is_ignored():
    responses = [scored(0, 0.0), scored(0, 7.0, 0), scored(0, 8.0, 1)]
    assert slot_score(responses, 0) == pytest.approx(7.5)


def test_weak_main_answer_is_averaged_with_followups():
    responses = [scored(0, 3.0), scored(0, 9.0, 0)]
    assert slot_score(responses, 0) == pytest.approx(6.0)


def test_all_zero_slot_scores_zero():
    responses = [scored(2, 0.0), scored(2, 0.0, 0)]
    assert slot_score(responses, 2) == 0.0


def test_unanswered_slot_scores_zero():
    assert slot_score([scored(1, 9.0)], 0) == 0.0


def test_only_first_main_answer_counts():
    responses = [scored(0, 4.0), scored(0, 10.0)]
    assert slot_score(responses, 0) == pytest.approx(4.0)


def test_followups_without_main_answer_still_count():
    responses = [scored(5, 6.0, 0)]
    assert slot_score(responses, 5) == pytest.approx(6.0)


def test_aggregate_sums_slots():
    session = session_with(
        scored(0, 8.0),
        scored(1, 6.0),
        scored(0, 6.0, 0),
        scored(9, 10.0),
    )
    report = aggregate(session)

    assert len(report.per_question_scores) == 10
    assert report.per_question_scores[0] == pytest.approx(7.0)
    assert report.per_question_scores[1] == pytest.approx(6.0)
    assert report.per_question_scores[9] == pytest.approx(10.0)
    assert report.per_question_scores[2:9] == (0.0,) * 7
    assert report.total_score == pytest.approx(23.0)


def test_perfect_interview_totals_one_hundred():
    session = session_with(*(scored(i, 10.0) for i in range(10)))
    assert aggregate(session).total_score == pytest.approx(100.0)


def test_empty_session_totals_zero():
    report = aggregate(session_with())
    assert report.total_score == 0.0
    assert report.per_question_scores == (0.0,) * 10
