# tests/test_questions.py
import pytest

from conftest import QUESTIONS, ScriptedModel
from mock_interview.managers.prompts import FALLBACK_QUESTIONS
from mock_interview.managers.questions import QuestionBank


@pytest.mark.asyncio
async def test_generated_questions_are_used():
    model = ScriptedModel(QUESTIONS)
    questions = await QuestionBank(model).generate("Finance")

    assert questions == QUESTIONS
    assert "Finance department" in model.prompts[0]
    assert "Excel" in model.prompts[0]


@pytest.mark.asyncio
async def test_subject_is_part_of_prompt():
    model = ScriptedModel(QUESTIONS)
    await QuestionBank(model, subject="SQL").generate("Marketing")
    assert "advanced SQL interview questions" in model.prompts[0]


@pytest.mark.asyncio
@pytest.mark.parametrize("reply", [
    QUESTIONS[:9],
    QUESTIONS + ["one too many?"],
    {"questions": QUESTIONS},
    QUESTIONS[:9] + [42],
    QUESTIONS[:9] + ["   "],
    "not json",
])
async def test_bad_replies_use_fallback_list(reply):
    questions = await QuestionBank(ScriptedModel(reply)).generate("Finance")
    assert questions == list(FALLBACK_QUESTIONS)
    assert len(questions) == 10


@pytest.mark.asyncio
async def test_unavailable_model_uses_fallback_list():
    questions = await QuestionBank(ScriptedModel()).generate("HR")
    assert len(questions) == 10
    assert questions[0] == "What are advanced uses of VLOOKUP in Excel?"
