from typing import List, Sequence, Tuple

FALLBACK_QUESTIONS = (
    "What are advanced uses of VLOOKUP in Excel?",
    "How do you optimize large datasets in Excel?",
    "Explain how to create a dynamic dashboard in Excel.",
    "How can you use Power Query to clean data?",
    "What are the benefits of using PivotTables for data analysis?",
    "How do you implement conditional formatting with formulas?",
    "Describe the use of array formulas in Excel.",
    "How do you automate repetitive tasks using VBA?",
    "What is the difference between INDEX/MATCH and VLOOKUP?",
    "How do you handle errors in Excel formulas?",
)


def generate_questions_prompt(subject: str, topic: str) -> str:
    return (
        f"Generate an array of 10 advanced {subject} interview questions tailored to the {topic} department. "
        "Return only the JSON array of 10 question strings."
    )


def evaluate_answer_prompt(subject: str, question: str, answer: str) -> str:
    return f"""Evaluate the following answer to this {subject} interview question, prioritizing the answer's content for relevance, accuracy, and depth. Only generate follow-up questions if the answer is meaningful and related to the question.
Question: {question}
Answer: {answer}
Return only JSON with:
"score": number from 0 to 10 with one decimal place (e.g., 8.5),
"justification": string explaining the score,
"improvement": string with suggestions for improvement,
"example_answer": string with a good example answer,
"followups": array of 1 to 5 relevant follow-up question strings based on the answer's accuracy, depth, and relevance to the original question (at least 1, max 5). Return an empty array [] if the answer is nonsensical, irrelevant, gibberish, or completely unrelated to the question (e.g., no meaningful content or off-topic). For incorrect but meaningful answers, generate follow-ups that address specific misconceptions or weaknesses without generating irrelevant questions."""


def summary_prompt(subject: str, topic: str, reading_list: Sequence[str],
                   exchanges: Sequence[Tuple[str, str, dict]]) -> str:
    """Build the closing prompt.

    ``exchanges`` holds one (question, answer, evaluation) triple per recorded
    response, in the order the answers arrived.
    """
    questions = "\n".join(f"- {q}" for q in reading_list)
    blocks: List[str] = []
    for i, (question, answer, evaluation) in enumerate(exchanges, start=1):
        blocks.append(
            f"Question {i}: {question}\n"
            f"Answer: {answer}\n"
            f"Evaluation: score {evaluation['score']}, justification: {evaluation['justification']}, "
            f"improvement: {evaluation['improvement']}"
        )
    answered = "\n\n".join(blocks)
    return f"""You are summarizing an {subject} mock interview for {topic}.
Questions asked:
{questions}

Based on the following questions, answers, and evaluations:
{answered}

Return only JSON with:
"verdict": a single sentence verdict on the candidate's performance,
"pros": a paragraph describing the candidate's strengths,
"cons": a paragraph describing the candidate's weaknesses,
"areas_of_improvement": a paragraph with areas for improvement."""
