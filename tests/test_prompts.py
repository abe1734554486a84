import pytest

from hirebot.errors import ValidationError
from hirebot.pipeline import build_generation_request
from hirebot.prompts import build_feedback_prompt, build_questions_prompt, build_resume_prompt

RESUME_PAYLOAD = {
    "personalInfo": {
        "name": "Ada Lovelace",
        "email": "ada@example.com",
        "phone": "5550001111",
        "location": "London",
        "linkedin": "https://linkedin.com/in/ada",
        "website": "",
        "summary": None,
    },
    "experience": [
        {"position": "Analyst", "company": "Engines Ltd", "startDate": "1842", "endDate": "", "description": "Notes"}
    ],
    "education": [{"degree": "BSc", "field": "Mathematics", "school": "Home", "year": "1835", "gpa": None}],
    "skills": ["Mathematics", " ", "Writing"],
}


@pytest.mark.parametrize("payload", [{}, {"role": "Engineer"}, {"industry": "Tech"}, {"role": " ", "industry": "Tech"}])
def test_questions_require_role_and_industry(payload):
    with pytest.raises(ValidationError) as exc_info:
        build_questions_prompt(payload)
    assert exc_info.value.status_code == 400


def test_questions_prompt_defaults():
    prompt = build_questions_prompt({"role": "Data Engineer", "industry": "Fintech"})
    assert "Generate 5 interview questions for a mid-level Data Engineer position in the Fintech industry." in prompt
    assert "behavioral|technical|situational" in prompt
    assert "leadership|problem-solving|communication|technical-skills|culture-fit" in prompt
    assert "Return ONLY the JSON array" in prompt


def test_question_count_is_forwarded_unchanged():
    assert "Generate 0 interview" in build_questions_prompt({"role": "r", "industry": "i", "questionCount": 0})
    assert "Generate 500 interview" in build_questions_prompt({"role": "r", "industry": "i", "questionCount": 500})


def test_feedback_requires_question_and_answer():
    with pytest.raises(ValidationError):
        build_feedback_prompt({"question": "Why?"})
    with pytest.raises(ValidationError):
        build_feedback_prompt({"answer": "Because."})


def test_feedback_context_lines_only_when_present():
    bare = build_feedback_prompt({"question": "Why?", "answer": "Because."})
    assert "ROLE:" not in bare and "INDUSTRY:" not in bare

    full = build_feedback_prompt({"question": "Why?", "answer": "Because.", "role": "PM", "industry": "Retail"})
    assert "ROLE: PM" in full
    assert "INDUSTRY: Retail" in full
    assert '"score": 1-10' in full


def test_resume_prompt_sections():
    prompt = build_resume_prompt(RESUME_PAYLOAD)
    assert "Name: Ada Lovelace" in prompt
    assert "LinkedIn: https://linkedin.com/in/ada" in prompt
    assert "Website:" not in prompt
    assert "No summary provided" in prompt
    assert "1. Analyst at Engines Ltd" in prompt
    assert "1842 - Present" in prompt
    assert "GPA:" not in prompt
    assert "Mathematics, Writing" in prompt
    assert "Markdown with proper headers (##)" in prompt


@pytest.mark.parametrize(
    "override",
    [
        {"personalInfo": None},
        {"personalInfo": {"name": ""}},
        {"experience": []},
        {"education": None},
        {"skills": "python"},
    ],
)
def test_resume_prompt_validation(override):
    payload = dict(RESUME_PAYLOAD, **override)
    with pytest.raises(ValidationError):
        build_resume_prompt(payload)


def test_generation_request_policy_constants():
    questions = build_generation_request("questions", {"role": "r", "industry": "i"})
    feedback = build_generation_request("feedback", {"question": "q", "answer": "a"})
    resume = build_generation_request("resume", RESUME_PAYLOAD)

    assert (questions.temperature, questions.max_output_size) == (0.7, 2000)
    assert (feedback.temperature, feedback.max_output_size) == (0.7, 1500)
    assert (resume.temperature, resume.max_output_size) == (0.7, None)
    assert questions.system_instruction.startswith("You are an expert interview coach")
    assert resume.system_instruction.startswith("You are a professional resume writer")
