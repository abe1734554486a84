"""Prompt builders for the interview and resume features."""

from __future__ import annotations

from typing import Any, Dict, List, Mapping

from .errors import ValidationError
from .utils import clean_str

QUESTIONS_SYSTEM = (
    "You are an expert interview coach. Generate relevant, realistic interview questions "
    "that help candidates prepare effectively."
)
FEEDBACK_SYSTEM = (
    "You are an expert interview coach providing constructive, helpful feedback to help "
    "candidates improve their interview skills."
)
RESUME_SYSTEM = (
    "You are a professional resume writer with expertise in creating ATS-friendly resumes "
    "that highlight candidates' strengths and achievements."
)

DEFAULT_EXPERIENCE_LEVEL = "mid-level"
DEFAULT_QUESTION_COUNT = 5

QUESTION_TYPES = ("behavioral", "technical", "situational")
QUESTION_CATEGORIES = (
    "leadership",
    "problem-solving",
    "communication",
    "technical-skills",
    "culture-fit",
)


def build_questions_prompt(payload: Mapping[str, Any]) -> str:
    role = clean_str(payload.get("role"))
    industry = clean_str(payload.get("industry"))
    if not role or not industry:
        raise ValidationError("Please provide role and industry")

    experience_level = clean_str(payload.get("experienceLevel")) or DEFAULT_EXPERIENCE_LEVEL
    question_count = payload.get("questionCount")
    if question_count is None:
        question_count = DEFAULT_QUESTION_COUNT

    return (
        f"Generate {question_count} interview questions for a {experience_level} {role} "
        f"position in the {industry} industry.\n\n"
        "The questions should be:\n"
        "1. Relevant to the role and industry\n"
        "2. A mix of behavioral, technical, and situational questions\n"
        "3. Appropriate for the experience level\n"
        "4. Challenging but fair\n\n"
        "Format the response as a JSON array of question objects with this structure:\n"
        "[\n"
        "  {\n"
        '    "id": 1,\n'
        '    "question": "Question text here",\n'
        f'    "type": "{"|".join(QUESTION_TYPES)}",\n'
        f'    "category": "{"|".join(QUESTION_CATEGORIES)}"\n'
        "  }\n"
        "]\n\n"
        "Return ONLY the JSON array, no additional text or markdown."
    )


def build_feedback_prompt(payload: Mapping[str, Any]) -> str:
    question = clean_str(payload.get("question"))
    answer = clean_str(payload.get("answer"))
    if not question or not answer:
        raise ValidationError("Please provide both question and answer")

    context_lines = []
    role = clean_str(payload.get("role"))
    industry = clean_str(payload.get("industry"))
    if role:
        context_lines.append(f"ROLE: {role}")
    if industry:
        context_lines.append(f"INDUSTRY: {industry}")
    context = ("\n".join(context_lines) + "\n\n") if context_lines else ""

    return (
        "You are an expert interview coach providing feedback on an interview answer.\n\n"
        f"INTERVIEW QUESTION:\n{question}\n\n"
        f"CANDIDATE'S ANSWER:\n{answer}\n\n"
        f"{context}"
        "Provide constructive feedback in the following JSON format:\n"
        "{\n"
        '  "score": 1-10,\n'
        '  "strengths": ["strength1", "strength2"],\n'
        '  "improvements": ["suggestion1", "suggestion2"],\n'
        '  "sampleAnswer": "A better example answer...",\n'
        '  "overallFeedback": "Overall assessment..."\n'
        "}\n\n"
        "Be constructive and helpful. Return ONLY the JSON object, no additional text or markdown."
    )


def _as_list(payload: Mapping[str, Any], key: str) -> List[Any]:
    value = payload.get(key)
    if value is None:
        return []
    if not isinstance(value, list):
        raise ValidationError(f"{key} must be a list")
    return value


def _format_experience(entries: List[Dict[str, Any]]) -> str:
    blocks = []
    for idx, exp in enumerate(entries, start=1):
        end_date = clean_str(exp.get("endDate")) or "Present"
        blocks.append(
            f"{idx}. {clean_str(exp.get('position'))} at {clean_str(exp.get('company'))}\n"
            f"   {clean_str(exp.get('startDate'))} - {end_date}\n"
            f"   {clean_str(exp.get('description'))}"
        )
    return "\n\n".join(blocks)


def _format_education(entries: List[Dict[str, Any]]) -> str:
    blocks = []
    for idx, edu in enumerate(entries, start=1):
        lines = [
            f"{idx}. {clean_str(edu.get('degree'))} in {clean_str(edu.get('field'))}",
            f"   {clean_str(edu.get('school'))}, {clean_str(edu.get('year'))}",
        ]
        gpa = clean_str(edu.get("gpa"))
        if gpa:
            lines.append(f"   GPA: {gpa}")
        blocks.append("\n".join(lines))
    return "\n\n".join(blocks)


def build_resume_prompt(payload: Mapping[str, Any]) -> str:
    personal = payload.get("personalInfo")
    if not isinstance(personal, dict) or not clean_str(personal.get("name")):
        raise ValidationError("Please provide personal information including your name")

    experience = [e for e in _as_list(payload, "experience") if isinstance(e, dict)]
    education = [e for e in _as_list(payload, "education") if isinstance(e, dict)]
    if not experience:
        raise ValidationError("Please add at least one work experience entry")
    if not education:
        raise ValidationError("Please add at least one education entry")
    skills = [clean_str(s) for s in _as_list(payload, "skills") if clean_str(s)]

    contact = [
        f"Name: {clean_str(personal.get('name'))}",
        f"Email: {clean_str(personal.get('email'))}",
        f"Phone: {clean_str(personal.get('phone'))}",
        f"Location: {clean_str(personal.get('location'))}",
    ]
    for label, key in (("LinkedIn", "linkedin"), ("Website", "website")):
        value = clean_str(personal.get(key))
        if value:
            contact.append(f"{label}: {value}")

    return (
        "Create a professional, ATS-friendly resume based on the following information:\n\n"
        "PERSONAL INFORMATION:\n"
        + "\n".join(contact)
        + "\n\nPROFESSIONAL SUMMARY:\n"
        + (clean_str(personal.get("summary")) or "No summary provided")
        + "\n\nWORK EXPERIENCE:\n"
        + _format_experience(experience)
        + "\n\nEDUCATION:\n"
        + _format_education(education)
        + "\n\nSKILLS:\n"
        + ", ".join(skills)
        + "\n\nGenerate a professional resume in a clean, well-structured format. Include:\n"
        "1. A compelling professional summary\n"
        "2. Properly formatted work experience with bullet points highlighting achievements\n"
        "3. Education details\n"
        "4. Skills section organized by category\n"
        "5. Use action verbs and quantify achievements where possible\n"
        "6. Make it ATS-friendly with clear section headers\n\n"
        "Format the resume in Markdown with proper headers (##) and bullet points."
    )
