"""Request models for the HTTP API.

Required fields are optional at the model level; the prompt builders own the
"missing field" checks so they surface as 400 ``ValidationError`` responses.
"""

from __future__ import annotations

from typing import List, Optional, Union

from pydantic import BaseModel


class QuestionsRequest(BaseModel):
    role: Optional[str] = None
    industry: Optional[str] = None
    experienceLevel: Optional[str] = None
    questionCount: Optional[int] = None


class FeedbackRequest(BaseModel):
    question: Optional[str] = None
    answer: Optional[str] = None
    role: Optional[str] = None
    industry: Optional[str] = None


class PersonalInfo(BaseModel):
    name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    location: Optional[str] = None
    linkedin: Optional[str] = None
    website: Optional[str] = None
    summary: Optional[str] = None


class ExperienceEntry(BaseModel):
    position: Optional[str] = None
    company: Optional[str] = None
    startDate: Optional[str] = None
    endDate: Optional[str] = None
    description: Optional[str] = None


class EducationEntry(BaseModel):
    degree: Optional[str] = None
    field: Optional[str] = None
    school: Optional[str] = None
    year: Optional[Union[str, int]] = None
    gpa: Optional[Union[str, float]] = None


class ResumeRequest(BaseModel):
    personalInfo: Optional[PersonalInfo] = None
    experience: Optional[List[ExperienceEntry]] = None
    education: Optional[List[EducationEntry]] = None
    skills: Optional[List[str]] = None
