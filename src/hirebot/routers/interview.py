from typing import Any, Dict, Optional

from fastapi import APIRouter, Depends

from ..dependencies import AuthenticatedUser, get_current_user, get_llm_client
from ..llm.client import LLMClient
from ..pipeline import run_feature
from ..schemas import FeedbackRequest, QuestionsRequest

router = APIRouter(prefix="/interview", tags=["interview"])


@router.post("/questions")
def generate_questions(
    request: QuestionsRequest,
    current_user: AuthenticatedUser = Depends(get_current_user),
    client: Optional[LLMClient] = Depends(get_llm_client),
) -> Dict[str, Any]:
    """Generate interview questions for a role and industry."""
    return run_feature(client, "questions", request.model_dump())


@router.post("/feedback")
def answer_feedback(
    request: FeedbackRequest,
    current_user: AuthenticatedUser = Depends(get_current_user),
    client: Optional[LLMClient] = Depends(get_llm_client),
) -> Dict[str, Any]:
    """Score an interview answer and suggest improvements."""
    return run_feature(client, "feedback", request.model_dump())
