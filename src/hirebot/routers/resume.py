from typing import Any, Dict, Optional

from fastapi import APIRouter, Depends

from ..dependencies import AuthenticatedUser, get_current_user, get_llm_client
from ..llm.client import LLMClient
from ..pipeline import run_feature
from ..schemas import ResumeRequest

router = APIRouter(prefix="/resume", tags=["resume"])


@router.post("/generate")
def generate_resume(
    request: ResumeRequest,
    current_user: AuthenticatedUser = Depends(get_current_user),
    client: Optional[LLMClient] = Depends(get_llm_client),
) -> Dict[str, Any]:
    """Generate a Markdown resume from structured profile data."""
    return run_feature(client, "resume", request.model_dump())
