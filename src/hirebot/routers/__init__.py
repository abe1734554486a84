from .interview import router as interview_router
from .resume import router as resume_router

__all__ = ["interview_router", "resume_router"]
