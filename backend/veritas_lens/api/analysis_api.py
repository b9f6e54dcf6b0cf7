import asyncio
from fastapi import APIRouter, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from typing import Optional
from veritas_lens.models.analysis import AnalyzeRequest, AnalysisResponse
from veritas_lens.services.analysis_service import AnalysisService

router = APIRouter()

MISSING_CLAIM_ERROR = "Claim is required in the request body."
ANALYSIS_ERROR = "An internal server error occurred during analysis."

_service: Optional[AnalysisService] = None


def get_analysis_service() -> AnalysisService:
    """Create the analysis service on first use so a missing API key surfaces per request."""
    global _service
    if _service is None:
        _service = AnalysisService()
    return _service


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    # Unparseable or mistyped bodies are reported the same way as a missing claim
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"error": MISSING_CLAIM_ERROR})


@router.post("/analyze", response_model=AnalysisResponse)
async def analyze_claim(data: AnalyzeRequest):
    claim_text = (data.claim or "").strip()
    if not claim_text:
        return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"error": MISSING_CLAIM_ERROR})

    try:
        service = get_analysis_service()
        # Run blocking Gemini call in threadpool to prevent blocking event loop
        loop = asyncio.get_running_loop()
        result = await loop.run_in_executor(None, service.analyze, claim_text)
    except Exception as e:
        print(f"[ERROR] Error during analysis: {str(e)}")
        return JSONResponse(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content={"error": ANALYSIS_ERROR})

    return result
