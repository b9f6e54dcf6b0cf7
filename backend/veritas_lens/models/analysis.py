from pydantic import BaseModel, Field
from typing import List, Literal, Optional


class AnalyzeRequest(BaseModel):
    """Request body for claim analysis"""
    claim: Optional[str] = None


class EvidenceItem(BaseModel):
    """A single piece of evidence with its source URL and credibility label"""
    source: str
    text: str
    credibility: Literal["high", "medium", "low", "unknown"] = "unknown"


class AnalysisResponse(BaseModel):
    """Verdict returned to the frontend"""
    verdict: Literal["True", "False", "Partially True"]
    confidence: float = Field(..., ge=0, le=100)
    summary: str
    supporting_evidence: List[EvidenceItem] = []
    contradicting_evidence: List[EvidenceItem] = []
    evidence_mode: str
