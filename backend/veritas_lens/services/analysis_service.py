from veritas_lens.services.evidence_service import EvidenceService
from veritas_lens.services.verification_service import VerificationService
from veritas_lens.services.credibility_service import CredibilityService


class AnalysisService:
    """
    Claim analysis pipeline:
    1. Evidence Retrieval (knowledge base, keyword mock data, or none for web search)
    2. Verification with Gemini
    3. Combine verdict and credibility-tagged evidence into the API response
    """

    def __init__(self, evidence_service: EvidenceService = None,
                 verification_service: VerificationService = None,
                 credibility: CredibilityService = None):
        self.credibility = credibility or CredibilityService()
        self.evidence = evidence_service or EvidenceService(credibility=self.credibility)
        self.verification = verification_service or VerificationService()

    def analyze(self, claim_text: str) -> dict:
        """
        Run the full analysis for a claim.

        Args:
            claim_text (str): The claim to analyze

        Returns:
            dict: verdict, confidence, summary, supporting_evidence,
                  contradicting_evidence and evidence_mode

        Raises:
            VerificationError: If the verification model fails
        """
        mode = self.evidence.mode
        print(f"[Analysis] Analyzing claim ({mode}): {claim_text[:80]}")

        # Step 1: Evidence Retrieval
        evidence = self.evidence.find_evidence(claim_text)

        # Step 2: Verification with Gemini
        verification_result = self.verification.verify(claim_text, evidence, mode)

        # Step 3: Combine results
        if mode == "web_search":
            supporting = [self.credibility.tag(e) for e in verification_result.get("supporting_evidence", [])]
            contradicting = [self.credibility.tag(e) for e in verification_result.get("contradicting_evidence", [])]
        else:
            supporting = evidence["supports"]
            contradicting = evidence["contradicts"]

        return {
            "verdict": verification_result["verdict"],
            "confidence": verification_result["confidence"],
            "summary": verification_result["summary"],
            "supporting_evidence": supporting,
            "contradicting_evidence": contradicting,
            "evidence_mode": mode
        }
