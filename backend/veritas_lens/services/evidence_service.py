from veritas_lens.core.config import EVIDENCE_MODE
from veritas_lens.repository.fact_check_repository import FactCheckRepository
from veritas_lens.repository.mock_evidence_repository import MockEvidenceRepository
from veritas_lens.services.credibility_service import CredibilityService


EVIDENCE_MODES = ("knowledge_base", "keyword", "web_search")


class EvidenceService:
    """
    Gathers supporting and contradicting evidence for a claim.

    Modes:
    - knowledge_base: lookup in the in-memory table of reviewed claims
    - keyword: keyword-matched mock evidence
    - web_search: no local evidence, the verification model searches the web itself
    """

    def __init__(self, mode: str = None, fact_check_repo: FactCheckRepository = None,
                 mock_repo: MockEvidenceRepository = None, credibility: CredibilityService = None):
        self.mode = (mode or EVIDENCE_MODE).strip().lower()
        if self.mode not in EVIDENCE_MODES:
            raise ValueError(f"Unknown evidence mode '{self.mode}'. Expected one of: {', '.join(EVIDENCE_MODES)}")

        self.fact_check_repo = fact_check_repo or FactCheckRepository()
        self.mock_repo = mock_repo or MockEvidenceRepository()
        self.credibility = credibility or CredibilityService()

    def find_evidence(self, claim_text: str) -> dict:
        """
        Find evidence for a claim using the configured mode.

        Args:
            claim_text (str): The claim to find evidence for

        Returns:
            dict: {"supports": [...], "contradicts": [...]}, each item with
                  source, text and credibility
        """
        if self.mode == "knowledge_base":
            evidence = self._from_knowledge_base(claim_text)
        elif self.mode == "keyword":
            evidence = self._from_keywords(claim_text)
        else:
            evidence = {"supports": [], "contradicts": []}

        print(f"[Evidence] mode={self.mode} supports={len(evidence['supports'])} contradicts={len(evidence['contradicts'])}")
        return evidence

    def _from_knowledge_base(self, claim_text: str) -> dict:
        supports = []
        contradicts = []

        for entry in self.fact_check_repo.find_matching(claim_text):
            item = self.credibility.tag({"source": entry["source"], "text": entry["text"]})
            if entry["truth_rating"] == "True":
                supports.append(item)
            elif entry["truth_rating"] == "False":
                contradicts.append(item)

        return {"supports": supports, "contradicts": contradicts}

    def _from_keywords(self, claim_text: str) -> dict:
        supports = []
        contradicts = []

        for rule in self.mock_repo.find_matching(claim_text):
            item = self.credibility.tag({"source": rule["source"], "text": rule["text"]})
            if rule["stance"] == "supports":
                supports.append(item)
            elif rule["stance"] == "contradicts":
                contradicts.append(item)

        return {"supports": supports, "contradicts": contradicts}
