from veritas_lens.core.config import GEMINI_API_KEY, GEMINI_MODEL, GEMINI_MAX_RETRIES, GEMINI_TEMPERATURE
from veritas_lens.services.response_parser import extract_json, parse_verdict, parse_evidence_list
from google import genai
from google.genai import types
import json
import time


NO_EVIDENCE_NOTE = "No specific evidence was found in the local knowledge base. Please base your verdict on general knowledge."


class VerificationError(Exception):
    """Raised when the verification model does not return a usable verdict."""

    def __init__(self, message: str = "Failed to get a valid response from the verification model."):
        super().__init__(message)


class VerificationService:
    """
    Asks Gemini to judge a claim against the gathered evidence and parses the
    structured verdict out of its reply.
    """

    def __init__(self, client=None, model: str = None, max_retries: int = None):
        if client is None:
            if not GEMINI_API_KEY:
                raise ValueError("GEMINI_API_KEY environment variable is not set")
            client = genai.Client(api_key=GEMINI_API_KEY)
        self.client = client
        self.model = model or GEMINI_MODEL
        self.max_retries = max_retries or GEMINI_MAX_RETRIES

    def verify(self, claim_text: str, evidence: dict, mode: str = "knowledge_base") -> dict:
        """
        Verify a claim with Gemini.

        Args:
            claim_text (str): The claim to verify
            evidence (dict): {"supports": [...], "contradicts": [...]}
            mode (str): Evidence mode; 'web_search' enables the Google Search tool

        Returns:
            dict: verdict, confidence and summary; in web_search mode also
                  supporting_evidence and contradicting_evidence reported by the model

        Raises:
            VerificationError: If the model call fails or its reply cannot be parsed
        """
        web_search = mode == "web_search"
        prompt = self._build_prompt(claim_text, evidence, web_search)
        config = self._build_config(web_search)

        result_text = self._generate(prompt, config)

        try:
            payload = extract_json(result_text)
            result = parse_verdict(payload)
        except ValueError as e:
            print(f"[Verification] Unusable model response ({e}): {result_text[:200]}")
            raise VerificationError() from e

        if web_search:
            result["supporting_evidence"] = parse_evidence_list(payload.get("supporting_evidence"))
            result["contradicting_evidence"] = parse_evidence_list(payload.get("contradicting_evidence"))

        print(f"[Verification] verdict={result['verdict']} confidence={result['confidence']:.0f}")
        return result

    def _generate(self, prompt: str, config: types.GenerateContentConfig) -> str:
        """
        Call Gemini, retrying with exponential backoff while the API is overloaded.
        """
        for attempt in range(self.max_retries):
            try:
                response = self.client.models.generate_content(
                    model=self.model,
                    contents=prompt,
                    config=config
                )
                return (response.text or "").strip()

            except Exception as e:
                error_msg = str(e)

                # Check if it's a 503 (overload) error
                if "503" in error_msg or "UNAVAILABLE" in error_msg or "overload" in error_msg.lower():
                    if attempt < self.max_retries - 1:
                        wait_time = 2 ** attempt
                        print(f"[Verification] Gemini API overloaded (attempt {attempt + 1}/{self.max_retries}). Retrying in {wait_time}s...")
                        time.sleep(wait_time)
                        continue
                    print(f"[Verification] Gemini API overloaded after {self.max_retries} attempts.")
                else:
                    print(f"[Verification] Error calling Gemini API: {error_msg}")

                raise VerificationError() from e

        raise VerificationError()

    def _build_config(self, web_search: bool) -> types.GenerateContentConfig:
        if web_search:
            return types.GenerateContentConfig(
                temperature=GEMINI_TEMPERATURE,
                tools=[types.Tool(google_search=types.GoogleSearch())]
            )
        return types.GenerateContentConfig(temperature=GEMINI_TEMPERATURE)

    def _build_prompt(self, claim_text: str, evidence: dict, web_search: bool) -> str:
        if web_search:
            return f"""
Act as an expert fact-checker. Use Google Search to find credible, up-to-date sources about the 'claim' below.
Determine if the evidence you find supports, contradicts, or only partially supports the claim.

Your response MUST be in a strict JSON format, with no extra text or markdown.
The JSON object must have these exact keys:
- "verdict": A string which can be "True", "False", or "Partially True".
- "confidence": A number between 0 and 100.
- "summary": A single, concise sentence in the same language as the claim, explaining your reasoning.
- "supporting_evidence": A list of objects with "source" (the page URL) and "text" (a short quote from that page) that support the claim.
- "contradicting_evidence": A list of objects with "source" (the page URL) and "text" (a short quote from that page) that contradict the claim.

Use empty lists when you found no evidence of a kind. Only cite pages you actually found.

---
Claim: "{claim_text}"
"""

        evidence_for_prompt = {
            "supports": [{"source": e["source"], "text": e["text"]} for e in evidence.get("supports", [])],
            "contradicts": [{"source": e["source"], "text": e["text"]} for e in evidence.get("contradicts", [])],
        }
        if not evidence_for_prompt["supports"] and not evidence_for_prompt["contradicts"]:
            evidence_for_prompt["notes"] = NO_EVIDENCE_NOTE

        return f"""
Act as an expert fact-checker. Analyze the relationship between the 'claim' and the provided 'evidence'.
Determine if the evidence supports, contradicts, or is partially related to the claim.

Your response MUST be in a strict JSON format, with no extra text or markdown.
The JSON object must have these exact keys:
- "verdict": A string which can be "True", "False", or "Partially True".
- "confidence": A number between 0 and 100.
- "summary": A single, concise sentence in the same language as the claim, explaining your reasoning.

---
Claim: "{claim_text}"

Evidence: {json.dumps(evidence_for_prompt, ensure_ascii=False)}
"""
