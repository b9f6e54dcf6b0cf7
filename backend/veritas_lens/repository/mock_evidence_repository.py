import re
from typing import List, Optional


# Keyword-matched mock evidence. A rule applies when every keyword appears
# in the claim as a whole word or phrase.
MOCK_EVIDENCE = [
    {
        "keywords": ["eiffel tower", "paris"],
        "stance": "supports",
        "source": "https://www.toureiffel.paris/en/the-monument",
        "text": "The Eiffel Tower stands on the Champ de Mars in Paris and was completed in 1889."
    },
    {
        "keywords": ["eiffel tower", "berlin"],
        "stance": "contradicts",
        "source": "https://en.wikipedia.org/wiki/Eiffel_Tower",
        "text": "The Eiffel Tower is a wrought-iron lattice tower on the Champ de Mars in Paris, France."
    },
    {
        "keywords": ["earth", "flat"],
        "stance": "contradicts",
        "source": "https://science.nasa.gov/earth/facts/",
        "text": "Earth is an oblate spheroid, slightly flattened at the poles and bulging at the equator."
    },
    {
        "keywords": ["earth", "third planet"],
        "stance": "supports",
        "source": "https://solarsystem.nasa.gov/planets/earth/overview/",
        "text": "Our home planet is the third planet from the Sun, and the only place we know of so far that's inhabited by living things."
    },
    {
        "keywords": ["great wall", "space"],
        "stance": "contradicts",
        "source": "https://www.nasa.gov/image-article/great-wall-of-china/",
        "text": "The Great Wall of China is frequently billed as the only human-made object visible from space, but it is generally not visible to the unaided eye from low Earth orbit."
    },
    {
        "keywords": ["water", "hydrogen"],
        "stance": "supports",
        "source": "https://www.usgs.gov/special-topics/water-science-school/science/water-qa-water-facts",
        "text": "A water molecule (H2O) is made of two hydrogen (H) atoms bonded to one oxygen (O) atom."
    },
    {
        "keywords": ["siriraj", "malaysia"],
        "stance": "contradicts",
        "source": "https://en.wikipedia.org/wiki/Siriraj_Hospital",
        "text": "Faculty of Medicine Siriraj Hospital, Mahidol University is the oldest and largest hospital in Thailand, located in Bangkok."
    },
    {
        "keywords": ["siriraj", "thailand"],
        "stance": "supports",
        "source": "https://www.si.mahidol.ac.th/en/",
        "text": "Siriraj Hospital, founded in 1888, is the first hospital in Thailand and is located in Bangkok Noi, Bangkok."
    }
]


class MockEvidenceRepository:
    def __init__(self, rules: Optional[List[dict]] = None):
        self.rules = rules if rules is not None else MOCK_EVIDENCE

    def find_matching(self, claim_text: str) -> List[dict]:
        """
        Find mock evidence rules whose keywords all appear in the claim.

        Args:
            claim_text (str): The claim to search for

        Returns:
            list: Matching rules, in table order
        """
        lower_claim = claim_text.lower()
        return [
            rule for rule in self.rules
            if rule["keywords"] and all(self._contains_keyword(lower_claim, kw) for kw in rule["keywords"])
        ]

    def _contains_keyword(self, text: str, keyword: str) -> bool:
        return re.search(r"\b" + re.escape(keyword.lower()) + r"\b", text) is not None
