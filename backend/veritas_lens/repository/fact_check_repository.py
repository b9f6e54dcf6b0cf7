from typing import List, Optional


# In-memory knowledge base of reviewed claims.
# truth_rating is either "True" or "False"; other ratings are ignored by lookups.
FACT_CHECK_DB = [
    {
        "claim_reviewed": "The Eiffel Tower is located in Berlin.",
        "source": "https://en.wikipedia.org/wiki/Eiffel_Tower",
        "text": "The Eiffel Tower is a wrought-iron lattice tower on the Champ de Mars in Paris, France.",
        "truth_rating": "False"
    },
    {
        "claim_reviewed": "Earth is the third planet from the Sun.",
        "source": "https://solarsystem.nasa.gov/planets/earth/overview/",
        "text": "Our home planet is the third planet from the Sun, and the only place we know of so far that's inhabited by living things.",
        "truth_rating": "True"
    },
    {
        "claim_reviewed": "Water is composed of two hydrogen atoms and one oxygen atom.",
        "source": "https://www.usgs.gov/special-topics/water-science-school/science/water-qa-water-facts",
        "text": "A water molecule (H2O) is made of two hydrogen (H) atoms bonded to one oxygen (O) atom.",
        "truth_rating": "True"
    },
    {
        "claim_reviewed": "Siriraj Hospital is in Malaysia.",
        "source": "https://en.wikipedia.org/wiki/Siriraj_Hospital",
        "text": "Faculty of Medicine Siriraj Hospital, Mahidol University is the oldest and largest hospital in Thailand, located in Bangkok.",
        "truth_rating": "False"
    }
]


class FactCheckRepository:
    def __init__(self, entries: Optional[List[dict]] = None):
        self.entries = entries if entries is not None else FACT_CHECK_DB

    def find_matching(self, claim_text: str) -> List[dict]:
        """
        Find reviewed claims related to the given claim.

        An entry matches when its reviewed claim contains the whole input claim,
        or when the input claim contains the third word of the reviewed claim
        ("tower", "the", "composed" and "is" for the default table).
        The third-word rule is a plain substring test, so short words match
        broadly.

        Args:
            claim_text (str): The claim to search for

        Returns:
            list: Matching knowledge base entries, in table order
        """
        lower_claim = claim_text.lower()
        matches = []

        for entry in self.entries:
            reviewed = entry["claim_reviewed"].lower()
            words = reviewed.split(" ")
            third_word = words[2] if len(words) > 2 else None

            if lower_claim in reviewed or (third_word and third_word in lower_claim):
                matches.append(entry)

        return matches
