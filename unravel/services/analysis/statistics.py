from collections import Counter

from scipy import stats


def shannon_entropy(text: str) -> float:
    """
    Calculate Shannon entropy in bits per character.

    Measures the uncertainty/randomness of the text.
    - Lower entropy suggests more structure (like natural language)
    - Higher entropy suggests encoded or random data
    """
    if not text:
        return 0.0

    counts = list(Counter(text).values())
    return float(stats.entropy(counts, base=2))
