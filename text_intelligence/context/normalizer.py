# text_intelligence/context/normalizer.py


def normalize_word(s: str) -> str:
    """Trim and lower-case a single token. May return ""."""
    if not s:
        return ""
    return s.strip().lower()
