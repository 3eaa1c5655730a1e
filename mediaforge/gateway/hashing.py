from mediaforge.contracts import SPEECH_CACHE


def speech_cache_key(language: str, text: str) -> str:
    """Cache key for synthesized speech: the literal namespace, language code and exact text."""
    return SPEECH_CACHE.format(language=language, text=text)
