"""
API key classification.

Guesses which LLM vendor issued a key from its shape, and whether the
key is plausibly well formed. No network call is made.

Dependencies: backend.models.analysis
System role: Provider selection from caller credentials
"""

from backend.models.analysis import ApiKeyType

UNKNOWN_KEY_TYPE = "Unknown"


def detect_api_key_type(api_key: str) -> str:
    """
    Detect the vendor of an API key.

    Args:
        api_key: Raw key as pasted by the user

    Returns:
        str: "OpenAI", "Gemini" or "Unknown"
    """
    key = (api_key or "").strip()
    if key.startswith("sk-"):
        return ApiKeyType.OPENAI.value
    if key.startswith("AIza"):
        return ApiKeyType.GEMINI.value
    if "gemini" in key or len(key) == 39:
        return ApiKeyType.GEMINI.value
    return UNKNOWN_KEY_TYPE


def is_plausible_api_key(api_key: str) -> bool:
    """
    Check a key against its vendor's known format.

    OpenAI keys start with "sk-" and are longer than 40 characters;
    Gemini keys start with "AIza" or are at least 35 characters long.
    """
    key = (api_key or "").strip()
    key_type = detect_api_key_type(key)
    if key_type == ApiKeyType.OPENAI.value:
        return len(key) > 40
    if key_type == ApiKeyType.GEMINI.value:
        return key.startswith("AIza") or len(key) >= 35
    return False
