"""Bundled language packs."""

from sniff_text.languagepacks.pack import LanguagePack
from sniff_text.languagepacks.english import ENGLISH_LANGUAGE_PACK
from sniff_text.languagepacks.german import GERMAN_LANGUAGE_PACK

LANGUAGE_PACKS = {
    ENGLISH_LANGUAGE_PACK.name: ENGLISH_LANGUAGE_PACK,
    GERMAN_LANGUAGE_PACK.name: GERMAN_LANGUAGE_PACK,
}


def get_language_pack(name: str) -> LanguagePack:
    """Look up a bundled pack by name (raises ``KeyError`` if missing)."""
    key = (name or "").strip().lower()
    if key not in LANGUAGE_PACKS:
        available = ", ".join(sorted(LANGUAGE_PACKS))
        raise KeyError(f"Unknown language pack: {name!r}. Available: {available}")
    return LANGUAGE_PACKS[key]


__all__ = [
    "LanguagePack",
    "ENGLISH_LANGUAGE_PACK",
    "GERMAN_LANGUAGE_PACK",
    "LANGUAGE_PACKS",
    "get_language_pack",
]
