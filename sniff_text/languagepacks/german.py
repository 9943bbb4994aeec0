from sniff_text.languagepacks.pack import (
    GrammarProfile,
    LanguagePack,
    ParticipleProfile,
    PunctuationProfile,
    RuleOfThreeProfile,
    TextCategory,
    TransitionProfile,
)

# German business prose leans on explicit connectors, so transitions carry
# less weight here and participle openers are rarer.
GERMAN_LANGUAGE_PACK = LanguagePack(
    name="german",
    default_type="business",
    priority=("social_media", "casual", "academic", "technical", "business", "creative"),
    categories={
        "social_media": TextCategory(
            tokens=frozenset({"omg", "lol", "tbh", "imo", "kp", "ka", "ur", "u"}),
        ),
        "casual": TextCategory(
            tokens=frozenset({"halt", "irgendwie", "naja", "okay", "ding", "echt", "voll"}),
            phrases=frozenset({"ziemlich gut", "nicht schlecht"}),
        ),
        "academic": TextCategory(
            tokens=frozenset({
                "forschung", "studie", "hypothese", "ergebnisse", "schlussfolgerung",
                "korrelation", "untersuchung", "analyse", "methodik", "stichprobe",
            }),
        ),
        "technical": TextCategory(
            tokens=frozenset({
                "api", "algorithmus", "datenbank", "funktion", "optimierung", "leistung",
                "framework", "implementierung", "server", "schnittstelle", "konfiguration",
            }),
        ),
        "business": TextCategory(
            tokens=frozenset({
                "stakeholder", "ziele", "strategisch", "operativ", "umfassend", "lösungen",
                "geschäft", "prozesse", "effizienz", "kunden", "budget", "umsatz",
                "digitalisierung", "transformation", "innovation", "umsetzung",
            }),
            phrases=frozenset({"nachhaltige lösungen", "strategische ausrichtung"}),
        ),
        "creative": TextCategory(
            tokens=frozenset({"flüsterte", "schatten", "herz", "traum", "stille", "mondlicht"}),
            phrases=frozenset({"es war einmal"}),
        ),
    },
    transitions=TransitionProfile(
        phrases=frozenset({
            "außerdem", "zusätzlich", "zudem", "darüber hinaus", "überdies", "ferner",
            "des weiteren", "nicht zuletzt", "insbesondere", "hervorzuheben ist",
            "zusammenfassend", "abschließend", "folglich", "letztendlich",
            "es ist wichtig zu beachten", "in der heutigen zeit",
        }),
        weight=0.12,
    ),
    participles=ParticipleProfile(
        openers=(
            r"^(?:Basierend|Ausgehend|Aufbauend|Unter Berücksichtigung)\b[^.!?]{0,80},",
            r"^[A-ZÄÖÜ][a-zäöüß]+end\b[^.!?]{0,80},",
        ),
        weight=0.08,
    ),
    grammar=GrammarProfile(
        imperfections=(
            r"(?i)\b(?:nen|ne|nich|is|hab|haste|gibts|kannste)\b",
            r"(?i)\b(?:lol|omg|halt|irgendwie)\b",
            r"\bdas\s+das\b",
            r"\s[,.!?]",
            r"[!?]{2,}",
            r"\b(\w+)\s+\1\b",
        ),
        weight=0.09,
    ),
    rule_of_three=RuleOfThreeProfile(conjunctions=frozenset({"und", "oder", "sowie"})),
    punctuation=PunctuationProfile(
        baselines={
            "—": (0.3, 1.0),
            "–": (0.8, 0.8),
            ";": (1.2, 0.95),
            ":": (3.5, 0.6),
            "…": (0.4, 0.85),
            "(": (3.0, 0.5),
        },
    ),
    common_words=frozenset({
        "der", "die", "das", "und", "in", "zu", "den", "ist", "von", "nicht", "mit",
        "sich", "des", "auf", "für", "im", "dem", "ein", "eine", "als", "auch", "es",
        "an", "werden", "aus", "er", "hat", "dass", "sie", "nach", "wird", "bei",
        "einer", "um", "am", "sind", "noch", "wie", "einem", "über", "einen", "so",
        "system", "lösungen", "prozesse", "wichtig", "verschiedene",
    }),
)
