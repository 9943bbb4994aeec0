from sniff_text.languagepacks.pack import (
    GrammarProfile,
    LanguagePack,
    ParticipleProfile,
    PunctuationProfile,
    RuleOfThreeProfile,
    TextCategory,
    TransitionProfile,
)

ENGLISH_LANGUAGE_PACK = LanguagePack(
    name="english",
    default_type="business",
    priority=("social_media", "casual", "academic", "technical", "business", "creative"),
    categories={
        "social_media": TextCategory(
            tokens=frozenset({"omg", "lol", "tbh", "imo", "idk", "ngl", "smh", "u", "ur"}),
        ),
        "casual": TextCategory(
            tokens=frozenset({"kinda", "gonna", "wanna", "stuff", "yeah", "okay", "pretty", "anyway"}),
            phrases=frozenset({"not bad", "pretty good", "you know"}),
        ),
        "academic": TextCategory(
            tokens=frozenset({
                "research", "study", "hypothesis", "findings", "conclusion", "methodology",
                "analysis", "correlation", "empirical", "literature", "significant", "sample",
            }),
            phrases=frozenset({"previous studies", "the results suggest", "further research"}),
        ),
        "technical": TextCategory(
            tokens=frozenset({
                "api", "algorithm", "database", "function", "optimization", "latency",
                "framework", "implementation", "server", "deployment", "configuration",
            }),
            phrases=frozenset({"source code", "error handling", "data structure"}),
        ),
        "business": TextCategory(
            tokens=frozenset({
                "revenue", "profit", "market", "client", "customer", "strategy", "growth",
                "investment", "stakeholder", "deliverable", "roadmap", "objective",
                "quarterly", "metric", "budget", "milestone", "solution", "efficiency",
            }),
            phrases=frozenset({
                "business strategy", "market share", "return on investment",
                "competitive advantage", "value proposition", "customer satisfaction",
            }),
        ),
        "creative": TextCategory(
            tokens=frozenset({"whispered", "shadow", "heart", "dream", "silence", "moonlight", "memory"}),
            phrases=frozenset({"once upon a time", "in the distance"}),
        ),
    },
    transitions=TransitionProfile(
        phrases=frozenset({
            "furthermore", "moreover", "additionally", "consequently", "nevertheless",
            "nonetheless", "in addition", "in conclusion", "to summarize", "in summary",
            "it is important to note", "it is worth noting", "on the other hand",
            "as a result", "ultimately", "notably", "importantly", "overall",
            "in today's world", "delve", "first and foremost", "last but not least",
        }),
    ),
    participles=ParticipleProfile(
        openers=(
            r"^[A-Z][a-z]+ing\b[^.!?]{0,80},",
            r"^(?:Built|Designed|Crafted|Driven|Powered|Based|Rooted|Grounded)\b[^.!?]{0,80},",
            r",\s+(?:ensuring|enabling|allowing|providing|highlighting|fostering|showcasing)\b",
        ),
    ),
    grammar=GrammarProfile(
        imperfections=(
            r"(?i)\b(?:dont|cant|wont|didnt|isnt|doesnt|im|ive|youre|theyre)\b",
            r"(?i)\b(?:gonna|wanna|kinda|sorta|gotta|lol|tbh|imo|btw|idk)\b",
            r"(?i)\btheir\s+(?:is|are|was|were)\b",
            r"(?i)\bits\s+(?:a|not|been|going)\b",
            r"(?i)\bcould\s+of\b|\bshould\s+of\b|\bwould\s+of\b",
            r"\s[,.!?]",
            r"[!?]{2,}",
            r"(?:^|[.!?]\s+)[a-z]",
            r"\b(\w+)\s+\1\b",
        ),
    ),
    rule_of_three=RuleOfThreeProfile(conjunctions=frozenset({"and", "or"})),
    punctuation=PunctuationProfile(
        baselines={
            "—": (0.5, 1.0),
            "–": (0.3, 0.9),
            ";": (2.1, 0.95),
            ":": (3.0, 0.6),
            "…": (0.4, 0.85),
            "(": (3.2, 0.5),
        },
    ),
    common_words=frozenset({
        "the", "be", "to", "of", "and", "a", "in", "that", "have", "i", "it", "for",
        "not", "on", "with", "he", "as", "you", "do", "at", "this", "but", "his", "by",
        "from", "they", "we", "say", "her", "she", "or", "an", "will", "my", "one",
        "all", "would", "there", "their", "what", "so", "up", "out", "if", "about",
        "who", "get", "which", "go", "me", "is", "are", "was", "can", "more", "system",
        "provides", "ensure", "important", "various", "process", "approach", "data",
    }),
)
