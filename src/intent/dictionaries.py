"""English and Hindi vocabularies for the rules-based command interpreter.

These tables are plain data: `src.intent.profiles` compiles them into immutable language profiles.
They should remain small and deterministic. Hindi entries are written in Devanagari and are
NFC-normalized when the profiles are built, so nukta letters match however they were composed.
"""

from __future__ import annotations

EN_SEARCH_TRIGGERS: tuple[str, ...] = (
    "find",
    "search",
    "search for",
    "show",
    "show me",
    "look for",
    "looking for",
    "where is",
    "where are",
)

EN_ADD_TRIGGERS: tuple[str, ...] = (
    "add",
    "please add",
    "buy",
    "get",
    "put",
    "i need",
    "i want",
    "i'd like",
    "we need",
    "need to buy",
    "need to get",
    "want to buy",
    "want to get",
    # Whole phrases, so the leftmost match never leaves a stray "to" (read as 2) behind.
    "i need to buy",
    "i need to get",
    "i want to buy",
    "i want to get",
    "we need to buy",
    "we need to get",
    "i'd like to buy",
    "i'd like to get",
)

EN_REMOVE_TRIGGERS: tuple[str, ...] = (
    "remove",
    "delete",
    "don't want",
    "dont want",
    "do not want",
    "cancel",
    "take off",
    "drop",
)

EN_NUMBER_WORDS: dict[str, int] = {
    "one": 1,
    "won": 1,
    "two": 2,
    "to": 2,
    "too": 2,
    "three": 3,
    "four": 4,
    "five": 5,
    "six": 6,
    "seven": 7,
    "eight": 8,
    "nine": 9,
    "ten": 10,
    "eleven": 11,
    "twelve": 12,
    "dozen": 12,
    "twenty": 20,
}

# Pronouns, articles, politeness and unit words that never belong to an item name.
EN_FILLER_WORDS: frozenset[str] = frozenset(
    {
        "i",
        "me",
        "we",
        "us",
        "please",
        "a",
        "an",
        "some",
        "of",
        "more",
        "x",
        "times",
        "piece",
        "pieces",
        "pcs",
        "bottle",
        "bottles",
        "pack",
        "packs",
        "packet",
        "packets",
        "kg",
        "kgs",
        "kilo",
        "kilos",
        "litre",
        "litres",
        "liter",
        "liters",
    }
)

EN_SEARCH_FILLERS: tuple[str, ...] = ("for", "me", "please", "some", "items", "products")

EN_LEADING_PARTICLES: tuple[str, ...] = ("of", "the", "some")

EN_PRICE_PATTERNS: tuple[str, ...] = (
    r"\b(?:under|below|less than|cheaper than|within|max|maximum)\s*"
    r"(?:\$|₹|rs\.?|inr|usd)?\s*(?P<price>\d+(?:\.\d+)?)"
    r"(?:\s*(?:dollars?|bucks|rupees?|rs|inr)\b)?",
)

EN_BRAND_PATTERNS: tuple[str, ...] = (
    r"\b(?:by|from)\s+(?P<brand>[a-z0-9][a-z0-9\-]*)",
    r"\bbrand\s+(?P<brand>[a-z0-9][a-z0-9\-]*)",
)

EN_LIST_PHRASE = (
    r"\b(?:to|in|into|on|onto|from|off)\s+(?:my|the|our)?\s*"
    r"(?:shopping\s+|grocery\s+)?(?:list|cart|basket)\b"
)

HI_SEARCH_TRIGGERS: tuple[str, ...] = (
    "ढूँढ",
    "ढूंढ",
    "डूँढ",
    "डूंढ",
    "खोज",
    "कहाँ",
    "कहां",
    "दिखा",
)

HI_ADD_TRIGGERS: tuple[str, ...] = (
    "जोड़",
    "जोड",
    "चाहि",
    "लाना",
    "लाओ",
    "लाइए",
    "ले आओ",
    "लेआओ",
    "खरीद",
    "डालो",
    "डाल दो",
    "जोड़ दो",
    "जोड़ दें",
    "जोड़ दीजिए",
)

HI_REMOVE_TRIGGERS: tuple[str, ...] = (
    "हटा",
    "हटा दो",
    "हटा दें",
    "हटा दीजिए",
    "निकाल",
    "निकाल दो",
    "निकाल दें",
    "डिलीट",
    "डिलीट कर दो",
    "नहीं चाहि",
)

# Words that turn an add trigger into a removal ("मुझे ब्रेड नहीं चाहिए").
HI_ADD_NEGATIONS: tuple[str, ...] = ("नहीं",)

HI_NUMBER_WORDS: dict[str, int] = {
    "एक": 1,
    "ek": 1,
    "दो": 2,
    "do": 2,
    "तीन": 3,
    "teen": 3,
    "चार": 4,
    "char": 4,
    "chaar": 4,
    "पाँच": 5,
    "पांच": 5,
    "panch": 5,
    "paanch": 5,
    "छह": 6,
    "छः": 6,
    "छे": 6,
    "chhah": 6,
    "chhe": 6,
    "सात": 7,
    "saat": 7,
    "आठ": 8,
    "aath": 8,
    "नौ": 9,
    "nau": 9,
    "दस": 10,
    "das": 10,
    "ग्यारह": 11,
    "बारह": 12,
    "दर्जन": 12,
}

HI_FILLER_WORDS: frozenset[str] = frozenset(
    {
        "मुझे",
        "मेरे",
        "मेरी",
        "हमें",
        "कृपया",
        "प्लीज",
        "please",
        "और",
        "भी",
        "है",
        "हैं",
        "दे",
        "दें",
        "ले",
        "आओ",
        "किलो",
        "kg",
        "ग्राम",
        "लीटर",
        "पैकेट",
        "बोतल",
        "पीस",
    }
)

HI_SEARCH_FILLERS: tuple[str, ...] = (
    "मुझे",
    "मेरे",
    "लिए",
    "है",
    "हैं",
    "को",
    "कृपया",
)

HI_LEADING_PARTICLES: tuple[str, ...] = ("का", "की", "के")

HI_PRICE_PATTERNS: tuple[str, ...] = (
    r"(?:₹|रु\.?|rs\.?)?\s*(?P<price>\d+(?:\.\d+)?)\s*(?:रुपये|रुपए|रुपया|रुपय|रु\.?|₹|rs\.?)?\s*"
    r"(?:से\s+कम|से\s+सस्ता|से\s+सस्ते|के\s+अंदर|के\s+नीचे|तक)",
    r"(?:से\s+कम|के\s+अंदर)\s*(?:₹|रु\.?|रुपये|rs\.?)?\s*(?P<price>\d+(?:\.\d+)?)",
    *EN_PRICE_PATTERNS,
)

HI_BRAND_PATTERNS: tuple[str, ...] = (
    r"(?P<brand>\S+)\s+(?:ब्रांड|कंपनी)\s+(?:का|की|के)",
    r"(?:ब्रांड|brand)\s+(?P<brand>\S+)",
)

HI_LIST_PHRASE = r"(?:मेरी\s+|मेरे\s+)?(?:शॉपिंग\s+)?(?:लिस्ट|सूची)\s+(?:में|से)"
