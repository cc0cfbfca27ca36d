"""PassGuardian -- password analysis and custom wordlist utilities.

Core functions for heuristic strength scoring and for building candidate
wordlists from personal facts.  Everything here is pure and stateless; the
CLI and the Streamlit app are thin layers on top.
"""

import logging
import math
import re

logger = logging.getLogger(__name__)


# ── Strength analysis ──────────────────────────────────────────────────────

GUESSES_PER_SECOND = 1e9

_SPECIAL = re.compile(r'[!@#$%^&*(),.?":{}|<>]')

_PATTERNS = [
    ("Common passwords", re.compile(r"123456|password|qwerty|admin|letmein", re.I)),
    ("Repeated characters", re.compile(r"(.)\1{2,}")),
    ("Sequential numbers", re.compile(r"012|123|234|345|456|567|678|789|890")),
    (
        "Sequential letters",
        re.compile(
            "|".join(
                "abcdefghijklmnopqrstuvwxyz"[i : i + 3] for i in range(24)
            ),
            re.I,
        ),
    ),
]

# (minimum score, label, color tag), most severe check first
_STRENGTHS = [
    (80, "Very Strong", "success"),
    (60, "Strong", "primary"),
    (40, "Moderate", "warning"),
    (20, "Weak", "warning"),
]

_TIME_UNITS = [
    (60, 1, "seconds"),
    (3600, 60, "minutes"),
    (86400, 3600, "hours"),
    (31536000, 86400, "days"),
]
_SECONDS_PER_YEAR = 31536000

# Year counts at or above this are written in exponent notation
_SCIENTIFIC_FROM = 10 ** 21


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def _scientific(log10_value: float) -> str:
    """Format ``10 ** log10_value`` as ``d.dde+N`` without building the number."""
    whole = math.floor(log10_value)
    mantissa = round(10 ** (log10_value - whole), 2)
    if mantissa >= 10:
        mantissa /= 10
        whole += 1
    return f"{mantissa:.2f}e+{whole}"


def strength_for_score(score: int) -> tuple[str, str]:
    """Map a 0-100 score to its ``(label, color)`` pair."""
    for threshold, label, color in _STRENGTHS:
        if score >= threshold:
            return label, color
    return "Very Weak", "danger"


def time_to_crack(entropy: float) -> str:
    """Format the average-case brute-force time for *entropy* bits.

    Assumes :data:`GUESSES_PER_SECOND` and half of the ``2**entropy``
    keyspace searched.  The value is given in the coarsest unit that keeps
    it below the next unit's size, up to years.
    """
    try:
        seconds = 2.0 ** entropy / (2 * GUESSES_PER_SECOND)
    except OverflowError:
        seconds = math.inf

    for limit, size, unit in _TIME_UNITS:
        if seconds < limit:
            return f"{_round_half_up(seconds / size)} {unit}"

    if seconds != math.inf:
        years = _round_half_up(seconds / _SECONDS_PER_YEAR)
        if years < _SCIENTIFIC_FROM:
            return f"{years} years"

    # Large counts: work in log10, which also covers keyspaces past float range.
    log10_years = (entropy - 1) * math.log10(2) - math.log10(
        GUESSES_PER_SECOND * _SECONDS_PER_YEAR
    )
    return f"{_scientific(log10_years)} years"


def analyze_password(password: str) -> dict | None:
    """Score *password* and describe its weaknesses.

    Returns ``None`` for an empty password, otherwise a dict with keys:
        score           -- int 0-100
        strength        -- str label derived from score
        color           -- str presentation tag for the label
        entropy         -- int estimated bits
        characteristics -- dict (length, has_lower, has_upper, has_digit,
                           has_special)
        patterns        -- list of ``{"name": str}`` in fixed check order
        time_to_crack   -- str
    """
    if not password:
        return None

    length = len(password)
    has_lower = bool(re.search(r"[a-z]", password))
    has_upper = bool(re.search(r"[A-Z]", password))
    has_digit = bool(re.search(r"[0-9]", password))
    has_special = bool(_SPECIAL.search(password))

    charset = sum([
        26 if has_lower else 0,
        26 if has_upper else 0,
        10 if has_digit else 0,
        32 if has_special else 0,
    ])
    entropy = length * math.log2(charset) if charset else 0.0

    patterns = [{"name": name} for name, rx in _PATTERNS if rx.search(password)]

    score = 0
    if length >= 8:
        score += 25
    if length >= 12:
        score += 25
    if has_lower and has_upper:
        score += 20
    if has_digit:
        score += 15
    if has_special:
        score += 15
    score -= 10 * len(patterns)
    score = max(0, min(100, score))

    strength, color = strength_for_score(score)

    return {
        "score": score,
        "strength": strength,
        "color": color,
        "entropy": _round_half_up(entropy),
        "characteristics": {
            "length": length,
            "has_lower": has_lower,
            "has_upper": has_upper,
            "has_digit": has_digit,
            "has_special": has_special,
        },
        "patterns": patterns,
        "time_to_crack": time_to_crack(entropy),
    }


# ── Wordlist generation ────────────────────────────────────────────────────

WORDLIST_FIELDS = ("name", "birthdate", "pet", "company", "hobby", "location")
WORDLIST_FILENAME = "custom_wordlist.txt"

SUFFIXES = ["123", "!", "2023", "2024", "01"]
PREFIXES = ["my", "the", "i", "love"]

LEET_RULES = [
    ("a", ["@", "4"]),
    ("e", ["3"]),
    ("i", ["1", "!"]),
    ("o", ["0"]),
    ("s", ["5", "$"]),
    ("t", ["7"]),
    ("l", ["1"]),
    ("g", ["9"]),
    ("b", ["6"]),
    ("z", ["2"]),
]


def leetspeak_variants(word: str) -> list[str]:
    """Return *word* plus every leetspeak variant reachable through LEET_RULES.

    Each rule rewrites all occurrences of its letter (case-insensitive) in
    every variant produced so far, so substitutions compose across rules.
    The count grows multiplicatively with the number of mapped letters.
    """
    variants = [word]
    for letter, substitutions in LEET_RULES:
        rx = re.compile(re.escape(letter), re.I)
        produced = [
            rx.sub(lambda _m, s=sub: s, variant)
            for variant in variants
            for sub in substitutions
        ]
        variants = list(dict.fromkeys(variants + produced))
    logger.debug("%d leetspeak variants for %r", len(variants), word)
    return variants


def _seed_words(inputs: dict) -> list[str]:
    unknown = set(inputs) - set(WORDLIST_FIELDS)
    if unknown:
        raise ValueError(f"Unknown wordlist field(s): {', '.join(sorted(unknown))}")

    seeds = []
    for field in WORDLIST_FIELDS:
        value = inputs.get(field) or ""
        if value.strip():
            seeds.append(value)
    return seeds


def generate_wordlist(inputs: dict) -> list[str]:
    """Build a deduplicated candidate list from personal facts.

    *inputs* maps field names from :data:`WORDLIST_FIELDS` to free text.
    Blank, missing or ``None`` fields are skipped.  Raw values come first,
    then per-word case, leetspeak and affix transforms, then pairwise
    concatenations of the raw values in field order.  Order of first
    occurrence is kept and empty strings are dropped.
    """
    seeds = _seed_words(inputs)
    logger.debug("Generating wordlist from %d seed(s)", len(seeds))

    words = list(seeds)
    for seed in seeds:
        clean = seed.strip().lower()
        capitalized = clean[:1].upper() + clean[1:]

        words.append(clean)
        words.append(clean.upper())
        words.append(capitalized)
        words.extend(leetspeak_variants(clean))

        for suffix in SUFFIXES:
            words.append(clean + suffix)
            words.append(capitalized + suffix)
        for prefix in PREFIXES:
            words.append(prefix + clean)
            words.append(prefix + capitalized)

    for i, first in enumerate(seeds):
        for second in seeds[i + 1 :]:
            words.append(first + second)
            words.append(second + first)

    result = [w for w in dict.fromkeys(words) if w]
    logger.debug("Wordlist has %d unique candidates", len(result))
    return result


def export_wordlist(words: list[str]) -> str:
    """Render *words* as plain text, one candidate per line."""
    return "\n".join(words)
