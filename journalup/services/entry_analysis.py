"""Keyword-based sentiment and growth-indicator scoring for journal entries."""

import re

from journalup.schemas.ai import EntryAnalysis, GrowthIndicator, SentimentAnalysis

POSITIVE_WORDS = frozenset({
    "amazing", "calm", "confident", "excited", "glad", "good", "grateful", "great",
    "happy", "hopeful", "joy", "love", "motivated", "proud", "relieved", "thankful",
    "wonderful", "enjoyed", "accomplished", "progress",
})
NEGATIVE_WORDS = frozenset({
    "angry", "anxious", "awful", "bad", "disappointed", "exhausted", "failed",
    "frustrated", "hopeless", "hurt", "lonely", "overwhelmed", "sad", "scared",
    "stressed", "stuck", "terrible", "tired", "upset", "worried",
})

GROWTH_KEYWORDS: dict[str, tuple[str, ...]] = {
    "resilience": ("bounced back", "kept going", "setback", "recover", "despite", "didn't give up"),
    "effort": ("practiced", "worked hard", "effort", "tried", "studied", "pushed myself"),
    "challenge": ("challenge", "difficult", "hard", "outside my comfort zone", "struggled"),
    "feedback": ("feedback", "criticism", "review", "advice", "suggested"),
    "learning": ("learned", "realized", "understood", "discovered", "figured out", "lesson"),
}

SENTIMENT_THRESHOLD = 0.3
# Number of sentiment words at which confidence saturates.
SENTIMENT_SATURATION = 5

_WORD_RE = re.compile(r"[a-z']+")
_SENTENCE_RE = re.compile(r"(?<=[.!?])\s+")


def score_sentiment(content: str) -> SentimentAnalysis:
    """Score in [-1, 1] from the balance of positive and negative words."""
    words = _WORD_RE.findall(content.lower())
    positive = sum(1 for w in words if w in POSITIVE_WORDS)
    negative = sum(1 for w in words if w in NEGATIVE_WORDS)
    total = positive + negative
    score = (positive - negative) / total if total else 0.0

    if score > SENTIMENT_THRESHOLD:
        label = "positive"
    elif score < -SENTIMENT_THRESHOLD:
        label = "negative"
    else:
        label = "neutral"
    return SentimentAnalysis(
        score=round(score, 2),
        label=label,
        confidence=round(min(1.0, total / SENTIMENT_SATURATION), 2),
    )


def extract_growth_indicators(content: str) -> list[GrowthIndicator]:
    """One indicator per metric type whose keywords appear, most confident first."""
    content_lower = content.lower()
    sentences = [s.strip() for s in _SENTENCE_RE.split(content) if s.strip()]
    indicators = []
    for indicator_type, keywords in GROWTH_KEYWORDS.items():
        matched = [k for k in keywords if k in content_lower]
        if not matched:
            continue
        evidence = next(
            (s for s in sentences if any(k in s.lower() for k in matched)),
            matched[0],
        )
        indicators.append(
            GrowthIndicator(
                type=indicator_type,
                confidence=round(min(0.95, 0.6 + len(matched) * 0.1), 2),
                evidence=evidence,
            )
        )
    indicators.sort(key=lambda i: i.confidence, reverse=True)
    if not indicators:
        return [
            GrowthIndicator(
                type="learning",
                confidence=0.0,
                evidence="No specific indicators found",
            )
        ]
    return indicators


def analyze_entry_content(content: str) -> EntryAnalysis:
    return EntryAnalysis(
        sentiment=score_sentiment(content),
        growth_indicators=extract_growth_indicators(content),
    )
