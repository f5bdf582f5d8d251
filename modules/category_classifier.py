import logging
from collections import namedtuple

from modules.category_registry import CATEGORIES, FALLBACK_CATEGORY

logger = logging.getLogger(__name__)

# Minimum evidence; a single incidental substring hit scores only 1
MIN_CATEGORY_SCORE = 3

ClassificationResult = namedtuple('ClassificationResult', ['category', 'score'])


def build_match_surface(lower_text, keywords):
    # Raw whitespace tokens keep their punctuation and are not stop-word filtered
    surface = set(keywords)
    surface.update(word for word in lower_text.split() if len(word) > 2)
    return surface


def score_category(lower_text, match_surface, category_keywords):
    score = 0
    for kw in category_keywords:
        if kw in match_surface:
            score += 2
        if kw in lower_text:
            score += 1
    return score


def classify_content(text, keywords, categories=CATEGORIES, min_score=MIN_CATEGORY_SCORE):
    lower_text = (text or '').lower()
    match_surface = build_match_surface(lower_text, keywords or ())

    best_category = FALLBACK_CATEGORY
    best_score = 0
    for category in categories:
        if category.name == FALLBACK_CATEGORY:
            continue
        score = score_category(lower_text, match_surface, category.keywords)
        logger.debug("Category %s scored %d", category.name, score)
        # Strict comparison: earlier categories win ties
        if score > best_score:
            best_score = score
            best_category = category.name

    if best_score >= min_score:
        return ClassificationResult(best_category, best_score)
    return ClassificationResult(FALLBACK_CATEGORY, best_score)


def categorize_content(text, keywords):
    return classify_content(text, keywords).category
