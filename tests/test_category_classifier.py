import pytest

from modules.category_classifier import (
    MIN_CATEGORY_SCORE,
    build_match_surface,
    categorize_content,
    classify_content,
    score_category,
)
from modules.category_registry import CATEGORIES, CategoryConfig, CategoryName
from modules.keyword_extractor import extract_keywords


def categorize(text):
    return categorize_content(text, extract_keywords(text))


def test_education_sentence():
    text = "The university student studied for the exam with the professor at school"
    assert categorize(text) == CategoryName.EDUCATION


def test_empty_text_is_others():
    assert categorize_content("", []) == CategoryName.OTHERS
    assert classify_content("", []).score == 0


def test_finance_terms():
    result = classify_content("bank investment stock portfolio dividend", [])
    assert result.category == CategoryName.FINANCE
    assert result.score == 15


def test_only_stop_words_is_others():
    assert categorize("the a an") == CategoryName.OTHERS


def test_single_substring_hit_stays_below_threshold():
    # "bank" only appears inside "embankment": one substring point
    result = classify_content("The embankment was steep", [])
    assert result.score == 1
    assert result.category == CategoryName.OTHERS


def test_whole_word_keyword_scores_membership_and_substring():
    # A standalone keyword counts both ways: 2 + 1 reaches the threshold
    result = classify_content("I like to bank on good weather", [])
    assert result == (CategoryName.FINANCE, MIN_CATEGORY_SCORE)


def test_supplied_keywords_extend_match_surface():
    text = "quarterly figures"
    assert classify_content(text, []).category == CategoryName.OTHERS
    result = classify_content(text, ['audit', 'loan'])
    assert result.category == CategoryName.FINANCE
    assert result.score == 4


def test_raw_tokens_keep_trailing_punctuation():
    surface = build_match_surface("visit the hospital. now", [])
    assert 'hospital.' in surface
    assert 'hospital' not in surface
    assert 'the' in surface
    assert 'now' in surface


def test_membership_and_substring_are_additive():
    lower_text = "doctor doctors"
    surface = build_match_surface(lower_text, [])
    assert score_category(lower_text, surface, ['doctor']) == 3
    assert score_category(lower_text, surface, ['nurse']) == 0


def test_tie_goes_to_earlier_registry_category():
    # "learning" belongs to both Education and Technology
    result = classify_content("learning", [])
    assert result == (CategoryName.EDUCATION, 3)


def test_custom_registry_order_breaks_ties():
    categories = (
        CategoryConfig(CategoryName.HEALTH, ('alpha',), '', ''),
        CategoryConfig(CategoryName.FINANCE, ('alpha',), '', ''),
        CategoryConfig(CategoryName.OTHERS, (), '', ''),
    )
    assert classify_content("alpha", [], categories).category == CategoryName.HEALTH


def test_custom_threshold():
    assert classify_content("bank", [], min_score=4).category == CategoryName.OTHERS
    assert classify_content("bank", [], min_score=1).category == CategoryName.FINANCE


def test_case_insensitive_text():
    assert categorize("HOSPITAL PATIENT DOCTOR") == CategoryName.HEALTH


def test_technology_document():
    text = "Our software team deployed the server to the cloud after debugging the database code"
    assert categorize(text) == CategoryName.TECHNOLOGY


def test_no_registry_vocabulary_means_others():
    text = "quiet purple morning over the hills"
    lower_text = text.lower()
    for category in CATEGORIES:
        assert not any(kw in lower_text for kw in category.keywords)
    assert categorize(text) == CategoryName.OTHERS


@pytest.mark.parametrize('text, keywords', [
    ("", []),
    ("   \n\t ", []),
    ("!!! ??? 123", ['123']),
    ("Ünïcödé ✓ 😀", []),
    ("x" * 10000, []),
    ("random words", ['not', 'registry', 'terms']),
])
def test_classifier_is_total(text, keywords):
    assert categorize_content(text, keywords) in set(CategoryName)


def test_others_never_wins_by_score():
    result = classify_content("nothing relevant", [])
    assert result.category == CategoryName.OTHERS
    assert result.score < MIN_CATEGORY_SCORE
