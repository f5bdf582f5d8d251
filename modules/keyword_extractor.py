import re
from collections import Counter

DEFAULT_TOP_N = 10

# Common English function words, carry no topical signal
STOP_WORDS = frozenset([
    'the', 'a', 'an', 'and', 'or', 'but', 'in', 'on', 'at', 'to', 'for',
    'of', 'with', 'by', 'from', 'is', 'was', 'are', 'were', 'be', 'been',
    'being', 'have', 'has', 'had', 'do', 'does', 'did', 'will', 'would',
    'could', 'should', 'may', 'might', 'shall', 'can', 'it', 'its', 'this',
    'that', 'these', 'those', 'i', 'you', 'he', 'she', 'we', 'they', 'me',
    'him', 'her', 'us', 'them', 'my', 'your', 'his', 'our', 'their', 'not',
    'no', 'nor', 'so', 'if', 'then', 'than', 'too', 'very', 'just', 'about',
    'above', 'after', 'again', 'all', 'also', 'am', 'any', 'as', 'because',
    'before', 'between', 'both', 'each', 'few', 'get', 'got', 'here',
    'how', 'into', 'more', 'most', 'much', 'must', 'new', 'now', 'off',
    'old', 'only', 'other', 'out', 'over', 'own', 'same', 'some', 'such',
    'up', 'what', 'when', 'where', 'which', 'while', 'who', 'why',
])

MIN_TOKEN_LENGTH = 3

_NON_LETTER_RE = re.compile(r'[^a-z\s]')


def tokenize(text):
    """Lowercase, strip everything but ASCII letters and drop short and stop words."""
    if not text:
        return []
    cleaned = _NON_LETTER_RE.sub(' ', text.lower())
    return [
        word for word in cleaned.split()
        if len(word) >= MIN_TOKEN_LENGTH and word not in STOP_WORDS
    ]


def extract_keywords(text, top_n=DEFAULT_TOP_N):
    """
    Return up to top_n distinct tokens ordered by descending frequency.
    Equal frequencies keep the order in which the tokens first appeared.
    """
    if top_n <= 0:
        return []

    words = tokenize(text)
    freq = Counter()
    first_seen = {}
    for index, word in enumerate(words):
        freq[word] += 1
        first_seen.setdefault(word, index)

    ranked = sorted(freq, key=lambda word: (-freq[word], first_seen[word]))
    return ranked[:top_n]
