# modules/category_registry.py
import logging
from collections import namedtuple
from enum import Enum

logger = logging.getLogger(__name__)


class CategoryName(str, Enum):
    EDUCATION = 'Education'
    FINANCE = 'Finance'
    HEALTH = 'Health'
    TECHNOLOGY = 'Technology'
    OTHERS = 'Others'

    def __str__(self):
        return self.value


CategoryConfig = namedtuple('CategoryConfig', ['name', 'keywords', 'icon', 'color'])

CATEGORIES = (
    CategoryConfig(
        name=CategoryName.EDUCATION,
        keywords=(
            'school', 'university', 'student', 'teacher', 'course', 'lecture',
            'exam', 'homework', 'study', 'research', 'thesis', 'academic',
            'learning', 'education', 'curriculum', 'syllabus', 'grade', 'degree',
            'professor', 'college', 'tutorial', 'lesson', 'training', 'classroom',
            'scholarship', 'diploma', 'assignment', 'textbook', 'library',
        ),
        icon='📚',
        color='category-education',
    ),
    CategoryConfig(
        name=CategoryName.FINANCE,
        keywords=(
            'bank', 'money', 'investment', 'stock', 'budget', 'tax', 'revenue',
            'profit', 'loss', 'expense', 'income', 'salary', 'payment', 'loan',
            'credit', 'debit', 'financial', 'accounting', 'audit', 'fund',
            'portfolio', 'dividend', 'interest', 'mortgage', 'insurance',
            'transaction', 'balance', 'asset', 'liability', 'equity',
        ),
        icon='💰',
        color='category-finance',
    ),
    CategoryConfig(
        name=CategoryName.HEALTH,
        keywords=(
            'health', 'medical', 'doctor', 'patient', 'hospital', 'medicine',
            'treatment', 'diagnosis', 'symptom', 'disease', 'therapy', 'surgery',
            'nurse', 'clinic', 'prescription', 'vaccine', 'fitness', 'nutrition',
            'mental', 'wellness', 'healthcare', 'pharmacy', 'dental', 'cardiac',
            'blood', 'vitamin', 'exercise', 'diet', 'allergy', 'infection',
        ),
        icon='🏥',
        color='category-health',
    ),
    CategoryConfig(
        name=CategoryName.TECHNOLOGY,
        keywords=(
            'software', 'hardware', 'computer', 'programming', 'code', 'algorithm',
            'data', 'database', 'network', 'server', 'cloud', 'api', 'web',
            'mobile', 'app', 'developer', 'engineering', 'ai', 'machine',
            'learning', 'automation', 'cybersecurity', 'blockchain', 'iot',
            'digital', 'tech', 'system', 'framework', 'deployment', 'debug',
        ),
        icon='💻',
        color='category-technology',
    ),
    # Fallback: never scored, only assigned when nothing reaches the threshold
    CategoryConfig(
        name=CategoryName.OTHERS,
        keywords=(),
        icon='📁',
        color='category-others',
    ),
)

FALLBACK_CATEGORY = CategoryName.OTHERS


def category_names():
    return [category.name for category in CATEGORIES]


def get_category_config(name):
    """Look up a category by enum member or string value.

    Unknown names fall back to the last registered entry (Others).
    """
    for category in CATEGORIES:
        if category.name == name:
            return category
    logger.warning("Unknown category %r, falling back to %s", name, CATEGORIES[-1].name)
    return CATEGORIES[-1]


def parse_category_name(value):
    """Convert a user supplied string to a CategoryName, raising ValueError if invalid."""
    try:
        return CategoryName(value)
    except ValueError:
        raise ValueError(f"Invalid category: {value!r}") from None
