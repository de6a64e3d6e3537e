"""Sense Categorization — keyword rules mapping a gloss to semantic categories.

Invariants:
    - Rules are evaluated in table order; result preserves that order
    - A rule matches if its pattern hits anywhere in the gloss (ASCII word boundaries, case-insensitive)
    - Result is deduplicated and capped at MAX_CATEGORIES
    - Empty gloss or no match → ()

Design Decisions:
    - One compiled alternation per rule instead of per-keyword scans
    - Keywords may appear in several rules ("bank", "charge", "move"): a gloss
      hitting a shared keyword is tagged with every rule that lists it
"""

import re
from dataclasses import dataclass

from leximap.core.domain_types import Category, MAX_CATEGORIES


@dataclass(frozen=True)
class CategoryRule:
    category: Category
    pattern: re.Pattern[str]

    def matches(self, gloss: str) -> bool:
        return self.pattern.search(gloss) is not None


def _rule(category: Category, *keywords: str) -> CategoryRule:
    alternation = "|".join(re.escape(k) for k in keywords)
    return CategoryRule(category, re.compile(rf"\b(?:{alternation})\b", re.IGNORECASE | re.ASCII))


CATEGORY_RULES: tuple[CategoryRule, ...] = (
    _rule(
        Category.PHYSICAL,
        "grab", "hold", "touch", "object", "hand", "surface", "edge",
        "weight", "move", "body", "material", "seize", "grip",
    ),
    _rule(
        Category.MENTAL,
        "think", "understand", "idea", "concept", "intellect", "imagine",
        "know", "believe", "plan", "comprehend", "grasp",
    ),
    _rule(
        Category.FINANCE,
        "money", "cost", "charge", "price", "debt", "credit", "bank", "pay", "fee",
    ),
    _rule(
        Category.PLACE,
        "river", "bank", "shore", "coast", "location", "place", "site", "ground",
    ),
    _rule(Category.SOUND, "sound", "tone", "sharp", "flat", "loud", "pitch", "noise"),
    _rule(Category.VALUE, "good", "bad", "moral", "nice", "awful", "worthy", "just"),
    _rule(
        Category.ACTION,
        "run", "charge", "attack", "act", "do", "perform", "execute",
        "proceed", "go", "move",
    ),
)


def categorize_gloss(
    gloss: str,
    rules: tuple[CategoryRule, ...] = CATEGORY_RULES,
    limit: int = MAX_CATEGORIES,
) -> tuple[str, ...]:
    """Return category labels for a gloss, rule-table order, at most `limit`."""
    if not gloss:
        return ()
    labels: list[str] = []
    for rule in rules:
        label = rule.category.value
        if label not in labels and rule.matches(gloss):
            labels.append(label)
    return tuple(labels[:limit])
