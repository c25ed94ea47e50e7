"""
Contract category classification.

Maps a free-text product name (as typed on the subscription form) to a
ContractCategory using an ordered list of keyword rules, and provides
the display labels used for each category.
Uses only stdlib (re, unicodedata) for text normalization.
"""

import re
import unicodedata

from src.core.entities.contract import ContractCategory
from src.core.exceptions import ClassificationError
from src.core.interfaces.classifier import IContractClassifier

# Ordered (pattern, category) rules, evaluated against the normalized
# product name. First match wins, so more specific lines come first.
DEFAULT_CATEGORY_RULES: tuple[tuple[str, ContractCategory], ...] = (
    (r"emprunteur|\bpret\b", ContractCategory.BORROWER_INSURANCE),
    (r"prevoyance", ContractCategory.PROVIDENT),
    (r"mutuelle|\bsante\b|complementaire", ContractCategory.HEALTH_MUTUAL),
    (
        r"\bper\b|\bperp\b|plan epargne retraite|\bretraite\b",
        ContractCategory.RETIREMENT_PLAN,
    ),
    (
        r"assurance[ -]vie|\bepargne\b|capitalisation",
        ContractCategory.LIFE_INSURANCE,
    ),
)

_CATEGORY_DISPLAY_NAMES: dict[ContractCategory, str] = {
    ContractCategory.RETIREMENT_PLAN: "Plan Épargne Retraite",
    ContractCategory.LIFE_INSURANCE: "Assurance Vie / Épargne",
    ContractCategory.HEALTH_MUTUAL: "Mutuelle Santé",
    ContractCategory.PROVIDENT: "Prévoyance",
    ContractCategory.BORROWER_INSURANCE: "Assurance Emprunteur",
}

OTHER_DISPLAY_NAME = "Autre"


def _normalize(text: str) -> str:
    """Lowercase, strip accents and collapse whitespace."""
    decomposed = unicodedata.normalize("NFKD", text)
    stripped = "".join(c for c in decomposed if not unicodedata.combining(c))
    return re.sub(r"\s+", " ", stripped.strip().lower())


class KeywordContractClassifier(IContractClassifier):
    """
    Classifier driven by ordered keyword rules.

    Matching is case and accent insensitive. Anything that matches no
    rule, including empty text, is ContractCategory.OTHER.
    """

    def __init__(
        self,
        rules: tuple[tuple[str, ContractCategory], ...] | None = None,
    ) -> None:
        self._rules = []
        for pattern, category in rules or DEFAULT_CATEGORY_RULES:
            try:
                compiled = re.compile(pattern)
                category = ContractCategory(category)
            except (re.error, ValueError) as e:
                raise ClassificationError(pattern, str(e)) from e
            self._rules.append((compiled, category))

    def get_contract_category(self, product: str) -> ContractCategory:
        normalized = _normalize(product or "")
        if not normalized:
            return ContractCategory.OTHER

        for pattern, category in self._rules:
            if pattern.search(normalized):
                return category

        return ContractCategory.OTHER


_default_classifier = KeywordContractClassifier()


def get_contract_category(product: str) -> ContractCategory:
    """Classify a product name with the default keyword rules."""
    return _default_classifier.get_contract_category(product)


def get_category_display_name(category: ContractCategory | str) -> str:
    """Return the label shown to users for a category; unknown values are "Autre"."""
    try:
        category = ContractCategory(category)
    except ValueError:
        return OTHER_DISPLAY_NAME
    return _CATEGORY_DISPLAY_NAMES.get(category, OTHER_DISPLAY_NAME)
