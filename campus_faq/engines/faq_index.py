"""
FAQ Corpus Index - immutable in-memory view of the FAQ corpus

Loads the question/answer collections once at start-up and builds two lookups:
1. category -> FAQs (insertion order)
2. question keyword (lowercase, > 3 chars) -> FAQs

Nothing is inserted, updated or deleted after load.
"""
import json
import re
from pathlib import Path
from typing import Dict, Iterable, List, Mapping, Optional, Sequence, Tuple, Union

from pydantic import ValidationError

from campus_faq.config import Config
from campus_faq.schemas import FAQItem
from campus_faq.utils.logging_utils import get_logger

logger = get_logger("faq_index")

FAQSource = Sequence[Union[FAQItem, Mapping]]


def extract_index_keywords(text: str) -> List[str]:
    """Distinct lowercase words longer than 3 characters, punctuation stripped."""
    words = re.sub(r"[^\w\s]", "", str(text or "").lower()).split()
    seen = []
    for word in words:
        if len(word) > 3 and word not in seen:
            seen.append(word)
    return seen


class CorpusLoadError(Exception):
    """Raised internally when a corpus source cannot be read or parsed."""


class FAQCorpusIndex:
    def __init__(self, sources: Optional[Iterable[FAQSource]] = None):
        self._faqs: Tuple[FAQItem, ...] = ()
        self._by_category: Dict[str, Tuple[FAQItem, ...]] = {}
        self._by_keyword: Dict[str, Tuple[FAQItem, ...]] = {}
        if sources is not None:
            self.load(sources)

    # ------------------------------------------------------------------
    # Loading
    # ------------------------------------------------------------------

    @classmethod
    def from_files(cls, paths: Sequence[Union[str, Path]]) -> "FAQCorpusIndex":
        """Build an index from JSON array files. Any failure yields an empty corpus."""
        index = cls()
        try:
            sources = [_read_json_array(path) for path in paths]
        except CorpusLoadError as e:
            logger.error(f"FAQ corpus load failed, continuing with empty corpus: {e}")
            return index
        index.load(sources)
        return index

    def load(self, sources: Iterable[FAQSource]) -> None:
        """Concatenate all sources into the corpus and build the index."""
        try:
            faqs = []
            counts = []
            for source in sources:
                items = [_coerce_item(record) for record in source]
                counts.append(len(items))
                faqs.extend(items)
        except (TypeError, ValueError, ValidationError) as e:
            logger.error(f"Error loading FAQ data: {e}")
            faqs = []
            counts = []

        self._faqs = tuple(faqs)
        self.build_index()
        logger.info(f"Loaded FAQ sources {counts} (total {len(self._faqs)})")

    def build_index(self) -> None:
        by_category: Dict[str, List[FAQItem]] = {}
        by_keyword: Dict[str, List[FAQItem]] = {}

        for faq in self._faqs:
            by_category.setdefault(faq.category, []).append(faq)
            for keyword in extract_index_keywords(faq.question):
                by_keyword.setdefault(keyword, []).append(faq)

        self._by_category = {k: tuple(v) for k, v in by_category.items()}
        self._by_keyword = {k: tuple(v) for k, v in by_keyword.items()}
        logger.debug(
            f"Built search index: {len(self._by_category)} categories, {len(self._by_keyword)} keywords"
        )

    # ------------------------------------------------------------------
    # Read API
    # ------------------------------------------------------------------

    def get_all(self) -> List[FAQItem]:
        return list(self._faqs)

    def get_by_category(self, category: str) -> List[FAQItem]:
        return list(self._by_category.get(category, ()))

    def get_by_keyword(self, keyword: str) -> List[FAQItem]:
        return list(self._by_keyword.get(str(keyword or "").lower(), ()))

    def get_categories(self) -> List[str]:
        """Distinct categories in first-seen corpus order."""
        return list(dict.fromkeys(faq.category for faq in self._faqs))

    def get_popular(self) -> List[FAQItem]:
        """First FAQ of each popular category that has any."""
        popular = []
        for category in Config.POPULAR_CATEGORIES:
            items = self._by_category.get(category)
            if items:
                popular.append(items[0])
        return popular

    def total_count(self) -> int:
        return len(self._faqs)

    def category_stats(self) -> List[Dict[str, object]]:
        counts: Dict[str, int] = {}
        for faq in self._faqs:
            counts[faq.category] = counts.get(faq.category, 0) + 1
        return [{"category": category, "count": count} for category, count in counts.items()]

    def is_ready(self) -> bool:
        return len(self._faqs) > 0

    def __len__(self) -> int:
        return len(self._faqs)


def _coerce_item(record) -> FAQItem:
    if isinstance(record, FAQItem):
        if not record.category.strip():
            return record.model_copy(update={"category": Config.DEFAULT_CATEGORY})
        return record
    if not isinstance(record, Mapping):
        raise TypeError(f"FAQ record must be a mapping, got {type(record).__name__}")
    return FAQItem.model_validate(dict(record))


def _read_json_array(path: Union[str, Path]) -> list:
    file_path = Path(path)
    try:
        with open(file_path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise CorpusLoadError(f"{file_path}: {e}") from e
    if not isinstance(data, list):
        raise CorpusLoadError(f"{file_path}: expected a JSON array, got {type(data).__name__}")
    return data
