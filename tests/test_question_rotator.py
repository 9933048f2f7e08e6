from campus_faq.engines.faq_index import FAQCorpusIndex
from campus_faq.engines.question_rotator import RelatedQuestionRotator
from campus_faq.schemas import FAQItem


def _faqs(count, category="Admissions"):
    return [FAQItem(question=f"Question {i}?", answer=f"Answer {i}", category=category) for i in range(count)]


def _questions(items):
    return [faq.question for faq in items]


def test_empty_candidates():
    assert RelatedQuestionRotator().rotate("Admissions", []) == []


def test_consecutive_calls_do_not_repeat_with_enough_candidates():
    rotator = RelatedQuestionRotator(limit=3)
    candidates = _faqs(6)

    first = rotator.rotate("Admissions", candidates)
    second = rotator.rotate("Admissions", candidates)

    assert _questions(first) == ["Question 0?", "Question 1?", "Question 2?"]
    assert _questions(second) == ["Question 3?", "Question 4?", "Question 5?"]
    assert not set(_questions(first)) & set(_questions(second))


def test_offset_advances_per_category():
    rotator = RelatedQuestionRotator(limit=3)
    rotator.rotate("Admissions", _faqs(6))
    assert rotator.offset_for("Admissions") == 3
    assert rotator.offset_for("Fees") == 0


def test_top_up_after_exhaustion_has_no_duplicates():
    rotator = RelatedQuestionRotator(limit=3)
    candidates = _faqs(4)

    rotator.rotate("Admissions", candidates)
    second = rotator.rotate("Admissions", candidates)

    assert _questions(second) == ["Question 3?", "Question 0?", "Question 1?"]
    assert len(set(_questions(second))) == 3


def test_fewer_candidates_than_limit():
    rotator = RelatedQuestionRotator(limit=3)
    assert _questions(rotator.rotate("Admissions", _faqs(2))) == ["Question 0?", "Question 1?"]


def test_recently_shown_cleared_when_over_capacity():
    rotator = RelatedQuestionRotator(limit=3, recent_capacity=4)
    candidates = _faqs(6)

    rotator.rotate("Admissions", candidates)
    assert len(rotator.recently_shown) == 3

    rotator.rotate("Admissions", candidates)
    assert rotator.recently_shown == set()


def test_related_for_excludes_answered_and_ranks_by_overlap():
    rotator = RelatedQuestionRotator(limit=2)
    answered = FAQItem(question="What is the admission deadline?", answer="June", category="Admissions")
    same_category = [
        answered,
        FAQItem(question="Where is the campus?", answer="x", category="Admissions"),
        FAQItem(question="How do I apply for admission online?", answer="y", category="Admissions"),
        FAQItem(question="Is there an admission fee?", answer="z", category="Admissions"),
    ]

    related = rotator.related_for(answered, "admission fee online", same_category)

    assert _questions(related) == ["How do I apply for admission online?", "Is there an admission fee?"]


def test_rare_category_returns_empty():
    index = FAQCorpusIndex([[{"question": "What is the admission deadline?", "answer": "June",
                              "category": "Admissions"}]])
    rotator = RelatedQuestionRotator()
    answered = index.get_by_category("Admissions")[0]

    assert rotator.rotate("Rare", index.get_by_category("Rare")) == []
    assert rotator.related_for(answered, "admission deadline", index.get_by_category("Admissions")) == []


def test_reset_clears_state():
    rotator = RelatedQuestionRotator(limit=3)
    rotator.rotate("Admissions", _faqs(6))
    rotator.reset()
    assert rotator.offset_for("Admissions") == 0
    assert rotator.recently_shown == set()


def test_explicit_zero_limit_selects_nothing():
    rotator = RelatedQuestionRotator(limit=0)
    assert rotator.limit == 0
    assert rotator.rotate("Admissions", _faqs(5)) == []
    assert rotator.offset_for("Admissions") == 0
