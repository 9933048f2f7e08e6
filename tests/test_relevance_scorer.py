from campus_faq.engines.faq_index import FAQCorpusIndex
from campus_faq.engines.relevance_scorer import RelevanceScorer, score_item, word_overlap
from campus_faq.schemas import FAQItem


def test_short_queries_match_nothing(scorer):
    assert scorer.search("") == []
    assert scorer.search("ab") == []
    assert scorer.search("  ab  ") == []
    assert scorer.find_best_match("ab") is None


def test_score_weights():
    faq = FAQItem(question="What is the admission deadline?", answer="The admission deadline is in June.",
                  category="Admissions")
    # phrase in question 10, phrase in answer 5, words: admission 2+1, deadline 2+1
    assert score_item(faq, "admission deadline") == 21
    # only the category contains the plural
    assert score_item(faq, "admissions") == 3


def test_results_sorted_desc_with_stable_ties():
    index = FAQCorpusIndex([[
        {"question": "Library hours", "answer": "x"},
        {"question": "Library rules", "answer": "y"},
        {"question": "Library", "answer": "The library is central."},
    ]])
    results = RelevanceScorer(index).search("library")

    assert [faq.question for faq in results] == ["Library", "Library hours", "Library rules"]
    assert [faq.score for faq in results] == [18.0, 12.0, 12.0]


def test_search_does_not_mutate_corpus(index, scorer):
    scorer.search("admission deadline")
    assert all(faq.score is None for faq in index.get_all())


def test_best_match_admission_deadline(scorer):
    best = scorer.find_best_match("admission deadline")
    assert best.question == "What is the admission deadline?"
    assert best.score >= 10
    assert best.link == "https://example.edu/admissions"


def test_confidence_is_normalized(scorer):
    best = scorer.find_best_match("admission deadline")
    # 14 out of a 16-point ceiling for a two word query
    assert RelevanceScorer.confidence(best, "admission deadline") == 14 / 16
    assert RelevanceScorer.confidence(None, "admission deadline") == 0.0


def test_faq_match_uses_program_name_when_message_scores_low(scorer):
    match = scorer.find_faq_match("bca fee details xyz")
    assert match.question == "What is the duration of the BCA course?"


def test_faq_match_falls_back_to_vocabulary_keyword(scorer):
    match = scorer.find_faq_match("contacts")
    assert match.question == "How can I contact the office?"


def test_faq_match_falls_back_to_category_name(scorer):
    match = scorer.find_faq_match("general information please")
    assert match.question == "Where is the college located?"


def test_faq_match_none_for_unknown_terms(scorer):
    assert scorer.find_faq_match("zzxxqqpp") is None


def test_word_overlap_counts_message_words_in_question():
    faq = FAQItem(question="Are scholarships available?", answer="Yes")
    assert word_overlap(faq, "scholarships available now") == 2


def test_program_name_below_threshold_is_rejected():
    index = FAQCorpusIndex([[
        {"question": "Tell me about postgraduate study", "answer": "An mba is offered.", "category": "Programs"},
    ]])
    scorer = RelevanceScorer(index)

    # "mba" only in the answer: 5 + 1 = 6 against a ceiling of 13
    best = scorer.find_best_match("mba")
    assert RelevanceScorer.confidence(best, "mba") == 6 / 13
    assert scorer.find_by_specific_program("mba options") is None

    # the weak whole-message match is still returned
    match = scorer.find_faq_match("mba options")
    assert match.question == "Tell me about postgraduate study"
    assert match.score == 1.0
