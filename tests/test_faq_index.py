import json

from campus_faq.config import Config
from campus_faq.engines.faq_index import FAQCorpusIndex, extract_index_keywords
from campus_faq.engines.relevance_scorer import RelevanceScorer


def test_loads_all_items_and_defaults_missing_category(index, sample_faqs):
    assert index.total_count() == len(sample_faqs)
    assert index.is_ready()
    last = index.get_all()[-1]
    assert last.question == "Is there a counselling service?"
    assert last.category == Config.DEFAULT_CATEGORY
    assert last.link == ""


def test_categories_in_first_seen_order(index):
    assert index.get_categories() == [
        "Admissions",
        "Fees & Financial Aid",
        "Programs & Departments",
        "Facilities & Campus Life",
        "General Information",
        "Placements & Careers",
    ]


def test_get_by_category_keeps_corpus_order(index):
    questions = [faq.question for faq in index.get_by_category("Facilities & Campus Life")]
    assert questions == [
        "Is hostel accommodation available?",
        "What are the library timings?",
        "Which clubs can students join?",
    ]
    assert index.get_by_category("Rare") == []


def test_keyword_index_uses_long_question_words():
    assert extract_index_keywords("What is the admission deadline?") == ["what", "admission", "deadline"]


def test_get_by_keyword(index):
    assert [faq.question for faq in index.get_by_keyword("Deadline")] == ["What is the admission deadline?"]
    assert index.get_by_keyword("the") == []


def test_sources_are_concatenated_in_order():
    index = FAQCorpusIndex([
        [{"question": "First?", "answer": "a", "category": "One"}],
        [{"question": "Second?", "answer": "b", "category": "Two"}],
    ])
    assert [faq.question for faq in index.get_all()] == ["First?", "Second?"]


def test_invalid_source_gives_empty_corpus():
    index = FAQCorpusIndex([[{"question": "Valid?", "answer": "yes"}, "not a record"]])
    assert index.total_count() == 0
    assert not index.is_ready()
    assert index.get_categories() == []


def test_from_files_reads_json_arrays(tmp_path):
    main = tmp_path / "main.json"
    web = tmp_path / "web.json"
    main.write_text(json.dumps([{"question": "Q1?", "answer": "A1", "category": "Admissions"}]), encoding="utf-8")
    web.write_text(json.dumps([{"question": "Q2?", "answer": "A2", "category": ""}]), encoding="utf-8")

    index = FAQCorpusIndex.from_files([main, web])

    assert index.total_count() == 2
    assert index.get_categories() == ["Admissions", Config.DEFAULT_CATEGORY]


def test_from_files_missing_file_gives_empty_corpus(tmp_path):
    index = FAQCorpusIndex.from_files([tmp_path / "missing.json"])
    assert index.total_count() == 0
    assert RelevanceScorer(index).search("admission") == []


def test_from_files_rejects_non_array(tmp_path):
    path = tmp_path / "bad.json"
    path.write_text(json.dumps({"question": "Q?"}), encoding="utf-8")
    assert FAQCorpusIndex.from_files([path]).total_count() == 0


def test_popular_takes_first_item_of_each_popular_category(index):
    assert [faq.question for faq in index.get_popular()] == [
        "What is the admission deadline?",
        "What is the duration of the BCA course?",
        "What is the fee structure?",
        "Is hostel accommodation available?",
        "Where is the college located?",
    ]


def test_category_stats(index):
    stats = {row["category"]: row["count"] for row in index.category_stats()}
    assert stats["Admissions"] == 2
    assert stats["General Information"] == 3
    assert sum(stats.values()) == index.total_count()


def test_categories_unchanged_after_searches(index, scorer):
    before = index.get_categories()
    for query in ("admission deadline", "fee", "zzxxqqpp", "hostel", "ab"):
        scorer.search(query)
    assert index.get_categories() == before
