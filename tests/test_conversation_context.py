from campus_faq.engines.conversation_context import ConversationContextTracker, normalize_message


def test_normalize_message():
    assert normalize_message("  What's the FEE?!  ") == "what s the fee"


def test_window_is_bounded_fifo():
    tracker = ConversationContextTracker(max_messages=5)
    for i in range(10):
        tracker.push(f"message {i}")

    assert len(tracker) == 5
    assert tracker.messages() == [f"message {i}" for i in range(5, 10)]


def test_empty_context_summary():
    summary = ConversationContextTracker().analyze()
    assert (summary.topic, summary.mood, summary.depth) == ("general", "neutral", "surface")


def test_topic_is_most_frequent_keyword_in_recent_messages():
    tracker = ConversationContextTracker()
    tracker.push("Tell me about the hostel")
    tracker.push("What is the fee for MBA?")
    tracker.push("Can I pay the fee online?")
    tracker.push("Is there a fee waiver?")

    summary = tracker.analyze()
    assert summary.topic == "fee"
    assert summary.depth == "deep"


def test_mood_from_sentiment_words():
    tracker = ConversationContextTracker()
    tracker.push("I am worried about exams")
    assert tracker.analyze().mood == "negative"

    tracker.push("great, I love the campus")
    assert tracker.analyze().mood == "positive"


def test_depth_is_surface_for_short_conversations():
    tracker = ConversationContextTracker()
    tracker.push("hostel")
    tracker.push("library")
    assert tracker.analyze().depth == "surface"


def test_clear():
    tracker = ConversationContextTracker()
    tracker.push("hello")
    tracker.clear()
    assert len(tracker) == 0


def test_explicit_zero_window_keeps_nothing():
    tracker = ConversationContextTracker(max_messages=0)
    tracker.push("What is the fee?")

    assert tracker.max_messages == 0
    assert tracker.messages() == []
    assert tracker.analyze().topic == "general"
