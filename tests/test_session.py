from campus_faq.core.session import SessionStore, get_conversation_history, session_stats


def test_same_key_returns_same_session():
    store = SessionStore(limit=10)
    assert store.get("a") is store.get("a")
    assert store.get("a") is not store.get("b")


def test_missing_key_gets_unstored_session():
    store = SessionStore(limit=10)
    first = store.get(None)
    second = store.get("")

    assert first is not second
    assert first.key.startswith("ephemeral:")
    assert len(store) == 0


def test_least_recently_used_session_is_evicted():
    store = SessionStore(limit=2)
    store.get("a")
    store.get("b")
    store.get("a")
    store.get("c")

    assert store.keys() == ["a", "c"]
    assert store.peek("b") is None


def test_drop_and_history():
    store = SessionStore(limit=10)
    store.get("a").context.push("Hello there")

    assert get_conversation_history(store, "a") == ["hello there"]
    assert get_conversation_history(store, "missing") == []
    assert store.drop("a")
    assert not store.drop("a")


def test_session_stats():
    store = SessionStore(limit=7)
    store.get("a")
    assert session_stats(store) == {"active_sessions": 1, "limit": 7}


def test_explicit_zero_limit_is_kept():
    store = SessionStore(limit=0)
    store.get("a")
    assert store.limit == 0
    assert len(store) == 0
