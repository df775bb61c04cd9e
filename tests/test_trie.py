from wordplay.trie import Trie


def test_insert_then_search():
    t = Trie()
    t.insert('apple')
    assert t.search('apple')
    assert not t.search('app')
    assert t.get_count() == 1


def test_repeat_insert_counts_once():
    t = Trie()
    t.insert('pear')
    t.insert('pear')
    assert t.get_count() == 1
    assert len(t) == 1


def test_invalid_input_is_ignored():
    t = Trie()
    t.insert('')
    t.insert(None)
    t.insert(42)
    assert t.get_count() == 0
    assert not t.root.children
    assert not t.search('')
    assert not t.search(None)
    assert not t.starts_with('')
    assert not t.remove('')
    assert not t.remove(None)


def test_starts_with_ignores_terminal_flag():
    t = Trie()
    t.insert('garden')
    assert t.starts_with('gar')
    assert t.starts_with('garden')
    assert not t.starts_with('gardens')
    assert not t.starts_with('x')


def test_remove_keeps_shared_prefix_words():
    t = Trie()
    t.insert('apple')
    t.insert('app')
    t.insert('apt')
    assert t.get_count() == 3

    assert t.remove('app')
    assert t.get_count() == 2
    assert not t.search('app')
    assert t.search('apple')
    assert t.search('apt')
    assert t.starts_with('app')


def test_remove_sibling_branch():
    t = Trie()
    t.insert('cat')
    t.insert('car')
    assert t.remove('cat')
    assert t.search('car')
    assert not t.search('cat')
    assert 't' not in t.root.children['c'].children['a'].children


def test_remove_absent_word_changes_nothing():
    t = Trie()
    t.insert('apple')
    assert not t.remove('app')
    assert not t.remove('apples')
    assert not t.remove('banana')
    assert t.get_count() == 1
    assert t.search('apple')
    assert t.starts_with('appl')


def test_remove_is_case_insensitive():
    t = Trie()
    t.insert('river')
    assert t.remove('RiVeR')
    assert t.get_count() == 0


def test_removing_everything_prunes_to_empty_root():
    t = Trie()
    words = ['a', 'an', 'and', 'ant', 'bee', 'been', 'zebra']
    for w in words:
        t.insert(w)
    for w in reversed(words):
        assert t.remove(w)
    assert t.get_count() == 0
    assert t.root.children == {}


def test_removing_longer_word_prunes_only_its_tail():
    t = Trie()
    t.insert('to')
    t.insert('tomato')
    assert t.remove('tomato')
    node = t.root.children['t'].children['o']
    assert node.is_terminal
    assert node.children == {}


def test_get_all_words_and_rebuild():
    t = Trie()
    words = ['apple', 'app', 'banana', 'band', 'b']
    for w in words:
        t.insert(w)
    exported = t.get_all_words()
    assert sorted(exported) == sorted(words)

    fresh = Trie()
    fresh.from_array(exported)
    assert fresh.get_count() == t.get_count()
    assert all(fresh.search(w) for w in words)


def test_from_array_replaces_contents_and_skips_junk():
    t = Trie()
    t.insert('old')
    t.from_array(['new', 'new', '', None, 7, 'word'])
    assert not t.search('old')
    assert sorted(t.get_all_words()) == ['new', 'word']
    assert t.get_count() == 2


def test_clear():
    t = Trie()
    t.insert('one')
    t.clear()
    assert t.get_count() == 0
    assert t.get_all_words() == []
    assert 'one' not in t
