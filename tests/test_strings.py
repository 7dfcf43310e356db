import os

from hypothesis import given, strategies as st

from algokit.strings import (
    DBF,
    AhoCorasick,
    SuffixArray,
    build_suffix_tree,
    prefix_function,
    sort_cyclic_shifts,
    z_function,
)
from algokit.structures import rmq

words = st.text(alphabet="abc", max_size=25)
nonempty = st.text(alphabet="abc", min_size=1, max_size=25)


def _lcp(a, b):
    return len(os.path.commonprefix([a, b]))


def test_prefix_function_value():
    assert prefix_function("abcabcd") == [0, 0, 0, 0, 1, 2, 3, 0]


@given(words)
def test_prefix_function_borders(s):
    p = prefix_function(s)
    assert len(p) == len(s) + 1
    for length in range(1, len(s) + 1):
        k = p[length]
        assert k < length
        assert s[:k] == s[length - k : length]
        assert all(s[:j] != s[length - j : length] for j in range(k + 1, length))


def test_z_function_value():
    assert z_function(prefix_function("aaaaa")) == [5, 4, 3, 2, 1]


@given(nonempty)
def test_z_function_matches(s):
    z = z_function(prefix_function(s))
    n = len(s)
    assert z[0] == n
    for i in range(1, n):
        assert s[i : i + z[i]] == s[: z[i]]
        assert i + z[i] == n or s[z[i]] != s[i + z[i]]


def test_sort_cyclic_shifts_empty():
    assert sort_cyclic_shifts("") == []


@given(nonempty)
def test_sort_cyclic_shifts_sorted(s):
    p = sort_cyclic_shifts(s)
    assert sorted(p) == list(range(len(s)))
    rotations = [s[i:] + s[:i] for i in p]
    assert rotations == sorted(rotations)


@given(words)
def test_suffix_array_order_and_lcp(s):
    sa = SuffixArray(s)
    assert sa.n == len(s) + 1
    assert sa.p[0] == len(s)
    suffixes = [s[i:] for i in sa.p]
    assert all(a < b for a, b in zip(suffixes, suffixes[1:]))
    for k in range(sa.n - 1):
        assert sa.lcp[k] == _lcp(suffixes[k], suffixes[k + 1])


@given(nonempty)
def test_suffix_array_lcp_query(s):
    sa = SuffixArray(s)
    table = rmq(sa.lcp)
    for i in range(len(s)):
        for j in range(len(s)):
            assert sa.lcp_query(i, j, table) == _lcp(s[i:], s[j:])


def test_suffix_tree_labels():
    sa = SuffixArray("abab")
    tree = build_suffix_tree(sa.p, sa.lcp)
    labels = {"abab"[n.idx : n.idx + n.length] if n.idx >= 0 else "" for n in tree}
    assert labels == {"", "abab", "bab", "ab", "b"}
    assert len(tree) == 5


@given(nonempty)
def test_suffix_tree_structure(s):
    sa = SuffixArray(s)
    tree = build_suffix_tree(sa.p, sa.lcp)
    assert tree[0].length == 0
    assert [n.length for n in tree] == sorted(n.length for n in tree)
    for node in tree[1:]:
        parent = tree[node.link]
        assert parent.length < node.length
        label = s[node.idx : node.idx + node.length]
        assert len(label) == node.length
        if node.link:
            assert s[parent.idx : parent.idx + parent.length] == label[: parent.length]
    # every non-empty suffix appears as a node label
    labels = {s[n.idx : n.idx + n.length] for n in tree[1:]}
    assert {s[i:] for i in range(len(s))} <= labels


def test_aho_corasick_classic():
    ac = AhoCorasick()
    patterns = ["he", "she", "his", "hers"]
    ids = [ac.add_string(w) for w in patterns]
    text = "ushers"
    found = sorted(ac.occurrences(text))
    expected = sorted(
        (i, ids[k]) for k, w in enumerate(patterns) for i in range(len(text)) if text[: i + 1].endswith(w)
    )
    assert found == expected


def test_aho_corasick_link_of_first_level():
    ac = AhoCorasick()
    u = ac.add_string("a")
    assert ac.get_link(u) == 0
    assert ac.go(0, "z") == 0


@given(
    st.lists(st.text(alphabet="ab", min_size=1, max_size=4), min_size=1, max_size=5),
    st.text(alphabet="ab", max_size=20),
)
def test_aho_corasick_finds_all(patterns, text):
    ac = AhoCorasick()
    ids = [ac.add_string(w) for w in patterns]
    found = list(ac.occurrences(text))
    expected = {
        (i, ids[k]) for k, w in enumerate(patterns) for i in range(len(text)) if text[: i + 1].endswith(w)
    }
    assert len(found) == len(set(found))
    assert set(found) == expected


def test_dbf_empty_key():
    assert DBF("abc").key(1, 0) == (-1, -1)


@given(st.data())
def test_dbf_compare(data):
    s = data.draw(nonempty)
    n = len(s)
    dbf = DBF(s)
    a = data.draw(st.integers(0, n))
    b = data.draw(st.integers(a, n))
    c = data.draw(st.integers(0, n))
    d = data.draw(st.integers(c, n))
    assert dbf.compare((a, b), (c, d)) == (s[a:b] < s[c:d])


@given(nonempty)
def test_dbf_cyclic_lcp(s):
    dbf = DBF(s)
    n = len(s)
    rotations = [s[i:] + s[:i] for i in range(n)]
    for i in range(n):
        for j in range(n):
            if rotations[i] != rotations[j]:
                assert dbf.lcp_query(i, j) == _lcp(rotations[i], rotations[j])