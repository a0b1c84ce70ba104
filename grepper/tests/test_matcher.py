import pytest

from matching.backend.regex_engine.matcher import match_node, match_pattern
from matching.backend.regex_engine.parser import parse


@pytest.mark.parametrize("pattern,line,expected", [
    ("\\d+", "apple123", True),
    ("^\\d+$", "abc123", False),
    ("(a+)(b+)\\1", "aabbaa", True),
    ("a?b", "b", True),
    ("[^xyz]", "", False),
    ("(cat|dog)", "I have a dog", True),
])
def test_reference_scenarios(pattern, line, expected):
    assert match_pattern(line, pattern) is expected


@pytest.mark.parametrize("line,expected", [
    ("catcat", True),
    ("dogdog", True),
    ("catdog", False),
    ("dogcat", False),
])
def test_alternation_backreference(line, expected):
    assert match_pattern(line, "(cat|dog)\\1") is expected


@pytest.mark.parametrize("line", ["", "a", "bbb", "xyz aaa"])
def test_star_matches_anything(line):
    assert match_pattern(line, "a*")
    assert match_node(parse("a*"), list(line), 0, {})


def test_negated_class():
    assert match_pattern("d", "[^abc]")
    assert match_pattern("abcd", "[^abc]")
    assert not match_pattern("abcabc", "[^abc]")
    assert not match_pattern("", "[^abc]")


@pytest.mark.parametrize("pattern,line", [
    ("\\d+", "123"),
    ("c.t", "cat"),
    ("(x|y)z", "yz"),
    ("[abc]+d", "bad"),
])
def test_unanchored_match_survives_affixes(pattern, line):
    assert match_pattern(line, pattern)
    assert match_pattern("--" + line, pattern)
    assert match_pattern(line + "--", pattern)
    assert match_pattern("é" + line + "日", pattern)


def test_anchors_apply_to_whole_line():
    assert match_pattern("abc", "^abc$")
    assert not match_pattern("abcd", "^abc$")
    assert not match_pattern("xabc", "^abc")
    assert match_pattern("xabc", "abc$")
    assert not match_pattern("ab", "^b")
    assert match_pattern("", "^$")


def test_word_and_digit_classes():
    assert match_pattern("foo_bar", "^\\w+$")
    assert not match_pattern("foo-bar", "^\\w+$")
    assert match_pattern("é", "\\w")
    assert match_pattern("٣", "\\d")
    assert not match_pattern("abc", "\\d")


def test_dot_and_multibyte_input():
    assert match_pattern("日本語", "^..語$")
    assert not match_pattern("日本語", "^.語$")


def test_quantifiers():
    assert match_pattern("color", "^colou?r$")
    assert match_pattern("colour", "^colou?r$")
    assert not match_pattern("colouur", "^colou?r$")
    assert not match_pattern("ct", "^ca+t$")
    assert match_pattern("caaat", "^ca+t$")
    assert match_pattern("ct", "^ca*t$")


def test_end_positions_are_all_reachable_offsets():
    assert match_node(parse("a+"), list("aaab"), 0, {}) == {1, 2, 3}
    assert match_node(parse("a*"), list("aaab"), 0, {}) == {0, 1, 2, 3}
    assert match_node(parse("a?"), list("ab"), 0, {}) == {0, 1}
    assert match_node(parse("x|xy"), list("xy"), 0, {}) == {1, 2}
    assert match_node(parse("ab"), list("ac"), 0, {}) == set()


def test_zero_width_repeats_terminate():
    assert match_pattern("x", "(^)*x")
    assert match_pattern("a", "()+a")
    assert match_pattern("", "($)*")
    assert not match_pattern("y", "()*x")


def test_group_records_longest_span():
    caps = {}
    assert match_node(parse("(a+)b"), list("aab"), 0, caps) == {3}
    assert caps == {1: (0, 2)}


def test_nested_groups_merge_into_caller():
    caps = {}
    match_node(parse("((a)b)"), list("ab"), 0, caps)
    assert caps == {1: (0, 2), 2: (0, 1)}


def test_failed_group_leaves_captures_alone():
    caps = {1: (5, 6)}
    assert match_node(parse("(a)"), list("b"), 0, caps) == set()
    assert caps == {1: (5, 6)}


def test_first_matching_branch_owns_captures():
    caps = {}
    assert match_node(parse("(a)|(ab)"), list("ab"), 0, caps) == {1, 2}
    assert caps == {1: (0, 1)}


def test_only_one_span_kept_per_group():
    # group 1 keeps "aaa", so \1 can no longer fit after the extra 'a'
    assert not match_pattern("aaa", "^(a+)a\\1$")
    # and for the same reason a greedy group cannot be split in half
    assert not match_pattern("aaaa", "^(a+)\\1$")
    assert match_pattern("aa", "^(a)\\1$")


def test_backreferences():
    assert match_pattern("cat and cat", "(\\w+) and \\1")
    assert not match_pattern("cat and dog", "(\\w+) and \\1")
    assert match_pattern("3 red squares and 3 red circles",
                         "(\\d+) (\\w+) squares and \\1 \\2 circles")
    assert not match_pattern("3 red squares and 4 red circles",
                             "^(\\d+) (\\w+) squares and \\1 \\2 circles$")


def test_backreference_to_unset_group_fails():
    assert not match_pattern("x", "(a)|\\1")
    assert not match_pattern("", "(a)|\\1")


def test_backreference_past_end_of_input_fails():
    assert not match_pattern("abab", "^(ab)\\1\\1")


def test_invalid_backreference_matches_a_backslash():
    assert match_pattern("a\\b", "a\\1b")
    assert not match_pattern("a1b", "a\\1b")


def test_empty_class_and_empty_pattern():
    assert not match_pattern("abc", "[]")
    assert match_pattern("x", "[^]")
    assert not match_pattern("", "[^]")
    assert match_pattern("", "")
    assert match_pattern("anything", "")


def test_stray_close_paren_ignores_rest():
    assert match_pattern("a", "a)b")
