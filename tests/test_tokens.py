from truthtable.tokens import *

tokens = Tokenlib.load(Tokenlib.base, Tokenlib.logical, Tokenlib.comparison)


def kinds(string):
    return [t.__class__ for t in tokenize(string, tokens)]


def test_empty_input():
    assert tokenize("") == []
    assert tokenize("   \n\t ") == []


def test_splits_on_whitespace_runs():
    tokenized = tokenize("a   and\nb\t( c )")
    assert [t.value for t in tokenized] == ["a", "and", "b", "(", "c", ")"]
    assert [(t.start, t.end) for t in tokenized[:3]] == [(0, 1), (4, 7), (8, 9)]


def test_keywords_are_case_insensitive():
    assert kinds("AND Or xOr IMPLY Eq NEQ Not") == [
        And,
        Or,
        Xor,
        Imply,
        Equal,
        NotEqual,
        Negation,
    ]


def test_symbols():
    assert kinds("∧ ∨ ⊕ → = ≠") == [And, Or, Xor, Imply, Equal, NotEqual]


def test_booleans():
    tokenized = tokenize("true FALSE True")
    assert kinds("true FALSE True") == [Boolean] * 3
    assert [t.value for t in tokenized] == [True, False, True]


def test_variables_keep_their_case():
    tokenized = tokenize("a A abc XyZ")
    assert kinds("a A abc XyZ") == [Variable] * 4
    assert [t.value for t in tokenized] == ["a", "A", "abc", "XyZ"]


def test_keyword_is_never_a_variable():
    assert Variable.match("and") is None
    assert Variable.match("NOT") is None
    assert Variable.match("andy") == "andy"


def test_unknown_words():
    # Not letters only, or glued to a parenthesis
    assert kinds("a1 _x & (a 1") == [Unknown] * 5


def test_load_puts_identifiers_last():
    loaded = Tokenlib.load(Tokenlib.base, Tokenlib.logical)
    assert loaded[-1] is Variable
    assert len(loaded) == len(set(loaded))


def test_only_ascii_case_variants_are_keywords():
    # Long s folds to s under Unicode rules
    assert kinds("falſe ANd") == [Unknown, And]
    assert Boolean.match("falſe") is None
