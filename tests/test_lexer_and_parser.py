import pytest
from hypothesis import given, strategies as st

from mal.errors import ReadError, UnexpectedLength, UnexpectedToken
from mal.printer import render
from mal.reader.parser import lex, read_str, read_all
from mal.types.hash_map import HashMap
from mal.types.nil import Nil, Undefined
from mal.types.sequence import List, Vector
from mal.types.symbol import Keyword, Symbol


@pytest.mark.parametrize(
    "source,expected",
    [
        ("a", [("atom", "a")]),
        ("(a b)", [("special", "("), ("atom", "a"), ("atom", "b"), ("special", ")")]),
        ("[1, 2]", [("special", "["), ("atom", "1"), ("atom", "2"), ("special", "]")]),
        ("~@xs", [("splice", "~@"), ("atom", "xs")]),
        ("~x", [("special", "~"), ("atom", "x")]),
        ("@a", [("special", "@"), ("atom", "a")]),
        ("'a", [("special", "'"), ("atom", "a")]),
        ('"hi there"', [("string", '"hi there"')]),
        ('"say \\"hi\\""', [("string", '"say \\"hi\\""')]),
        (" ; comment\n a b", [("atom", "a"), ("atom", "b")]),
        ("a;trailing", [("atom", "a")]),
        ("", []),
        ("  ,,  ", []),
    ]
)
def test_lexer_basic(source, expected):
    tokens = list(lex(source))
    assert tokens == expected


@pytest.mark.parametrize(
    "source, expected",
    [
        ("nil", Nil),
        ("true", True),
        ("false", False),
        ("undefined", Undefined),
        ("123", 123),
        ("-45", -45),
        ("3.14", 3.14),
        ("-0.5", -0.5),
        ('"hello"', "hello"),
        ('"a\\nb"', "a\nb"),
        ('"q\\"q"', 'q"q'),
        ('"back\\\\slash"', "back\\slash"),
        (":kw", Keyword("kw")),
        ("abc", Symbol("abc")),
        ("&", Symbol("&")),
        ("_private", Symbol("_private")),
        ("reset!", Symbol("reset!")),
    ]
)
def test_parse_atoms(source, expected):
    assert read_str(source) is expected or read_str(source) == expected


def test_integer_and_float_kinds():
    assert type(read_str("7")) is int
    assert type(read_str("7.0")) is float


def test_every_token_carries_its_kind():
    kinds = [kind for kind, _ in lex('(~@a "s" 12 ; c\n)')]
    assert kinds == ["special", "splice", "atom", "string", "atom", "special"]


@pytest.mark.parametrize(
    "source",
    ["0.00001", "-0.0000015", "100000000000000000.0", "123456789012345678901234.5"],
)
def test_floats_without_exponent_read_back(source):
    value = read_str(source)
    text = render(value)
    assert "e" not in text
    assert read_str(text) == value
    assert type(read_str(text)) is float


def test_literal_singletons_are_identical():
    assert read_str("nil") is Nil
    assert read_str("true") is True
    assert read_str("false") is False


def test_keywords_and_symbols_are_interned():
    assert read_str(":same") is read_str(":same")
    assert read_str("same") is read_str("same")
    assert read_str(":same") is not read_str("same")


def test_lists_vectors_maps():
    lst = read_str("(a (b 1) [2 3])")
    assert isinstance(lst, List)
    assert lst == List((Symbol("a"), List((Symbol("b"), 1)), Vector((2, 3))))
    assert isinstance(lst[2], Vector)

    m = read_str('{:a 1 "b" [2]}')
    assert isinstance(m, HashMap)
    assert m.get(Keyword("a")) == 1
    assert m.get("b") == Vector((2,))


def test_reader_macros():
    assert read_str("@a") == List((Symbol("deref"), Symbol("a")))
    assert read_str("'a") == List((Symbol("quote"), Symbol("a")))
    assert read_str("`(a ~b ~@c)") == List((
        Symbol("quasiquote"),
        List((
            Symbol("a"),
            List((Symbol("unquote"), Symbol("b"))),
            List((Symbol("splice-unquote"), Symbol("c"))),
        )),
    ))


def test_empty_and_comment_only_input_yields_no_form():
    assert read_str("") is None
    assert read_str("   ") is None
    assert read_str("; just a comment") is None


def test_only_first_form_is_read():
    assert read_str("1 2 3") == 1
    assert read_all("1 (2) ; c\n 3") == [1, List((2,)), 3]


@pytest.mark.parametrize("source", ["(1 2", "[1 (2", "{:a 1", "'", "@"])
def test_unterminated_forms(source):
    with pytest.raises(ReadError, match="unexpected end of input"):
        read_str(source)


@pytest.mark.parametrize("source", ["(1 2]", "[1 2)", ")", "]", "}"])
def test_mismatched_brackets(source):
    with pytest.raises(ReadError):
        read_str(source)


def test_unterminated_string():
    with pytest.raises(ReadError):
        read_str('"abc')


def test_metadata_syntax_is_rejected():
    with pytest.raises(ReadError):
        read_str("^{:a 1} x")


def test_odd_map_literal():
    with pytest.raises(UnexpectedLength) as exc:
        read_str("{:a 1 :b}")
    assert exc.value.base == 2
    assert len(exc.value.instance) == 3


@pytest.mark.parametrize("token", ["$$$", "1.2.3", "9lives", "what?", ":", "1e-05"])
def test_unexpected_token(token):
    with pytest.raises(UnexpectedToken) as exc:
        read_str(token)
    assert exc.value.token == token


def test_interned_names_bypass_identifier_pattern():
    with pytest.raises(UnexpectedToken):
        read_str("odd%name")
    sym = Symbol("odd%name")
    assert read_str("odd%name") is sym


# -------------------------------
# Strategies
# -------------------------------
_RESERVED = {"nil", "true", "false", "undefined"}

name_strat = st.from_regex(r"[a-z_][-a-z0-9_!*]{0,8}", fullmatch=True).filter(
    lambda s: s not in _RESERVED
)

float_strat = st.floats(allow_nan=False, allow_infinity=False)

atom_strat = st.one_of(
    st.integers(min_value=-10**12, max_value=10**12),
    float_strat,
    st.text(max_size=20),
    st.booleans(),
    st.just(Nil),
    name_strat.map(Symbol),
    name_strat.map(Keyword),
)

key_strat = st.one_of(name_strat.map(Keyword), st.text(max_size=8))

value_strat = st.recursive(
    atom_strat,
    lambda children: st.one_of(
        st.lists(children, max_size=4).map(List),
        st.lists(children, max_size=4).map(Vector),
        st.dictionaries(key_strat, children, max_size=3).map(lambda d: HashMap(d.items())),
    ),
    max_leaves=12,
)


# -------------------------------
# Hypothesis tests
# -------------------------------
@given(value_strat)
def test_readable_render_round_trips(value):
    assert read_str(render(value, True)) == value


@given(st.text(max_size=40))
def test_lexer_never_crashes(source):
    list(lex(source))
