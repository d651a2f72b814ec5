import pytest

from mal.errors import (
    IndexOutOfRange,
    MalError,
    MultipleParametersError,
    ParametersError,
    UnexpectedLength,
    UnexpectedTokenType,
)
from mal.evaluation.evaluator import evaluate
from mal.reader.parser import read_str
from mal.types import Atom, HashMap, Keyword, List, Nil, Symbol, Vector
from mal.types.value import Kind


def run(env, source):
    return evaluate(read_str(source), env)


# -------------------------------
# Arithmetic
# -------------------------------
@pytest.mark.parametrize(
    "source, expected",
    [
        ("(+)", 0),
        ("(+ 1 2 3)", 6),
        ("(+ 1 2.5)", 3.5),
        ("(-)", 0),
        ("(- 5)", 5),
        ("(- 10 3 2)", 5),
        ("(*)", 1),
        ("(* 2 3 4)", 24),
        ("(/ 6 3)", 2),
        ("(/ 7 2)", 3.5),
        ("(/ 2)", 0.5),
        ("(/ 60 2 3)", 10),
        ("(// 7 2)", 3),
        ("(// -7 2)", -4),
    ]
)
def test_arithmetic(env, source, expected):
    assert run(env, source) == expected


def test_exact_division_stays_integral(env):
    assert type(run(env, "(/ 6 3)")) is int
    assert type(run(env, "(/ 6.0 3)")) is float


@pytest.mark.parametrize("source", ["(/ 1 0)", "(// 1 0)", "(/ 0)"])
def test_division_by_zero(env, source):
    with pytest.raises(MalError, match="Division by zero"):
        run(env, source)


def test_arithmetic_type_errors(env):
    with pytest.raises(UnexpectedTokenType) as exc:
        run(env, '(* 2 "x")')
    assert exc.value.token == "x"
    assert exc.value.expected == (Kind.NUMBER,)
    with pytest.raises(UnexpectedTokenType):
        run(env, "(+ 1 true)")


def test_division_needs_an_argument(env):
    with pytest.raises(MultipleParametersError):
        run(env, "(/)")


# -------------------------------
# Comparison
# -------------------------------
@pytest.mark.parametrize(
    "source, expected",
    [
        ("(= 1 1)", True),
        ("(= 1 1.0)", True),
        ("(= 1 2)", False),
        ("(= 1 1 1)", True),
        ("(= 1 1 2)", False),
        ('(= "a" "a")', True),
        ("(= :a :a)", True),
        ("(= (list 1 2) [1 2])", True),
        ("(= {:a [1]} {:a (list 1)})", True),
        ("(= 1 true)", False),
        ("(= nil false)", False),
        ("(< 1 2 3)", True),
        ("(< 1 3 2)", False),
        ("(<= 1 1 2)", True),
        ("(> 3 2 1)", True),
        ("(>= 3 3 4)", False),
        ("(< 1)", True),
    ]
)
def test_comparison(env, source, expected):
    assert run(env, source) is expected


def test_ordering_needs_numbers(env):
    with pytest.raises(UnexpectedTokenType):
        run(env, '(< 1 "2")')


# -------------------------------
# Sequences
# -------------------------------
def test_list_and_vector_constructors(env):
    assert isinstance(run(env, "(list 1 2)"), List)
    assert isinstance(run(env, "(vector 1 2)"), Vector)
    assert run(env, "(list)") == List()


@pytest.mark.parametrize(
    "source, expected",
    [
        ("(list? (list))", True),
        ("(list? [])", False),
        ("(vector? [])", True),
        ("(vector? (list))", False),
        ("(sequential? [])", True),
        ("(sequential? {})", False),
        ("(empty? [])", True),
        ("(empty? (list 1))", False),
        ("(empty? {})", True),
        ("(count [1 2 3])", 3),
        ("(count nil)", 0),
        ("(count {:a 1})", 1),
    ]
)
def test_sequence_queries(env, source, expected):
    assert run(env, source) == expected


def test_cons_and_concat(env):
    assert run(env, "(cons 1 [2 3])") == List((1, 2, 3))
    assert isinstance(run(env, "(cons 1 [2 3])"), List)
    assert run(env, "(concat [1] (list 2 3) [])") == List((1, 2, 3))
    assert run(env, "(concat)") == List()
    with pytest.raises(UnexpectedTokenType):
        run(env, "(cons 1 2)")


def test_nth(env):
    assert run(env, "(nth [10 20 30] 1)") == 20
    with pytest.raises(IndexOutOfRange) as exc:
        run(env, "(nth [10 20] 5)")
    assert exc.value.index == 5
    with pytest.raises(IndexOutOfRange):
        run(env, "(nth (list) 0)")
    with pytest.raises(IndexOutOfRange) as exc:
        run(env, "(nth [1 2] 1.5)")
    assert exc.value.index == 1.5
    assert run(env, "(nth [1 2] 1.0)") == 2
    with pytest.raises(ParametersError):
        run(env, "(nth [1])")


def test_first_and_rest(env):
    assert run(env, "(first [1 2 3])") == 1
    assert run(env, "(first [])") is Nil
    assert run(env, "(first nil)") is Nil
    assert run(env, "(rest [1 2 3])") == List((2, 3))
    assert isinstance(run(env, "(rest [1 2 3])"), List)
    assert run(env, "(rest [])") == List()
    assert run(env, "(rest nil)") == List()


# -------------------------------
# Maps
# -------------------------------
def test_hash_map_functions(env):
    run(env, '(def! m (hash-map :a 1 "b" 2))')
    assert run(env, "(map? m)") is True
    assert run(env, "(get m :a)") == 1
    assert run(env, '(get m "b")') == 2
    assert run(env, "(get m :missing)") is Nil
    assert run(env, "(get nil :a)") is Nil
    assert run(env, "(contains? m :a)") is True
    assert run(env, "(contains? m :z)") is False
    assert run(env, '(keys m)') == List((Keyword("a"), "b"))
    assert run(env, '(vals m)') == List((1, 2))


def test_assoc_and_dissoc_leave_source_untouched(env):
    run(env, "(def! m {:a 1})")
    assert run(env, "(assoc m :b 2)") == HashMap([(Keyword("a"), 1), (Keyword("b"), 2)])
    assert run(env, "(dissoc m :a)") == HashMap()
    assert run(env, "m") == HashMap([(Keyword("a"), 1)])


def test_map_errors(env):
    with pytest.raises(UnexpectedLength):
        run(env, "(hash-map :a)")
    with pytest.raises(UnexpectedLength):
        run(env, "(assoc {} :a)")
    with pytest.raises(UnexpectedTokenType):
        run(env, "(assoc {} 1 2)")
    with pytest.raises(UnexpectedTokenType):
        run(env, "(get [1] 0)")


# -------------------------------
# Atoms
# -------------------------------
def test_atoms(env):
    run(env, "(def! a (atom 1))")
    assert isinstance(run(env, "a"), Atom)
    assert run(env, "(atom? a)") is True
    assert run(env, "(atom? 1)") is False
    assert run(env, "@a") == 1
    assert run(env, "(deref a)") == 1
    assert run(env, "(reset! a 5)") == 5
    assert run(env, "(swap! a + 10)") == 15
    assert run(env, "(swap! a (fn* (x y) (* x y)) 2)") == 30
    assert run(env, "@a") == 30


def test_swap_needs_callable(env):
    with pytest.raises(UnexpectedTokenType):
        run(env, "(swap! (atom 1) 2)")


# -------------------------------
# Printing and reading
# -------------------------------
def test_pr_str_and_str(env):
    assert run(env, '(pr-str "a" 1 :k)') == '"a" 1 :k'
    assert run(env, '(str "a" 1 :k)') == "a1:k"
    assert run(env, "(str)") == ""
    assert run(env, '(str [1 "x"])') == "[1 x]"


def test_prn_and_println(env, capsys):
    assert run(env, '(prn "a\\nb" 1)') is Nil
    assert run(env, '(println "a\\nb" 1)') is Nil
    out = capsys.readouterr().out
    assert out == '"a\\nb" 1\na\nb 1\n'


def test_read_string(env):
    assert run(env, '(read-string "(+ 1 2)")') == List((Symbol("+"), 1, 2))
    assert run(env, '(eval (read-string "(+ 1 2)"))') == 3
    assert run(env, '(read-string "")') is Nil
    with pytest.raises(UnexpectedTokenType):
        run(env, "(read-string 1)")


def test_slurp(env, tmp_path):
    f = tmp_path / "data.txt"
    f.write_text("héllo\n", encoding="utf-8")
    assert run(env, f'(slurp "{f}")') == "héllo\n"


def test_slurp_missing_file(env, tmp_path):
    with pytest.raises(MalError, match="Cannot read file"):
        run(env, f'(slurp "{tmp_path / "missing.txt"}")')


# -------------------------------
# Symbols and predicates
# -------------------------------
def test_symbol_and_keyword(env):
    assert run(env, '(symbol "made")') is Symbol("made")
    assert run(env, '(keyword "made")') is Keyword("made")
    assert run(env, "(keyword :made)") is Keyword("made")


@pytest.mark.parametrize(
    "source, expected",
    [
        ("(nil? nil)", True),
        ("(nil? false)", False),
        ("(true? true)", True),
        ("(true? 1)", False),
        ("(false? false)", True),
        ("(false? nil)", False),
        ("(symbol? 'a)", True),
        ("(symbol? :a)", False),
        ("(keyword? :a)", True),
        ('(string? "a")', True),
        ("(string? :a)", False),
        ("(number? 1.5)", True),
        ("(number? true)", False),
        ("(fn? +)", True),
        ("(fn? (fn* () 1))", True),
        ("(fn? 'a)", False),
    ]
)
def test_predicates(env, source, expected):
    assert run(env, source) is expected


def test_predicate_arity(env):
    with pytest.raises(ParametersError):
        run(env, "(nil? 1 2)")


# -------------------------------
# Function application
# -------------------------------
def test_apply(env):
    assert run(env, "(apply + 1 2 [3 4])") == 10
    assert run(env, "(apply + [])") == 0
    assert run(env, "(apply (fn* (& xs) xs) 1 (list 2))") == List((1, 2))
    with pytest.raises(UnexpectedTokenType):
        run(env, "(apply + 1 2)")


def test_map(env):
    assert run(env, "(map (fn* (x) (* x x)) [1 2 3])") == List((1, 4, 9))
    assert run(env, "(map - (list 1 2))") == List((1, 2))
    assert run(env, "(map + [])") == List()
