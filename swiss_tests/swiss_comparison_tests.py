from functools import cmp_to_key
import suite
from swiss import sc, swiss, EqualityPolicy, loose_equals, strict_equals, compare_values, MISSING

# --- setup ---
test = suite.test
assert_that = suite.assert_that
assert_equal = suite.assert_equal


# --- loose equality ---

@test("loose equality: numbers and numeric strings")
def test_loose_numeric():
    assert_that(loose_equals('3', 3), "numeric string equals its number")
    assert_that(loose_equals(3, ' 3.0'), "surrounding space and a decimal point are fine")
    assert_that(loose_equals('10', '1e1'), "numeric strings compare numerically")
    assert_that(loose_equals(1, True), "bools are numbers")
    assert_that(not loose_equals('abc', 0), "a word is not zero")
    assert_that(not loose_equals('1abc', 1), "a numeric prefix is not enough")


@test("loose equality: None and empties")
def test_loose_none():
    for empty in [None, False, 0, 0.0, '', [], {}]:
        assert_that(loose_equals(None, empty), f"None should equal {empty!r}")
        assert_that(loose_equals(empty, None), f"{empty!r} should equal None")
    assert_that(not loose_equals(None, '0'), "the string zero is not None")
    assert_that(not loose_equals(None, 'a'), "a word is not None")


@test("loose equality: containers compare entries ignoring order")
def test_loose_containers():
    assert_that(loose_equals({'a': 1, 'b': '2'}, {'b': 2, 'a': '1'}), "same keys, loose values")
    assert_that(loose_equals(sc([1, 2]), [1, '2']), "a collection against a list")
    assert_that(not loose_equals([1, 2], [1, 2, 3]), "different sizes")
    assert_that(not loose_equals({'a': 1}, {'b': 1}), "different keys")


@test("elements keyed by tuples or other non-key types still compare")
def test_loose_foreign_mapping_keys():
    assert_that(loose_equals({(1, 2): '3'}, {(1, 2): 3}), "raw keys match, values loosely equal")
    assert_that(not loose_equals({(1, 2): 'a'}, {(1, 2): 'b'}), "raw keys match, values differ")
    assert_that(not loose_equals({(1, 2): 'a'}, {'x': 'a'}), "raw keys differ")
    data = sc([{(1, 2): 'a'}, {(1, 2): 'b'}, {(1, 2): 'a'}])
    assert_that(not data.contains({(1, 2): 'c'}), "search stays total")
    assert_that(data.contains({(1, 2): 'b'}), "search finds the match")
    assert_equal(data.unique().count(), 2)
    assert_that(data.contains_key_value(0, {(1, 2): 'a'}), "pair match")


@test("strict equality needs the same type")
def test_strict():
    assert_that(strict_equals(3, 3), "same int")
    assert_that(not strict_equals('3', 3), "str and int differ")
    assert_that(not strict_equals(1, True), "int and bool differ")
    assert_that(not strict_equals(1, 1.0), "int and float differ")


@test("EqualityPolicy exposes both modes")
def test_policy():
    assert_that(EqualityPolicy.LOOSE.equals('3', 3), "loose")
    assert_that(not EqualityPolicy.STRICT.equals('3', 3), "strict")


# --- search ---

@test("search, contains and contains_key")
def test_search_and_contains():
    a = swiss([3, 2, 1])
    assert_equal(a.search(1), 2)
    assert_that(a.contains(3), "3 is there")
    assert_that(not a.contains(4), "4 is not")
    b = swiss({'a': 'b'})
    assert_that(b.contains_key('a'), "key a")
    assert_that(not b.contains_key('b'), "values are not keys")
    assert_that(b.contains_key_value('a', 'b'), "pair present")
    assert_that(not b.contains_key_value('a', 'c'), "wrong value")
    assert_that(not b.contains_key_value('z', 'b'), "wrong key")


@test("find is loose by default and strict on request")
def test_find_modes():
    data = sc([1, 2, '3'])
    assert_that(data.contains(3), "loose match")
    assert_that(not data.contains(3, strict=True), "strict miss")
    assert_that(data.contains('3', strict=EqualityPolicy.STRICT), "strict hit")
    assert_equal(data.find('1'), 0)


@test("find returns MISSING, never a falsy key, when nothing matches")
def test_find_missing():
    data = sc(['x'])
    assert_equal(data.find('x'), 0)
    assert_that(data.find('y') is MISSING, "absent")
    assert_that(data.find('x') is not MISSING, "key 0 is a real result")


@test("find accepts a custom comparator")
def test_find_custom():
    data = sc({'a': 'Apple', 'b': 'banana'})
    same_word = lambda item, value: item.lower() == value.lower()
    assert_equal(data.find('BANANA', strict=same_word), 'b')
    assert_that(data.contains_key_value('a', 'apple', strict=same_word), "custom pair match")


# --- ordering ---

@test("compare_values orders mixed values")
def test_compare_values():
    assert_equal(compare_values(2, '10'), -1)
    assert_equal(compare_values('abc', 'abd'), -1)
    assert_equal(compare_values(None, 0), -1)
    assert_equal(compare_values('5', 5.0), 0)
    assert_equal(compare_values(10, 'x'), -1, "a number against a word compares string forms")
    ordered = sorted([3, '1', None, 'b', 2.5, 'a'], key=cmp_to_key(compare_values))
    assert_equal(ordered, [None, '1', 2.5, 3, 'a', 'b'])


@test("compare_values falls back to type names for unorderable pairs")
def test_compare_unorderable():
    assert_equal(compare_values([1], {'a': 1}), -compare_values({'a': 1}, [1]))
    assert_that(compare_values([1], {'a': 1}) != 0, "distinct types order")


# --- run the suite ---
if __name__ == "__main__":
    suite.run(title="swiss comparison test")
