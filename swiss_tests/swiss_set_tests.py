import suite
from swiss import sc

# --- setup ---
test = suite.test
assert_that = suite.assert_that
assert_equal = suite.assert_equal


# --- intersections ---

@test("intersect matches by string form")
def test_intersect():
    c = sc([1, 2, 3, 4])
    assert_equal(c.intersect([2, '4', 5]).to.items(), [(0, 2), (1, 4)])
    assert_equal(c.intersect([2, '4', 5], preserve_keys=True).to.items(), [(1, 2), (3, 4)])
    assert_that(c.intersect([]).is_empty(), "nothing in common")


@test("intersect_assoc needs the same key and the same value")
def test_intersect_assoc():
    c = sc({'a': 'green', 'b': 'brown', 'c': 'blue', 0: 'red'})
    other = {'a': 'green', 'b': 'yellow', 0: 'blue', 1: 'red'}
    assert_equal(c.intersect_assoc(other, preserve_keys=True).to.dict(), {'a': 'green'})
    assert_equal(c.intersect_assoc(other).to.items(), [(0, 'green')])


@test("intersect_keys needs only the key")
def test_intersect_keys():
    c = sc({'a': 1, 'b': 2, 'c': 3})
    assert_equal(c.intersect_keys({'a': 0, 'c': 0}, preserve_keys=True).to.dict(), {'a': 1, 'c': 3})
    assert_equal(c.intersect_keys({'a': 0, 'c': 0}).to.items(), [(0, 1), (1, 3)])


# --- uniqueness ---

@test("unique drops loosely equal repeats and keeps first keys")
def test_unique():
    c = sc([1, '1', 2, 2.0, 'a', 'a', None, ''])
    assert_equal(c.unique().to.items(), [(0, 1), (2, 2), (4, 'a'), (6, None)])


@test("unique is idempotent")
def test_unique_idempotent():
    once = sc([3, '3', 'x', 3.0, 'X', 'x']).unique()
    assert_that(once.unique() == once, "a second pass changes nothing")
    assert_equal(once.to.list(), [3, 'x', 'X'])


@test("unique compares containers by content")
def test_unique_containers():
    c = sc([[1, 2], ['1', 2], {'a': 1}, sc({'a': '1'})])
    assert_equal(c.unique().count(), 2)


@test("unique_as_strings compares string forms")
def test_unique_as_strings():
    assert_equal(sc([1, '1', 1.0, True, 'a']).unique_as_strings().to.items(), [(0, 1), (4, 'a')])


@test("unique_as_numbers on plain numbers keeps first occurrences")
def test_unique_as_numbers_numeric():
    assert_equal(sc([3, 1, 3, 2, 1]).unique_as_numbers().to.items(), [(0, 3), (1, 1), (3, 2)])
    assert_equal(sc([1.5, 1.5, 2.0]).unique_as_numbers().to.list(), [1.5, 2.0])


@test("unique_as_numbers coerces strings and other values")
def test_unique_as_numbers_mixed():
    assert_equal(sc(['3', 3, 'x', 0, '12abc', 12]).unique_as_numbers().to.items(), [(0, '3'), (2, 'x'), (4, '12abc')])


@test("unique on an empty collection is empty")
def test_unique_empty():
    assert_that(sc().unique().is_empty(), "unique")
    assert_that(sc().unique_as_numbers().is_empty(), "unique_as_numbers")


# --- run the suite ---
if __name__ == "__main__":
    suite.run(title="swiss set test")
