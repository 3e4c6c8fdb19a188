import suite
from swiss import Collection, sc, swiss, create, from_entries, MISSING, MissingKeyError, TypeMismatch

# --- setup ---
test = suite.test
assert_that = suite.assert_that
assert_equal = suite.assert_equal


# --- construction & normalization ---

@test("create normalizes sequences, mappings, iterators and scalars")
def test_create_shapes():
    assert_equal(create([10, 20]).to.items(), [(0, 10), (1, 20)], "a list is enumerated")
    assert_equal(create({'a': 1, 5: 2}).to.items(), [('a', 1), (5, 2)], "a mapping keeps its keys")
    assert_equal(create(x * 2 for x in range(3)).to.list(), [0, 2, 4], "a generator is drained in order")
    assert_equal(create('abc').to.list(), ['abc'], "a string is a single value")
    assert_equal(create(42).to.items(), [(0, 42)], "a scalar is wrapped")
    assert_equal(create(None).to.list(), [None], "None is a value, not an absence")
    assert_that(create().is_empty(), "no argument gives an empty collection")


@test("create from a collection copies its entries")
def test_create_from_collection():
    source = sc({'a': 1, 'b': 2})
    copy = create(source)
    copy.set('c', 3)
    assert_equal(source.count(), 2, "the source is untouched")
    assert_equal(copy.to.keys(), ['a', 'b', 'c'])


@test("sc and swiss are the same constructor")
def test_helpers_equivalent():
    assert_that(sc([1, 2]) == swiss([1, 2]), "both helpers build equal collections")
    assert_that(isinstance(sc([]), Collection), "helpers return a Collection")


@test("keys are normalized to ints or strings")
def test_key_normalization():
    c = sc()
    c.set('5', 'five').set(True, 'one').set(2.7, 'two').set(None, 'blank').set('05', 'padded')
    assert_equal(c.to.keys(), [5, 1, 2, '', '05'], "numeric strings, bools and floats become ints")
    assert_that(c.contains_key('5') and c.contains_key(5), "lookups normalize too")
    try:
        c.set(['no'], 1)
        assert_that(False, "a list key should raise")
    except TypeMismatch:
        pass


# --- keyed access ---

@test("get returns MISSING or the supplied default for absent keys")
def test_get_missing():
    c = sc({'a': 1})
    assert_that(c.get('a') == 1, "present key")
    assert_that(c.get('b') is MISSING, "absent key gives the sentinel")
    assert_equal(c.get('b', 0), 0, "absent key gives the default")
    assert_that(c.get([1, 2]) is MISSING, "an impossible key is simply absent")
    assert_that(not MISSING, "the sentinel is falsy")


@test("non-finite float keys are absent on lookup and rejected on write")
def test_non_finite_float_keys():
    c = sc([1])
    for key in [float('nan'), float('inf'), float('-inf')]:
        assert_that(c.get(key) is MISSING, f"get({key!r})")
        assert_that(not c.contains_key(key), f"contains_key({key!r})")
        c.unset(key).remove(key)
        with suite.assert_raises(TypeMismatch):
            c.set(key, 'x')
    assert_equal(c.filter_to_keys([float('nan'), 0]).to.items(), [(0, 1)])
    assert_equal(c.to.items(), [(0, 1)])


@test("subscription raises MissingKeyError, a KeyError")
def test_subscript_missing():
    c = sc([1])
    assert_equal(c[0], 1)
    try:
        c[3]
        assert_that(False, "absent key should raise")
    except KeyError as e:
        assert_that(isinstance(e, MissingKeyError), "the error is the swiss subclass")


@test("unset is a no-op for absent keys and does not shift keys")
def test_unset():
    c = sc([1, 2, 3])
    c.unset(1).unset(99)
    del c['nope']
    assert_equal(c.to.items(), [(0, 1), (2, 3)])


# --- auto key ---

@test("the auto key is not rolled back by unset")
def test_auto_key_persists():
    c = sc({0: 'a', 1: 'b'})
    c.unset(1)
    c.append('c')
    assert_equal(c.to.items(), [(0, 'a'), (2, 'c')], "append after unset uses a fresh key")
    c.add('d')
    assert_equal(c.to.keys(), [0, 2, 3])


@test("setting a large integer key moves the auto key past it")
def test_auto_key_after_set():
    c = sc(['a'])
    c.set(10, 'b')
    c.push('c')
    assert_equal(c.to.keys(), [0, 10, 11])
    c.set('name', 'n').add('d')
    assert_equal(c.to.keys(), [0, 10, 11, 'name', 12], "string keys never touch the auto key")


@test("negative integer keys do not move the auto key")
def test_negative_keys():
    c = sc()
    c.set(-5, 'x').add('y')
    assert_equal(c.to.items(), [(-5, 'x'), (0, 'y')])


# --- splice ---

@test("splice removes, inserts and renumbers integer keys")
def test_splice_basic():
    c = sc([10, 20, 30, 40]).splice(1, 2, [99])
    assert_equal(c.to.items(), [(0, 10), (1, 99), (2, 40)])


@test("splice keeps string keys and their relative position")
def test_splice_string_keys():
    c = sc({'x': 'X', 3: 'a', 7: 'b'})
    c.splice(1, 1)
    assert_equal(c.to.items(), [('x', 'X'), (0, 'b')])
    c.add('z')
    assert_equal(c.to.items(), [('x', 'X'), (0, 'b'), (1, 'z')], "auto key resets to one past the highest int key")


@test("splice resolves negative offsets and lengths and clamps out of range")
def test_splice_ranges():
    assert_equal(sc([1, 2, 3, 4, 5]).splice(-2).to.list(), [1, 2, 3], "negative offset counts from the end")
    assert_equal(sc([1, 2, 3, 4, 5]).splice(1, -1).to.list(), [1, 5], "negative length stops before the end")
    assert_equal(sc([1, 2]).splice(10, 0, ['x']).to.list(), [1, 2, 'x'], "offset past the end appends")
    assert_equal(sc([1, 2]).splice(-10, 1).to.list(), [2], "offset before the start clamps to 0")
    assert_equal(sc([1, 2, 3]).splice(1, 50).to.list(), [1], "overlong length clamps")


@test("splice with a scalar replacement inserts that one value")
def test_splice_scalar_replacement():
    assert_equal(sc(['a', 'c']).splice(1, 0, 'b').to.list(), ['a', 'b', 'c'])


@test("splice on an empty collection resets the auto key to 0")
def test_splice_resets_auto_key():
    c = sc([1, 2, 3])
    c.splice(0)
    c.add('a')
    assert_equal(c.to.items(), [(0, 'a')])


# --- copies ---

@test("copy and push creates a different collection")
def test_copy_independent():
    a = sc([1, 2])
    b = a.copy()
    b.push(3)
    assert_equal(a.count(), 2)
    assert_equal(b.count(), 3)
    assert_equal(a.first(), 1)
    assert_equal(b.first(), 1)
    assert_equal(a.last(), 2)
    assert_equal(b.last(), 3)


@test("copy carries the auto key")
def test_copy_auto_key():
    a = sc([1, 2, 3])
    a.unset(2)
    b = a.copy().add(9)
    assert_equal(b.to.keys(), [0, 1, 3])


@test("copy is shallow")
def test_copy_shallow():
    inner = [1]
    a = sc([inner])
    b = a.copy()
    b.first().append(2)
    assert_equal(a.first(), [1, 2], "element values are shared")


@test("from_entries keeps every key")
def test_from_entries():
    c = from_entries([('b', 1), (4, 2)])
    assert_equal(c.to.items(), [('b', 1), (4, 2)])
    assert_equal(c.add(3).to.keys(), ['b', 4, 5])


# --- python protocols ---

@test("iteration yields values and is restartable")
def test_iteration():
    c = sc({'a': 1, 'b': 2})
    assert_equal(list(c), [1, 2])
    assert_equal(list(c), [1, 2], "a second pass sees the same values")
    assert_equal(len(c), 2)
    assert_that(2 in c and 3 not in c, "membership tests values")


@test("equality compares entries in order")
def test_equality():
    assert_that(sc([1, 2]) == sc([1, 2]), "same entries")
    assert_that(sc({'a': 1, 'b': 2}) != sc({'b': 2, 'a': 1}), "order matters")
    assert_that(sc([1, 2]) != [1, 2], "a collection is not a list")


@test("repr shows the entries")
def test_repr():
    assert_equal(repr(sc({'a': 1})), "Collection({'a': 1})")


@test("the mutating set is marked and lists exactly the in-place operations")
def test_mutating_operations():
    names = Collection.mutating_operations()
    for name in ['add', 'push', 'queue', 'pop', 'dequeue', 'pop_to', 'remove', 'remove_if', 'remove_keys',
                 'remove_range', 'overwrite', 'insert', 'append', 'prepend', 'splice', 'sort', 'custom_sort',
                 'key_sort', 'custom_key_sort', 'set', 'unset']:
        assert_that(name in names, f"{name} should be marked mutating")
    for name in ['map', 'filter', 'spliced', 'flatten', 'group', 'chunk', 'copy', 'reverse', 'values']:
        assert_that(name not in names, f"{name} should not be marked mutating")


# --- run the suite ---
if __name__ == "__main__":
    suite.run(title="swiss store test")
