import pytest
from clidle.textslice import TextSlice, NPOS


HELLO = TextSlice.from_text("hello world")


# --- sub ---
@pytest.mark.parametrize("begin,length,expected", [
    (0, 5, "hello"),
    (6, None, "world"),
    (6, 100, "world"),
    (3, 0, ""),
    (11, 3, ""),
    (12, 1, ""),
    (0, None, "hello world"),
])
def test_sub(begin, length, expected):
    assert str(HELLO.sub(begin, length)) == expected


def test_sub_never_leaves_parent_bounds():
    inner = HELLO.sub(6)
    for begin in range(0, 15):
        for length in (None, 0, 1, 3, 5, 20):
            r = inner.sub(begin, length)
            assert r.start >= inner.start
            assert r.start + len(r) <= inner.start + len(inner)


def test_sub_shares_buffer():
    r = HELLO.sub(6, 2)
    assert r.buffer_length == HELLO.buffer_length
    assert r.start == 6


# --- chop ---
@pytest.mark.parametrize("n", range(0, 15))
def test_chop_lengths_saturate(n):
    L = len(HELLO)
    assert len(HELLO.chop_left(n)) == max(0, L - n)
    assert len(HELLO.chop_right(n)) == max(0, L - n)


def test_chop_content():
    assert HELLO.chop_left(6) == "world"
    assert HELLO.chop_right(6) == "hello"
    assert HELLO.chop_left(0) == HELLO


def test_negative_counts_rejected():
    with pytest.raises(ValueError):
        HELLO.chop_left(-1)
    with pytest.raises(ValueError):
        HELLO.sub(-1, 2)


# --- search ---
def test_find_char():
    s = TextSlice.from_text("hello")
    assert s.find_char("l") == 2
    assert s.find_char_from_end("l") == 3
    assert s.find_char("z") == NPOS
    assert s.find_char(ord("h")) == 0
    assert TextSlice.empty().find_char_from_end("a") == NPOS


def test_find_needle():
    s = TextSlice.from_text("abcabc")
    assert s.find("bc") == 1
    assert s.find_from_end("bc") == 4
    assert s.find(b"cab") == 2
    assert s.find(TextSlice.from_text("abc")) == 0
    assert s.find_from_end("abc") == 3
    assert s.find("xyz") == NPOS
    assert "cab" in s


@pytest.mark.parametrize("needle", ["", "abcabcd"])
def test_find_empty_or_too_long_needle(needle):
    s = TextSlice.from_text("abcabc")
    assert s.find(needle) == NPOS
    assert s.find_from_end(needle) == NPOS


def test_find_is_relative_to_slice():
    # "world" starts at 6 in the buffer but 'o' is at index 1 of the slice
    assert HELLO.sub(6).find_char("o") == 1


# --- comparison ---
def test_equality_is_by_content():
    a = TextSlice.from_text("crane")
    b = TextSlice.from_buffer(b"xxcranexx").sub(2, 5)
    assert a == b
    assert a.equals(b)
    assert a != TextSlice.from_text("cran")
    assert a.equals_text("crane")
    assert not a.equals_text("cranes")
    assert a == "crane" and a == b"crane"
    assert hash(a) == hash(b)
    assert len({a, b}) == 1


def test_undecodable_text_compares_as_raw_bytes():
    s = TextSlice.from_buffer(b"cran\xff")
    assert s.equals_text("cran\udcff")
    assert not s.equals_text("crane")
    assert TextSlice.from_text("cran\udcff").tobytes() == b"cran\xff"
    assert s.ends_with("\udcff")


def test_starts_and_ends_with():
    s = TextSlice.from_text("crane")
    assert s.starts_with("cr")
    assert s.ends_with("ne")
    assert s.ends_with("")
    assert not s.starts_with("cranes")
    assert not s.ends_with("xcrane")
    assert not s.starts_with("ra")


# --- split ---
@pytest.mark.parametrize("text,delim,expected", [
    ("A    space", " ", ["A", "space"]),
    ("cat\ndog\n\nbird", "\n", ["cat", "dog", "bird"]),
    ("\n\ncat\n", "\n", ["cat"]),
    ("cat", "\n", ["cat"]),
    ("\n\n\n", "\n", []),
    ("", "\n", []),
])
def test_split_collapsing(text, delim, expected):
    parts = TextSlice.from_text(text).split_collapsing(delim)
    assert [str(p) for p in parts] == expected


def test_split_is_lazy_and_single_use():
    whole = TextSlice.from_text("a b c")
    gen = whole.split_collapsing(" ")
    assert str(next(gen)) == "a"
    assert [str(p) for p in gen] == ["b", "c"]
    assert list(gen) == []


def test_split_pieces_borrow_the_buffer():
    whole = TextSlice.from_buffer(b"cat\ndog\n")
    parts = list(whole.split_collapsing(b"\n"))
    assert [p.start for p in parts] == [0, 4]
    assert all(p.buffer_length == len(whole) for p in parts)


# --- copying out ---
def test_to_owned_text_truncates():
    s = TextSlice.from_text("crane")
    assert s.to_owned_text(3) == "cr"
    assert s.to_owned_text(6) == "crane"
    assert s.to_owned_text(100) == "crane"
    assert s.to_owned_text(0) == ""


def test_copy_into_terminates():
    s = TextSlice.from_text("crane")
    assert s.copy_into(bytearray(4)) == bytearray(b"cra\x00")
    assert s.copy_into(bytearray(8))[:6] == bytearray(b"crane\x00")
    assert s.copy_into(bytearray()) == bytearray()


# --- protocol ---
def test_indexing_and_slicing():
    assert HELLO[0] == ord("h")
    assert HELLO[-1] == ord("d")
    assert HELLO[0:5] == "hello"
    assert HELLO[6:] == "world"
    with pytest.raises(IndexError):
        HELLO[11]
    with pytest.raises(ValueError):
        HELLO[::2]


def test_bytes_str_iter():
    s = TextSlice.from_text("abc")
    assert bytes(s) == b"abc"
    assert str(s) == "abc"
    assert list(s) == [97, 98, 99]
    assert not TextSlice.empty()


def test_from_buffer_clamps_length():
    assert TextSlice.from_buffer(b"abc", 10) == "abc"
    assert TextSlice.from_buffer(b"abcdef", 3) == "abc"
    assert TextSlice.from_buffer(bytearray(b"xy")) == "xy"
