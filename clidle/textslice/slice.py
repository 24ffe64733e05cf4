"""
Non-owning, bounds-checked views over a byte buffer.

A TextSlice is (buffer, start, length). It never copies the bytes it points
at: every derived slice (sub, chop_*, split results) shares the buffer of the
slice it came from. The only copying operations are the explicit ones
(to_owned_text, copy_into, bytes(), str()).

Conventions:
  - NPOS (-1) is returned by the search functions when nothing is found.
  - `length=None` in sub() means "up to the end".
  - Counts and offsets saturate or clamp instead of reading out of bounds;
    negative counts are a caller bug and raise ValueError.

Aliasing contract: a slice keeps its buffer alive, but it does not freeze
it. If the owner of a bytearray mutates it, every slice sees the change.
Corpora are loaded from immutable bytes (or a read-only mmap) for that reason.

Example:
    s = TextSlice.from_text("A    space")
    list(map(str, s.split_collapsing(" ")))  -> ["A", "space"]
"""

from __future__ import annotations

from typing import Iterator, Union

# Sentinel index for "not found" (mirrors str.find)
NPOS = -1

Needle = Union["TextSlice", bytes, bytearray, memoryview, str]


def _encode(text: str) -> bytes:
    # surrogateescape round-trips undecodable input bytes back to themselves
    return text.encode("utf-8", errors="surrogateescape")


def _as_byte(c: Union[int, str, bytes]) -> int:
    """Normalize a single character argument to its byte value."""
    if isinstance(c, int):
        if not 0 <= c <= 0xFF:
            raise ValueError(f"byte value out of range: {c}")
        return c
    if isinstance(c, str):
        c = _encode(c)
    if len(c) != 1:
        raise ValueError(f"expected a single byte, got {c!r}")
    return c[0]


def _as_view(other: Needle) -> memoryview:
    """Borrow a byte view of a needle without copying where possible."""
    if isinstance(other, TextSlice):
        return other._view()
    if isinstance(other, str):
        return memoryview(_encode(other))
    return memoryview(other).cast("B")


def _check_count(name: str, n: int) -> None:
    if n < 0:
        raise ValueError(f"{name} must be non-negative; got {n}")


class TextSlice:
    __slots__ = ("_buf", "_start", "_len")

    def __init__(self, buf: memoryview, start: int, length: int):
        # Internal constructor; the public ones are from_buffer / from_text.
        if start < 0 or length < 0 or start + length > len(buf):
            raise ValueError(
                f"slice [{start}:{start + length}] outside buffer of {len(buf)} bytes")
        self._buf = buf
        self._start = start
        self._len = length

    # ---- construction ----

    @classmethod
    def from_buffer(cls, data, length: int | None = None) -> "TextSlice":
        """
        View the first `length` bytes of `data` (all of it when None).

        `data` is anything exposing the buffer protocol: bytes, bytearray,
        memoryview or mmap. A length past the end is clamped.
        """
        view = memoryview(data)
        if view.format != "B" or view.ndim != 1:
            view = view.cast("B")
        if length is None or length > len(view):
            length = len(view)
        _check_count("length", length)
        return cls(view, 0, length)

    @classmethod
    def from_text(cls, text: str) -> "TextSlice":
        return cls.from_buffer(_encode(text))

    @classmethod
    def empty(cls) -> "TextSlice":
        return cls.from_buffer(b"")

    # ---- introspection ----

    @property
    def start(self) -> int:
        """Offset of the first byte inside the backing buffer."""
        return self._start

    @property
    def buffer_length(self) -> int:
        """Size of the backing buffer this slice borrows from."""
        return len(self._buf)

    def _view(self) -> memoryview:
        return self._buf[self._start:self._start + self._len]

    def view(self) -> memoryview:
        """Read-only memoryview of the bytes, sharing the backing buffer."""
        return self._view().toreadonly()

    def _derive(self, offset: int, length: int) -> "TextSlice":
        # offset is relative to this slice; callers guarantee the bounds
        return TextSlice(self._buf, self._start + offset, length)

    # ---- substrings ----

    def sub(self, begin: int, length: int | None = None) -> "TextSlice":
        """
        `length` bytes starting at `begin`.

        Empty when `begin` is past the end or `length == 0`. Clamped to the
        remaining bytes when `length` is None or would run past the end.
        """
        _check_count("begin", begin)
        if length is not None:
            _check_count("length", length)
        if length == 0 or begin > self._len:
            return self._derive(0, 0)
        if length is None or begin + length > self._len:
            length = self._len - begin
        return self._derive(begin, length)

    def chop_left(self, n: int) -> "TextSlice":
        """Drop `n` bytes from the front; empty if n >= len."""
        _check_count("n", n)
        if n >= self._len:
            return self._derive(self._len, 0)
        return self._derive(n, self._len - n)

    def chop_right(self, n: int) -> "TextSlice":
        """Drop `n` bytes from the back; empty if n >= len."""
        _check_count("n", n)
        if n >= self._len:
            return self._derive(0, 0)
        return self._derive(0, self._len - n)

    # ---- searching ----

    def find_char(self, c) -> int:
        b = _as_byte(c)
        view = self._view()
        for i in range(self._len):
            if view[i] == b:
                return i
        return NPOS

    def find_char_from_end(self, c) -> int:
        b = _as_byte(c)
        view = self._view()
        for i in range(self._len - 1, -1, -1):
            if view[i] == b:
                return i
        return NPOS

    def find(self, needle: Needle) -> int:
        """Leftmost start index of `needle`; NPOS if empty or longer than self."""
        nv = _as_view(needle)
        n = len(nv)
        if n == 0 or n > self._len:
            return NPOS
        view = self._view()
        first = nv[0]
        for i in range(self._len - n + 1):
            if view[i] == first and view[i:i + n] == nv:
                return i
        return NPOS

    def find_from_end(self, needle: Needle) -> int:
        """Rightmost start index of `needle`; NPOS if empty or longer than self."""
        nv = _as_view(needle)
        n = len(nv)
        if n == 0 or n > self._len:
            return NPOS
        view = self._view()
        first = nv[0]
        for i in range(self._len - n, -1, -1):
            if view[i] == first and view[i:i + n] == nv:
                return i
        return NPOS

    def __contains__(self, needle: Needle) -> bool:
        return self.find(needle) != NPOS

    # ---- comparison ----

    def equals(self, other: "TextSlice") -> bool:
        if self._len != other._len:
            return False
        if self._buf is other._buf and self._start == other._start:
            return True
        return self._view() == other._view()

    def equals_text(self, text: str) -> bool:
        return self._view() == _encode(text)

    def starts_with(self, prefix: Needle) -> bool:
        pv = _as_view(prefix)
        if len(pv) > self._len:
            return False
        return self._view()[:len(pv)] == pv

    def ends_with(self, suffix: Needle) -> bool:
        sv = _as_view(suffix)
        if len(sv) > self._len:
            return False
        return self._view()[self._len - len(sv):] == sv

    def __eq__(self, other) -> bool:
        if isinstance(other, TextSlice):
            return self.equals(other)
        if isinstance(other, str):
            return self.equals_text(other)
        if isinstance(other, (bytes, bytearray, memoryview)):
            return self._view() == other
        return NotImplemented

    def __hash__(self) -> int:
        # Content hash, consistent with equality against bytes
        return hash(self.tobytes())

    # ---- tokenizing ----

    def _leading_run(self, b: int) -> int:
        view = self._view()
        i = 0
        while i < self._len and view[i] == b:
            i += 1
        return i

    def split_collapsing(self, delim) -> Iterator["TextSlice"]:
        """
        Lazily split on `delim`, treating any run of delimiters as one.

        Each step skips the leading delimiter run and yields everything up to
        the next run. Empty pieces are never produced:
            "cat\\ndog\\n\\nbird" on "\\n" -> "cat", "dog", "bird"
        The generator is single-use, like any other iterator.
        """
        b = _as_byte(delim)
        rest = self
        while True:
            rest = rest.chop_left(rest._leading_run(b))
            if not rest:
                return
            i = rest.find_char(b)
            if i == NPOS:
                yield rest
                return
            yield rest.sub(0, i)
            rest = rest.chop_left(i)

    # ---- copying out ----

    def tobytes(self) -> bytes:
        return self._view().tobytes()

    def to_owned_text(self, max_len: int) -> str:
        """
        Decode at most `max_len - 1` bytes into a new string.

        The reserved byte mirrors copy_into(), which needs room for the
        terminator. Longer slices are truncated silently.
        """
        if max_len <= 0:
            return ""
        n = min(self._len, max_len - 1)
        return self._view()[:n].tobytes().decode("utf-8", errors="replace")

    def copy_into(self, buf: bytearray) -> bytearray:
        """
        Copy into caller storage followed by a NUL byte.

        At most `len(buf) - 1` bytes are copied; a zero-sized buffer is left
        untouched. Returns `buf`.
        """
        if len(buf) == 0:
            return buf
        n = min(self._len, len(buf) - 1)
        buf[:n] = self._view()[:n]
        buf[n] = 0
        return buf

    # ---- Python protocol ----

    def __len__(self) -> int:
        return self._len

    def __iter__(self) -> Iterator[int]:
        return iter(self._view())

    def __getitem__(self, key):
        if isinstance(key, slice):
            begin, end, step = key.indices(self._len)
            if step != 1:
                raise ValueError("TextSlice does not support stepped slicing")
            return self.sub(begin, max(0, end - begin))
        if key < 0:
            key += self._len
        if not 0 <= key < self._len:
            raise IndexError("TextSlice index out of range")
        return self._buf[self._start + key]

    def __bytes__(self) -> bytes:
        return self.tobytes()

    def __str__(self) -> str:
        return self.tobytes().decode("utf-8", errors="replace")

    def __repr__(self) -> str:
        return f"TextSlice({self.tobytes()!r}, start={self._start})"
