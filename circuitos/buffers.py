"""Byte buffers: linear read/write buffers, a ring buffer and a file-backed buffer."""

from __future__ import annotations

from typing import BinaryIO


def _check_size(size: int) -> int:
    if size < 0:
        raise ValueError(f"buffer size must not be negative, got {size}")
    return size


def _check_amount(amount: int) -> int:
    if amount < 0:
        raise ValueError(f"amount must not be negative, got {amount}")
    return amount


class DataBuffer:
    """Linear buffer that compacts unread data to the front when writing."""

    def __init__(self, size: int) -> None:
        self._size = _check_size(size)
        self._buffer = bytearray(size)
        self._read = 0
        self._write = 0

    @property
    def size(self) -> int:
        return self._size

    def read_available(self) -> int:
        """Number of bytes written but not yet read."""
        return self._write - self._read

    def read_move(self, amount: int) -> None:
        """Mark ``amount`` bytes as read."""
        _check_amount(amount)
        if self._read + amount > self._write:
            raise ValueError(
                f"cannot read {amount} bytes, only {self.read_available()} available"
            )
        self._read += amount

    def read_data(self) -> bytes:
        """The unread bytes."""
        return bytes(self._buffer[self._read:self._write])

    def write_available(self) -> int:
        """Space available for writing once unread data is compacted."""
        return self._read + (self._size - self._write)

    def write_move(self, amount: int) -> None:
        """Mark ``amount`` bytes as written into the view from :meth:`write_data`."""
        _check_amount(amount)
        if self._write + amount > self._size:
            raise ValueError(
                f"cannot commit {amount} bytes, only {self._size - self._write} free"
            )
        self._write += amount

    def write_data(self) -> memoryview:
        """Compact unread data to the front and return a writable view of the free space."""
        left = self._write - self._read
        if left == 0:
            self._read = self._write = 0
        elif self._read:
            self._buffer[:left] = self._buffer[self._read:self._write]
            self._read = 0
            self._write = left
        return memoryview(self._buffer)[self._write:]

    def clear(self) -> None:
        self._read = 0
        self._write = 0


class LazyDataBuffer:
    """Linear buffer that compacts only when :meth:`relocate` is called."""

    def __init__(self, size: int) -> None:
        self._size = _check_size(size)
        self._buffer = bytearray(size)
        self._read = 0
        self._write = 0

    @property
    def size(self) -> int:
        return self._size

    def read_available(self) -> int:
        return self._write - self._read

    def read_move(self, amount: int) -> None:
        _check_amount(amount)
        if self._read + amount > self._write:
            raise ValueError(
                f"cannot read {amount} bytes, only {self.read_available()} available"
            )
        self._read += amount

    def read_data(self) -> bytes:
        return bytes(self._buffer[self._read:self._write])

    def write_available(self) -> int:
        """Free space after the write cursor, without compaction."""
        return self._size - self._write

    def write_move(self, amount: int) -> None:
        _check_amount(amount)
        if self._write + amount > self._size:
            raise ValueError(
                f"cannot commit {amount} bytes, only {self.write_available()} free"
            )
        self._write += amount

    def write_data(self) -> memoryview:
        """Writable view of the space after the write cursor."""
        return memoryview(self._buffer)[self._write:]

    def potential_write_available(self) -> int:
        """Space that :meth:`relocate` would reclaim."""
        return self._read

    def relocate(self) -> None:
        """Move unread data to the start of the buffer."""
        left = self._write - self._read
        if left == 0:
            self._read = self._write = 0
            return
        self._buffer[:left] = self._buffer[self._read:self._write]
        self._read = 0
        self._write = left

    def clear(self) -> None:
        """Rewind the read cursor to the start of the buffer."""
        self._read = 0


class RingBuffer:
    """Circular byte buffer holding up to ``size`` bytes."""

    def __init__(self, size: int) -> None:
        self._capacity = _check_size(size) + 1
        self._buffer = bytearray(self._capacity)
        self._begin = 0
        self._end = 0

    @property
    def size(self) -> int:
        return self._capacity - 1

    def write_available(self) -> int:
        if self._end >= self._begin:
            return self._capacity + self._begin - self._end - 1
        return self._begin - self._end - 1

    def read_available(self) -> int:
        if self._end >= self._begin:
            return self._end - self._begin
        return self._capacity + self._end - self._begin

    def _gather(self, start: int, n: int) -> bytes:
        first = min(self._capacity - start, n)
        return bytes(self._buffer[start:start + first]) + bytes(self._buffer[:n - first])

    def read(self, n: int) -> bytes:
        """Remove and return up to ``n`` bytes."""
        n = min(_check_amount(n), self.read_available())
        if n == 0:
            return b""
        out = self._gather(self._begin, n)
        self._begin = (self._begin + n) % self._capacity
        return out

    def write(self, data: bytes) -> int:
        """Append as much of ``data`` as fits; return the number of bytes written."""
        view = memoryview(bytes(data))
        n = min(len(view), self.write_available())
        if n == 0:
            return 0
        first = min(self._capacity - self._end, n)
        self._buffer[self._end:self._end + first] = view[:first]
        self._buffer[:n - first] = view[first:n]
        self._end = (self._end + n) % self._capacity
        return n

    def peek(self, size: int, offset: int = 0) -> bytes | None:
        """Return ``size`` bytes starting ``offset`` bytes in, or None if not that many are stored."""
        _check_amount(size)
        _check_amount(offset)
        if offset + size > self.read_available():
            return None
        return self._gather((self._begin + offset) % self._capacity, size)

    def skip(self, n: int) -> int:
        """Discard up to ``n`` bytes; return how many were discarded."""
        n = min(_check_amount(n), self.read_available())
        if n == 0:
            return 0
        self._begin = (self._begin + n) % self._capacity
        return n

    def clear(self) -> None:
        self._begin = self._end = 0


class FSBuffer:
    """Read-ahead buffer over a binary file."""

    def __init__(self, file: BinaryIO, size: int) -> None:
        self._file = file
        self._size = _check_size(size)
        self._buffer = bytearray(size)
        self._filled = 0
        self._cursor = 0

    @property
    def size(self) -> int:
        return self._size

    def available(self) -> int:
        return self._filled - self._cursor

    def move_read(self, amount: int) -> None:
        _check_amount(amount)
        if self._cursor + amount > self._filled:
            raise ValueError(
                f"cannot read {amount} bytes, only {self.available()} available"
            )
        self._cursor += amount

    def refill(self) -> bool:
        """Keep unread bytes, top up from the file; return whether any data is buffered."""
        remaining = self._filled - self._cursor
        if remaining:
            self._buffer[:remaining] = self._buffer[self._cursor:self._filled]
        chunk = self._file.read(self._size - remaining) or b""
        chunk = chunk[: self._size - remaining]
        self._buffer[remaining:remaining + len(chunk)] = chunk
        self._filled = remaining + len(chunk)
        self._cursor = 0
        return self._filled != 0

    def clear(self) -> None:
        """Rewind the cursor to the start of the buffered data."""
        self._cursor = 0

    def data(self) -> bytes:
        """The unread buffered bytes."""
        return bytes(self._buffer[self._cursor:self._filled])

    @property
    def file(self) -> BinaryIO:
        return self._file