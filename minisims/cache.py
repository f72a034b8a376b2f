"""A write-back LRU cache in front of a small word-addressed memory."""

from __future__ import annotations

import argparse
import sys
from collections import OrderedDict
from collections.abc import Iterable, Sequence


class _CommandError(Exception):
    """Base of the errors a cache command can report."""

    message = "command failed"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.message)


class AddressOutOfBound(_CommandError):
    """Raised when an address lies outside the memory."""

    message = "Address out of bound"


class UnknownInstruction(_CommandError):
    """Raised for a command the simulator does not know."""

    message = "Unknown instruction"


class NotEnoughOperands(_CommandError):
    """Raised when a command is missing operands."""

    message = "Not enough operands"


class TooManyOperands(_CommandError):
    """Raised when a command is given extra operands."""

    message = "Too many operands"


class LRUCache:
    """A least-recently-used cache whose evicted blocks are written back to memory."""

    def __init__(self, cache_size: int, memory_size: int) -> None:
        if cache_size < 1:
            raise ValueError(f"cache size must be positive, got {cache_size}")
        if memory_size < 1:
            raise ValueError(f"memory size must be positive, got {memory_size}")
        self._capacity = cache_size
        self._memory = [0] * memory_size
        # Most recently used block first.
        self._blocks: OrderedDict[int, int] = OrderedDict()

    def _check(self, address: int) -> None:
        if not 0 <= address < len(self._memory):
            raise AddressOutOfBound()

    def _make_room(self) -> None:
        if len(self._blocks) >= self._capacity:
            address, data = self._blocks.popitem(last=True)
            self._memory[address] = data

    def _store(self, address: int, data: int) -> None:
        self._blocks[address] = data
        self._blocks.move_to_end(address, last=False)

    def read(self, address: int) -> int:
        """Return the data at ``address``, making its block the most recent."""
        self._check(address)
        if address in self._blocks:
            data = self._blocks[address]
        else:
            self._make_room()
            data = self._memory[address]
        self._store(address, data)
        return data

    def write(self, address: int, data: int) -> None:
        """Write ``data`` to ``address`` in the cache, making its block the most recent."""
        self._check(address)
        if address not in self._blocks:
            self._make_room()
        self._store(address, data)

    def cache_lines(self) -> list[str]:
        """Each cached block as ``"address data"``, most recently used first."""
        return [f"{address} {data}" for address, data in self._blocks.items()]

    def memory_line(self) -> str:
        """The memory's words separated by spaces."""
        return " ".join(str(word) for word in self._memory)


def _operands(rest: str, count: int) -> list[int]:
    fields = rest.split()
    if len(fields) < count:
        raise NotEnoughOperands()
    if len(fields) > count:
        raise TooManyOperands()
    try:
        return [int(field) for field in fields]
    except ValueError:
        raise NotEnoughOperands() from None


def _execute(cache: LRUCache, command: str, rest: str) -> list[str]:
    if command == "READ":
        (address,) = _operands(rest, 1)
        return [str(cache.read(address))]
    if command == "WRITE":
        address, data = _operands(rest, 2)
        cache.write(address, data)
        return []
    if command == "PRINTCACHE":
        return cache.cache_lines()
    if command == "PRINTMEM":
        return [cache.memory_line()]
    raise UnknownInstruction()


def run(lines: Iterable[str]) -> list[str]:
    """Run a session and return its output lines.

    The first two whitespace-separated numbers give the cache and memory
    sizes; each following line holds one command. ``EXIT`` ends the session.
    """
    it = iter(lines)
    header: list[str] = []
    for line in it:
        header.extend(line.split())
        if len(header) >= 2:
            break
    if len(header) < 2:
        raise ValueError("input must start with the cache size and the memory size")
    cache = LRUCache(int(header[0]), int(header[1]))

    pending = [" ".join(header[2:])] if len(header) > 2 else []
    out: list[str] = []
    for line in [*pending, *it]:
        command, _, rest = line.strip().partition(" ")
        if not command:
            continue
        if command == "EXIT":
            break
        try:
            out.extend(_execute(cache, command, rest))
        except _CommandError as err:
            out.append(f"ERROR: {err}")
    return out


def main(argv: Sequence[str] | None = None) -> int:
    """Read a cache session from standard input and print its output."""
    parser = argparse.ArgumentParser(
        description="Simulate an LRU cache driven by commands on standard input."
    )
    parser.parse_args(argv)
    for line in run(sys.stdin):
        print(line)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())