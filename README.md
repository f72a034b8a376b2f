# minisims

A handful of small, self-contained programs built around classic data
structures and simulations:

- **Blackjack** — a deterministic blackjack table with a 52-card deck,
  riffle-style shuffling at cut points drawn from a Mersenne Twister, and
  two player strategies (a simple basic-strategy player and a
  card-counting player).
- **Huffman coding** — build a Huffman tree from a text, encode the text
  as space-separated bit strings, and decode those strings back using a
  saved tree file.
- **LRU cache** — a simulated write-back cache in front of a small memory,
  driven by textual commands.
- **RPN calculator** — turns an infix integer expression into reverse
  Polish notation and evaluates it.

The package has no runtime dependencies and needs Python 3.10 or later.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Command-line tools

### Blackjack

```
minisims-blackjack [bankroll] [hands] [simple|counting]
```

Plays up to `hands` hands (default 60) starting from `bankroll`
(default 100) with the chosen player (default `counting`), and prints
every shuffle, bet, card dealt and result, ending with a line such as
`Player has 115 after 60 hands`. Play stops early once the bankroll
falls below the minimum bet of 5. The deck is shuffled seven times at
the start and again whenever fewer than 20 cards are left. Cut points
come from a generator seeded with 0, so every run with the same
arguments prints the same transcript.

### Huffman compression

```
minisims-compress input.txt
```

Prints the Huffman code of every character of `input.txt`, each followed
by a space.

```
minisims-compress -tree input.txt
```

Prints the tree itself instead, one level per line, in the tree-file
format:

```
8,
a,4,
-,-,b,c,
```

Numbers are inner nodes, single characters are leaves, `\n` stands for
a newline and `-` marks an empty position.

```
minisims-decompress tree.txt codes.txt
```

Reads a tree file and a file of whitespace-separated codes and prints
the decoded text. A code that leads off the tree is reported on
standard error and the command exits with status 1.

### LRU cache

```
minisims-cache < commands.txt
```

The input starts with the cache size and the memory size. Each line
after that holds one command: `READ <address>`, `WRITE <address> <data>`,
`PRINTCACHE`, `PRINTMEM` or `EXIT`. `READ` prints the value,
`PRINTCACHE` prints one `address data` line per cached block, most
recently used first, and `PRINTMEM` prints the memory words on one line.
Blocks are written back to memory only when they are evicted. Errors are
reported as `ERROR: Address out of bound`, `ERROR: Unknown instruction`,
`ERROR: Not enough operands` or `ERROR: Too many operands`, and the
session carries on.

### RPN calculator

```
echo "( 1 + 2 ) * 3" | minisims-rpn
```

Reads one line, prints the expression in reverse Polish notation (each
token followed by a space), then its value. Tokens must be separated by
spaces. Arithmetic is on integers and division truncates toward zero.
Mismatched parentheses, missing or extra operands and division by zero
are reported as `ERROR: ...` lines.

## Library use

The modules can also be used directly.

```python
from minisims.deck import Deck
from minisims.hand import Hand

deck = Deck()
deck.shuffle(26)
hand = Hand()
hand.add_card(deck.deal())
hand.add_card(deck.deal())
print(hand.value())          # HandValue(count=..., soft=...)
```

```python
from minisims.blackjack import play
from minisims.player import SimplePlayer

for line in play(SimplePlayer(), bankroll=50, hands=5):
    print(line)
```

```python
from minisims.compress import build_tree, encode
from minisims.decompress import decode

text = "abracadabra\n"
tree = build_tree(text)
codes = encode(text, tree)
assert decode(tree, codes) == text
print(tree.format_tree())    # list of lines in the tree-file format
```

```python
from minisims.rpn import to_rpn, evaluate_rpn

tokens = to_rpn("2 * ( 3 + 4 )")   # ['2', '3', '4', '+', '*']
print(evaluate_rpn(tokens))        # 14
```

```python
from minisims.cache import LRUCache, run

cache = LRUCache(2, 4)
cache.write(1, 7)
print(cache.read(1))         # 7
print(cache.memory_line())   # "0 0 0 0" until the block is evicted

print(run(["2 4", "WRITE 1 7", "READ 1", "EXIT"]))   # ['7']
```

Other building blocks:

- `minisims.card` — `Suit`, `Spot` and the frozen `Card` dataclass.
- `minisims.mersenne` — `MersenneTwister` (MT19937) and `CutGenerator`,
  which yields cut positions between 13 and 39.
- `minisims.player` — the abstract `Player`, `SimplePlayer` and
  `CountingPlayer`, plus the shared instances from `get_simple()` and
  `get_counting()`.
- `minisims.binary_tree` — `Node` and `BinaryTree` with path search,
  sums, depth, traversals, coverage checks and deep copies.
- `minisims.huffman_tree` — `HuffmanTree`, readable from the tree-file
  format with `from_lines` or `from_file`.
- `minisims.dlist` — `Dlist`, a double-ended list that raises
  `EmptyList` when removing from an empty list.

## What it does not do

`minisims-compress` writes its codes as text, one bit string per
character; it does not produce a packed binary file. Neither the cache
nor the blackjack table keeps any state between runs.