"""Small simulations and data-structure exercises: blackjack, Huffman coding, an LRU cache and an RPN calculator."""

__version__ = "0.1.0"