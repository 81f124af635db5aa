# wordsearch

Find where several words appear close together in a plain-text book.

`wordsearch` builds an inverted index of text files. Every run of ASCII
letters at least four letters long is indexed in lower case, together with its
byte offset in the file. A word that runs right up to the end of the file is
not indexed.

A search takes a list of words, lowers their ASCII letters, and, for each
loaded document, gathers the sorted positions of every search word that is in
the index. It then reports the first window spanning at most 100 bytes that
holds at least as many positions as there were search words. The result is
given as a 1-based line range. Documents without such a window are left out.

## Installation

```
pip install .
```

For the test suite:

```
pip install ".[test]"
pytest
```

## Command line

```
wordsearch DonQuijote.txt
```

The book is looked up in a `libros/` directory relative to the current working
directory. In this example, the command indexes `libros/DonQuijote.txt`. If the
file cannot be opened, the command prints an error and exits with status 1.
Otherwise it shows a banner and asks for words separated by commas:

```
Ingrese la/s palabra/s a buscar (separadas por comas): escribano, Consejo
```

- Spaces around each term are trimmed. Empty pieces between commas are
  skipped. At most 20 terms are used.
- At most 99 characters are read per prompt. Anything longer is left for the
  next prompt.
- For each matching document, the command prints the document id, the line
  range, and the lines in that range.
- Type `exit()` to quit with status 0.
- An empty line, or the end of input, stops the program with status 1.

The prompts and messages are in Spanish and use ANSI colour codes.

## Library use

```python
from wordsearch.inverted_index import InvertedIndex

with InvertedIndex("libros") as index:
    doc_id = index.load_file("DonQuijote.txt")
    for result in index.search(["escribano", "Consejo"]):
        print(result.doc_id, result.first_line, result.last_line)
        for line in index.result_lines(result):
            print(line, end="")
```

- `InvertedIndex(base_dir)` resolves file names against `base_dir`, which
  defaults to `libros/`.
- `load_file` returns the new document's id, starting at 0. At most five files
  can be loaded into one index; a sixth raises `TooManyFilesError`.
- `search` returns a list of `SearchResult` objects, each with `doc_id`,
  `first_line` and `last_line`.
- `result_lines` returns the covered lines with their line endings kept.
- `close()`, or leaving the `with` block, closes the loaded files.
- `normalize_words(words)` returns the words with their ASCII letters lowered.

The building blocks can also be used on their own:

- `wordsearch.hashtable.HashTable` is an open-addressing hash table with
  quadratic probing.
  - It is a mutable mapping keyed by strings: `table[key] = value`,
    `key in table`, `del table[key]`, `len(table)`, and iteration over keys.
  - Non-string keys raise `TypeError`. Missing keys raise `KeyError`.
  - It starts with 257 slots (see `capacity`). It grows to `2 * capacity + 1`
    slots when an insertion would take the load factor above 0.7.
  - `key_number(key)` gives the base-27 number a key hashes from.
- `wordsearch.occurrence` has two classes:
  - `Occurrence` holds a document id and its positions.
  - `OccurrenceList` keeps occurrences in insertion order, with `append`,
    `find`, `add_position`, `position_count` and `merge`. Negative positions
    raise `ValueError`.
- `wordsearch.filemanager` has four functions:
  - `open_book(path, base_dir)` opens a book for binary reading.
  - `get_lines` and `print_lines` read a 1-based inclusive line range.
  - `find_line_by_position` maps a byte offset to its line number.
  - Invalid ranges and offsets raise `ValueError`.

## What it does not do

The index lives in memory only. It is rebuilt from the files every time and is
never saved to disk. The command line indexes a single book per run.