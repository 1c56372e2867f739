# upodesh

Word suggestions for Bangla typed with Roman letters. Given phonetic input
such as `amra` or `shadhinota`, upodesh returns the dictionary words that the
input could spell.

It works by matching the input, piece by piece, against a trie of phonetic
patterns. Each pattern expands to the Bangla letter sequences it may stand
for, and those are walked through a trie built from a word list, with common
suffixes tried after every step. Only words that exist in the list are
returned.

## Installation

```
pip install .
```

The package has no runtime dependencies. To run its tests:

```
pip install ".[test]"
pytest
```

## Data

upodesh does not bundle a dictionary. It reads three files:

- `preprocessed-patterns.json`: an object mapping each phonetic pattern to
  the list of Bangla sequences it may produce (an empty string in a list marks
  the pattern as optional);
- `source-words.txt`: the word list, one word per line (surrounding
  whitespace on each line is ignored);
- `source-common-patterns.json`: a list of common suffixes.

## Library use

```python
from upodesh.suggest import Suggest

suggest = Suggest.from_directory("path/to/data")
print(suggest.suggest("amra"))
```

`Suggest.suggest` returns the distinct matching words as a sorted list. It
raises `ValueError` when some part of the input cannot be matched by any
pattern.

If the files live in different places, load them one by one:

```python
suggest = Suggest.from_files(
    "path/to/preprocessed-patterns.json",
    "path/to/source-words.txt",
    "path/to/source-common-patterns.json",
)
```

or pass already-loaded data straight to
`Suggest(patterns, words, common_suffixes)`, where `patterns` is a mapping of
pattern to sequences and the other two are iterables of strings.

Input is normalised before matching: surrounding whitespace and anything that
is not an ASCII letter are dropped, letters are lower-cased, and an `o` at the
start or after a non-letter becomes `O`. The helper that does this is
`upodesh.utils.fix_string`:

```python
from upodesh.utils import fix_string

fix_string("o!o")        # "OO"
fix_string("osomapto")   # "Osomapto"
```

The tries used underneath are available as `upodesh.trie.Trie` and
`upodesh.trie.TrieNode`:

```python
from upodesh.trie import Trie

trie = Trie.from_strings(["ক", "কখগ", "কখগঘঙ"])
trie.match_longest_common_prefix("কখগঘঙচ")   # ("কখগঘঙ", "চ", True)
trie.match_prefix("কখ")                      # ["কখগ", "কখগঘঙ"]
```

## Command line

```
upodesh amra
upodesh --data path/to/data amra
```

The command loads the three data files from the directory given by `--data`
(default: the `UPODESH_DATA` environment variable, or `data` if that is not
set), then prints the word and its suggestions:

```
Word: amra
Suggestions: [...]
```

It exits with status 1, after a message on standard error, when no word is
given, when the data cannot be loaded, or when the word cannot be matched.
`upodesh --help` lists the options.

## What it does not do

upodesh only turns one romanised word into candidate words. It ships no
dictionary or pattern data, does not rank the suggestions beyond sorting
them, and is not an interactive input method.