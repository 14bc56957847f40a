# tfidfsearch

A small text search tool. It builds a TF-IDF matrix (vocabulary × documents)
from a folder of plain-text articles and ranks the articles against a keyword
query by cosine similarity.

Counting a term in a text compares letters case-insensitively (ASCII letters
only) and tolerates one missing or extra letter. When a query word is matched
against the vocabulary, the accents á, é, í, ó, ã, õ and ç are also ignored.

## Installing

```
pip install .
```

To run the tests, install with the test extra:

```
pip install .[test]
pytest
```

## Using the program

```
tfidfsearch
```

This starts an interactive menu (its prompts are in Portuguese):

- **0**: quit
- **1**: map the data. Reads every file in the texts directory whose name does
  not start with `.` (in name order) and the vocabulary file (one term per
  line), then writes the matrix file.
- **2**: load the saved matrix file
- **3**: search. Type keywords. If the query starts with digits (up to four),
  for example `10 energia solar`, that many results are shown; otherwise the
  top 5 are shown. Each result shows the article's path, its score and its
  first line.
- **4**: print the document names and the loaded matrix

Searching and printing require the matrix to be loaded first with option 2.

The paths default to `./textos`, `./Datas/vocabulary.txt` and
`./Datas/matrix.dat`, and can be changed:

```
tfidfsearch --texts DIR --vocabulary FILE --matrix FILE
```

## Using the library

```python
from tfidfsearch.cli import build_database, run_search
from tfidfsearch.matrix import load_matrix

build_database("./textos", "./Datas/vocabulary.txt", "./Datas/matrix.dat")
matrix = load_matrix("./Datas/matrix.dat")
print(run_search(matrix, "3 energia solar"))
```

The pieces used above are available on their own:

- `tfidfsearch.kmp.count_matches(pattern, text)` counts occurrences of a
  pattern, tolerating one missing letter; `build_lps(pattern)` gives the KMP
  prefix table.
- `tfidfsearch.textstats` has `count_words`, `iter_chunks`, `word_frequency`
  and `term_frequency`.
- `tfidfsearch.matrix` has `list_documents`, `read_vocabulary`,
  `build_matrix`, `save_matrix`, `load_matrix` and `format_matrix`, and the
  `TfIdfMatrix` and `TermRow` data classes. A malformed or truncated matrix
  file raises `MatrixFormatError`.
- `tfidfsearch.ranking.rank_scores(scores)` returns `RankedDocument` entries
  ordered by descending score.
- `tfidfsearch.search` has `parse_query`, `query_vector`,
  `similarity_vector`, `format_titles`, `first_line`, `strip_accent` and
  `equal_ignoring_accents`.

## Matrix file format

All numbers are little-endian: a 32-bit document count, then each document
path in a 270-byte NUL-padded field, a 32-bit term count, then for each term
a 30-byte NUL-padded word, one 32-bit float weight per document and its
32-bit float IDF. Text is UTF-8.