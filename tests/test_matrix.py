import struct

import pytest

from tfidfsearch.matrix import (
    PATH_FIELD_SIZE,
    WORD_FIELD_SIZE,
    MatrixFormatError,
    TermRow,
    TfIdfMatrix,
    build_matrix,
    format_matrix,
    list_documents,
    load_matrix,
    read_vocabulary,
    save_matrix,
)


def _sample_matrix():
    return TfIdfMatrix(
        documents=["./textos/a.txt", "./textos/b.txt"],
        rows=[
            TermRow("gato", 0.5, [0.25, 0.0]),
            TermRow("ração", 1.0, [0.0, 0.125]),
        ],
    )


def test_list_documents_skips_hidden_entries(tmp_path):
    for name in ("b.txt", "a.txt", ".hidden"):
        (tmp_path / name).write_text("x ")
    found = list_documents(tmp_path)
    assert found == [f"{tmp_path}/a.txt", f"{tmp_path}/b.txt"]


def test_list_documents_missing_directory(tmp_path):
    with pytest.raises(FileNotFoundError):
        list_documents(tmp_path / "absent")


def test_read_vocabulary_keeps_trailing_empty_term(tmp_path):
    vocab = tmp_path / "vocabulary.txt"
    vocab.write_text("gato\ncachorro\n", encoding="utf-8")
    assert read_vocabulary(vocab) == ["gato", "cachorro", ""]


def test_read_vocabulary_truncates_long_terms(tmp_path):
    vocab = tmp_path / "vocabulary.txt"
    vocab.write_text("x" * 40 + "\ny", encoding="utf-8")
    terms = read_vocabulary(vocab)
    assert terms == ["x" * WORD_FIELD_SIZE, "y"]


def test_build_matrix_absent_term_has_zero_weights(tmp_path):
    docs = []
    for index in range(10):
        path = tmp_path / f"doc{index}.txt"
        path.write_text("dog runs home ", encoding="utf-8")
        docs.append(str(path))
    matrix = build_matrix(["zzzz"], docs)
    assert matrix.num_terms == 1
    assert matrix.num_documents == 10
    row = matrix.rows[0]
    assert row.weights == [0.0] * 10
    assert row.idf == pytest.approx(1.0)


def test_build_matrix_present_term_weighs_only_its_document(tmp_path):
    texts = ["the cat sat ", "dog runs home ", "dog runs home "]
    docs = []
    for index, text in enumerate(texts):
        path = tmp_path / f"doc{index}.txt"
        path.write_text(text, encoding="utf-8")
        docs.append(str(path))
    matrix = build_matrix(["cat"], docs)
    row = matrix.rows[0]
    assert row.word == "cat"
    assert row.idf > 0
    assert row.weights[0] > 0
    assert row.weights[1:] == [0.0, 0.0]
    assert matrix.documents == docs


def test_build_matrix_missing_document(tmp_path):
    with pytest.raises(FileNotFoundError):
        build_matrix(["cat"], [str(tmp_path / "missing.txt")])


def test_save_and_load_round_trip(tmp_path):
    original = _sample_matrix()
    target = tmp_path / "matrix.dat"
    save_matrix(original, target)
    assert load_matrix(target) == original


def test_saved_file_layout(tmp_path):
    matrix = _sample_matrix()
    target = tmp_path / "matrix.dat"
    save_matrix(matrix, target)
    data = target.read_bytes()
    docs, terms = matrix.num_documents, matrix.num_terms
    assert len(data) == 4 + docs * PATH_FIELD_SIZE + 4 + terms * (WORD_FIELD_SIZE + 4 * docs + 4)
    assert data[:4] == struct.pack("<i", docs)
    names_end = 4 + docs * PATH_FIELD_SIZE
    assert data[names_end : names_end + 4] == struct.pack("<i", terms)
    assert data[4 : 4 + len("./textos/a.txt")] == b"./textos/a.txt"


def test_load_truncated_file(tmp_path):
    target = tmp_path / "matrix.dat"
    save_matrix(_sample_matrix(), target)
    target.write_bytes(target.read_bytes()[:-3])
    with pytest.raises(MatrixFormatError):
        load_matrix(target)


def test_load_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_matrix(tmp_path / "nothing.dat")


def test_save_rejects_oversized_term(tmp_path):
    matrix = TfIdfMatrix(["doc"], [TermRow("w" * (WORD_FIELD_SIZE + 1), 0.0, [0.0])])
    with pytest.raises(MatrixFormatError):
        save_matrix(matrix, tmp_path / "matrix.dat")


def test_save_rejects_ragged_rows(tmp_path):
    matrix = TfIdfMatrix(["a", "b"], [TermRow("w", 0.0, [0.0])])
    with pytest.raises(MatrixFormatError):
        save_matrix(matrix, tmp_path / "matrix.dat")


def test_empty_matrix_round_trip(tmp_path):
    target = tmp_path / "matrix.dat"
    save_matrix(TfIdfMatrix(), target)
    loaded = load_matrix(target)
    assert loaded.num_terms == 0
    assert loaded.num_documents == 0


def test_format_matrix():
    matrix = TfIdfMatrix(["doc"], [TermRow("w", 0.5, [0.25])])
    assert format_matrix(matrix) == "\tdoc\n1 X 1 \nw [0.500000] -> 0.250000 "


def test_format_matrix_lists_every_row():
    text = format_matrix(_sample_matrix())
    assert text.startswith("\t./textos/a.txt\t./textos/b.txt\n2 X 2 ")
    assert "\ngato [" in text
    assert "\nração [" in text