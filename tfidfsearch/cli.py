"""Interactive menu for building the TF-IDF database and searching it."""

from __future__ import annotations

import argparse
import os
from collections.abc import Sequence

from tfidfsearch.matrix import (
    MatrixFormatError,
    TfIdfMatrix,
    build_matrix,
    format_matrix,
    list_documents,
    load_matrix,
    read_vocabulary,
    save_matrix,
)
from tfidfsearch.ranking import rank_scores
from tfidfsearch.search import format_titles, parse_query, query_vector, similarity_vector

DEFAULT_TEXTS_DIR = "./textos"
DEFAULT_VOCABULARY = "./Datas/vocabulary.txt"
DEFAULT_MATRIX = "./Datas/matrix.dat"

MENU = (
    "\nDigite o número da operação que deseja realizar:"
    "\n\t[0] Finalizar"
    "\n\t[1] Mapear Dados"
    "\n\t[2] Carregar Dados"
    "\n\t[3] Buscar Artigo"
    "\n\t[4] Ver Dados(Não recomendado quando utilizado grande quantidade de dados)"
    "\n>>>"
)


def build_database(
    texts_dir: str | os.PathLike[str] = DEFAULT_TEXTS_DIR,
    vocabulary_path: str | os.PathLike[str] = DEFAULT_VOCABULARY,
    matrix_path: str | os.PathLike[str] = DEFAULT_MATRIX,
) -> TfIdfMatrix:
    """Compute the TF-IDF matrix of the texts in *texts_dir* and save it."""
    documents = list_documents(texts_dir)
    vocabulary = read_vocabulary(vocabulary_path)
    matrix = build_matrix(vocabulary, documents)
    save_matrix(matrix, matrix_path)
    return matrix


def run_search(matrix: TfIdfMatrix, query: str) -> str:
    """Rank the documents of *matrix* against the typed *query* and render them."""
    limit, words = parse_query(query)
    vector = query_vector(words, matrix)
    ranking = rank_scores(similarity_vector(matrix, vector))
    return format_titles(ranking, matrix.documents, limit)


def _say(text: str) -> None:
    print(text, end="", flush=True)


def _read_operation() -> int:
    while True:
        _say(MENU)
        try:
            line = input()
        except EOFError:
            return 0
        try:
            operation = int(line.strip())
        except ValueError:
            continue
        if 0 <= operation <= 4:
            return operation


def _read_query() -> str:
    while True:
        try:
            line = input()
        except EOFError:
            return ""
        if line.strip():
            return line


def main(argv: Sequence[str] | None = None) -> int:
    """Run the interactive menu until the user chooses to finish."""
    parser = argparse.ArgumentParser(description="Busca de textos por TF-IDF.")
    parser.add_argument("--texts", default=DEFAULT_TEXTS_DIR)
    parser.add_argument("--vocabulary", default=DEFAULT_VOCABULARY)
    parser.add_argument("--matrix", default=DEFAULT_MATRIX)
    args = parser.parse_args(argv)

    matrix: TfIdfMatrix | None = None
    while (operation := _read_operation()) != 0:
        if operation == 1:
            _say("\nInicializando...")
            _say("\nCriando Matriz...")
            try:
                build_database(args.texts, args.vocabulary, args.matrix)
            except (OSError, MatrixFormatError) as exc:
                _say(f"\nNão foi possível construir a base de dados: {exc}")
            else:
                _say("\nMatriz salva com sucesso!!")
        elif operation == 2:
            if matrix is not None:
                _say("\nLimpando dados...")
                matrix = None
                _say("\nImportando novos dados")
            try:
                matrix = load_matrix(args.matrix)
            except (OSError, MatrixFormatError):
                _say("\nNão foi possível abrir o arquivo!!")
            else:
                _say("\nMatriz carregada com sucesso!!")
        elif matrix is None:
            _say("\nCarregue a matriz primeiro!!")
        elif operation == 3:
            _say("\nDigite as palavras chaves da busca:\n")
            try:
                _say(run_search(matrix, _read_query()))
            except OSError as exc:
                _say(f"\nNão foi possível ler um documento: {exc}")
        else:
            _say(format_matrix(matrix))

    _say("\nEncerrando Programa...")
    _say("\nPrograma Encerrado!!\n")
    return 0