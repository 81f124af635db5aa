"""Interactive word search over a single book."""

from __future__ import annotations

import sys
from typing import TextIO

from wordsearch.inverted_index import InvertedIndex, TooManyFilesError

MAX_TERMS = 20
INPUT_LIMIT = 99  # characters read per prompt, the rest stays for the next one
EXIT_COMMAND = "exit()"

_RESET = "\033[0m"
_TITLE = "\033[4;31m==================== Word/s Search Engine ======================"
_PROMPT = "\033[4;33mIngrese la/s palabra/s a buscar (separadas por comas):"


class EmptyInputError(Exception):
    """Raised when the user enters no words at the prompt."""


def parse_terms(text: str) -> list[str]:
    """Split comma-separated input into at most 20 space-trimmed terms.

    Empty pieces between consecutive commas are skipped; a piece made only
    of spaces becomes an empty term.
    """
    pieces = (piece for piece in text.split(",") if piece)
    return [piece.strip(" ") for piece, _ in zip(pieces, range(MAX_TERMS))]


def show_title(out: TextIO | None = None) -> None:
    """Write the program banner."""
    out = sys.stdout if out is None else out
    out.write(f"{_TITLE}{_RESET}\n")


def ask_words(stdin: TextIO | None = None, out: TextIO | None = None) -> str:
    """Prompt for the words to search and return the entered line."""
    stdin = sys.stdin if stdin is None else stdin
    out = sys.stdout if out is None else out
    out.write(f"\n{_PROMPT}{_RESET} ")
    out.flush()
    line = stdin.readline(INPUT_LIMIT)
    words = line.split("\n", 1)[0]
    if not words:
        out.write(
            f"\n\033[0;31mNo se ingresó ninguna palabra. Reintentando...{_RESET}\n"
        )
        raise EmptyInputError("no words entered")
    out.write(f"\n\033[0;33mBuscando la/s palabra/s: {words}{_RESET}\n")
    return words


def _report(index: InvertedIndex, terms: list[str], out: TextIO) -> None:
    results = index.search(terms)
    if not results:
        out.write(
            "\nNo se encontraron resultados para los términos especificados.\n"
        )
        return
    out.write(f"\nResultados encontrados ({len(results)}):\n")
    for result in results:
        out.write(
            f"Documento {result.doc_id}: líneas {result.first_line} "
            f"a {result.last_line}\n"
        )
        out.write("--- Contenido aproximado: ---\n")
        out.writelines(index.result_lines(result))
        out.write("------------------------------\n")


def main(argv: list[str] | None = None) -> int:
    """Index the book named on the command line and answer searches."""
    args = sys.argv[1:] if argv is None else list(argv)
    stdin, out = sys.stdin, sys.stdout
    if len(args) != 1:
        out.write("Usage: wordsearch <file>\n")
        return 1
    file_name = args[0]

    with InvertedIndex() as index:
        try:
            index.load_file(file_name)
        except (OSError, TooManyFilesError) as exc:
            sys.stderr.write(f"{exc}\n")
            sys.stderr.write(f"Error cargando fichero '{file_name}'\n")
            return 1

        while True:
            show_title(out)
            out.write(f"{EXIT_COMMAND} para salir\n")
            try:
                words = ask_words(stdin, out)
            except EmptyInputError:
                return 1
            if words == EXIT_COMMAND:
                out.write("\nSaliendo...\n")
                return 0
            _report(index, parse_terms(words), out)
            out.write("\n\n")


if __name__ == "__main__":
    sys.exit(main())