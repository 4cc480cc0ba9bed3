"""Command that loads a message file and reports on it."""

from __future__ import annotations

import argparse
import sys

from .text_loader import TextLoader

DEFAULT_FILE = "training_words_esp.csv"


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="spamnet",
        description="Load a labelled message file and show its vocabulary statistics.",
    )
    parser.add_argument("filename", nargs="?", default=DEFAULT_FILE)
    args = parser.parse_args(argv)

    loader = TextLoader(args.filename)
    try:
        loader.load_data()
    except OSError:
        print(f"No se pudo abrir el archivo: {args.filename}", file=sys.stderr)
        return 1

    dataset = loader.dataset
    print(f"Cantidad de ejemplos cargados: {len(dataset)}")
    print(f"Tamanho del vocabulario: {loader.vocabulary_size}")

    if not dataset:
        print("El dataset no tiene ejemplos", file=sys.stderr)
        return 1

    words = loader.vocabulary_list
    present = "".join(
        f"{word} " for word, count in zip(words, dataset[0].vectorized_text) if count
    )
    print(f"Map del primer dato del dataset: {present}")
    return 0


if __name__ == "__main__":
    sys.exit(main())