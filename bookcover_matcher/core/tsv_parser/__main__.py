"""
Entry point for parsing a saved Tesseract TSV file as a module.
"""

import argparse

from bookcover_matcher import TsvLineParser
from pathlib           import Path

def main():

    parser = argparse.ArgumentParser(
        description = "Print the text lines and bounding boxes parsed from Tesseract TSV output."
    )
    parser.add_argument(
        "tsv_path",
        type = str,
        help = "Path to a file produced by 'tesseract <image> <base> tsv'."
    )
    args = parser.parse_args()

    tsv_path = Path(args.tsv_path).resolve()
    if not tsv_path.is_file():
        print(f"Error: The specified TSV file does not exist: {tsv_path}")
        return

    for line in TsvLineParser().parse(tsv_path.read_text(encoding = 'utf-8')):
        print(f"{line.text}\t{list(line.bounding_box)}")

if __name__ == "__main__":
    main()
