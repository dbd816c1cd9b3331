"""
Build a root word list (start.txt) from a web page of words.

What it does:
- Downloads the page.
- Parses visible text and pulls out every alphabetic token.
- Keeps lowercase-able ASCII words whose length is within [--min, --max].
- De-duplicates while preserving page order, and writes to file.

Usage:
    python -m script.fetch_start_words --url <page> --out packages/datasets/data/start.txt
    # or alphabetically sorted:
    python -m script.fetch_start_words --url <page> --sort --min 8 --max 8
"""

import re
import argparse

import requests
from bs4 import BeautifulSoup

from packages.datasets.io import unique_preserve_order, write_lines

WORD_RE = re.compile(r"\b[A-Za-z]+\b")


def extract_words(html: str, *, min_len: int, max_len: int) -> list[str]:
    soup = BeautifulSoup(html, "html.parser")
    text = soup.get_text("\n", strip=True)
    words = [m.group(0).lower() for m in WORD_RE.finditer(text)]
    words = [w for w in words if w.isascii() and min_len <= len(w) <= max_len]
    return unique_preserve_order(words)


def fetch_words(url: str, *, min_len: int, max_len: int) -> list[str]:
    r = requests.get(url, timeout=30)
    r.raise_for_status()
    return extract_words(r.text, min_len=min_len, max_len=max_len)


def main():
    ap = argparse.ArgumentParser(description="Extract root words from a web page")
    ap.add_argument("--url", required=True)
    ap.add_argument("--out", default="packages/datasets/data/start.txt")
    ap.add_argument("--min", dest="min_len", type=int, default=8, help="shortest word to keep")
    ap.add_argument("--max", dest="max_len", type=int, default=8, help="longest word to keep")
    ap.add_argument("--sort", action="store_true", help="sort alphabetically instead of keeping "
                                                        "page order")
    args = ap.parse_args()

    words = fetch_words(args.url, min_len=args.min_len, max_len=args.max_len)
    if args.sort:
        words = sorted(words)

    write_lines(words, args.out)
    print(f"Wrote {len(words)} unique words -> {args.out}")


if __name__ == "__main__":
    main()
