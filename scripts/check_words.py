#!/usr/bin/env python3
"""
Check words against one locale's Hunspell dictionary.

Prints each word with its status and, for unknown words, the top
suggestions. Handy for checking a dictionary drop-in before deploying it.

Usage:
    python scripts/check_words.py --locale es_ES grasias hola
    python scripts/check_words.py --locale en_US --dictionaries ./dictionaries --limit 5 teh

Exit code is 1 when the dictionary cannot be loaded.
"""

import argparse
import sys
from pathlib import Path

# Add project root to path for standalone use
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from spellcomplete.services.dictionary_base import DictionaryLoadError  # noqa: E402
from spellcomplete.services.dictionary_hunspell import load_dictionary  # noqa: E402


def main():
    """Look up every word given on the command line."""
    parser = argparse.ArgumentParser(
        description="Check words against a Hunspell dictionary"
    )
    parser.add_argument("words", nargs="+", help="Words to check")
    parser.add_argument("--locale", required=True, help="Locale code, e.g. en_US")
    parser.add_argument(
        "--dictionaries", "-d",
        default=None,
        help="Directory holding <locale>.aff and <locale>.dic (default: SPELLCHECK_DICTIONARY_PATH)"
    )
    parser.add_argument("--limit", "-n", type=int, default=3, help="Suggestions per unknown word")
    args = parser.parse_args()

    print(f"Loading {args.locale}...")
    try:
        dictionary = load_dictionary(args.locale, dictionary_path=args.dictionaries)
    except DictionaryLoadError as e:
        print(f"Error: {e.message}")
        sys.exit(1)

    for word in args.words:
        if dictionary.check(word):
            print(f"  {word}: ok")
        else:
            suggestions = dictionary.suggest(word, args.limit)
            print(f"  {word}: unknown -> {', '.join(suggestions) or '(no suggestions)'}")


if __name__ == "__main__":
    main()
