#!/usr/bin/env python3

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]

# Allow running as "python tools/check_sources.py" (so repo root is importable)
sys.path.insert(0, str(ROOT))

from easy_i18n import TranslationStore  # noqa: E402
from easy_i18n.catalog import missing_keys  # noqa: E402


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(
        description="Check i18n source files for missing keys, or look up one key."
    )
    ap.add_argument(
        "--source",
        default=str(ROOT / "locales"),
        help="Directory with <lang>.json files (default: locales/).",
    )
    ap.add_argument("--lang", default=None, help="Language for --key lookup (case-insensitive).")
    ap.add_argument("--key", default=None, help="Source text to translate instead of checking coverage.")
    ap.add_argument("--ns", default=None, help="Namespace for --key (default: common).")
    ap.add_argument("values", nargs="*", help="Values for %%1, %%2, ... placeholders in --key.")
    ap.add_argument("-v", "--verbose", action="store_true", help="Log skipped files.")
    args = ap.parse_args(argv)

    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    skipped: list[Path] = []
    store = TranslationStore(on_error=lambda path, exc: skipped.append(path))
    store.set_source(args.source)

    if args.key is not None:
        if args.lang:
            store.set_lang(args.lang)
        if args.values:
            print(store.trans_with_inter(args.key, args.values, args.ns))
        else:
            print(store.translate(args.key, args.ns))
        return 0

    print("source:", args.source)
    print("languages:", ", ".join(store.languages) or "none")
    for path in skipped:
        print("skipped:", path)

    failed = bool(skipped)
    for lang, pairs in missing_keys(store.sources).items():
        for ns, key in pairs:
            print(f"missing: {lang} [{ns}] {key}")
            failed = True
    print("FAIL" if failed else "OK")
    return 1 if failed else 0


if __name__ == "__main__":
    raise SystemExit(main())
