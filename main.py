# main.py
# Run: python main.py [vector files...] [--concurrency N]

'''
    Description:
        - Runs Wycheproof RSA signature vectors against the SubtleCrypto
          provider and reports the outcome per expected result.
        - With no files given, every RSA signature vector file in the
          configured directory (WYCHEPROOF_VECTOR_DIR) is run.
'''

# ==== Imports ====
from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from typing import List, Optional

from wycheproof.config import settings
from wycheproof.runner import RunSummary, run_corpus
from wycheproof.vectors import iter_vector_files, load_test_cases

log = logging.getLogger("wycheproof.main")


LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _positive_int(value: str) -> int:
    try:
        n = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid int value: {value!r}") from None
    if n < 1:
        raise argparse.ArgumentTypeError(f"must be >= 1, got {n}")
    return n


def _positive_float(value: str) -> float:
    try:
        f = float(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid float value: {value!r}") from None
    if f <= 0:
        raise argparse.ArgumentTypeError(f"must be > 0, got {f}")
    return f


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Run Wycheproof RSA signature vectors")
    p.add_argument("files", nargs="*", help="vector files (default: all in the vector directory)")
    p.add_argument("--concurrency", type=_positive_int, default=settings.MAX_CONCURRENCY)
    p.add_argument("--timeout", type=_positive_float, default=settings.CASE_TIMEOUT, help="seconds per test case")
    p.add_argument("--log-level", type=str.upper, choices=LOG_LEVELS, default=settings.LOG_LEVEL.upper())
    p.add_argument("--include-unsupported", action="store_true",
                   help="keep groups with unsupported hashes (they fail at the pre-import check)")
    return p.parse_args(argv)


def report(summary: RunSummary) -> None:
    for (result, status), count in sorted(summary.by_result().items()):
        log.info("  %-10s %-6s %d", result, status, count)
    for o in summary.failures:
        log.error("FAILED %s %s", o.tag(), o.message)


async def run(files: List[str], concurrency: int, timeout: float, skip_unsupported: bool) -> RunSummary:
    paths = files or [str(p) for p in iter_vector_files()]
    if not paths:
        log.warning("no vector files found in %s", settings.vector_dir)
    cases = []
    for path in paths:
        cases.extend(load_test_cases(path, skip_unsupported))
    return await run_corpus(cases, concurrency=concurrency, timeout=timeout)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(level=args.log_level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    summary = asyncio.run(run(args.files, args.concurrency, args.timeout, not args.include_unsupported))
    report(summary)
    return 0 if summary.ok() else 1


if __name__ == "__main__":
    sys.exit(main())
