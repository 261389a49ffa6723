# wycheproof/runner.py

"""
Corpus runner: drives import-then-verify for many test cases and collects
the outcomes. A failing case never stops the others.
"""

from __future__ import annotations

import asyncio
import logging
from collections import Counter
from dataclasses import dataclass, field
from typing import Iterable, List, Optional

from .config import settings
from .rsa_util import CaseState, RsaSignatureTestCase

log = logging.getLogger(__name__)


@dataclass
class CaseOutcome:
    case: RsaSignatureTestCase
    passed: bool
    message: str = ""

    def tag(self) -> str:
        return f"tc{self.case.id}:{self.case.scheme}/{self.case.hash_alg}"


@dataclass
class RunSummary:
    outcomes: List[CaseOutcome] = field(default_factory=list)

    @property
    def total(self) -> int:
        return len(self.outcomes)

    @property
    def passed(self) -> int:
        return sum(1 for o in self.outcomes if o.passed)

    @property
    def failed(self) -> int:
        return self.total - self.passed

    @property
    def failures(self) -> List[CaseOutcome]:
        return [o for o in self.outcomes if not o.passed]

    def by_result(self) -> Counter:
        """(expected result, "passed"|"failed") -> count"""
        return Counter((o.case.result.value, "passed" if o.passed else "failed") for o in self.outcomes)

    def ok(self) -> bool:
        return self.failed == 0


async def _run_phases(tc: RsaSignatureTestCase) -> None:
    await tc.test_import_public_key()
    await tc.test_verification()


async def run_test_case(tc: RsaSignatureTestCase, timeout: Optional[float] = None) -> CaseOutcome:
    """Import then verify one case; assertion failures become a failed outcome."""
    if timeout is None:
        timeout = settings.CASE_TIMEOUT
    try:
        await asyncio.wait_for(_run_phases(tc), timeout=timeout)
    except AssertionError as e:
        log.warning("test case %s failed: %s", tc.id, e)
        return CaseOutcome(tc, False, str(e))
    except asyncio.TimeoutError:
        tc.state = CaseState.FAILED
        log.warning("test case %s timed out after %ss", tc.id, timeout)
        return CaseOutcome(tc, False, f"Timed out on test case {tc.id}")
    except Exception as e:
        tc.state = CaseState.FAILED
        log.exception("test case %s raised", tc.id)
        return CaseOutcome(tc, False, f"Error on test case {tc.id}: {e!r}")
    return CaseOutcome(tc, True)


async def run_corpus(cases: Iterable[RsaSignatureTestCase], concurrency: Optional[int] = None,
                     timeout: Optional[float] = None) -> RunSummary:
    if concurrency is None:
        concurrency = settings.MAX_CONCURRENCY
    if concurrency < 1:
        raise ValueError("concurrency must be >= 1")
    sem = asyncio.Semaphore(concurrency)

    async def _one(tc: RsaSignatureTestCase) -> CaseOutcome:
        async with sem:
            return await run_test_case(tc, timeout)

    outcomes = await asyncio.gather(*(_one(tc) for tc in cases))
    summary = RunSummary(list(outcomes))
    log.info("ran %d test cases: %d passed, %d failed", summary.total, summary.passed, summary.failed)
    return summary
