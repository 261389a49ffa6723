'''
    Description:
        - Wycheproof RSA signature test harness for the SubtleCrypto provider.
        - Test case records, the import / verify phases, vector loading and a
          corpus runner.
'''

from .rsa_util import (
    RSASSA_PKCS1, RSA_PSS, ExpectedResult, CaseState, RsaSignatureTestCase,
    import_public_key, verify,
)
from .vectors import load_test_cases, parse_vector_file, iter_vector_files
from .runner import CaseOutcome, RunSummary, run_test_case, run_corpus

__all__ = [
    "RSASSA_PKCS1", "RSA_PSS", "ExpectedResult", "CaseState", "RsaSignatureTestCase",
    "import_public_key", "verify",
    "load_test_cases", "parse_vector_file", "iter_vector_files",
    "CaseOutcome", "RunSummary", "run_test_case", "run_corpus",
]
