"""
Execution engine — runs lints against certificates.

For one lint and one certificate:

  1. Effectivity   — notBefore outside the lint's window      → NA
  2. Applicability — lint.check_applies(cert) is false         → NA
  3. Verdict       — lint.execute(cert)                        → PASS / WARN / ERROR / FATAL

The three steps run inside Result.from_computation, so anything a lint or a
malformed certificate raises comes back as a LINT_FAULT failure and is turned
into a FATAL result here. `execute` never raises; a batch always completes.

Lints and registries are immutable, so calls may run concurrently.
"""

from __future__ import annotations

import structlog
from cryptography import x509

from certlint.domain.models import Lint, LintResult, LintStatus
from certlint.lints.registry import Registry
from certlint.result import ErrorCode, FailureDescription, Result

log = structlog.get_logger()

NOT_APPLICABLE = LintResult(LintStatus.NA)


def _evaluate(lint: Lint, certificate: x509.Certificate) -> LintResult:
    """The unguarded evaluation; may raise."""
    if not lint.is_effective(certificate.not_valid_before_utc):
        return NOT_APPLICABLE
    if not lint.check_applies(certificate):
        return NOT_APPLICABLE
    result = lint.execute(certificate)
    if not isinstance(result, LintResult):
        raise TypeError(f"lint returned {type(result).__name__}, expected LintResult")
    if not isinstance(result.status, LintStatus):
        raise TypeError(f"lint returned status {result.status!r}, expected a LintStatus")
    return result


def _fatal(lint: Lint, error: FailureDescription) -> LintResult:
    log.warning("lint.fault", lint=lint.name, error=error.describe())
    return LintResult(LintStatus.FATAL, error.describe())


def execute(lint: Lint, certificate: x509.Certificate) -> LintResult:
    """Evaluate `lint` against `certificate`. Never raises."""
    return Result.from_computation(
        lambda: _evaluate(lint, certificate),
        ErrorCode.LINT_FAULT,
        f"lint {lint.name} could not be evaluated",
    ).either(
        on_success=lambda result: result,
        on_failure=lambda error: _fatal(lint, error),
    )


def execute_all(registry: Registry, certificate: x509.Certificate) -> dict[str, LintResult]:
    """Run every registered lint; results keyed by lint name in registry order."""
    results = {lint.name: execute(lint, certificate) for lint in registry.all()}
    log.debug(
        "lint.batch_complete",
        lints=len(results),
        errors=sum(1 for r in results.values() if r.status is LintStatus.ERROR),
        fatal=sum(1 for r in results.values() if r.status is LintStatus.FATAL),
    )
    return results


def execute_named(
    registry: Registry,
    name: str,
    certificate: x509.Certificate,
) -> Result[LintResult]:
    """Run the lint called `name`; Result.failure(NOT_FOUND, ...) if unknown."""
    return registry.get(name).map(lambda lint: execute(lint, certificate))
