"""
Entry points — composition roots for the two command-line tools.

  certlint-tld-update [OUTPUT]
      Build the TLD validity table from the ICANN/IANA feeds and write the
      generated module to OUTPUT (created or truncated) or to stdout.

  certlint [--lint NAME | --source SOURCE] CERT [CERT ...]
      Run one lint, one standard's lints, or every registered lint against
      PEM/DER certificates and print a JSON report.

This is the only place where concrete adapters are instantiated.
Logs go to stderr so stdout only ever carries generated output or reports.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
import time
from collections.abc import Sequence
from pathlib import Path

import structlog

from certlint import __version__
from certlint.adapters.certificate_loader import load_certificate
from certlint.adapters.http_client import HttpFeedFetcher
from certlint.adapters.output_writer import FileOutputWriter, StreamOutputWriter
from certlint.config import AppSettings
from certlint.domain.models import LintResult, LintSource
from certlint.domain.ports import OutputWriter
from certlint.lints.engine import execute_all, execute_named
from certlint.lints.registry import Registry, build_default_registry
from certlint.pipeline import run_tld_update


def _stderr_logger(*args: object) -> structlog.PrintLogger:
    # Resolved per logger so a replaced sys.stderr is picked up.
    return structlog.PrintLogger(file=sys.stderr)


def configure_structlog(log_level: str = "INFO") -> None:
    """Configure structlog for human-readable console logging on stderr."""
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.StackInfoRenderer(),
            structlog.dev.set_exc_info,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(
            getattr(logging, log_level.upper(), logging.INFO)
        ),
        context_class=dict,
        logger_factory=_stderr_logger,
        cache_logger_on_first_use=False,
    )


def _load_settings() -> AppSettings:
    try:
        return AppSettings()
    except Exception as e:
        print(f"FATAL: Configuration error — {e}", file=sys.stderr)  # noqa: T201
        sys.exit(1)


# ─────────────────────── certlint-tld-update ───────────────────────


def _create_writer(output: str | None) -> OutputWriter:
    if output is None:
        return StreamOutputWriter(sys.stdout)
    return FileOutputWriter(Path(output))


def tld_update(argv: Sequence[str] | None = None) -> int:
    """Build and write the TLD map. Returns the process exit status."""
    parser = argparse.ArgumentParser(
        prog="certlint-tld-update",
        description="Generate the certlint TLD validity table from ICANN/IANA data.",
    )
    parser.add_argument(
        "output",
        nargs="?",
        help="file to write (created or truncated); standard output when omitted",
    )
    args = parser.parse_args(argv)

    settings = _load_settings()
    configure_structlog(settings.log_level)
    log = structlog.get_logger()
    log.info(
        "tld_update.starting",
        version=__version__,
        gtld_json_url=settings.feeds.gtld_json_url,
        tld_list_url=settings.feeds.tld_list_url,
    )

    start = time.monotonic()
    result = run_tld_update(
        fetcher=HttpFeedFetcher(timeout=settings.http.timeout()),
        writer=_create_writer(args.output),
        gtld_json_url=settings.feeds.gtld_json_url,
        tld_list_url=settings.feeds.tld_list_url,
    )
    elapsed = round(time.monotonic() - start, 3)

    if result.is_failure():
        error = result.error()
        log.error("tld_update.failed", code=error.code.value, elapsed_s=elapsed)
        print(f"error updating gTLD map: {error.describe()}", file=sys.stderr)  # noqa: T201
        return 1

    log.info("tld_update.completed", chars_written=result.value(), elapsed_s=elapsed)
    return 0


# ─────────────────────── certlint ───────────────────────


def _result_json(result: LintResult) -> dict[str, str]:
    payload = {"result": result.status.value}
    if result.details:
        payload["details"] = result.details
    return payload


def _select_lints(registry: Registry, source: str | None) -> Registry:
    if source is None:
        return registry
    return Registry(registry.by_source(LintSource(source)))


def lint(argv: Sequence[str] | None = None) -> int:
    """Lint certificate files. Returns the process exit status."""
    parser = argparse.ArgumentParser(prog="certlint", description="Lint X.509 certificates.")
    parser.add_argument("certificates", nargs="+", type=Path, help="PEM or DER certificate files")
    selection = parser.add_mutually_exclusive_group()
    selection.add_argument("--lint", dest="lint_name", help="run only the named lint")
    selection.add_argument(
        "--source",
        choices=[source.value for source in LintSource],
        help="run only lints drawn from this standard",
    )
    args = parser.parse_args(argv)

    settings = _load_settings()
    configure_structlog(settings.log_level)
    log = structlog.get_logger()

    registry = _select_lints(build_default_registry(), args.source)
    if args.lint_name is not None and args.lint_name not in registry:
        print(f"error: no lint registered with name {args.lint_name!r}", file=sys.stderr)  # noqa: T201
        return 2

    report: dict[str, dict[str, dict[str, str]]] = {}
    status = 0
    for path in args.certificates:
        loaded = load_certificate(path)
        if loaded.is_failure():
            log.error("certificate.unreadable", path=str(path), error=loaded.error().describe())
            status = 1
            continue
        certificate = loaded.value()
        if args.lint_name is not None:
            results = {args.lint_name: execute_named(registry, args.lint_name, certificate).value()}
        else:
            results = execute_all(registry, certificate)
        report[str(path)] = {name: _result_json(result) for name, result in results.items()}

    json.dump(report, sys.stdout, indent=2)
    sys.stdout.write("\n")
    return status


def tld_update_main() -> None:
    sys.exit(tld_update())


def lint_main() -> None:
    sys.exit(lint())


if __name__ == "__main__":
    lint_main()
