"""
certlint — X.509 certificate linter.

Runs a registry of named conformance checks (CA/Browser Forum Baseline
Requirements, ETSI EN 319 412-5 QC statements) against decoded certificates,
and maintains the top-level domain validity table some of those checks use.

Built on a small Railway-Oriented Programming Result type for explicit,
composable error handling.
"""

__version__ = "0.1.0"
