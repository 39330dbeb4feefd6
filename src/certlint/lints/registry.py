"""
Lint registry — an immutable, name-indexed collection of lints.

The registry is assembled explicitly by a RegistryBuilder during startup
and then shared read-only with every execution site:

    registry = build_default_registry()
    lint = registry.get("e_qcstatem_etsi_type_as_statem").value()

Nothing is registered as an import side effect.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from types import MappingProxyType

import structlog

from certlint.domain.models import Lint, LintSource
from certlint.gtld.table import TldTable
from certlint.lints.dns import dns_lints
from certlint.lints.etsi import ETSI_LINTS
from certlint.result import ErrorCode, Result
from certlint.tld_data import TLD_MAP

log = structlog.get_logger()


class DuplicateLintError(ValueError):
    """Two lints were registered under the same name."""

    def __init__(self, name: str) -> None:
        super().__init__(f"lint {name!r} is already registered")
        self.name = name


class Registry:
    """Read-only index of lints in registration order."""

    def __init__(self, lints: Iterable[Lint]) -> None:
        ordered = tuple(lints)
        index: dict[str, Lint] = {}
        for lint in ordered:
            if lint.name in index:
                raise DuplicateLintError(lint.name)
            index[lint.name] = lint
        self._lints = ordered
        self._index = MappingProxyType(index)

    def get(self, name: str) -> Result[Lint]:
        """Look up a lint; Result.failure(NOT_FOUND, ...) for unknown names."""
        return Result.from_optional(
            self._index.get(name),
            f"no lint registered with name {name!r}",
            ErrorCode.NOT_FOUND,
        )

    def all(self) -> tuple[Lint, ...]:
        return self._lints

    def names(self) -> tuple[str, ...]:
        return tuple(lint.name for lint in self._lints)

    def by_source(self, source: LintSource) -> tuple[Lint, ...]:
        return tuple(lint for lint in self._lints if lint.source is source)

    def __len__(self) -> int:
        return len(self._lints)

    def __contains__(self, name: object) -> bool:
        return name in self._index

    def __iter__(self) -> Iterator[Lint]:
        return iter(self._lints)


class RegistryBuilder:
    """Collects lint definitions once, then freezes them into a Registry."""

    def __init__(self) -> None:
        self._lints: dict[str, Lint] = {}

    def register(self, lint: Lint) -> RegistryBuilder:
        """Add `lint`. Raises DuplicateLintError if the name is taken."""
        if lint.name in self._lints:
            raise DuplicateLintError(lint.name)
        self._lints[lint.name] = lint
        return self

    def register_all(self, lints: Iterable[Lint]) -> RegistryBuilder:
        for lint in lints:
            self.register(lint)
        return self

    def build(self) -> Registry:
        return Registry(self._lints.values())


def build_default_registry(tld_table: TldTable | None = None) -> Registry:
    """
    Register every lint shipped with certlint.

    `tld_table` defaults to the generated `certlint.tld_data.TLD_MAP`.
    """
    if tld_table is None:
        tld_table = TLD_MAP

    registry = (
        RegistryBuilder()
        .register_all(ETSI_LINTS)
        .register_all(dns_lints(tld_table))
        .build()
    )
    log.debug("registry.built", lints=len(registry))
    return registry
