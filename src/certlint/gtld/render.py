"""
Render the merged TLD table as the generated `certlint.tld_data` module.

Output is deterministic: labels are emitted in sorted order and every value
goes through repr(). The finished text is parsed with `ast` before it is
handed to a writer, so a broken rendering never reaches the destination.
"""

from __future__ import annotations

import ast
from collections.abc import Mapping

from certlint.domain.models import GTLDPeriod
from certlint.result import ErrorCode, Result

_HEADER = '''\
# Code generated by certlint-tld-update; DO NOT EDIT.
"""
Top-level domain validity periods.

Merged from the ICANN gTLD registry (delegation and removal dates) and the
IANA TLD list (ccTLDs, default delegation date 1985-01-01). Regenerate with:

    certlint-tld-update src/certlint/tld_data.py
"""

from certlint.domain.models import GTLDPeriod

TLD_MAP: dict[str, GTLDPeriod] = {
'''

_FOOTER = '''\
    # .onion is a special case and not a general gTLD. It is allowed in some
    # circumstances in the web PKI, so it is included with the date of the
    # CABF ballot permitting EV issuance for .onion names:
    # https://cabforum.org/2015/02/18/ballot-144-validation-rules-dot-onion-names/
    'onion': GTLDPeriod(gtld='onion', delegation_date='2015-02-18', removal_date=''),
}
'''


def _render_entry(period: GTLDPeriod) -> str:
    return (
        f"    {period.gtld!r}: GTLDPeriod(gtld={period.gtld!r}, "
        f"delegation_date={period.delegation_date!r}, "
        f"removal_date={period.removal_date!r}),\n"
    )


def _render(table: Mapping[str, GTLDPeriod]) -> str:
    body = "".join(
        _render_entry(table[label]) for label in sorted(table) if label != "onion"
    )
    source = _HEADER + body + _FOOTER
    ast.parse(source, filename="tld_data.py")
    return source


def render_tld_module(table: Mapping[str, GTLDPeriod]) -> Result[str]:
    """
    Produce the full module source for `table`.

    Returns Result.failure(RENDER_ERROR, ...) if the text cannot be
    assembled or is not valid Python.
    """
    return Result.from_computation(
        lambda: _render(table),
        ErrorCode.RENDER_ERROR,
        "unable to render TLD map",
    )
