"""A parser for the table printed by C{bosh deployments}.

The table looks like::

    +--------+------------+-------------------+
    | Name   | Release(s) | Stemcell(s)       |
    +--------+------------+-------------------+
    | foo-z1 | foo/1      | bosh-stemcell/123 |
    +--------+------------+-------------------+

    Deployments total: 1
"""

from logging import getLogger

from ..types import InventoryEntry

logger = getLogger("boshci.parsers.deployments")


def _is_border(line: str) -> bool:
    return bool(line) and set(line) <= {"+", "-"}


def parse_deployments_table(text: str) -> list[InventoryEntry]:
    """Extracts the deployments listed in a bosh table.

    Args:
        text: The output of C{bosh deployments}.

    Returns:
        One entry per data row, in table order. Empty if the table has
        no rows or the text is not a table.
    """
    entries: list[InventoryEntry] = []
    header_seen = False

    for raw in text.splitlines():
        line = raw.strip()
        if not line or _is_border(line) or not line.startswith("|"):
            continue
        if not header_seen:
            header_seen = True
            continue

        cells = [x.strip() for x in line.strip("|").split("|")]
        if not cells[0]:
            # continuation of a multi-line row
            continue
        cells += [""] * (3 - len(cells))
        entry = InventoryEntry(cells[0], cells[1], cells[2])
        logger.debug("found deployment %s", entry.name)
        entries.append(entry)

    return entries
