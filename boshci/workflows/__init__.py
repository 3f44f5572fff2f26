"""This package contains the CI workflows of boshci.

Each module in this package defines one workflow. The modules are
imported on load and every L{Workflow} subclass found in them is
registered in L{WORKFLOWS} under its name.
"""

import importlib
from logging import getLogger
from pathlib import Path

from ._workflow import Workflow as Workflow

logger = getLogger("boshci.workflows")

_rootdir = Path(__file__).resolve().parent
WORKFLOWS: dict[str, type[Workflow]] = {}

for pth in sorted(_rootdir.glob("*.py")):
    modname = pth.name[:-3]

    # skip __init__, _workflow ...
    if modname.startswith("_"):
        continue
    logger.debug("loading workflow module %s", modname)
    module = importlib.import_module("." + modname, "boshci.workflows")

    for x in vars(module).values():
        if isinstance(x, type) and issubclass(x, Workflow) and x is not Workflow:
            WORKFLOWS[x.name] = x
