"""Typed requests for every bosh action boshci issues.

A request only carries its arguments; L{render} is the one place that
knows the bosh argument syntax and quoting.
"""

import shlex
from pathlib import Path
from typing import NamedTuple, Union


class SetTarget(NamedTuple):
    address: str

    def args(self) -> list[str]:
        return ["target", self.address]


class Login(NamedTuple):
    username: str
    password: str

    def args(self) -> list[str]:
        return ["login", self.username, self.password]


class SelectDeployment(NamedTuple):
    name: str

    def args(self) -> list[str]:
        return ["deployment", self.name]


class CreatePatch(NamedTuple):
    path: Path

    def args(self) -> list[str]:
        return ["create", "deployment", "patch", str(self.path)]


class ApplyPatch(NamedTuple):
    path: Path

    def args(self) -> list[str]:
        return ["apply", "deployment", "patch", str(self.path)]


class PrepareDeployment(NamedTuple):
    def args(self) -> list[str]:
        return ["prepare", "deployment"]


class Deploy(NamedTuple):
    skip_merge: bool = False

    def args(self) -> list[str]:
        return ["deploy", "--skip-merge"] if self.skip_merge else ["deploy"]


class RunErrand(NamedTuple):
    errand: str

    def args(self) -> list[str]:
        return ["run", "errand", self.errand]


class ListDeployments(NamedTuple):
    def args(self) -> list[str]:
        return ["deployments"]


class DeleteDeployment(NamedTuple):
    name: str
    force: bool = True

    def args(self) -> list[str]:
        argv = ["delete", "deployment", self.name]
        if self.force:
            argv.append("--force")
        return argv


Request = Union[
    SetTarget,
    Login,
    SelectDeployment,
    CreatePatch,
    ApplyPatch,
    PrepareDeployment,
    Deploy,
    RunErrand,
    ListDeployments,
    DeleteDeployment,
]


def render(request: Request, executable: str = "bosh") -> str:
    """Builds the non-interactive bosh command line for a request.

    Args:
        request: The action to perform.
        executable: The bosh CLI to call.

    Returns:
        The command line, quoted for C{shlex.split}.
    """
    return shlex.join([executable, "-n", *request.args()])
