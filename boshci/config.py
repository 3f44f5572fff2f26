"""Handles the configuration for boshci.

This module reads the CI configuration file, picks up the credential
and confirmation overrides from the environment once, and allows for
overriding configuration options with command-line arguments.
"""

from argparse import Namespace
from collections.abc import Callable, Mapping
from logging import getLogger
import os
from pathlib import Path
from typing import Any

from ruamel.yaml.error import YAMLError

from .messages import ConfigurationError
from .types import DeploymentDescriptor, TargetSpec
from .utils import flag, load_yaml

logger = getLogger("boshci.config")

DEFAULT_CONFIG = Path(".ci.yml")


class InvalidOptionNameError(RuntimeError):
    """Exception raised when an invalid configuration option name is used."""

    pass


def descriptors(data: Any) -> tuple[DeploymentDescriptor, ...]:
    """Converts the C{deployments} list, rejecting duplicate names."""
    if data is None:
        return ()
    if not isinstance(data, list):
        raise ConfigurationError("deployments must be a list")

    result = tuple(DeploymentDescriptor.from_dict(x) for x in data)
    seen: set[str] = set()
    for x in result:
        if x.name in seen:
            raise ConfigurationError(f"deployment {x.name!r} is listed twice")
        seen.add(x.name)
    return result


class Config:
    """Read and store the settings of a CI run."""

    def __init__(
        self, path: Path | None = None, environ: Mapping[str, str] | None = None
    ) -> None:
        """Initializes the configuration object.

        Args:
            path: An optional path to the config file.
            environ: The environment to read overrides from, defaults to
                C{os.environ}.
        """
        env = os.environ if environ is None else environ

        if path:
            self.configfile = path
        elif _pth := env.get("BOSHCI_CONF"):
            self.configfile = Path(_pth).expanduser()
        else:
            self.configfile = DEFAULT_CONFIG
        self.read()

        self._define_config_options()
        self._parse_config()
        self._read_environment(env)

    def read(self) -> None:
        """Reads the configuration file."""
        try:
            data = load_yaml(self.configfile)
        except FileNotFoundError:
            logger.debug("config file %s not found, using defaults", self.configfile)
            data = None
        except (OSError, YAMLError) as e:
            raise ConfigurationError(str(e), self.configfile) from e

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ConfigurationError("top level must be a mapping", self.configfile)
        self.config: dict[str, Any] = data

    def _define_config_options(self) -> None:
        """Defines all available configuration options."""

        def normalizer(x: Any) -> Any:
            return x

        def optional_str(x: Any) -> str | None:
            return None if x is None else str(x)

        def switch(x: Any) -> bool:
            if x is None or isinstance(x, bool):
                return bool(x)
            if isinstance(x, str):
                return flag(x)
            raise ConfigurationError(f"expected a boolean, got {x!r}")

        data: list[tuple[Any, ...]] = [
            ("target", "target", None, optional_str),
            ("deployments", "deployments", (), descriptors),
            ("skip_merge", "skip_merge", False, switch),
            ("deployments_dir", "deployments_dir", Path("deployments"), Path),
            ("bosh_cli", "bosh_cli", "bosh", str),
        ]

        def add_normalizer(x):
            return x if len(x) > 3 else x + (normalizer,)

        self.data: list[tuple[str, str, Any, Callable]] = [
            add_normalizer(x) for x in data
        ]

    def _parse_config(self) -> None:
        """Parses the configuration options from the config file."""
        for attr, key, default, fixup in self.data:
            val = self.config.get(key, default)
            try:
                setattr(self, attr, fixup(val))
            except ConfigurationError as e:
                e.path = self.configfile
                raise
            logger.debug('config.%s set to "%s"', attr, val)

    def _read_environment(self, env: Mapping[str, str]) -> None:
        """Picks up the overrides that only come from the environment."""
        self.bosh_user: str | None = env.get("BOSH_USER") or None
        self.bosh_password: str | None = env.get("BOSH_PASSWORD") or None
        self.destroy_deployments: bool = flag(env.get("DESTROY_DEPLOYMENTS"))

    def _has_option(self, opt: str) -> bool:
        return opt in (x[0] for x in self.data)

    def set_option(self, opt: str, val: Any) -> None:
        """Sets a configuration option to a new value.

        Args:
            opt: The name of the option to set.
            val: The new value, passed through the option's fixup.

        Raises:
            InvalidOptionNameError: If opt is not a valid option name.
        """
        if not self._has_option(opt):
            raise InvalidOptionNameError(opt)

        fixup = next(x[3] for x in self.data if x[0] == opt)
        setattr(self, opt, fixup(val))

    def target_spec(self) -> TargetSpec:
        """Parses the configured target with the environment credentials.

        Raises:
            ConfigurationError: If no target is configured.
            MalformedTargetError: If the target can't be parsed.
        """
        if not self.target:  # type: ignore[attr-defined]
            raise ConfigurationError("no target configured", self.configfile)
        return TargetSpec.parse(
            self.target,  # type: ignore[attr-defined]
            self.bosh_user,
            self.bosh_password,
        )

    def merge_args(self, args: Namespace) -> None:
        """Merges command-line arguments into the configuration.

        Args:
            args: The parsed command-line arguments.
        """

        if args.target:
            self.set_option("target", args.target)

        if args.skip_merge:
            self.set_option("skip_merge", True)

        if args.deployments_dir:
            self.set_option("deployments_dir", args.deployments_dir)

        if args.bosh:
            self.set_option("bosh_cli", args.bosh)

        if args.destroy_deployments:
            self.destroy_deployments = True
