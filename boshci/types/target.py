"""A named tuple for the bosh director target and its credentials."""

from typing import NamedTuple

from ..exceptions import InvalidPortError, MissingHostError, MissingUsernameError

DEFAULT_PASSWORD = "admin"


def split_address(raw: str, address: str) -> tuple[str, int]:
    """Splits the C{host:port} segment of the target C{raw}.

    Raises:
        MalformedTargetError: If the host is empty or the port is not a
            positive integer.
    """
    host, colon, port = address.rpartition(":")
    if not colon:
        # no port separator at all, the whole segment is the host
        raise InvalidPortError(raw, "")
    if not host:
        raise MissingHostError(raw)
    try:
        number = int(port)
    except ValueError:
        raise InvalidPortError(raw, port) from None
    if number <= 0:
        raise InvalidPortError(raw, port)
    return host, number


def target_string(raw: str) -> str:
    """Checks the address of a target given on the command line.

    Credentials are left alone, they may still be completed from the
    environment when the target is parsed.

    Returns:
        The stripped target string.

    Raises:
        MalformedTargetError: If the C{host:port} part is malformed.
    """
    raw = raw.strip()
    split_address(raw, raw.rpartition("@")[2])
    return raw


class TargetSpec(NamedTuple):
    """A bosh director endpoint and the credentials used to log in.

    Attributes:
        username: The login user, None when no login should happen.
        password: The login password.
        host: The director hostname.
        port: The director port.
    """

    username: str | None
    password: str
    host: str
    port: int

    @classmethod
    def parse(
        cls,
        raw: str,
        env_user: str | None = None,
        env_password: str | None = None,
    ) -> "TargetSpec":
        """Parses a connection string of the shape C{[user[:password]@]host:port}.

        Args:
            raw: The connection string.
            env_user: Username used when the string carries none.
            env_password: Password used when the string carries none.

        Returns:
            The parsed target.

        Raises:
            MalformedTargetError: If host, port or a required username
                cannot be determined.
        """
        raw = raw.strip()
        credentials, sep, address = raw.rpartition("@")

        user, _, password = credentials.partition(":")
        username = user or env_user or None
        if sep and not username:
            raise MissingUsernameError(raw)

        host, number = split_address(raw, address)

        return cls(
            username, password or env_password or DEFAULT_PASSWORD, host, number
        )

    @property
    def address(self) -> str:
        """The C{host:port} part used by C{bosh target}."""
        return f"{self.host}:{self.port}"

    def __str__(self) -> str:
        if self.username is None:
            return self.address
        return f"{self.username}:{self.password}@{self.address}"
