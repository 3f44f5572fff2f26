from argparse import ArgumentTypeError


# Also an ArgumentTypeError so argparse reports the reason for -t/--target
class MalformedTargetError(ValueError, ArgumentTypeError):
    def __init__(self, target: str, reason: str) -> None:
        self.target = target
        self.reason = reason
        super().__init__(f"Malformed target {target!r}: {reason}")


class MissingHostError(MalformedTargetError):
    def __init__(self, target: str) -> None:
        super().__init__(target, "missing host")


class InvalidPortError(MalformedTargetError):
    def __init__(self, target: str, port: str) -> None:
        self.port = port
        super().__init__(target, f"port must be a positive integer, got {port!r}")


class MissingUsernameError(MalformedTargetError):
    def __init__(self, target: str) -> None:
        super().__init__(
            target, "credentials given but no username and BOSH_USER is not set"
        )
