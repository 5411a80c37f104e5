from dataclasses import dataclass


@dataclass(frozen=True)
class LaunchResult:
    """
    Outcome of a launch: ok plus a human-readable message.
    Failures carry the error description instead of raising.
    """
    ok: bool
    message: str

    @classmethod
    def success(cls, message: str) -> "LaunchResult":
        return cls(ok=True, message=message)

    @classmethod
    def failure(cls, message: str) -> "LaunchResult":
        return cls(ok=False, message=message)
