from __future__ import annotations


class VotingPowerError(ValueError):
    """Base class for invalid weighted voting inputs."""


class InvalidQuota(VotingPowerError):
    def __init__(self, quota: object, total: int | None = None) -> None:
        self.quota = quota
        self.total = total
        if total is None:
            msg = f"Quota must be an integer, got {quota!r}."
        else:
            msg = f"Quota {quota} must satisfy total/2 < quota <= total (total={total})."
        super().__init__(msg)


class InvalidWeights(VotingPowerError):
    pass


class InvalidParameters(VotingPowerError):
    pass


class EmptySystem(VotingPowerError):
    pass


class ComputationCancelled(RuntimeError):
    """Raised when a caller sets the cancel flag during a long computation."""
