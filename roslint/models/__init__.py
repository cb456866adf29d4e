"""
roslint Domain Models

Dataclass-based models for one validation run.
"""

from .results import (
    LintStatus,
    TransportResult,
    RemoteSessionResult,
)
from .ssh import (
    ConnectionTarget,
    SSHConnection,
)
from .invocation import InvocationConfig

__all__ = [
    # Results
    "LintStatus",
    "TransportResult",
    "RemoteSessionResult",
    # SSH
    "ConnectionTarget",
    "SSHConnection",
    # Invocation
    "InvocationConfig",
]
