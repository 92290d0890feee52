from dataclasses import dataclass, field
from enum import Enum

from notary.errors import ErrorKind


class SessionStatus(str, Enum):
    DISCONNECTED = "disconnected"
    CONNECTING = "connecting"
    CONNECTED = "connected"
    ERROR = "error"


@dataclass(frozen=True)
class WalletSessionState:
    """Immutable snapshot of the wallet session.

    A state that is not connected never carries an identity or network id;
    construction fails otherwise.
    """

    status: SessionStatus = SessionStatus.DISCONNECTED
    identity: str | None = None
    network_id: int | None = None
    last_error: ErrorKind | None = None

    def __post_init__(self) -> None:
        if self.status is SessionStatus.CONNECTED:
            if self.identity is None or self.network_id is None:
                raise ValueError("connected state requires identity and network_id")
        elif self.identity is not None or self.network_id is not None:
            raise ValueError(f"{self.status.value} state cannot carry an identity")

    @property
    def connected(self) -> bool:
        return self.status is SessionStatus.CONNECTED


# Events fed to the transition function. Local intents and agent
# notifications share one vocabulary so every change goes through one place.


@dataclass(frozen=True)
class ConnectStarted:
    pass


@dataclass(frozen=True)
class ConnectSucceeded:
    identity: str
    network_id: int


@dataclass(frozen=True)
class ConnectFailed:
    kind: ErrorKind


@dataclass(frozen=True)
class DisconnectRequested:
    pass


@dataclass(frozen=True)
class IdentitiesChanged:
    identities: tuple[str, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class NetworkChanged:
    network_id: int


@dataclass(frozen=True)
class AgentFailed:
    kind: ErrorKind = ErrorKind.AGENT_ERROR


SessionEvent = (
    ConnectStarted
    | ConnectSucceeded
    | ConnectFailed
    | DisconnectRequested
    | IdentitiesChanged
    | NetworkChanged
    | AgentFailed
)

AgentEvent = IdentitiesChanged | NetworkChanged
