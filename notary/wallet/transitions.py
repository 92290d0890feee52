from notary.wallet.models import (
    AgentFailed,
    ConnectFailed,
    ConnectStarted,
    ConnectSucceeded,
    DisconnectRequested,
    IdentitiesChanged,
    NetworkChanged,
    SessionEvent,
    SessionStatus,
    WalletSessionState,
)

DISCONNECTED = WalletSessionState()


def transition(state: WalletSessionState, event: SessionEvent) -> WalletSessionState:
    """Return the state that follows ``state`` after ``event``.

    Pure: no I/O, no mutation. Events that do not apply in the current
    state return ``state`` unchanged.
    """
    if isinstance(event, ConnectStarted):
        if state.connected or state.status is SessionStatus.CONNECTING:
            return state
        return WalletSessionState(status=SessionStatus.CONNECTING)

    if isinstance(event, ConnectSucceeded):
        return WalletSessionState(
            status=SessionStatus.CONNECTED,
            identity=event.identity,
            network_id=event.network_id,
        )

    if isinstance(event, ConnectFailed | AgentFailed):
        return WalletSessionState(status=SessionStatus.ERROR, last_error=event.kind)

    if isinstance(event, DisconnectRequested):
        return DISCONNECTED

    if isinstance(event, IdentitiesChanged):
        if not state.connected:
            return state
        if not event.identities:
            return DISCONNECTED
        return WalletSessionState(
            status=SessionStatus.CONNECTED,
            identity=event.identities[0],
            network_id=state.network_id,
        )

    if isinstance(event, NetworkChanged):
        if not state.connected:
            return state
        return WalletSessionState(
            status=SessionStatus.CONNECTED,
            identity=state.identity,
            network_id=event.network_id,
        )

    raise TypeError(f"Unknown session event: {event!r}")
