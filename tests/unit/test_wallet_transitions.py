import pytest

from notary.errors import ErrorKind
from notary.wallet.models import (
    AgentFailed,
    ConnectFailed,
    ConnectStarted,
    ConnectSucceeded,
    DisconnectRequested,
    IdentitiesChanged,
    NetworkChanged,
    SessionStatus,
    WalletSessionState,
)
from notary.wallet.transitions import DISCONNECTED, transition
from tests.factories import ALICE, BOB, NETWORK_ID

CONNECTING = WalletSessionState(status=SessionStatus.CONNECTING)
CONNECTED = WalletSessionState(
    status=SessionStatus.CONNECTED, identity=ALICE, network_id=NETWORK_ID
)
ERRORED = WalletSessionState(status=SessionStatus.ERROR, last_error=ErrorKind.USER_REJECTED)

ALL_STATES = [DISCONNECTED, CONNECTING, CONNECTED, ERRORED]
ALL_EVENTS = [
    ConnectStarted(),
    ConnectSucceeded(BOB, 5),
    ConnectFailed(ErrorKind.AGENT_MISSING),
    DisconnectRequested(),
    IdentitiesChanged(()),
    IdentitiesChanged((BOB,)),
    NetworkChanged(11155111),
    AgentFailed(),
]


class TestStateInvariant:
    def test_disconnected_cannot_carry_identity(self) -> None:
        with pytest.raises(ValueError):
            WalletSessionState(identity=ALICE)

    def test_connected_requires_network(self) -> None:
        with pytest.raises(ValueError):
            WalletSessionState(status=SessionStatus.CONNECTED, identity=ALICE)

    @pytest.mark.parametrize("state", ALL_STATES)
    @pytest.mark.parametrize("event", ALL_EVENTS)
    def test_every_transition_keeps_invariant(
        self, state: WalletSessionState, event: object
    ) -> None:
        result = transition(state, event)  # type: ignore[arg-type]
        if not result.connected:
            assert result.identity is None
            assert result.network_id is None


class TestConnect:
    def test_disconnected_to_connecting(self) -> None:
        assert transition(DISCONNECTED, ConnectStarted()) == CONNECTING

    def test_error_to_connecting_clears_error(self) -> None:
        result = transition(ERRORED, ConnectStarted())
        assert result.status is SessionStatus.CONNECTING
        assert result.last_error is None

    def test_connect_while_connected_is_noop(self) -> None:
        assert transition(CONNECTED, ConnectStarted()) is CONNECTED

    def test_success(self) -> None:
        result = transition(CONNECTING, ConnectSucceeded(ALICE, NETWORK_ID))
        assert result == CONNECTED

    def test_rejected(self) -> None:
        result = transition(CONNECTING, ConnectFailed(ErrorKind.USER_REJECTED))
        assert result.status is SessionStatus.ERROR
        assert result.last_error is ErrorKind.USER_REJECTED

    def test_agent_missing(self) -> None:
        result = transition(CONNECTING, ConnectFailed(ErrorKind.AGENT_MISSING))
        assert result.last_error is ErrorKind.AGENT_MISSING


class TestExternalChanges:
    def test_identity_switch_keeps_network(self) -> None:
        result = transition(CONNECTED, IdentitiesChanged((BOB, ALICE)))
        assert result.identity == BOB
        assert result.network_id == NETWORK_ID

    def test_zero_identities_disconnects(self) -> None:
        assert transition(CONNECTED, IdentitiesChanged(())) == DISCONNECTED

    def test_network_switch_keeps_identity(self) -> None:
        result = transition(CONNECTED, NetworkChanged(11155111))
        assert result.identity == ALICE
        assert result.network_id == 11155111

    @pytest.mark.parametrize("state", [DISCONNECTED, CONNECTING, ERRORED])
    def test_changes_ignored_when_not_connected(self, state: WalletSessionState) -> None:
        assert transition(state, IdentitiesChanged((BOB,))) is state
        assert transition(state, NetworkChanged(3)) is state


class TestDisconnectAndErrors:
    @pytest.mark.parametrize("state", ALL_STATES)
    def test_disconnect_from_any_state(self, state: WalletSessionState) -> None:
        assert transition(state, DisconnectRequested()) == DISCONNECTED

    @pytest.mark.parametrize("state", ALL_STATES)
    def test_agent_error_from_any_state(self, state: WalletSessionState) -> None:
        result = transition(state, AgentFailed(ErrorKind.AGENT_ERROR))
        assert result.status is SessionStatus.ERROR
        assert result.identity is None

    def test_unknown_event_raises(self) -> None:
        with pytest.raises(TypeError):
            transition(CONNECTED, object())  # type: ignore[arg-type]
