"""Auth gate state machine.

One gate guards one mounted view. It starts in ``LOADING``, runs a single
current-user lookup, and settles in ``AUTHENTICATED`` or
``UNAUTHENTICATED``; both are terminal. A tenant switch or sign-out needs a
fresh gate rather than a reset of this one.

Lookup errors are not surfaced: the gate treats them as "not signed in"
and navigates to the auth page with the current path as return path.
"""

from __future__ import annotations

import asyncio
from collections.abc import Awaitable, Callable
from urllib.parse import urlencode

from auth.domain.value_objects import CurrentUser, GateState, GateStatus
from auth.observability import AuthGateProbe, DefaultAuthGateProbe

GateListener = Callable[[GateState], None]


class AuthGate:
    """Guards a view until the caller's identity is confirmed."""

    def __init__(
        self,
        lookup: Callable[[], Awaitable[CurrentUser | None]],
        navigate: Callable[[str], None],
        current_path: str,
        login_path: str = "/login",
        return_param: str = "next",
        probe: AuthGateProbe | None = None,
    ):
        """Initialize the gate.

        Args:
            lookup: Zero-argument coroutine function returning the current
                user, or None when not signed in.
            navigate: Called with the auth page URL on entering
                ``UNAUTHENTICATED``.
            current_path: Path (with query) of the guarded view, preserved
                as the return path.
            login_path: Auth page path.
            return_param: Query parameter carrying the return path.
            probe: Observability probe.
        """
        self._lookup = lookup
        self._navigate = navigate
        self._current_path = current_path
        self._login_path = login_path
        self._return_param = return_param
        self._probe = probe or DefaultAuthGateProbe()

        self._state = GateState.loading()
        self._listeners: list[GateListener] = []
        self._task: asyncio.Task[None] | None = None
        self._torn_down = False

    @property
    def state(self) -> GateState:
        """Current gate state."""
        return self._state

    @property
    def login_location(self) -> str:
        """Auth page URL carrying the current path as return path."""
        query = urlencode({self._return_param: self._current_path})
        return f"{self._login_path}?{query}"

    def subscribe(self, listener: GateListener) -> Callable[[], None]:
        """Register a listener for state transitions.

        Returns:
            A callable that removes the listener.
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def mount(self) -> None:
        """Start the lookup. Must be called from a running event loop.

        Raises:
            RuntimeError: If the gate was already mounted or torn down.
        """
        if self._task is not None or self._torn_down:
            raise RuntimeError("An AuthGate can only be mounted once")
        self._task = asyncio.create_task(self._run())

    def unmount(self) -> None:
        """Tear the gate down, cancelling an in-flight lookup.

        After this call no transition happens and no listener is called.
        """
        self._torn_down = True
        self._listeners.clear()
        if self._task is not None and not self._task.done():
            self._task.cancel()

    async def wait(self) -> GateState:
        """Wait for the lookup to settle (or be cancelled) and return the state.

        Raises:
            RuntimeError: If the gate was never mounted.
        """
        if self._task is None:
            raise RuntimeError("AuthGate.wait() called before mount()")
        await asyncio.wait({self._task})
        return self._state

    async def _run(self) -> None:
        try:
            user = await self._lookup()
        except asyncio.CancelledError:
            self._probe.gate_result_discarded(path=self._current_path)
            raise
        except Exception as e:
            if self._torn_down:
                self._probe.gate_result_discarded(path=self._current_path)
                return
            self._probe.gate_lookup_failed(path=self._current_path, error=str(e))
            self._enter_unauthenticated()
            return

        if self._torn_down:
            self._probe.gate_result_discarded(path=self._current_path)
            return

        if user is None:
            self._enter_unauthenticated()
            return

        self._probe.gate_authenticated(path=self._current_path, user_id=user.id)
        self._transition(GateState.authenticated(user))

    def _enter_unauthenticated(self) -> None:
        location = self.login_location
        self._probe.gate_unauthenticated(path=self._current_path, location=location)
        self._transition(GateState.unauthenticated())
        self._navigate(location)

    def _transition(self, state: GateState) -> None:
        if self._state.status is not GateStatus.LOADING:
            return
        self._state = state
        for listener in list(self._listeners):
            listener(state)
