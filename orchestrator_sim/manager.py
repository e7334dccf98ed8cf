from __future__ import annotations

from typing import Any, Dict, Iterator, List, NamedTuple, Tuple

from loguru import logger

from .profiles import GREETING
from .scheduler import RealClock, Scheduler
from .settings import Settings, get_settings
from .states import (
    INPUT_STATES,
    ConversationState,
    EventKind,
    OutputEvent,
    Sender,
    Session,
    Step,
)
from .transitions import advance


class Emission(NamedTuple):
    at_ms: int
    event: OutputEvent


class DialogueEngine:
    """Drives one Session through the scripted cycle.

    Transitions and output events are queued on a Scheduler; nothing happens
    until the caller pumps it. With a VirtualClock a whole cycle drains
    instantly, with a RealClock pump() blocks between events.
    """

    def __init__(self, clock=None, settings: Settings | None = None) -> None:
        self.settings = settings or get_settings()
        self.scheduler = Scheduler(clock or RealClock(self.settings.time_scale))
        self.session = Session()
        self.transcript: List[Dict[str, Any]] = []
        self.state_log: List[Tuple[int, ConversationState]] = []
        self._started = False

    @property
    def state(self) -> ConversationState:
        return self.session.state

    @property
    def client_context(self) -> str:
        return self.session.client_context

    @property
    def accepting_input(self) -> bool:
        return self.session.accepting_input

    def start(self) -> None:
        if self._started:
            return
        self._started = True
        self.scheduler.schedule(self.settings.greeting_delay_ms, _event(OutputEvent.message(GREETING)))
        logger.info(f"engine_start | greeting_in={self.settings.greeting_delay_ms}ms")

    def reset(self) -> None:
        self.scheduler.clear()
        self.session = Session()
        self.transcript = []
        self.state_log = []
        self._started = False
        logger.info("engine_reset | state=initiate_interaction")

    def submit_user_text(self, text: str) -> bool:
        """Feed user text to the active state. Returns False when it was ignored."""
        message = (text or "").strip()
        if not message:
            logger.info(f"input_ignored | reason=blank st={self.state.value}")
            return False
        if not self.accepting_input:
            logger.info(f"input_ignored | reason=busy st={self.state.value} in_transit={self.session.in_transit}")
            return False

        base = self.scheduler.now_ms()
        step = advance(self.state, self.client_context, message)
        logger.info(f"input_accepted | st={self.state.value} msg='{' '.join(message.split())}'")
        self.scheduler.schedule(0, _event(OutputEvent.message(message, sender=Sender.USER)), base)
        self._apply(step, base)
        return True

    def pump(self) -> Iterator[Emission]:
        while self.scheduler.pending:
            due, item = self.scheduler.pop_due()
            if item["type"] == "enter":
                self._enter(item["state"], due)
                continue
            event: OutputEvent = item["event"]
            if event.kind == EventKind.MESSAGE:
                self.transcript.append({
                    "speaker": event.sender.value,
                    "message": event.body,
                    "state": self.state.value,
                    "at_ms": due,
                })
            yield Emission(due, event)

    def drain(self) -> List[Emission]:
        return list(self.pump())

    def _apply(self, step: Step, base: int) -> None:
        if step.is_noop:
            return
        self.session.client_context = step.client_context
        for event in step.events:
            self.scheduler.schedule(event.delay_ms, _event(event), base)
        self.session.in_transit = True
        self.scheduler.schedule(step.delay_ms, {"type": "enter", "state": step.next_state}, base)

    def _enter(self, state: ConversationState, at_ms: int) -> None:
        self.session.state = state
        self.session.in_transit = False
        self.state_log.append((at_ms, state))
        logger.info(f"engine_state_transition | state={state.value} t={at_ms} client='{self.client_context}'")
        if state not in INPUT_STATES:
            self._apply(advance(state, self.client_context), at_ms)


def _event(event: OutputEvent) -> Dict[str, Any]:
    return {"type": "event", "event": event}
