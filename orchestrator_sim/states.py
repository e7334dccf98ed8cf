from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional


class ConversationState(Enum):
    INITIATE_INTERACTION = "initiate_interaction"
    ASSISTANT_AGENT = "assistant_agent"
    RESEARCH_AGENT = "research_agent"
    WRITER_AGENT = "writer_agent"
    SUMMARISER_AGENT = "summariser_agent"
    DELIVER_BRIEF = "deliver_brief"
    SUGGEST_ACTIONS = "suggest_actions"
    OFFER_ORCHESTRATION = "offer_orchestration"
    AWAIT_INSTRUCTION = "await_instruction"


# States that read the user's text; every other state advances on its own.
INPUT_STATES = frozenset({
    ConversationState.INITIATE_INTERACTION,
    ConversationState.AWAIT_INSTRUCTION,
})


class Sender(Enum):
    USER = "user"
    BOT = "bot"


class EventKind(Enum):
    MESSAGE = "message"
    STATUS = "status"


class EngineStateError(RuntimeError):
    """Raised when the engine meets a state outside ConversationState."""


@dataclass(frozen=True)
class OutputEvent:
    kind: EventKind
    body: Optional[str]
    sender: Sender = Sender.BOT
    delay_ms: int = 0

    @classmethod
    def message(cls, body: str, delay_ms: int = 0, sender: Sender = Sender.BOT) -> "OutputEvent":
        return cls(EventKind.MESSAGE, body, sender, delay_ms)

    @classmethod
    def status(cls, body: Optional[str], delay_ms: int = 0) -> "OutputEvent":
        return cls(EventKind.STATUS, body, Sender.BOT, delay_ms)

    @property
    def is_clear(self) -> bool:
        return self.kind == EventKind.STATUS and not self.body


@dataclass
class Step:
    """One transition: events to render and when next_state takes over.

    delay_ms is relative to the start of the batch. None means the input was
    not consumed and nothing changes.
    """

    next_state: ConversationState
    client_context: str
    events: List[OutputEvent] = field(default_factory=list)
    delay_ms: Optional[int] = None

    @property
    def is_noop(self) -> bool:
        return self.delay_ms is None and not self.events


@dataclass
class Session:
    state: ConversationState = ConversationState.INITIATE_INTERACTION
    client_context: str = ""
    in_transit: bool = False

    @property
    def accepting_input(self) -> bool:
        return not self.in_transit and self.state in INPUT_STATES
