from __future__ import annotations

from typing import Dict, Optional

from loguru import logger

from .profiles import (
    BRIEF_INTRO,
    CONFIRMED,
    DEPLOYING,
    ORCHESTRATION_OFFER,
    REGREETING,
    STANDBY,
    is_affirmative,
    select_profile,
)
from .states import ConversationState, EngineStateError, OutputEvent, Step


# Agent stages only post a status line, then hand over after a fixed pause.
_AGENT_STAGES: Dict[ConversationState, tuple[str, ConversationState, int]] = {
    ConversationState.ASSISTANT_AGENT: ("assistant_agent", ConversationState.RESEARCH_AGENT, 2500),
    ConversationState.RESEARCH_AGENT: ("research_agent", ConversationState.WRITER_AGENT, 2500),
    ConversationState.WRITER_AGENT: ("writer_agent", ConversationState.SUMMARISER_AGENT, 2000),
    ConversationState.SUMMARISER_AGENT: ("summariser_agent", ConversationState.DELIVER_BRIEF, 2000),
}

DEPLOY_DELAY_MS = 1000
BRIEF_SECTIONS = (("client_summary", 1000), ("meeting_brief", 2000), ("recent_activity", 3000))
BRIEF_DELAY_MS = 4000
SUGGEST_DELAY_MS = 1500
OFFER_DELAY_MS = 0
REGREETING_DELAY_MS = 5000


def advance(
    state: ConversationState,
    client_context: str,
    user_input: Optional[str] = None,
) -> Step:
    """Compute the events and next state for ``state``.

    Pure: nothing is mutated and no timers are started. ``user_input`` is read
    only by INITIATE_INTERACTION and AWAIT_INSTRUCTION; blank input there is a
    no-op step.
    """
    text = (user_input or "").strip()

    if state == ConversationState.INITIATE_INTERACTION:
        if not text:
            return Step(state, client_context)
        return Step(
            ConversationState.ASSISTANT_AGENT,
            text,
            [OutputEvent.message(DEPLOYING.format(client=text))],
            DEPLOY_DELAY_MS,
        )

    if state == ConversationState.AWAIT_INSTRUCTION:
        if not text:
            return Step(state, client_context)
        reply = CONFIRMED if is_affirmative(text) else STANDBY
        return Step(
            ConversationState.INITIATE_INTERACTION,
            "",
            [
                OutputEvent.message(reply),
                OutputEvent.message(REGREETING, delay_ms=REGREETING_DELAY_MS),
            ],
            REGREETING_DELAY_MS,
        )

    profile = select_profile(client_context)

    if state in _AGENT_STAGES:
        key, nxt, delay = _AGENT_STAGES[state]
        return Step(nxt, client_context, [OutputEvent.status(profile.text(key))], delay)

    if state == ConversationState.DELIVER_BRIEF:
        events = [OutputEvent.status(None), OutputEvent.message(BRIEF_INTRO)]
        events.extend(OutputEvent.message(profile.text(key), delay_ms=at) for key, at in BRIEF_SECTIONS)
        logger.debug(f"brief_scheduled | client='{client_context}' sections={len(BRIEF_SECTIONS)}")
        return Step(ConversationState.SUGGEST_ACTIONS, client_context, events, BRIEF_DELAY_MS)

    if state == ConversationState.SUGGEST_ACTIONS:
        return Step(
            ConversationState.OFFER_ORCHESTRATION,
            client_context,
            [OutputEvent.message(profile.suggested_actions())],
            SUGGEST_DELAY_MS,
        )

    if state == ConversationState.OFFER_ORCHESTRATION:
        return Step(
            ConversationState.AWAIT_INSTRUCTION,
            client_context,
            [OutputEvent.message(ORCHESTRATION_OFFER)],
            OFFER_DELAY_MS,
        )

    raise EngineStateError(f"unrecognized conversation state: {state!r}")
