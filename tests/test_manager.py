from orchestrator_sim.manager import DialogueEngine
from orchestrator_sim.profiles import (
    BRIEF_INTRO,
    CONFIRMED,
    GREETING,
    ORCHESTRATION_OFFER,
    REGREETING,
    STANDBY,
)
from orchestrator_sim.scheduler import VirtualClock
from orchestrator_sim.settings import Settings
from orchestrator_sim.states import ConversationState as S, EventKind, Sender


def _run_brief(engine, client="Acme Corp"):
    assert engine.submit_user_text(client)
    return engine.drain()


def test_greeting_is_scheduled_once():
    engine = DialogueEngine(clock=VirtualClock(), settings=Settings(greeting_delay_ms=1000))
    engine.start()
    engine.start()
    emissions = engine.drain()
    assert [(e.at_ms, e.event.body) for e in emissions] == [(1000, GREETING)]
    assert engine.state == S.INITIATE_INTERACTION
    assert engine.accepting_input


def test_full_brief_timeline(engine):
    _run_brief(engine)
    assert engine.state_log == [
        (1000, S.ASSISTANT_AGENT),
        (3500, S.RESEARCH_AGENT),
        (6000, S.WRITER_AGENT),
        (8000, S.SUMMARISER_AGENT),
        (10000, S.DELIVER_BRIEF),
        (14000, S.SUGGEST_ACTIONS),
        (15500, S.OFFER_ORCHESTRATION),
        (15500, S.AWAIT_INSTRUCTION),
    ]
    assert engine.state == S.AWAIT_INSTRUCTION
    assert engine.accepting_input
    assert engine.client_context == "Acme Corp"


def test_full_brief_events_in_order(engine):
    emissions = _run_brief(engine)
    times = [e.at_ms for e in emissions]
    assert times == sorted(times)

    first = emissions[0].event
    assert (first.sender, first.body) == (Sender.USER, "Acme Corp")

    statuses = [(e.at_ms, e.event.body) for e in emissions if e.event.kind == EventKind.STATUS]
    assert [t for t, _ in statuses] == [1000, 3500, 6000, 8000, 10000]
    assert "**Acme Corp**" in statuses[1][1]
    assert statuses[-1][1] is None

    bot_messages = [(e.at_ms, e.event.body) for e in emissions
                    if e.event.kind == EventKind.MESSAGE and e.event.sender == Sender.BOT]
    assert [t for t, _ in bot_messages] == [0, 10000, 11000, 12000, 13000, 14000, 15500]
    assert bot_messages[1][1] == BRIEF_INTRO
    assert "**Acme Corp** is a leading company" in bot_messages[2][1]
    assert bot_messages[-1][1] == ORCHESTRATION_OFFER


def test_affirmative_reply_confirms_and_loops(engine):
    _run_brief(engine)
    assert engine.submit_user_text("yes please")
    assert not engine.accepting_input
    emissions = engine.drain()
    assert [(e.at_ms, e.event.body) for e in emissions] == [
        (15500, "yes please"),
        (15500, CONFIRMED),
        (20500, REGREETING),
    ]
    assert engine.state_log[-1] == (20500, S.INITIATE_INTERACTION)
    assert engine.accepting_input


def test_other_reply_stands_by(engine):
    _run_brief(engine)
    engine.submit_user_text("no thanks")
    bodies = [e.event.body for e in engine.drain()]
    assert bodies == ["no thanks", STANDBY, REGREETING]
    assert engine.state == S.INITIATE_INTERACTION


def test_blank_input_is_ignored_everywhere(engine):
    assert not engine.submit_user_text("   ")
    assert engine.scheduler.pending == 0
    _run_brief(engine)
    log_before = list(engine.state_log)
    assert not engine.submit_user_text("")
    assert engine.drain() == []
    assert engine.state_log == log_before


def test_input_mid_sequence_is_noop(engine):
    engine.submit_user_text("Acme Corp")
    seen = []
    for emission in engine.pump():
        seen.append(emission)
        if engine.state == S.WRITER_AGENT:
            assert not engine.submit_user_text("hurry up")
    assert all(e.event.body != "hurry up" for e in seen)
    assert engine.state == S.AWAIT_INSTRUCTION


def test_input_during_regreeting_wait_is_ignored(engine):
    _run_brief(engine)
    engine.submit_user_text("no")
    assert not engine.submit_user_text("Globex")
    engine.drain()
    assert engine.client_context == ""
    assert engine.accepting_input


def test_new_cycle_replaces_client_context(engine):
    _run_brief(engine, "Cognition Crew")
    engine.submit_user_text("schedule it")
    engine.drain()
    emissions = _run_brief(engine, "Grupo Contacta")
    assert engine.client_context == "Grupo Contacta"
    summaries = [e.event.body for e in emissions if (e.event.body or "").startswith("**Client Summary:**")]
    assert len(summaries) == 1
    assert "**Grupo Contacta** is an existing customer" in summaries[0]


def test_transcript_records_messages_only(engine):
    engine.start()
    engine.drain()
    _run_brief(engine)
    speakers = [row["speaker"] for row in engine.transcript]
    assert speakers[:2] == ["bot", "user"]
    assert len(engine.transcript) == 9
    assert engine.transcript[1] == {
        "speaker": "user",
        "message": "Acme Corp",
        "state": "initiate_interaction",
        "at_ms": 1000,
    }


def test_reset_returns_to_start(engine):
    engine.start()
    engine.drain()
    engine.submit_user_text("Acme Corp")
    engine.reset()
    assert engine.state == S.INITIATE_INTERACTION
    assert engine.client_context == ""
    assert engine.scheduler.pending == 0
    assert engine.transcript == [] and engine.state_log == []
    assert engine.accepting_input
