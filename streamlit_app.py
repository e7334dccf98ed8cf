from __future__ import annotations

from datetime import datetime

import streamlit as st
from loguru import logger

from orchestrator_sim.manager import DialogueEngine
from orchestrator_sim.markup import to_markdown
from orchestrator_sim.scheduler import RealClock
from orchestrator_sim.settings import configure_logging, get_settings
from orchestrator_sim.states import EventKind, Sender


BOT_AVATAR = "🤖"
USER_AVATAR = "🟦"


def get_engine() -> DialogueEngine:
    if "engine" not in st.session_state:
        settings = get_settings()
        st.session_state["engine"] = DialogueEngine(clock=RealClock(settings.time_scale), settings=settings)
        st.session_state["rendered"] = []
    return st.session_state["engine"]


def render_message(sender: str, body: str, stamp: str) -> None:
    role = "user" if sender == Sender.USER.value else "assistant"
    avatar = USER_AVATAR if role == "user" else BOT_AVATAR
    with st.chat_message(role, avatar=avatar):
        st.markdown(to_markdown(body))
        st.caption(stamp)


def play(engine: DialogueEngine, chat_area, status_line) -> None:
    """Pump the engine in real time, drawing each event as it comes due."""
    rendered = st.session_state["rendered"]
    for emission in engine.pump():
        event = emission.event
        if event.kind == EventKind.STATUS:
            if event.is_clear:
                status_line.empty()
            else:
                status_line.info(f"⏳ {event.body}")
            continue
        row = {
            "sender": event.sender.value,
            "body": event.body,
            "stamp": datetime.now().strftime("%H:%M"),
        }
        rendered.append(row)
        with chat_area:
            render_message(row["sender"], row["body"], row["stamp"])


st.set_page_config(page_title="Orchestrator Agent", page_icon="🤖", layout="centered")

configure_logging()
engine = get_engine()

st.sidebar.title("Orchestrator – Controls")
st.sidebar.caption(f"Time scale: {engine.settings.time_scale:g}x")
if st.sidebar.button("Restart conversation"):
    engine.reset()
    st.session_state["rendered"] = []
    logger.info("ui_restart")

st.title("IBM Orchestrator Agent")
st.caption("Powered by IBM Technology")

chat_area = st.container()
status_line = st.empty()

with chat_area:
    for row in st.session_state["rendered"]:
        render_message(row["sender"], row["body"], row["stamp"])

prompt = st.chat_input("Type your message...")
if prompt and not engine.submit_user_text(prompt):
    st.toast("Please wait for the agents to finish.")

engine.start()
play(engine, chat_area, status_line)
