from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict

from loguru import logger


GREETING = "Hello! I'm your Orchestrator Agent. Which client meeting can I help you prepare for today?"
REGREETING = "I am the Orchestrator Agent. Which client meeting can I help you prepare for today?"
DEPLOYING = (
    "Excellent. I am deploying a team of specialized agents to prepare your brief "
    "for the **{client}** meeting."
)
BRIEF_INTRO = "Here is the final brief:"
ORCHESTRATION_OFFER = (
    "To make this process even more efficient, I can orchestrate several follow-up actions "
    "for you using a tool like **watsonx.orchestrate**. For example, I can schedule the "
    "follow-up meeting, draft a summary email based on this brief, and create a task for the "
    "technical team to prepare a demo. Shall I proceed with any of these?"
)
CONFIRMED = (
    "Excellent. I have scheduled the follow-up meeting, drafted the summary email in your "
    "drafts folder, and assigned the demo preparation task to the technical team. Is there "
    "anything else I can assist you with?"
)
STANDBY = "Understood. I will stand by. Please let me know if you need anything else."

AFFIRMATIVE_KEYWORDS = ("yes", "proceed", "schedule")


class ProfileKind(Enum):
    COGNITION = "cognition"
    CONTACTA = "contacta"
    GENERIC = "generic"


RESPONSE_KEYS = (
    "assistant_agent",
    "research_agent",
    "writer_agent",
    "summariser_agent",
    "client_summary",
    "meeting_brief",
    "recent_activity",
    "suggested_actions",
)


_COGNITION: Dict[str, str] = {
    "assistant_agent": "Assistant Agent is checking calendar and emails...",
    "research_agent": "Research Agent is gathering internal and external data...",
    "writer_agent": "Writer Agent is compiling a full report...",
    "summariser_agent": "Summariser Agent is creating the final brief...",
    "client_summary": (
        "**Client Summary:**\n"
        "**Cognition Crew** is a venture-backed AI development company specializing in creating "
        "custom large language models. As a new prospect, their primary goal is to find a scalable, "
        "cost-effective platform to train and deploy their models for enterprise clients."
    ),
    "meeting_brief": (
        "**Meeting Brief:**\n"
        "- **Date/Time**: October 9, 2025, 9:30 AM - 10:45 AM\n"
        "- **Participants (Cognition Crew):** Dr. Aris Thorne (CEO & Co-founder), Lena Petrova "
        "(Head of Engineering)\n"
        "- **Objectives:** Introduce the IBM watsonx platform as a comprehensive solution for their "
        "AI development lifecycle, from data preparation to model deployment and governance."
    ),
    "recent_activity": (
        "**Recent Activity & Intelligence:**\n"
        "- **Funding:** Secured $50M in Series B funding two months ago to scale operations.\n"
        "- **News:** Recently published a research paper on efficient model fine-tuning, indicating "
        "advanced technical expertise.\n"
        "- **Goal:** They are actively seeking a robust cloud partner to move from on-premise testing "
        "to a full-scale commercial offering."
    ),
    "suggested_actions": (
        "**Suggested Next Best Actions:**\n"
        "- **Focus on watsonx.ai:** Showcase the end-to-end capabilities, especially for training and "
        "fine-tuning foundation models.\n"
        "- **Offer a Proof-of-Concept:** Propose a hands-on technical workshop and offer trial credits "
        "for the watsonx platform.\n"
        "- **Discuss Scalability & Cost:** Emphasize IBM Cloud's performance for AI workloads and the "
        "potential for significant cost savings compared to competitors.\n"
        "- **Introduce AI Governance:** Mention watsonx.governance as a key differentiator for building "
        "trust with their future enterprise clients."
    ),
}

_CONTACTA: Dict[str, str] = {
    "assistant_agent": (
        "Assistant Agent is reviewing emails, flagging a recent message from **Andrés Molina** "
        "regarding an AI proposal."
    ),
    "research_agent": (
        "Research Agent is accessing the proposal details and noting their concern about "
        "multi-channel scalability."
    ),
    "writer_agent": "Writer Agent is compiling a technical overview to address the scalability question.",
    "summariser_agent": "Summariser Agent is creating a brief focused on resolving the client's technical query.",
    "client_summary": (
        "**Client Summary:**\n"
        "**Grupo Contacta** is an existing customer evaluating a new proposal for AI-powered customer "
        "service solutions. They are a major player in the telecommunications support sector."
    ),
    "meeting_brief": (
        "**Meeting Brief:**\n"
        "- **Participants (Grupo Contacta):** Andrés Molina (Director of Technology)\n"
        "- **Objectives:** Address specific questions about the scalability of our proposed AI "
        "solution and schedule a follow-up technical deep-dive."
    ),
    "recent_activity": (
        "**Recent Activity & Intelligence:**\n"
        "- **Key Email:** Received an email from Andrés Molina requesting a technical meeting to "
        "discuss the scalability of our AI proposal in multi-channel environments (e.g., voice, chat, social)."
    ),
    "suggested_actions": (
        "**Suggested Next Best Actions:**\n"
        "- **Prepare a technical demo** focusing on the multi-channel capabilities of watsonx Assistant.\n"
        "- **Proactively schedule the meeting** with our technical team as requested by Andrés.\n"
        "- **Reference a case study** where a similar client successfully scaled their AI customer "
        "service across multiple platforms."
    ),
}

# {client} is replaced with the verbatim client name.
_GENERIC: Dict[str, str] = {
    "assistant_agent": "Assistant Agent is checking calendar and emails...",
    "research_agent": "Research Agent is gathering internal and external data for **{client}**...",
    "writer_agent": "Writer Agent is compiling a full report...",
    "summariser_agent": "Summariser Agent is creating the final brief...",
    "client_summary": (
        "**Client Summary:**\n"
        "**{client}** is a leading company in their industry. Their strategic goal is to leverage "
        "AI to improve efficiency."
    ),
    "meeting_brief": (
        "**Meeting Brief:**\n"
        "- **Participants ({client}):** Key Stakeholders\n"
        "- **Objectives:** Introduce IBM watsonx to help them achieve their business goals."
    ),
    "recent_activity": (
        "**Recent Activity & Intelligence:**\n"
        "- Our records show recent interest in AI and cloud solutions.\n"
        "- Market trends indicate a need for innovation in their sector."
    ),
    "suggested_actions": (
        "**Suggested Next Best Actions:**\n"
        "- **Position watsonx.data** as the solution to their data challenges.\n"
        "- **Showcase our Granite model** for their specific use cases.\n"
        "- **Propose a follow-up workshop** on AI governance using watsonx.governance."
    ),
}

PROFILE_TABLES: Dict[ProfileKind, Dict[str, str]] = {
    ProfileKind.COGNITION: _COGNITION,
    ProfileKind.CONTACTA: _CONTACTA,
    ProfileKind.GENERIC: _GENERIC,
}


@dataclass(frozen=True)
class ResponseProfile:
    """Canned texts for one client category.

    Only the generic table interpolates the client name; the named tables
    ignore it.
    """

    kind: ProfileKind
    client: str = ""

    def text(self, key: str) -> str:
        try:
            template = PROFILE_TABLES[self.kind][key]
        except KeyError:
            raise KeyError(f"unknown response key: {key}") from None
        if self.kind == ProfileKind.GENERIC:
            return template.format(client=self.client)
        return template

    def assistant_agent(self) -> str:
        return self.text("assistant_agent")

    def research_agent(self) -> str:
        return self.text("research_agent")

    def writer_agent(self) -> str:
        return self.text("writer_agent")

    def summariser_agent(self) -> str:
        return self.text("summariser_agent")

    def client_summary(self) -> str:
        return self.text("client_summary")

    def meeting_brief(self) -> str:
        return self.text("meeting_brief")

    def recent_activity(self) -> str:
        return self.text("recent_activity")

    def suggested_actions(self) -> str:
        return self.text("suggested_actions")


def select_profile(client_context: str) -> ResponseProfile:
    low = (client_context or "").lower()
    if "cognition" in low:
        kind = ProfileKind.COGNITION
    elif "grupo contacta" in low or "contacta" in low:
        kind = ProfileKind.CONTACTA
    else:
        kind = ProfileKind.GENERIC
    logger.debug(f"profile_selected | kind={kind.value} client='{client_context}'")
    return ResponseProfile(kind=kind, client=client_context or "")


def is_affirmative(text: str) -> bool:
    low = (text or "").lower()
    return any(k in low for k in AFFIRMATIVE_KEYWORDS)
