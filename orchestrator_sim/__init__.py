"""
Scripted orchestrator chat simulation for client meeting briefs.

Modules:
- states: ConversationState, Session and output event records
- profiles: per-client response profiles + canned engine lines
- transitions: pure state transition function
- scheduler: virtual/real clocks and the timed event queue
- manager: DialogueEngine driver tying session, scheduler and transcript
- settings: env configuration and loguru setup
- markup: line breaks for the Markdown chat surface
"""
