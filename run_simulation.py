from __future__ import annotations

import argparse
import json
from typing import Any, Dict, List, Optional

from loguru import logger

from orchestrator_sim.manager import DialogueEngine
from orchestrator_sim.scheduler import RealClock, VirtualClock
from orchestrator_sim.settings import configure_logging, get_settings
from orchestrator_sim.states import EventKind


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Play one scripted orchestrator briefing cycle")
    p.add_argument("--client", type=str, default="Cognition Crew", help="Client name typed at the first prompt")
    p.add_argument("--reply", type=str, default="yes, proceed", help="Answer to the follow-up orchestration offer")
    p.add_argument("--realtime", action="store_true", help="Wait out the scripted delays instead of a virtual clock")
    p.add_argument("--time-scale", type=float, default=None, help="Delay multiplier for --realtime (default from env)")
    p.add_argument("--json", action="store_true", help="Print the transcript as JSON instead of a live log")
    p.add_argument("--log-level", type=str, default=None, help="Loguru level (default from ORCHESTRATOR_LOG_LEVEL)")
    return p.parse_args(argv)


def format_line(at_ms: int, event) -> str:
    if event.kind == EventKind.STATUS:
        return f"[{at_ms / 1000:6.1f}s] ... {event.body}" if event.body else f"[{at_ms / 1000:6.1f}s] ... (status cleared)"
    return f"[{at_ms / 1000:6.1f}s] {event.sender.value}: {event.body}"


def run_cycle(engine: DialogueEngine, client: str, reply: str, echo: bool = True) -> Dict[str, Any]:
    """Greeting, client name, full brief, reply, re-greeting."""
    def flush() -> None:
        for emission in engine.pump():
            if echo:
                print(format_line(emission.at_ms, emission.event))

    engine.start()
    flush()
    if not engine.submit_user_text(client):
        raise RuntimeError(f"client name was not accepted in state {engine.state.value}")
    client = engine.client_context
    flush()
    if not engine.submit_user_text(reply):
        raise RuntimeError(f"reply was not accepted in state {engine.state.value}")
    flush()
    return {
        "client": client,
        "final_state": engine.state.value,
        "states": [{"state": s.value, "at_ms": t} for t, s in engine.state_log],
        "conversation": engine.transcript,
    }


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    settings = get_settings()
    configure_logging(args.log_level or ("WARNING" if args.json else settings.log_level))

    if args.realtime:
        clock = RealClock(args.time_scale or settings.time_scale)
    else:
        clock = VirtualClock()
    engine = DialogueEngine(clock=clock, settings=settings)

    logger.info(f"sim_start | client='{args.client}' realtime={args.realtime}")
    result = run_cycle(engine, args.client, args.reply, echo=not args.json)
    logger.info(f"sim_end | messages={len(result['conversation'])} final_state={result['final_state']}")
    if args.json:
        print(json.dumps(result, ensure_ascii=False, indent=2))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
