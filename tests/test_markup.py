from orchestrator_sim.markup import to_markdown
from orchestrator_sim.profiles import select_profile


def test_heading_line_gets_hard_break():
    text = select_profile("Cognition Crew").client_summary()
    assert to_markdown(text).startswith("**Client Summary:**  \n**Cognition Crew** is")


def test_bullets_stay_on_their_own_lines():
    rendered = to_markdown(select_profile("Acme Corp").meeting_brief())
    assert rendered.split("  \n") == [
        "**Meeting Brief:**",
        "- **Participants (Acme Corp):** Key Stakeholders",
        "- **Objectives:** Introduce IBM watsonx to help them achieve their business goals.",
    ]


def test_blank_lines_and_padding_dropped():
    assert to_markdown("  first\n\n   second  \n") == "first  \nsecond"
    assert to_markdown("") == ""
    assert to_markdown(None) == ""


def test_user_text_is_not_wrapped_in_html():
    assert to_markdown("<b>Acme</b> Corp") == "<b>Acme</b> Corp"
    assert "<span" not in to_markdown("Acme Corp")
