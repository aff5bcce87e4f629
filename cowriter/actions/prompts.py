# FILE: cowriter/actions/prompts.py
"""
Prompt builders for actions.

The system prompt carries the profile context (about-me, style, tone).
The user prompt carries the action and the text to transform.
"""

from typing import List

from cowriter.actions.schemas import Tone, WritingStyle

# Actions whose output is commentary rather than a rewrite of the text
FEEDBACK_ACTIONS = {"critique", "review", "feedback"}


def _enum_value(v) -> str:
    return v.value if hasattr(v, "value") else str(v)


def build_system_prompt(
    about_me: str = "",
    style: WritingStyle = WritingStyle.PROFESSIONAL,
    tone: Tone = Tone.FORMAL,
) -> str:
    parts = [
        "You are Co Writer, a writing assistant that helps the user improve their text.",
        f"Write in a {_enum_value(style).lower()} style with a {_enum_value(tone).lower()} tone.",
    ]
    about = (about_me or "").strip()
    if about:
        parts.append(
            "About the writer (use this to match their voice and perspective):\n" + about
        )
    return "\n\n".join(parts)


def build_action_prompt(action_name: str, action_description: str, text: str) -> str:
    name = (action_name or "").strip()
    instruction = (action_description or "").strip() or name
    if name.lower() in FEEDBACK_ACTIONS:
        closing = "Respond with your feedback only."
    else:
        closing = "Respond with the transformed text only, without preamble or explanation."
    return (
        f"Action: {name}\n"
        f"Instruction: {instruction}\n\n"
        f"Text:\n{text}\n\n"
        f"{closing}"
    )


def build_action_messages(
    action_name: str,
    action_description: str,
    text: str,
) -> List[dict]:
    return [{"role": "user", "content": build_action_prompt(action_name, action_description, text)}]

