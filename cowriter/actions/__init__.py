"""
Text-transformation actions (Expand, Shorten, Critique, user-defined).
"""

from cowriter.actions.schemas import ActionRequest, ActionResponse, Tone, WritingStyle
from cowriter.actions.service import execute

__all__ = [
    "execute",
    "ActionRequest",
    "ActionResponse",
    "Tone",
    "WritingStyle",
]
