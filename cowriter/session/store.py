# FILE: cowriter/session/store.py
"""
Configuration Store.

Holds the LLM connection state, the profile fields and the ordered list of
action buttons for one session. All mutation goes through the methods here
so the ordering and id invariants hold:

- every action id is unique within the session
- delete removes exactly the matching item
- reorder changes order only, never the set of items
"""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import Iterable, List, Optional

from cowriter.actions.schemas import Tone, WritingStyle
from cowriter.llm.schemas import LLMConfig
from cowriter.session.models import (
    NEW_ACTION_DESCRIPTION,
    NEW_ACTION_EMOJI,
    NEW_ACTION_NAME,
    ActionButton,
    Profile,
    default_actions,
)

logger = logging.getLogger(__name__)

_EDITABLE_FIELDS = ("name", "action", "emoji")


class ConfigurationStore:
    def __init__(self, actions: Optional[Iterable[ActionButton]] = None):
        self.llm_config = LLMConfig()
        self.profile = Profile()
        self._actions: List[ActionButton] = list(actions) if actions is not None else default_actions()
        self._next_id = self._max_numeric_id() + 1

    # ------------------------------------------------------------------
    # LLM connection
    # ------------------------------------------------------------------

    @property
    def is_connected(self) -> bool:
        return self.llm_config.type is not None

    def set_llm_config(self, config: LLMConfig) -> None:
        self.llm_config = config

    def clear_llm_config(self) -> None:
        self.llm_config = LLMConfig()

    # ------------------------------------------------------------------
    # Profile
    # ------------------------------------------------------------------

    def set_about_me(self, text: str) -> None:
        self.profile.about_me = text

    def set_style(self, style) -> None:
        self.profile.preferred_style = WritingStyle(style)

    def set_tone(self, tone) -> None:
        self.profile.tone = Tone(tone)

    # ------------------------------------------------------------------
    # Actions
    # ------------------------------------------------------------------

    @property
    def actions(self) -> List[ActionButton]:
        return list(self._actions)

    def get_action(self, action_id: str) -> Optional[ActionButton]:
        for a in self._actions:
            if a.id == action_id:
                return a
        return None

    def _max_numeric_id(self) -> int:
        ids = [int(a.id) for a in self._actions if a.id.isdigit()]
        return max(ids, default=0)

    def _allocate_id(self) -> str:
        taken = {a.id for a in self._actions}
        while str(self._next_id) in taken:
            self._next_id += 1
        new_id = str(self._next_id)
        self._next_id += 1
        return new_id

    def add_action(
        self,
        name: str = NEW_ACTION_NAME,
        action: str = NEW_ACTION_DESCRIPTION,
        emoji: str = NEW_ACTION_EMOJI,
    ) -> ActionButton:
        button = ActionButton(id=self._allocate_id(), name=name, action=action, emoji=emoji)
        self._actions.append(button)
        return button

    def update_action(self, action_id: str, **updates) -> Optional[ActionButton]:
        """Merge updates into the matching action. Unknown ids are ignored."""
        unknown = set(updates) - set(_EDITABLE_FIELDS)
        if unknown:
            raise ValueError(f"Cannot update action fields: {', '.join(sorted(unknown))}")

        for i, a in enumerate(self._actions):
            if a.id == action_id:
                self._actions[i] = replace(a, **updates)
                return self._actions[i]
        return None

    def delete_action(self, action_id: str) -> bool:
        for i, a in enumerate(self._actions):
            if a.id == action_id:
                del self._actions[i]
                return True
        return False

    def reorder(self, active_id: str, over_id: Optional[str]) -> bool:
        """
        Move the dragged item to the target's position (array move).

        Dropping an item onto itself, onto nothing, or using an unknown id
        leaves the order unchanged. Returns True when the order changed.
        """
        if over_id is None or active_id == over_id:
            return False

        ids = [a.id for a in self._actions]
        if active_id not in ids or over_id not in ids:
            logger.debug("[store] reorder ignored, unknown id: %s -> %s", active_id, over_id)
            return False

        old_index = ids.index(active_id)
        new_index = ids.index(over_id)
        item = self._actions.pop(old_index)
        self._actions.insert(new_index, item)
        return True
