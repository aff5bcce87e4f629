# FILE: cowriter/session/panels.py
"""
Session panels: connection dialog, action panel, chat panel.

Each panel is the event-handler half of a UI widget. It reads and writes the
ConfigurationStore / EditorView and calls the backend through BackendClient.
Failures never escape a panel: they end up as a notice, a fallback chat
message, or a reverted connection.
"""

from __future__ import annotations

import logging
from typing import List, Optional, Union

from cowriter.llm.connector import validate_config
from cowriter.llm.schemas import LLMConfig, LLMType
from cowriter.session.client import BackendClient, BackendError
from cowriter.session.editor import EditorView
from cowriter.session.models import CHAT_FALLBACK, GREETING, ActionButton, Message
from cowriter.session.request_state import RequestTracker
from cowriter.session.store import ConfigurationStore

logger = logging.getLogger(__name__)

DEFAULT_LLAMA_HOST = "http://localhost"
DEFAULT_LLAMA_PORT = "8080"

CONNECT_FAILED = "Failed to connect to LLM"
CONNECT_FIRST = "Please connect to an LLM first"
REQUEST_CANCELLED = "Request cancelled"
ENTER_TEXT_FIRST = "Please enter some text in the editor first"
ACTION_FAILED = "Failed to process action. Please try again."


def _settle(request: RequestTracker) -> None:
    # Cancellation skips the except branch; a control must not stay locked
    if request.in_flight:
        request.fail(REQUEST_CANCELLED)


class ConnectionDialog:
    """Provider picker with inline validation."""

    def __init__(self, store: ConfigurationStore, client: BackendClient):
        self.store = store
        self.client = client
        self.selected = LLMType.OPENAI
        self.api_key = ""
        self.host = DEFAULT_LLAMA_HOST
        self.port = DEFAULT_LLAMA_PORT
        self.error: Optional[str] = None
        self.notice: Optional[str] = None
        self.request = RequestTracker("connect")

    def select(self, llm_type) -> None:
        self.selected = LLMType(llm_type)
        self.error = None

    def set_api_key(self, value: str) -> None:
        self.api_key = value
        self.error = None

    def set_host(self, value: str) -> None:
        self.host = value
        self.error = None

    def set_port(self, value: str) -> None:
        self.port = value
        self.error = None

    @property
    def button_label(self) -> str:
        if self.request.in_flight:
            return "Connecting..."
        return "Update Connection" if self.store.is_connected else "Connect Now"

    @property
    def status_text(self) -> str:
        return "Connected" if self.store.is_connected else "Not connected"

    @property
    def connected_to(self) -> Optional[str]:
        if not self.store.is_connected:
            return None
        return self.store.llm_config.describe()

    def build_config(self) -> LLMConfig:
        if self.selected == LLMType.OPENAI:
            return LLMConfig(type=LLMType.OPENAI, api_key=self.api_key)
        return LLMConfig(type=LLMType.LLAMA, host=self.host, port=self.port)

    async def submit(self) -> bool:
        """Validate locally, then connect. No network call on a validation error."""
        self.error = None
        if self.selected == LLMType.OPENAI and not self.api_key.strip():
            self.error = "API key is required"
            return False
        if self.selected == LLMType.LLAMA and (not self.host.strip() or not self.port.strip()):
            self.error = "Host and port are required"
            return False

        config = self.build_config()
        # Port range and other checks shared with the backend
        error = validate_config(config)
        if error:
            self.error = error
            return False
        return await self.connect(config)

    async def connect(self, config: LLMConfig) -> bool:
        if not self.request.begin():
            return False

        self.notice = None
        try:
            data = await self.client.connect_llm(config)
            if not data.get("success"):
                raise BackendError(data.get("message") or CONNECT_FAILED)
        except Exception as e:
            if isinstance(e, BackendError):
                message = str(e) or CONNECT_FAILED
                logger.warning("Failed to connect: %s", message)
            else:
                message = CONNECT_FAILED
                logger.exception("Unexpected error while connecting: %s", e)
            self.notice = message
            self.store.clear_llm_config()
            self.request.fail(message)
            return False
        else:
            self.store.set_llm_config(config)
            self.request.succeed()
            return True
        finally:
            _settle(self.request)


class ActionPanel:
    """Collapsible list of action buttons bound to the editor."""

    def __init__(self, store: ConfigurationStore, editor: EditorView, client: BackendClient):
        self.store = store
        self.editor = editor
        self.client = client
        self.collapsed = False
        self.notice: Optional[str] = None
        self.request = RequestTracker("action")

    @property
    def buttons(self) -> List[ActionButton]:
        return self.store.actions

    @property
    def buttons_enabled(self) -> bool:
        return self.store.is_connected and not self.request.in_flight

    def toggle_collapsed(self) -> None:
        self.collapsed = not self.collapsed

    async def click(self, action: Union[ActionButton, str]) -> bool:
        """Run an action over the editor content. Returns True when the editor was updated."""
        button = action if isinstance(action, ActionButton) else self.store.get_action(action)
        if button is None:
            return False

        if not self.store.is_connected:
            self.notice = CONNECT_FIRST
            return False
        if self.editor.is_empty:
            self.notice = ENTER_TEXT_FIRST
            return False
        if not self.request.begin():
            return False

        self.notice = None
        self.editor.is_loading = True
        try:
            text = await self.client.submit_action(
                button.name,
                button.action,
                self.editor.content,
                self.store.profile,
            )
        except Exception as e:
            if isinstance(e, BackendError):
                logger.error("Action processing failed: %s", e)
                message = e.detail or ACTION_FAILED
            else:
                logger.exception("Unexpected error while processing action: %s", e)
                message = ACTION_FAILED
            self.notice = message
            self.request.fail(message)
            return False
        else:
            self.editor.update(text)
            self.request.succeed()
            return True
        finally:
            self.editor.is_loading = False
            _settle(self.request)


class ChatPanel:
    """Message list plus input box."""

    def __init__(self, store: ConfigurationStore, editor: EditorView, client: BackendClient):
        self.store = store
        self.editor = editor
        self.client = client
        self.messages: List[Message] = [Message(GREETING, is_user=False)]
        self.input_text = ""
        self.request = RequestTracker("chat")

    def set_input(self, text: str) -> None:
        self.input_text = text

    @property
    def input_enabled(self) -> bool:
        return self.store.is_connected and not self.request.in_flight

    @property
    def can_send(self) -> bool:
        return bool(self.input_text.strip()) and self.input_enabled

    async def send(self) -> bool:
        """Send the input box. Returns True when a reply (not the fallback) arrived."""
        if not self.can_send:
            return False

        text = self.input_text
        self.messages.append(Message(text, is_user=True))
        self.input_text = ""
        self.request.begin()

        try:
            reply = await self.client.chat(text, self.editor.as_context() or None)
        except Exception as e:
            if isinstance(e, BackendError):
                logger.error("Chat error: %s", e)
            else:
                logger.exception("Unexpected chat error: %s", e)
            self.messages.append(Message(CHAT_FALLBACK, is_user=False))
            self.request.fail(str(e) or type(e).__name__)
            return False
        else:
            self.messages.append(Message(reply, is_user=False))
            self.request.succeed()
            return True
        finally:
            _settle(self.request)


class WriterSession:
    """One user's session: store, editor and the three panels sharing them."""

    def __init__(self, client: Optional[BackendClient] = None):
        self.client = client or BackendClient()
        self.store = ConfigurationStore()
        self.editor = EditorView()
        self.connection = ConnectionDialog(self.store, self.client)
        self.actions = ActionPanel(self.store, self.editor, self.client)
        self.chat = ChatPanel(self.store, self.editor, self.client)
