"""
Session layer - the UI state of one CoWriter user, without the rendering.

Nothing here is persisted; a session lives as long as its WriterSession.
"""

from cowriter.session.client import BackendClient, BackendError
from cowriter.session.editor import EditorView
from cowriter.session.models import ActionButton, Message, Profile, default_actions
from cowriter.session.panels import ActionPanel, ChatPanel, ConnectionDialog, WriterSession
from cowriter.session.request_state import RequestState, RequestTracker
from cowriter.session.store import ConfigurationStore

__all__ = [
    # State
    "ConfigurationStore",
    "EditorView",
    "RequestState",
    "RequestTracker",
    # Models
    "ActionButton",
    "Message",
    "Profile",
    "default_actions",
    # Panels
    "ConnectionDialog",
    "ActionPanel",
    "ChatPanel",
    "WriterSession",
    # Transport
    "BackendClient",
    "BackendError",
]
