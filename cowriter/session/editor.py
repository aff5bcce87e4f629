class EditorView:
    """Rich-text surface reduced to its state: one content string and a loading flag."""

    def __init__(self, content: str = ""):
        self.content = content
        self.is_loading = False

    def update(self, content: str) -> None:
        self.content = content

    @property
    def is_empty(self) -> bool:
        return not self.content.strip()

    def as_context(self) -> str:
        """Editor content formatted as chat context, or "" when empty."""
        if not self.content:
            return ""
        return f"Current editor content: {self.content}"
