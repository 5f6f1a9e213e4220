"""Interactive terminal front end."""

from .editor import LineEditor
from .render import Renderer
from .session import ShellSession, create_session

__all__ = ["LineEditor", "Renderer", "ShellSession", "create_session"]
