from .session import GameSession, RenderingIntent, Status
from .loop import Outcome, play, lines_from, read_stdin_line

__all__ = ["GameSession", "RenderingIntent", "Status", "Outcome", "play", "lines_from",
           "read_stdin_line"]
