"""Source positions and spans."""

from skelconf.text.text import START, Position, TextSpan, slice_span

__all__ = ["START", "Position", "TextSpan", "slice_span"]
