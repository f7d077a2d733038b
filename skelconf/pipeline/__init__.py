"""Stage result carriers."""

from skelconf.pipeline.result import ParseResult, StageResult

__all__ = ["ParseResult", "StageResult"]
