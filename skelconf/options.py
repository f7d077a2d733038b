"""Parser modes and configuration options."""

from dataclasses import dataclass
from enum import StrEnum


class ParseMode(StrEnum):
    """Top-level parser behavior profile."""

    STRICT = "strict"
    PERMISSIVE = "permissive"


class DuplicateKeyPolicy(StrEnum):
    """What the materializer does when an object repeats a key."""

    LAST_WINS = "last_wins"
    REJECT = "reject"


@dataclass(frozen=True, slots=True)
class ParserOptions:
    """Feature flags controlling grammar strictness.

    The flags alone govern behavior. `mode` records which profile
    `for_mode` derived them from; passing `mode` to the constructor does not
    change the flag defaults.
    """

    mode: ParseMode = ParseMode.STRICT
    validate_assign: bool = True
    duplicate_keys: DuplicateKeyPolicy = DuplicateKeyPolicy.LAST_WINS

    @staticmethod
    def for_mode(mode: ParseMode) -> "ParserOptions":
        if mode == ParseMode.PERMISSIVE:
            return ParserOptions(
                mode=mode,
                validate_assign=False,
                duplicate_keys=DuplicateKeyPolicy.LAST_WINS,
            )

        return ParserOptions(
            mode=mode,
            validate_assign=True,
            duplicate_keys=DuplicateKeyPolicy.LAST_WINS,
        )


def resolve_options(
    options: ParserOptions | None,
    mode: ParseMode | None,
) -> ParserOptions:
    if mode is not None and options is not None:
        raise ValueError("Pass either options or mode, not both")

    if options is not None:
        return options

    if mode is not None:
        return ParserOptions.for_mode(mode)

    return ParserOptions()
