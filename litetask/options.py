import logging
import re
import sys
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

logger = logging.getLogger(__name__)

BOOLEAN_FLAGS = ("quiet", "run")
ALIASES = {"q": "quiet"}
BOOLEAN_VALUES = ("true", "false")
NUMBER = re.compile(r"^[-+]?(\d+(\.\d*)?|\.\d+)([eE][-+]?\d+)?$")

_cli_options = None


class Options(BaseModel):
    """
    Options handed to every task function

    Attributes:
        quiet: Suppress the "Starting"/"Finished" timing lines
        run: Start the default task when the runner is awaited
        args: Positional tokens not yet consumed as task names

    Unknown flags are kept as extra attributes, e.g. ``--env prod`` becomes
    ``options.env == "prod"``. A flag named like a pydantic model attribute
    (``--json``, ``--copy``, ``--dict``) is shadowed by that attribute and is
    only reachable through ``options.model_extra``.
    """

    model_config = ConfigDict(extra="allow")

    quiet: bool = False
    run: bool = True
    args: List[str] = Field(default_factory=list)


def _coerce(value: str):
    """Turn numeric strings into numbers, leave everything else alone"""
    if not NUMBER.match(value):
        return value
    try:
        return int(value)
    except ValueError:
        return float(value)


def _set_flag(flags: dict, key: str, value):
    key = ALIASES.get(key, key)
    if key in BOOLEAN_FLAGS and not isinstance(value, bool):
        value = str(value).lower() not in ("false", "0", "no", "")
    flags[key.replace("-", "_")] = value


def parse_cli(argv: Optional[List[str]] = None) -> Options:
    """
    Parse command line arguments into Options

    Args:
        argv: Argument list (defaults to sys.argv[1:])

    Example:
        parse_cli(["build", "-q", "--env", "prod"])
        # Options(quiet=True, run=True, args=["build"], env="prod")
    """
    tokens = list(sys.argv[1:] if argv is None else argv)
    flags = {}
    args = []

    i = 0
    while i < len(tokens):
        token = tokens[i]
        following = tokens[i + 1] if i + 1 < len(tokens) else None
        takes_next = following is not None and not following.startswith("-")

        if token == "--":
            args.extend(tokens[i + 1 :])
            break

        if token.startswith("--") and "=" in token:
            key, value = token[2:].split("=", 1)
            _set_flag(flags, key, value if ALIASES.get(key, key) in BOOLEAN_FLAGS else _coerce(value))
        elif token.startswith("--no-"):
            _set_flag(flags, token[5:], False)
        elif token.startswith("--"):
            key = ALIASES.get(token[2:], token[2:])
            if key in BOOLEAN_FLAGS and following in BOOLEAN_VALUES:
                _set_flag(flags, key, following == "true")
                i += 1
            elif key not in BOOLEAN_FLAGS and takes_next:
                _set_flag(flags, key, _coerce(following))
                i += 1
            else:
                _set_flag(flags, key, True)
        elif token.startswith("-") and len(token) > 1:
            letters = token[1:]
            for j, letter in enumerate(letters[:-1]):
                rest = letters[j + 1 :]
                if rest.startswith("="):
                    _set_flag(flags, letter, _coerce(rest[1:]))
                    break
                if letter.isalpha() and NUMBER.match(rest):
                    # -n3 -> n=3
                    _set_flag(flags, letter, _coerce(rest))
                    break
                _set_flag(flags, letter, True)
            else:
                last = ALIASES.get(letters[-1], letters[-1])
                if last in BOOLEAN_FLAGS and following in BOOLEAN_VALUES:
                    _set_flag(flags, last, following == "true")
                    i += 1
                elif last not in BOOLEAN_FLAGS and takes_next:
                    _set_flag(flags, last, _coerce(following))
                    i += 1
                else:
                    _set_flag(flags, last, True)
        else:
            args.append(token)

        i += 1

    logger.debug(f"Parsed CLI: args={args} flags={flags}")
    return Options(**{**flags, "args": args})


def get_cli_options() -> Options:
    """Process-wide options parsed from sys.argv (parsed once)"""
    global _cli_options
    if _cli_options is None:
        _cli_options = parse_cli()
    return _cli_options


def set_cli_options(options: Optional[Options]):
    """Replace the process-wide options (None re-parses sys.argv on next use)"""
    global _cli_options
    _cli_options = options
