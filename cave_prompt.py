# cave_prompt.py
# Console prompts for the Speleo cave simulator
# Every prompt loops until a value within bounds is supplied.

import cave_config as cc
from cave_errors import InvalidInputError


# ---------- PARSERS ----------

def parse_bounded(text: str, cast, low, high):
    """
    Convert text with cast and check low <= value <= high.
    Raises InvalidInputError on either failure.
    """
    try:
        value = cast(text.strip())
    except ValueError:
        raise InvalidInputError(f"not a valid value: {text.strip()!r}") from None
    if value != value or value < low or value > high:  # NaN
        raise InvalidInputError(f"{value} is outside [{low}; {high}]")
    return value


def parse_mode(text: str) -> str:
    mode = text.strip().upper()
    if mode not in cc.MODES:
        raise InvalidInputError(f"unknown mode {text.strip()!r}")
    return mode


def parse_map_tokens(tokens: list[str]) -> list[bool]:
    """0 is free ground, any other integer is rock."""
    flags = []
    for tok in tokens:
        try:
            flags.append(int(tok) != 0)
        except ValueError:
            raise InvalidInputError(f"map cell {tok!r} is not an integer") from None
    return flags


# ---------- PROMPTS ----------

def ask(parser, prompt: str, input_fn=input):
    """Re-prompt until parser accepts the answer."""
    while True:
        try:
            return parser(input_fn(prompt))
        except InvalidInputError as exc:
            cc.log(f"rejected input: {exc}")


def bounded_value(prompt: str, cast, low, high=None, input_fn=input):
    if high is None:
        high = float("inf")
    return ask(lambda text: parse_bounded(text, cast, low, high), prompt, input_fn)


def ask_mode(input_fn=input) -> str:
    return ask(parse_mode, "Mode A, B or C ? ", input_fn)


def ask_size(input_fn=input) -> int:
    return bounded_value("Cave size [>0] ? ", int, 1, input_fn=input_fn)


def ask_accessibility(input_fn=input) -> float:
    return bounded_value("Accessibility [0;1] ? ", float, 0.0, 1.0, input_fn=input_fn)


def ask_samples(input_fn=input) -> int:
    return bounded_value("Sample size [>0] ? ", int, 1, input_fn=input_fn)


def read_map(size: int, input_fn=input) -> list[list[bool]]:
    """
    Read size*size cell values, whitespace separated, over as many
    lines as it takes. A bad token restarts the whole map.
    """
    while True:
        tokens: list[str] = []
        try:
            while len(tokens) < size * size:
                tokens.extend(input_fn("").split())
            flags = parse_map_tokens(tokens[: size * size])
        except InvalidInputError as exc:
            print(f"[Cave] {exc}. Enter the map again.")
            continue
        return [flags[y * size:(y + 1) * size] for y in range(size)]
