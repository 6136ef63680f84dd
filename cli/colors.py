# cli/colors.py

"""
ANSI color styling for terminal output.

Color is purely presentational: the `Gradebook` returns plain text and the CLI decides how to style it.
Styling can be switched off for the whole session with `set_color_enabled(False)`, e.g. for `--no-color`,
the `NO_COLOR` environment variable, or output that is not a terminal.
"""


class ColorCode:
    RED = "\033[31m"
    GREEN = "\033[32m"
    YELLOW = "\033[33m"
    BLUE = "\033[34m"
    CYAN = "\033[36m"

    END = "\033[0m"


_color_enabled: bool = True


def set_color_enabled(enabled: bool) -> None:
    global _color_enabled
    _color_enabled = enabled


def is_color_enabled() -> bool:
    return _color_enabled


def colorize(text: str, color: str) -> str:
    if not _color_enabled or not text:
        return text

    return f"{color}{text}{ColorCode.END}"


# === semantic styles ===


def header(text: str) -> str:
    return colorize(text, ColorCode.BLUE)


def body(text: str) -> str:
    return colorize(text, ColorCode.GREEN)


def info(text: str) -> str:
    return colorize(text, ColorCode.CYAN)


def warning(text: str) -> str:
    return colorize(text, ColorCode.YELLOW)


def error(text: str) -> str:
    return colorize(text, ColorCode.RED)
