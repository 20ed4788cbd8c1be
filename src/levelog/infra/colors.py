from __future__ import annotations

"""
Console Color Table.

Maps the display color tokens accepted by level definitions (black, red,
yellowBright, gray, ...) to colorama styles.
"""

from typing import Dict

from colorama import Fore, Style, just_fix_windows_console

just_fix_windows_console()

_COLORS: Dict[str, str] = {
    "black": Fore.BLACK,
    "red": Fore.RED,
    "green": Fore.GREEN,
    "yellow": Fore.YELLOW,
    "blue": Fore.BLUE,
    "magenta": Fore.MAGENTA,
    "cyan": Fore.CYAN,
    "white": Fore.WHITE,
    "gray": Fore.LIGHTBLACK_EX,
    "grey": Fore.LIGHTBLACK_EX,
    "blackBright": Fore.LIGHTBLACK_EX,
    "redBright": Fore.LIGHTRED_EX,
    "greenBright": Fore.LIGHTGREEN_EX,
    "yellowBright": Fore.LIGHTYELLOW_EX,
    "blueBright": Fore.LIGHTBLUE_EX,
    "magentaBright": Fore.LIGHTMAGENTA_EX,
    "cyanBright": Fore.LIGHTCYAN_EX,
    "whiteBright": Fore.LIGHTWHITE_EX,
}


def is_known_color(token: str) -> bool:
    return token in _COLORS


def get_color_code(token: str) -> str:
    """Get the ANSI sequence for a token, empty string if unknown."""
    return _COLORS.get(token, "")


def colorize(text: str, token: str) -> str:
    """Wrap text in the token's color; unknown tokens leave it plain."""
    code = get_color_code(token)
    if not code:
        return text
    return f"{code}{text}{Style.RESET_ALL}"
