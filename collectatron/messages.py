"""Terminal texts: the title menu and the farewell lines."""

from __future__ import annotations

import sys
from typing import TextIO

DEF = "\033[0;39m"
BLK = "\033[0;30m"
GRN = "\033[0;32m"
YEL = "\033[0;33m"
CYN = "\033[0;36m"
HCYN = "\033[0;96m"
GRNB = "\033[42m"
CYNB = "\033[46m"

SUCCESS_STATUS = 10

_EDGE = "▚▛▘▜▝▞▟▙▘▖▞▙▗▚▛▘▜▝▞▟▛▙▘▖▞▙▗▞▙▗▚▛▘▜▝▞▟▙▘▖▞▙▗▟▙▘▖▞▙▗▚▛▘"
_MARK = "▖▞▙▗"
_EDGE_LINE = "\n" + HCYN + _EDGE + DEF
_SIDE_BLANK = "\n" + HCYN + _MARK + " \t\t\t\t\t\t " + _MARK + DEF
_SIDE_GAP = "\n" + HCYN + _MARK + DEF + "\t\t\t\t\t\t " + HCYN + _MARK + DEF
_LEFT = "\n" + HCYN + _MARK + "\t" + DEF
_RIGHT = "\t " + HCYN + _MARK + DEF


def menu_banner() -> str:
    """Return the framed title screen."""
    return "".join(
        (
            YEL + "\n\n\tEAGERNESS ENTERTAINMENT PRESENTS ...\n\n" + DEF,
            _EDGE_LINE,
            _SIDE_BLANK,
            _SIDE_GAP,
            _LEFT,
            GRN + "› OUR " + YEL + "BRAND NEW" + GRN + " HANDHELD: " + BLK + CYNB + " EAGN " + DEF,
            _RIGHT,
            _SIDE_GAP,
            _LEFT,
            GRN + "› try it out now with our\t" + DEF,
            _RIGHT,
            _LEFT,
            GRN + "  first (and only) game \t" + DEF,
            _RIGHT,
            _SIDE_GAP,
            _SIDE_GAP,
            _LEFT,
            BLK + GRNB + "› COLLECTATRON 3000 \t\t" + DEF,
            _RIGHT,
            _SIDE_GAP,
            _SIDE_BLANK,
            _EDGE_LINE,
        )
    )


def menu_instructions(input_name: str) -> str:
    """Return the how-to-play text naming the chosen map."""
    return "".join(
        (
            "\n\n\n\n" + HCYN + "▚▗▛▘\t" + DEF,
            GRN + "› you're a " + CYN + "flying sd card reader" + GRN + "  " + DEF,
            _RIGHT,
            "\n" + HCYN + "▚▛▘▗\t" + DEF,
            GRN + "  sent to collect valuable " + YEL + "SDCARDS" + DEF,
            _RIGHT,
            "\n\n\n" + HCYN + "▚▗▛▘\t" + DEF,
            GRN + "› escape with them through the" + YEL + " VENT" + DEF,
            _RIGHT,
            "\n\n\n" + HCYN + "▚▗▛▘\t" + DEF,
            GRN + "› TO MOVE, USE " + CYN + "__WASD__\t\t" + DEF,
            _RIGHT,
            "\n" + HCYN + "▚▛▘▗\t" + DEF,
            GRN + "  or " + CYN + "__ARROW KEYS__ \t\t" + DEF,
            _RIGHT,
            YEL + "\n\n\t› input map: " + CYN + f"{input_name}" + DEF,
        )
    )


def main_menu(
    input_name: str, out: TextIO | None = None, inp: TextIO | None = None
) -> None:
    """Show the menu on out and wait for one line from inp."""
    out = sys.stdout if out is None else out
    inp = sys.stdin if inp is None else inp
    out.write(menu_banner())
    out.write(menu_instructions(input_name))
    out.write("\n\n" + HCYN + _MARK + DEF + "\t\t\t\t\t\t " + HCYN + _MARK + DEF)
    out.write(_SIDE_BLANK)
    out.write(_EDGE_LINE + "\n\n\t")
    out.write(YEL + "HIT " + CYN + "__ENTER__" + YEL + " TO START THE GAME ..." + DEF)
    out.flush()
    inp.readline()
    out.write("\n\n\n" + DEF)
    out.flush()


def exit_message(status: int) -> str:
    """Return the farewell line for a game that ended with the given status."""
    if status == SUCCESS_STATUS:
        return YEL + "\n\tsuccess!! congrats\n\n" + DEF
    return YEL + "\n\thope you return soon!!\n\n" + DEF