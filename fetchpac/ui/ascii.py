"""
Registry of the built-in ASCII designs.

Template bodies hold the color tokens ${a1} ${a2} ${a3} and ${rs}; they are
replaced with escape sequences just before printing.
"""

# SPDX-License-Identifier: GPL-3.0-or-later

import re
from typing import Dict, List, Mapping

from ..exceptions import TemplateError
from ..models import Template
from ..utils.logger import get_logger

logger = get_logger(__name__)

TOKEN_NAMES = ("a1", "a2", "a3", "rs")
_TOKEN_PATTERN = re.compile(r"\$\{(" + "|".join(TOKEN_NAMES) + r")\}")

DESIGN_HEIGHT = 21
DESIGN_WIDTH = 50

ARCH_ART = r"""

${a1}                          -`
${a1}                         .o+`
${a1}                        `ooo/
${a1}                       `+oooo:
${a1}                      `+oooooo:
${a2}                      -+oooooo+:
${a2}                    `/:-:++oooo+:
${a2}                   `/++++/+++++++:
${a2}                  `/++++++++++++++:
${a2}                 `/+++ooooooooooooo/`
${a2}                ./ooosssso++osssssso+`
${a3}               .oossssso-````/ossssss+`
${a3}              -osssssso.      :ssssssso.
${a3}             :osssssss/        osssso+++.
${a3}            /ossssssss/        +ssssooo/-
${a3}          `/ossssso+/:-        -:/+osssso+-
${a3}         `+sso+:-`                 `.-/+oso:
${a3}        `++:.                           `-/+/
${a3}        .`                                 `/
${a1}                ${a2}f e t c h ${a3}p a c${rs}"""

MANJARO_ART = r"""

${a1}       ##################  ##########
${a1}       ##################  ##########
${a1}       ##################  ##########
${a1}       ##################  ##########
${a1}       ##########          ##########
${a3}       ##########  ######  ##########
${a3}       ##########  ######  ##########
${a3}       ##########  ######  ##########
${a3}       ##########  ######  ##########
${a3}       ##########  ######  ##########
${a3}       ##########  ######  ##########
${a3}       ##########  ######  ##########
${a3}       ##########  ######  ##########
${a3}       ##########  ######  ##########
${a3}       ##########  ######  ##########
${a3}       ##########  ######  ##########
${a3}       ##########  ######  ##########
${a3}       ##########  ######  ##########

${a1}                ${a2}f e t c h ${a3}p a c${rs}"""

TUX_ART = r"""


${a2}                  _nnnn_
${a2}                 dGGGGMMb
${a2}                @p~qp~~qMb
${a2}                M|@||@) M|
${a2}                @,${a3}----.${a2}JM|
${a2}               JS^${a3}\__/${a2}  qKL
${a2}              dZP        qKRb
${a2}             dZP          qKKb
${a2}            fZP            SMMb
${a2}            HZM            MMMM
${a2}            FqM            MMMM
${a3}          __| ".        |\dS"qML
${a3}          |    `.       | `' \Zq
${a3}         _)      \.___.,|     .'
${a3}         \____   )MMMMMP|   .'
${a3}              `-'       `--'


${a1}                ${a2}f e t c h ${a3}p a c${rs}"""


def substitute_tokens(text: str, values: Mapping[str, str]) -> str:
    """
    Replace the known color tokens; anything else is left untouched.

    Args:
        text: Template body
        values: Replacement per token name

    Returns:
        Text with tokens replaced
    """
    return _TOKEN_PATTERN.sub(lambda m: values.get(m.group(1), ""), text)


def visible_width(line: str) -> int:
    """Printed width of a template line, tokens excluded."""
    return len(_TOKEN_PATTERN.sub("", line))


def build_template(name: str, art: str, height: int, width: int) -> Template:
    """
    Make a template whose lines are all exactly `width` columns wide.

    Args:
        name: Design name
        art: Raw art, one leading newline then the lines
        height: Declared number of lines
        width: Declared number of columns

    Returns:
        Template

    Raises:
        TemplateError: If the art does not fit the declared size
    """
    lines = art[1:].split("\n") if art.startswith("\n") else art.split("\n")
    if len(lines) != height:
        raise TemplateError(f"{name}: {len(lines)} lines, declared {height}")

    padded: List[str] = []
    for number, line in enumerate(lines, 1):
        current = visible_width(line)
        if current > width:
            raise TemplateError(f"{name}: line {number} is {current} columns, declared {width}")
        padded.append(line + " " * (width - current))

    return Template(name=name, height=height, width=width, body="\n".join(padded))


class AsciiRegistry:
    """Named templates, selected by case-insensitive substring of the design name."""

    def __init__(self, default: Template) -> None:
        """
        Initialize the registry.

        Args:
            default: Template used when no other name matches
        """
        self.default = default
        self._templates: Dict[str, Template] = {}

    def register(self, template: Template) -> None:
        self._templates[template.name.lower()] = template

    def names(self) -> List[str]:
        return [self.default.name] + [t.name for t in self._templates.values()]

    def select(self, design: str) -> Template:
        """
        Pick the template for a design name.

        Args:
            design: Design name, e.g. "DarkManjaro"

        Returns:
            Matching template, or the default one
        """
        lowered = (design or "").lower()
        for key, template in self._templates.items():
            if key in lowered:
                return template
        if lowered and self.default.name.lower() not in lowered:
            logger.debug(f"No design matches {design!r}, known: {', '.join(self.names())}")
        return self.default


def create_default_registry() -> AsciiRegistry:
    """Registry with the Arch (default), Manjaro and Tux designs."""
    registry = AsciiRegistry(build_template("Arch", ARCH_ART, DESIGN_HEIGHT, DESIGN_WIDTH))
    registry.register(build_template("Manjaro", MANJARO_ART, DESIGN_HEIGHT, DESIGN_WIDTH))
    registry.register(build_template("Tux", TUX_ART, DESIGN_HEIGHT, DESIGN_WIDTH))
    return registry


DEFAULT_REGISTRY = create_default_registry()
