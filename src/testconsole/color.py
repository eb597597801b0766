from dataclasses import dataclass
from types import MappingProxyType
from typing import Dict, List, Mapping, Optional, TextIO

NAMES = ["black", "red", "green", "yellow", "blue", "magenta", "cyan", "white"]

@dataclass(frozen=True)
class Color:
    """A foreground color plus boldness, rendered as an ANSI SGR sequence."""
    name: str
    bold: bool = False

    def __post_init__(self):
        if self.name not in NAMES and self.name != "reset":
            raise ValueError(f"Unknown color name: {self.name!r}")

    @property
    def sequence(self) -> List[str]:
        codes: List[str] = []
        if self.name == "reset":
            codes.append("0")
        else:
            codes.append(f"3{NAMES.index(self.name)}")
        if self.bold:
            codes.append("1")
        return codes

    @property
    def escape_sequence(self) -> str:
        return f"\x1b[{';'.join(self.sequence)}m"


RESET = Color("reset")

def apply(text: str, color: Color) -> str:
    """Wrap text in the color's start sequence; the reset is always appended."""
    return f"{color.escape_sequence}{text}{RESET.escape_sequence}"


class ColorScheme:
    """Read-only mapping of category key ("failure", "success", ...) to Color."""
    def __init__(self, colors: Mapping[str, Color]):
        self._colors = MappingProxyType(dict(colors))

    def color_for(self, category: Optional[str]) -> Optional[Color]:
        if category is None:
            return None
        return self._colors.get(category)

    def __getitem__(self, category: str) -> Color:
        return self._colors[category]

    def keys(self):
        return self._colors.keys()


COLOR_SCHEMES: Dict[str, ColorScheme] = {
    "default": ColorScheme({
        "success": Color("green", bold=True),
        "failure": Color("red", bold=True),
        "pending": Color("magenta", bold=True),
        "omission": Color("blue", bold=True),
        "notification": Color("cyan", bold=True),
        "error": Color("yellow", bold=True),
    }),
}

def scheme_named(name: str) -> ColorScheme:
    try:
        return COLOR_SCHEMES[name]
    except KeyError:
        known = ", ".join(sorted(COLOR_SCHEMES))
        raise ValueError(f"Unknown color scheme {name!r}; expected one of: {known}") from None

def guess_color_availability(stream: TextIO, environ: Mapping[str, str]) -> bool:
    """Heuristic used only when color was not configured explicitly."""
    isatty = getattr(stream, "isatty", None)
    if isatty is None or not isatty():
        return False
    term = environ.get("TERM")
    if term and (term.endswith("term") or term == "screen"):
        return True
    return environ.get("EMACS") == "t"
