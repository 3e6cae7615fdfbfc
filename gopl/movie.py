"""Movies encoded as JSON."""

from __future__ import annotations

import json
import sys
from collections.abc import Iterable
from dataclasses import dataclass, field


@dataclass
class Movie:
    title: str
    year: int
    color: bool = False
    actors: list[str] = field(default_factory=list)

    def to_json(self) -> dict:
        data: dict = {"Title": self.title, "released": self.year}
        if self.color:
            data["color"] = True
        data["Actors"] = list(self.actors)
        return data


MOVIES = [
    Movie("Casablanca", 1942, False, ["Humphrey Bogart", "Ingrid Bergman"]),
    Movie("Cool Hand Luke", 1967, True, ["Paul Newman"]),
    Movie("Bullitt", 1968, True, ["Steve McQueen", "Jacqueline Bisset"]),
]


def _escape_html(text: str) -> str:
    for ch, esc in (("&", "\\u0026"), ("<", "\\u003c"), (">", "\\u003e"),
                    ("\u2028", "\\u2028"), ("\u2029", "\\u2029")):
        text = text.replace(ch, esc)
    return text


def marshal(movies: Iterable[Movie]) -> str:
    """Encode movies as compact JSON."""
    payload = [m.to_json() for m in movies]
    return _escape_html(json.dumps(payload, ensure_ascii=False, separators=(",", ":")))


def marshal_indent(movies: Iterable[Movie]) -> str:
    """Encode movies as JSON indented by four spaces."""
    payload = [m.to_json() for m in movies]
    return _escape_html(json.dumps(payload, ensure_ascii=False, indent=4))


def titles(data: str) -> list[str]:
    """Decode a JSON array of objects and return their titles."""
    items = json.loads(data)
    if not isinstance(items, list):
        raise ValueError("JSON value is not an array")
    return [
        next((v for k, v in item.items() if k.lower() == "title"), "")
        for item in items
    ]


def main(argv: list[str] | None = None) -> int:
    print(marshal(MOVIES))
    data = marshal_indent(MOVIES)
    print(data)
    try:
        names = titles(data)
    except ValueError as err:
        print(f"JSON unmarshaling failed: {err}", file=sys.stderr)
        return 1
    print("[" + " ".join(f"{{{t}}}" for t in names) + "]")
    return 0