from pathlib import Path

from jinja2 import Environment, FileSystemLoader, select_autoescape
from markupsafe import Markup


def nl2br(value: str) -> Markup:
    return Markup("<br>").join(value.split("\n"))


env = Environment(
    loader=FileSystemLoader(Path(__file__).parent / "../templates"),
    autoescape=select_autoescape(["html"]),
    keep_trailing_newline=True,
)
env.filters["nl2br"] = nl2br
