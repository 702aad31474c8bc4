"""Compose templates: children stream into the parent's sink."""

import sys

from qtpl import child, tplfn


@tplfn(
    """
    <html>
        <body>{!c body}</body>
        <footer>{!c footer}</footer>
    </html>
    """
)
def page(body, footer):
    pass


@tplfn("<h1>Hello, {name}!</h1> <ul>{!c items}</ul>")
def greeting(name, entries):
    def items(sink):
        for entry in entries:
            row(sink, entry)

    return {"items": items}


@tplfn("<li>{entry}</li>")
def row(entry):
    pass


@tplfn("Copyright {owner}")
def notice(owner):
    pass


page(
    sys.stdout.buffer,
    child(greeting, "world", ["one", "two & three"]),
    child(notice, "bigcorp"),
)
sys.stdout.buffer.write(b"\n")
