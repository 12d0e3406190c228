import re

# "%s" is the single substitution slot, "%%" is an escaped percent sign.
# Anything else starting with "%" (e.g. "%20" in an encoded URL) is literal text.
_TOKEN_RE = re.compile(r"%[%s]")
PLACEHOLDER = "%s"


class Template:
    """
    A string with exactly one ``%s`` slot.

    Unlike ``template % value`` it never trips over other ``%`` sequences in
    the template and never accepts more than one argument.
    """

    __slots__ = ("raw",)

    def __init__(self, raw: str):
        slots = sum(1 for m in _TOKEN_RE.finditer(raw) if m.group() == PLACEHOLDER)
        if slots != 1:
            raise ValueError(
                f"template must contain exactly one {PLACEHOLDER!r} placeholder, found {slots}: {raw!r}"
            )
        self.raw = raw

    def render(self, value: str) -> str:
        return _TOKEN_RE.sub(lambda m: value if m.group() == PLACEHOLDER else "%", self.raw)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Template) and other.raw == self.raw

    def __hash__(self) -> int:
        return hash(self.raw)

    def __repr__(self) -> str:
        return f"Template({self.raw!r})"

