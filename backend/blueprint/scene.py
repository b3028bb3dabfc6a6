# blueprint/scene.py
"""Minimal vector scene graph that serializes to SVG markup."""
from typing import Any, Dict, Iterator, List, Optional
from xml.sax.saxutils import escape, quoteattr


def fmt_number(value: float) -> str:
    """Format a coordinate the way SVG authors write it: no trailing zeros."""
    if isinstance(value, bool):
        return str(value).lower()
    if isinstance(value, int):
        return str(value)
    rounded = round(float(value), 3)
    if rounded == int(rounded):
        return str(int(rounded))
    return f"{rounded:.3f}".rstrip("0").rstrip(".")


def _attr_name(key: str) -> str:
    # stroke_width -> stroke-width, class_ -> class
    return key.rstrip("_").replace("_", "-")


class Element:
    """One SVG node. Attributes keep insertion order so output is stable."""

    def __init__(self, tag: str, text: Optional[str] = None, **attrs: Any):
        self.tag = tag
        self.text = text
        self.attrs: Dict[str, Any] = {}
        self.children: List["Element"] = []
        self.set(**attrs)

    def set(self, **attrs: Any) -> "Element":
        for key, value in attrs.items():
            if value is not None:
                self.attrs[_attr_name(key)] = value
        return self

    def append(self, tag: str, text: Optional[str] = None, **attrs: Any) -> "Element":
        child = Element(tag, text, **attrs)
        self.children.append(child)
        return child

    def iter(self, tag: Optional[str] = None) -> Iterator["Element"]:
        """Depth-first walk over this node and its descendants."""
        if tag is None or self.tag == tag:
            yield self
        for child in self.children:
            yield from child.iter(tag)

    def find_all(self, tag: str, **attrs: Any) -> List["Element"]:
        wanted = {_attr_name(k): v for k, v in attrs.items()}
        return [
            el for el in self.iter(tag)
            if all(el.attrs.get(k) == v for k, v in wanted.items())
        ]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Element):
            return NotImplemented
        return (
            self.tag == other.tag
            and self.text == other.text
            and self.attrs == other.attrs
            and self.children == other.children
        )

    def __repr__(self) -> str:
        return f"Element({self.tag!r}, attrs={self.attrs!r}, children={len(self.children)})"

    def to_svg(self) -> str:
        parts = [f"<{self.tag}"]
        for key, value in self.attrs.items():
            if isinstance(value, (int, float)):
                value = fmt_number(value)
            parts.append(f" {key}={quoteattr(str(value))}")
        if not self.children and self.text is None:
            parts.append("/>")
            return "".join(parts)
        parts.append(">")
        if self.text is not None:
            parts.append(escape(self.text))
        parts.extend(child.to_svg() for child in self.children)
        parts.append(f"</{self.tag}>")
        return "".join(parts)


def svg_root(width: float, height: float) -> Element:
    return Element(
        "svg",
        xmlns="http://www.w3.org/2000/svg",
        width=width,
        height=height,
        viewBox=f"0 0 {fmt_number(width)} {fmt_number(height)}",
    )


def translate(x: float, y: float) -> str:
    return f"translate({fmt_number(x)}, {fmt_number(y)})"
