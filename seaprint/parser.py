"""Inline tag parser — splits "[text](tag)" markup into fragments.

Brackets may nest inside the display text ("[a[b]c](key)" has the text
"a[b]c"). Anything that does not form a complete "[text](tag)" span is
kept as literal text, so joining the fragments gives back the input.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Fragment:
    text: str
    tag: str | None = None

    @property
    def is_tagged(self) -> bool:
        return self.tag is not None

    def literal(self) -> str:
        """Source form of this fragment."""
        if self.tag is None:
            return self.text
        return f"[{self.text}]({self.tag})"


def _find_close_bracket(text: str, open_pos: int) -> int:
    """Index of the "]" matching the "[" at *open_pos*, or -1."""
    depth = 1
    for pos in range(open_pos + 1, len(text)):
        c = text[pos]
        if c == "[":
            depth += 1
        elif c == "]":
            depth -= 1
            if depth == 0:
                return pos
    return -1


def parse_text(text: str) -> list[Fragment]:
    fragments: list[Fragment] = []
    pos = 0
    length = len(text)

    while pos < length:
        open_pos = text.find("[", pos)
        if open_pos < 0:
            break

        if open_pos > pos:
            fragments.append(Fragment(text[pos:open_pos]))

        close_pos = _find_close_bracket(text, open_pos)
        if close_pos < 0:
            # Unmatched "[": the rest of the input is literal
            pos = open_pos
            break

        if close_pos + 1 < length and text[close_pos + 1] == "(":
            tag_start = close_pos + 2
            paren_pos = text.find(")", tag_start)
            if paren_pos >= 0:
                fragments.append(Fragment(text[open_pos + 1:close_pos], text[tag_start:paren_pos]))
                pos = paren_pos + 1
                continue

        # "[text]" without a "(tag)": keep the "[" and rescan right after it
        fragments.append(Fragment("["))
        pos = open_pos + 1

    if pos < length:
        fragments.append(Fragment(text[pos:]))
    if not fragments and text:
        fragments.append(Fragment(text))
    return fragments


def strip_tags(text: str) -> str:
    """Display text of *text* with all tag markup removed."""
    return "".join(f.text for f in parse_text(text))
