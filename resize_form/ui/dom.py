from html import escape
from typing import List, Optional


class Anchor:
    """A rendered hyperlink: a navigable target plus its visible text."""

    def __init__(self, href: str, text: str):
        self.href = href
        self.text = text

    def render(self) -> str:
        return f'<a href="{escape(self.href)}">{escape(self.text)}</a>'


class ResultContainer:
    """
    The visible result area of the page.

    Content is replaced wholesale on each successful submission: callers
    clear it and then append the new link.
    """

    def __init__(self, element_id: str = "response-container"):
        self.element_id = element_id
        self.children: List[Anchor] = []

    def clear(self):
        self.children = []

    def append_child(self, child: Anchor):
        self.children.append(child)

    def render(self) -> str:
        inner = "".join(child.render() for child in self.children)
        return f'<div id="{self.element_id}">{inner}</div>'


class SubmitEvent:
    """A user-initiated form submission."""

    def __init__(self):
        self.default_prevented = False

    def prevent_default(self):
        self.default_prevented = True


class FormControls:
    """
    Input controls of the resize form.

    Values are read by the pipeline at the moment of submission.
    """

    def __init__(self, image: Optional[object] = None, width: str = "", height: str = ""):
        self.image = image
        self.width = width
        self.height = height
