"""
element - dialect independent markup element tree

An Element holds a tag name, ordered attributes, inner text and ordered
children. It does not know how to write itself out; render() is forwarded
to the Reference (dialect profile) the element is attached to.

Setters return the element so calls can be chained:

    Element("input", {"type": "text"}).addFlag("required").render()
"""
from __future__ import annotations
from typing import Any, Callable, Iterable, List, Mapping, Optional, Union
import logging

from .errors import InvalidOperation
from .reference import DEFAULT_REFERENCE, Reference

logger = logging.getLogger(__name__)

Attributes = Union[Mapping[Any, Any], Iterable[Union[str, tuple]]]


def makeelement(
    tagName: str = "div",
    attributes: Optional[Attributes] = None,
    text: str = "",
    reference: Optional[Reference] = None,
) -> Element:
    """
    makeelement - create an Element. Without a reference the default
        profile (DEFAULT_REFERENCE) is used
    """
    return Element(tagName, attributes, text, reference)


class Element:
    """
    A markup element. Has a tag, optionally attributes, text and children
    """

    def __init__(
        self,
        tagName: str = "div",
        attributes: Optional[Attributes] = None,
        text: str = "",
        reference: Optional[Reference] = None,
    ):
        """
        tagName: type of this tag. An empty name keeps the default "div"
        attributes: a mapping of name -> value, or an iterable of
            (name, value) pairs and bare names (value-less attributes)
        text: inner text, escaped when rendered. Ignored for void tags
        reference: dialect profile used for validation and rendering. Not
            owned, may be shared by many elements
        """
        self._tagName = "div"
        self._text = ""
        self.attributes: dict[str, str] = {}
        self.children: List[Element] = []
        if reference is None:
            reference = Reference.of(DEFAULT_REFERENCE)
        self.reference: Reference = reference

        self.setTagName(tagName)
        if attributes:
            self.setAttributes(attributes)
        self.setText(text)

    def setReference(self, reference: Reference) -> Element:
        self.reference = reference
        return self

    def getReference(self) -> Reference:
        return self.reference

    def setTagName(self, name: str) -> Element:
        """
        setTagName - set the tag name. An empty name is ignored and the
            current name is kept
        """
        name = str(name)
        if name:
            self._tagName = name
        return self

    def getTagName(self) -> str:
        return self._tagName

    @property
    def tagName(self) -> str:
        return self._tagName

    @tagName.setter
    def tagName(self, name: str) -> None:
        self.setTagName(name)

    def setText(self, text: str) -> Element:
        self._text = str(text)
        return self

    def getText(self) -> str:
        return self._text

    @property
    def text(self) -> str:
        return self._text

    @text.setter
    def text(self, text: str) -> None:
        self.setText(text)

    # attributes

    def setAttributes(self, attributes: Attributes) -> Element:
        """
        setAttributes - replace all attributes, keeping the given order

        attributes: a mapping of name -> value, or an iterable where each
            item is either a (name, value) pair or a bare attribute name
        """
        self.clearAttributes()
        items: Iterable[Any]
        if isinstance(attributes, Mapping):
            items = attributes.items()
        else:
            items = attributes
        for item in items:
            if isinstance(item, str):
                self.addFlag(item)
            else:
                name, value = item
                self.addAttribute(name, value)
        return self

    def getAttributes(self) -> dict[str, str]:
        return dict(self.attributes)

    def addAttribute(self, name: str, value: str = "") -> Element:
        """
        addAttribute - set (create or overwrite) an attribute. An empty
            value makes it a value-less attribute (eg. disabled)
        """
        self.attributes[str(name)] = str(value)
        return self

    def addFlag(self, name: str) -> Element:
        """
        addFlag - add a value-less attribute (eg. required, disabled)
        """
        return self.addAttribute(name, "")

    def getAttribute(self, name: str) -> Optional[str]:
        """
        getAttribute - return the value of an attribute, None if not found
        """
        if self.hasAttribute(name):
            return self.attributes[str(name)]
        return None

    def hasAttribute(self, name: str) -> bool:
        name = str(name)
        return name != "" and name in self.attributes

    def removeAttribute(self, name: str) -> Element:
        """
        removeAttribute - remove an attribute from this Element if it exists
        """
        self.attributes.pop(str(name), None)
        return self

    def clearAttributes(self) -> Element:
        self.attributes = {}
        return self

    # children

    def _checkchild(self, child: Element) -> None:
        """
        _checkchild - raise InvalidOperation if child can not be added to
            this element
        """
        if not self.reference.hasClosingTag(self._tagName):
            logger.debug("rejected child <%s> of void <%s>", child.tagName, self._tagName)
            raise InvalidOperation(
                f"Children not permitted on void elements. Tag: {self._tagName}"
            )
        if child is self or child.contains(self):
            raise InvalidOperation(
                f"Adding <{child.tagName}> to <{self._tagName}> creates a cycle"
            )

    def contains(self, element: Element) -> bool:
        """
        contains - True if element is somewhere in the subtree below this
            element (depth first search)
        """
        for c in self.children:
            if c is element or c.contains(element):
                return True
        return False

    def setChildren(self, children: Iterable[Element]) -> Element:
        """
        setChildren - replace all children. Every child is checked before
            anything is changed, so on InvalidOperation the current children
            are kept
        """
        children = list(children)
        for c in children:
            self._checkchild(c)
        self.clearChildren()
        for c in children:
            self.addChild(c)
        return self

    def getChildren(self) -> List[Element]:
        return list(self.children)

    def addChild(self, child: Element) -> Element:
        """
        addChild - append child to the children of this element

        Raises InvalidOperation if this is a void element (per the current
        reference) or if child is this element or one of its ancestors.
        """
        self._checkchild(child)
        self.children.append(child)
        return self

    def firstChild(self) -> Optional[Element]:
        if self.children:
            return self.children[0]
        return None

    def lastChild(self) -> Optional[Element]:
        if self.children:
            return self.children[-1]
        return None

    def countChildren(self) -> int:
        return len(self.children)

    def hasChildren(self) -> bool:
        return len(self.children) > 0

    def clearChildren(self) -> Element:
        self.children = []
        return self

    def eachChild(self, fn: Callable[[Element], Any]) -> None:
        """
        eachChild - call fn on every child, in order
        """
        for c in list(self.children):
            fn(c)

    def mapChildren(self, fn: Callable[[Element], Any]) -> List[Any]:
        """
        mapChildren - return a new list with fn applied to every child.
            Children are not copied: changes fn makes to a child are made
            to the child in this tree
        """
        return [fn(c) for c in self.children]

    def filterChildren(self, fn: Callable[[Element], Any]) -> Element:
        """
        filterChildren - keep only the children for which fn returns true
        """
        self.children = [c for c in self.children if fn(c)]
        return self

    def render(self) -> str:
        """
        render - render this element and its children to a string of markup
        """
        return self.reference.render(self)

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"<Element {self._tagName} children={len(self.children)}>"
