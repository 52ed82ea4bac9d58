"""
reference - dialect profiles that decide how an element tree is written out

A Reference holds a table of tag rules (does the tag need a closing tag?)
and two flags:
    valueOnOptionals: value-less attributes are written as name="name"
        instead of a lone name
    slashOnUnclosables: void elements end with "/>" instead of ">"

The Reference only looks at the public shape of an element (tag name,
attributes, text, children), so any object providing getTagName,
getAttributes, getText and getChildren can be rendered.
"""
from __future__ import annotations
from typing import Any, Optional, List, TYPE_CHECKING
import html
import logging
import os

from .errors import NotFound

if TYPE_CHECKING:
    from .element import Element

logger = logging.getLogger(__name__)

# profile used by elements created without a reference
DEFAULT_REFERENCE = os.environ.get("HTMLDIALECT_REFERENCE", "html5")

# in html5 these elements can not have a closing tags (or empty tag)
VOID_ELEMENTS = {
    "area",
    "base",
    "br",
    "col",
    "embed",
    "hr",
    "img",
    "input",
    "link",
    "meta",
    "param",
    "source",
    "track",
    "wbr",
}

# elements that always get a closing tag, even when empty
CONTAINER_ELEMENTS = {
    "a",
    "article",
    "aside",
    "body",
    "button",
    "div",
    "footer",
    "form",
    "h1",
    "h2",
    "h3",
    "h4",
    "h5",
    "h6",
    "head",
    "header",
    "html",
    "label",
    "li",
    "main",
    "nav",
    "ol",
    "option",
    "p",
    "pre",
    "script",
    "section",
    "select",
    "span",
    "style",
    "table",
    "tbody",
    "td",
    "textarea",
    "th",
    "thead",
    "title",
    "tr",
    "ul",
}

# profile name (uppercase) -> Reference class
_profiles: dict[str, type] = {}


def escape(text: str) -> str:
    """
    escape - replace the html reserved characters (& < > " ') in text with
        entities
    """
    return html.escape(str(text), quote=True)


def unescape(text: str) -> str:
    """
    unescape - convert all entities in text back to characters. Inverse of
        escape
    """
    return html.unescape(str(text))


class Reference:
    """
    A dialect profile. Maps tag names to rules and renders elements
    according to them.
    """

    valueOnOptionals = False
    slashOnUnclosables = False

    def __init__(
        self,
        tags: Optional[dict[str, dict[str, Any]]] = None,
        valueOnOptionals: Optional[bool] = None,
        slashOnUnclosables: Optional[bool] = None,
    ):
        """
        tags: tag rules to merge over the default rules of this profile.
            eg. {"input": {"hasClosingTag": False}}
        valueOnOptionals: override the class default when not None
        slashOnUnclosables: override the class default when not None
        """
        self.tags: dict[str, dict[str, Any]] = {}
        merged = self.defaultTags()
        if tags:
            merged.update(tags)
        self.setTags(merged)

        if valueOnOptionals is not None:
            self.valueOnOptionals = valueOnOptionals
        if slashOnUnclosables is not None:
            self.slashOnUnclosables = slashOnUnclosables

    def defaultTags(self) -> dict[str, dict[str, Any]]:
        """
        defaultTags - the tag rules this profile starts with
        """
        return {}

    @classmethod
    def register(cls, profileName: str, profile: type) -> None:
        """
        register - make a Reference subclass resolvable by name through
            Reference.of
        """
        _profiles[profileName.strip().upper()] = profile

    @classmethod
    def profiles(cls) -> List[str]:
        return sorted(_profiles)

    @classmethod
    def of(
        cls, profileName: str, overrides: Optional[dict[str, dict[str, Any]]] = None
    ) -> Reference:
        """
        of - create the profile registered under profileName (case
            insensitive) with overrides merged over its default tag rules.

        Raises NotFound if no profile has that name.
        """
        key = str(profileName).strip().upper()
        profile = _profiles.get(key)
        if profile is None:
            logger.debug("no dialect profile named %r", profileName)
            raise NotFound(f"Unknown dialect profile: {profileName}")
        if overrides:
            logger.debug("profile %s: overriding tags %s", key, sorted(overrides))
        return profile(overrides)

    def setTags(self, tags: dict[str, dict[str, Any]]) -> Reference:
        """
        setTags - replace all tag rules
        """
        self.clearTags()
        for name, rule in tags.items():
            self.addTag(name, rule)
        return self

    def getTags(self) -> dict[str, dict[str, Any]]:
        return dict(self.tags)

    def addTag(self, name: str, rule: dict[str, Any]) -> Reference:
        """
        addTag - add (or overwrite) the rule for a tag. Ignored when the name
            or the rule is empty
        """
        name = str(name)
        if name and rule:
            self.tags[name] = rule
        return self

    def getTag(self, name: str) -> Optional[dict[str, Any]]:
        """
        getTag - return the rule for a tag, or None if there is no rule
        """
        if self.hasTag(name):
            return self.tags[str(name)]
        return None

    def hasTag(self, name: str) -> bool:
        name = str(name)
        return name != "" and name in self.tags

    def removeTag(self, name: str) -> Optional[dict[str, Any]]:
        """
        removeTag - remove the rule for a tag and return it (None if there
            was no rule)
        """
        if self.hasTag(name):
            return self.tags.pop(str(name))
        return None

    def clearTags(self) -> Reference:
        self.tags = {}
        return self

    def hasClosingTag(self, name: str) -> bool:
        """
        hasClosingTag - True if the tag must be written with a closing tag.
            Tags without a rule (or without a hasClosingTag entry) need one.
        """
        rule = self.getTag(name)
        if rule is not None and "hasClosingTag" in rule:
            return bool(rule["hasClosingTag"])
        return True

    def compileAttributes(self, element: Element) -> str:
        """
        compileAttributes - the attributes of element as a single string,
            in insertion order, separated by spaces
        """
        attrs: list[str] = []
        for name, value in element.getAttributes().items():
            if value == "":
                attrs.append(self._bare(name))
            elif name.isdigit():
                # flag supplied by position, its name is the value
                attrs.append(self._bare(value))
            else:
                attrs.append(f'{escape(name)}="{escape(value)}"')
        return " ".join(attrs)

    def _bare(self, name: str) -> str:
        if self.valueOnOptionals:
            return f'{escape(name)}="{escape(name)}"'
        return escape(name)

    def renderlist(self, element: Element) -> list[str]:
        """
        renderlist - render element and recursively, all child elements

        returns a list of strings that can be joined to create the markup
        """
        tagName = element.getTagName()
        dest: list[str] = ["<" + tagName]

        if element.getAttributes():
            dest.append(" " + self.compileAttributes(element))

        if self.hasClosingTag(tagName):
            dest.append(">")
            dest.append(escape(element.getText()))
            for c in element.getChildren():
                dest.append(c.render())
            dest.append(f"</{tagName}>")
        elif self.slashOnUnclosables:
            dest.append("/>")
        else:
            dest.append(">")

        return dest

    def render(self, element: Element) -> str:
        """
        render - render element (and its children) to a string of markup
        """
        return "".join(self.renderlist(element))

    def __repr__(self) -> str:
        return f"<{type(self).__name__} tags={len(self.tags)}>"


def _html5tags() -> dict[str, dict[str, Any]]:
    tags: dict[str, dict[str, Any]] = {}
    for name in CONTAINER_ELEMENTS:
        tags[name] = {"tagName": name, "hasClosingTag": True}
    for name in VOID_ELEMENTS:
        tags[name] = {"tagName": name, "hasClosingTag": False}
    return tags


class HTML5Reference(Reference):
    """
    HTML5 - void elements end with ">", value-less attributes are a lone name
    """

    def defaultTags(self) -> dict[str, dict[str, Any]]:
        return _html5tags()


class XHTMLReference(Reference):
    """
    XHTML - void elements end with "/>", value-less attributes are written
    as name="name"
    """

    valueOnOptionals = True
    slashOnUnclosables = True

    def defaultTags(self) -> dict[str, dict[str, Any]]:
        return _html5tags()


Reference.register("html5", HTML5Reference)
Reference.register("xhtml", XHTMLReference)
