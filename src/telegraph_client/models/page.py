"""Page models and the content node tree."""

import json
from dataclasses import dataclass, field
from typing import Any

from telegraph_client.errors import EncodeError


@dataclass(frozen=True)
class NodeElement:
    """A DOM element in page content: a tag with attributes and child nodes."""

    tag: str
    attrs: dict[str, str] = field(default_factory=dict)
    children: tuple["Node", ...] = ()


# A content node is either a text leaf or an element.
Node = str | NodeElement


def text(value: str) -> str:
    """Build a text node."""
    return value


def tag(name: str, *children: Node, **attrs: str) -> NodeElement:
    """Build an element node, e.g. ``tag("a", "link", href="https://...")``."""
    return NodeElement(tag=name, attrs=dict(attrs), children=tuple(children))


def node_to_dict(node: Node) -> str | dict[str, Any]:
    """Convert a content node to its wire shape.

    Raises:
        EncodeError: If the node is neither a string nor a NodeElement,
            or an attribute value is not a string.
    """
    if isinstance(node, str):
        return node
    if not isinstance(node, NodeElement):
        msg = f"Unsupported content node type: {type(node).__name__}"
        raise EncodeError(msg)
    if not node.tag:
        msg = "Content element has an empty tag"
        raise EncodeError(msg)

    out: dict[str, Any] = {"tag": node.tag}
    if node.attrs:
        for key, value in node.attrs.items():
            if not isinstance(value, str):
                msg = f"Attribute {key!r} of <{node.tag}> must be a string, got {type(value).__name__}"
                raise EncodeError(msg)
        out["attrs"] = dict(node.attrs)
    if node.children:
        out["children"] = [node_to_dict(child) for child in node.children]
    return out


def node_from_dict(data: Any) -> Node:
    """Parse a wire content node into a Node."""
    if isinstance(data, str):
        return data
    if not isinstance(data, dict) or not isinstance(data.get("tag"), str):
        msg = f"Invalid content node: {data!r}"
        raise ValueError(msg)
    return NodeElement(
        tag=data["tag"],
        attrs=dict(data.get("attrs") or {}),
        children=tuple(node_from_dict(child) for child in data.get("children") or ()),
    )


def encode_content(content: list[Node] | tuple[Node, ...]) -> str:
    """Serialize a content tree to the compact JSON string sent to the API."""
    tree = [node_to_dict(node) for node in content]
    try:
        return json.dumps(tree, ensure_ascii=False, separators=(",", ":"))
    except (TypeError, ValueError) as e:
        raise EncodeError(f"Cannot serialize page content: {e}") from e


@dataclass(frozen=True)
class Page:
    """A Telegraph page.

    ``path`` is assigned by the server; drafts built on the client leave it empty.
    """

    title: str
    path: str = ""
    url: str = ""
    description: str = ""
    author_name: str = ""
    author_url: str = ""
    image_url: str = ""
    content: tuple[Node, ...] | None = None
    views: int = 0
    can_edit: bool = False

    @classmethod
    def draft(
        cls,
        title: str,
        content: list[Node] | tuple[Node, ...],
        *,
        author_name: str = "",
        author_url: str = "",
        path: str = "",
    ) -> "Page":
        """Build a page to pass to create_page or edit_page."""
        return cls(
            title=title,
            content=tuple(content),
            author_name=author_name,
            author_url=author_url,
            path=path,
        )

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Page":
        raw_content = data.get("content")
        content = None
        if raw_content is not None:
            if not isinstance(raw_content, list):
                msg = f"content must be a list of nodes, got {type(raw_content).__name__}"
                raise ValueError(msg)
            content = tuple(node_from_dict(node) for node in raw_content)
        return cls(
            path=data["path"],
            url=data["url"],
            title=data["title"],
            description=data.get("description", ""),
            author_name=data.get("author_name", ""),
            author_url=data.get("author_url", ""),
            image_url=data.get("image_url", ""),
            content=content,
            views=int(data.get("views", 0)),
            can_edit=bool(data.get("can_edit", False)),
        )


@dataclass(frozen=True)
class PageList:
    """Pages of an account, most recently created first."""

    total_count: int
    pages: tuple[Page, ...] = ()

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "PageList":
        pages = tuple(Page.from_dict(p) for p in data.get("pages", []))
        total_count = int(data["total_count"])
        if len(pages) > total_count:
            msg = f"got {len(pages)} pages but total_count is {total_count}"
            raise ValueError(msg)
        return cls(total_count=total_count, pages=pages)


@dataclass(frozen=True)
class PageViews:
    """Number of views for a page at the queried granularity."""

    views: int

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "PageViews":
        return cls(views=int(data["views"]))
