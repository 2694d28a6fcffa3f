"""Tree navigation: breadcrumbs, categories, siblings."""

from collections.abc import Iterator, Sequence

from docs_browser.models.node import Breadcrumb, NavNode


def get_breadcrumbs(path: str) -> tuple[Breadcrumb, ...]:
    """Split a document path into cumulative breadcrumb segments.

    Every segment but the last links to its cumulative sub-path.
    """
    parts = [p for p in path.strip("/").split("/") if p]
    crumbs: list[Breadcrumb] = []
    for i, part in enumerate(parts):
        crumbs.append(
            Breadcrumb(label=part, path="/".join(parts[: i + 1]), is_last=i == len(parts) - 1)
        )
    return tuple(crumbs)


def iter_files(nodes: Sequence[NavNode]) -> Iterator[NavNode]:
    """Yield File nodes depth-first in tree order."""
    for node in nodes:
        if node.is_file:
            yield node
        else:
            yield from iter_files(node.children)


def find_node(nodes: Sequence[NavNode], path: str) -> NavNode | None:
    """Find the node (file or directory) with the given path."""
    path = path.strip("/")
    for node in nodes:
        if node.path == path:
            return node
        if node.is_directory and path.startswith(node.path + "/"):
            return find_node(node.children, path)
    return None


def get_category(nodes: Sequence[NavNode], name: str) -> NavNode | None:
    """Return the top-level category (directory) with this name."""
    return next((n for n in nodes if n.is_directory and n.name == name), None)


def first_document(node: NavNode) -> NavNode | None:
    """First File descendant of a category, or None when it has no documents."""
    if node.is_file:
        return node
    return next(iter_files(node.children), None)


def get_siblings(
    nodes: Sequence[NavNode], path: str
) -> tuple[NavNode | None, NavNode | None]:
    """Previous and next documents within the same top-level category.

    The category is the first path segment; siblings are that category's
    direct File children in tree order. Returns (None, None) when the
    document is not one of them.
    """
    category_name = path.split("/", 1)[0]
    category = get_category(nodes, category_name)
    if category is None:
        return None, None

    files = [c for c in category.children if c.is_file]
    index = next((i for i, f in enumerate(files) if f.path == path), -1)
    if index == -1:
        return None, None

    previous = files[index - 1] if index > 0 else None
    following = files[index + 1] if index < len(files) - 1 else None
    return previous, following
