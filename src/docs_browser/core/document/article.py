"""Post-process rendered documents for in-site navigation."""

from bs4 import BeautifulSoup

from docs_browser.models.node import NavNode

# Author-written sequential links are replaced by computed ones.
_SEQUENTIAL_MARKERS = ("Previous:", "Next:")


def rewrite_internal_links(soup: BeautifulSoup, *, link_prefix: str) -> list[str]:
    """Point root-relative links at `link_prefix + path`, returning the targets."""
    targets: list[str] = []
    for anchor in soup.select('a[href^="/"]'):
        href = str(anchor.get("href", ""))
        if href.startswith("//"):
            # Protocol-relative URL, not an internal document.
            continue
        path = href.split("#", 1)[0].split("?", 1)[0].lstrip("/")
        if not path:
            continue
        anchor["href"] = f"{link_prefix}{path}"
        anchor["data-doc-path"] = path
        targets.append(path)
    return targets


def strip_sequential_paragraphs(soup: BeautifulSoup) -> int:
    removed = 0
    for paragraph in soup.find_all("p"):
        text = paragraph.get_text()
        if any(marker in text for marker in _SEQUENTIAL_MARKERS):
            paragraph.decompose()
            removed += 1
    return removed


def append_sequential_links(
    soup: BeautifulSoup,
    *,
    previous: NavNode | None,
    following: NavNode | None,
    link_prefix: str,
) -> None:
    nav = soup.new_tag("nav", attrs={"class": "doc-pager"})
    left = soup.new_tag("div", attrs={"class": "doc-pager-prev"})
    right = soup.new_tag("div", attrs={"class": "doc-pager-next"})

    if previous is not None:
        link = soup.new_tag(
            "a", attrs={"href": f"{link_prefix}{previous.path}", "data-doc-path": previous.path}
        )
        link.string = f"← Previous: {previous.name}"
        left.append(link)
    if following is not None:
        link = soup.new_tag(
            "a", attrs={"href": f"{link_prefix}{following.path}", "data-doc-path": following.path}
        )
        link.string = f"Next: {following.name} →"
        right.append(link)

    nav.append(left)
    nav.append(right)
    soup.append(nav)


def prepare_article(
    content: str,
    *,
    previous: NavNode | None = None,
    following: NavNode | None = None,
    link_prefix: str = "#",
    rewrite_links: bool = True,
) -> str:
    """Rewrite internal links, drop author prev/next paragraphs, append computed ones.

    Args:
        content: Rendered document HTML.
        previous: Preceding document in the category, if any.
        following: Next document in the category, if any.
        link_prefix: "#" for fragment routing, "/" for server-rendered pages.
        rewrite_links: Whether to rewrite root-relative links.
    """
    soup = BeautifulSoup(content, "html.parser")
    if rewrite_links:
        rewrite_internal_links(soup, link_prefix=link_prefix)
    strip_sequential_paragraphs(soup)
    if previous is not None or following is not None:
        append_sequential_links(
            soup, previous=previous, following=following, link_prefix=link_prefix
        )
    return str(soup)
