"""Page compositor - groups the ordered section list into pages."""

from typing import List, Sequence

from proposal_studio.models import Section

Page = List[Section]


def compose(sections: Sequence[Section]) -> List[Page]:
    """
    Group sections into pages.

    Cover, contact and why-choose-us sections always start a page and occupy
    it alone. Any other section joins the previous page when that page holds
    exactly one pairable section, otherwise it starts a new page. Order is
    preserved and nothing is dropped or duplicated.

    Args:
        sections: Sections in document order

    Returns:
        Pages in document order, each with one or two sections
    """
    pages: List[Page] = []

    for section in sections:
        if section.is_exclusive:
            pages.append([section])
            continue

        previous = pages[-1] if pages else None
        if previous is not None and len(previous) == 1 and not previous[0].is_exclusive:
            previous.append(section)
        else:
            pages.append([section])

    return pages
