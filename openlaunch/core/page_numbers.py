from __future__ import annotations

from typing import Literal

ELLIPSIS: Literal["ellipsis"] = "ellipsis"

PageToken = int | Literal["ellipsis"]


def generate_page_numbers(current_page: int, total_pages: int, max_visible: int = 7) -> list[PageToken]:
    """Compact page strip for a pagination control, e.g. ``1 … 4 5 6 7 8 … 20``.

    The first and last pages are always present once ``total_pages`` exceeds
    ``max_visible``. Hidden ranges collapse to ``"ellipsis"``.
    """
    if total_pages <= max_visible:
        return list(range(1, total_pages + 1))

    half = max_visible // 2
    start = max(2, current_page - half + 1)
    end = min(total_pages - 1, current_page + half - 1)
    if current_page <= half:
        end = max_visible - 2
    if current_page > total_pages - half:
        start = total_pages - max_visible + 3

    # Even widths open a window one page wider than the strip allows.
    if end - start + 1 > max_visible - 2:
        end = start + max_visible - 3

    # Inverted window, only reachable when max_visible < 5.
    if start > end:
        if total_pages <= 2:
            return list(range(1, total_pages + 1))
        return [1, ELLIPSIS, total_pages]

    pages: list[PageToken] = [1]
    if start > 2:
        pages.append(ELLIPSIS)
    pages.extend(range(start, end + 1))
    if end < total_pages - 1:
        pages.append(ELLIPSIS)
    pages.append(total_pages)
    return pages
