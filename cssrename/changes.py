import logging

import httpx

from .errors import ChangeListFetchError
from .models import ChangeEntry, SelectorIndex

logger = logging.getLogger(__name__)

RENAME_MARKERS = ("_", "-")


def parse_change_list(text: str) -> list[str]:
    return [line.strip() for line in text.split("\n") if line.strip()]


def fetch_change_list(url: str, client: httpx.Client | None = None) -> list[str]:
    """Fetch the newline-delimited change list from url.

    The request blocks without a deadline and is never retried. Transport
    failures and non-2xx responses raise ChangeListFetchError.
    """
    logger.info(f"Fetching changes from: {url}")

    owns_client = client is None
    if client is None:
        client = httpx.Client(timeout=None, follow_redirects=True)

    try:
        response = client.get(url)
        response.raise_for_status()
    except httpx.HTTPStatusError as e:
        raise ChangeListFetchError(
            url, f"HTTP {e.response.status_code}", status_code=e.response.status_code
        ) from e
    except httpx.HTTPError as e:
        raise ChangeListFetchError(url, str(e) or type(e).__name__) from e
    finally:
        if owns_client:
            client.close()

    entries = parse_change_list(response.text)
    logger.info(f"Found {len(entries)} change entries")
    return entries


def pair_changes(entries: list[str]) -> list[ChangeEntry]:
    """Pair consecutive entries as (old, new). A trailing unpaired entry is dropped."""
    return [
        ChangeEntry(old_class=entries[i], new_class=entries[i + 1])
        for i in range(0, len(entries) - 1, 2)
    ]


def is_relevant(change: ChangeEntry) -> bool:
    if change.old_class == change.new_class:
        return False
    return any(
        marker in name
        for name in (change.old_class, change.new_class)
        for marker in RENAME_MARKERS
    )


def filter_changes(changes: list[ChangeEntry]) -> list[ChangeEntry]:
    return [change for change in changes if is_relevant(change)]


def build_selector_index(changes: list[ChangeEntry]) -> SelectorIndex:
    index: SelectorIndex = {}
    for change in changes:
        index[change.old_selector] = change
    return index


def load_selector_index(url: str, client: httpx.Client | None = None) -> SelectorIndex:
    entries = fetch_change_list(url, client=client)

    pairs = pair_changes(entries)
    logger.info(f"Combined into {len(pairs)} change pairs")

    relevant = filter_changes(pairs)
    logger.info(f"Filtered to {len(relevant)} relevant changes")

    return build_selector_index(relevant)
