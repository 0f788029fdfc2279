"""Invert the forward link graph (UNO: single function)."""

from collections.abc import Callable, Iterable


def build_reverse_index(
    graph: dict[str, dict[str, int]],
    targets: Iterable[str],
    on_progress: Callable[[int, int], None] | None = None,
) -> dict[str, dict[str, int]]:
    """Map each target to the notes linking to it, with summed counts.

    Every target gets a key, even when nothing links to it.

    Args:
        graph: note -> {linked file -> count}
        targets: Files of interest; links to anything else are dropped
        on_progress: Called with (processed, total) after each graph entry
    """
    index: dict[str, dict[str, int]] = {target: {} for target in targets}
    total = len(graph)
    for count, (doc_id, links) in enumerate(graph.items(), start=1):
        for target_id, refs in links.items():
            if target_id in index:
                bucket = index[target_id]
                bucket[doc_id] = bucket.get(doc_id, 0) + refs
        if on_progress is not None:
            on_progress(count, total)
    return index
