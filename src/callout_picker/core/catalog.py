"""Callout catalog — single source of truth for insertable callout types.

// [LAW:one-source-of-truth] All known callout types live in CATALOG.
// [LAW:locality-or-seam] Adding a callout = one entry here. Settings toggles,
//   configuration defaults and picker suggestions all derive from it.

This module is pure data with no dependencies on other project modules.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class CalloutType:
    """One kind of insertable callout."""

    identifier: str          # "warning" — display label and configuration key
    icon: str | None = None  # icon name, cosmetic only


# [LAW:one-source-of-truth] Ordered catalog; picker order follows this list.
CATALOG: tuple[CalloutType, ...] = (
    CalloutType("note", "pencil"),
    CalloutType("abstract", "clipboard-list"),
    CalloutType("summary", "clipboard-list"),
    CalloutType("tldr", "clipboard-list"),
    CalloutType("info", "info"),
    CalloutType("todo", "check-circle-2"),
    CalloutType("tip", "flame"),
    CalloutType("hint", "flame"),
    CalloutType("important", "flame"),
    CalloutType("success", "check"),
    CalloutType("check", "check"),
    CalloutType("done", "check"),
    CalloutType("question", "help-circle"),
    CalloutType("help", "help-circle"),
    CalloutType("faq", "help-circle"),
    CalloutType("warning", "alert-triangle"),
    CalloutType("caution", "alert-triangle"),
    CalloutType("attention", "alert-triangle"),
    CalloutType("failure", "x"),
    CalloutType("fail", "x"),
    CalloutType("missing", "x"),
    CalloutType("danger", "zap"),
    CalloutType("error", "zap"),
    CalloutType("bug", "bug"),
    CalloutType("example", "list"),
    CalloutType("quote", "quote"),
    CalloutType("cite", "quote"),
)

# Derived — kept in sync automatically
CATALOG_IDS: tuple[str, ...] = tuple(c.identifier for c in CATALOG)


def check_unique(catalog) -> None:
    """Raise ValueError if any identifier appears more than once."""
    seen: set[str] = set()
    dupes: list[str] = []
    for callout in catalog:
        if callout.identifier in seen:
            dupes.append(callout.identifier)
        seen.add(callout.identifier)
    if dupes:
        raise ValueError("duplicate callout identifiers: {}".format(", ".join(dupes)))


def render_callout(callout: CalloutType, body: str = "") -> str:
    """Build the markup for a callout block.

    Each body line is quoted with "> ". An empty body still yields one "> "
    line so the cursor lands inside the block after insertion.
    """
    lines = body.splitlines() or [""]
    header = "> [!{}]".format(callout.identifier)
    return "\n".join([header] + ["> " + line for line in lines])
