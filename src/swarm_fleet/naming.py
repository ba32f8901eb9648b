"""Swarm-qualified agent names and mention rewriting."""

from __future__ import annotations

import re

from swarm_fleet.catalog import ALL_AGENT_NAMES, PIPELINE_AGENTS, REVIEWER_AGENTS, SPECIALIST_PREFIX

SEPARATOR = "_"

_KNOWN_NAMES = frozenset(ALL_AGENT_NAMES)

# One pass, so a rewritten mention is never matched again. Fixed
# subordinates match by exact name; specialists match by prefix, covering
# any @sme_<domain> mention.
_MENTION = re.compile(
    r"(?<!\w)@("
    + "|".join(re.escape(n) + r"\b" for n in PIPELINE_AGENTS + REVIEWER_AGENTS)
    + "|"
    + re.escape(SPECIALIST_PREFIX)
    + r"\w+)"
)


def swarm_prefix(swarm_id: str, is_default: bool) -> str:
    """Return the name prefix for a swarm; empty for the default swarm."""
    if is_default:
        return ""
    return f"{swarm_id}{SEPARATOR}"


def qualify(swarm_id: str, is_default: bool, base_name: str) -> str:
    """Return the externally visible name of *base_name* in a swarm."""
    return swarm_prefix(swarm_id, is_default) + base_name


def base_of(name: str, swarm_id: str | None = None) -> str:
    """Recover a base name from a possibly qualified name.

    With *swarm_id* the exact ``<swarm_id>_`` prefix is stripped. Without
    it, catalog names are returned as-is and anything else loses the text
    up to the first separator. That fallback is a heuristic: it cannot
    tell ``a_b_coder`` (swarm ``a_b``) from ``a_b_coder`` (swarm ``a``).
    """
    if swarm_id is not None:
        prefix = f"{swarm_id}{SEPARATOR}"
        if name.startswith(prefix) and len(name) > len(prefix):
            return name[len(prefix):]
        return name
    if name in _KNOWN_NAMES:
        return name
    head, sep, tail = name.partition(SEPARATOR)
    if sep and head and tail:
        return tail
    return name


def is_qualified(name: str, swarm_id: str | None = None) -> bool:
    return base_of(name, swarm_id) != name


def rewrite_references(text: str, swarm_id: str, is_default: bool) -> str:
    """Point every subordinate-agent mention in *text* at this swarm's agents.

    Text for the default swarm is returned unchanged. This is plain
    substitution over prose; the surrounding text is not interpreted.
    """
    if is_default or not text:
        return text
    prefix = swarm_prefix(swarm_id, is_default)
    return _MENTION.sub(lambda m: f"@{prefix}{m.group(1)}", text)
