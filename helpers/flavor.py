"""Deterministic flavor text for effect pages."""

from helpers.formulas import string_hash

PREFIXES = [
    "ERR_MEM_LEAK",
    "TL_DIVERGENCE",
    "QUANTUM_NOISE",
    "SYNAPSE_FAIL",
    "REALITY_404",
    "CRITICAL_DESYNC",
    "BUFFER_OVERFLOW",
    "ECHO_MISMATCH",
    "PATTERN_VOID",
    "CACHE_CORRUPTION",
]

ADJECTIVES = [
    "Phantom",
    "Recursive",
    "Collective",
    "Unstable",
    "Digital",
    "Analog",
    "Fractal",
    "Distorted",
    "Hidden",
    "Resonating",
]

NOUNS = [
    "Memory Sector",
    "Cultural Layer",
    "Neural Node",
    "Visual Pattern",
    "Temporal Contour",
    "Reality Anchor",
    "Logic Block",
    "Data Stream",
    "World Syntax",
    "Image Archive",
]

SUFFIXES = [
    "Rewrite required...",
    "Synchronization impossible.",
    "Interference detected.",
    "Confidence index: 12%.",
    "Loading alternate version...",
    "Connection lost.",
    "Attempting recovery...",
    "Access restricted.",
    "Critical error.",
]


def pick(table: list[str], seed: int, offset: int = 0) -> str:
    """Stable table entry for a seed."""
    return table[(seed + offset) % len(table)]


def system_log(title: str) -> str:
    """Glitchy status line derived from an effect title."""
    seed = abs(string_hash(title))
    return (
        f"{pick(PREFIXES, seed)} :: {pick(ADJECTIVES, seed, 1)} {pick(NOUNS, seed, 2)}"
        f" :: {pick(SUFFIXES, seed, 3)}"
    )
