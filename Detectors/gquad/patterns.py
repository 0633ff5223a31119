"""
G-Quadruplex Grammar Construction
Dr. Venkata Rajesh Yella | 2025.1 | MIT License

Builds the five G4 motif families from a small set of regex building blocks.
Each family is a disjunction of positional variants; the variants are kept as
separate tuples so they can be inspected and tested one by one, and joined into
a single alternation when the family is compiled.

Building blocks (S = strong base class, G or C intermixed):
    run         S{3,}
    short loop  .{1,7}?                 lazy
    long loop   .{1,15}?                lazy
    bulge-run   SS[^S]SS                two positional spellings
    short-run   SS
    split-run   run long-loop run
"""

import re
from types import MappingProxyType
from typing import Dict, List, Tuple

from Detectors.base.base_detector import MotifGrammar, Variant
from Utilities.config.analysis import GRAMMAR_CONFIG
from Utilities.core.records import MotifType

STRONG = f"[{GRAMMAR_CONFIG['strong_bases']}]"
WEAK = f"[^{GRAMMAR_CONFIG['strong_bases']}]"

RUN = f"{STRONG}{{{GRAMMAR_CONFIG['min_run']},}}"
SHORT_LOOP = ".{{{0},{1}}}?".format(*GRAMMAR_CONFIG['short_loop'])
LONG_LOOP = ".{{{0},{1}}}?".format(*GRAMMAR_CONFIG['long_loop'])
# Interruption after the 2nd strong base, or before the 4th.
BULGE_RUN = f"{STRONG}{{2}}{WEAK}{STRONG}{{2}}?|{STRONG}{{2}}?{WEAK}{STRONG}{{2}}"
SHORT_RUN = f"{STRONG}{{{GRAMMAR_CONFIG['short_run']}}}"
SPLIT_RUN = f"{RUN}{LONG_LOOP}{RUN}"

# Four runs make a quadruplex.
TETRAD_RUNS = 4


def _positional_variant(core: str, position: int, slots: int) -> str:
    """
    Place *core* at *position* (1-based) among *slots* loop-joined positions.

    Positions before the core are exact ``run loop`` repeats; positions after
    it are ``loop run`` repeats with an open upper bound. The last position
    carries no trailing repeat.
    """
    parts = []
    leading = position - 1
    trailing = slots - position
    if leading:
        parts.append(f"(?:{RUN}{SHORT_LOOP}){{{leading}}}")
    parts.append(f"(?:{core})")
    if trailing:
        parts.append(f"(?:{SHORT_LOOP}{RUN}){{{trailing},}}")
    return "".join(parts)


def four_repeat_variants() -> List[Variant]:
    return [
        (f"{RUN}(?:{SHORT_LOOP}{RUN}){{{TETRAD_RUNS - 1},}}", "G4_4G", "Four or more runs"),
    ]


def bulge_variants() -> List[Variant]:
    return [
        (_positional_variant(BULGE_RUN, pos, TETRAD_RUNS), f"G4_BULGE_{pos}", f"Bulge at run {pos}")
        for pos in range(1, TETRAD_RUNS + 1)
    ]


def variant_loop_variants() -> List[Variant]:
    return [
        (_positional_variant(SHORT_RUN, pos, TETRAD_RUNS), f"G4_GVBQ_{pos}", f"Two-base run at {pos}")
        for pos in range(1, TETRAD_RUNS + 1)
    ]


def long_loop_variants() -> List[Variant]:
    # A split-run fills two run positions, so only three slots remain.
    slots = TETRAD_RUNS - 1
    return [
        (_positional_variant(SPLIT_RUN, pos, slots), f"G4_4GL15_{pos}", f"Split run at {pos}")
        for pos in range(1, slots + 1)
    ]


def partial_variants() -> List[Variant]:
    return [
        (f"{RUN}(?:{SHORT_LOOP}{RUN}){{1,2}}", "G4_PHQS", "Two or three runs"),
    ]


# Family order is the order results are concatenated in.
FAMILY_BUILDERS = (
    (MotifType.FOUR_REPEAT, four_repeat_variants),
    (MotifType.BULGE, bulge_variants),
    (MotifType.VARIANT_LOOP, variant_loop_variants),
    (MotifType.LONG_LOOP, long_loop_variants),
    (MotifType.PARTIAL, partial_variants),
)


def get_patterns() -> Dict[MotifType, List[Variant]]:
    """Return the uncompiled variant tuples for every family."""
    return {motif_type: builder() for motif_type, builder in FAMILY_BUILDERS}


def compile_grammars() -> Tuple[MotifGrammar, ...]:
    """
    Compile every family into one case-insensitive alternation.

    Variant order inside the alternation is significant: at a given start
    position the first variant that can match wins.
    """
    grammars = []
    for motif_type, variants in get_patterns().items():
        alternation = "|".join(regex for regex, _, _ in variants)
        compiled = re.compile(alternation, re.IGNORECASE | re.ASCII)
        grammars.append(MotifGrammar(motif_type, compiled, tuple(variants)))
    return tuple(grammars)


# Process-wide grammar table, built once at import and never mutated.
G4_GRAMMARS: Tuple[MotifGrammar, ...] = compile_grammars()
GRAMMARS_BY_TYPE = MappingProxyType({g.motif_type: g for g in G4_GRAMMARS})
