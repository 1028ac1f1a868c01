#!/usr/bin/env python3
"""
Generate the discrete-log / exp table literals in rns_numbers/tables.py.

Primes and generators come from rns_numbers.constants; sympy is used to
confirm every catalogue entry is a prime with the given primitive root
before anything is emitted.

Usage:
    python scripts/generate_tables.py                  # print to stdout
    python scripts/generate_tables.py --output tables_data.py
"""

import argparse
import sys
import textwrap
from pathlib import Path

import sympy
from sympy.ntheory import is_primitive_root

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from rns_numbers.constants import PRIME_REGISTRY

WIDTH = 79


def build_tables(p: int, g: int):
    """Return (dlog, exp) for prime ``p`` and generator ``g``."""
    exp = [1] * p
    for e in range(1, p):
        exp[e] = exp[e - 1] * g % p
    dlog = [0] * p
    for e in range(p - 1):
        dlog[exp[e]] = e
    return dlog, exp


def format_entry(p: int, values) -> str:
    body = ", ".join(str(v) for v in values)
    line = f"    {p}: ({body}),"
    if len(line) <= WIDTH:
        return line
    wrapped = textwrap.fill(body + ",", width=WIDTH,
                            initial_indent=" " * 8, subsequent_indent=" " * 8)
    return f"    {p}: (\n{wrapped}\n    ),"


def generate_source(registry) -> str:
    entries = [(2, 1)] + [(e["p"], e["g"]) for e in registry]

    dlog_lines, exp_lines = [], []
    for p, g in entries:
        dlog, exp = build_tables(p, g)
        dlog_lines.append(format_entry(p, dlog))
        exp_lines.append(format_entry(p, exp))

    return "\n".join(
        ["# first element is meaningless since dlog(0) is undefined",
         "_DLOG_DATA: Dict[int, Tuple[int, ...]] = {"]
        + dlog_lines
        + ["}", "", "_EXP_DATA: Dict[int, Tuple[int, ...]] = {"]
        + exp_lines
        + ["}", ""]
    )


def check_registry(registry) -> list:
    """Entries whose prime or generator sympy disagrees with."""
    bad = []
    for e in registry:
        p, g = e["p"], e["g"]
        if not sympy.isprime(p) or not is_primitive_root(g, p):
            bad.append(e)
    return bad


def main():
    parser = argparse.ArgumentParser(description='Generate dlog/exp tables')
    parser.add_argument('--output', type=str, default=None,
                        help='Write to this file instead of stdout')
    args = parser.parse_args()

    bad = check_registry(PRIME_REGISTRY)
    if bad:
        for e in bad:
            print(f"  bad registry entry: p={e['p']} g={e['g']}", file=sys.stderr)
        return 1

    source = generate_source(PRIME_REGISTRY)
    if args.output is None:
        sys.stdout.write(source)
    else:
        path = Path(args.output)
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, 'w') as f:
            f.write(source)
        print(f"Generated tables for {len(PRIME_REGISTRY) + 1} moduli -> {path}")
    return 0


if __name__ == '__main__':
    sys.exit(main())
