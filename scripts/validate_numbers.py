#!/usr/bin/env python3
"""
Validation script for rns-numbers.

Runs a sequence of checks:
1. Discrete-log / exponentiation tables (every supported modulus)
2. Modular inverse and powm
3. CRT encode / reconstruct roundtrip
4. Factorization and modulus search
5. Mixed-radix and base-q codecs
6. Base-q carry adder

Every check is printed and, with --output-dir, appended to checks.jsonl
next to a manifest.json describing the run.

Usage:
    python scripts/validate_numbers.py
    python scripts/validate_numbers.py --output-dir results/validate --seed 7
"""

import argparse
import os
import random
import sys
import time
import traceback
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from rns_numbers import (
    PRIMES, PRIMES_SKIP_2, SUPPORTED_MODULI, U128_MAX,
    CheckLogger, create_manifest,
    verify_table, primitive_root, inv, powm, factor,
    crt, crt_inv, crt_inv_bigint, modulus_with_width, modulus_with_width_skip2,
    as_base_q, from_base_q, padded_base_q_128, digits_per_u128,
    as_mixed_radix_bigint, from_mixed_radix_bigint,
    base_q_add, num_carry_digits_to_add_n_digits,
    WidthOverflowError, NonFactorableError,
)

LOGGER = None
CURRENT_SECTION = ""


def section(name: str):
    global CURRENT_SECTION
    CURRENT_SECTION = name
    print(f"\n{'='*60}")
    print(f"  {name}")
    print(f"{'='*60}")


def check(name: str, passed: bool, detail: str = ""):
    status = "PASS" if passed else "FAIL"
    mark = "✓" if passed else "✗"
    print(f"  [{status}] {mark} {name}" + (f" -- {detail}" if detail else ""))
    if LOGGER is not None:
        LOGGER.log_check(CURRENT_SECTION, name, passed, detail)
    return passed


def run_checks(rng: random.Random, n_samples: int):
    results = []

    # ---------------------------------------------------------------
    # 1. Tables
    # ---------------------------------------------------------------
    section("1. Discrete-log / exp tables")

    try:
        bad = [p for p in SUPPORTED_MODULI if not verify_table(p)]
        results.append(check(f"verify_table for {len(SUPPORTED_MODULI)} moduli",
                             not bad, f"bad: {bad}" if bad else ""))
        bad = [p for p in PRIMES_SKIP_2
               if len({powm(primitive_root(p), e, p) for e in range(p - 1)}) != p - 1]
        results.append(check("generators have full order", not bad,
                             f"bad: {bad}" if bad else ""))
    except Exception as e:
        results.append(check("tables", False, str(e)))
        traceback.print_exc()

    # ---------------------------------------------------------------
    # 2. Inverse / powm
    # ---------------------------------------------------------------
    section("2. Modular inverse and powm")

    try:
        ok = all(a * inv(a, p) % p == 1 for p in PRIMES for a in range(1, p))
        results.append(check("inv over every table prime", ok))
        ok = True
        for _ in range(n_samples):
            m = rng.randint(1, 1 << 64)
            b, e = rng.randint(0, 1 << 64), rng.randint(0, 1 << 32)
            if powm(b, e, m) != pow(b, e, m):
                ok = False
                print(f"    FAIL: powm({b}, {e}, {m})")
                break
        results.append(check(f"powm vs pow ({n_samples} samples)", ok))
    except Exception as e:
        results.append(check("inverse / powm", False, str(e)))
        traceback.print_exc()

    # ---------------------------------------------------------------
    # 3. CRT roundtrip
    # ---------------------------------------------------------------
    section("3. CRT Reconstruction Roundtrip")

    try:
        ps = list(PRIMES[:25])
        M = modulus_with_width(120)
        ok = True
        for _ in range(n_samples):
            x = rng.randrange(M)
            if crt_inv(ps, crt(ps, x)) != x:
                ok = False
                print(f"    FAIL: x={x}")
                break
        results.append(check(f"CRT roundtrip over {len(ps)} primes", ok,
                             f"M has {M.bit_length()} bits"))

        ps = list(PRIMES)
        x = rng.randrange(1 << 140)
        y = crt_inv_bigint(ps, [x % p for p in ps])
        results.append(check("big-integer CRT past 128 bits", y == x))
    except Exception as e:
        results.append(check("CRT roundtrip", False, str(e)))
        traceback.print_exc()

    # ---------------------------------------------------------------
    # 4. Factor / modulus search
    # ---------------------------------------------------------------
    section("4. Factorization and modulus search")

    try:
        ok = True
        for _ in range(n_samples):
            fs = sorted(rng.sample(PRIMES, rng.randint(1, 12)))
            m = 1
            for p in fs:
                m *= p
            if factor(m) != fs:
                ok = False
                print(f"    FAIL: factor({m})")
                break
        results.append(check("factor on square-free products", ok))

        try:
            factor(4)
            results.append(check("factor(4) rejected", False))
        except NonFactorableError:
            results.append(check("factor(4) rejected", True))

        m = modulus_with_width(127)
        results.append(check("modulus_with_width(127)",
                             m.bit_length() > 127 and m <= U128_MAX,
                             f"{m.bit_length()} bits"))
        m = modulus_with_width_skip2(64)
        results.append(check("modulus_with_width_skip2(64)", m % 2 == 1,
                             f"{m.bit_length()} bits"))
        try:
            modulus_with_width(128)
            results.append(check("modulus_with_width(128) overflows", False))
        except WidthOverflowError:
            results.append(check("modulus_with_width(128) overflows", True))
    except Exception as e:
        results.append(check("factor", False, str(e)))
        traceback.print_exc()

    # ---------------------------------------------------------------
    # 5. Radix codecs
    # ---------------------------------------------------------------
    section("5. Mixed-radix and base-q codecs")

    try:
        ok = True
        for q in range(2, 113):
            n = digits_per_u128(q)
            x = rng.randrange(min(q ** n, U128_MAX + 1))
            if from_base_q(as_base_q(x, q), q) != x:
                ok = False
            ds = padded_base_q_128(x, q)
            if len(ds) != n or from_base_q(ds, q) != x:
                ok = False
        results.append(check("base-q roundtrip for q in [2, 112]", ok))

        ms = [rng.randint(2, (1 << 16) - 1) for _ in range(20)]
        x = rng.randrange(1 << 200)
        ok = from_mixed_radix_bigint(as_mixed_radix_bigint(x, ms), ms) == x
        results.append(check("big-integer mixed radix", ok))
    except Exception as e:
        results.append(check("radix codecs", False, str(e)))
        traceback.print_exc()

    # ---------------------------------------------------------------
    # 6. Adder
    # ---------------------------------------------------------------
    section("6. Base-q carry adder")

    try:
        ok = True
        for _ in range(n_samples):
            q = rng.randint(2, 112)
            n = rng.randint(1, 12)
            x, y = rng.randrange(q ** n), rng.randrange(q ** n)
            xs = [x // q ** i % q for i in range(n)]
            ys = [y // q ** i % q for i in range(n)]
            zs = base_q_add(xs, ys, q)
            z = sum(d * q ** i for i, d in enumerate(zs))
            if z != (x + y) % q ** n:
                ok = False
                print(f"    FAIL: q={q} xs={xs} ys={ys}")
                break
        results.append(check("base_q_add matches integer addition", ok))

        ok = all(
            q ** num_carry_digits_to_add_n_digits(q, n) > n * (q - 1)
            for q in range(2, 40) for n in range(1, 200)
        )
        results.append(check("carry digit bound covers n*(q-1)", ok))
    except Exception as e:
        results.append(check("adder", False, str(e)))
        traceback.print_exc()

    return results


def main():
    global LOGGER

    parser = argparse.ArgumentParser(description="rns-numbers validation suite")
    parser.add_argument("--output-dir", type=str, default=None,
                        help="Write manifest.json and checks.jsonl here")
    parser.add_argument("--seed", type=int, default=42)
    parser.add_argument("--samples", type=int, default=200,
                        help="Random samples per property check")
    args = parser.parse_args()

    print("rns-numbers Validation Suite")
    print(f"Python: {sys.version}")
    print(f"CWD: {os.getcwd()}")

    if args.output_dir:
        LOGGER = CheckLogger(Path(args.output_dir))
        run_id = f"validate_{time.strftime('%Y%m%d_%H%M%S')}"
        LOGGER.write_manifest(create_manifest(run_id))

    t0 = time.time()
    try:
        results = run_checks(random.Random(args.seed), args.samples)
    finally:
        if LOGGER is not None:
            LOGGER.close()
    dt = time.time() - t0

    # ---------------------------------------------------------------
    # Summary
    # ---------------------------------------------------------------
    section("Summary")

    n_pass = sum(1 for r in results if r)
    n_fail = sum(1 for r in results if not r)
    n_total = len(results)

    print(f"\n  {n_pass}/{n_total} checks passed, {n_fail} failed ({dt:.2f}s)")
    if LOGGER is not None:
        print(f"  Log: {LOGGER.checks_path}")

    if n_fail == 0:
        print("\n  All checks PASSED.")
    else:
        print("\n  Some checks FAILED. Review output above.")

    return 0 if n_fail == 0 else 1


if __name__ == "__main__":
    sys.exit(main())
