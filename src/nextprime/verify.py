"""Cross-check the trial-division routines against brute-force references.

A verification run walks every n in [start, stop), compares each enabled
check with its oracle, replays the configured regression cases and logs
any disagreement to results.jsonl in a timestamped run directory.
"""

from datetime import datetime
from pathlib import Path
from typing import Any

from tqdm import tqdm

from nextprime.oracle import ceil_sqrt_oracle, is_prime_oracle, next_prime_oracle
from nextprime.primes import U64_MAX, integer_ceil_sqrt, is_prime, next_prime
from nextprime.utils.io import load_config, save_config
from nextprime.utils.logging import ResultsLogger

CHECKS = ("ceil_sqrt", "is_prime", "next_prime")


def _mismatch(check: str, n: int, expected: Any, actual: Any) -> dict[str, Any]:
    return {"check": check, "n": n, "expected": expected, "actual": actual}


def check_value(n: int, checks: tuple[str, ...] | list[str] = CHECKS) -> list[dict[str, Any]]:
    """Run the enabled checks for a single input.

    Besides oracle agreement, ceil_sqrt checks the ceiling property
    (r*r >= n and (r-1)**2 < n) and next_prime checks idempotence.

    Args:
        n: Input value.
        checks: Names of checks to run.

    Returns:
        List of mismatch records (empty if everything agrees).
    """
    mismatches = []

    if "ceil_sqrt" in checks:
        r = integer_ceil_sqrt(n)
        expected = ceil_sqrt_oracle(n)
        if r != expected or r * r < n or (r > 0 and (r - 1) * (r - 1) >= n):
            mismatches.append(_mismatch("ceil_sqrt", n, expected, r))

    if "is_prime" in checks:
        actual = is_prime(n)
        expected = is_prime_oracle(n)
        if actual != expected:
            mismatches.append(_mismatch("is_prime", n, expected, actual))

    if "next_prime" in checks:
        p = next_prime(n)
        expected = next_prime_oracle(n)
        if p != expected or next_prime(p) != p:
            mismatches.append(_mismatch("next_prime", n, expected, p))

    return mismatches


def _validate_range(start: int, stop: int) -> None:
    if start < 0 or stop > U64_MAX + 1:
        raise ValueError(
            f"Invalid range: [{start}, {stop}). Must lie within [0, 2**64)."
        )
    if start > stop:
        raise ValueError(f"Invalid range: start {start} is greater than stop {stop}.")


def _validate_checks(checks: tuple[str, ...] | list[str]) -> None:
    unknown = [c for c in checks if c not in CHECKS]
    if unknown:
        raise ValueError(f"Invalid check: {unknown[0]}. Must be one of {CHECKS}.")


def verify_range(
    start: int,
    stop: int,
    checks: tuple[str, ...] | list[str] = CHECKS,
    progress: bool = False,
) -> list[dict[str, Any]]:
    """Verify every n in [start, stop).

    Args:
        start: First input (inclusive).
        stop: Last input (exclusive).
        checks: Names of checks to run.
        progress: Show a tqdm progress bar.

    Returns:
        List of mismatch records.

    Raises:
        ValueError: If the range is inverted or outside u64, or if a
            check name is unknown.
    """
    _validate_range(start, stop)
    _validate_checks(checks)

    mismatches = []
    for n in tqdm(range(start, stop), desc="Verifying", disable=not progress):
        mismatches.extend(check_value(n, checks))
    return mismatches


def check_regressions(regressions: list[dict[str, int]]) -> list[dict[str, Any]]:
    """Replay known next_prime cases.

    Args:
        regressions: List of {"n": int, "prime": int} dictionaries.

    Returns:
        List of mismatch records.
    """
    mismatches = []
    for case in regressions:
        actual = next_prime(case["n"])
        if actual != case["prime"]:
            mismatches.append(_mismatch("regression", case["n"], case["prime"], actual))
    return mismatches


def create_run_dir(config: dict[str, Any]) -> Path:
    """Create a timestamped run directory under run.out_dir.

    Args:
        config: Configuration dictionary.

    Returns:
        Path to the run directory.
    """
    out_dir = Path(config["run"]["out_dir"])
    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    name = config["run"]["name"]

    run_dir = out_dir / f"{timestamp}__{name}"
    run_dir.mkdir(parents=True, exist_ok=True)
    return run_dir


def run_verification(config: dict[str, Any] | str | Path) -> Path:
    """Run a full verification pass and log the results.

    Nothing is written until the range and check names have been validated.

    Args:
        config: Configuration dictionary, or path to a YAML config
            (see configs/default.yaml).

    Returns:
        Path to the results.jsonl file.

    Raises:
        ValueError: If the range or a check name is invalid.
    """
    if not isinstance(config, dict):
        config = load_config(config)

    start = config["verify"]["start"]
    stop = config["verify"]["stop"]
    checks = config["verify"]["checks"]
    regressions = config.get("regressions") or []

    _validate_range(start, stop)
    _validate_checks(checks)

    run_dir = create_run_dir(config)
    save_config(config, run_dir / "config.yaml")
    results_path = run_dir / "results.jsonl"

    progress = config["verify"].get("progress", False)

    with ResultsLogger(results_path) as logger:
        mismatches = verify_range(start, stop, checks, progress=progress)
        mismatches.extend(check_regressions(regressions))

        for m in mismatches:
            logger.log_mismatch(m["check"], m["n"], m["expected"], m["actual"])
        logger.log_summary(start, stop, (stop - start) + len(regressions), len(mismatches))

    if mismatches:
        print(f"WARNING: {len(mismatches)} mismatches found in [{start}, {stop}).")

    print(f"RESULTS={results_path}")
    return results_path
