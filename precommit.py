#!/usr/bin/env python3
"""Run pre-commit checks on the repository."""
import argparse
import enum
import os
import pathlib
import subprocess
import sys


class Step(enum.Enum):
    BLACK = "black"
    MYPY = "mypy"
    PYLINT = "pylint"
    TEST = "test"
    DOCTEST = "doctest"
    CHECK_INIT_AND_SETUP_COINCIDE = "check-init-and-setup-coincide"


def main() -> int:
    """Execute the main routine."""
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument(
        "--overwrite",
        help="Try to automatically fix the offending files (e.g., by re-formatting).",
        action="store_true",
    )
    parser.add_argument(
        "--select",
        help=(
            "If set, only the selected steps are executed. "
            "This is practical if some of the steps failed and you want to "
            "fix them in isolation. "
            "The steps are given as a space-separated list of: "
            + " ".join(value.value for value in Step)
        ),
        metavar="",
        nargs="+",
        choices=[value.value for value in Step],
    )
    parser.add_argument(
        "--skip",
        help=(
            "If set, skips the specified steps. "
            "This is practical if some of the steps passed and "
            "you want to fix the remainder in isolation. "
            "The steps are given as a space-separated list of: "
            + " ".join(value.value for value in Step)
        ),
        metavar="",
        nargs="+",
        choices=[value.value for value in Step],
    )

    args = parser.parse_args()

    overwrite = bool(args.overwrite)

    selects = (
        [Step(value) for value in args.select]
        if args.select is not None
        else [value for value in Step]
    )
    skips = [Step(value) for value in args.skip] if args.skip is not None else []

    repo_root = pathlib.Path(__file__).parent

    if Step.BLACK in selects and Step.BLACK not in skips:
        print("Black'ing...")
        # fmt: off
        black_targets = [
            "non_empty_sequence",
            "tests",
            "continuous_integration",
            "precommit.py",
            "setup.py",
        ]
        # fmt: on

        if overwrite:
            subprocess.check_call(["black"] + black_targets, cwd=str(repo_root))
        else:
            subprocess.check_call(
                ["black", "--check"] + black_targets, cwd=str(repo_root)
            )
    else:
        print("Skipped black'ing.")

    if Step.MYPY in selects and Step.MYPY not in skips:
        print("Mypy'ing...")
        mypy_targets = ["non_empty_sequence", "tests"]
        subprocess.check_call(["mypy", "--strict"] + mypy_targets, cwd=str(repo_root))
    else:
        print("Skipped mypy'ing.")

    if Step.PYLINT in selects and Step.PYLINT not in skips:
        print("Pylint'ing...")
        pylint_targets = ["non_empty_sequence", "tests"]
        subprocess.check_call(["pylint"] + pylint_targets, cwd=str(repo_root))
    else:
        print("Skipped pylint'ing.")

    if Step.TEST in selects and Step.TEST not in skips:
        print("Testing...")
        env = os.environ.copy()
        env["ICONTRACT_SLOW"] = "true"

        # fmt: off
        subprocess.check_call(
            [
                "coverage", "run",
                "--source", "non_empty_sequence",
                "-m", "unittest", "discover"
            ],
            cwd=str(repo_root),
            env=env
        )
        # fmt: on

        subprocess.check_call(["coverage", "report"], cwd=str(repo_root))
    else:
        print("Skipped testing.")

    if Step.DOCTEST in selects and Step.DOCTEST not in skips:
        # The README and the modules are doctested in a separate step from the
        # unit tests so that the documentation can be iterated on in isolation.
        print("Doctesting...")
        subprocess.check_call(
            [sys.executable, "-m", "doctest", "README.rst"], cwd=str(repo_root)
        )

        for pth in sorted((repo_root / "non_empty_sequence").glob("*.py")):
            if pth.name == "__init__.py":
                continue

            subprocess.check_call(
                [
                    sys.executable,
                    "-m",
                    "doctest",
                    str(pth.relative_to(repo_root)),
                ],
                cwd=str(repo_root),
            )
    else:
        print("Skipped doctesting.")

    if (
        Step.CHECK_INIT_AND_SETUP_COINCIDE in selects
        and Step.CHECK_INIT_AND_SETUP_COINCIDE not in skips
    ):
        print(
            "Checking that non_empty_sequence/__init__.py and setup.py coincide..."
        )
        subprocess.check_call(
            [
                sys.executable,
                str(
                    repo_root
                    / "continuous_integration"
                    / "check_init_and_setup_coincide.py"
                ),
            ],
            cwd=str(repo_root),
        )
    else:
        print(
            "Skipped checking that non_empty_sequence/__init__.py and "
            "setup.py coincide."
        )

    return 0


if __name__ == "__main__":
    sys.exit(main())
