#!/usr/bin/env python3

"""Check that the distribution and non_empty_sequence/__init__.py are in sync."""
import os
import pathlib
import subprocess
import sys
from typing import Optional, Dict

import non_empty_sequence

#: Map the development status classifier of the distribution to the status
#: expected in ``non_empty_sequence/__init__.py``
STATUS_MAP = {
    "Development Status :: 1 - Planning": "Planning",
    "Development Status :: 2 - Pre-Alpha": "Pre-Alpha",
    "Development Status :: 3 - Alpha": "Alpha",
    "Development Status :: 4 - Beta": "Beta",
    "Development Status :: 5 - Production/Stable": "Production/Stable",
    "Development Status :: 6 - Mature": "Mature",
    "Development Status :: 7 - Inactive": "Inactive",
}


def _query_setup_py(setup_py_pth: pathlib.Path, field: str) -> str:
    """Ask the ``setup.py`` for the meta-data ``field``."""
    return subprocess.check_output(
        [sys.executable, str(setup_py_pth), f"--{field}"],
        encoding="utf-8",
        cwd=str(setup_py_pth.parent),
    ).strip()


def main() -> int:
    """Execute the main routine."""
    repo_root = pathlib.Path(os.path.realpath(__file__)).parent.parent

    setup_py_pth = repo_root / "setup.py"
    if not setup_py_pth.exists():
        raise RuntimeError(f"Could not find the setup.py: {setup_py_pth}")

    success = True

    expected_in_init = {
        "version": non_empty_sequence.__version__,
        "author": non_empty_sequence.__author__,
        "license": non_empty_sequence.__license__,
        "description": non_empty_sequence.__doc__,
    }  # type: Dict[str, Optional[str]]

    for field, in_init in expected_in_init.items():
        in_setup_py = _query_setup_py(setup_py_pth, field)

        if in_setup_py != in_init:
            print(
                f"The {field} in the setup.py is {in_setup_py!r}, "
                f"while the {field} in non_empty_sequence/__init__.py "
                f"is: {in_init!r}",
                file=sys.stderr,
            )
            success = False

    # Classifiers need special attention as there are multiple.
    classifiers = _query_setup_py(setup_py_pth, "classifiers").splitlines()

    status_classifier = None  # type: Optional[str]
    for classifier in classifiers:
        if classifier in STATUS_MAP:
            status_classifier = classifier
            break

    if status_classifier is None:
        print(
            "Expected a status classifier in setup.py "
            "(e.g., 'Development Status :: 3 - Alpha'), but found none.",
            file=sys.stderr,
        )
        success = False
    else:
        expected_status_in_init = STATUS_MAP[status_classifier]

        if expected_status_in_init != non_empty_sequence.__status__:
            print(
                f"Expected status {expected_status_in_init} "
                f"according to setup.py in non_empty_sequence/__init__.py, "
                f"but found: {non_empty_sequence.__status__}",
                file=sys.stderr,
            )
            success = False

    if not success:
        return -1

    return 0


if __name__ == "__main__":
    sys.exit(main())
