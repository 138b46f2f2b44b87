"""
Git hook checks.

- commit messages look like ``docs(readme): Create initial README.md file``
- committed file names are lower case (``something-module.py``, not
  ``somethingModule.py``); Dockerfiles are exempt
"""

import argparse
from pathlib import PurePath
from typing import Iterable, List, Optional, Sequence

ALLOWED_COMMIT_TYPES = (
    "feat",
    "fix",
    "style",
    "deployment",
    "refactor",
    "test",
    "docs",
    "chore",
)

STANDARD_ERROR_MSG = """
    Git commit message is not properly formatted.
    Example of a good commit message:

    > docs(readme): Create initial README.md file
"""

TYPE_ERROR_MSG = (
    "First word in a git commit message is a commit type and it must be one of the: "
    + ", ".join(ALLOWED_COMMIT_TYPES)
)

LOCATION_ERROR_MSG = """You must enter a location inside parentheses to describe in what part of the codebase did the change happen.
    Example:

    > docs(/* insert here */): Create initial README.md file"""

TRAILING_DOT_ERROR_MSG = "Git message mustn't end with a dot ('.')."


def check_commit_message(text: str) -> List[str]:
    """Return the problems with a commit message; empty when it is well formed."""
    subject = _subject_line(text)
    head, sep, message = subject.partition(": ")
    if not sep or not head or not message.strip():
        return [STANDARD_ERROR_MSG]

    problems = []
    commit_type, paren, rest = head.partition("(")
    if commit_type not in ALLOWED_COMMIT_TYPES:
        problems.append(TYPE_ERROR_MSG)

    location = rest.split(")", 1)[0] if paren else ""
    if not location.strip():
        problems.append(LOCATION_ERROR_MSG)

    if message.rstrip().endswith("."):
        problems.append(TRAILING_DOT_ERROR_MSG)
    return problems


def check_committed_file_names(paths: Iterable[str]) -> List[str]:
    """Return the committed file names that are not lower case."""
    offending = []
    for path in paths:
        name = PurePath(path).name
        if name.startswith("Dockerfile"):
            continue
        if name != name.lower():
            offending.append(name)
    return offending


def _subject_line(text: str) -> str:
    # git strips '#' lines from the message file after the hook runs
    for line in text.splitlines():
        if line.strip() and not line.startswith("#"):
            return line
    return ""


def commit_message_main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Validate a git commit message file.")
    parser.add_argument("message_file", help="path git passes to the commit-msg hook")
    args = parser.parse_args(argv)

    with open(args.message_file, encoding="utf-8") as f:
        problems = check_commit_message(f.read())

    if problems:
        print("\n    GIT COMMIT MESSAGE IN WRONG FORMAT!\n")
        for problem in problems:
            print(f"    {problem.strip()}\n")
        return 1

    print("\n    Git commit message is properly formatted.\n")
    return 0


def file_names_main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Validate committed file names.")
    parser.add_argument("paths", nargs="*", help="committed file paths")
    args = parser.parse_args(argv)

    offending = check_committed_file_names(args.paths)
    if offending:
        for name in offending:
            print(
                f"\n    Committed file {name} is not in the kebab-case "
                "but in the camelCase/PascalCase\n"
            )
        return 1

    print("\n    Committed files are properly named.\n")
    return 0

