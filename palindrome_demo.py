"""Demonstration harness for the disjoint palindrome finder.

Running the script scans a handful of built-in texts with
``palindrome_cover.find_palindromes`` and prints the palindromes selected for
each, verifying them against the documented expectations.  The overlapping
case shows the greedy policy at work: ``ababa`` contains three candidate
palindromes but only the longest survives.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, List, Tuple

from palindrome_cover import find_palindromes


@dataclass(frozen=True)
class DemoCase:
    """A demo text together with the palindromes it should yield."""

    name: str
    text: str
    expected: Tuple[str, ...]

    def run(self) -> Tuple[str, ...]:
        """Scan the demo text."""

        return find_palindromes(self.text)


def _iter_demo_cases() -> Iterator[DemoCase]:
    """Yield the built-in demonstration cases."""

    yield DemoCase(
        name="Disjoint",
        text="abcba12321xyzzyx",
        expected=("abcba", "12321", "xyzzyx"),
    )
    yield DemoCase(name="Overlapping", text="ababa", expected=("ababa",))
    yield DemoCase(name="Mixed", text="zzaba123321qq", expected=("aba", "123321"))
    yield DemoCase(name="None", text="abcdefg12345", expected=())


def _format_report(case: DemoCase, found: Tuple[str, ...]) -> List[str]:
    """Return formatted output lines for *case* and the palindromes *found*."""

    if found != case.expected:
        raise RuntimeError(
            "Demo case expectation mismatch:"
            f" {case.name} expected {list(case.expected)}"
            f" but received {list(found)}"
        )

    rendered = ", ".join(found) if found else "<none>"
    return [f"{case.name} ({case.text}): {rendered}"]


def main() -> None:
    """Execute the demonstration flow for all configured cases."""

    for case in _iter_demo_cases():
        for line in _format_report(case, case.run()):
            print(line)


if __name__ == "__main__":
    main()
