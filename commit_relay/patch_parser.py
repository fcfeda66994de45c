# commit_relay/patch_parser.py
import re

from .models import Hunk, LineRecord

HUNK_HEADER_RE = re.compile(r"^@@ -(\d+),?\d* \+(\d+),?\d* @@")


def parse_patch(patch: str) -> list[Hunk]:
    """
    Split a unified diff patch into hunks with per-side line numbers.

    A header that does not match the ``@@ -N[,M] +N[,M] @@`` form still
    opens a hunk but leaves the line counters where the previous hunk
    stopped. Lines before the first header are dropped.
    """
    hunks: list[Hunk] = []
    header = None
    lines: list[LineRecord] = []
    base_line = head_line = 0

    for line in patch.split("\n"):
        if line.startswith("@@"):
            if header is not None:
                hunks.append(Hunk(header=header, lines=lines))

            match = HUNK_HEADER_RE.match(line)
            if match:
                base_line, head_line = int(match.group(1)), int(match.group(2))

            header = line
            lines = []
        elif header is not None:
            base_number = head_number = None
            if line.startswith("-"):
                base_number = base_line
                base_line += 1
            elif line.startswith("+"):
                head_number = head_line
                head_line += 1
            else:
                base_number, head_number = base_line, head_line
                base_line += 1
                head_line += 1

            lines.append(
                LineRecord(
                    base_line_number=base_number,
                    head_line_number=head_number,
                    content=line,
                )
            )

    if header is not None:
        hunks.append(Hunk(header=header, lines=lines))

    return hunks
