"""Frequency reports for display and export."""

import json
import unicodedata
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Literal

from .counter import FrequencyTable
from .options import CountOption

ReportFormat = Literal["text", "json"]
REPORT_FORMATS: tuple[str, ...] = ("text", "json")

_ESCAPES = {"\\": "\\\\", "\t": "\\t", "\n": "\\n", "\r": "\\r"}


def escape_token(token: str) -> str:
    """Escape backslashes and C0/C1 control characters for text output."""
    out = []
    for ch in token:
        if ch in _ESCAPES:
            out.append(_ESCAPES[ch])
        elif unicodedata.category(ch) == "Cc":
            out.append(f"\\x{ord(ch):02x}")
        else:
            out.append(ch)
    return "".join(out)


@dataclass
class FrequencyReport:
    """Summary of a frequency table.

    Attributes:
        option: Mode the table was counted with.
        total: Sum of all counts.
        unique: Number of distinct tokens.
        frequencies: (token, count) pairs, most frequent first.
    """

    option: CountOption
    total: int
    unique: int
    frequencies: list[tuple[str, int]] = field(default_factory=list)

    @classmethod
    def from_table(
        cls,
        table: FrequencyTable,
        option: CountOption,
        top: int | None = None,
    ) -> "FrequencyReport":
        """Build a report from a counted table.

        Ties in count are ordered by token so output is stable.

        Args:
            table: Token counts.
            option: Mode used to produce the table.
            top: Keep only the N most frequent entries. Totals still cover
                the whole table.

        Raises:
            ValueError: If top is not positive.
        """
        if top is not None and top < 1:
            raise ValueError(f"top must be a positive integer, got {top}")

        ordered = sorted(table.items(), key=lambda item: (-item[1], item[0]))
        if top is not None:
            ordered = ordered[:top]

        return cls(
            option=option,
            total=sum(table.values()),
            unique=len(table),
            frequencies=ordered,
        )

    def to_dict(self) -> dict[str, Any]:
        """Serialize for JSON output."""
        return {
            "mode": self.option.value,
            "total": self.total,
            "unique": self.unique,
            "frequencies": dict(self.frequencies),
        }

    def render_text(self) -> str:
        """Render one ``count<TAB>token`` row per entry.

        Control characters and backslashes in tokens are escaped so each row
        stays on one line with a single tab.
        """
        return "".join(f"{n}\t{escape_token(token)}\n" for token, n in self.frequencies)

    def render(self, fmt: ReportFormat = "text") -> str:
        """Render in the given format."""
        if fmt == "json":
            return json.dumps(self.to_dict(), indent=2, ensure_ascii=False) + "\n"
        if fmt == "text":
            return self.render_text()
        raise ValueError(f"Unknown report format: {fmt}")


def write_report(report: FrequencyReport, path: Path, fmt: ReportFormat = "text") -> None:
    """Write a report to ``path`` as UTF-8, creating parent directories."""
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        f.write(report.render(fmt))
