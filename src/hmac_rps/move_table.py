from __future__ import annotations

from protocol import OutcomeRelation

CORNER = "v PC\\User >"


def format_table(relation: OutcomeRelation) -> str:
    """Render the relation as a grid: rows are the computer's move, columns the user's."""
    labels = list(relation.moves)
    first_width = max(len(CORNER), *(len(label) for label in labels))
    col_width = max(len("Draw"), *(len(label) for label in labels))

    separator = "+" + "-" * (first_width + 2) + ("+" + "-" * (col_width + 2)) * len(labels) + "+"

    def row(first: str, cells: list[str]) -> str:
        return "| " + f"{first:<{first_width}}" + " |" + "|".join(f" {c:<{col_width}} " for c in cells) + "|"

    lines: list[str] = [separator, row(CORNER, labels), separator]
    for index, label in enumerate(labels):
        lines.append(row(label, list(relation[index])))
        lines.append(separator)
    return "\n".join(lines)
