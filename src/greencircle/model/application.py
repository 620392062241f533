# src/greencircle/model/application.py
from dataclasses import dataclass
from typing import Sequence, Tuple

from greencircle.constants import RESOURCES_COUNT, CardType
from greencircle.errors import ProtocolError


@dataclass(frozen=True)
class Application:
    id: int
    resources: Tuple[int, ...]

    def __post_init__(self) -> None:
        if len(self.resources) != RESOURCES_COUNT:
            raise ValueError(
                f"application {self.id} needs {RESOURCES_COUNT} resource slots, "
                f"got {len(self.resources)}"
            )

    def describe(self) -> str:
        """Short form for debug logs, e.g. '(3) 2 TRAIN, 0 CODIN, ...'."""
        parts = [
            f"{n} {CardType(i).name[:5]}" for i, n in enumerate(self.resources)
        ]
        return f"({self.id}) " + ", ".join(parts)

    @staticmethod
    def of(app_id: int, resources: Sequence[int]) -> "Application":
        return Application(int(app_id), tuple(int(x) for x in resources))

    @staticmethod
    def from_line(line: str) -> "Application":
        """Parse `APP <id> <r0> ... <r7>`."""
        tokens = line.split()
        if len(tokens) != RESOURCES_COUNT + 2 or tokens[0] != "APP":
            raise ProtocolError("malformed application line", line)
        try:
            values = [int(t) for t in tokens[1:]]
        except ValueError:
            raise ProtocolError("non-numeric application field", line) from None
        return Application(values[0], tuple(values[1:]))
