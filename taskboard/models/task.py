# taskboard/models/task.py

from dataclasses import dataclass, asdict


@dataclass(frozen=True)
class Task:
    id: int
    title: str

    def to_dict(self):
        return asdict(self)
