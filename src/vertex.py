from dataclasses import dataclass, field


@dataclass(frozen=True)
class LinkVertex:
    """
    A discovered document. Identity is the canonical id only:
    two vertices with the same id and different labels are the same vertex.
    """
    id: str
    label: str = field(default="", compare=False)

    def __str__(self):
        return f"{self.label} ({self.id})"
