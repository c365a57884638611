from __future__ import annotations
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING, Literal, Mapping, Optional

if TYPE_CHECKING:
    from sectiony import Section


@dataclass(frozen=True)
class Material:
    """
    Named set of physical properties consumed by the analyzers.

    Known keys:
        EI: flexural rigidity
        GA: shear rigidity
        j2: unit factor applied to deflection
    """
    name: str
    properties: Mapping[str, float] = field(default_factory=dict)

    def __post_init__(self) -> None:
        props = {}
        for key, value in dict(self.properties).items():
            try:
                props[str(key)] = float(value)
            except (TypeError, ValueError):
                raise ValueError(
                    f"Material '{self.name}' property '{key}' must be numeric, got {value!r}"
                ) from None
        object.__setattr__(self, "properties", MappingProxyType(props))

    @property
    def EI(self) -> float:
        return self.properties["EI"]

    @property
    def GA(self) -> float:
        return self.properties["GA"]

    @property
    def j2(self) -> float:
        return self.properties["j2"]

    @classmethod
    def from_section(
        cls,
        name: str,
        E: float,
        section: Section,
        G: Optional[float] = None,
        axis: Literal["y", "z"] = "y",
        j2: float = 1.0,
    ) -> Material:
        """Build rigidities from a sectiony cross-section bent about `axis`."""
        if axis not in ("y", "z"):
            raise ValueError(f"axis must be 'y' or 'z', got '{axis}'")
        I = section.Iy if axis == "y" else section.Iz
        props = {"EI": E * I, "j2": j2}
        if G is not None:
            props["GA"] = G * section.A
        return cls(name=name, properties=props)
