import math
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

class SpecFamily(Enum):
    SPEC_33 = 33
    SPEC_44 = 44
    NO_SPEC = 0  # Fallback "online" table

    @property
    def label(self) -> str:
        return f"M22759/{self.value}"

    @property
    def description(self) -> str:
        if self is SpecFamily.NO_SPEC:
            return "Sin especificación (tabla online)"
        return self.label

    @classmethod
    def from_code(cls, code) -> "SpecFamily":
        """Accepts 33 / 44 / 0 (int or whole float), their string forms, or labels like 'M22759/33'."""
        if isinstance(code, cls):
            return code
        if isinstance(code, (int, float)) and not isinstance(code, bool):
            if isinstance(code, float) and not code.is_integer():
                raise ValueError(f"Unknown wire spec: {code!r} (expected 33, 44 or 0)")
            value = int(code)
        else:
            text = str(code).strip().upper()
            if text.startswith("M22759/"):
                text = text[len("M22759/"):]
            try:
                value = int(text)
            except ValueError:
                raise ValueError(f"Unknown wire spec: {code!r} (expected 33, 44 or 0)") from None
        for member in cls:
            if member.value == value:
                return member
        raise ValueError(f"Unknown wire spec: {code!r} (expected 33, 44 or 0)")

    @classmethod
    def from_choice(cls, value) -> Optional["SpecFamily"]:
        """Form/table cell value -> SpecFamily, or None (auto) for empty, 'Auto' or NaN cells."""
        if value is None:
            return None
        if isinstance(value, float) and math.isnan(value):
            return None
        text = str(value).strip()
        if not text or text.upper() == "AUTO" or text.lower() == "nan":
            return None
        return cls.from_code(value)

@dataclass(frozen=True)
class HarnessRequest:
    gauge: int  # AWG
    strand_count: int
    length_ft: float
    spec_family: Optional[SpecFamily] = None  # None -> picked from gauge

    def __post_init__(self):
        if self.strand_count <= 0:
            raise ValueError("strand_count must be > 0")
        if self.length_ft < 0:
            raise ValueError("length_ft must be >= 0")

@dataclass(frozen=True)
class HarnessResult:
    resistance_ohms: float
    ohms_per_foot: float
    ohms_per_contact: float
    spec_family: SpecFamily
    spec_inferred: bool = False
    notes: Tuple[str, ...] = ()
