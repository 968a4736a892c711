from types import MappingProxyType
from typing import Optional, Tuple
from core.models import SpecFamily

# All values at 20°C / 68°F
TEMPERATURE_BASIS_C = 20.0

# Format: ((AWG, value), ...) ascending by AWG, each AWG at most once.
ResistanceTable = Tuple[Tuple[int, float], ...]

# M22759/33 - Ohms per foot
M22759_33: ResistanceTable = (
    (20, 0.0107),
    (22, 0.0175),
    (24, 0.0284),
    (26, 0.0448),
    (28, 0.0744),
    (30, 0.1174),
)

# M22759/44 - Ohms per foot
M22759_44: ResistanceTable = (
    (12, 0.00190),
    (14, 0.00288),
    (16, 0.00452),
    (18, 0.00579),
    (20, 0.00919),
    (22, 0.0151),
    (24, 0.0243),
    (26, 0.0384),
    (28, 0.0638),
)

# Heavy gauges outside both specs - Ohms per foot
# Source: http://www.powerstream.com/Wire_Size.htm
NO_SPEC_ONLINE: ResistanceTable = (
    (0, 0.0000983),
    (2, 0.000156),
    (4, 0.000249),
    (6, 0.000395),
    (8, 0.000628),
    (10, 0.000999),
)

# Worst case resistance per contact for D38999-style connectors
# (MIL-DTL-38999 -> AS39029 -> MIL-DTL-22520 voltage drop).
# Must stay ordered from low AWG (12) to high AWG (22); the fallback scan relies on it.
CONTACT_RESISTANCE: ResistanceTable = (
    (12, 0.0050),
    (16, 0.0085),
    (20, 0.0120),
    (22, 0.0283),
)

WIRE_TABLES = MappingProxyType({
    SpecFamily.SPEC_33: M22759_33,
    SpecFamily.SPEC_44: M22759_44,
    SpecFamily.NO_SPEC: NO_SPEC_ONLINE,
})

def get_wire_table(family: SpecFamily) -> ResistanceTable:
    return WIRE_TABLES[family]

def get_contact_table() -> ResistanceTable:
    return CONTACT_RESISTANCE

def table_gauges(table: ResistanceTable) -> Tuple[int, ...]:
    return tuple(gauge for gauge, _ in table)

def min_gauge(table: ResistanceTable) -> int:
    return min(table_gauges(table))

def lookup_exact(table: ResistanceTable, gauge) -> Optional[float]:
    # Discrete lookup, never interpolates between rows
    for row_gauge, value in table:
        if row_gauge == gauge:
            return value
    return None

def is_ascending(table: ResistanceTable) -> bool:
    gauges = table_gauges(table)
    return all(a < b for a, b in zip(gauges, gauges[1:]))
