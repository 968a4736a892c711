import logging
import warnings
from typing import Optional, Tuple
from core.models import SpecFamily, HarnessRequest, HarnessResult
from core.errors import InsufficientArguments, WireSpecNotFound, ContactSpecOutOfRange
from standards.wire_tables import get_wire_table, get_contact_table, lookup_exact, min_gauge

logger = logging.getLogger(__name__)

# Preferred spec by gauge: /33 for 20AWG and smaller (tensile strength),
# /44 for 18AWG and larger (lower contact resistance).
SPEC_33_MIN_GAUGE = 20
SPEC_44_MIN_GAUGE = 12

# One contact at each end of the harness, per strand
CONTACTS_PER_STRAND = 2

class HarnessLogic:
    @staticmethod
    def select_spec_family(gauge, spec_family: Optional[SpecFamily] = None) -> SpecFamily:
        if spec_family is not None:
            return spec_family
        if gauge >= SPEC_33_MIN_GAUGE:
            family = SpecFamily.SPEC_33
        elif gauge >= SPEC_44_MIN_GAUGE:
            family = SpecFamily.SPEC_44
        else:
            family = SpecFamily.NO_SPEC
        logger.debug("Gauge %s AWG -> %s (auto)", gauge, family.label)
        return family

    @staticmethod
    def resistance_per_foot(spec_family: SpecFamily, gauge) -> float:
        value = lookup_exact(get_wire_table(spec_family), gauge)
        if value is None:
            raise WireSpecNotFound(gauge, spec_family)
        return value

    @staticmethod
    def resolve_contact_resistance(gauge) -> Tuple[float, Optional[str]]:
        """
        Returns (ohms_per_contact, advisory_note). Never extrapolates:
        1. exact row -> its value
        2. below the smallest row -> smallest row's value + ContactSpecOutOfRange warning
        3. otherwise -> first row (ascending scan) whose gauge is <= the requested gauge
        """
        table = get_contact_table()

        exact = lookup_exact(table, gauge)
        if exact is not None:
            return exact, None

        if gauge < min_gauge(table):
            advisory = ContactSpecOutOfRange(gauge)
            logger.warning(str(advisory))
            warnings.warn(advisory, stacklevel=2)
            return table[0][1], str(advisory)

        # First match in ascending order, not the closest row.
        for row_gauge, value in table:
            if row_gauge <= gauge:
                return value, None

        # Unreachable while the table is ascending
        raise LookupError(f"No contact resistance row for {gauge}AWG")

    @staticmethod
    def contact_resistance(gauge) -> float:
        ohms, _ = HarnessLogic.resolve_contact_resistance(gauge)
        return ohms

    @staticmethod
    def combine_resistance(ohms_per_foot: float, ohms_per_contact: float, length_ft: float, strand_count: int) -> float:
        return (ohms_per_foot * length_ft + CONTACTS_PER_STRAND * ohms_per_contact) / strand_count

    @staticmethod
    def calculate(request: HarnessRequest) -> HarnessResult:
        family = HarnessLogic.select_spec_family(request.gauge, request.spec_family)
        ohms_ft = HarnessLogic.resistance_per_foot(family, request.gauge)
        ohms_contact, note = HarnessLogic.resolve_contact_resistance(request.gauge)

        total = HarnessLogic.combine_resistance(ohms_ft, ohms_contact, request.length_ft, request.strand_count)
        logger.debug(
            "%s AWG x%s, %s ft (%s): %.6f ohm/ft, %.6f ohm/contact -> %.6f ohm",
            request.gauge, request.strand_count, request.length_ft, family.label,
            ohms_ft, ohms_contact, total
        )

        return HarnessResult(
            resistance_ohms=total,
            ohms_per_foot=ohms_ft,
            ohms_per_contact=ohms_contact,
            spec_family=family,
            spec_inferred=request.spec_family is None,
            notes=(note,) if note else (),
        )

def harness_resistance(gauge=None, strands=None, length=None, spec=None) -> float:
    """
    Harness resistance estimate in Ohms.

    gauge (AWG), strands (count), length (ft), spec (33, 44, 0 or SpecFamily; optional).
    Per-foot values come from M22759/33 and M22759/44; contact resistance is the
    worst case for D38999-style connectors, counted once at each end per strand.
    """
    if gauge is None or strands is None or length is None:
        raise InsufficientArguments()

    family = SpecFamily.from_code(spec) if spec is not None else None
    request = HarnessRequest(gauge=gauge, strand_count=strands, length_ft=length, spec_family=family)
    return HarnessLogic.calculate(request).resistance_ohms
