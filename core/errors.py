from typing import Optional

from core.models import SpecFamily

class HarnessError(Exception):
    """Base class for fatal harness resistance errors."""
    code = "harnessResistance"

class InsufficientArguments(HarnessError, TypeError):
    code = "harnessResistance:inputCount"

    def __init__(self, message: Optional[str] = None):
        super().__init__(message or (
            "This function requires at least three arguments. Should be: "
            "harness_resistance(gauge (AWG), strands, length (ft)[, spec (33 or 44)])"
        ))

class WireSpecNotFound(HarnessError, LookupError):
    code = "harnessResistance:wireSpec"

    def __init__(self, gauge, spec_family: SpecFamily):
        self.gauge = gauge
        self.spec_family = spec_family
        super().__init__(
            f"The gauge you requested ({gauge}AWG) was not found in the wire spec ({spec_family.label})."
        )

class ContactSpecOutOfRange(UserWarning):
    """Advisory only: the smallest contact-table gauge was used instead."""
    code = "harnessResistance:contactSpec"

    def __init__(self, gauge):
        self.gauge = gauge
        super().__init__(f"The gauge you requested ({gauge}AWG) was not found in the contact spec.")
