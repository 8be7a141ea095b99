from dataclasses import dataclass, field
from typing import Any

from ..utils.calculations import calculate_power, calculate_power_output
from ..utils.exceptions import ValidationError

# Defaults of a freshly opened quote form
DEFAULT_FREQUENCY = 60
DEFAULT_POWER_FACTOR = 0.9
DEFAULT_EFFICIENCY = 0.95

VALID_PHASES = (1, 3)
VALID_FREQUENCIES = (50, 60)

# Inputs that feed the power calculation
POWER_INPUT_FIELDS = ('voltage', 'current', 'phases', 'power_factor')
# Inputs the user may edit
INPUT_FIELDS = POWER_INPUT_FIELDS + ('frequency', 'efficiency')
DERIVED_FIELDS = ('calculated_power', 'power_output')

@dataclass
class ElectricalSpecs:
    """Electrical specifications of a quote with derived power values"""

    # User inputs
    voltage: float = 0
    phases: int = 0  # 0 until the user picks single or three phase
    frequency: int = DEFAULT_FREQUENCY
    current: float = 0
    power_factor: float = DEFAULT_POWER_FACTOR
    efficiency: float = DEFAULT_EFFICIENCY

    # Calculated values
    calculated_power: float = field(init=False)  # kW
    power_output: int = field(init=False)  # kW

    def __post_init__(self):
        for name in INPUT_FIELDS:
            self._check_number(name, getattr(self, name))
        self._check_input_ranges(self.voltage, self.current, self.power_factor, self.efficiency)
        self.calculated_power = calculate_power(self.voltage, self.current, self.phases, self.power_factor)
        self.power_output = calculate_power_output(self.calculated_power)

    @staticmethod
    def _check_number(field_name, value):
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise ValidationError(f"'{field_name}' must be a number")

    @staticmethod
    def _check_input_ranges(voltage, current, power_factor, efficiency):
        if voltage < 0:
            raise ValidationError("Voltage cannot be negative")
        if current < 0:
            raise ValidationError("Current cannot be negative")
        if not 0 <= power_factor <= 1:
            raise ValidationError("Power factor must be between 0 and 1")
        if not 0 <= efficiency <= 1:
            raise ValidationError("Efficiency must be between 0 and 1")

    def apply_input(self, field_name: str, value: Any) -> bool:
        """
        Set one user input and recompute the derived power values if needed.

        Recomputation only happens for voltage, current, phases and power
        factor, and the derived fields are only written when the rounded
        power actually differs from the stored value.

        Args:
            field_name: Name of the input field
            value: New value

        Returns:
            bool: True if calculated_power and power_output changed

        Raises:
            ValidationError: For derived or unknown fields and for non-numeric
                or out of range values; the specs are left untouched
        """
        if field_name in DERIVED_FIELDS:
            raise ValidationError(f"'{field_name}' is calculated and cannot be edited")
        if field_name not in INPUT_FIELDS:
            raise ValidationError(f"Unknown electrical field '{field_name}'")
        self._check_number(field_name, value)

        candidate = {
            'voltage': self.voltage,
            'current': self.current,
            'power_factor': self.power_factor,
            'efficiency': self.efficiency,
        }
        if field_name in candidate:
            candidate[field_name] = value
        self._check_input_ranges(**candidate)

        previous = getattr(self, field_name)
        setattr(self, field_name, value)

        if field_name not in POWER_INPUT_FIELDS or previous == value:
            return False

        new_power = calculate_power(self.voltage, self.current, self.phases, self.power_factor)
        if new_power == self.calculated_power:
            return False

        self.calculated_power = new_power
        self.power_output = calculate_power_output(new_power)
        return True

    def validate(self) -> bool:
        """
        Validate that the specification is complete and within bounds
        Returns True if valid, raises ValidationError if invalid
        """
        self._check_input_ranges(self.voltage, self.current, self.power_factor, self.efficiency)

        if self.phases not in VALID_PHASES:
            raise ValidationError("Phases must be 1 or 3")

        if self.frequency not in VALID_FREQUENCIES:
            raise ValidationError("Frequency must be 50 or 60 Hz")

        return True

    def to_dict(self) -> dict:
        return {
            'voltage': self.voltage,
            'phases': self.phases,
            'frequency': self.frequency,
            'current': self.current,
            'power_factor': self.power_factor,
            'efficiency': self.efficiency,
            'calculated_power': self.calculated_power,
            'power_output': self.power_output
        }

    @classmethod
    def from_dict(cls, data: dict) -> 'ElectricalSpecs':
        """Build from a dictionary; stored derived values are recalculated"""
        return cls(
            voltage=data.get('voltage', 0),
            phases=data.get('phases', 0),
            frequency=data.get('frequency', DEFAULT_FREQUENCY),
            current=data.get('current', 0),
            power_factor=data.get('power_factor', DEFAULT_POWER_FACTOR),
            efficiency=data.get('efficiency', DEFAULT_EFFICIENCY)
        )
