from math import ceil, copysign, floor, sqrt

# Phase counts with a defined power formula
SINGLE_PHASE = 1
THREE_PHASE = 3

def round_half_up(value: float, decimals: int = 2) -> float:
    """
    Round to a fixed number of decimals, halves away from zero.

    Multiply, round, divide, matching how the quote form has always
    displayed power. Python's built-in round() would round halves to even.

    Args:
        value: Value to round
        decimals: Number of decimal places

    Returns:
        float: Rounded value
    """
    factor = 10 ** decimals
    return copysign(floor(abs(value) * factor + 0.5), value) / factor

def calculate_power(
    voltage: float,
    current: float,
    phases: int,
    power_factor: float
) -> float:
    """
    Calculate real power in kW from line voltage and current.

    Three phase: P = √3 × V × I × PF / 1000
    Single phase: P = V × I × PF / 1000
    Any other phase count (including 0 for "not entered yet") gives 0.

    Args:
        voltage: Line voltage in volts
        current: Line current in amperes
        phases: Number of phases (1 or 3)
        power_factor: Power factor between 0 and 1

    Returns:
        float: Power in kW rounded to 2 decimals
    """
    if phases == THREE_PHASE:
        power = sqrt(3) * voltage * current * power_factor / 1000
    elif phases == SINGLE_PHASE:
        power = voltage * current * power_factor / 1000
    else:
        power = 0.0

    return round_half_up(power, 2)

def calculate_power_output(calculated_power: float) -> int:
    """Rated output in whole kW (next integer at or above the calculated power)"""
    return int(ceil(calculated_power))
