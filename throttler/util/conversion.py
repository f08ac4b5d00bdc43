import re

MAX_U64 = (1 << 64) - 1

_quantity_re = re.compile(r"\s*(\d+)(.)?", re.DOTALL)


def unit_factor(unit: str | None) -> int:
    """
    Return the multiplier for a unit suffix. Unknown or missing units count as bytes.
    """
    if not unit:
        return 1

    factor_map: dict[str, int] = {
        "k": 1 << 10,
        "m": 1 << 20,
        "g": 1 << 30,
        "t": 1 << 40,
    }

    return factor_map.get(unit.lower(), 1)


def parse_byte_quantity(value: str) -> int:
    """
    Convert a string like "10G" or "512k" to a number of bytes.

    Raises ValueError if the string doesn't start with digits or the result
    doesn't fit into an unsigned 64-bit integer.
    """
    match = _quantity_re.match(value)
    if not match:
        raise ValueError(f'"{value}" is not a byte quantity')

    number = int(match.group(1))
    if number > MAX_U64:
        raise ValueError(f'"{value}" is too large')

    number *= unit_factor(match.group(2))
    if number > MAX_U64:
        raise ValueError(f'"{value}" is too large')

    return number


def pad_float(number: float = 0.0, round_int: bool = False) -> str:
    """
    Pad a float to two decimal places.
    """
    if isinstance(number, int) and round_int:
        return str(int(number))
    else:
        return f"{number:.2f}"


def byte_converter(number: float, unit: str = "auto") -> str:
    """
    Convert bytes to the given unit.
    """
    if unit is None:
        unit = "auto"
    suffix = "B"

    if unit == "auto":
        for unit_prefix in ["", "Ki", "Mi", "Gi", "Ti", "Pi", "Ei", "Zi"]:
            if abs(number) < 1024.0:
                return (
                    f"{pad_float(number=number, round_int=False)} {unit_prefix}{suffix}"
                )
            number /= 1024
        return f"{pad_float(number=number, round_int=False)} Yi{suffix}"

    prefix_map: dict[str, int] = {
        "Ki": 1,
        "Mi": 2,
        "Gi": 3,
        "Ti": 4,
    }

    if unit in prefix_map:
        value = number / (1024 ** prefix_map[unit])
        return f"{pad_float(value, round_int=False)} {unit}{suffix}"

    return f"{number} {suffix}"
