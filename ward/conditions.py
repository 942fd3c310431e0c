from typing import Tuple


class Conditions:
    """Named patient conditions. Any string is accepted by Patient.change_condition."""
    GOOD = "Good"
    FAIR = "Fair"
    SERIOUS = "Serious"
    CRITICAL = "Critical"
    STABLE = "Stable"

    @classmethod
    def all(cls) -> Tuple[str, ...]:
        return (cls.GOOD, cls.FAIR, cls.SERIOUS, cls.CRITICAL, cls.STABLE)
