from typing import Dict, List

from ....application.ports.user_repo import UserDto


def default_users() -> List[UserDto]:
    """Demonstration accounts available at startup."""
    return [
        UserDto(id=1, email="admin@example.com", password="123", role="admin"),
        UserDto(id=2, email="patient@example.com", password="123", role="patient"),
    ]


# Minutes per walk-in procedure
PROCEDURE_DURATIONS: Dict[str, int] = {
    "خلع": 30,    # extraction
    "حشو": 20,    # filling
    "تنظيف": 15,  # cleaning
}
