from .user import User
from .medication import Medication
from .medication_consumption import MedicationConsumption

__all__ = [
    "User",
    "Medication",
    "MedicationConsumption",
]
