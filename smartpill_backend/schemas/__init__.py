from .auth import (
    RegisterRequest,
    RegisterResponse,
    LoginRequest,
    LoginResponse,
    HelloResponse,
)
from .medication import MedicationInput, MedicationResponse, MedicationListResponse
from .consumption import ConsumptionInput, ConsumptionResponse
from .consumption_report import ExpectedConsumption, ActualConsumption, DayResult, WeeklyConsumptionReport

__all__ = [
    "RegisterRequest",
    "RegisterResponse",
    "LoginRequest",
    "LoginResponse",
    "HelloResponse",
    "MedicationInput",
    "MedicationResponse",
    "MedicationListResponse",
    "ConsumptionInput",
    "ConsumptionResponse",
    "ExpectedConsumption",
    "ActualConsumption",
    "DayResult",
    "WeeklyConsumptionReport",
]
