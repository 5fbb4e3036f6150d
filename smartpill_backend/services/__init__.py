from .medications import MedicationDirectory
from .consumptions import ConsumptionStore
from .consumption_report import build_weekly_report

__all__ = ["MedicationDirectory", "ConsumptionStore", "build_weekly_report"]
