"""Application use cases package."""

from .delete_day import DeleteDayUseCase
from .export_csv import CsvExport, ExportAllCsvUseCase, ExportDayCsvUseCase
from .get_day_detail import GetDayDetailUseCase
from .get_monthly_summaries import GetMonthlySummariesUseCase
from .list_work_weeks import ListWorkWeeksUseCase
from .save_day import SaveDayUseCase
from .seed_sample_days import SeedSampleDaysUseCase
from .set_monthly_budget import SetMonthlyBudgetUseCase

__all__ = [
    "SaveDayUseCase",
    "GetDayDetailUseCase",
    "DeleteDayUseCase",
    "ListWorkWeeksUseCase",
    "GetMonthlySummariesUseCase",
    "SetMonthlyBudgetUseCase",
    "ExportDayCsvUseCase",
    "ExportAllCsvUseCase",
    "CsvExport",
    "SeedSampleDaysUseCase",
]
