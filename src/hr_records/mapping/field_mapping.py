"""Employee field catalog: attribute names to column labels."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List


@dataclass(frozen=True)
class FieldMapping:
    field_to_label: Dict[str, str]

    def label_for(self, field_name: str) -> str:
        try:
            return self.field_to_label[field_name]
        except KeyError as exc:
            raise KeyError(f"No column label registered for field '{field_name}'") from exc

    def field_for(self, label: str) -> str | None:
        for field_name, candidate in self.field_to_label.items():
            if candidate == label:
                return field_name
        return None

    def labels(self) -> List[str]:
        return list(self.field_to_label.values())


DEFAULT_MAPPING = FieldMapping(
    field_to_label={
        "employee_number": "رقم الموظف",
        "arabic_name": "اسم الموظف باللغة العربية",
        "english_name": "اسم الموظف باللغة الإنجليزية",
        "civil_id": "البطاقة المدنية",
        "civil_id_expiry": "تاريخ انتهاء البطاقة",
        "nationality": "الجنسية",
        "passport_number": "رقم جواز السفر",
        "passport_expiry": "تاريخ انتهاء الجواز",
        "unified_number": "الرقم الموحد",
        "contract_date": "تاريخ التعاقد",
        "contract_status": "حالة التعاقد",
        "work_site": "موقع العمل",
        "job_title": "المهنة",
        "work_schedule": "نظام الدوام",
        "current_salary": "الراتب الحالي للموظف",
        "work_permit_salary": "الراتب حسب اذن العمل",
        "company_name": "اسم الشركة",
        "admin_notes": "ملاحظات إدارية",
        "additional_notes": "اضافات اخرى",
    }
)

DATE_FIELDS = ("civil_id_expiry", "passport_expiry", "contract_date")
DATE_LABELS = tuple(DEFAULT_MAPPING.label_for(name) for name in DATE_FIELDS)

REQUIRED_FIELDS = (
    "employee_number",
    "arabic_name",
    "english_name",
    "civil_id",
    "civil_id_expiry",
    "nationality",
    "contract_date",
    "contract_status",
    "job_title",
    "work_schedule",
    "current_salary",
)

# Contract status value counted as active in statistics.
ACTIVE_STATUS = "نشط"

SAMPLE_EMPLOYEES: List[Dict[str, str]] = [
    {
        "رقم الموظف": "60000",
        "اسم الموظف باللغة العربية": "حسن فلاح المعصب",
        "البطاقة المدنية": "293293293293",
        "تاريخ انتهاء البطاقة": "2026/06/29",
        "الجنسية": "كويتي",
        "رقم جواز السفر": "A12345678",
        "تاريخ انتهاء الجواز": "2088/11/10",
        "الرقم الموحد": "123456789",
        "تاريخ التعاقد": "1993/07/09",
        "حالة التعاقد": "منتهى",
        "موقع العمل": "عماله وطنية الكويتيين - الإدارة الرئيسية",
        "اسم الشركة": "شركة بروش انترناشونال لخدمات التنظيف",
        "الراتب الحالي للموظف": "800",
        "الراتب حسب اذن العمل": "700",
        "المهنة": "مدير عام",
        "نظام الدوام": "دوامين",
        "اسم الموظف باللغة الإنجليزية": "HASSAN FALAH ALMOASB",
        "ملاحظات إدارية": "باب خامس (الكويتيين)",
        "اضافات اخرى": "لا توجد إضافات",
    }
]

__all__ = [
    "ACTIVE_STATUS",
    "DATE_FIELDS",
    "DATE_LABELS",
    "DEFAULT_MAPPING",
    "FieldMapping",
    "REQUIRED_FIELDS",
    "SAMPLE_EMPLOYEES",
]
