"""User-facing text for error codes, alerts and coaching tips.

Indonesian (``id``) is the default; English (``en``) is the fallback for
users who opt in. Unknown languages render in Indonesian.
"""

from collections.abc import Iterable
from dataclasses import dataclass
from typing import TypeVar

from healthy_coaching.domain.summary import AlertCode, NutritionStatus
from healthy_coaching.errors import HealthyCoachingError

DEFAULT_LANGUAGE = "id"

T = TypeVar("T")

_ERROR_MESSAGES: dict[str, dict[str, str]] = {
    "VALIDATION_ERROR": {
        "id": "Data yang dikirim tidak valid.",
        "en": "The submitted data is invalid.",
    },
    "NOT_FOUND": {
        "id": "Data yang dicari tidak ditemukan.",
        "en": "The requested item was not found.",
    },
    "INVALID_PORTION": {
        "id": "Berat porsi harus lebih dari 0 gram.",
        "en": "Portion weight must be greater than 0 grams.",
    },
    "UNKNOWN_FOOD": {
        "id": "Makanan tidak ditemukan di katalog.",
        "en": "The food is not in the catalog.",
    },
    "INVALID_PORTION_INDEX": {
        "id": "Porsi yang dipilih sudah tidak tersedia untuk makanan ini.",
        "en": "The selected portion is no longer available for this food.",
    },
    "INVALID_TARGET": {
        "id": "Target kalori harian harus lebih dari 0.",
        "en": "The daily calorie target must be greater than 0.",
    },
    "REPOSITORY_ERROR": {
        "id": "Gagal mengakses data. Silakan coba lagi.",
        "en": "Could not access data. Please try again.",
    },
    "CONFIGURATION_ERROR": {
        "id": "Terjadi kesalahan konfigurasi aplikasi.",
        "en": "The application is misconfigured.",
    },
    "INTERNAL_ERROR": {
        "id": "Terjadi kesalahan. Silakan coba lagi.",
        "en": "Something went wrong. Please try again.",
    },
}

_ALERTS: dict[AlertCode, tuple[str, dict[str, str]]] = {
    AlertCode.SALT_EXCESS: (
        "warning",
        {
            "id": "Asupan garam Anda melebihi batas harian yang direkomendasikan.",
            "en": "Your salt intake exceeds the recommended daily limit.",
        },
    ),
    AlertCode.SUGAR_EXCESS: (
        "warning",
        {
            "id": "Asupan gula Anda melebihi batas harian yang direkomendasikan.",
            "en": "Your sugar intake exceeds the recommended daily limit.",
        },
    ),
    AlertCode.FIBER_LOW: (
        "info",
        {
            "id": "Asupan serat Anda kurang dari yang direkomendasikan.",
            "en": "Your fiber intake is below the recommended amount.",
        },
    ),
    AlertCode.CALORIE_LOW: (
        "warning",
        {
            "id": "Asupan kalori Anda kurang dari target harian.",
            "en": "Your calorie intake is below your daily target.",
        },
    ),
    AlertCode.CALORIE_HIGH: (
        "warning",
        {
            "id": "Asupan kalori Anda melebihi target harian.",
            "en": "Your calorie intake is above your daily target.",
        },
    ),
}

_STATUS_TIPS: dict[NutritionStatus, dict[str, list[str]]] = {
    NutritionStatus.BELOW: {
        "id": [
            "Tambahkan porsi makanan secara bertahap.",
            "Pilih makanan padat nutrisi seperti kacang-kacangan.",
        ],
        "en": [
            "Increase your portions gradually.",
            "Choose nutrient-dense foods such as nuts and legumes.",
        ],
    },
    NutritionStatus.ABOVE: {
        "id": [
            "Kurangi porsi makanan secara bertahap.",
            "Pilih sayuran segar sebagai pengganti karbohidrat.",
        ],
        "en": [
            "Reduce your portions gradually.",
            "Swap some carbohydrates for fresh vegetables.",
        ],
    },
    NutritionStatus.ON_TARGET: {
        "id": [
            "Lanjutkan pola makan sehat Anda.",
            "Pastikan asupan air putih cukup.",
        ],
        "en": [
            "Keep up your healthy eating pattern.",
            "Make sure you drink enough water.",
        ],
    },
}

_FIBER_TIP = {
    "id": "Tambahkan sayuran dan buah untuk meningkatkan asupan serat.",
    "en": "Add vegetables and fruit to raise your fiber intake.",
}


@dataclass(frozen=True)
class LocalizedAlert:
    """An alert rendered for display."""

    code: AlertCode
    level: str
    message: str


def render_error(
    error: HealthyCoachingError, language: str = DEFAULT_LANGUAGE
) -> str:
    """Return user-facing text for an application error."""
    messages = _ERROR_MESSAGES.get(error.code, _ERROR_MESSAGES["INTERNAL_ERROR"])
    return _pick(messages, language)


def render_alert(
    code: AlertCode, language: str = DEFAULT_LANGUAGE
) -> LocalizedAlert:
    """Return the display level and text of an alert."""
    level, messages = _ALERTS[AlertCode(code)]
    return LocalizedAlert(
        code=AlertCode(code), level=level, message=_pick(messages, language)
    )


def coaching_tips(
    status: NutritionStatus,
    alerts: Iterable[AlertCode],
    language: str = DEFAULT_LANGUAGE,
) -> list[str]:
    """Return tips for the day's status, plus fiber advice when needed."""
    tips = list(_pick(_STATUS_TIPS[status], language))
    if AlertCode.FIBER_LOW in set(alerts):
        tips.append(_pick(_FIBER_TIP, language))
    return tips


def _pick(messages: dict[str, T], language: str) -> T:
    return messages.get(language, messages[DEFAULT_LANGUAGE])
