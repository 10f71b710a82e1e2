"""
Calendar tab: month grid data
"""

import calendar
from dataclasses import dataclass
from datetime import date
from typing import List, Optional, Tuple, Union

from models import Language

MONTH_NAMES = {
    Language.EN: [
        "January", "February", "March", "April", "May", "June",
        "July", "August", "September", "October", "November", "December"
    ],
    Language.FA: [
        "ژانویه", "فوریه", "مارس", "آوریل", "مه", "ژوئن",
        "ژوئیه", "اوت", "سپتامبر", "اکتبر", "نوامبر", "دسامبر"
    ],
}

# Indexed by date.weekday(): Monday == 0
WEEKDAY_NAMES = {
    Language.EN: ["Mo", "Tu", "We", "Th", "Fr", "Sa", "Su"],
    Language.FA: ["د", "س", "چ", "پ", "ج", "ش", "ی"],
}

FIRST_WEEKDAY = {
    Language.EN: calendar.MONDAY,
    Language.FA: calendar.SATURDAY,
}


@dataclass(frozen=True)
class MonthView:
    year: int
    month: int
    title: str
    weekday_header: List[str]
    weeks: List[List[int]]  # 0 marks a day outside the month
    today: Optional[int]    # day of month when the month is the current one


def shift_month(year: int, month: int, delta: int) -> Tuple[int, int]:
    index = year * 12 + (month - 1) + delta
    return index // 12, index % 12 + 1


def month_view(year: int, month: int, language: Union[Language, str],
               today: Optional[date] = None) -> MonthView:
    language = Language(language)
    today = today or date.today()
    first_weekday = FIRST_WEEKDAY[language]

    cal = calendar.Calendar(firstweekday=first_weekday)
    weeks = cal.monthdayscalendar(year, month)
    names = WEEKDAY_NAMES[language]
    header = [names[(first_weekday + i) % 7] for i in range(7)]

    return MonthView(
        year=year,
        month=month,
        title=f"{MONTH_NAMES[language][month - 1]} {year}",
        weekday_header=header,
        weeks=weeks,
        today=today.day if (today.year, today.month) == (year, month) else None,
    )
