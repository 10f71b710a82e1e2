# services/quotes.py

import random
from dataclasses import dataclass
from typing import Dict, List, Optional, Union

from models import Language


@dataclass(frozen=True)
class Quote:
    text: str
    author: str


MOTIVATIONAL_QUOTES: Dict[Language, List[Quote]] = {
    Language.FA: [
        Quote("ای برادر تو همه اندیشه‌ای، مابقی خود استخوان و ریشه‌ای", "مولانا"),
        Quote("توانا بود هر که دانا بود، ز دانش دل پیر برنا بود", "فردوسی"),
        Quote("به عمل کار برآید، به سخندانی نیست", "سعدی"),
        Quote("سفر هزار فرسنگی با یک قدم آغاز می‌شود.", "لائوتسه"),
        Quote("موفقیت مجموع تلاش‌های کوچکی است که هر روز تکرار می‌شوند.", "رابرت کالیر"),
    ],
    Language.EN: [
        Quote("The journey of a thousand miles begins with one step.", "Lao Tzu"),
        Quote("Success is the sum of small efforts, repeated day in and day out.", "Robert Collier"),
        Quote("We are what we repeatedly do. Excellence, then, is not an act, but a habit.", "Will Durant"),
        Quote("It does not matter how slowly you go as long as you do not stop.", "Confucius"),
        Quote("What you seek is seeking you.", "Rumi"),
    ],
}


def pick_quote(language: Union[Language, str], rng: Optional[random.Random] = None) -> Quote:
    """Random quote for the language; pass a seeded `rng` for repeatable picks"""
    quotes = MOTIVATIONAL_QUOTES[Language(language)]
    return (rng or random).choice(quotes)
