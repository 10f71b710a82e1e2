# ui/i18n.py

from typing import Dict, Union

from models import Language

TRANSLATIONS: Dict[Language, Dict[str, str]] = {
    Language.EN: {
        # Tabs
        "menu": "Menu",
        "assistant": "Assistant",
        "calendar": "Calendar",
        "about": "About",
        "settings": "Settings",

        # Menu
        "daily_wisdom": "Daily wisdom",
        "books": "Books",
        "tasks": "Tasks",
        "routine": "Routine",
        "goals": "Goals",
        "reading": "reading",
        "finished": "finished",
        "pending": "pending",
        "reached": "reached",
        "back": "Back",
        "cancel": "Cancel",

        # Collections
        "add_book": "Add book",
        "add_task": "Add task",
        "add_routine": "Add routine",
        "add_goal": "Add goal",
        "no_books": "No books yet. Add the first one!",
        "no_tasks": "Your task list is empty.",
        "no_routines": "No routines yet.",
        "no_goals": "No goals yet. What do you want to reach?",
        "enter_book_title": "Send the book title:",
        "enter_book_author": "Send the author's name:",
        "enter_task": "Send the task text:",
        "enter_routine": "Send the routine text:",
        "enter_goal": "Send your goal:",
        "choose_goal_type": "Choose the goal type:",
        "choose_book_status": "Are you reading it or already finished?",
        "short_term": "Short-term",
        "long_term": "Long-term",
        "added": "Added ✅",
        "empty_input": "The text can't be empty. Try again:",
        "cancelled": "Cancelled.",

        # Assistant
        "help_prompt": "How can I help you?",
        "ask_placeholder": "Ask something...",
        "assistant_unavailable": "The assistant is unavailable right now. Please try again later.",
        "assistant_busy": "Please wait for the previous answer.",
        "you": "You",
        "use_buttons": "Use the buttons below, or open the 🤖 Assistant tab to chat.",

        # Settings
        "language": "Language",
        "theme": "Theme",
        "light": "Light",
        "dark": "Dark",
        "notifications": "Notifications",
        "enabled": "On",
        "disabled": "Off",
        "reset": "Reset all data",
        "reset_confirm": "Are you sure? All your data will be deleted.",
        "yes": "Yes",
        "no": "No",
        "reset_done": "All data has been cleared.",

        # Calendar
        "prev_month": "Previous",
        "next_month": "Next",
        "today": "Today",

        # About
        "about_text": "Your ultimate companion for personal growth and excellence.",

        # Misc
        "generic_error": "⚠️ Something went wrong. Please try again.",
        "export_caption": "Your Emo Improvement data",
        "help": (
            "/start - open the menu\n"
            "/assistant - chat with the assistant\n"
            "/calendar - calendar\n"
            "/settings - settings\n"
            "/about - about the app\n"
            "/export - download your data\n"
            "/cancel - cancel the current input"
        ),
    },
    Language.FA: {
        # Tabs
        "menu": "منو",
        "assistant": "دستیار",
        "calendar": "تقویم",
        "about": "درباره",
        "settings": "تنظیمات",

        # Menu
        "daily_wisdom": "حکمت روز",
        "books": "کتاب‌ها",
        "tasks": "کارها",
        "routine": "روتین",
        "goals": "اهداف",
        "reading": "در حال مطالعه",
        "finished": "تمام شده",
        "pending": "در انتظار",
        "reached": "محقق شده",
        "back": "بازگشت",
        "cancel": "لغو",

        # Collections
        "add_book": "افزودن کتاب",
        "add_task": "افزودن کار",
        "add_routine": "افزودن روتین",
        "add_goal": "افزودن هدف",
        "no_books": "هنوز کتابی اضافه نکرده‌ای.",
        "no_tasks": "لیست کارهایت خالی است.",
        "no_routines": "هنوز روتینی تعریف نکرده‌ای.",
        "no_goals": "هنوز هدفی ثبت نشده.",
        "enter_book_title": "عنوان کتاب را بفرست:",
        "enter_book_author": "نام نویسنده را بفرست:",
        "enter_task": "متن کار را بفرست:",
        "enter_routine": "متن روتین را بفرست:",
        "enter_goal": "هدفت را بفرست:",
        "choose_goal_type": "نوع هدف را انتخاب کن:",
        "choose_book_status": "در حال خواندنش هستی یا تمامش کرده‌ای؟",
        "short_term": "کوتاه‌مدت",
        "long_term": "بلندمدت",
        "added": "اضافه شد ✅",
        "empty_input": "متن نمی‌تواند خالی باشد. دوباره بفرست:",
        "cancelled": "لغو شد.",

        # Assistant
        "help_prompt": "چطور می‌تونم کمکت کنم؟",
        "ask_placeholder": "چیزی بپرس...",
        "assistant_unavailable": "دستیار در حال حاضر در دسترس نیست. بعداً دوباره امتحان کن.",
        "assistant_busy": "لطفاً صبر کن تا پاسخ قبلی برسد.",
        "you": "تو",
        "use_buttons": "از دکمه‌های زیر استفاده کن یا برای گفتگو به تب 🤖 دستیار برو.",

        # Settings
        "language": "زبان",
        "theme": "پوسته",
        "light": "روشن",
        "dark": "تیره",
        "notifications": "اعلان‌ها",
        "enabled": "فعال",
        "disabled": "غیرفعال",
        "reset": "پاک کردن همه داده‌ها",
        "reset_confirm": "مطمئنی؟ همه داده‌هایت پاک می‌شود.",
        "yes": "بله",
        "no": "خیر",
        "reset_done": "همه داده‌ها پاک شد.",

        # Calendar
        "prev_month": "ماه قبل",
        "next_month": "ماه بعد",
        "today": "امروز",

        # About
        "about_text": "این اپلیکیشن همراه شما در مسیر رشد و تعالی است.",

        # Misc
        "generic_error": "⚠️ خطایی رخ داد. لطفاً دوباره تلاش کن.",
        "export_caption": "داده‌های تو در Emo Improvement",
        "help": (
            "/start - باز کردن منو\n"
            "/assistant - گفتگو با دستیار\n"
            "/calendar - تقویم\n"
            "/settings - تنظیمات\n"
            "/about - درباره اپلیکیشن\n"
            "/export - دریافت داده‌ها\n"
            "/cancel - لغو ورودی فعلی"
        ),
    },
}

LANGUAGE_NAMES = {
    Language.FA: "فارسی",
    Language.EN: "English",
}


def get_translations(language: Union[Language, str]) -> Dict[str, str]:
    return TRANSLATIONS[Language(language)]
