"""Reply keyboards mirroring the wizard's selection cards."""

from __future__ import annotations

from aiogram.types import KeyboardButton, ReplyKeyboardMarkup

from moodstylist.services.models import Gender, Mood

MOOD_KEYBOARD = ReplyKeyboardMarkup(
    keyboard=[
        [KeyboardButton(text=Mood.CONFIDENT.label), KeyboardButton(text=Mood.RELAXED.label)],
        [KeyboardButton(text=Mood.ROMANTIC.label), KeyboardButton(text=Mood.EDGY.label)],
        [KeyboardButton(text=Mood.PROFESSIONAL.label), KeyboardButton(text=Mood.CASUAL.label)],
    ],
    resize_keyboard=True,
    one_time_keyboard=True,
    input_field_placeholder="Choose your mood",
)

GENDER_KEYBOARD = ReplyKeyboardMarkup(
    keyboard=[[KeyboardButton(text=gender.label) for gender in Gender]],
    resize_keyboard=True,
    one_time_keyboard=True,
    input_field_placeholder="Select your style",
)
