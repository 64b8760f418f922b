"""Handlers for the mood and style steps of the wizard."""

from __future__ import annotations

from aiogram import F, Router
from aiogram.types import Message, ReplyKeyboardRemove

from moodstylist.bot_service.context import BotContext
from moodstylist.bot_service.filters import StepFilter
from moodstylist.bot_service.keyboards import GENDER_KEYBOARD, MOOD_KEYBOARD
from moodstylist.bot_service.rendering import send_outfits
from moodstylist.services.models import Gender, Mood
from moodstylist.wizard.state_machine import SelectionWizard, WizardStateError, WizardStep

BUSY_TEXT = "Still creating your looks, hang on."
RESTART_TEXT = "Send /reset to start a new look."


def setup(router: Router, context: BotContext) -> None:
    """Register handlers that drive the wizard forward."""

    @router.message(StepFilter(context, WizardStep.MOOD), F.text)
    async def handle_mood(message: Message, wizard: SelectionWizard) -> None:
        mood = Mood.from_label(message.text or "")
        if mood is None:
            await message.answer("Please pick a mood from the keyboard.", reply_markup=MOOD_KEYBOARD)
            return
        try:
            await wizard.select_mood(mood)
        except WizardStateError:
            await _answer_out_of_step(message, wizard)
            return
        if wizard.step is WizardStep.GENDER:
            await message.answer("Select your style.", reply_markup=GENDER_KEYBOARD)

    @router.message(StepFilter(context, WizardStep.GENDER), F.text)
    async def handle_gender(message: Message, wizard: SelectionWizard) -> None:
        gender = Gender.from_label(message.text or "")
        if gender is None:
            await message.answer("Please pick a style from the keyboard.", reply_markup=GENDER_KEYBOARD)
            return
        if wizard.loading:
            await message.answer(BUSY_TEXT)
            return

        await message.answer("Creating your looks...", reply_markup=ReplyKeyboardRemove())
        # Other updates from this chat may have moved the wizard on during the await above.
        if wizard.loading or wizard.step is not WizardStep.GENDER:
            await _answer_out_of_step(message, wizard)
            return
        try:
            outfits = await wizard.select_gender(gender)
        except WizardStateError:
            await _answer_out_of_step(message, wizard)
            return

        if outfits:
            await send_outfits(message, outfits)
            await message.answer(RESTART_TEXT)
        elif wizard.step is WizardStep.GENDER:
            await message.answer("Pick a style to try again.", reply_markup=GENDER_KEYBOARD)

    @router.message(StepFilter(context, WizardStep.RESULTS), F.text)
    async def handle_results(message: Message, wizard: SelectionWizard) -> None:
        if wizard.loading:
            await message.answer(BUSY_TEXT)
            return
        await message.answer(RESTART_TEXT)


async def _answer_out_of_step(message: Message, wizard: SelectionWizard) -> None:
    if wizard.loading:
        await message.answer(BUSY_TEXT)
    elif wizard.step is WizardStep.MOOD:
        await message.answer("Choose your mood.", reply_markup=MOOD_KEYBOARD)
    elif wizard.step is WizardStep.GENDER:
        await message.answer("Select your style.", reply_markup=GENDER_KEYBOARD)
    else:
        await message.answer(RESTART_TEXT)
