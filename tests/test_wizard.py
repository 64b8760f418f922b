"""Tests for the selection wizard state machine."""

from __future__ import annotations

import asyncio

import pytest

from moodstylist.services.models import Gender, Mood, Outfit
from moodstylist.wizard.state_machine import (
    FAILED_MESSAGE,
    READY_MESSAGE,
    GenerationInProgressError,
    SelectionWizard,
    WizardStateError,
    WizardStep,
)

OUTFITS = [
    Outfit(title=f"Look {index}", description="Blazer and jeans", tips="Add a belt")
    for index in range(1, 4)
]


class RecordingSource:
    """Outfit source that records calls and can be held open."""

    def __init__(self, *, error: Exception | None = None, gate: asyncio.Event | None = None) -> None:
        self.calls: list[tuple[Gender, Mood]] = []
        self.error = error
        self._gate = gate

    async def generate(self, gender: Gender, mood: Mood) -> list[Outfit]:
        self.calls.append((gender, mood))
        if self._gate is not None:
            await self._gate.wait()
        if self.error is not None:
            raise self.error
        return list(OUTFITS)


class RecordingNotifier:
    def __init__(self) -> None:
        self.successes: list[str] = []
        self.errors: list[str] = []

    async def success(self, text: str) -> None:
        self.successes.append(text)

    async def error(self, text: str) -> None:
        self.errors.append(text)


def _wizard(source: RecordingSource, notifier: RecordingNotifier | None = None, delay: float = 0) -> SelectionWizard:
    return SelectionWizard(source, notifier or RecordingNotifier(), transition_delay=delay)


@pytest.mark.asyncio
async def test_mood_then_gender_generates_once() -> None:
    source = RecordingSource()
    notifier = RecordingNotifier()
    wizard = _wizard(source, notifier)

    await wizard.select_mood(Mood.EDGY)
    assert wizard.step is WizardStep.GENDER

    outfits = await wizard.select_gender(Gender.FEMALE)

    assert source.calls == [(Gender.FEMALE, Mood.EDGY)]
    assert outfits == OUTFITS
    assert wizard.outfits == OUTFITS
    assert wizard.step is WizardStep.RESULTS
    assert wizard.loading is False
    assert notifier.successes == [READY_MESSAGE]


@pytest.mark.asyncio
async def test_reset_after_generation_clears_everything() -> None:
    wizard = _wizard(RecordingSource())
    await wizard.select_mood(Mood.CASUAL)
    await wizard.select_gender(Gender.MALE)

    wizard.reset()

    assert wizard.step is WizardStep.MOOD
    assert wizard.mood is None
    assert wizard.gender is None
    assert wizard.outfits == []
    assert wizard.loading is False


@pytest.mark.asyncio
async def test_failure_rolls_back_to_gender_step() -> None:
    notifier = RecordingNotifier()
    wizard = _wizard(RecordingSource(error=RuntimeError("boom")), notifier)
    await wizard.select_mood(Mood.PROFESSIONAL)

    outfits = await wizard.select_gender(Gender.UNISEX)

    assert outfits == []
    assert wizard.step is WizardStep.GENDER
    assert wizard.mood is Mood.PROFESSIONAL
    assert wizard.loading is False
    assert notifier.errors == [FAILED_MESSAGE]
    assert notifier.successes == []


@pytest.mark.asyncio
async def test_retry_after_failure_reuses_mood() -> None:
    source = RecordingSource(error=RuntimeError("boom"))
    wizard = _wizard(source)
    await wizard.select_mood(Mood.ROMANTIC)
    await wizard.select_gender(Gender.FEMALE)

    source.error = None
    outfits = await wizard.select_gender(Gender.MALE)

    assert outfits == OUTFITS
    assert source.calls == [(Gender.FEMALE, Mood.ROMANTIC), (Gender.MALE, Mood.ROMANTIC)]


@pytest.mark.asyncio
async def test_loading_flag_set_while_in_flight() -> None:
    gate = asyncio.Event()
    wizard = _wizard(RecordingSource(gate=gate))
    await wizard.select_mood(Mood.CONFIDENT)

    task = asyncio.create_task(wizard.select_gender(Gender.MALE))
    await asyncio.sleep(0)
    assert wizard.loading is True
    assert wizard.outfits == []

    with pytest.raises(GenerationInProgressError):
        await wizard.generate(Gender.MALE, Mood.CONFIDENT)

    gate.set()
    await task
    assert wizard.loading is False


@pytest.mark.asyncio
async def test_stale_result_after_reset_is_ignored() -> None:
    gate = asyncio.Event()
    notifier = RecordingNotifier()
    wizard = _wizard(RecordingSource(gate=gate), notifier)
    await wizard.select_mood(Mood.RELAXED)

    task = asyncio.create_task(wizard.select_gender(Gender.UNISEX))
    await asyncio.sleep(0)
    wizard.reset()
    gate.set()
    outfits = await task

    assert outfits == []
    assert wizard.outfits == []
    assert wizard.step is WizardStep.MOOD
    assert wizard.loading is False
    assert notifier.successes == []


@pytest.mark.asyncio
async def test_stale_failure_after_reset_is_ignored() -> None:
    gate = asyncio.Event()
    notifier = RecordingNotifier()
    wizard = _wizard(RecordingSource(error=RuntimeError("late"), gate=gate), notifier)
    await wizard.select_mood(Mood.EDGY)

    task = asyncio.create_task(wizard.select_gender(Gender.MALE))
    await asyncio.sleep(0)
    wizard.reset()
    gate.set()
    await task

    assert wizard.step is WizardStep.MOOD
    assert notifier.errors == []


@pytest.mark.asyncio
async def test_reset_during_mood_delay_stays_on_mood_step() -> None:
    wizard = _wizard(RecordingSource(), delay=0.05)

    task = asyncio.create_task(wizard.select_mood(Mood.CONFIDENT))
    await asyncio.sleep(0)
    wizard.reset()
    await task

    assert wizard.step is WizardStep.MOOD
    assert wizard.mood is None


@pytest.mark.asyncio
async def test_gender_before_mood_is_rejected() -> None:
    source = RecordingSource()
    wizard = _wizard(source)

    with pytest.raises(WizardStateError):
        await wizard.select_gender(Gender.MALE)

    assert source.calls == []


@pytest.mark.asyncio
async def test_mood_cannot_change_after_generation_started() -> None:
    wizard = _wizard(RecordingSource())
    await wizard.select_mood(Mood.CASUAL)
    await wizard.select_gender(Gender.FEMALE)

    with pytest.raises(WizardStateError):
        await wizard.select_mood(Mood.EDGY)

    assert wizard.mood is Mood.CASUAL
