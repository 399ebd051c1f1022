"""Keyword intent classification over the HRW knowledge base.

Rules are evaluated in list order and the first match wins, so a question
such as "when should I spray" resolves to ``application`` (rule 4) before
``timing`` (rule 6) is ever considered.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import NamedTuple

from agriquant.models.enums import TopicEnum
from agriquant.services.knowledge_base import lookup_answer


class IntentRule(NamedTuple):
	predicate: Callable[[str], bool]
	topic: TopicEnum


def _any_of(*tokens: str) -> Callable[[str], bool]:
	return lambda normalized: any(token in normalized for token in tokens)


def _all_of(*tokens: str) -> Callable[[str], bool]:
	return lambda normalized: all(token in normalized for token in tokens)


INTENT_RULES: tuple[IntentRule, ...] = (
	IntentRule(_all_of("what", "hrw"), TopicEnum.what_is_hrw),
	IntentRule(_any_of("how", "work"), TopicEnum.mechanism),
	IntentRule(_any_of("benefit", "why"), TopicEnum.benefits),
	IntentRule(_any_of("spray", "apply"), TopicEnum.application),
	IntentRule(_any_of("ppm", "concentration"), TopicEnum.concentration),
	IntentRule(_any_of("when", "time"), TopicEnum.timing),
	IntentRule(_any_of("equipment", "machine"), TopicEnum.equipment),
	IntentRule(_any_of("crop", "rice", "wheat"), TopicEnum.crops),
	IntentRule(_any_of("cost", "price"), TopicEnum.cost),
	IntentRule(_any_of("safe", "toxic"), TopicEnum.safety),
	IntentRule(_any_of("store", "storage"), TopicEnum.storage),
	IntentRule(_any_of("research", "science"), TopicEnum.science),
	IntentRule(_any_of("fertilizer", "nutrient"), TopicEnum.fertilizer),
	IntentRule(_any_of("drought", "stress"), TopicEnum.drought),
	IntentRule(_any_of("organic"), TopicEnum.organic),
)


def classify(question: str) -> TopicEnum:
	normalized = question.lower()
	for rule in INTENT_RULES:
		if rule.predicate(normalized):
			return rule.topic
	return TopicEnum.fallback


def answer(question: str) -> tuple[TopicEnum, str]:
	topic = classify(question)
	return topic, lookup_answer(topic)
