"""
Four-step interview configuration form: domain, difficulty, topics, format.
"""
from enum import IntEnum
from typing import List, Optional

from prepmind.constants import DIFFICULTY_LEVELS, DOMAINS, INTERVIEW_FORMATS
from prepmind.models.schemas import DomainOption, InterviewConfig

DEFAULT_DURATION_MINUTES = 30


class WizardStep(IntEnum):
    DOMAIN = 1
    DIFFICULTY = 2
    TOPICS = 3
    FORMAT = 4


class ConfigWizard:
    def __init__(self, domains: Optional[List[DomainOption]] = None):
        self.domains = domains if domains is not None else DOMAINS
        self.step = WizardStep.DOMAIN
        self.domain_id = ""
        self.difficulty = "beginner"
        self.topics: List[str] = []
        self.format = "verbal"

    @property
    def domain(self) -> Optional[DomainOption]:
        return next((d for d in self.domains if d.id == self.domain_id), None)

    def select_domain(self, domain_id: str):
        if not any(d.id == domain_id for d in self.domains):
            raise ValueError(f"Unknown domain: {domain_id}")
        if domain_id != self.domain_id:
            # topics belong to a domain
            self.topics = []
        self.domain_id = domain_id

    def select_difficulty(self, difficulty: str):
        if difficulty not in {d.id for d in DIFFICULTY_LEVELS}:
            raise ValueError(f"Unknown difficulty: {difficulty}")
        self.difficulty = difficulty

    def toggle_topic(self, topic: str):
        if self.domain is None or topic not in self.domain.topics:
            raise ValueError(f"Topic {topic!r} is not offered for this domain")
        if topic in self.topics:
            self.topics = [t for t in self.topics if t != topic]
        else:
            self.topics = self.topics + [topic]

    def select_format(self, interview_format: str):
        if interview_format not in {f.id for f in INTERVIEW_FORMATS}:
            raise ValueError(f"Unknown format: {interview_format}")
        self.format = interview_format

    def can_proceed(self) -> bool:
        if self.step == WizardStep.DOMAIN:
            return self.domain is not None
        if self.step == WizardStep.DIFFICULTY:
            return bool(self.difficulty)
        if self.step == WizardStep.TOPICS:
            return len(self.topics) > 0
        return bool(self.format)

    def next_step(self) -> bool:
        """Advance if the current step is complete. Returns whether the step changed."""
        if self.step == WizardStep.FORMAT or not self.can_proceed():
            return False
        self.step = WizardStep(self.step + 1)
        return True

    def previous_step(self) -> bool:
        if self.step == WizardStep.DOMAIN:
            return False
        self.step = WizardStep(self.step - 1)
        return True

    def build(self) -> InterviewConfig:
        if self.step != WizardStep.FORMAT or not self.can_proceed():
            raise ValueError("Configuration is not complete")
        return InterviewConfig(
            domain=self.domain.name,
            difficulty=self.difficulty,
            topics=list(self.topics),
            format=self.format,
            interaction_mode="text" if self.format == "verbal" else None,
            duration=DEFAULT_DURATION_MINUTES,
        )
