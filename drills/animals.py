"""Polymorphic animals and a guarded way of making them talk."""

from __future__ import annotations

import sys
from abc import ABC, abstractmethod

FORBIDDEN_MESSAGE = "hmm, looks like you aren't allowed to create this object!!"


class Animal(ABC):
    """Something that can speak and describe its legs."""

    @abstractmethod
    def speak(self) -> str:
        """Return what the animal says."""

    @abstractmethod
    def legs(self) -> str:
        """Return a remark about the animal's legs."""


class Human(Animal):
    def speak(self) -> str:
        return "Human speak speak!!"

    def legs(self) -> str:
        return "Humans are bipedal..."


class Duck(Animal):
    def speak(self) -> str:
        return "Duck speak speak!!"

    def legs(self) -> str:
        return "Ducks are bipedal..."


class ForbiddenDuck(Duck):
    """A duck that refuses to be constructed."""

    def __init__(self) -> None:
        raise RuntimeError(FORBIDDEN_MESSAGE)

    @staticmethod
    def factory() -> ForbiddenDuck | None:
        """Try to build one; report the failure on stderr and return None."""
        try:
            return ForbiddenDuck()
        except RuntimeError as exc:
            print(exc, file=sys.stderr)
        return None


def trigger(animal: Animal | None) -> list[str]:
    """Return the animal's speech and leg remark, in that order."""
    if animal is None:
        raise ValueError("trigger called without an animal")
    return [animal.speak(), animal.legs()]