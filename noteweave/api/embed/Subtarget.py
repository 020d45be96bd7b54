"""Subtarget models for heading (``#``) and block (``^``) qualifiers."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Heading:
    text: str

    def suffix(self) -> str:
        return f"#{self.text}"


@dataclass(frozen=True)
class Block:
    text: str

    def suffix(self) -> str:
        return f"^{self.text}"


Subtarget = Heading | Block
