from .cap import FactorCap, Ticket
from .errors import (
    CapacityExceeded, FactorCapError, InvalidPadding, InvalidSymbol, ParseError,
)
from .factors import FactorMultiset
from .generator import Challenge, ChallengeGenerator, Mode
from .work import generate_challenge, verify_answer

__all__ = [
    "CapacityExceeded",
    "Challenge",
    "ChallengeGenerator",
    "FactorCap",
    "FactorCapError",
    "FactorMultiset",
    "InvalidPadding",
    "InvalidSymbol",
    "Mode",
    "ParseError",
    "Ticket",
    "generate_challenge",
    "verify_answer",
]
