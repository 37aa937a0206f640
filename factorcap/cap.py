import hashlib
import logging
import secrets
import time
from dataclasses import dataclass
from typing import Tuple, Union

from .errors import ParseError
from .generator import Mode
from .work import generate_challenge, verify_answer


logger = logging.getLogger(__name__)


@dataclass
class Ticket:
    challenge_id: str
    token: str
    mode: Mode
    size: int
    answer_hash: str
    expires_at: float


class FactorCap:
    """Prime factoring challenge provider.

    - issue() returns a short-lived puzzle token; only a hash of the
      expected answer is kept
    - verify(ticket, answer) accepts the exact answer string, or any
      well-formed factor list whose product reproduces the token
    """

    def __init__(self, mode: Union[Mode, str] = Mode.QUADS, size: int = 64,
                 ttl_seconds: int = 60, max_token_length: int = 0):
        self._mode = Mode(mode)
        self._size = int(size)
        self._ttl = int(ttl_seconds)
        self._max_length = int(max_token_length) or None

    def issue(self) -> Ticket:
        token, answer = generate_challenge(self._mode, self._size,
                                           max_length=self._max_length)
        ticket = Ticket(
            challenge_id=secrets.token_hex(16),
            token=token,
            mode=self._mode,
            size=self._size,
            answer_hash=self._hash(answer),
            expires_at=time.time() + self._ttl,
        )
        logger.info("issued %s challenge %s (%d symbols)",
                    self._mode.value, ticket.challenge_id, len(token))
        return ticket

    @staticmethod
    def _hash(s: str) -> str:
        return hashlib.sha256(s.encode("utf-8")).hexdigest()

    def verify(self, ticket: Ticket, answer: str) -> Tuple[bool, str]:
        if time.time() > ticket.expires_at:
            return False, "Challenge expired"
        if secrets.compare_digest(self._hash(answer), ticket.answer_hash):
            return True, "ok"
        try:
            ok = verify_answer(ticket.token, answer, ticket.mode)
        except ParseError as e:
            logger.warning("malformed answer for %s: %s", ticket.challenge_id, e)
            return False, "Malformed factor list"
        if not ok:
            return False, "Incorrect factors"
        return True, "ok"
