import logging
import time
from typing import Dict

from flask import Flask, jsonify, request

from .cap import FactorCap, Ticket
from .config import Settings


logger = logging.getLogger(__name__)

SETTINGS = Settings.from_env()

app = Flask(__name__)

# In-memory store: challenge_id -> Ticket
ACTIVE_CHALLENGES: Dict[str, Ticket] = {}

FACTOR_CAP = FactorCap(
    mode=SETTINGS.mode,
    size=SETTINGS.size,
    ttl_seconds=SETTINGS.ttl_seconds,
    max_token_length=SETTINGS.max_token_length,
)


def _drop_expired(now: float) -> None:
    expired = [k for k, t in list(ACTIVE_CHALLENGES.items()) if t.expires_at < now]
    for challenge_id in expired:
        ACTIVE_CHALLENGES.pop(challenge_id, None)


@app.route("/api/challenge", methods=["GET"])
def api_challenge():
    _drop_expired(time.time())
    ticket = FACTOR_CAP.issue()
    ACTIVE_CHALLENGES[ticket.challenge_id] = ticket
    return jsonify({
        "challenge_id": ticket.challenge_id,
        "token": ticket.token,
        "mode": ticket.mode.value,
        "size": ticket.size,
        "algo": "prime-factors",
    })


@app.route("/api/verify", methods=["POST"])
def api_verify():
    _drop_expired(time.time())
    data = request.get_json(silent=True) or {}
    challenge_id = data.get("challenge_id")
    factors = data.get("factors")

    # One attempt per challenge
    ticket = ACTIVE_CHALLENGES.pop(challenge_id, None) if challenge_id else None
    if ticket is None:
        return jsonify({"success": False, "error": "Invalid or expired challenge."}), 400
    if not isinstance(factors, str) or not factors.strip():
        return jsonify({"success": False, "error": "Missing factors."}), 400

    ok, err = FACTOR_CAP.verify(ticket, factors)
    logger.info("verification of %s: %s", challenge_id, err)
    if not ok:
        return jsonify({"success": False, "error": err}), 400
    return jsonify({"success": True})


@app.route("/api/health", methods=["GET"])
def api_health():
    return jsonify({"ok": True, "active": len(ACTIVE_CHALLENGES)})


def main():
    logging.basicConfig(
        level=SETTINGS.log_level,
        format="%(asctime)s %(levelname)-8s [%(name)s] %(message)s",
    )
    logger.info("serving %s challenges of size %d", SETTINGS.mode.value, SETTINGS.size)
    app.run(host=SETTINGS.host, port=SETTINGS.port, debug=False)


if __name__ == "__main__":
    main()
