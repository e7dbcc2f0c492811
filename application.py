import os
from dataclasses import dataclass, field

from flask import Flask, jsonify, request

from customer_health.services import (
    CONTRACT_VERSION,
    STATUS_CALCULATION_FAILED,
    STATUS_INVALID_INPUT,
    build_score_envelope,
    evaluate_customer,
)


@dataclass
class ServerConfig:
    host: str = field(default_factory=lambda: os.getenv("CUSTOMER_HEALTH_HOST", "0.0.0.0"))
    port: int = field(default_factory=lambda: int(os.getenv("CUSTOMER_HEALTH_PORT", "5001")))


_STATUS_CODES = {
    STATUS_INVALID_INPUT: 400,
    STATUS_CALCULATION_FAILED: 500,
}


application = Flask(__name__)
app = application


## Liveness probe
@app.route("/health", methods=["GET"])
def health():
    return jsonify({"status": "ok", "contract_version": CONTRACT_VERSION})


## Score one customer record
@app.route("/api/health-score", methods=["POST"])
def score_customer():
    body = request.get_json(silent=True)
    if not isinstance(body, dict):
        return (
            jsonify(
                {
                    "contract_version": CONTRACT_VERSION,
                    "status": "error",
                    "message": "Request body must be a JSON object",
                }
            ),
            400,
        )

    outcome = evaluate_customer(body)
    return jsonify(build_score_envelope(outcome)), _STATUS_CODES.get(outcome.status, 200)


if __name__ == "__main__":
    config = ServerConfig()
    app.run(host=config.host, port=config.port, debug=True)
